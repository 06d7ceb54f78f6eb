"""
Diffing Context

Responsibilities:
- Finds the LaTeX sources of the "to" snapshot
- Asks the operator which sources to annotate
- Runs latexdiff per file and injects the latexdiff preamble once

Owns: latexdiff invocation
Never: Builds the document
"""

from showdelta.contexts.diffing.latexdiff import (
    LatexDiff,
    diff_sources,
    find_sources,
    patch_preamble,
)

__all__ = ["LatexDiff", "diff_sources", "find_sources", "patch_preamble"]
