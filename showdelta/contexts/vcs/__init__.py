"""
VCS Context

Responsibilities:
- Detects which version-control system manages the working directory
- Resolves the repository root
- Exports revision snapshots into the temporary workspace
- Resolves short revision identifiers for output naming

Owns: git and Mercurial command-line interaction
Never: Modifies the repository itself
"""

from showdelta.contexts.vcs.backends import (
    Backend,
    GitBackend,
    MercurialBackend,
    detect_backend,
)

__all__ = ["Backend", "GitBackend", "MercurialBackend", "detect_backend"]
