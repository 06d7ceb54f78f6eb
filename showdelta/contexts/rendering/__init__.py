"""
Rendering Context

Responsibilities:
- Runs the document's build command inside the annotated snapshot
- Hands control to an interactive shell when the build fails
- Copies the built document to its final location

Owns: Build invocation, output naming and collection
Never: Modifies LaTeX sources
"""

from showdelta.contexts.rendering.builder import BuildResult, open_recovery_shell, run_build
from showdelta.contexts.rendering.output import collect_output, default_output_path

__all__ = [
    "BuildResult",
    "collect_output",
    "default_output_path",
    "open_recovery_shell",
    "run_build",
]
