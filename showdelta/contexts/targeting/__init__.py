"""
Targeting Context

Responsibilities:
- Infers the document's build output name from the Makefile
- Derives the main .tex source and the output extension from a target name

Owns: Target descriptor
Never: Runs the build
"""

from showdelta.contexts.targeting.target import Target, infer_target

__all__ = ["Target", "infer_target"]
