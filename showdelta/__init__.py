"""
showdelta - render the LaTeX differences between two revisions of a paper

Exports two revisions of a LaTeX document repository, runs latexdiff over the
matching .tex files, builds the annotated document and collects the PDF.

Architecture:
- VCS Context: Repository detection and revision export (git, Mercurial)
- Targeting Context: Build target discovery from the Makefile
- Diffing Context: Per-file latexdiff and preamble injection
- Rendering Context: Document build, recovery shell and output collection
"""

__version__ = "0.1.0"
