"""
Shared utilities for showdelta.

Common functionality used across contexts:
- Logger setup with provenance
- External command execution
- Temporary workspace management
- Interactive prompts
"""

from showdelta.utils.commands import run_tool
from showdelta.utils.prompts import confirm
from showdelta.utils.workspace import Workspace, temporary_workspace

__all__ = ["Workspace", "confirm", "run_tool", "temporary_workspace"]
