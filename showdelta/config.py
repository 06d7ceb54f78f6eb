"""
Configuration for delta runs.

Defaults come from environment variables (optionally loaded from a .env file)
and can be overridden per repository by a .showdelta.yaml file at its root.
Command-line flags take precedence over both.

Example .showdelta.yaml:

    build_cmd: latexmk -pdf paper.tex
    latexdiff:
      options:
        - --type=CFONT
    target:
      variable: PAPER
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

load_dotenv()

CONFIG_FILENAME = ".showdelta.yaml"

# Options handed to every latexdiff invocation
LATEXDIFF_OPTIONS = [
    r"--config=PICTUREENV=(?:picture|author|DIFnomarkup)[\w\d*@]*",
    "--exclude-textcmd=section,author",
]

PREAMBLE_SENTINEL = "DIF PREAMBLE EXTENSION ADDED BY LATEXDIFF"
PREAMBLE_FILTER = "Preamble commands:"


def default_settings() -> Dict[str, Any]:
    """Built-in settings, with environment overrides applied."""
    return {
        "build_cmd": os.getenv("SHOWDELTA_BUILD_CMD", "make"),
        "shell": os.getenv("SHELL") or "bash",
        "latexdiff": {
            "executable": os.getenv("LATEXDIFF", "latexdiff"),
            "options": list(LATEXDIFF_OPTIONS),
            "preamble_sentinel": PREAMBLE_SENTINEL,
            "preamble_filter": PREAMBLE_FILTER,
        },
        "target": {
            "makefile": "Makefile",
            "variable": "TARGET",
            "default_extension": "pdf",
        },
        "sources": {"pattern": "*.tex"},
        "workspace": {
            "prefix": "showdelta.",
            "dir": os.getenv("SHOWDELTA_TMPDIR"),
        },
    }


def load_config(repo_root: Optional[Path] = None, config_path: Optional[Path] = None) -> DictConfig:
    """
    Load settings for a repository.

    Args:
        repo_root: Repository root; its .showdelta.yaml is merged if present
        config_path: Explicit config file (takes precedence over repo_root lookup)

    Returns:
        Merged OmegaConf config
    """
    config = OmegaConf.create(default_settings())

    if config_path is None and repo_root is not None:
        candidate = Path(repo_root) / CONFIG_FILENAME
        if candidate.is_file():
            config_path = candidate

    if config_path is not None:
        config = OmegaConf.merge(config, OmegaConf.load(config_path))

    return config
