"""Project path resolution.

Resolves the project directory and its processors.yaml. Uses environment
variables when available, falls back to conventional defaults.

Environment variables:
    APTWIRE_PROJECT_DIR: project root (default: current directory)
    APTWIRE_CONFIG: config file (default: <project>/processors.yaml)
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "processors.yaml"


def project_root() -> Path:
    """Return the project root directory."""
    return Path(os.environ.get("APTWIRE_PROJECT_DIR", os.getcwd()))


def config_path(project_dir: Path | str | None = None) -> Path:
    """Return the path to processors.yaml."""
    env = os.environ.get("APTWIRE_CONFIG")
    if env:
        return Path(env)
    root = Path(project_dir) if project_dir else project_root()
    return root / CONFIG_FILENAME


def idea_compiler_xml(project_dir: Path) -> Path:
    """Return the directory-based IntelliJ compiler settings file."""
    return project_dir / ".idea" / "compiler.xml"
