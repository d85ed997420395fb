"""
Path Helpers

Resolves dictionary and snapshot locations against the project root or the
installed package directory.
"""

import os
from pathlib import Path

_PACKAGE_DIR = Path(__file__).resolve().parent.parent


def get_project_root() -> str:
    """Project root: $WORDLE_ROOT if set, otherwise the directory holding the package."""
    return os.getenv('WORDLE_ROOT') or str(_PACKAGE_DIR.parent)


def get_path_dir(path: str) -> str:
    """Resolve `path` against the project root. Absolute paths are returned unchanged."""
    if os.path.isabs(path):
        return path
    return os.path.join(get_project_root(), path)


def get_path_package(path: str) -> str:
    """Resolve `path` against the wordle_engine package directory."""
    return str(_PACKAGE_DIR / path)
