"""
Utilities Package

Contains path resolution helpers and the structured game logger
(import the logger from wordle_engine.utils.game_logger).
"""

from .paths import get_path_dir, get_path_package, get_project_root

__all__ = ['get_path_dir', 'get_path_package', 'get_project_root']
