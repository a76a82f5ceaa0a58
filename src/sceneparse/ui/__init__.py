"""
User interface components for sceneparse.
"""

from .cli import SceneParseCLI
from .display import DisplayManager
from .formatters import format_release

__all__ = [
    'SceneParseCLI',
    'DisplayManager',
    'format_release',
]
