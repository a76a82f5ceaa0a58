"""
sceneparse - Scene release name parser.

Turns release names like ``Show.Name.S02E05.720p.WEB-DL.DTS.X264-GROUP`` into
structured records (group, type, title and technical attributes).
"""

from .core.config import PROJECT_VERSION
from .core.exceptions import (
    SceneParseError,
    ConfigurationError,
    PlaceholderError,
    InvalidReleaseNameError,
    DateParseError,
)
from .models import Category, ReleaseType, ReleaseRecord
from .services.release_parser import ReleaseParser, parse

__version__ = PROJECT_VERSION

__all__ = [
    'parse',
    'ReleaseParser',
    'ReleaseRecord',
    'ReleaseType',
    'Category',
    'SceneParseError',
    'ConfigurationError',
    'PlaceholderError',
    'InvalidReleaseNameError',
    'DateParseError',
]
