"""
Core module for sceneparse.
Contains configuration, exceptions, logging setup, and validation.
"""

from .config import *
from .exceptions import *
from .logger import setup_logging, get_logger
from .validation import validate_configuration, validate_and_raise, validate_release_name

__all__ = [
    'setup_logging',
    'get_logger',
    'validate_configuration',
    'validate_and_raise',
    'validate_release_name',
    'SceneParseError',
    'ConfigurationError',
    'PlaceholderError',
    'InvalidReleaseNameError',
    'DateParseError',
]
