"""
Custom exceptions for sceneparse.
"""


class SceneParseError(Exception):
    """Base exception for sceneparse."""
    pass


class ConfigurationError(SceneParseError):
    """Exception raised when configuration is invalid."""
    pass


class PlaceholderError(SceneParseError):
    """Exception raised when a pattern template references an unknown placeholder."""
    pass


class InvalidReleaseNameError(SceneParseError, ValueError):
    """Exception raised when the release name is not usable as parser input."""
    pass


class DateParseError(SceneParseError, ValueError):
    """Exception raised when day, month and year do not form a calendar date."""
    pass
