"""
Configuration for sceneparse.
Contains all constants, settings, and global parameters.
"""

import os

# Project Information
PROJECT_NAME = "sceneparse"
PROJECT_VERSION = "1.0.0"
PROJECT_DESCRIPTION = "Scene release name parser - extract group, type, title and technical attributes"


def _env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Parser Configuration
PARSER_CONFIG = {
    "NO_GROUP": "NOGRP",
    "FILLER": "..",
    "DEFAULT_TYPE": "Movie",
    "STRICT_PLACEHOLDERS": _env_flag("SCENEPARSE_STRICT"),
    "MAX_RELEASE_LENGTH": int(os.getenv("SCENEPARSE_MAX_LENGTH", "512")),
}

# Logging Configuration
LOGGING_CONFIG = {
    "LEVEL": os.getenv("SCENEPARSE_LOG_LEVEL", "WARNING").upper(),
    "FORMAT": "%(levelname)s - %(name)s - %(message)s",
}

# User Interface Configuration
UI_CONFIG = {
    "LABEL_WIDTH": 14,
    "VALUE_WIDTH": 60,
    "BORDER_STYLE": "blue",
    "HEADER_STYLE": "bold magenta",
}

# Validation Rules
VALIDATION_RULES = {
    "VALID_LOG_LEVELS": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    "FILLER_LENGTH": 2,
}

# Error Messages
ERROR_MESSAGES = {
    "INVALID_DATE": "Invalid date {date!r} in release {release!r}, date left unset.",
    "UNKNOWN_PLACEHOLDER": "Unknown placeholder %{name}% in pattern {pattern!r}.",
    "INVALID_RELEASE_NAME": "Release name must be a string, got {kind}.",
    "INVALID_LOG_LEVEL": "LOG_LEVEL must be one of: {levels}",
}
