"""
Configuration and input validation utilities.
"""

from typing import List, Tuple
from .config import (
    PARSER_CONFIG,
    LOGGING_CONFIG,
    VALIDATION_RULES,
    ERROR_MESSAGES,
)
from .exceptions import ConfigurationError, InvalidReleaseNameError


def validate_configuration() -> Tuple[bool, List[str]]:
    """
    Validate parser configuration.
    
    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []
    
    valid_log_levels = VALIDATION_RULES["VALID_LOG_LEVELS"]
    if LOGGING_CONFIG["LEVEL"] not in valid_log_levels:
        errors.append(ERROR_MESSAGES["INVALID_LOG_LEVEL"].format(levels=", ".join(valid_log_levels)))
    
    if len(PARSER_CONFIG["FILLER"]) != VALIDATION_RULES["FILLER_LENGTH"]:
        errors.append(f"FILLER must be exactly {VALIDATION_RULES['FILLER_LENGTH']} characters long")
    
    if PARSER_CONFIG["MAX_RELEASE_LENGTH"] < 1:
        errors.append("MAX_RELEASE_LENGTH must be >= 1")
    
    if not PARSER_CONFIG["NO_GROUP"]:
        errors.append("NO_GROUP sentinel must not be empty")
    
    return len(errors) == 0, errors


def validate_and_raise():
    """
    Validate configuration and raise ConfigurationError if invalid.
    """
    is_valid, errors = validate_configuration()
    if not is_valid:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)


def validate_release_name(value) -> str:
    """
    Validate and sanitize a release name before parsing.
    
    Args:
        value: Raw release name
        
    Returns:
        Stripped release name, truncated to MAX_RELEASE_LENGTH
        
    Raises:
        InvalidReleaseNameError: If the value is not a string
    """
    if not isinstance(value, str):
        raise InvalidReleaseNameError(
            ERROR_MESSAGES["INVALID_RELEASE_NAME"].format(kind=type(value).__name__)
        )
    
    value = value.strip()
    
    max_length = PARSER_CONFIG["MAX_RELEASE_LENGTH"]
    if len(value) > max_length:
        # Truncate instead of raising error
        value = value[:max_length]
    
    return value
