"""
Utility functions for sceneparse.
"""

from .string_utils import sanitize_text, non_capturing, ucwords

__all__ = [
    'sanitize_text',
    'non_capturing',
    'ucwords',
]
