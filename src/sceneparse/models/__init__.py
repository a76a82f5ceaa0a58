"""
Data models for sceneparse.
"""

from .release import Category, ReleaseType, ReleaseAttributes, ReleaseRecord

__all__ = [
    'Category',
    'ReleaseType',
    'ReleaseAttributes',
    'ReleaseRecord',
]
