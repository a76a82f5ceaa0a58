"""
Result normalizer module for removing falsely parsed attributes.
"""

import logging

from ..models.release import Category, ReleaseAttributes, ReleaseType

logger = logging.getLogger(__name__)


class ResultNormalizer:
    """Type based consistency fix-ups applied to a finished parse."""

    def normalize(self, attributes: ReleaseAttributes) -> ReleaseAttributes:
        """
        Clean up attributes that don't make sense for the detected type.

        Args:
            attributes: Attributes with type and title set

        Returns:
            The same attributes object, fixed in place
        """
        release_type = attributes.type

        if release_type in (ReleaseType.MOVIE, ReleaseType.TV):
            # Same token captured as source and format
            if (
                attributes.source
                and attributes.format
                and attributes.resolution
                and attributes.source == attributes.format
            ):
                attributes.set(Category.FORMAT, None)

        if release_type == ReleaseType.MOVIE:
            attributes.set(Category.VERSION, None)
        elif release_type == ReleaseType.APP:
            attributes.set(Category.AUDIO, None)
            if attributes.source and attributes.title and attributes.source in attributes.title:
                attributes.set(Category.SOURCE, None)
        elif release_type == ReleaseType.GAME:
            attributes.discard_flag("Anime")
        elif release_type == ReleaseType.EBOOK:
            if attributes.format == "Hybrid":
                attributes.discard_flag("Hybrid")
        elif release_type == ReleaseType.MUSIC:
            attributes.set(Category.EPISODE, None)
            attributes.set(Category.SEASON, None)
        elif release_type == ReleaseType.BOOKWARE:
            # Flag tokens are part of bookware titles
            attributes.set(Category.FLAGS, None)

        if release_type in (ReleaseType.MOVIE, ReleaseType.XXX, ReleaseType.TV):
            # DVD source without resolution and format is a DVDR
            if attributes.source == "DVD" and not attributes.resolution and not attributes.format:
                attributes.set(Category.FORMAT, "DVDR")
                attributes.set(Category.SOURCE, None)

        if release_type not in (ReleaseType.APP, ReleaseType.GAME):
            attributes.discard_flag("Trainer")

        logger.debug(f"Normalized attributes for type {release_type}")
        return attributes
