"""
Text stripper module for neutralizing already parsed tokens in a release name.
"""

import re
from typing import Iterable, List, Optional, Union

from ..core.config import PARSER_CONFIG
from ..knowledge import grammar
from ..knowledge.base import KnowledgeBase
from ..models.release import Category, ReleaseAttributes
from ..utils.string_utils import non_capturing
from .pattern_compiler import trailing_pattern

# Flags kept in the text (needed for proper software/game title matching)
KEPT_FLAGS = frozenset({"Update", "3D"})


class TextStripper:
    """Replaces delimiter-bounded attribute tokens with a fixed filler."""

    def __init__(self, knowledge: KnowledgeBase, filler: Optional[str] = None):
        """
        Initialize the text stripper.

        Args:
            knowledge: Knowledge base with the recognition tables
            filler: Replacement for stripped tokens (defaults to PARSER_CONFIG)
        """
        self.knowledge = knowledge
        self.filler = filler or PARSER_CONFIG["FILLER"]

    def strip(
        self,
        text: str,
        categories: Union[Category, str, Iterable[Union[Category, str]]],
        attributes: ReleaseAttributes,
        episode_pattern: str = grammar.REGEX_EPISODE,
        version_pattern: str = grammar.REGEX_VERSION,
    ) -> str:
        """
        Return a copy of text with the tokens of the given categories stripped.

        Args:
            text: Working string
            categories: Category or categories to strip
            attributes: Attributes parsed so far
            episode_pattern: Episode grammar used for the episode category
            version_pattern: Version grammar used for the version category

        Returns:
            New working string
        """
        if not text or not categories:
            return text

        if isinstance(categories, (str, Category)):
            categories = [categories]

        for category in categories:
            category = Category(category)
            for pattern in self._patterns(category, attributes, episode_pattern, version_pattern):
                if category == Category.OS:
                    pattern = r"(?:for[._-])?" + pattern

                if "$" in pattern:
                    regex = r"[._(-]" + trailing_pattern(pattern)
                else:
                    regex = r"[._(-]" + pattern + r"[._)-]"
                text = re.sub(regex, self.filler, text, flags=re.IGNORECASE)

                # Format may end the name when the group is missing
                if category == Category.FORMAT:
                    text = re.sub(r"[._]" + pattern.replace("$", "") + r"$", self.filler, text, flags=re.IGNORECASE)

        return text

    def _patterns(
        self,
        category: Category,
        attributes: ReleaseAttributes,
        episode_pattern: str,
        version_pattern: str,
    ) -> List[str]:
        """Return the patterns to strip for one category (empty if unset)."""
        value = attributes.get(category)
        if value is None or value == "":
            return []

        if category == Category.DAYMONTH:
            return [
                f"{value.day:02d}(?:th|rd|nd|st)?",
                f"{value.day}(?:th|rd|nd|st)?",
                f"{value.month:02d}",
            ]
        if category == Category.MONTHNAME:
            monthname = non_capturing(grammar.REGEX_DATE_MONTHNAME)
            return [monthname.replace("%monthname%", self.knowledge.months[value.month])]
        if category == Category.DISC:
            return [grammar.REGEX_DISC]
        if category == Category.EPISODE:
            return [episode_pattern]
        if category == Category.VERSION:
            return [version_pattern]
        if category == Category.YEAR:
            return [grammar.REGEX_YEAR_SIMPLE]

        if isinstance(value, dict):
            keys = list(value)
        elif isinstance(value, (list, tuple)):
            keys = list(value)
        else:
            keys = [value]

        patterns = []
        for key in keys:
            if category == Category.FLAGS and key in KEPT_FLAGS:
                continue
            # Unknown keys (bookware vendors as source) are no-ops
            patterns.extend(self.knowledge.patterns(category, key))
        return patterns
