"""
Pattern compiler module for filling %placeholders% with known attribute patterns.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional

from ..core.config import ERROR_MESSAGES, PARSER_CONFIG
from ..core.exceptions import PlaceholderError
from ..knowledge import grammar
from ..knowledge.base import KnowledgeBase
from ..models.release import Category, ReleaseAttributes
from ..utils.string_utils import non_capturing

logger = logging.getLogger(__name__)

PLACEHOLDER = re.compile(r"%([a-z_]+)%")

# Placeholders filled from parsed attributes
ATTRIBUTE_PLACEHOLDERS = frozenset({
    "audio", "date", "date_monthname", "device", "disc", "flags", "format",
    "group", "language", "os", "resolution", "source", "version", "year",
})
# Placeholders only filled when the caller passes a value for them
CALLER_PLACEHOLDERS = frozenset({"bookware", "dateformat", "language_pattern", "monthname"})

# Flags skipped when building patterns (needed for software/game titles)
SKIPPED_FLAGS = frozenset({"3D"})


def trailing_pattern(value: str) -> str:
    """Turn a ``$`` pattern into one that only matches as last token before the group."""
    return value.replace("$", "") + r"-(?:[\w.-]+){1,2}$"


class PatternCompiler:
    """Substitutes %category% placeholders with the patterns of parsed values."""

    def __init__(self, knowledge: KnowledgeBase, strict: Optional[bool] = None):
        """
        Initialize the pattern compiler.

        Args:
            knowledge: Knowledge base with the recognition tables
            strict: Raise on unknown placeholders (defaults to PARSER_CONFIG)
        """
        self.knowledge = knowledge
        self.strict = PARSER_CONFIG["STRICT_PLACEHOLDERS"] if strict is None else strict

    def compile(
        self,
        template: str,
        attributes: ReleaseAttributes,
        only: Optional[Iterable[str]] = None,
        extra: Optional[Dict[str, str]] = None,
    ) -> str:
        """
        Fill the placeholders of a template.

        Args:
            template: Regex template with %name% placeholders
            attributes: Attributes parsed so far
            only: Restrict substitution to these placeholder names
            extra: Values for caller provided placeholders

        Returns:
            Compiled pattern. Placeholders of unset attributes are left as they are.

        Raises:
            PlaceholderError: On an unknown placeholder in strict mode
        """
        extra = extra or {}
        allowed = None if only is None else {str(getattr(name, "value", name)) for name in only}

        for name in dict.fromkeys(PLACEHOLDER.findall(template)):
            if name in extra:
                template = template.replace(f"%{name}%", extra[name])
                continue

            if name not in ATTRIBUTE_PLACEHOLDERS and name not in CALLER_PLACEHOLDERS:
                message = ERROR_MESSAGES["UNKNOWN_PLACEHOLDER"].format(name=name, pattern=template)
                if self.strict:
                    raise PlaceholderError(message)
                logger.warning(message)
                continue

            if allowed is not None and name not in allowed:
                continue

            values = self.resolve(name, attributes)
            if values:
                template = template.replace(f"%{name}%", "|".join(values))

        return template

    def resolve(self, name: str, attributes: ReleaseAttributes) -> List[str]:
        """Return the patterns of a placeholder, empty if its attribute is unset."""
        knowledge = self.knowledge

        if name in CALLER_PLACEHOLDERS:
            if name == "bookware":
                return list(knowledge.bookware)
            return []

        if name in ("date", "date_monthname"):
            date = attributes.date
            if date is None:
                return []
            if name == "date":
                return [non_capturing(grammar.REGEX_DATE)]
            monthname = non_capturing(grammar.REGEX_DATE_MONTHNAME)
            return [monthname.replace("%monthname%", knowledge.months[date.month])]

        value = attributes.get(name)
        if value is None:
            return []

        if name == "group":
            return [re.escape(value)]
        if name == "year":
            return [str(value)]
        if name == "disc":
            return [grammar.REGEX_DISC]
        if name == "version":
            return [non_capturing(grammar.REGEX_VERSION)]

        if name == "language":
            # Only the first parsed language
            keys = [next(iter(value))]
        elif isinstance(value, (list, tuple)):
            keys = [key for key in value if not (name == "flags" and key in SKIPPED_FLAGS)]
        else:
            keys = [value]

        patterns = []
        for key in keys:
            for pattern in knowledge.patterns(Category(name), key):
                # Some old releases have "for x" before the os or device
                if name in ("os", "device"):
                    pattern = r"(?:for[._-])?" + pattern
                if "$" in pattern:
                    pattern = trailing_pattern(pattern)
                patterns.append(pattern)
        return patterns
