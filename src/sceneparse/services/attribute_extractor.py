"""
Attribute extractor module for matching recognition tables against a release name.
"""

import re
from typing import List, Union

from ..knowledge.base import KnowledgeBase
from ..models.release import Category, ReleaseAttributes
from .pattern_compiler import PatternCompiler

SEPARATORS = r"[._-]"

# Categories a context flag may reference
CONTEXT_CATEGORIES = (
    Category.FLAGS, Category.FORMAT, Category.SOURCE, Category.LANGUAGE, Category.RESOLUTION,
)

# Sources colliding with a language or country code must match case-sensitively
CASE_SENSITIVE_SOURCES = frozenset({"iT"})


class AttributeExtractor:
    """Generic matcher of ``key -> pattern(s)`` tables."""

    def __init__(self, knowledge: KnowledgeBase, compiler: PatternCompiler):
        """
        Initialize the attribute extractor.

        Args:
            knowledge: Knowledge base with the recognition tables
            compiler: Pattern compiler used for context flags
        """
        self.knowledge = knowledge
        self.compiler = compiler

    def extract(
        self,
        category: Union[Category, str],
        release: str,
        attributes: ReleaseAttributes,
    ) -> List[str]:
        """
        Match every key of a category table against the release name.

        Args:
            category: Category whose table is used
            release: Release name
            attributes: Attributes parsed so far (for context flags)

        Returns:
            Matched keys in table order, without duplicates
        """
        category = Category(category)
        table = self.knowledge.table(category)
        if table is None:
            raise ValueError(f"No recognition table for category {category.value!r}")

        keys: List[str] = []
        for key, patterns in table.items():
            for pattern in patterns:
                if key in keys:
                    break
                if category == Category.FLAGS and key in self.knowledge.context_flags:
                    pattern = self.compiler.compile(pattern, attributes, only=CONTEXT_CATEGORIES)
                if self.matches(category, pattern, release):
                    keys.append(key)
        return keys

    def matches(self, category: Category, pattern: str, release: str) -> bool:
        """
        Try the match shapes of a pattern, first success wins.

        Shapes: delimited on both sides, last token before the group,
        inside parentheses, and (format only) at the very end of the name.
        A pattern ending in ``$`` only tries the last-token shape.
        """
        flags = re.IGNORECASE
        if category == Category.SOURCE and pattern in CASE_SENSITIVE_SOURCES:
            flags = 0

        trailing = r"(?:-[\w.]+){1,2}$"
        if pattern.endswith("$"):
            return re.search(SEPARATORS + pattern[:-1] + trailing, release, flags) is not None

        shapes = [
            r"(" + SEPARATORS + r")" + pattern + r"\1",
            SEPARATORS + pattern + trailing,
            r"\(" + pattern + r"\)",
        ]
        if category == Category.FORMAT:
            shapes.append(r"[._]" + pattern + r"$")

        return any(re.search(shape, release, flags) for shape in shapes)
