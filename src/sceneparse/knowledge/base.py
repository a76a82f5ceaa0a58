"""
Immutable knowledge base shared by every parse.
"""

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple, Union

from ..models.release import Category
from . import attributes, hints, implications

Patterns = Tuple[str, ...]


def _as_patterns(value: Union[str, Iterable[str]]) -> Patterns:
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def _freeze(table: Mapping) -> Mapping[str, Patterns]:
    """Copy a table into a read-only mapping of key -> tuple of patterns."""
    return MappingProxyType({key: _as_patterns(value) for key, value in table.items()})


@dataclass(frozen=True)
class KnowledgeBase:
    """Recognition tables, implication sets and hint patterns."""
    source: Mapping[str, Patterns]
    format: Mapping[str, Patterns]
    resolution: Mapping[str, Patterns]
    audio: Mapping[str, Patterns]
    device: Mapping[str, Patterns]
    os: Mapping[str, Patterns]
    languages: Mapping[str, Patterns]
    flags: Mapping[str, Patterns]
    months: Mapping[int, str]
    context_flags: frozenset
    sports: Patterns
    bookware: Patterns
    type_hints: Mapping[str, Patterns]
    flags_games: frozenset
    flags_apps: frozenset
    flags_music: frozenset
    flags_movie: frozenset
    flags_ebook: frozenset
    flags_anime: frozenset
    flags_xxx: frozenset
    sources_games: frozenset
    sources_music: frozenset
    sources_mvid: frozenset
    sources_tv: frozenset
    sources_movies: frozenset
    formats_music: frozenset
    formats_video: frozenset
    formats_mvid: frozenset
    groups_games: frozenset
    groups_apps: frozenset

    def table(self, category: Union[Category, str]) -> Optional[Mapping[str, Patterns]]:
        """Return the recognition table of a category, None if it has none."""
        return {
            Category.SOURCE: self.source,
            Category.FORMAT: self.format,
            Category.RESOLUTION: self.resolution,
            Category.AUDIO: self.audio,
            Category.DEVICE: self.device,
            Category.OS: self.os,
            Category.LANGUAGE: self.languages,
            Category.FLAGS: self.flags,
        }.get(Category(category))

    def patterns(self, category: Union[Category, str], key: str) -> Patterns:
        """
        Return the recognition patterns of one key.

        Unknown keys (like a bookware vendor stored as source) yield an empty
        tuple so callers can treat them as no-ops.
        """
        table = self.table(category)
        if table is None:
            return ()
        return table.get(key, ())

    def language_name(self, code: str) -> str:
        """Display name of a language code (first entry of its patterns)."""
        return self.languages[code][0]


@lru_cache(maxsize=None)
def load_knowledge_base() -> KnowledgeBase:
    """Build the knowledge base once per process."""
    return KnowledgeBase(
        source=_freeze(attributes.SOURCE),
        format=_freeze(attributes.FORMAT),
        resolution=_freeze(attributes.RESOLUTION),
        audio=_freeze(attributes.AUDIO),
        device=_freeze(attributes.DEVICE),
        os=_freeze(attributes.OS),
        languages=_freeze(attributes.LANGUAGES),
        flags=_freeze(attributes.FLAGS),
        months=MappingProxyType(dict(attributes.MONTHS)),
        context_flags=frozenset(attributes.CONTEXT_FLAGS),
        sports=tuple(hints.SPORTS),
        bookware=tuple(hints.BOOKWARE),
        type_hints=_freeze(hints.TYPE),
        flags_games=frozenset(implications.FLAGS_GAMES),
        flags_apps=frozenset(implications.FLAGS_APPS),
        flags_music=frozenset(implications.FLAGS_MUSIC),
        flags_movie=frozenset(implications.FLAGS_MOVIE),
        flags_ebook=frozenset(implications.FLAGS_EBOOK),
        flags_anime=frozenset(implications.FLAGS_ANIME),
        flags_xxx=frozenset(implications.FLAGS_XXX),
        sources_games=frozenset(implications.SOURCES_GAMES),
        sources_music=frozenset(implications.SOURCES_MUSIC),
        sources_mvid=frozenset(implications.SOURCES_MVID),
        sources_tv=frozenset(implications.SOURCES_TV),
        sources_movies=frozenset(implications.SOURCES_MOVIES),
        formats_music=frozenset(implications.FORMATS_MUSIC),
        formats_video=frozenset(implications.FORMATS_VIDEO),
        formats_mvid=frozenset(implications.FORMATS_MVID),
        groups_games=frozenset(implications.GROUPS_GAMES),
        groups_apps=frozenset(implications.GROUPS_APPS),
    )
