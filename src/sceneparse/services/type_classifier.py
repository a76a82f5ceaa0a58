"""
Type classifier module for inferring one content type from parsed attributes.

Rules are evaluated in order and the first matching rule decides. The order
is part of the behaviour: moving a rule changes results.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..knowledge import grammar
from ..knowledge.base import KnowledgeBase
from ..models.release import Category, ReleaseAttributes, ReleaseType

logger = logging.getLogger(__name__)


class ReleaseShapes:
    """
    Structural checks run directly on the release name.

    Bookware also depends on the Tutorial flag, so checks are evaluated on
    every call against the current attributes.
    """

    def __init__(self, release: str, attributes: ReleaseAttributes, knowledge: KnowledgeBase):
        self.release = release
        self.attributes = attributes
        self.knowledge = knowledge

    def _search(self, pattern: str) -> bool:
        return re.search(pattern, self.release, re.IGNORECASE) is not None

    def is_sports(self) -> bool:
        return any(self._search("^" + sport + "[._]") for sport in self.knowledge.sports)

    def bookware_vendor(self) -> Optional[str]:
        """Return the matched vendor prefix of a bookware release."""
        for vendor in self.knowledge.bookware:
            match = re.match(vendor + "[._-]", self.release, re.IGNORECASE)
            if match:
                return match.group(0)
        return None

    def is_bookware(self) -> bool:
        if self.attributes.has_attribute("Tutorial", Category.FLAGS):
            return True
        if self._search(grammar.REGEX_SHAPE_BOOKWARE):
            return True
        return self.bookware_vendor() is not None

    def is_music(self) -> bool:
        return self._search(grammar.REGEX_SHAPE_MUSIC) or self._search(grammar.REGEX_SHAPE_VA)

    def is_ebook(self) -> bool:
        return self._search(grammar.REGEX_SHAPE_EBOOK)

    def is_abook(self) -> bool:
        return self._search(grammar.REGEX_SHAPE_ABOOK)

    def has_music_date(self) -> bool:
        """Description with a date inside brackets, nearly always music (video)."""
        return self._search(grammar.REGEX_DATE_MUSIC)

    def has_episode_or_season(self) -> bool:
        """Episode or season evidence. Number 0 (specials) alone does not count."""
        return bool(self.attributes.episode) or bool(self.attributes.season)


@dataclass(frozen=True)
class TypeRule:
    """One step of the classification cascade."""
    name: str
    applies: Callable[["TypeClassifier", ReleaseShapes], bool]
    decide: Callable[["TypeClassifier", ReleaseShapes], ReleaseType]


class TypeClassifier:
    """Maps the parsed attributes (and an optional section hint) to one type."""

    def __init__(self, knowledge: KnowledgeBase):
        self.knowledge = knowledge
        self.rules = build_rules()

    def classify(self, shapes: ReleaseShapes, section_hint: str = "") -> ReleaseType:
        """
        Classify a release.

        Args:
            shapes: Structural checks bound to the release and its attributes
            section_hint: Optional section/category name of the release

        Returns:
            Detected type, hinted type or the Movie default
        """
        release_type = self.classify_by_attributes(shapes)
        if release_type is None:
            release_type = self.classify_by_section(section_hint)
            if release_type is not None:
                logger.debug(f"Type {release_type.value} from section hint {section_hint!r}")
        if release_type is None:
            release_type = ReleaseType.MOVIE
        return release_type

    def classify_by_attributes(self, shapes: ReleaseShapes) -> Optional[ReleaseType]:
        """Run the rule cascade, None if no rule matched."""
        for rule in self.rules:
            if rule.applies(self, shapes):
                release_type = rule.decide(self, shapes)
                logger.debug(f"Type rule {rule.name!r} matched: {release_type.value}")
                return release_type
        return None

    def classify_by_section(self, section_hint: str) -> Optional[ReleaseType]:
        """Match a section name against the type hint patterns, first type wins."""
        if not section_hint:
            return None
        for type_name, patterns in self.knowledge.type_hints.items():
            for pattern in patterns:
                if re.search(pattern, section_hint, re.IGNORECASE):
                    return ReleaseType(type_name)
        return None

    # Evidence helpers

    def has_game_evidence(self, shapes: ReleaseShapes) -> bool:
        attributes, knowledge = shapes.attributes, self.knowledge
        return (
            attributes.has_attribute(knowledge.flags_games, Category.FLAGS)
            or attributes.has_attribute(knowledge.sources_games, Category.SOURCE)
            or attributes.group in knowledge.groups_games
        )

    def has_mvid_evidence(self, shapes: ReleaseShapes) -> bool:
        attributes, knowledge = shapes.attributes, self.knowledge
        return (
            attributes.has_attribute(knowledge.formats_mvid, Category.FORMAT)
            or attributes.has_attribute(knowledge.sources_mvid, Category.SOURCE)
        )

    def has_video_format(self, shapes: ReleaseShapes) -> bool:
        return shapes.attributes.has_attribute(self.knowledge.formats_video, Category.FORMAT)

    def is_app_group(self, shapes: ReleaseShapes) -> bool:
        return shapes.attributes.group in self.knowledge.groups_apps

    # Refinements

    def refine_bookware(self, shapes: ReleaseShapes) -> ReleaseType:
        return ReleaseType.EBOOK if shapes.is_ebook() else ReleaseType.BOOKWARE

    def refine_sports(self, shapes: ReleaseShapes) -> ReleaseType:
        if shapes.attributes.device or self.has_game_evidence(shapes) or self.is_app_group(shapes):
            return ReleaseType.GAME
        return ReleaseType.SPORTS

    def refine_music(self, shapes: ReleaseShapes) -> ReleaseType:
        attributes = shapes.attributes
        if attributes.device or self.has_game_evidence(shapes):
            return ReleaseType.GAME
        if self.is_app_group(shapes):
            return ReleaseType.APP
        if attributes.resolution or self.has_mvid_evidence(shapes) or self.has_video_format(shapes):
            return ReleaseType.MUSIC_VIDEO
        if (
            (attributes.version and attributes.source is None)
            or attributes.os
            or attributes.has_attribute(self.knowledge.flags_apps, Category.FLAGS)
        ):
            return ReleaseType.APP
        return ReleaseType.MUSIC

    def refine_device(self, shapes: ReleaseShapes) -> ReleaseType:
        return ReleaseType.APP if shapes.attributes.os else ReleaseType.GAME

    def refine_tv(self, shapes: ReleaseShapes) -> ReleaseType:
        if shapes.has_music_date():
            return ReleaseType.MUSIC_VIDEO
        # A TV source alone is not enough
        if not shapes.has_episode_or_season():
            return ReleaseType.MOVIE
        return ReleaseType.TV

    def refine_music_date(self, shapes: ReleaseShapes) -> ReleaseType:
        return ReleaseType.MUSIC_VIDEO if shapes.attributes.resolution else ReleaseType.MUSIC

    def refine_music_format(self, shapes: ReleaseShapes) -> ReleaseType:
        attributes = shapes.attributes
        if attributes.version and attributes.source is None:
            return ReleaseType.APP
        return ReleaseType.MUSIC


def _fixed(release_type: ReleaseType) -> Callable[[TypeClassifier, ReleaseShapes], ReleaseType]:
    return lambda classifier, shapes: release_type


def build_rules() -> List[TypeRule]:
    """Build the ordered classification cascade."""
    return [
        TypeRule(
            "bookware",
            lambda c, s: s.is_bookware(),
            TypeClassifier.refine_bookware,
        ),
        TypeRule(
            "sports",
            lambda c, s: s.is_sports(),
            TypeClassifier.refine_sports,
        ),
        TypeRule(
            "font",
            lambda c, s: s.attributes.has_attribute(["FONT", "FONTSET"], Category.FLAGS),
            _fixed(ReleaseType.FONT),
        ),
        TypeRule(
            "abook",
            lambda c, s: s.is_abook(),
            _fixed(ReleaseType.ABOOK),
        ),
        TypeRule(
            "music",
            lambda c, s: (
                s.is_music()
                or s.attributes.has_attribute(c.knowledge.sources_music, Category.SOURCE)
                or s.attributes.has_attribute(c.knowledge.flags_music, Category.FLAGS)
            ),
            TypeClassifier.refine_music,
        ),
        TypeRule(
            "ebook",
            lambda c, s: s.is_ebook() or s.attributes.has_attribute(c.knowledge.flags_ebook, Category.FLAGS),
            _fixed(ReleaseType.EBOOK),
        ),
        TypeRule(
            "anime",
            lambda c, s: (
                s.attributes.has_attribute(c.knowledge.flags_anime, Category.FLAGS)
                or s.attributes.has_attribute("RAWRip", Category.SOURCE)
            ),
            _fixed(ReleaseType.ANIME),
        ),
        TypeRule(
            "xxx",
            lambda c, s: s.attributes.has_attribute(c.knowledge.flags_xxx, Category.FLAGS),
            _fixed(ReleaseType.XXX),
        ),
        TypeRule(
            "music video",
            lambda c, s: c.has_mvid_evidence(s),
            _fixed(ReleaseType.MUSIC_VIDEO),
        ),
        TypeRule(
            "game",
            lambda c, s: c.has_game_evidence(s),
            _fixed(ReleaseType.GAME),
        ),
        TypeRule(
            "device",
            lambda c, s: bool(s.attributes.device),
            TypeClassifier.refine_device,
        ),
        TypeRule(
            "tv",
            lambda c, s: (
                s.has_episode_or_season()
                or s.attributes.has_attribute(c.knowledge.sources_tv, Category.SOURCE)
            ),
            TypeClassifier.refine_tv,
        ),
        TypeRule(
            "music date",
            lambda c, s: s.has_music_date(),
            TypeClassifier.refine_music_date,
        ),
        TypeRule(
            "dated video",
            lambda c, s: s.attributes.date is not None and bool(s.attributes.resolution),
            _fixed(ReleaseType.TV),
        ),
        TypeRule(
            "movie flags",
            lambda c, s: s.attributes.has_attribute(c.knowledge.flags_movie, Category.FLAGS),
            _fixed(ReleaseType.MOVIE),
        ),
        TypeRule(
            "music format",
            lambda c, s: s.attributes.has_attribute(c.knowledge.formats_music, Category.FORMAT),
            TypeClassifier.refine_music_format,
        ),
        TypeRule(
            "app",
            lambda c, s: (
                (
                    bool(s.attributes.os or s.attributes.version)
                    or s.attributes.has_attribute(c.knowledge.flags_apps, Category.FLAGS)
                )
                and not c.has_video_format(s)
            ) or c.is_app_group(s),
            _fixed(ReleaseType.APP),
        ),
        TypeRule(
            "movie",
            lambda c, s: (
                s.attributes.has_attribute(c.knowledge.sources_movies, Category.SOURCE)
                or c.has_video_format(s)
                or (
                    bool(s.attributes.resolution)
                    and bool(
                        s.attributes.year
                        or s.attributes.format
                        or s.attributes.source in ("Bluray", "DVD")
                    )
                )
            ),
            _fixed(ReleaseType.MOVIE),
        ),
    ]
