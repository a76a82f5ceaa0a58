"""
Title extractor module for splitting a release name into title and title extra.

Every type has an ordered chain of grammar attempts. The chain always ends
with the default (movie) attempts, which always deliver something.
"""

import logging
import re
from typing import Callable, Dict, List, Optional, Tuple

from ..knowledge import grammar
from ..knowledge.base import KnowledgeBase
from ..models.release import Category, ReleaseAttributes, ReleaseType
from ..utils.string_utils import sanitize_text
from .pattern_compiler import PatternCompiler
from .text_stripper import TextStripper
from .type_classifier import ReleaseShapes

logger = logging.getLogger(__name__)

TitleResult = Tuple[str, Optional[str]]
Attempt = Callable[[str, ReleaseShapes], Optional[TitleResult]]

C = Category


def _search(pattern: str, text: str) -> Optional[re.Match]:
    return re.search(pattern, text, re.IGNORECASE)


class TitleExtractor:
    """Extracts title and title extra with a per-type fallback chain."""

    def __init__(self, knowledge: KnowledgeBase, compiler: PatternCompiler, stripper: TextStripper):
        """
        Initialize the title extractor.

        Args:
            knowledge: Knowledge base with the recognition tables
            compiler: Pattern compiler for title grammars
            stripper: Text stripper for working strings
        """
        self.knowledge = knowledge
        self.compiler = compiler
        self.stripper = stripper

        standard: List[Attempt] = [self.attempt_dated, self.attempt_movie, self.attempt_minimal, self.attempt_last_resort]
        music = [self.attempt_music] + standard
        software = [self.attempt_software] + standard
        tv = [self.attempt_tv] + standard
        self.chains: Dict[ReleaseType, List[Attempt]] = {
            ReleaseType.MUSIC: music,
            ReleaseType.ABOOK: music,
            ReleaseType.MUSIC_VIDEO: music,
            ReleaseType.GAME: software,
            ReleaseType.APP: software,
            ReleaseType.TV: tv,
            ReleaseType.SPORTS: tv,
            ReleaseType.DOCU: tv,
            ReleaseType.ANIME: [self.attempt_anime] + standard,
            ReleaseType.XXX: [self.attempt_xxx] + standard,
            ReleaseType.EBOOK: [self.attempt_ebook] + standard,
            ReleaseType.FONT: [self.attempt_font] + standard,
            ReleaseType.BOOKWARE: [self.attempt_bookware] + standard,
            ReleaseType.MOVIE: standard,
        }

    def extract(self, release: str, shapes: ReleaseShapes) -> Tuple[Optional[str], Optional[str]]:
        """
        Extract the sanitized title and title extra of a classified release.

        Args:
            release: Release name
            shapes: Structural checks bound to the release and its attributes

        Returns:
            Tuple of (title, title_extra), each None when empty
        """
        attributes = shapes.attributes
        release_type = attributes.type or ReleaseType.MOVIE
        cleaned = release.replace(",", "")

        title, title_extra = "", None
        for attempt in self.chains[release_type]:
            result = attempt(cleaned, shapes)
            if result is not None:
                title, title_extra = result
                logger.debug(f"Title grammar {attempt.__name__!r} matched {release!r}")
                break

        title = sanitize_text(title, release_type.value)
        if title == "VA":
            title = "Various"
        title_extra = sanitize_text(title_extra, release_type.value) if title_extra else ""

        return title or None, title_extra or None

    # Helpers

    def _episode_pattern(self, shapes: ReleaseShapes) -> str:
        if shapes.is_ebook() or shapes.is_abook():
            return grammar.REGEX_EPISODE_OTHER
        return grammar.REGEX_EPISODE

    def _strip_episode(self, text: str, shapes: ReleaseShapes) -> str:
        return self.stripper.strip(text, C.EPISODE, shapes.attributes, episode_pattern=self._episode_pattern(shapes))

    def _episode_title(self, cleaned: str, attributes: ReleaseAttributes, categories) -> str:
        """Match an episode title in a further stripped name ('' if none)."""
        stripped = self.stripper.strip(cleaned, categories, attributes)
        match = _search(grammar.REGEX_TITLE_TV_EPISODE, stripped)
        if not match or not match.group(1) or match.group(1) == ".":
            return ""
        return match.group(1)

    # Attempts

    def attempt_music(self, cleaned: str, shapes: ReleaseShapes) -> Optional[TitleResult]:
        """Artist + release title (album, single, book) split on dashes."""
        attributes = shapes.attributes
        release_type = attributes.type
        if release_type == ReleaseType.ABOOK:
            template = grammar.REGEX_TITLE_ABOOK
        elif release_type == ReleaseType.MUSIC_VIDEO:
            template = grammar.REGEX_TITLE_MVID
        else:
            template = grammar.REGEX_TITLE_MUSIC

        pattern = self.compiler.compile(
            template, attributes, only=(C.AUDIO, C.FLAGS, C.FORMAT, C.GROUP, C.LANGUAGE, C.RESOLUTION, C.SOURCE)
        )
        # A date inside brackets with more words is part of the title
        if not _search(grammar.REGEX_DATE_MUSIC, cleaned):
            pattern = self.compiler.compile(pattern, attributes, only=("date", "date_monthname", C.YEAR))

        match = _search(pattern, cleaned)
        if not match:
            return None

        parts = match.group(1).split("-")
        title = self._strip_episode("." + parts[0], shapes)
        separator = " - " if release_type == ReleaseType.ABOOK else "-"

        extras = []
        for index, part in enumerate(parts[1:]):
            part = self._strip_episode("." + part + ".", shapes).strip(".")
            if not part:
                continue
            # Only the first part, or parts with certain chars
            if index == 0 or "_" in part or ")" in part or part.isdigit():
                extras.append(part)

        return title, separator.join(extras)

    def attempt_software(self, cleaned: str, shapes: ReleaseShapes) -> Optional[TitleResult]:
        """Single segment title of games and apps."""
        attributes = shapes.attributes
        only = [C.DEVICE, C.OS, C.RESOLUTION, C.VERSION]
        if attributes.type == ReleaseType.GAME:
            only += [C.DISC, C.LANGUAGE, C.SOURCE]
        pattern = self.compiler.compile(grammar.REGEX_TITLE_APP, attributes, only=only)
        match = _search(pattern, cleaned)
        if not match:
            return None
        return match.group(1), None

    def attempt_tv(self, cleaned: str, shapes: ReleaseShapes) -> Optional[TitleResult]:
        """Show name + episode title, or event + specific event for dated releases."""
        attributes = shapes.attributes

        # Year may come before the episode
        no_year = self.stripper.strip(cleaned, [C.DISC, C.FORMAT, C.YEAR], attributes)
        match = _search(grammar.REGEX_TITLE_TV, no_year)
        if match:
            title_extra = self._episode_title(
                cleaned, attributes, [C.AUDIO, C.FLAGS, C.FORMAT, C.LANGUAGE, C.RESOLUTION, C.SOURCE]
            )
            # Multiple episodes (1-2) get parsed as title extra
            if (
                title_extra.isdigit()
                and len(title_extra) <= 2
                and str(int(title_extra)) in str(attributes.episode)
            ):
                title_extra = ""
            return match.group(1), title_extra

        pattern = self.compiler.compile(
            grammar.REGEX_TITLE_TV_DATE,
            attributes,
            only=(C.FLAGS, C.FORMAT, C.LANGUAGE, C.RESOLUTION, C.SOURCE, "date", C.YEAR),
        )
        match = _search(pattern, cleaned)
        if match:
            title_extra = match.group(2) if match.group(2) != "." else ""
            return match.group(1), title_extra
        return None

    def attempt_anime(self, cleaned: str, shapes: ReleaseShapes) -> Optional[TitleResult]:
        """Show name + episode title."""
        match = _search(grammar.REGEX_TITLE_TV, cleaned)
        if not match:
            return None
        title_extra = self._episode_title(
            cleaned, shapes.attributes, [C.FLAGS, C.FORMAT, C.LANGUAGE, C.RESOLUTION, C.SOURCE, C.YEAR]
        )
        return match.group(1), title_extra

    def attempt_xxx(self, cleaned: str, shapes: ReleaseShapes) -> Optional[TitleResult]:
        """Publisher + release name, or show + episode title."""
        attributes = shapes.attributes

        if attributes.episode:
            match = _search(grammar.REGEX_TITLE_TV, cleaned)
            if match:
                title_extra = self._episode_title(
                    cleaned, attributes, [C.AUDIO, C.FLAGS, C.FORMAT, C.LANGUAGE, C.RESOLUTION, C.SOURCE]
                )
                return match.group(1), title_extra

        template = grammar.REGEX_TITLE_XXX_DATE if attributes.date else grammar.REGEX_TITLE_XXX
        pattern = self.compiler.compile(
            template,
            attributes,
            only=(C.FLAGS, C.YEAR, C.LANGUAGE, C.SOURCE, "date", "date_monthname"),
        )
        match = _search(pattern, cleaned)
        if not match:
            return None
        return match.group(1), match.group(2)

    def attempt_ebook(self, cleaned: str, shapes: ReleaseShapes) -> Optional[TitleResult]:
        """Author + book title split on dashes."""
        attributes = shapes.attributes
        cleaned = self._strip_episode(cleaned, shapes)
        pattern = self.compiler.compile(
            grammar.REGEX_TITLE_EBOOK,
            attributes,
            only=(C.FLAGS, C.FORMAT, C.LANGUAGE, "date", "date_monthname", C.YEAR),
        )
        match = _search(pattern, cleaned)
        if not match:
            return None

        parts = match.group(1).split("-")
        return parts[0], " - ".join(part for part in parts[1:] if part)

    def attempt_font(self, cleaned: str, shapes: ReleaseShapes) -> Optional[TitleResult]:
        """Font family name."""
        stripped = self.stripper.strip(cleaned, [C.VERSION, C.OS, C.FORMAT], shapes.attributes)
        match = _search(grammar.REGEX_TITLE_FONT, stripped)
        if not match:
            return None
        return match.group(1), None

    def attempt_bookware(self, cleaned: str, shapes: ReleaseShapes) -> Optional[TitleResult]:
        """Tutorial name without the vendor prefix."""
        attributes = shapes.attributes
        stripped = self.stripper.strip(
            cleaned, [C.LANGUAGE, C.VERSION], attributes, version_pattern=grammar.REGEX_VERSION_BOOKWARE
        )
        pattern = self.compiler.compile(
            grammar.REGEX_TITLE_BOOKWARE,
            attributes,
            extra={"bookware": "|".join(self.knowledge.bookware)},
        )
        match = _search(pattern, stripped)
        if not match:
            return None
        return match.group(1), None

    def attempt_dated(self, cleaned: str, shapes: ReleaseShapes) -> Optional[TitleResult]:
        """Dated event (NFL.2021.01.01.Team1.vs.Team2), needs a specific event."""
        attributes = shapes.attributes
        pattern = self.compiler.compile(
            grammar.REGEX_TITLE_TV_DATE,
            attributes,
            only=(C.FLAGS, C.FORMAT, C.LANGUAGE, C.RESOLUTION, C.SOURCE),
            extra={"dateformat": grammar.REGEX_TITLE_DATEFORMAT},
        )
        if attributes.type == ReleaseType.XXX:
            cleaned = self.stripper.strip(cleaned, [C.EPISODE, C.MONTHNAME, C.DAYMONTH], attributes)

        match = _search(pattern, cleaned)
        if match and match.group(2):
            return match.group(1), match.group(2)
        return None

    def attempt_movie(self, cleaned: str, shapes: ReleaseShapes) -> Optional[TitleResult]:
        """Everything before the first known tag."""
        pattern = self.compiler.compile(
            grammar.REGEX_TITLE_MOVIE,
            shapes.attributes,
            only=(C.AUDIO, C.DISC, C.FLAGS, C.FORMAT, C.LANGUAGE, C.RESOLUTION, C.SOURCE, C.YEAR),
        )
        match = _search(pattern, cleaned)
        if not match:
            return None
        return match.group(1), None

    def attempt_minimal(self, cleaned: str, shapes: ReleaseShapes) -> Optional[TitleResult]:
        """Everything before the group separator (old or badly named releases)."""
        if "-" not in cleaned:
            return None
        match = _search(grammar.REGEX_TITLE_MINIMAL, cleaned)
        if not match:
            return None
        return match.group(1), None

    def attempt_last_resort(self, cleaned: str, shapes: ReleaseShapes) -> Optional[TitleResult]:
        """First run of word characters, dots and brackets."""
        match = _search(grammar.REGEX_TITLE_LAST_RESORT, cleaned)
        return (match.group(1) if match else ""), None


def extract_country(title: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """
    Split a trailing country token off a TV title.

    Args:
        title: Sanitized title

    Returns:
        Tuple of (title, country), country None when nothing was split off
    """
    if not title:
        return title, None

    words = title.split(" ")
    if len(words) < 2:
        return title, None

    if (
        re.match(grammar.COUNTRIES, words[-1], re.IGNORECASE)
        and not re.match(grammar.COUNTRY_STOP_WORDS, words[-2], re.IGNORECASE)
    ):
        return " ".join(words[:-1]), words[-1]
    return title, None
