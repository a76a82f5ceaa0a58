"""
Release parser module: runs every parsing pass in order.

The order of the passes matters. Later passes see (and may exclude) what
earlier passes found, and source, flags and language run twice.
"""

import logging
import re
from typing import Optional

from ..core.exceptions import DateParseError
from ..core.validation import validate_release_name
from ..knowledge import grammar
from ..knowledge.base import KnowledgeBase, load_knowledge_base
from ..models.release import Category, ReleaseAttributes, ReleaseRecord, ReleaseType
from ..utils.string_utils import is_all_uppercase, sanitize_text, ucwords
from . import date_parser
from .attribute_extractor import AttributeExtractor
from .normalizer import ResultNormalizer
from .pattern_compiler import PatternCompiler
from .text_stripper import TextStripper
from .title_extractor import TitleExtractor, extract_country
from .type_classifier import ReleaseShapes, TypeClassifier

logger = logging.getLogger(__name__)

C = Category

# Flags that make a season/episode look-alike a false positive
EPISODE_BLOCKING_FLAGS = ["Extended", "Special Edition"]


class ReleaseParser:
    """Parses scene release names into release records."""

    def __init__(self, knowledge: Optional[KnowledgeBase] = None, strict: Optional[bool] = None):
        """
        Initialize the release parser.

        Args:
            knowledge: Knowledge base (defaults to the process wide one)
            strict: Raise on unknown placeholders (defaults to PARSER_CONFIG)
        """
        self.knowledge = knowledge or load_knowledge_base()
        self.compiler = PatternCompiler(self.knowledge, strict=strict)
        self.stripper = TextStripper(self.knowledge)
        self.extractor = AttributeExtractor(self.knowledge, self.compiler)
        self.classifier = TypeClassifier(self.knowledge)
        self.titles = TitleExtractor(self.knowledge, self.compiler, self.stripper)
        self.normalizer = ResultNormalizer()

    def parse(self, release_name: str, section_hint: str = "") -> ReleaseRecord:
        """
        Parse a release name.

        Args:
            release_name: Scene release name
            section_hint: Optional section name, used when the type can't be
                detected from the name itself

        Returns:
            Frozen release record

        Raises:
            InvalidReleaseNameError: If release_name is not a string
        """
        release = validate_release_name(release_name)
        attributes = ReleaseAttributes()
        shapes = ReleaseShapes(release, attributes, self.knowledge)

        self._parse_group(release, attributes)
        self._parse_flags(release, attributes)
        self._parse_os(release, attributes, shapes)
        self._parse_device(release, attributes, shapes)
        self._parse_version(release, attributes, shapes)
        self._parse_episode(release, attributes, shapes)
        self._parse_season(release, attributes, shapes)
        self._parse_date(release, attributes, shapes)
        self._parse_year(release, attributes, shapes)
        self._parse_format(release, attributes, shapes)
        self._parse_source(release, attributes, shapes)
        self._parse_resolution(release, attributes, shapes)
        self._parse_audio(release, attributes, shapes)
        self._parse_language(release, attributes)

        # Second passes, now that more context is known
        self._parse_source(release, attributes, shapes)
        self._parse_flags(release, attributes)
        self._parse_language(release, attributes)

        attributes.type = self.classifier.classify(shapes, section_hint or "")
        title, title_extra = self.titles.extract(release, shapes)
        attributes.set(C.TITLE, title)
        attributes.set(C.TITLE_EXTRA, title_extra)

        if attributes.type == ReleaseType.TV:
            title, country = extract_country(attributes.title)
            if country:
                attributes.set(C.TITLE, title)
                attributes.set(C.COUNTRY, country)

        self.normalizer.normalize(attributes)
        logger.debug(f"Parsed {release!r}: {attributes}")
        return ReleaseRecord.from_attributes(release_name, attributes)

    # Passes

    def _parse_group(self, release: str, attributes: ReleaseAttributes):
        match = re.search(grammar.REGEX_GROUP, release)
        if match:
            attributes.set(C.GROUP, match.group(1))

    def _parse_flags(self, release: str, attributes: ReleaseAttributes):
        flags = self.extractor.extract(C.FLAGS, release, attributes)
        if not flags:
            return
        # DC is also the Dreamcast device tag
        if attributes.device == "Sega Dreamcast" and "Directors Cut" in flags:
            flags.remove("Directors Cut")
        attributes.set(C.FLAGS, flags)
        logger.debug(f"Flags: {flags}")

    def _parse_os(self, release: str, attributes: ReleaseAttributes, shapes: ReleaseShapes):
        if shapes.is_bookware():
            return
        systems = self.extractor.extract(C.OS, release, attributes)
        if systems:
            attributes.set(C.OS, systems[0])

    def _parse_device(self, release: str, attributes: ReleaseAttributes, shapes: ReleaseShapes):
        if shapes.is_bookware():
            return
        devices = self.extractor.extract(C.DEVICE, release, attributes)
        if devices:
            # Last one is probably the right one
            attributes.set(C.DEVICE, devices[-1])

    def _parse_version(self, release: str, attributes: ReleaseAttributes, shapes: ReleaseShapes):
        if shapes.is_bookware():
            match = re.search(r"[._-]" + grammar.REGEX_VERSION_BOOKWARE + r"[._-]", release, re.IGNORECASE)
        elif not (shapes.is_ebook() or shapes.is_abook() or shapes.is_music()):
            cleaned = self.stripper.strip(release, [C.FLAGS, C.DEVICE], attributes)
            match = re.search(r"[._-]" + grammar.REGEX_VERSION + r"[._-]", cleaned, re.IGNORECASE)
        else:
            return

        if match:
            version = match.group(1).strip(".")
            # Some apps have win glued to the version
            if "win" in version.lower():
                version = version.lower().replace("win", "").strip(".")
            attributes.set(C.VERSION, version)

    def _episode_pattern(self, shapes: ReleaseShapes) -> str:
        if shapes.is_ebook() or shapes.is_abook() or shapes.is_music():
            return grammar.REGEX_EPISODE_OTHER
        return grammar.REGEX_EPISODE

    def _parse_episode(self, release: str, attributes: ReleaseAttributes, shapes: ReleaseShapes):
        if (
            attributes.os == "Symbian"
            or attributes.device == "Playstation"
            or re.search(grammar.REGEX_NOKIA, release, re.IGNORECASE)
            or attributes.has_attribute(EPISODE_BLOCKING_FLAGS, C.FLAGS)
            or shapes.is_bookware()
        ):
            return

        pattern = r"[._-]" + self._episode_pattern(shapes) + r"[._-]"
        match = re.search(pattern, release, re.IGNORECASE)
        if match:
            token = match.group(1) if match.group(1) else match.group(2)
            if token:
                attributes.set(C.EPISODE, normalize_episode(token))
            return

        match = re.search(r"[._-]" + grammar.REGEX_DISC + r"[._-]", release, re.IGNORECASE)
        if match:
            attributes.set(C.DISC, int(match.group(1)))

    def _parse_season(self, release: str, attributes: ReleaseAttributes, shapes: ReleaseShapes):
        if shapes.is_bookware() or shapes.is_ebook():
            return
        match = re.search(grammar.REGEX_SEASON, release, re.IGNORECASE)
        if not match:
            return

        token = next((group for group in match.groups() if group), None)
        if token is None:
            return

        season = int(token)
        # Nokia S40/S60 phones
        if season in (40, 60) and (
            attributes.os == "Symbian" or re.search(grammar.REGEX_NOKIA, release, re.IGNORECASE)
        ):
            return
        attributes.set(C.SEASON, season)

    def _parse_date(self, release: str, attributes: ReleaseAttributes, shapes: ReleaseShapes):
        try:
            match = date_parser.find_numeric_date(release)
            if match:
                attributes.set(C.DATE, date_parser.parse_numeric_date(match, release))
            else:
                cleaned = self.stripper.strip(
                    release, C.EPISODE, attributes, episode_pattern=self._episode_pattern(shapes)
                )
                attributes.set(C.DATE, date_parser.parse_monthname_date(cleaned, self.knowledge.months, release))
        except DateParseError as e:
            logger.warning(str(e))

    def _parse_year(self, release: str, attributes: ReleaseAttributes, shapes: ReleaseShapes):
        version_pattern = grammar.REGEX_VERSION_BOOKWARE if shapes.is_bookware() else grammar.REGEX_VERSION
        cleaned = self.stripper.strip(release, C.VERSION, attributes, version_pattern=version_pattern)

        years = [match.group(1) for match in re.finditer(grammar.REGEX_YEAR, cleaned, re.IGNORECASE)]
        if years:
            # Last one is normally the real year, the others belong to the title
            year = years[-1]
            attributes.set(C.YEAR, int(year) if year.isdigit() else sanitize_text(year))
        elif attributes.date is not None:
            attributes.set(C.YEAR, attributes.date.year)

    def _parse_format(self, release: str, attributes: ReleaseAttributes, shapes: ReleaseShapes):
        if shapes.is_bookware():
            return
        formats = self.extractor.extract(C.FORMAT, release, attributes)
        if formats:
            attributes.set(C.FORMAT, formats[0])

    def _parse_source(self, release: str, attributes: ReleaseAttributes, shapes: ReleaseShapes):
        if shapes.is_bookware():
            vendor = shapes.bookware_vendor()
            if vendor:
                source = vendor.strip("._-")
                if is_all_uppercase(source):
                    source = ucwords(source)
                attributes.set(C.SOURCE, source)
            return

        sources = self.extractor.extract(C.SOURCE, release, attributes)
        if sources:
            # First one should be the right one
            attributes.set(C.SOURCE, sources[0])

    def _parse_resolution(self, release: str, attributes: ReleaseAttributes, shapes: ReleaseShapes):
        if shapes.is_bookware() or shapes.is_ebook() or shapes.is_abook():
            return
        resolutions = self.extractor.extract(C.RESOLUTION, release, attributes)
        if resolutions:
            attributes.set(C.RESOLUTION, resolutions[0])

    def _parse_audio(self, release: str, attributes: ReleaseAttributes, shapes: ReleaseShapes):
        if shapes.is_bookware() or shapes.is_ebook():
            return
        audio = self.extractor.extract(C.AUDIO, release, attributes)
        if audio:
            attributes.set(C.AUDIO, audio)

    def _parse_language(self, release: str, attributes: ReleaseAttributes):
        template = self.compiler.compile(
            grammar.REGEX_LANGUAGE,
            attributes,
            only=(C.AUDIO, C.DEVICE, C.FLAGS, C.FORMAT, C.GROUP, C.LANGUAGE, C.OS, C.RESOLUTION, C.SOURCE, C.YEAR),
        )

        languages = {}
        for code, patterns in self.knowledge.languages.items():
            for pattern in patterns:
                regex = template.replace("%language_pattern%", pattern)
                if re.search(regex, release, re.IGNORECASE):
                    languages[code] = self.knowledge.language_name(code)
                    break

        if languages:
            attributes.set(C.LANGUAGE, languages)


def normalize_episode(token: str):
    """
    Turn an episode token into an int, or a dash joined string of ints for
    multiple episodes ("03E04" -> "3-4").
    """
    if token.isdigit():
        return int(token)
    numbers = [str(int(number)) for number in re.findall(r"\d+", token)]
    return "-".join(numbers)


_default_parser: Optional[ReleaseParser] = None


def parse(release_name: str, section_hint: str = "") -> ReleaseRecord:
    """
    Parse a scene release name with the process wide parser.

    Args:
        release_name: Scene release name
        section_hint: Optional section name used as type fallback

    Returns:
        Frozen release record
    """
    global _default_parser
    if _default_parser is None:
        _default_parser = ReleaseParser()
    return _default_parser.parse(release_name, section_hint)
