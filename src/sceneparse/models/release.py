"""
Release record models.
"""

import datetime
from dataclasses import dataclass, field, fields
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..core.config import PARSER_CONFIG


class ReleaseType(str, Enum):
    """Content type of a release. Exactly one is assigned per parse."""
    MOVIE = "Movie"
    TV = "TV"
    ANIME = "Anime"
    DOCU = "Docu"
    MUSIC = "Music"
    MUSIC_VIDEO = "MusicVideo"
    GAME = "Game"
    APP = "App"
    EBOOK = "eBook"
    ABOOK = "ABook"
    BOOKWARE = "Bookware"
    FONT = "Font"
    SPORTS = "Sports"
    XXX = "XXX"


class Category(str, Enum):
    """Attribute categories, named after the record fields they fill."""
    GROUP = "group"
    TITLE = "title"
    TITLE_EXTRA = "title_extra"
    FLAGS = "flags"
    OS = "os"
    DEVICE = "device"
    VERSION = "version"
    EPISODE = "episode"
    SEASON = "season"
    DISC = "disc"
    DATE = "date"
    YEAR = "year"
    FORMAT = "format"
    SOURCE = "source"
    RESOLUTION = "resolution"
    AUDIO = "audio"
    LANGUAGE = "language"
    COUNTRY = "country"
    TYPE = "type"
    # Derived from the parsed date, only used when stripping text
    MONTHNAME = "monthname"
    DAYMONTH = "daymonth"


Episode = Union[int, str]
Year = Union[int, str]


class _AttributeAccess:
    """Field lookup shared by the in-flight attributes and the final record."""

    def get(self, category: Union[Category, str]) -> Any:
        """Return the value of a field by category."""
        category = Category(category)
        if category in (Category.MONTHNAME, Category.DAYMONTH):
            category = Category.DATE
        return getattr(self, category.value)

    def values_of(self, category: Union[Category, str]) -> List[str]:
        """Return a field's value(s) as a list of strings (empty when absent)."""
        value = self.get(category)
        if value is None:
            return []
        if isinstance(value, dict):
            return [str(v) for v in value.values()]
        if isinstance(value, (list, tuple)):
            return [str(v) for v in value]
        if isinstance(value, Enum):
            return [value.value]
        return [str(value)]

    def has_attribute(self, values: Union[str, Iterable[str]], field_name: Union[Category, str]) -> bool:
        """
        Case-insensitive membership test against a scalar or multi-valued field.
        
        Args:
            values: One value or several values to look for
            field_name: Field to check
            
        Returns:
            True if any of the values is present in the field
        """
        if isinstance(values, str):
            values = [values]
        present = {value.lower() for value in self.values_of(field_name)}
        if not present:
            return False
        return any(value.lower() in present for value in values)


@dataclass
class ReleaseAttributes(_AttributeAccess):
    """Partial record filled pass by pass while a release name is parsed."""
    group: str = PARSER_CONFIG["NO_GROUP"]
    title: Optional[str] = None
    title_extra: Optional[str] = None
    year: Optional[Year] = None
    date: Optional[datetime.date] = None
    season: Optional[int] = None
    episode: Optional[Episode] = None
    disc: Optional[int] = None
    flags: Optional[List[str]] = None
    source: Optional[str] = None
    format: Optional[str] = None
    resolution: Optional[str] = None
    audio: Optional[List[str]] = None
    device: Optional[str] = None
    os: Optional[str] = None
    version: Optional[str] = None
    language: Optional[Dict[str, str]] = None
    country: Optional[str] = None
    type: Optional[ReleaseType] = None

    def set(self, category: Union[Category, str], value: Any):
        """Set a field, storing empty strings and empty collections as None."""
        if value == "" or (isinstance(value, (list, tuple, dict)) and not value):
            value = None
        setattr(self, Category(category).value, value)

    def discard_flag(self, flag: str):
        """Remove a flag if present."""
        if self.flags and flag in self.flags:
            self.set(Category.FLAGS, [f for f in self.flags if f != flag])


@dataclass(frozen=True)
class ReleaseRecord(_AttributeAccess):
    """Parsed scene release. Built once per input and never modified."""
    raw: str
    type: ReleaseType
    group: str = PARSER_CONFIG["NO_GROUP"]
    title: Optional[str] = None
    title_extra: Optional[str] = None
    year: Optional[Year] = None
    date: Optional[datetime.date] = None
    season: Optional[int] = None
    episode: Optional[Episode] = None
    disc: Optional[int] = None
    flags: Optional[Tuple[str, ...]] = None
    source: Optional[str] = None
    format: Optional[str] = None
    resolution: Optional[str] = None
    audio: Optional[Tuple[str, ...]] = None
    device: Optional[str] = None
    os: Optional[str] = None
    version: Optional[str] = None
    language: Optional[Mapping[str, str]] = field(default=None, hash=False)
    country: Optional[str] = None

    @classmethod
    def from_attributes(cls, raw: str, attributes: ReleaseAttributes) -> "ReleaseRecord":
        """Freeze the attributes collected by the pipeline."""
        return cls(
            raw=raw,
            type=attributes.type or ReleaseType(PARSER_CONFIG["DEFAULT_TYPE"]),
            group=attributes.group,
            title=attributes.title or None,
            title_extra=attributes.title_extra or None,
            year=attributes.year,
            date=attributes.date,
            season=attributes.season,
            episode=attributes.episode,
            disc=attributes.disc,
            flags=tuple(attributes.flags) if attributes.flags else None,
            source=attributes.source,
            format=attributes.format,
            resolution=attributes.resolution,
            audio=tuple(attributes.audio) if attributes.audio else None,
            device=attributes.device,
            os=attributes.os,
            version=attributes.version,
            language=MappingProxyType(dict(attributes.language)) if attributes.language else None,
            country=attributes.country,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary (absent fields omitted)."""
        data: Dict[str, Any] = {}
        for record_field in fields(self):
            value = getattr(self, record_field.name)
            if value is None:
                continue
            if isinstance(value, ReleaseType):
                value = value.value
            elif isinstance(value, datetime.date):
                value = value.isoformat()
            elif isinstance(value, tuple):
                value = list(value)
            elif isinstance(value, MappingProxyType):
                value = dict(value)
            data[record_field.name] = value
        return data
