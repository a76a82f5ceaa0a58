"""
Display Formatters Module
Handles rendering of parsed releases as text and rich tables.
"""

import datetime
from enum import Enum
from typing import Any, List, Mapping, Tuple

from rich.console import Console
from rich.table import Table
from rich import box

from ..core.config import UI_CONFIG
from ..models.release import ReleaseRecord, ReleaseType

# Field order of the rendered output
FIELD_ORDER = [
    "title", "title_extra", "group", "year", "date", "season", "episode", "disc",
    "flags", "source", "format", "resolution", "audio", "device", "os", "version",
    "language", "country", "type",
]


def format_value(value: Any) -> str:
    """Render one attribute value (dates as dd.mm.YYYY, lists comma separated)."""
    if isinstance(value, datetime.date):
        return value.strftime("%d.%m.%Y")
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Mapping):
        return ", ".join(str(v) for v in value.values())
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


def field_label(record: ReleaseRecord, field_name: str) -> str:
    """
    Return the display label of a field.
    
    The title becomes Artist/Author/Show/Publisher/Name when a title extra
    exists, and the title extra is named after the source (Song, Album, EP).
    """
    release_type = record.type
    
    if record.title_extra:
        if field_name == "title":
            if release_type in (ReleaseType.EBOOK, ReleaseType.ABOOK):
                return "Author"
            if release_type in (ReleaseType.MUSIC, ReleaseType.MUSIC_VIDEO):
                return "Artist"
            if release_type in (ReleaseType.TV, ReleaseType.ANIME):
                return "Show"
            if release_type == ReleaseType.XXX:
                return "Publisher"
            return "Name"
        if field_name == "title_extra":
            if record.has_attribute(["CD Single", "Web Single", "VLS"], "source"):
                return "Song"
            if record.has_attribute(["CD Album", "Vinyl", "LP"], "source"):
                return "Album"
            if record.has_attribute(["EP", "CD EP"], "source"):
                return "EP"
            return "Title"
    elif release_type == ReleaseType.SPORTS and field_name == "title":
        return "Name"
    
    if release_type == ReleaseType.EBOOK and field_name == "episode":
        return "Issue"
    
    return field_name[:1].upper() + field_name[1:]


def release_rows(record: ReleaseRecord) -> List[Tuple[str, str]]:
    """Return (label, value) pairs of every set field, raw name excluded."""
    rows = []
    for field_name in FIELD_ORDER:
        value = getattr(record, field_name)
        if value is None:
            continue
        rows.append((field_label(record, field_name), format_value(value)))
    return rows


def format_release(record: ReleaseRecord) -> str:
    """
    Render a release as ``Label: value`` pairs separated by `` / ``.
    
    Args:
        record: Parsed release
        
    Returns:
        One line description of the release
    """
    return " / ".join(f"{label}: {value}" for label, value in release_rows(record))


class DisplayFormatters:
    """Formatters for displaying parsed releases."""
    
    def __init__(self, console: Console):
        self.console = console
    
    def create_release_table(self, record: ReleaseRecord) -> Table:
        """Create a two column table of a parsed release."""
        table = Table(
            title=record.raw,
            box=box.ROUNDED,
            border_style=UI_CONFIG["BORDER_STYLE"],
            header_style=UI_CONFIG["HEADER_STYLE"],
            show_header=True,
        )
        table.add_column("Attribute", style="bold cyan", width=UI_CONFIG["LABEL_WIDTH"], no_wrap=True)
        table.add_column("Value", style="white", max_width=UI_CONFIG["VALUE_WIDTH"])
        
        for label, value in release_rows(record):
            table.add_row(label, value)
        return table
    
    def display_release(self, record: ReleaseRecord):
        """Print a parsed release as a table."""
        self.console.print(self.create_release_table(record))
