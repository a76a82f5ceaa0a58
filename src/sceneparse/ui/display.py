"""
Display management for the sceneparse CLI with Rich components.
"""

import json
from typing import Optional

from rich.console import Console

from ..models.release import ReleaseRecord
from .formatters import DisplayFormatters


class DisplayManager:
    """Manages output of parsed releases (rich tables or JSON lines)."""
    
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.formatters = DisplayFormatters(self.console)
    
    def display_release(self, record: ReleaseRecord):
        """Display a parsed release in a table."""
        self.formatters.display_release(record)
    
    def display_json(self, record: ReleaseRecord):
        """Print a parsed release as one JSON object on a single line."""
        self.console.print(json.dumps(record.to_dict()), soft_wrap=True, highlight=False, markup=False)
    
    def display_error(self, message: str):
        """Display an error message."""
        self.console.print(f"[bold red]✗[/bold red] {message}")
