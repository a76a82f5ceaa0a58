"""
sceneparse CLI Module
Command-line interface for parsing scene release names.
"""

import argparse
import sys
from typing import Iterable, List, Optional, TextIO

from ..core.config import PROJECT_NAME, PROJECT_VERSION, VALIDATION_RULES
from ..core.exceptions import SceneParseError
from ..core.logger import setup_logging
from ..services.release_parser import ReleaseParser
from .display import DisplayManager


class SceneParseCLI:
    """Main CLI class for the scene release parser."""
    
    def __init__(self, parser: Optional[ReleaseParser] = None, display_manager: Optional[DisplayManager] = None):
        """Initialize the CLI."""
        self.release_parser = parser or ReleaseParser()
        self.display_manager = display_manager or DisplayManager()
    
    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog=PROJECT_NAME,
            description=f"{PROJECT_NAME} - Scene Release Name Parser v{PROJECT_VERSION}",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s Show.Name.S02E05.720p.WEB-DL.DTS.X264-GROUP
  %(prog)s --json Some.Movie.2020.1080p.BluRay.x264-GROUP
  %(prog)s --section "TV-X264" Some.Release.Name-GROUP
  cat releases.txt | %(prog)s --json
            """
        )
        
        parser.add_argument(
            '--version',
            action='version',
            version=f'{PROJECT_NAME} {PROJECT_VERSION}'
        )
        parser.add_argument(
            'names',
            nargs='*',
            help='Release names to parse (read from stdin, one per line, when omitted)'
        )
        parser.add_argument(
            '--section', '-s',
            default='',
            help='Section name used as type hint when the type cannot be detected'
        )
        parser.add_argument(
            '--json',
            action='store_true',
            help='Print one JSON object per release instead of a table'
        )
        parser.add_argument(
            '--log-level',
            choices=VALIDATION_RULES["VALID_LOG_LEVELS"],
            help='Logging level (default: SCENEPARSE_LOG_LEVEL or WARNING)'
        )
        
        return parser
    
    def _read_names(self, names: List[str], stdin: TextIO) -> Iterable[str]:
        """Yield release names from arguments, or from stdin when none were given."""
        if names:
            yield from names
            return
        for line in stdin:
            line = line.strip()
            if line:
                yield line
    
    def run(self, args: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
        """
        Run the CLI with given arguments.
        
        Returns:
            Process exit code
        """
        parser = self.create_parser()
        parsed_args = parser.parse_args(args)
        
        if parsed_args.log_level:
            setup_logging(parsed_args.log_level)
        
        try:
            for name in self._read_names(parsed_args.names, stdin or sys.stdin):
                record = self.release_parser.parse(name, parsed_args.section)
                if parsed_args.json:
                    self.display_manager.display_json(record)
                else:
                    self.display_manager.display_release(record)
        except KeyboardInterrupt:
            self.display_manager.console.print("\n[yellow]⚠[/yellow] Operation cancelled by user.")
            return 1
        except SceneParseError as e:
            self.display_manager.display_error(f"An error occurred: {e}")
            return 1
        
        return 0
