"""
Tests for the command-line interface.
"""

import io
import json
import pytest
import sys
from pathlib import Path
from unittest.mock import Mock

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rich.console import Console

from sceneparse.core.exceptions import SceneParseError
from sceneparse.ui.cli import SceneParseCLI
from sceneparse.ui.display import DisplayManager


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def cli(output):
    return SceneParseCLI(display_manager=DisplayManager(Console(file=output, width=200)))


def json_lines(output):
    return [json.loads(line) for line in output.getvalue().splitlines() if line.strip()]


class TestCreateParser:
    """Tests for argument parsing."""
    
    def test_defaults(self, cli):
        args = cli.create_parser().parse_args([])
        
        assert args.names == []
        assert args.section == ""
        assert args.json is False
        assert args.log_level is None
    
    def test_options(self, cli):
        args = cli.create_parser().parse_args(["-s", "TV", "--json", "--log-level", "DEBUG", "A-GRP", "B-GRP"])
        
        assert args.names == ["A-GRP", "B-GRP"]
        assert args.section == "TV"
        assert args.json is True
        assert args.log_level == "DEBUG"
    
    def test_invalid_log_level(self, cli):
        with pytest.raises(SystemExit):
            cli.create_parser().parse_args(["--log-level", "LOUD"])
    
    def test_version(self, cli, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.create_parser().parse_args(["--version"])
        
        assert exc_info.value.code == 0
        assert "1.0.0" in capsys.readouterr().out


class TestRun:
    """Tests for SceneParseCLI.run."""
    
    def test_json_output(self, cli, output, sample_movie_release):
        exit_code = cli.run(["--json", sample_movie_release])
        
        assert exit_code == 0
        records = json_lines(output)
        assert len(records) == 1
        assert records[0]["title"] == "Some Movie"
        assert records[0]["type"] == "Movie"
        assert records[0]["raw"] == sample_movie_release
    
    def test_names_from_stdin(self, cli, output):
        stdin = io.StringIO("Some.Movie.2020.1080p.BluRay.x264-GROUP\n\nVA-Some.Compilation-2021-GROUP\n")
        
        exit_code = cli.run(["--json"], stdin=stdin)
        
        assert exit_code == 0
        assert [record["group"] for record in json_lines(output)] == ["GROUP", "GROUP"]
    
    def test_section_hint(self, cli, output):
        cli.run(["--json", "--section", "TV", "Some.Release.Name-GRP"])
        
        assert json_lines(output)[0]["type"] == "TV"
    
    def test_table_output(self, cli, output, sample_tv_release):
        exit_code = cli.run([sample_tv_release])
        
        assert exit_code == 0
        assert "Show Name" in output.getvalue()
    
    def test_parse_error(self, output):
        release_parser = Mock()
        release_parser.parse.side_effect = SceneParseError("broken pattern")
        cli = SceneParseCLI(parser=release_parser, display_manager=DisplayManager(Console(file=output)))
        
        assert cli.run(["Some.Release-GRP"]) == 1
        assert "broken pattern" in output.getvalue()
    
    def test_keyboard_interrupt(self, output):
        release_parser = Mock()
        release_parser.parse.side_effect = KeyboardInterrupt
        cli = SceneParseCLI(parser=release_parser, display_manager=DisplayManager(Console(file=output)))
        
        assert cli.run(["Some.Release-GRP"]) == 1
        assert "cancelled" in output.getvalue()


class TestMain:
    """Tests for the console entry point."""
    
    def test_main_exits_with_cli_code(self, monkeypatch, sample_movie_release):
        from sceneparse import main as main_module
        
        monkeypatch.setattr(sys, "argv", ["sceneparse", "--json", sample_movie_release])
        
        with pytest.raises(SystemExit) as exc_info:
            main_module.main()
        
        assert exc_info.value.code == 0
