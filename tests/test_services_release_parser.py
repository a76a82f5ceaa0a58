"""
Tests for the release parser pipeline.
"""

import datetime
import pytest
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import sceneparse
from sceneparse.core.config import PARSER_CONFIG
from sceneparse.core.exceptions import InvalidReleaseNameError
from sceneparse.models.release import ReleaseRecord, ReleaseType
from sceneparse.services.release_parser import normalize_episode, parse
from sceneparse.utils import sanitize_text

SAMPLE_RELEASES = [
    "Show.Name.S02E05.720p.WEB-DL.DTS.X264-GROUP",
    "Some.Movie.2020.1080p.BluRay.x264-GROUP",
    "VA-Some.Compilation-2021-GROUP",
    "Show.S01E03E04.720p.HDTV.x264-GRP",
    "Some.Game.Disc2.PS2-GRP",
    "Udemy.Learn.Python.Programming-GRP",
    "Show.Name.2021.09.16.720p.WEB.x264-GRP",
    "Some_Release_Name",
    "",
    "-",
    "....",
]


class TestNormalizeEpisode:
    """Tests for normalize_episode function."""
    
    @pytest.mark.parametrize("token,episode", [
        ("0", 0),
        ("05", 5),
        ("12", 12),
        ("03E04", "3-4"),
        ("1-2", "1-2"),
        ("01-E02", "1-2"),
    ])
    def test_normalize_episode(self, token, episode):
        assert normalize_episode(token) == episode


class TestScenarios:
    """End to end parses of typical release names."""
    
    def test_tv_episode(self, release_parser, sample_tv_release):
        record = release_parser.parse(sample_tv_release)
        
        assert record.type == ReleaseType.TV
        assert record.season == 2
        assert record.episode == 5
        assert record.resolution == "720p"
        assert record.source == "WEB-DL"
        assert "DTS" in record.audio
        assert record.format == "x264"
        assert record.group == "GROUP"
        assert record.title == "Show Name"
    
    def test_various_artists(self, release_parser, sample_music_release):
        record = release_parser.parse(sample_music_release)
        
        assert record.type == ReleaseType.MUSIC
        assert record.title == "Various"
        assert record.title_extra == "Some Compilation"
        assert record.year == 2021
        assert record.group == "GROUP"
    
    def test_movie(self, release_parser, sample_movie_release):
        record = release_parser.parse(sample_movie_release)
        
        assert record.type == ReleaseType.MOVIE
        assert record.year == 2020
        assert record.resolution == "1080p"
        assert record.source == "Bluray"
        assert record.format == "x264"
        assert record.title == "Some Movie"
    
    def test_no_group(self, release_parser):
        record = release_parser.parse("Some_Release_Name")
        
        assert record.group == "NOGRP"
        assert record.title == "Some Release Name"
        assert record.type == ReleaseType.MOVIE
    
    def test_multi_episode(self, release_parser):
        record = release_parser.parse("Show.S01E03E04.720p.HDTV.x264-GRP")
        
        assert record.type == ReleaseType.TV
        assert record.season == 1
        assert record.episode == "3-4"
    
    def test_disc(self, release_parser):
        record = release_parser.parse("Some.Game.Disc2.PS2-GRP")
        
        assert record.disc == 2
        assert record.episode is None
        assert record.device == "Playstation 2"
        assert record.type == ReleaseType.GAME
        assert record.title == "Some Game"
    
    def test_phone_model_is_not_a_season(self, release_parser):
        record = release_parser.parse("Some.App.S60.Symbian-GRP")
        
        assert record.os == "Symbian"
        assert record.season is None
        assert record.type == ReleaseType.APP
    
    def test_app(self, release_parser):
        record = release_parser.parse("Some.App.v1.2.3.Linux-GRP")
        
        assert record.type == ReleaseType.APP
        assert record.version == "v1.2.3"
        assert record.os == "Linux"
        assert record.title == "Some App"
    
    def test_dated_tv(self, release_parser):
        record = release_parser.parse("Show.Name.2021.09.16.720p.WEB.x264-GRP")
        
        assert record.date == datetime.date(2021, 9, 16)
        assert record.year == 2021
        assert record.type == ReleaseType.TV
        assert record.title == "Show Name"
    
    def test_unknown_decade_year(self, release_parser):
        record = release_parser.parse("Some.Movie.199X.DVDRip.XviD-GRP")
        
        assert record.year == "199X"
        assert record.type == ReleaseType.MOVIE
    
    def test_tv_country(self, release_parser):
        record = release_parser.parse("Show.Name.US.S01E01.720p.HDTV.x264-GRP")
        
        assert record.title == "Show Name"
        assert record.country == "US"
    
    def test_bookware(self, release_parser):
        record = release_parser.parse("Udemy.Learn.Python.Programming-GRP")
        
        assert record.type == ReleaseType.BOOKWARE
        assert record.source == "Udemy"
        assert record.title == "Learn Python Programming"
        assert record.flags is None
    
    def test_dreamcast_is_not_directors_cut(self, release_parser):
        record = release_parser.parse("Some.Game.DC.PAL-GRP")
        
        assert record.device == "Sega Dreamcast"
        assert not record.has_attribute("Directors Cut", "flags")
        assert record.type == ReleaseType.GAME
    
    def test_section_hint(self, release_parser):
        assert release_parser.parse("Some.Release.Name-GRP").type == ReleaseType.MOVIE
        assert release_parser.parse("Some.Release.Name-GRP", "TV").type == ReleaseType.TV
    
    def test_tag_right_after_date_is_not_title_extra(self, release_parser):
        record = release_parser.parse("Show.2020.02.15.720p.HDTV.x264-GRP")
        
        assert record.date == datetime.date(2020, 2, 15)
        assert record.resolution == "720p"
        assert record.title == "Show"
        assert record.title_extra is None
    
    def test_episode_range_is_not_episode_title(self, release_parser):
        record = release_parser.parse("Show.Name.S01E01-E02.720p.HDTV.x264-GRP")
        
        assert record.type == ReleaseType.TV
        assert record.episode == "1-2"
        assert record.title == "Show Name"
        assert record.title_extra is None
    
    def test_episode_range_keeps_episode_title(self, release_parser):
        record = release_parser.parse("Show.Name.S01E01-E02.The.Title.720p.HDTV.x264-GRP")
        
        assert record.episode == "1-2"
        assert record.title_extra == "The Title"
    
    def test_long_tag_run_parses_quickly(self, release_parser):
        release = "Artist-" + "..".join(["2019"] * 26) + "-x-GRP"
        
        start = time.perf_counter()
        record = release_parser.parse(release)
        elapsed = time.perf_counter() - start
        
        assert elapsed < 2.0
        assert record.group == "GRP"
    
    def test_bracketed_title_end_is_kept(self, release_parser):
        record = release_parser.parse("Artist-Album_(Acoustic_Sessions)-GRP")
        
        assert record.type == ReleaseType.MUSIC
        assert record.title == "Artist"
        assert record.title_extra == "Album (Acoustic Sessions)"


class TestProperties:
    """Properties that hold for every input."""
    
    @pytest.mark.parametrize("release", SAMPLE_RELEASES)
    def test_deterministic(self, release_parser, release):
        assert release_parser.parse(release) == release_parser.parse(release)
    
    @pytest.mark.parametrize("release", SAMPLE_RELEASES)
    def test_type_is_always_set(self, release_parser, release):
        assert isinstance(release_parser.parse(release).type, ReleaseType)
    
    @pytest.mark.parametrize("release", SAMPLE_RELEASES)
    def test_group_is_never_empty(self, release_parser, release):
        assert release_parser.parse(release).group
    
    @pytest.mark.parametrize("release", SAMPLE_RELEASES)
    def test_episode_and_disc_exclusive(self, release_parser, release):
        record = release_parser.parse(release)
        
        assert record.episode is None or record.disc is None
    
    @pytest.mark.parametrize("release", SAMPLE_RELEASES)
    def test_title_is_sanitized(self, release_parser, release):
        record = release_parser.parse(release)
        
        if record.title:
            assert sanitize_text(record.title, record.type.value) == record.title


class TestParseFunction:
    """Tests for the module level parse function."""
    
    def test_returns_record(self, sample_movie_release):
        record = parse(sample_movie_release)
        
        assert isinstance(record, ReleaseRecord)
        assert record.raw == sample_movie_release
    
    def test_package_export(self, release_parser, sample_tv_release):
        assert sceneparse.parse(sample_tv_release) == release_parser.parse(sample_tv_release)
    
    def test_invalid_input(self):
        with pytest.raises(InvalidReleaseNameError):
            parse(None)
    
    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            parse(123)
    
    def test_raw_keeps_surrounding_whitespace(self, release_parser):
        release = "  Some.Movie.2020.1080p.BluRay.x264-GROUP "
        record = release_parser.parse(release)
        
        assert record.raw == release
        assert record.group == "GROUP"
        assert record.title == "Some Movie"
    
    def test_raw_is_not_truncated(self, release_parser):
        release = "Some.Movie." * 60 + "2020.1080p.x264-GRP"
        record = release_parser.parse(release)
        
        assert len(release) > PARSER_CONFIG["MAX_RELEASE_LENGTH"]
        assert record.raw == release
