"""
Tests for the date parser.
"""

import datetime
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sceneparse.core.exceptions import DateParseError
from sceneparse.services import date_parser


def parse_numeric(release):
    match = date_parser.find_numeric_date(release)
    assert match is not None
    return date_parser.parse_numeric_date(match, release)


class TestExpandYear:
    """Tests for expand_year function."""
    
    @pytest.mark.parametrize("token,year", [
        ("21", 2021),
        ("68", 2068),
        ("69", 1969),
        ("99", 1999),
        ("2020", 2020),
    ])
    def test_expand_year(self, token, year):
        assert date_parser.expand_year(token) == year


class TestNumericDate:
    """Tests for numeric date parsing."""
    
    def test_year_month_day(self):
        assert parse_numeric("Show.2021.09.16.Event-GRP") == datetime.date(2021, 9, 16)
    
    def test_day_month_year(self):
        assert parse_numeric("Show.16.09.2021.Event-GRP") == datetime.date(2021, 9, 16)
    
    def test_month_day_year(self):
        assert parse_numeric("Show.09.16.2021.Event-GRP") == datetime.date(2021, 9, 16)
    
    def test_two_digit_year_first(self):
        assert parse_numeric("Show.21.09.16.Event-GRP") == datetime.date(2021, 9, 16)
    
    def test_music_video_date_has_year_last(self):
        release = "Artist-Title_(Live_At_Festival_16.09.2021)-GRP"
        
        assert parse_numeric(release) == datetime.date(2021, 9, 16)
    
    def test_no_date(self):
        assert date_parser.find_numeric_date("Some.Movie.2020.1080p.BluRay.x264-GRP") is None
    
    def test_invalid_date_raises(self):
        with pytest.raises(DateParseError):
            parse_numeric("Show.2021.02.30.Event-GRP")


class TestMonthnameDate:
    """Tests for month name date parsing."""
    
    def test_day_month_year(self, knowledge):
        release = "Show.1st.March.2020.Event-GRP"
        
        result = date_parser.parse_monthname_date(release, knowledge.months, release)
        
        assert result == datetime.date(2020, 3, 1)
    
    def test_day_defaults_to_first(self, knowledge):
        release = "Some.Magazine.Jan.2021-GRP"
        
        result = date_parser.parse_monthname_date(release, knowledge.months, release)
        
        assert result == datetime.date(2021, 1, 1)
    
    def test_month_year_day(self, knowledge):
        release = "Show.December.2019.24th.Special-GRP"
        
        result = date_parser.parse_monthname_date(release, knowledge.months, release)
        
        assert result == datetime.date(2019, 12, 24)
    
    def test_no_month_name(self, knowledge):
        release = "Some.Movie.2020.1080p-GRP"
        
        assert date_parser.parse_monthname_date(release, knowledge.months, release) is None
    
    def test_invalid_day_raises(self, knowledge):
        release = "Show.31st.April.2020.Event-GRP"
        
        with pytest.raises(DateParseError):
            date_parser.parse_monthname_date(release, knowledge.months, release)


class TestBuildDate:
    """Tests for build_date function."""
    
    def test_build_date(self):
        assert date_parser.build_date("5", "3", 2020, "x") == datetime.date(2020, 3, 5)
    
    def test_build_date_error_mentions_release(self):
        with pytest.raises(DateParseError) as exc_info:
            date_parser.build_date(31, 2, 2020, "Some.Release-GRP")
        
        assert "Some.Release-GRP" in str(exc_info.value)
