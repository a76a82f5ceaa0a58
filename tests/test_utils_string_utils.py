"""
Tests for string utility functions.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sceneparse.utils.string_utils import (
    is_all_uppercase,
    non_capturing,
    sanitize_text,
    ucwords,
)


class TestUcwords:
    """Tests for ucwords function."""
    
    def test_ucwords(self):
        assert ucwords("hello WORLD") == "Hello World"
    
    def test_ucwords_single_word(self):
        assert ucwords("UDEMY") == "Udemy"


class TestIsAllUppercase:
    """Tests for is_all_uppercase function."""
    
    def test_uppercase(self):
        assert is_all_uppercase("SHOW NAME")
        assert is_all_uppercase("SOME-SHOW")
    
    def test_mixed_case(self):
        assert not is_all_uppercase("Show NAME")
    
    def test_empty_or_digits(self):
        assert not is_all_uppercase("")
        assert not is_all_uppercase("2020")


class TestSanitizeText:
    """Tests for sanitize_text function."""
    
    def test_separators_become_spaces(self):
        assert sanitize_text("Show.Name_Part") == "Show Name Part"
    
    def test_collapses_whitespace(self):
        assert sanitize_text("Show..Name") == "Show Name"
    
    def test_strips_dashes(self):
        assert sanitize_text("-Show.Name-") == "Show Name"
        assert sanitize_text("Title-_") == "Title"
    
    def test_uppercase_multi_word_is_title_cased(self):
        assert sanitize_text("SHOW.NAME") == "Show Name"
    
    def test_uppercase_single_word_is_kept(self):
        assert sanitize_text("NASA") == "NASA"
    
    def test_special_words_get_a_point(self):
        assert sanitize_text("Artist.feat.Someone") == "Artist feat. Someone"
        assert sanitize_text("Collection.Vol.1") == "Collection Vol. 1"
    
    def test_vs_except_for_apps(self):
        assert sanitize_text("Team1.vs.Team2") == "Team1 vs. Team2"
        assert sanitize_text("Team1.vs.Team2", "App") == "Team1 vs Team2"
    
    def test_xxx_domains(self):
        assert sanitize_text("Brazzers.com", "XXX") == "Brazzers.com"
        assert sanitize_text("Brazzers.com") == "Brazzers com"
    
    @pytest.mark.parametrize("text,release_type", [
        ("Artist.feat.Someone", None),
        ("SHOW.NAME", "TV"),
        ("Site.com.Scene.Name", "XXX"),
        ("Team1.vs.Team2", "Sports"),
        ("Title-_", None),
        ("_-Artist - Album-. ", "ABook"),
    ])
    def test_idempotent(self, text, release_type):
        once = sanitize_text(text, release_type)
        assert sanitize_text(once, release_type) == once
    
    def test_empty(self):
        assert sanitize_text(None) == ""
        assert sanitize_text("") == ""


class TestNonCapturing:
    """Tests for non_capturing function."""
    
    def test_groups_become_non_capturing(self):
        assert non_capturing(r"(a)(?:b)(c)") == r"(?:a)(?:b)(?:c)"
    
    def test_escaped_brackets_are_kept(self):
        assert non_capturing(r"\((\d+)\)") == r"\((?:\d+)\)"
    
    def test_lookarounds_are_kept(self):
        assert non_capturing(r"(?=x)(?<!y)") == r"(?=x)(?<!y)"
