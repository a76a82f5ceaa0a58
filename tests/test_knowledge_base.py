"""
Tests for the knowledge base.
"""

import re
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sceneparse.knowledge import KnowledgeBase, load_knowledge_base
from sceneparse.models.release import Category, ReleaseType

TABLE_CATEGORIES = [
    Category.SOURCE, Category.FORMAT, Category.RESOLUTION, Category.AUDIO,
    Category.DEVICE, Category.OS, Category.LANGUAGE, Category.FLAGS,
]


class TestLoadKnowledgeBase:
    """Tests for load_knowledge_base function."""
    
    def test_returns_knowledge_base(self):
        assert isinstance(load_knowledge_base(), KnowledgeBase)
    
    def test_loaded_once(self):
        assert load_knowledge_base() is load_knowledge_base()
    
    def test_tables_are_read_only(self, knowledge):
        with pytest.raises(TypeError):
            knowledge.source["New"] = ("NEW",)
    
    def test_fields_are_frozen(self, knowledge):
        with pytest.raises(AttributeError):
            knowledge.source = {}


class TestTables:
    """Tests for the recognition tables."""
    
    @pytest.mark.parametrize("category", TABLE_CATEGORIES)
    def test_every_pattern_compiles(self, knowledge, category):
        for key, patterns in knowledge.table(category).items():
            assert isinstance(patterns, tuple)
            for pattern in patterns:
                re.compile(pattern, re.IGNORECASE)
    
    def test_table_without_recognition(self, knowledge):
        assert knowledge.table(Category.TITLE) is None
        assert knowledge.patterns(Category.TITLE, "anything") == ()
    
    def test_patterns_of_unknown_key(self, knowledge):
        assert knowledge.patterns(Category.SOURCE, "Udemy") == ()
    
    def test_patterns_of_single_pattern_key(self, knowledge):
        assert knowledge.patterns(Category.FORMAT, "x264") == ("x264",)
    
    def test_specific_sources_come_first(self, knowledge):
        keys = list(knowledge.source)
        assert keys.index("WEB-DL") < keys.index("WEB")
        assert keys.index("UHD Bluray") < keys.index("Bluray")
    
    def test_windows_mobile_before_windows(self, knowledge):
        keys = list(knowledge.os)
        assert keys.index("Windows Mobile") < keys.index("Windows")
    
    def test_language_name(self, knowledge):
        assert knowledge.language_name("de") == "German"
        assert knowledge.language_name("multi") == "Multi"
    
    def test_months(self, knowledge):
        assert sorted(knowledge.months) == list(range(1, 13))
        assert re.fullmatch(knowledge.months[3], "Maerz")
    
    def test_context_flags_are_flags(self, knowledge):
        assert knowledge.context_flags <= set(knowledge.flags)
        for flag in knowledge.context_flags:
            assert any("%" in pattern for pattern in knowledge.flags[flag])


class TestImplications:
    """Tests for the type implication sets."""
    
    def test_flag_sets_reference_known_flags(self, knowledge):
        flag_sets = [
            knowledge.flags_games, knowledge.flags_apps, knowledge.flags_music,
            knowledge.flags_movie, knowledge.flags_ebook, knowledge.flags_anime,
            knowledge.flags_xxx,
        ]
        for flag_set in flag_sets:
            assert flag_set <= set(knowledge.flags)
    
    def test_source_sets_reference_known_sources(self, knowledge):
        source_sets = [
            knowledge.sources_games, knowledge.sources_music, knowledge.sources_mvid,
            knowledge.sources_tv, knowledge.sources_movies,
        ]
        for source_set in source_sets:
            assert source_set <= set(knowledge.source)
    
    def test_format_sets_reference_known_formats(self, knowledge):
        for format_set in (knowledge.formats_music, knowledge.formats_video, knowledge.formats_mvid):
            assert format_set <= set(knowledge.format)


class TestHints:
    """Tests for sports, bookware and section hints."""
    
    def test_type_hints_name_release_types(self, knowledge):
        for type_name in knowledge.type_hints:
            ReleaseType(type_name)
    
    def test_hint_patterns_compile(self, knowledge):
        for patterns in knowledge.type_hints.values():
            for pattern in patterns:
                re.compile(pattern)
        for pattern in knowledge.sports + knowledge.bookware:
            re.compile(pattern)
