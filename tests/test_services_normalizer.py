"""
Tests for the result normalizer.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sceneparse.models.release import ReleaseType
from sceneparse.services.normalizer import ResultNormalizer


@pytest.fixture
def normalizer():
    return ResultNormalizer()


class TestResultNormalizer:
    """Tests for ResultNormalizer class."""
    
    def test_returns_same_object(self, normalizer, make_attributes):
        attributes = make_attributes(type=ReleaseType.MOVIE)
        
        assert normalizer.normalize(attributes) is attributes
    
    def test_trainer_only_for_games_and_apps(self, normalizer, make_attributes):
        movie = normalizer.normalize(make_attributes(type=ReleaseType.MOVIE, flags=["Trainer", "Proper"]))
        game = normalizer.normalize(make_attributes(type=ReleaseType.GAME, flags=["Trainer"]))
        
        assert movie.flags == ["Proper"]
        assert game.flags == ["Trainer"]
    
    def test_dvd_source_becomes_dvdr_format(self, normalizer, make_attributes):
        attributes = normalizer.normalize(make_attributes(type=ReleaseType.MOVIE, source="DVD"))
        
        assert attributes.format == "DVDR"
        assert attributes.source is None
    
    def test_dvd_source_with_resolution_is_kept(self, normalizer, make_attributes):
        attributes = normalizer.normalize(
            make_attributes(type=ReleaseType.MOVIE, source="DVD", resolution="SD")
        )
        
        assert attributes.source == "DVD"
        assert attributes.format is None
    
    def test_same_source_and_format(self, normalizer, make_attributes):
        attributes = normalizer.normalize(
            make_attributes(type=ReleaseType.MOVIE, source="Bluray", format="Bluray", resolution="1080p")
        )
        
        assert attributes.source == "Bluray"
        assert attributes.format is None
    
    def test_movie_has_no_version(self, normalizer, make_attributes):
        attributes = normalizer.normalize(make_attributes(type=ReleaseType.MOVIE, version="v2"))
        
        assert attributes.version is None
    
    def test_app_has_no_audio(self, normalizer, make_attributes):
        attributes = normalizer.normalize(make_attributes(type=ReleaseType.APP, audio=["AAC"]))
        
        assert attributes.audio is None
    
    def test_app_source_in_title(self, normalizer, make_attributes):
        attributes = normalizer.normalize(
            make_attributes(type=ReleaseType.APP, source="Steam", title="Steam Client")
        )
        
        assert attributes.source is None
    
    def test_game_is_not_anime(self, normalizer, make_attributes):
        attributes = normalizer.normalize(make_attributes(type=ReleaseType.GAME, flags=["Anime", "Repack"]))
        
        assert attributes.flags == ["Repack"]
    
    def test_music_has_no_episode(self, normalizer, make_attributes):
        attributes = normalizer.normalize(make_attributes(type=ReleaseType.MUSIC, episode=3, season=1))
        
        assert attributes.episode is None
        assert attributes.season is None
    
    def test_bookware_has_no_flags(self, normalizer, make_attributes):
        attributes = normalizer.normalize(make_attributes(type=ReleaseType.BOOKWARE, flags=["Tutorial"]))
        
        assert attributes.flags is None
    
    def test_ebook_hybrid_format(self, normalizer, make_attributes):
        attributes = normalizer.normalize(
            make_attributes(type=ReleaseType.EBOOK, format="Hybrid", flags=["Hybrid"])
        )
        
        assert attributes.format == "Hybrid"
        assert attributes.flags is None
