"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sceneparse.knowledge import load_knowledge_base
from sceneparse.models.release import ReleaseAttributes
from sceneparse.services.attribute_extractor import AttributeExtractor
from sceneparse.services.pattern_compiler import PatternCompiler
from sceneparse.services.release_parser import ReleaseParser
from sceneparse.services.text_stripper import TextStripper
from sceneparse.services.title_extractor import TitleExtractor
from sceneparse.services.type_classifier import ReleaseShapes, TypeClassifier


@pytest.fixture(scope="session")
def knowledge():
    """Shared knowledge base."""
    return load_knowledge_base()


@pytest.fixture
def compiler(knowledge):
    """Strict pattern compiler."""
    return PatternCompiler(knowledge, strict=True)


@pytest.fixture
def stripper(knowledge):
    """Text stripper with the default filler."""
    return TextStripper(knowledge)


@pytest.fixture
def extractor(knowledge, compiler):
    """Attribute extractor."""
    return AttributeExtractor(knowledge, compiler)


@pytest.fixture
def classifier(knowledge):
    """Type classifier."""
    return TypeClassifier(knowledge)


@pytest.fixture
def title_extractor(knowledge, compiler, stripper):
    """Title extractor."""
    return TitleExtractor(knowledge, compiler, stripper)


@pytest.fixture(scope="session")
def release_parser():
    """Strict release parser shared by the pipeline tests."""
    return ReleaseParser(strict=True)


@pytest.fixture
def make_attributes():
    """Build release attributes from keyword arguments."""
    def _make(**values) -> ReleaseAttributes:
        attributes = ReleaseAttributes()
        for name, value in values.items():
            attributes.set(name, value)
        return attributes
    return _make


@pytest.fixture
def make_shapes(knowledge, make_attributes):
    """Build release shapes for a release name and attributes."""
    def _make(release: str, **values) -> ReleaseShapes:
        return ReleaseShapes(release, make_attributes(**values), knowledge)
    return _make


@pytest.fixture
def sample_tv_release():
    """Sample TV release name."""
    return "Show.Name.S02E05.720p.WEB-DL.DTS.X264-GROUP"


@pytest.fixture
def sample_movie_release():
    """Sample movie release name."""
    return "Some.Movie.2020.1080p.BluRay.x264-GROUP"


@pytest.fixture
def sample_music_release():
    """Sample various artists release name."""
    return "VA-Some.Compilation-2021-GROUP"
