"""
Parsing services for sceneparse.
"""

from .pattern_compiler import PatternCompiler
from .text_stripper import TextStripper
from .attribute_extractor import AttributeExtractor
from .type_classifier import ReleaseShapes, TypeClassifier
from .title_extractor import TitleExtractor
from .normalizer import ResultNormalizer
from .release_parser import ReleaseParser, parse

__all__ = [
    'PatternCompiler',
    'TextStripper',
    'AttributeExtractor',
    'ReleaseShapes',
    'TypeClassifier',
    'TitleExtractor',
    'ResultNormalizer',
    'ReleaseParser',
    'parse',
]
