"""
Knowledge base: recognition tables, implication sets, hints and grammar.
"""

from .base import KnowledgeBase, load_knowledge_base

__all__ = [
    'KnowledgeBase',
    'load_knowledge_base',
]
