"""
Graph analysis modules: traversal, similarity, community detection and
structural pattern detection.
"""

from .community import LabelPropagation
from .detection import StructureAnalyzer
from .similarity import SimilarityAnalyzer
from .traversal import Traverser

__all__ = ['Traverser', 'SimilarityAnalyzer', 'LabelPropagation', 'StructureAnalyzer']
