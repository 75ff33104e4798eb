"""
Similarity calculation module.

Scores campaigns against each other on target, deadline and a third axis
(lexical category overlap by default, funding progress as an option).
"""

from .calculator import SimilarityCalculator, get_similarity_label
from .metrics import (
    category_similarity,
    deadline_similarity,
    progress_ratio,
    progress_similarity,
    target_similarity,
    tokenize,
)

__all__ = [
    "SimilarityCalculator",
    "get_similarity_label",
    "category_similarity",
    "deadline_similarity",
    "progress_ratio",
    "progress_similarity",
    "target_similarity",
    "tokenize",
]
