"""Lookups that combine several geography levels."""

from .best_match import IndexProvider, best, BestMatcher

__all__ = [
    "IndexProvider",
    "best",
    "BestMatcher"
]
