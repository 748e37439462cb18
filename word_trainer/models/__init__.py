"""Data models for the word trainer"""

from .word_models import WordPair

__all__ = ["WordPair"]
