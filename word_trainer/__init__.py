"""
Word Trainer - flashcard-style vocabulary trainer core
"""

__version__ = "1.0.0"
__description__ = "Flashcard vocabulary trainer with fade transitions"

# Export main factory function for easy access
from .core.factory import create_presenter

__all__ = ["create_presenter"]
