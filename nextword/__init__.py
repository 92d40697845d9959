"""
N-gram Next-Word Suggestion Package

Unigram, bigram and trigram frequency tables built from a training text,
with next-word suggesters at each context length.
"""

from .model import (
    NGramModel, Suggestion, EMPTY_SUGGESTION,
    train, suggest_unigram, suggest_bigram, suggest_trigram
)
from .corpus import tokenize, load_text_file, load_brown_corpus

__version__ = "0.1.0"
__all__ = [
    "NGramModel", "Suggestion", "EMPTY_SUGGESTION",
    "train", "suggest_unigram", "suggest_bigram", "suggest_trigram",
    "tokenize", "load_text_file", "load_brown_corpus"
]
