"""
Corpus Loading and Tokenization

This module turns raw text into the normalized word tokens the n-gram
tables are counted over, and provides a couple of ways to obtain a
training text (a plain file or the NLTK Brown corpus).
"""

from typing import List, Optional, Tuple
from pathlib import Path
import nltk
import regex  # type: ignore
from nltk.corpus import brown


_WHITESPACE_RE = regex.compile(r"\p{White_Space}+")
# Alphabetic includes combining vowel signs such as Devanagari matras
_EDGE_RE = regex.compile(r"^[^\p{Alphabetic}\p{N}]+|[^\p{Alphabetic}\p{N}]+\Z")


def split_whitespace(text: str) -> List[str]:
    """Split on Unicode White_Space runs, dropping empty edges."""
    return [fragment for fragment in _WHITESPACE_RE.split(text) if fragment]


def _strip_non_alnum(fragment: str) -> str:
    """Trim characters from both ends of a fragment while they are not alphanumeric."""
    return _EDGE_RE.sub("", fragment)


def tokenize(text: str) -> List[str]:
    """
    Split raw text into normalized word tokens.

    Each whitespace-separated fragment has leading and trailing
    non-alphanumeric characters removed and is lowercased. Fragments
    that end up empty (e.g. a lone "--") are dropped.

    Args:
        text: Raw input text

    Returns:
        List of tokens in source order
    """
    tokens = []
    for fragment in split_whitespace(text):
        token = _strip_non_alnum(fragment).lower()
        if token:
            tokens.append(token)
    return tokens


def load_text_file(path: str, encoding: str = "utf-8") -> str:
    """Read a whole training text from disk."""
    return Path(path).read_text(encoding=encoding)


def ensure_nltk_data():
    """Download the Brown corpus if it is not present."""
    try:
        nltk.data.find('corpora/brown')
    except LookupError:
        print("Downloading Brown corpus...")
        nltk.download('brown', quiet=True)


def load_brown_corpus(categories: Optional[List[str]] = None) -> Tuple[str, dict]:
    """
    Load the Brown corpus as a single training text.

    Args:
        categories: Optional list of Brown corpus categories to load
                   (e.g., ['news', 'fiction']). If None, loads everything.

    Returns:
        Tuple of (text, corpus statistics dict)
    """
    ensure_nltk_data()

    if categories:
        words = brown.words(categories=categories)
    else:
        words = brown.words()

    text = " ".join(words)

    stats = {
        'num_words': len(words),
        'categories': categories or brown.categories()
    }

    return text, stats


def get_brown_categories() -> List[str]:
    """Return list of available Brown corpus categories."""
    ensure_nltk_data()
    return brown.categories()
