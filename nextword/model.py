"""
N-gram Suggestion Model

This module contains the core NGramModel class: unigram, bigram and
trigram frequency tables built in one pass over a training text, and the
three next-word suggesters that query them.

Score units differ between the suggesters. Unigram and trigram
suggestions carry raw counts; bigram suggestions carry the Laplace
aggregate scaled by SCORE_SCALE and truncated. They are not comparable.
"""

import heapq
from fractions import Fraction
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple
from collections import Counter

from .corpus import split_whitespace, tokenize
from .smoothing import BigramAggregate, LaplaceSmoothing


SCORE_SCALE = 1000
PROGRESS_EVERY = 1000
DEFAULT_TOP_K = 5


class Suggestion(NamedTuple):
    """A suggested next word and its score."""
    word: str
    score: int

    @property
    def is_empty(self) -> bool:
        return not self.word


EMPTY_SUGGESTION = Suggestion("", 0)


def _check_top_k(top_k: int) -> None:
    if top_k < 1:
        raise ValueError("top_k must be at least 1")


def _rank(candidates: Iterable[Tuple[str, float]], top_k: int) -> List[Tuple[str, float]]:
    """Highest score first; ties go to the lexicographically smallest word."""
    return heapq.nsmallest(top_k, candidates, key=lambda item: (-item[1], item[0]))


class NGramModel:
    """
    Unigram/bigram/trigram word model for next-word suggestion.

    Build one with `NGramModel.train(text)`. The count tables are fixed
    at that point and exposed as read-only mappings, so a trained model
    can be shared between readers without locking.

    Attributes:
        unigram: word -> count
        bigram: (previous, current) -> count
        trigram: (ante_previous, previous, current) -> count
        vocab_count: number of distinct words seen during training
        training_stats: summary counts collected while training
    """

    def __init__(self, unigram: Dict[str, int],
                 bigram: Dict[Tuple[str, str], int],
                 trigram: Dict[Tuple[str, str, str], int],
                 training_stats: Optional[Dict] = None):
        self._unigram = dict(unigram)
        self._bigram = dict(bigram)
        self._trigram = dict(trigram)
        self._vocab_count = len(self._unigram)
        self._vocabulary = sorted(self._unigram)
        self.training_stats: Dict = dict(training_stats or {})

        self.smoother = LaplaceSmoothing(self._vocab_count)
        self._aggregate = BigramAggregate(
            self._vocabulary, self._unigram, self._bigram, self.smoother
        )

    @classmethod
    def train(cls, text: str, progress_callback=None) -> 'NGramModel':
        """
        Count n-grams over a training text.

        Args:
            text: Raw training text
            progress_callback: Optional callback(current, total, stage)

        Returns:
            Trained NGramModel
        """
        tokens = tokenize(text)
        total = len(tokens)

        unigram: Counter = Counter()
        bigram: Counter = Counter()
        trigram: Counter = Counter()

        for i, token in enumerate(tokens):
            unigram[token] += 1

            if i >= 1:
                bigram[(tokens[i - 1], token)] += 1

            if i >= 2:
                trigram[(tokens[i - 2], tokens[i - 1], token)] += 1

            if progress_callback and (i + 1) % PROGRESS_EVERY == 0:
                progress_callback(i + 1, total, "Counting n-grams")

        if progress_callback:
            progress_callback(total, total, "Complete")

        stats = {
            'num_tokens': total,
            'vocab_size': len(unigram),
            'unique_bigrams': len(bigram),
            'unique_trigrams': len(trigram),
            'total_bigrams': sum(bigram.values()),
            'total_trigrams': sum(trigram.values())
        }

        return cls(unigram, bigram, trigram, training_stats=stats)

    @property
    def unigram(self) -> Mapping[str, int]:
        return MappingProxyType(self._unigram)

    @property
    def bigram(self) -> Mapping[Tuple[str, str], int]:
        return MappingProxyType(self._bigram)

    @property
    def trigram(self) -> Mapping[Tuple[str, str, str], int]:
        return MappingProxyType(self._trigram)

    @property
    def vocab_count(self) -> int:
        return self._vocab_count

    def exact_score(self, current: str) -> Fraction:
        """
        Laplace-smoothed mass pointing at `current`, summed over every
        possible previous word, as an exact fraction.

        sum over w of (count(w, current) + 1) / (count(w) + V)
        """
        return self._aggregate.score(current)

    def smoothed_score(self, current: str) -> float:
        return float(self.exact_score(current))

    # ------------------------------------------------------------------
    # Ranking
    # ------------------------------------------------------------------

    def rank_unigram(self, text: str, top_k: int = DEFAULT_TOP_K) -> List[Suggestion]:
        """Most frequent vocabulary words starting with the last fragment of `text`."""
        _check_top_k(top_k)
        fragments = split_whitespace(text.lower())
        prefix = fragments[-1] if fragments else ""

        candidates = (
            (word, count) for word, count in self._unigram.items()
            if word.startswith(prefix)
        )
        return [Suggestion(word, count) for word, count in _rank(candidates, top_k)]

    def rank_bigram(self, text: str, top_k: int = DEFAULT_TOP_K) -> List[Suggestion]:
        """
        Vocabulary words ranked by their smoothed aggregate score.

        The input only has to contain a token; which token it ends with
        does not change the ranking.
        """
        _check_top_k(top_k)
        if not tokenize(text):
            return []

        # Fractions: equal aggregates compare equal
        candidates = ((word, self.exact_score(word)) for word in self._vocabulary)
        return [
            Suggestion(word, int(score * SCORE_SCALE))
            for word, score in _rank(candidates, top_k)
        ]

    def rank_trigram(self, text: str, top_k: int = DEFAULT_TOP_K) -> List[Suggestion]:
        """
        Words that followed the last two input tokens in training.

        The second-to-last token is matched against the first slot of the
        trigram and the last token against the second slot.
        """
        _check_top_k(top_k)
        tokens = tokenize(text)
        if len(tokens) < 2:
            return []

        current = tokens[-1]
        previous = tokens[-2]

        candidates = (
            (word, count)
            for (ante_prev_word, prev_word, word), count in self._trigram.items()
            if ante_prev_word == previous and prev_word == current
        )
        return [Suggestion(word, count) for word, count in _rank(candidates, top_k)]

    # ------------------------------------------------------------------
    # Best suggestion
    # ------------------------------------------------------------------

    def suggest_unigram(self, text: str) -> Suggestion:
        """Complete the last word of `text` with the most frequent match."""
        ranked = self.rank_unigram(text, top_k=1)
        return ranked[0] if ranked else EMPTY_SUGGESTION

    def suggest_bigram(self, text: str) -> Suggestion:
        """Suggest the word with the highest smoothed aggregate score."""
        ranked = self.rank_bigram(text, top_k=1)
        return ranked[0] if ranked else EMPTY_SUGGESTION

    def suggest_trigram(self, text: str) -> Suggestion:
        """Suggest the most frequent follower of the last two tokens."""
        ranked = self.rank_trigram(text, top_k=1)
        return ranked[0] if ranked else EMPTY_SUGGESTION

    def top_words(self, top_k: int = 100) -> List[Tuple[str, int]]:
        """Get the most frequent words based on unigram counts."""
        _check_top_k(top_k)
        return _rank(self._unigram.items(), top_k)


def train(text: str) -> NGramModel:
    """Build a model from a training text."""
    return NGramModel.train(text)


def suggest_unigram(model: NGramModel, text: str) -> Suggestion:
    return model.suggest_unigram(text)


def suggest_bigram(model: NGramModel, text: str) -> Suggestion:
    return model.suggest_bigram(text)


def suggest_trigram(model: NGramModel, text: str) -> Suggestion:
    return model.suggest_trigram(text)
