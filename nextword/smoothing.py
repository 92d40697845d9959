"""
Laplace Smoothing

Add-one smoothing for bigram counts, plus the vocabulary-wide aggregate
the bigram suggester ranks candidates by. Probabilities are exact
fractions so that equal aggregates compare equal.
"""

from fractions import Fraction
from typing import Dict, Iterable, List, Mapping, Tuple
from collections import Counter, defaultdict


class Smoother:
    """Base class for smoothing implementations."""

    def __init__(self, vocab_size: int):
        self.vocab_size = vocab_size

    def smooth(self, count: int, context_count: int) -> Fraction:
        """Return smoothed probability."""
        raise NotImplementedError


class LaplaceSmoothing(Smoother):
    """
    Laplace (Add-One) Smoothing

    P(w|context) = (count(context, w) + 1) / (count(context) + V)

    Where V is the vocabulary size.
    """

    def smooth(self, count: int, context_count: int) -> Fraction:
        return Fraction(count + 1, context_count + self.vocab_size)


def aggregate_score(current: str,
                    vocabulary: Iterable[str],
                    unigram: Mapping[str, int],
                    bigram: Mapping[Tuple[str, str], int],
                    smoother: Smoother) -> Fraction:
    """
    Sum the smoothed probability of `current` following every vocabulary word.

    This is the reference definition of the aggregate; `BigramAggregate`
    computes the same value incrementally and is what the model uses.
    It is not a conditional probability: each term is P(current | w)
    for a different previous word w, and the terms are added together
    over the whole vocabulary.

    Args:
        current: Candidate next word
        vocabulary: Words to sum over
        unigram: Word counts
        bigram: (previous, current) pair counts
        smoother: Per-pair smoothing function

    Returns:
        Aggregate smoothed score (0 for an empty vocabulary)
    """
    total = Fraction(0)
    for prev_word in vocabulary:
        total += smoother.smooth(
            bigram.get((prev_word, current), 0),
            unigram.get(prev_word, 0)
        )
    return total


class BigramAggregate:
    """
    Precomputed form of `aggregate_score` for repeated queries.

    Every previous word contributes smooth(0, count(w)) even when it was
    never followed by `current`; that part is the same for every
    candidate and is summed once, grouped by word count. A query then
    only visits the words actually observed before `current`, adding the
    difference their bigram count makes.
    """

    def __init__(self, vocabulary: List[str],
                 unigram: Mapping[str, int],
                 bigram: Mapping[Tuple[str, str], int],
                 smoother: Smoother):
        self.unigram = unigram
        self.smoother = smoother

        words_per_count = Counter(unigram[word] for word in vocabulary)
        self.unseen_mass = Fraction(0)
        for context_count, words in sorted(words_per_count.items()):
            self.unseen_mass += smoother.smooth(0, context_count) * words

        self.predecessors: Dict[str, List[Tuple[str, int]]] = defaultdict(list)
        for (prev_word, word), count in sorted(bigram.items()):
            self.predecessors[word].append((prev_word, count))

    def score(self, current: str) -> Fraction:
        total = self.unseen_mass
        for prev_word, count in self.predecessors.get(current, ()):
            context_count = self.unigram[prev_word]
            total += (self.smoother.smooth(count, context_count)
                      - self.smoother.smooth(0, context_count))
        return total
