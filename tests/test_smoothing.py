"""
Tests for Laplace smoothing.
"""

import unittest
from fractions import Fraction

from nextword.smoothing import (
    Smoother, LaplaceSmoothing, BigramAggregate, aggregate_score
)


class TestLaplaceSmoothing(unittest.TestCase):

    def test_add_one(self):
        smoother = LaplaceSmoothing(vocab_size=2)
        self.assertEqual(smoother.smooth(1, 1), Fraction(2, 3))
        self.assertAlmostEqual(smoother.smooth(1, 1), 2 / 3)
        self.assertAlmostEqual(smoother.smooth(0, 2), 1 / 4)

    def test_base_class_is_abstract(self):
        with self.assertRaises(NotImplementedError):
            Smoother(3).smooth(0, 0)


class TestAggregate(unittest.TestCase):

    def setUp(self):
        self.unigram = {"a": 1, "b": 2}
        self.bigram = {("a", "b"): 1, ("b", "b"): 1}
        self.smoother = LaplaceSmoothing(len(self.unigram))

    def test_direct_sum(self):
        score = aggregate_score("b", ["a", "b"], self.unigram, self.bigram, self.smoother)
        self.assertAlmostEqual(score, 2 / 3 + 2 / 4)

    def test_empty_vocabulary(self):
        self.assertEqual(aggregate_score("a", [], {}, {}, LaplaceSmoothing(0)), 0.0)

    def test_precomputed_matches_direct_sum(self):
        aggregate = BigramAggregate(["a", "b"], self.unigram, self.bigram, self.smoother)
        for word in ("a", "b", "unseen"):
            expected = aggregate_score(word, ["a", "b"], self.unigram,
                                       self.bigram, self.smoother)
            self.assertEqual(aggregate.score(word), expected)

    def test_unseen_mass(self):
        aggregate = BigramAggregate(["a", "b"], self.unigram, self.bigram, self.smoother)
        self.assertEqual(aggregate.unseen_mass, Fraction(7, 12))
        self.assertEqual(aggregate.predecessors["b"], [("a", 1), ("b", 1)])


if __name__ == '__main__':
    unittest.main()
