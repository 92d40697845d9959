"""
Tests for tokenization and corpus loading.
"""

import os
import tempfile
import unittest
from unittest.mock import patch

from nextword.corpus import tokenize, load_text_file, load_brown_corpus


class TestTokenize(unittest.TestCase):
    """Tests for the whitespace tokenizer."""

    def test_lowercases_and_strips_punctuation(self):
        self.assertEqual(tokenize("Hello, World!"), ["hello", "world"])

    def test_keeps_inner_punctuation(self):
        self.assertEqual(tokenize("(don't) well-known"), ["don't", "well-known"])

    def test_drops_punctuation_only_fragments(self):
        self.assertEqual(tokenize("a -- b ... !"), ["a", "b"])

    def test_empty_and_blank_input(self):
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize("   \n\t "), [])
        self.assertEqual(tokenize("?! ..."), [])

    def test_unicode_alphanumerics(self):
        self.assertEqual(tokenize("«Été» Ça-va? 42."), ["été", "ça-va", "42"])

    def test_keeps_combining_vowel_signs(self):
        self.assertEqual(tokenize("नमस्ते दुनिया!"), ["नमस्ते", "दुनिया"])

    def test_splits_on_unicode_white_space_only(self):
        self.assertEqual(tokenize("a\x1fb"), ["a\x1fb"])
        self.assertEqual(tokenize("a\u00a0b\u2003c"), ["a", "b", "c"])

    def test_preserves_order(self):
        self.assertEqual(tokenize("The cat sat on THE mat."),
                         ["the", "cat", "sat", "on", "the", "mat"])

    def test_idempotent(self):
        """Re-tokenizing the joined tokens gives the same sequence."""
        samples = [
            "The quick, brown fox -- jumps over... the 'lazy' dog!",
            "  «Bonjour»  tout le monde  ",
            "",
            "a.b.c ,x, (y) [[z]]",
        ]
        for text in samples:
            tokens = tokenize(text)
            self.assertEqual(tokenize(" ".join(tokens)), tokens)


class TestLoaders(unittest.TestCase):
    """Tests for training text sources."""

    def test_load_text_file(self):
        fd, path = tempfile.mkstemp(suffix=".txt")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write("Once upon a time.")
            self.assertEqual(load_text_file(path), "Once upon a time.")
        finally:
            os.remove(path)

    def test_load_text_file_missing(self):
        with self.assertRaises(FileNotFoundError):
            load_text_file(os.path.join(tempfile.gettempdir(), "no-such-file-nextword.txt"))

    @patch("nextword.corpus.ensure_nltk_data")
    @patch("nextword.corpus.brown")
    def test_load_brown_corpus_joins_words(self, brown, ensure):
        brown.words.return_value = ["The", "Fulton", "County", "."]
        brown.categories.return_value = ["news", "fiction"]

        text, stats = load_brown_corpus()

        ensure.assert_called_once()
        self.assertEqual(text, "The Fulton County .")
        self.assertEqual(stats["num_words"], 4)
        self.assertEqual(stats["categories"], ["news", "fiction"])

    @patch("nextword.corpus.ensure_nltk_data")
    @patch("nextword.corpus.brown")
    def test_load_brown_corpus_categories(self, brown, ensure):
        brown.words.return_value = ["Hello"]

        _, stats = load_brown_corpus(categories=["news"])

        brown.words.assert_called_once_with(categories=["news"])
        self.assertEqual(stats["categories"], ["news"])

    @patch("nextword.corpus.nltk")
    def test_ensure_nltk_data_downloads_when_missing(self, nltk):
        from nextword.corpus import ensure_nltk_data

        nltk.data.find.side_effect = LookupError
        ensure_nltk_data()
        nltk.download.assert_called_once_with('brown', quiet=True)

        nltk.reset_mock()
        nltk.data.find.side_effect = None
        ensure_nltk_data()
        nltk.download.assert_not_called()


if __name__ == '__main__':
    unittest.main()
