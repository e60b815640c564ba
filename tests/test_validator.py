# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for validator module."""

import os
import sys
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from models import Anchor, WordEntry
from puzzle_generator import generate_puzzle
from validator import BoardValidator, validate_board, validate_words


class TestValidateWords(unittest.TestCase):
    """Tests for word list validation."""

    def test_valid_list(self):
        result = validate_words(["CAT", "ART", "TEA"])
        self.assertTrue(result.valid)
        self.assertEqual(result.errors, [])
        self.assertEqual(result.stats["shared_letters"], "AT")
        self.assertEqual(result.stats["word_count"], 3)

    def test_too_few_words(self):
        result = validate_words(["CAT", "ART"])
        self.assertFalse(result.valid)
        self.assertTrue(any("At least 3" in e for e in result.errors))

    def test_min_words_configurable(self):
        self.assertTrue(validate_words(["CAT", "ART"], min_words=2).valid)

    def test_duplicates_case_insensitive(self):
        result = validate_words(["cat", "CAT", "ART"])
        self.assertFalse(result.valid)
        self.assertTrue(any("Duplicate" in e and "CAT" in e for e in result.errors))

    def test_invalid_characters(self):
        result = validate_words(["C@T", "ART", "TEA"])
        self.assertFalse(result.valid)
        self.assertTrue(any("index 0" in e and "invalid" in e for e in result.errors))

    def test_length_limits(self):
        result = validate_words(["A", "ART", "ABCDEFGHIJKLM"])
        self.assertFalse(result.valid)
        self.assertTrue(any("too short" in e for e in result.errors))
        self.assertTrue(any("too long" in e for e in result.errors))

    def test_no_shared_letters(self):
        result = validate_words(["ZEBRA", "QUILT", "MOP"])
        self.assertFalse(result.valid)
        self.assertTrue(any("share" in e for e in result.errors))

    def test_non_string_entries(self):
        result = validate_words(["CAT", 42, None])
        self.assertFalse(result.valid)
        self.assertTrue(any("index 1" in e and "not a string" in e for e in result.errors))
        self.assertTrue(any("index 2" in e for e in result.errors))
        self.assertEqual(result.stats["word_count"], 3)

    def test_str(self):
        self.assertIn("VALID", str(validate_words(["CAT", "ART", "TEA"])))
        self.assertIn("INVALID", str(validate_words(["CAT"])))


class TestBoardValidator(unittest.TestCase):
    """Tests for the board audit."""

    def setUp(self):
        self.result = generate_puzzle(["CAT", "ART", "TEA"], seed="audit")

    def test_generated_board_valid(self):
        audit = BoardValidator(self.result.board, self.result.placed_words).validate()
        self.assertTrue(audit.valid, str(audit))
        self.assertEqual(audit.stats["placed_words"], 3)
        self.assertEqual(audit.stats["cells"], len(self.result.board))

    def test_letter_tampering_detected(self):
        first = self.result.placed_words[0]
        self.result.board.get(first.path()[0]).letter = "?"

        audit = validate_board(self.result.board, self.result.placed_words)
        self.assertFalse(audit.valid)

    def test_smaller_radius_detected(self):
        audit = BoardValidator(
            self.result.board, self.result.placed_words, grid_radius=0
        ).validate()
        self.assertFalse(audit.valid)
        self.assertTrue(any("outside radius" in e for e in audit.errors))

    def test_missing_word_id_detected(self):
        cell = self.result.board.get(self.result.placed_words[1].path()[0])
        cell.word_ids.remove(1)

        audit = BoardValidator(self.result.board, self.result.placed_words).validate()
        self.assertFalse(audit.valid)

    def test_unplaced_words_reported(self):
        result = generate_puzzle(["ZEBRA", "QUILT"], seed="s1")
        audit = validate_board(result.board, result.placed_words, result.unplaced_words)
        self.assertTrue(audit.valid)
        self.assertEqual(len(audit.warnings), 1)

    def test_unplaced_word_with_anchor_detected(self):
        stray = WordEntry("QUILT", anchor=Anchor(5, 0, 0))
        audit = validate_board(self.result.board, self.result.placed_words, [stray])
        self.assertFalse(audit.valid)


if __name__ == '__main__':
    unittest.main()
