"""
Hex Puzzle Validator

Two checks:
1. Word lists (pre-flight for level editors): enough words, no duplicates,
   letters only, and at least one letter shared between words
2. Generated boards: every cell inside the grid, every crossing agrees on
   its letter, and cell ownership matches the placed words

The board check should never find anything on a board produced by the
placement engine; any finding means a placement bug.
"""

import os
import re
import sys
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import Board, WordEntry

MIN_WORDS = 3
MIN_WORD_LENGTH = 2
MAX_WORD_LENGTH = 12

LETTERS_ONLY = re.compile(r"^[A-Za-z]+$")


@dataclass
class ValidationResult:
    """Result of a word list or board validation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    stats: Dict = field(default_factory=dict)

    def __str__(self):
        status = "✅ VALID" if self.valid else "❌ INVALID"
        lines = [f"Status: {status}"]

        if self.errors:
            lines.append("\nErrors:")
            for e in self.errors:
                lines.append(f"  ❌ {e}")

        if self.warnings:
            lines.append("\nWarnings:")
            for w in self.warnings:
                lines.append(f"  ⚠️ {w}")

        if self.stats:
            lines.append("\nStats:")
            for k, v in self.stats.items():
                lines.append(f"  {k}: {v}")

        return "\n".join(lines)


def validate_words(
    words: Sequence[str],
    min_words: int = MIN_WORDS,
    min_length: int = MIN_WORD_LENGTH,
    max_length: int = MAX_WORD_LENGTH,
) -> ValidationResult:
    """
    Validate a word list before it is offered to the generator.

    Args:
        words: Candidate words
        min_words: Minimum number of words
        min_length: Minimum letters per word
        max_length: Maximum letters per word

    Returns:
        ValidationResult
    """
    result = ValidationResult(valid=True)

    if len(words) < min_words:
        result.errors.append(f"At least {min_words} words are required")

    non_strings = [i for i, word in enumerate(words) if not isinstance(word, str)]
    if non_strings:
        for index in non_strings:
            result.errors.append(f"Word at index {index} is not a string: {words[index]!r}")
        # Remaining checks need text
        result.stats["word_count"] = len(words)
        result.valid = False
        return result

    upper = [w.upper() for w in words]
    if len(set(upper)) != len(upper):
        duplicates = sorted(w for w, n in Counter(upper).items() if n > 1)
        result.errors.append(f"Duplicate words found: {', '.join(duplicates)}")

    for index, word in enumerate(words):
        if len(word) < min_length:
            result.errors.append(
                f"Word at index {index} is too short (minimum {min_length} characters)"
            )
        elif len(word) > max_length:
            result.errors.append(
                f"Word at index {index} is too long (maximum {max_length} characters)"
            )
        if not LETTERS_ONLY.match(word):
            result.errors.append(f"Word at index {index} contains invalid characters")

    # Shared letters only matter once the list itself is well formed
    if not result.errors:
        letter_freq: Counter = Counter()
        for word in upper:
            letter_freq.update(set(word))
        shared = sorted(letter for letter, count in letter_freq.items() if count > 1)
        if not shared:
            result.errors.append("Words do not share any common letters for intersection")
        result.stats["shared_letters"] = "".join(shared)

    result.stats["word_count"] = len(words)
    result.valid = len(result.errors) == 0
    return result


class BoardValidator:
    """
    Audits a generated board against the words placed on it.
    """

    def __init__(
        self,
        board: Board,
        placed_words: List[WordEntry],
        grid_radius: Optional[int] = None,
        unplaced_words: Sequence[WordEntry] = (),
    ):
        """
        Initialize validator.

        Args:
            board: Board to audit
            placed_words: Placed words in commit order (index == word id)
            grid_radius: Radius to check against (defaults to the board's)
            unplaced_words: Words that were not placed
        """
        self.board = board
        self.placed_words = placed_words
        self.grid_radius = board.grid_radius if grid_radius is None else grid_radius
        self.unplaced_words = list(unplaced_words)

    def validate(self) -> ValidationResult:
        result = ValidationResult(valid=True)

        self._check_cells(result)
        self._check_placed_words(result)
        self._check_unplaced_words(result)

        result.stats["cells"] = len(self.board)
        result.stats["intersections"] = len(self.board.intersections())
        result.stats["placed_words"] = len(self.placed_words)
        result.stats["unplaced_words"] = len(self.unplaced_words)

        result.valid = len(result.errors) == 0
        return result

    def _check_cells(self, result: ValidationResult):
        """Bounds and ownership of every written cell."""
        for cell in self.board:
            coord = cell.coordinate
            if coord.distance_from_origin() > self.grid_radius:
                result.errors.append(
                    f"Cell {coord.key()} lies outside radius {self.grid_radius}"
                )

            if not cell.letter:
                result.errors.append(f"Cell {coord.key()} has no letter")

            if not cell.word_ids:
                result.errors.append(f"Cell {coord.key()} is not claimed by any word")
                continue

            if cell.word_ids != sorted(set(cell.word_ids)):
                result.errors.append(
                    f"Cell {coord.key()} word ids out of claim order: {cell.word_ids}"
                )

            for word_id in cell.word_ids:
                if not 0 <= word_id < len(self.placed_words):
                    result.errors.append(
                        f"Cell {coord.key()} refers to unknown word id {word_id}"
                    )
                    continue
                entry = self.placed_words[word_id]
                if coord not in entry.path():
                    result.errors.append(
                        f"Cell {coord.key()} claims '{entry.word}' but is not on its path"
                    )

    def _check_placed_words(self, result: ValidationResult):
        """Every letter of every placed word is on the board and agrees."""
        for word_id, entry in enumerate(self.placed_words):
            if not entry.placed or entry.anchor is None:
                result.errors.append(f"Word '{entry.word}' listed as placed without an anchor")
                continue

            for char, coord in zip(entry.chars, entry.path()):
                cell = self.board.get(coord)
                if cell is None:
                    result.errors.append(
                        f"Word '{entry.word}' missing cell {coord.key()}"
                    )
                    continue
                if cell.letter != char:
                    result.errors.append(
                        f"Intersection conflict at {coord.key()}: "
                        f"'{cell.letter}' vs '{char}' from '{entry.word}'"
                    )
                if word_id not in cell.word_ids:
                    result.errors.append(
                        f"Cell {coord.key()} does not list word id {word_id} ('{entry.word}')"
                    )

    def _check_unplaced_words(self, result: ValidationResult):
        for entry in self.unplaced_words:
            if entry.placed or entry.anchor is not None:
                result.errors.append(
                    f"Word '{entry.word}' is reported unplaced but has a placement"
                )
            else:
                result.warnings.append(f"Word '{entry.word}' could not be placed")


def validate_board(
    board: Board,
    placed_words: List[WordEntry],
    unplaced_words: Sequence[WordEntry] = (),
) -> ValidationResult:
    """
    Convenience function to audit a board.

    Args:
        board: Generated board
        placed_words: Placed words in commit order
        unplaced_words: Words left off the board

    Returns:
        ValidationResult
    """
    return BoardValidator(board, placed_words, unplaced_words=unplaced_words).validate()
