# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Hex puzzle generator.

Single entry point that scores a word list, lays it onto the hex grid
with a seeded RNG and returns the board, the placed words and a success
flag. Every call builds its own RNG and board, so the same words and
seed always give the same puzzle.
"""

import logging
import os
import re
import sys
from typing import List, Optional, Sequence

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import ConsistencyViolationError, GenerationResult
from hex_placement import HexPlacementEngine, DEFAULT_GRID_RADIUS
from rng import create_rng
from validator import (
    BoardValidator, ValidationResult, validate_words,
    MIN_WORD_LENGTH, MAX_WORD_LENGTH,
)
from word_scorer import prepare_words

DEFAULT_SEED = "default"

WORD_PATTERN = re.compile(r"^[A-Z]+$")


class InputError(Exception):
    """Raised when the generator is given an unusable word list or radius."""
    pass


class HexPuzzleGenerator:
    """
    Generates hex word puzzles from a word list and a seed.

    Usage:
        generator = HexPuzzleGenerator(grid_radius=10, seed="post123:4")
        result = generator.generate(["CAT", "ART", "TEA"])
        if not result.success:
            ...  # regenerate with another seed or word subset
    """

    def __init__(
        self,
        grid_radius: int = DEFAULT_GRID_RADIUS,
        seed: str = DEFAULT_SEED,
        words: Optional[Sequence[str]] = None,
        strict_spacing: bool = False,
        deferred_pass: bool = False,
    ):
        """
        Initialize the generator.

        Args:
            grid_radius: Board radius in hex cells
            seed: Seed string, conventionally "{contentId}:{level}"
            words: Default word list used when generate() gets none
            strict_spacing: Keep words from touching except where they cross
            deferred_pass: Retry unplaced words once the main pass is done
        """
        self.grid_radius = grid_radius
        self.seed = seed
        self.words = list(words or [])
        self.strict_spacing = strict_spacing
        self.deferred_pass = deferred_pass
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config) -> 'HexPuzzleGenerator':
        """Create a generator from a HexaWordConfig."""
        return cls(
            grid_radius=config.grid_radius,
            seed=config.seed,
            words=config.words,
            strict_spacing=config.generation.strict_spacing,
            deferred_pass=config.generation.deferred_pass,
        )

    def generate(self, words: Optional[Sequence[str]] = None) -> GenerationResult:
        """
        Generate a complete puzzle.

        Args:
            words: Words to place (defaults to the configured list)

        Returns:
            GenerationResult with board, placed words and success flag

        Raises:
            InputError: If the word list is empty or malformed
            ConsistencyViolationError: If the finished board fails its audit
        """
        word_list = self._normalize_words(words if words is not None else self.words)
        self._check_radius()

        self.logger.info(
            f"Generating puzzle: {len(word_list)} words, "
            f"seed '{self.seed}', radius {self.grid_radius}"
        )

        entries = prepare_words(word_list)
        engine = HexPlacementEngine(
            grid_radius=self.grid_radius,
            rng=create_rng(self.seed),
            strict_spacing=self.strict_spacing,
            deferred_pass=self.deferred_pass,
        )
        success = engine.place_words(entries)

        result = GenerationResult(
            board=engine.get_board(),
            placed_words=list(engine.get_placed_words()),
            words=list(engine.get_words()),
            success=success,
        )
        self._audit(result)

        self.logger.debug(f"Placement stats: {engine.stats}")
        if not success:
            self.logger.warning(
                f"Partial placement for seed '{self.seed}': "
                f"{len(result.placed_words)}/{len(result.words)} words placed"
            )
        return result

    def _normalize_words(self, words: Sequence[str]) -> List[str]:
        if not words:
            raise InputError("No words provided for puzzle generation")

        normalized = []
        for index, word in enumerate(words):
            if not isinstance(word, str):
                raise InputError(f"Word at index {index} is not a string: {word!r}")
            cleaned = word.strip().upper()
            if not MIN_WORD_LENGTH <= len(cleaned) <= MAX_WORD_LENGTH:
                raise InputError(
                    f"Word at index {index} ('{word}') must be "
                    f"{MIN_WORD_LENGTH}-{MAX_WORD_LENGTH} letters"
                )
            if not WORD_PATTERN.match(cleaned):
                raise InputError(
                    f"Word at index {index} ('{word}') contains invalid characters"
                )
            normalized.append(cleaned)
        return normalized

    def _check_radius(self) -> None:
        if isinstance(self.grid_radius, bool) or not isinstance(self.grid_radius, int):
            raise InputError(f"Grid radius must be an integer, got {self.grid_radius!r}")
        if self.grid_radius < 1:
            raise InputError(f"Grid radius must be positive, got {self.grid_radius}")

    def _audit(self, result: GenerationResult) -> None:
        """Re-check the finished board; any finding is a placement bug."""
        audit = BoardValidator(
            result.board,
            result.placed_words,
            self.grid_radius,
            unplaced_words=result.unplaced_words,
        ).validate()
        if not audit.valid:
            raise ConsistencyViolationError(
                "Generated board failed consistency audit:\n" +
                "\n".join(f"  - {e}" for e in audit.errors)
            )

    def update_config(
        self,
        grid_radius: Optional[int] = None,
        seed: Optional[str] = None,
        words: Optional[Sequence[str]] = None,
        strict_spacing: Optional[bool] = None,
        deferred_pass: Optional[bool] = None,
    ) -> None:
        """Update generator settings; unspecified values are kept."""
        if grid_radius is not None:
            self.grid_radius = grid_radius
        if seed is not None:
            self.seed = seed
        if words is not None:
            self.words = list(words)
        if strict_spacing is not None:
            self.strict_spacing = strict_spacing
        if deferred_pass is not None:
            self.deferred_pass = deferred_pass

    @staticmethod
    def validate_words(words: Sequence[str]) -> ValidationResult:
        """Pre-flight check for word lists entered in a level editor."""
        return validate_words(words)


def generate_puzzle(
    words: Sequence[str],
    seed: str = DEFAULT_SEED,
    grid_radius: int = DEFAULT_GRID_RADIUS,
    **options,
) -> GenerationResult:
    """
    Generate a puzzle in one call.

    Args:
        words: Words to place
        seed: Seed string
        grid_radius: Board radius
        **options: strict_spacing / deferred_pass

    Returns:
        GenerationResult
    """
    return HexPuzzleGenerator(grid_radius=grid_radius, seed=seed, **options).generate(words)
