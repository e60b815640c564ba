# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Hex word placement engine.

Lays scored words onto an axial hex grid. The first word is centred on
the origin; every later word must cross the existing structure on a
matching letter. Words that cannot be attached are left unplaced rather
than raising, and the run reports success only when every word landed.
"""

import logging
import os
import sys
from typing import List, Optional, Set

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import (
    Anchor, Board, HexCoordinate, WordEntry, HEX_DIRECTIONS, ORIGIN
)
from rng import SeededRNG, create_rng

DEFAULT_GRID_RADIUS = 10


class HexPlacementEngine:
    """
    Places words on a hex board one at a time.

    Candidate search for a word walks its letters, then the board cells in
    the order they were written, then the three reading directions. Every
    valid (anchor, direction) pair is collected once in that order and the
    RNG picks one, so a seed fully determines the layout.

    Usage:
        engine = HexPlacementEngine(grid_radius=10, rng=create_rng("s1"))
        success = engine.place_words(prepare_words(["CAT", "ART", "TEA"]))
        board = engine.get_board()
    """

    def __init__(
        self,
        grid_radius: int = DEFAULT_GRID_RADIUS,
        rng: Optional[SeededRNG] = None,
        strict_spacing: bool = False,
        deferred_pass: bool = False,
    ):
        """
        Initialize the placement engine.

        Args:
            grid_radius: Maximum cube distance of any cell from the origin
            rng: Seeded RNG owned by this run
            strict_spacing: Reject placements whose new cells touch other words
            deferred_pass: Retry unplaced words after the main pass
        """
        self.grid_radius = grid_radius
        self.rng = rng or create_rng("default")
        self.strict_spacing = strict_spacing
        self.deferred_pass = deferred_pass
        self.logger = logging.getLogger(__name__)

        self.board = Board(grid_radius)
        self.words: List[WordEntry] = []
        self.placed_words: List[WordEntry] = []
        self.stats = {
            "candidates_checked": 0,
            "candidates_valid": 0,
            "deferred_placements": 0,
        }

    def place_words(self, words: List[WordEntry]) -> bool:
        """
        Place all words in the given order.

        Args:
            words: Word entries, already in placement order

        Returns:
            True if every word was placed
        """
        self._reset_board()
        self.words = list(words)

        for entry in self.words:
            entry.placed = False
            entry.anchor = None

        for entry in self.words:
            if not self.placed_words:
                self._place_first_word(entry)
            else:
                self._place_connected_word(entry)

        if self.deferred_pass and self.placed_words:
            self._place_deferred_words()

        success = all(entry.placed for entry in self.words)
        self.logger.info(
            f"Placed {len(self.placed_words)} out of {len(self.words)} words."
        )
        if not success:
            missing = [entry.word for entry in self.words if not entry.placed]
            self.logger.info(f"Unplaced words: {', '.join(missing)}")
        return success

    def _place_first_word(self, entry: WordEntry) -> bool:
        """Centre a word on the origin in an RNG-chosen direction."""
        direction = int(self.rng.next() * len(HEX_DIRECTIONS))
        middle = (len(entry.chars) - 1) // 2
        start = ORIGIN.step(direction, -middle)
        anchor = Anchor(start.q, start.r, direction)

        if not all(self.board.in_bounds(coord) for coord in entry.path(anchor)):
            self.logger.warning(
                f"'{entry.word}' does not fit inside radius {self.grid_radius}"
            )
            return False

        self.logger.debug(f"Seeding board with '{entry.word}' (direction {direction})")
        self._commit(entry, anchor)
        return True

    def _place_connected_word(self, entry: WordEntry) -> bool:
        """Attach a word to the board at an RNG-chosen valid crossing."""
        candidates = self.find_candidates(entry)
        if not candidates:
            self.logger.debug(f"No valid crossing for '{entry.word}'")
            return False

        anchor = self.rng.pick(candidates)
        self.logger.debug(
            f"Placing '{entry.word}' at ({anchor.q}, {anchor.r}) "
            f"direction {anchor.direction} ({len(candidates)} candidates)"
        )
        self._commit(entry, anchor)
        return True

    def _place_deferred_words(self) -> None:
        """Retry unplaced words until a full sweep places nothing new."""
        progress = True
        while progress:
            progress = False
            for entry in self.words:
                if entry.placed:
                    continue
                if self._place_connected_word(entry):
                    self.stats["deferred_placements"] += 1
                    progress = True

    def find_candidates(self, entry: WordEntry) -> List[Anchor]:
        """
        Enumerate valid placements for a word against the current board.

        Args:
            entry: Word to place

        Returns:
            Distinct valid anchors in enumeration order
        """
        candidates: List[Anchor] = []
        seen: Set[Anchor] = set()
        cells = list(self.board)

        for i, char in enumerate(entry.chars):
            for cell in cells:
                if cell.letter != char:
                    continue
                for direction in range(len(HEX_DIRECTIONS)):
                    start = cell.coordinate.step(direction, -i)
                    anchor = Anchor(start.q, start.r, direction)
                    if anchor in seen:
                        continue
                    seen.add(anchor)
                    self.stats["candidates_checked"] += 1
                    if self.can_place(entry, anchor):
                        candidates.append(anchor)

        self.stats["candidates_valid"] += len(candidates)
        return candidates

    def can_place(self, entry: WordEntry, anchor: Anchor) -> bool:
        """
        Check a placement against bounds, letters and connectivity.

        A placement must stay inside the grid, agree with every letter it
        crosses, and cross at least one existing cell.
        """
        path = entry.path(anchor)
        crossings = 0

        for char, coord in zip(entry.chars, path):
            if not self.board.in_bounds(coord):
                return False
            cell = self.board.get(coord)
            if cell is None:
                continue
            if cell.letter != char:
                return False
            crossings += 1

        if crossings == 0:
            return False

        if self.strict_spacing and not self._has_clear_spacing(path):
            return False

        return True

    def _has_clear_spacing(self, path: List[HexCoordinate]) -> bool:
        """New cells may only touch occupied cells on their own path."""
        on_path = set(path)
        for coord in path:
            if self.board.is_occupied(coord):
                continue
            for neighbor in coord.neighbors():
                if neighbor not in on_path and self.board.is_occupied(neighbor):
                    return False
        return True

    def _commit(self, entry: WordEntry, anchor: Anchor) -> None:
        word_id = len(self.placed_words)
        for char, coord in zip(entry.chars, entry.path(anchor)):
            self.board.claim(coord, char, word_id)

        entry.placed = True
        entry.anchor = anchor
        self.placed_words.append(entry)

    def _reset_board(self) -> None:
        self.board = Board(self.grid_radius)
        self.placed_words = []
        for key in self.stats:
            self.stats[key] = 0

    def get_board(self) -> Board:
        """Gets the current board state."""
        return self.board

    def get_placed_words(self) -> List[WordEntry]:
        """Gets the placed words in commit order."""
        return self.placed_words

    def get_words(self) -> List[WordEntry]:
        """Gets every word from the last run, placed or not."""
        return self.words
