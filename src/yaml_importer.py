# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
YAML importer for hex puzzles.

Loads user-submitted level definitions, and exported puzzles so a saved
board can be audited again.
"""

from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from models import Anchor, Board, HexCell, WordEntry
from yaml_schema import LevelDefinition, PuzzleYAMLData


class YAMLImportError(Exception):
    """Raised when YAML import fails."""
    pass


class YAMLImporter:
    """
    Imports hex puzzles and level definitions from YAML.

    Usage:
        importer = YAMLImporter()
        level = importer.load_level('levels/beach.yaml')
        puzzle_data = importer.load_puzzle('output/puzzle.yaml')
        board, placed = importer.to_components(puzzle_data)
    """

    def _read(self, path: str) -> Dict[str, Any]:
        path = Path(path)

        if not path.exists():
            raise YAMLImportError(f"File not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise YAMLImportError(f"Invalid YAML in {path}: {e}")

        if not isinstance(data, dict):
            raise YAMLImportError(
                f"{path} must contain a YAML mapping, got {type(data)}"
            )
        return data

    def load_level(self, path: str) -> LevelDefinition:
        """
        Load a level definition file.

        Args:
            path: Path to YAML file

        Returns:
            LevelDefinition instance

        Raises:
            YAMLImportError: If the file is missing, invalid, or has no words/seed
        """
        return self.parse_level(self._read(path))

    def load_level_string(self, yaml_content: str) -> LevelDefinition:
        """Load a level definition from a YAML string."""
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise YAMLImportError(f"Invalid YAML content: {e}")

        if not isinstance(data, dict):
            raise YAMLImportError(f"YAML content must be a mapping, got {type(data)}")
        return self.parse_level(data)

    def parse_level(self, data: Dict[str, Any]) -> LevelDefinition:
        level_data = data.get('level', data)
        if not isinstance(level_data, dict):
            raise YAMLImportError("'level' must be a mapping")

        words = level_data.get('words')
        if not isinstance(words, list) or not words:
            raise YAMLImportError("Level definition needs a non-empty 'words' list")
        if not level_data.get('seed'):
            raise YAMLImportError("Level definition needs a 'seed'")

        radius = level_data.get('grid_radius', 10)
        if isinstance(radius, bool) or not isinstance(radius, int):
            raise YAMLImportError(f"grid_radius must be an integer, got {radius!r}")

        return LevelDefinition.from_dict(data)

    def load_puzzle(self, path: str) -> PuzzleYAMLData:
        """
        Load an exported puzzle.

        Args:
            path: Path to YAML file

        Returns:
            PuzzleYAMLData instance
        """
        data = self._read(path)
        try:
            return PuzzleYAMLData.from_dict(data)
        except (KeyError, TypeError) as e:
            raise YAMLImportError(f"Failed to parse puzzle data: {e}")

    def to_components(
        self,
        puzzle_data: PuzzleYAMLData,
    ) -> Tuple[Board, List[WordEntry]]:
        """
        Rebuild a board and its placed words from exported data.

        Cells are restored verbatim rather than replayed through placement,
        so a damaged file shows up when the board is validated.

        Args:
            puzzle_data: PuzzleYAMLData instance

        Returns:
            (board, placed words in commit order)
        """
        board = Board(puzzle_data.metadata.grid_radius)
        for cell_data in puzzle_data.cells:
            board.restore_cell(HexCell(
                q=cell_data.q,
                r=cell_data.r,
                letter=cell_data.letter,
                word_ids=list(cell_data.word_ids),
            ))

        placed = []
        for word_data in sorted(puzzle_data.placed_words, key=lambda w: w.id):
            placed.append(WordEntry(
                word=word_data.word,
                index=word_data.input_index,
                match_score=word_data.match_score,
                placed=True,
                anchor=Anchor(word_data.q, word_data.r, word_data.direction),
            ))

        return board, placed
