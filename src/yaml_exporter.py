# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
YAML exporter for hex puzzles.

Writes generated boards, and level definitions, in the YAML format that
YAMLImporter reads back.
"""

from pathlib import Path
from typing import Optional

import yaml

from models import GenerationResult
from yaml_schema import LevelDefinition, PuzzleYAMLData


class YAMLExportError(Exception):
    """Raised when YAML export fails."""
    pass


class YAMLExporter:
    """
    Exports hex puzzles to YAML.

    Usage:
        exporter = YAMLExporter()
        yaml_str = exporter.export(result, seed="post123:4", grid_radius=10)
        exporter.save(result, 'output/puzzle.yaml', seed="post123:4")
    """

    def export(
        self,
        result: GenerationResult,
        seed: str,
        grid_radius: Optional[int] = None,
        clue: str = "",
        name: Optional[str] = None,
    ) -> str:
        """
        Export a generated puzzle to a YAML string.

        Args:
            result: GenerationResult from the generator
            seed: Seed the puzzle was generated with
            grid_radius: Board radius (defaults to the board's)
            clue: Level clue
            name: Optional level name

        Returns:
            YAML string representation of the puzzle
        """
        if grid_radius is None:
            grid_radius = result.board.grid_radius

        puzzle_data = PuzzleYAMLData.from_result(
            result, seed=seed, grid_radius=grid_radius, clue=clue, name=name
        )

        header = "# Hex Word Puzzle\n"
        header += "# Generated board: cells in write order, words in placement order\n\n"

        return header + self._dump(puzzle_data.to_dict())

    def export_level(self, level: LevelDefinition) -> str:
        """Export a level definition to a YAML string."""
        return self._dump(level.to_dict())

    def save(
        self,
        result: GenerationResult,
        path: str,
        seed: str,
        grid_radius: Optional[int] = None,
        clue: str = "",
        name: Optional[str] = None,
    ) -> str:
        """
        Save a generated puzzle to a YAML file.

        Returns:
            Path to saved file
        """
        yaml_content = self.export(result, seed, grid_radius, clue, name)
        return self._write(path, yaml_content)

    def save_level(self, level: LevelDefinition, path: str) -> str:
        """Save a level definition to a YAML file."""
        return self._write(path, self.export_level(level))

    def _dump(self, data) -> str:
        try:
            return yaml.safe_dump(
                data,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
                indent=2,
                width=80,
            )
        except yaml.YAMLError as e:
            raise YAMLExportError(f"Failed to serialize puzzle: {e}")

    def _write(self, path: str, content: str) -> str:
        # Ensure directory exists
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            raise YAMLExportError(f"Could not write {path}: {e}")

        return str(path)


def export_puzzle_to_yaml(
    result: GenerationResult,
    output_path: str,
    seed: str,
    **kwargs
) -> str:
    """
    Convenience function to export a puzzle to a YAML file.

    Args:
        result: GenerationResult from the generator
        output_path: Output file path
        seed: Seed the puzzle was generated with
        **kwargs: grid_radius, clue, name

    Returns:
        Path to saved file
    """
    exporter = YAMLExporter()
    return exporter.save(result, output_path, seed, **kwargs)
