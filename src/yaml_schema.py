# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
YAML schema definitions for hex puzzle files.

Two documents share this module: level definitions (the words and seed a
puzzle is generated from) and exported puzzles (the generated board).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class LevelDefinition:
    """Inputs for one puzzle, as submitted by a level author."""
    words: List[str]
    seed: str
    grid_radius: int = 10
    clue: str = ""
    name: Optional[str] = None
    author: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LevelDefinition':
        level = data.get('level', data)
        return cls(
            words=[str(w).upper() for w in level.get('words', [])],
            seed=str(level.get('seed', '')),
            grid_radius=level.get('grid_radius', 10),
            clue=level.get('clue', ''),
            name=level.get('name'),
            author=level.get('author'),
        )

    def to_dict(self) -> Dict[str, Any]:
        level = {
            'words': list(self.words),
            'seed': self.seed,
            'grid_radius': self.grid_radius,
            'clue': self.clue,
        }
        if self.name:
            level['name'] = self.name
        if self.author:
            level['author'] = self.author
        return {'level': level}


@dataclass
class CellData:
    """A lettered board cell."""
    q: int
    r: int
    letter: str
    word_ids: List[int] = field(default_factory=list)

    @property
    def s(self) -> int:
        return -self.q - self.r


@dataclass
class PlacedWordData:
    """A placed word and its anchor."""
    id: int
    word: str
    q: int
    r: int
    direction: int
    input_index: int = 0
    match_score: int = 0


@dataclass
class PuzzleMetadata:
    """Metadata for an exported puzzle."""
    seed: str
    grid_radius: int
    date: str = ""
    clue: str = ""
    name: Optional[str] = None
    word_count: int = 0
    placed_count: int = 0
    cell_count: int = 0
    intersection_count: int = 0
    success: bool = False


@dataclass
class PuzzleYAMLData:
    """
    Complete exported puzzle.

    This is the main data structure that gets serialized to/from YAML.
    """
    metadata: PuzzleMetadata
    cells: List[CellData] = field(default_factory=list)
    placed_words: List[PlacedWordData] = field(default_factory=list)
    unplaced_words: List[str] = field(default_factory=list)

    @classmethod
    def from_result(
        cls,
        result,
        seed: str,
        grid_radius: int,
        clue: str = "",
        name: Optional[str] = None,
    ) -> 'PuzzleYAMLData':
        """
        Build export data from a GenerationResult.

        Args:
            result: GenerationResult from the generator
            seed: Seed the puzzle was generated with
            grid_radius: Board radius
            clue: Level clue
            name: Optional level name

        Returns:
            PuzzleYAMLData instance
        """
        cells = [
            CellData(q=cell.q, r=cell.r, letter=cell.letter, word_ids=list(cell.word_ids))
            for cell in result.board
        ]
        placed = [
            PlacedWordData(
                id=word_id,
                word=entry.word,
                q=entry.anchor.q,
                r=entry.anchor.r,
                direction=entry.anchor.direction,
                input_index=entry.index,
                match_score=entry.match_score,
            )
            for word_id, entry in enumerate(result.placed_words)
        ]

        return cls(
            metadata=PuzzleMetadata(
                seed=seed,
                grid_radius=grid_radius,
                date=datetime.now().strftime("%Y-%m-%d"),
                clue=clue,
                name=name,
                word_count=len(result.words),
                placed_count=len(result.placed_words),
                cell_count=len(result.board),
                intersection_count=len(result.board.intersections()),
                success=result.success,
            ),
            cells=cells,
            placed_words=placed,
            unplaced_words=[entry.word for entry in result.unplaced_words],
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for YAML serialization.

        Returns:
            Dictionary representation of the puzzle
        """
        metadata = {
            'seed': self.metadata.seed,
            'grid_radius': self.metadata.grid_radius,
            'date': self.metadata.date,
            'clue': self.metadata.clue,
            'word_count': self.metadata.word_count,
            'placed_count': self.metadata.placed_count,
            'cell_count': self.metadata.cell_count,
            'intersection_count': self.metadata.intersection_count,
            'success': self.metadata.success,
        }
        if self.metadata.name:
            metadata['name'] = self.metadata.name

        return {
            'metadata': metadata,
            'cells': [
                {
                    'q': c.q,
                    'r': c.r,
                    's': c.s,
                    'letter': c.letter,
                    'word_ids': list(c.word_ids),
                }
                for c in self.cells
            ],
            'placed_words': [
                {
                    'id': w.id,
                    'word': w.word,
                    'q': w.q,
                    'r': w.r,
                    'direction': w.direction,
                    'input_index': w.input_index,
                    'match_score': w.match_score,
                }
                for w in self.placed_words
            ],
            'unplaced_words': list(self.unplaced_words),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PuzzleYAMLData':
        """
        Create from dictionary (loaded from YAML).

        Args:
            data: Dictionary from YAML parsing

        Returns:
            PuzzleYAMLData instance
        """
        meta = data.get('metadata', {})
        metadata = PuzzleMetadata(
            seed=str(meta.get('seed', '')),
            grid_radius=meta.get('grid_radius', 10),
            date=meta.get('date', ''),
            clue=meta.get('clue', ''),
            name=meta.get('name'),
            word_count=meta.get('word_count', 0),
            placed_count=meta.get('placed_count', 0),
            cell_count=meta.get('cell_count', 0),
            intersection_count=meta.get('intersection_count', 0),
            success=meta.get('success', False),
        )

        cells = [
            CellData(
                q=c['q'],
                r=c['r'],
                letter=c['letter'],
                word_ids=list(c.get('word_ids', [])),
            )
            for c in data.get('cells', [])
        ]
        placed = [
            PlacedWordData(
                id=w['id'],
                word=w['word'],
                q=w['q'],
                r=w['r'],
                direction=w['direction'],
                input_index=w.get('input_index', 0),
                match_score=w.get('match_score', 0),
            )
            for w in data.get('placed_words', [])
        ]

        return cls(
            metadata=metadata,
            cells=cells,
            placed_words=placed,
            unplaced_words=list(data.get('unplaced_words', [])),
        )
