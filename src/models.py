"""
Data models for the hex word puzzle generator.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, NamedTuple, Optional, Tuple


class HexCoordinate(NamedTuple):
    """Axial coordinate on a pointy-top hex grid."""
    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def __add__(self, other) -> 'HexCoordinate':
        # Vector addition, not tuple concatenation
        return HexCoordinate(self.q + other[0], self.r + other[1])

    def distance_from_origin(self) -> int:
        return max(abs(self.q), abs(self.r), abs(self.s))

    def step(self, direction: int, count: int = 1) -> 'HexCoordinate':
        """Move ``count`` cells along one of the reading directions."""
        dq, dr = HEX_DIRECTIONS[direction]
        return self + (dq * count, dr * count)

    def neighbors(self) -> List['HexCoordinate']:
        return [self + offset for offset in ALL_HEX_DIRECTIONS]

    def key(self) -> str:
        return f"{self.q},{self.r}"


# Reading directions for placed words (pointy-top orientation)
HEX_DIRECTIONS: List[Tuple[int, int]] = [
    (1, 0),   # Left to right along the Q axis
    (0, 1),   # Top to bottom along the R axis
    (1, -1),  # Diagonal along the S axis
]

DIRECTION_NAMES = ["horizontal", "vertical", "diagonal"]

# All 6 neighbour offsets
ALL_HEX_DIRECTIONS: List[Tuple[int, int]] = [
    (1, 0),
    (-1, 1),
    (0, -1),
    (-1, 0),
    (1, -1),
    (0, 1),
]

ORIGIN = HexCoordinate(0, 0)


class ConsistencyViolationError(Exception):
    """Raised when a board write would break a placed word."""
    pass


@dataclass
class HexCell:
    """A single lettered cell on the board."""
    q: int
    r: int
    letter: Optional[str] = None
    word_ids: List[int] = field(default_factory=list)

    @property
    def coordinate(self) -> HexCoordinate:
        return HexCoordinate(self.q, self.r)

    def is_intersection(self) -> bool:
        return len(self.word_ids) > 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            'q': self.q,
            'r': self.r,
            'letter': self.letter,
            'word_ids': list(self.word_ids),
        }


@dataclass(frozen=True)
class Anchor:
    """Committed start position and reading direction of a word."""
    q: int
    r: int
    direction: int

    @property
    def coordinate(self) -> HexCoordinate:
        return HexCoordinate(self.q, self.r)


@dataclass
class WordEntry:
    """A word moving through scoring and placement."""
    word: str
    index: int = 0  # Position in the caller's word list
    match_score: int = 0
    placed: bool = False
    anchor: Optional[Anchor] = None
    chars: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.word = self.word.upper().strip()
        if not self.chars:
            self.chars = list(self.word)

    def __len__(self) -> int:
        return len(self.chars)

    def path(self, anchor: Optional[Anchor] = None) -> List[HexCoordinate]:
        """Cells covered by this word from ``anchor`` (defaults to the committed one)."""
        anchor = anchor or self.anchor
        if anchor is None:
            return []
        return [anchor.coordinate.step(anchor.direction, i) for i in range(len(self.chars))]

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'word': self.word,
            'index': self.index,
            'match_score': self.match_score,
            'placed': self.placed,
        }
        if self.anchor is not None:
            data['q'] = self.anchor.q
            data['r'] = self.anchor.r
            data['direction'] = self.anchor.direction
        return data


class Board:
    """
    Coordinate to cell mapping for one generation run.

    Cells are kept in the order they were first written. There is no
    removal operation and a cell's letter never changes once set.
    """

    def __init__(self, grid_radius: int):
        self.grid_radius = grid_radius
        self._cells: Dict[HexCoordinate, HexCell] = {}

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[HexCell]:
        return iter(list(self._cells.values()))

    def __contains__(self, coord) -> bool:
        return HexCoordinate(*coord) in self._cells

    @property
    def size(self) -> int:
        return len(self._cells)

    def in_bounds(self, coord: HexCoordinate) -> bool:
        return coord.distance_from_origin() <= self.grid_radius

    def get(self, coord) -> Optional[HexCell]:
        return self._cells.get(HexCoordinate(*coord))

    def is_occupied(self, coord) -> bool:
        return HexCoordinate(*coord) in self._cells

    def claim(self, coord: HexCoordinate, letter: str, word_id: int) -> HexCell:
        """
        Write ``letter`` for word ``word_id`` at ``coord``.

        Raises:
            ConsistencyViolationError: If the cell is outside the grid or
                already holds a different letter
        """
        coord = HexCoordinate(*coord)
        if not self.in_bounds(coord):
            raise ConsistencyViolationError(
                f"Cell {coord.key()} is outside grid radius {self.grid_radius}"
            )

        cell = self._cells.get(coord)
        if cell is None:
            cell = HexCell(q=coord.q, r=coord.r, letter=letter)
            self._cells[coord] = cell
        elif cell.letter != letter:
            raise ConsistencyViolationError(
                f"Cell {coord.key()} holds '{cell.letter}', "
                f"word {word_id} tried to write '{letter}'"
            )

        cell.word_ids.append(word_id)
        return cell

    def restore_cell(self, cell: HexCell) -> None:
        """Put back a cell loaded from a saved puzzle, as-is and unchecked."""
        self._cells[cell.coordinate] = cell

    def coordinates(self) -> List[HexCoordinate]:
        return list(self._cells.keys())

    def intersections(self) -> List[HexCell]:
        return [cell for cell in self._cells.values() if cell.is_intersection()]

    def letters(self) -> List[str]:
        """Distinct letters on the board, sorted."""
        return sorted({cell.letter for cell in self._cells.values() if cell.letter})

    def to_string(self, show_solution: bool = True) -> str:
        """
        Render the occupied cells as offset text rows.

        Each row is one ``r`` value; cells are shifted half a slot per row
        so the three reading directions stay straight lines.
        """
        if not self._cells:
            return ""

        min_r = min(c.r for c in self._cells)
        max_r = max(c.r for c in self._cells)
        min_x = min(2 * c.q + c.r for c in self._cells)
        max_x = max(2 * c.q + c.r for c in self._cells)

        lines = []
        for r in range(min_r, max_r + 1):
            row = [" "] * (max_x - min_x + 1)
            for coord, cell in self._cells.items():
                if coord.r != r:
                    continue
                x = 2 * coord.q + coord.r - min_x
                row[x] = cell.letter if show_solution and cell.letter else "_"
            lines.append("".join(row).rstrip())
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {coord.key(): cell.to_dict() for coord, cell in self._cells.items()}


@dataclass
class GenerationResult:
    """Output of one generation run."""
    board: Board
    placed_words: List[WordEntry]
    words: List[WordEntry] = field(default_factory=list)  # All words in placement order
    success: bool = False

    @property
    def unplaced_words(self) -> List[WordEntry]:
        return [w for w in self.words if not w.placed]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'board': self.board.to_dict(),
            'placed_words': [w.to_dict() for w in self.placed_words],
            'unplaced_words': [w.word for w in self.unplaced_words],
            'success': self.success,
        }
