# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Level sources for the generator.

Curated levels, the bundled word pool, and seeded selection of random
levels from that pool. These only supply word lists and seeds; the
generator itself never reads them.
"""

import logging
import os
import re
import sys
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

import yaml

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from rng import create_rng

logger = logging.getLogger(__name__)

DEFAULT_WORDS_PATH = Path(__file__).parent / "data" / "words.yaml"
DEFAULT_CLUE = "RANDOM MIX"

UPPERCASE_WORD = re.compile(r"^[A-Z]+$")


class LevelNotFoundError(Exception):
    """Raised when a level number or word pool cannot be resolved."""
    pass


@dataclass
class PredefinedLevel:
    """A curated level."""
    level: int
    clue: str
    words: List[str] = field(default_factory=list)


PREDEFINED_LEVELS: List[PredefinedLevel] = [
    PredefinedLevel(1, "BEACH DAY", ["SUN", "SAND", "WAVE"]),
    PredefinedLevel(2, "SOFA CHILL", ["RUG", "LAMP", "PILLOW"]),
    PredefinedLevel(3, "BREAKFAST QUICK", ["TEA", "TOAST", "JAM"]),
    PredefinedLevel(4, "DOG WALK", ["LEASH", "TREAT", "BARK"]),
    PredefinedLevel(5, "RAINY KIT", ["COAT", "BOOT", "MUD"]),
    PredefinedLevel(6, "GAME NIGHT", ["DICE", "CARD", "TURN"]),
    PredefinedLevel(7, "COFFEE RUN", ["MUG", "LATTE", "FOAM", "BEANS"]),
    PredefinedLevel(8, "CITY HOP", ["MAP", "METRO", "TAXI", "NOISE"]),
    PredefinedLevel(9, "SCHOOL STUFF", ["BOOK", "PENCIL", "NOTES", "LUNCH"]),
    PredefinedLevel(10, "HOME GARDEN", ["SEED", "SOIL", "WATER", "FLOWER"]),
    PredefinedLevel(11, "WINTER WARDROBE", ["HAT", "SCARF", "GLOVE", "SLED"]),
    PredefinedLevel(12, "MUSIC VIBES", ["BEAT", "MELODY", "DRUM", "STAGE"]),
    PredefinedLevel(13, "PARK DAY", ["PATH", "TREES", "LAKE", "BENCH"]),
    PredefinedLevel(14, "MOVIE NIGHT", ["POPCORN", "SCREEN", "SCENE", "TICKET"]),
    PredefinedLevel(15, "SPACE GEEK", ["MOON", "STAR", "ROCKET", "PLANET"]),
    PredefinedLevel(16, "MINI TRIP", ["PLANE", "HOTEL", "BAG", "MAP"]),
    PredefinedLevel(17, "SPORTS HYPE", ["GOAL", "SCORE", "COACH", "WHISTLE"]),
    PredefinedLevel(18, "BAKERY RUN", ["OVEN", "DOUGH", "CRUST", "PIE"]),
    PredefinedLevel(19, "DESK SETUP", ["MOUSE", "CABLE", "SCREEN", "FILES"]),
    PredefinedLevel(20, "CAMP VIBES", ["TENT", "FIRE", "SMORE", "GUITAR"]),
]


def get_predefined_level(level: int) -> Optional[PredefinedLevel]:
    """Get a curated level by number, or None."""
    for entry in PREDEFINED_LEVELS:
        if entry.level == level:
            return entry
    return None


def has_predefined_level(level: int) -> bool:
    return 1 <= level <= len(PREDEFINED_LEVELS)


def make_level_seed(content_id: str, level: int) -> str:
    """Seed convention shared with the game client: "{contentId}:{level}"."""
    return f"{content_id}:{level}"


def compute_unique_letters(words: Iterable[str]) -> List[str]:
    """Sorted distinct A-Z letters across the words."""
    letters = set()
    for word in words:
        for ch in word.upper():
            if "A" <= ch <= "Z":
                letters.add(ch)
    return sorted(letters)


@dataclass
class WordPoolEntry:
    """A word in the bundled pool."""
    word: str
    clue: Optional[str] = None
    difficulty: Optional[int] = None


class WordRepository:
    """
    Word pool loaded from a YAML file.

    The file holds a top-level ``words`` list whose items are either plain
    strings or mappings with ``word`` and optional ``clue``/``difficulty``.
    Anything that is not an upper-case A-Z word is skipped.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path) if path else DEFAULT_WORDS_PATH
        self._entries: List[WordPoolEntry] = self._load()

    def _load(self) -> List[WordPoolEntry]:
        if not self.path.exists():
            raise LevelNotFoundError(f"Word pool not found: {self.path}")

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise LevelNotFoundError(f"Invalid YAML in word pool {self.path}: {e}")

        if not isinstance(data, dict) or not isinstance(data.get('words'), list):
            raise LevelNotFoundError(
                f"Word pool {self.path} must contain a 'words' list"
            )

        entries = []
        skipped = 0
        for item in data['words']:
            if isinstance(item, str):
                item = {'word': item}
            if not isinstance(item, dict):
                skipped += 1
                continue
            word = item.get('word')
            if not isinstance(word, str) or not UPPERCASE_WORD.match(word):
                skipped += 1
                continue
            entries.append(WordPoolEntry(
                word=word,
                clue=item.get('clue'),
                difficulty=item.get('difficulty'),
            ))

        logger.debug(f"Loaded {len(entries)} pool words from {self.path} ({skipped} skipped)")
        return entries

    def get_all(self) -> List[WordPoolEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


@dataclass
class LevelSelection:
    """Words chosen for a generated level."""
    seed: str
    words: List[str]
    clue: str


class LevelSelector:
    """Seeded selection of level words from a WordRepository."""

    def __init__(self, repo: Optional[WordRepository] = None):
        self.repo = repo or WordRepository()

    def pick_words(
        self,
        seed: str,
        count: int,
        exclude: Iterable[str] = (),
    ) -> LevelSelection:
        """
        Deterministically pick ``count`` words for a level.

        Args:
            seed: Seed string; the same seed always picks the same words
            count: Number of words wanted
            exclude: Words that must not be chosen

        Returns:
            LevelSelection with the words and the most common clue
        """
        rng = create_rng(seed)
        excluded = {w.upper() for w in exclude}
        pool = [entry for entry in self.repo.get_all() if entry.word not in excluded]

        chosen: List[WordPoolEntry] = []
        for entry in rng.shuffle(pool):
            if len(chosen) >= count:
                break
            if not 2 <= len(entry.word) <= 12:
                continue
            chosen.append(entry)

        clue_counts = Counter(entry.clue for entry in chosen if entry.clue)
        clue = clue_counts.most_common(1)[0][0] if clue_counts else DEFAULT_CLUE

        if len(chosen) < count:
            logger.warning(f"Word pool only supplied {len(chosen)} of {count} words")

        return LevelSelection(seed=seed, words=[entry.word for entry in chosen], clue=clue)
