# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Word compatibility scoring.

Ranks words by how many letters they share with the rest of the list so
the best connected words are laid down first and later words still have
something to cross.
"""

import logging
import os
import sys
from typing import List, Sequence

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import WordEntry

logger = logging.getLogger(__name__)


def compute_match_scores(entries: List[WordEntry]) -> List[WordEntry]:
    """
    Set ``match_score`` on every entry.

    The score of word A counts every (i, B, j) with B another word in the
    list and ``A.chars[i] == B.chars[j]``.

    Args:
        entries: Word entries to score (modified in place)

    Returns:
        The same list
    """
    for i, word_a in enumerate(entries):
        score = 0
        for char_a in word_a.chars:
            for k, word_b in enumerate(entries):
                if k == i:
                    continue
                score += word_b.chars.count(char_a)
        word_a.match_score = score
    return entries


def sort_by_compatibility(entries: List[WordEntry]) -> List[WordEntry]:
    """Order by score then length, both descending; ties keep input order."""
    return sorted(entries, key=lambda w: (-w.match_score, -len(w.chars)))


def prepare_words(words: Sequence[str]) -> List[WordEntry]:
    """
    Build scored word entries in placement order.

    Args:
        words: Words in the caller's order

    Returns:
        WordEntry list sorted for placement
    """
    entries = [WordEntry(word=word, index=i) for i, word in enumerate(words)]
    compute_match_scores(entries)
    ordered = sort_by_compatibility(entries)

    scores = ", ".join(f"{w.word}={w.match_score}" for w in ordered)
    logger.debug(f"Word match scores: {scores}")
    return ordered
