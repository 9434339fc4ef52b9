"""
rapor Edu — Class Ranking

Orders a roster by summary score (highest first) and assigns 1-based
ranks. Two tie policies are supported:

    stable       Equal scores keep their roster order. Ranks are always
                 exactly 1..N with no duplicates. This is the default.
    competition  Equal scores share the best rank and the following rank
                 is skipped (1, 2, 2, 4).

Both are deterministic: the same roster in the same order always yields
the same ranks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Sequence

from rapor.edu.roster import Student, TOTAL_MEETINGS
from rapor.edu.scoring import DEFAULT_WEIGHTS, ScoreWeights, summary_score

logger = logging.getLogger(__name__)

TIE_POLICIES = ("stable", "competition")


@dataclass(frozen=True)
class RankedStudent:
    """One row of the class ranking overview."""
    rank: int
    id: int
    name: str
    picture: str
    score: float


def _ordered_scores(
    students: Sequence[Student],
    weights: ScoreWeights,
    total_meetings: int,
) -> list[tuple[Student, float]]:
    scored = [(s, summary_score(s, weights, total_meetings)) for s in students]
    # sorted() is stable, so ties keep roster order
    return sorted(scored, key=lambda pair: -pair[1])


def _assign_ranks(scores: Sequence[float], ties: str) -> list[int]:
    if ties not in TIE_POLICIES:
        raise ValueError(f"Unknown tie policy {ties!r}, expected one of {TIE_POLICIES}")

    ranks = []
    for position, score in enumerate(scores, start=1):
        if ties == "competition" and position > 1 and score == scores[position - 2]:
            ranks.append(ranks[-1])
        else:
            ranks.append(position)
    return ranks


def class_ranking(
    students: Sequence[Student],
    weights: ScoreWeights = DEFAULT_WEIGHTS,
    total_meetings: int = TOTAL_MEETINGS,
    ties: str = "stable",
) -> list[RankedStudent]:
    """
    Build the class ranking, best student first.

    Args:
        students:       Roster in its source order
        weights:        Summary score weights
        total_meetings: Sessions bounding the proactiveness counters
        ties:           "stable" or "competition"

    Returns:
        One RankedStudent per roster entry; empty for an empty roster.
    """
    ordered = _ordered_scores(students, weights, total_meetings)
    ranks = _assign_ranks([score for _, score in ordered], ties)

    ranking = [
        RankedStudent(rank=rank, id=s.id, name=s.name, picture=s.picture, score=score)
        for (s, score), rank in zip(ordered, ranks)
    ]
    logger.debug(f"Ranked {len(ranking)} students (ties={ties})")
    return ranking


def rank_students(
    students: Sequence[Student],
    weights: ScoreWeights = DEFAULT_WEIGHTS,
    total_meetings: int = TOTAL_MEETINGS,
    ties: str = "stable",
) -> dict[int, int]:
    """Map each student id to its 1-based rank."""
    return {
        entry.id: entry.rank
        for entry in class_ranking(students, weights, total_meetings, ties)
    }


def rank_of(ranks: Mapping[int, int], student_id: int) -> int:
    """Rank lookup; 0 means the student is not in the ranked roster."""
    return ranks.get(student_id, 0)
