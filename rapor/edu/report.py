"""
rapor Edu — Student Card and Class Report

Bundles the engine outputs a dashboard consumes for one student
(score, rank out of N, exam average, task score, raw proactiveness
counters) and renders them as plain terminal text or JSON-ready dicts.

Usage:
    rapor student roster.json 3
    rapor student roster.json 3 --json
    rapor rank roster.json
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from rapor.edu.ranking import RankedStudent, rank_of, rank_students
from rapor.edu.roster import Proactiveness, Student, TOTAL_MEETINGS
from rapor.edu.scoring import (
    DEFAULT_WEIGHTS,
    ScoreWeights,
    StudentScores,
    proficiency_level,
    score_student,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StudentCard:
    """Everything the dashboard shows for the selected student."""
    student: Student
    scores: StudentScores
    rank: int           # 0 if the student is not in the roster
    roster_size: int

    @property
    def proactiveness(self) -> Proactiveness:
        return self.student.proactiveness


def find_student(roster: Sequence[Student], student_id: int) -> Optional[Student]:
    """Return the roster entry with the given id, or None."""
    return next((s for s in roster if s.id == student_id), None)


def student_card(
    student: Student,
    roster: Sequence[Student],
    weights: ScoreWeights = DEFAULT_WEIGHTS,
    total_meetings: int = TOTAL_MEETINGS,
    ties: str = "stable",
) -> StudentCard:
    """Score one student and place them within the roster."""
    ranks = rank_students(roster, weights, total_meetings, ties)
    return StudentCard(
        student=student,
        scores=score_student(student, weights, total_meetings),
        rank=rank_of(ranks, student.id),
        roster_size=len(roster),
    )


# ── JSON ─────────────────────────────────────────────────────────────

def card_to_dict(card: StudentCard) -> dict[str, Any]:
    s = card.student
    return {
        "id": s.id,
        "name": s.name,
        "nim": s.nim,
        "picture": s.picture,
        "summary_score": card.scores.summary,
        "level": card.scores.level,
        "rank": card.rank,
        "roster_size": card.roster_size,
        "exam_average": round(card.scores.exam_average, 1),
        "task_score": round(card.scores.task_score, 1),
        "proactiveness_score": round(card.scores.proactiveness, 1),
        "proactiveness": {
            "bertanya": s.proactiveness.bertanya,
            "menjawab": s.proactiveness.menjawab,
            "menambahkan": s.proactiveness.menambahkan,
        },
    }


def ranking_to_dict(ranking: Sequence[RankedStudent]) -> list[dict[str, Any]]:
    return [
        {"rank": r.rank, "id": r.id, "name": r.name,
         "picture": r.picture, "score": r.score}
        for r in ranking
    ]


# ── Terminal formatters ──────────────────────────────────────────────

def format_student_card(card: StudentCard) -> str:
    """Format a student card for terminal output."""
    s = card.student
    sc = card.scores
    rank = f"{card.rank}/{card.roster_size}" if card.rank else f"-/{card.roster_size}"

    lines = []
    lines.append("")
    lines.append(f"  {s.name or f'Student {s.id}'}  (NIM: {s.nim or '-'})")
    lines.append(f"  {'─' * 56}")
    lines.append(f"    Score:          {sc.summary:>5.1f}   {sc.level}")
    lines.append(f"    Rank:           {rank:>5s}")
    lines.append("")
    lines.append(f"    Exam Average:   {sc.exam_average:>5.1f}   ({len(s.exams)} exams)")
    lines.append(f"    Task Score:     {sc.task_score:>5.1f}   ({len(s.tasks)} tasks)")
    lines.append(f"    Proactiveness:  {sc.proactiveness:>5.1f}   "
                 f"bertanya={s.proactiveness.bertanya} "
                 f"menjawab={s.proactiveness.menjawab} "
                 f"menambahkan={s.proactiveness.menambahkan}")
    lines.append("")
    return "\n".join(lines)


def format_class_ranking(ranking: Sequence[RankedStudent]) -> str:
    """Format the class ranking overview for terminal output."""
    lines = []
    lines.append("")
    lines.append(f"  Class Ranking Overview  ({len(ranking)} students)")
    lines.append(f"  {'─' * 56}")

    if not ranking:
        lines.append("    No student data available.")
        lines.append("")
        return "\n".join(lines)

    lines.append(f"    {'Rank':>4s}  {'ID':>5s}  {'Name':<24s} {'Score':>6s}  Level")
    for r in ranking:
        lines.append(
            f"    {r.rank:>4d}  {r.id:>5d}  {r.name[:24]:<24s} "
            f"{r.score:>6.1f}  {proficiency_level(r.score)}"
        )
    lines.append("")
    return "\n".join(lines)
