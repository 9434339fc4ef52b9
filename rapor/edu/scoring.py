"""
rapor Edu — Student Scoring Engine

Scores each student across three dimensions of class performance:
    1. Exam Average      — arithmetic mean of exam results
    2. Task Score        — mean grade over all assigned tasks
    3. Proactiveness     — asking, answering and contributing in class

The summary score combines them with a fixed weighting:

    summary = 0.5 * exam + 0.3 * task + 0.2 * proactiveness

clamped to 0-100 and rounded to one decimal. It is both the number the
dashboard shows as "Score" and the sole ranking key, so the weights live
in one place (DEFAULT_WEIGHTS) and can only be changed through config.

Every function here is total: empty exams or tasks score 0, never fail.

Each summary score maps to a proficiency level:
    Excellent  (85-100)
    Good       (65-84)
    Developing (40-64)
    Needs Work (0-39)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from rapor.edu.roster import Proactiveness, Student, TaskRecord, TOTAL_MEETINGS

logger = logging.getLogger(__name__)

# Radar fallback when no meeting count is configured
FALLBACK_MEETINGS = 15


class ScoringConfigError(ValueError):
    """Raised for an unusable weighting configuration."""


# ── Proficiency levels ───────────────────────────────────────────────

LEVELS = [
    (85, "Excellent"),
    (65, "Good"),
    (40, "Developing"),
    (0,  "Needs Work"),
]


def proficiency_level(score: float) -> str:
    """Map a 0-100 score to a proficiency level."""
    for threshold, label in LEVELS:
        if score >= threshold:
            return label
    return "Needs Work"


# ── Weights ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ScoreWeights:
    """Share of each dimension in the summary score. Must sum to 1."""
    exam: float = 0.5
    task: float = 0.3
    proactiveness: float = 0.2

    def validate(self) -> ScoreWeights:
        values = (self.exam, self.task, self.proactiveness)
        if any(w < 0 for w in values):
            raise ScoringConfigError(f"Weights must be non-negative: {self}")
        if not math.isclose(sum(values), 1.0, abs_tol=1e-9):
            raise ScoringConfigError(
                f"Weights must sum to 1.0, got {sum(values):.3f}: {self}")
        return self

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> ScoreWeights:
        """Read a [scoring.weights] table; missing keys keep their defaults."""
        if not data:
            return cls()
        default = cls()
        try:
            weights = cls(
                exam=float(data.get("exam", default.exam)),
                task=float(data.get("task", default.task)),
                proactiveness=float(data.get("proactiveness", default.proactiveness)),
            )
        except (TypeError, ValueError) as e:
            raise ScoringConfigError(f"Invalid weight value in {dict(data)!r}") from e
        return weights.validate()


DEFAULT_WEIGHTS = ScoreWeights()


# ── Data classes ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class StudentScores:
    """All derived scores for a single student."""
    student_id: int
    exam_average: float     # 0-100
    task_score: float       # 0-100
    proactiveness: float    # 0-100
    summary: float          # 0-100, ranking key

    @property
    def level(self) -> str:
        return proficiency_level(self.summary)


# ── Scoring functions ────────────────────────────────────────────────

def exam_average(exams: Sequence[float]) -> float:
    """
    Arithmetic mean of exam results.

    An empty sequence averages to 0.0. Values are not clamped, so a
    negative or >100 result still enters the mean as given.
    """
    if not exams:
        return 0.0
    return sum(exams) / len(exams)


def task_score(tasks: Sequence[TaskRecord]) -> float:
    """
    Mean task grade over every assigned task.

    Unsubmitted or ungraded tasks contribute 0, so skipping work lowers
    the score instead of being ignored. No tasks scores 0.0.
    """
    if not tasks:
        return 0.0
    return sum(t.contribution for t in tasks) / len(tasks)


def proactiveness_score(
    proactiveness: Proactiveness,
    total_meetings: int = TOTAL_MEETINGS,
) -> float:
    """
    Participation as a percentage of observed sessions.

    Each counter is divided by the number of meetings, then the three
    ratios are averaged: a student who asked, answered and contributed
    in every meeting scores 100.
    """
    if total_meetings <= 0:
        logger.debug(f"total_meetings={total_meetings} is not positive, "
                     f"using {FALLBACK_MEETINGS}")
        total_meetings = FALLBACK_MEETINGS

    counters = proactiveness.counters
    return sum(c / total_meetings * 100 for c in counters) / len(counters)


def summary_score(
    student: Student,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
    total_meetings: int = TOTAL_MEETINGS,
) -> float:
    """
    Weighted 0-100 summary of a student's performance.

    Args:
        student:        Student record
        weights:        Dimension weights (default 50/30/20)
        total_meetings: Sessions bounding the proactiveness counters

    Returns:
        Summary score, clamped to [0, 100] and rounded to one decimal.
    """
    raw = (weights.exam * exam_average(student.exams)
           + weights.task * task_score(student.tasks)
           + weights.proactiveness * proactiveness_score(
               student.proactiveness, total_meetings))
    return round(min(100.0, max(0.0, raw)), 1)


def score_student(
    student: Student,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
    total_meetings: int = TOTAL_MEETINGS,
) -> StudentScores:
    """Score a student across all dimensions."""
    scores = StudentScores(
        student_id=student.id,
        exam_average=exam_average(student.exams),
        task_score=task_score(student.tasks),
        proactiveness=proactiveness_score(student.proactiveness, total_meetings),
        summary=summary_score(student, weights, total_meetings),
    )
    logger.debug(f"Scored student {student.id}: {scores}")
    return scores
