"""
rapor Edu — Student Performance Scoring and Class Ranking

Turns raw per-student records (exam results, task records, proactiveness
counters) into comparable 0-100 scores and a deterministic class ranking.
"""

from rapor.edu.roster import Student, TaskRecord, Proactiveness, load_roster
from rapor.edu.scoring import (
    exam_average,
    task_score,
    proactiveness_score,
    summary_score,
    score_student,
    ScoreWeights,
)
from rapor.edu.ranking import rank_students, class_ranking, rank_of
from rapor.edu.report import student_card

__all__ = [
    "Student",
    "TaskRecord",
    "Proactiveness",
    "load_roster",
    "exam_average",
    "task_score",
    "proactiveness_score",
    "summary_score",
    "score_student",
    "ScoreWeights",
    "rank_students",
    "class_ranking",
    "rank_of",
    "student_card",
]
