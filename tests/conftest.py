"""Shared fixtures for rapor tests."""

from __future__ import annotations

import pytest

from rapor.edu.roster import Proactiveness, Student, TaskRecord
from rapor.edu.scoring import ScoreWeights


EXAM_ONLY = ScoreWeights(exam=1.0, task=0.0, proactiveness=0.0)


def make_student(student_id, exams=(), tasks=(), proactiveness=(0, 0, 0), name=None):
    return Student(
        id=student_id,
        name=name or f"Student {student_id}",
        nim=f"2201{student_id:03d}",
        exams=tuple(exams),
        tasks=tuple(tasks),
        proactiveness=Proactiveness(*proactiveness),
    )


@pytest.fixture
def exam_only():
    return EXAM_ONLY


@pytest.fixture
def two_students():
    """Student 1 averages 85, student 2 averages 70."""
    return [
        make_student(1, exams=[80, 90]),
        make_student(2, exams=[70]),
    ]


@pytest.fixture
def tied_roster():
    """Students 10 and 20 both score 75 under exam-only weighting."""
    return [
        make_student(10, exams=[75]),
        make_student(20, exams=[70, 80]),
        make_student(30, exams=[90]),
    ]


@pytest.fixture
def full_student():
    """Exam 85, task 75, proactiveness 100 at 16 meetings -> summary 85."""
    return make_student(
        7,
        exams=[80, 90],
        tasks=[TaskRecord("Tugas 1", 100), TaskRecord("Tugas 2", 50)],
        proactiveness=(16, 16, 16),
    )
