"""Tests for the student scoring engine."""

from __future__ import annotations

import pytest

from rapor.edu.roster import Proactiveness, TaskRecord
from rapor.edu.scoring import (
    DEFAULT_WEIGHTS,
    ScoreWeights,
    ScoringConfigError,
    exam_average,
    proactiveness_score,
    proficiency_level,
    score_student,
    summary_score,
    task_score,
)

from conftest import make_student


class TestExamAverage:
    def test_mean_of_results(self):
        assert exam_average([80, 90]) == 85
        assert exam_average([70]) == 70

    def test_empty_is_zero(self):
        assert exam_average([]) == 0.0
        assert exam_average(()) == 0.0

    def test_exact_mean_is_not_rounded(self):
        assert exam_average([1, 2, 2]) == pytest.approx(5 / 3)

    def test_out_of_range_values_propagate(self):
        assert exam_average([-10, 30]) == 10.0
        assert exam_average([150, 50]) == 100.0


class TestTaskScore:
    def test_empty_is_zero(self):
        assert task_score([]) == 0.0

    def test_mean_grade(self):
        tasks = [TaskRecord("a", 100), TaskRecord("b", 50)]
        assert task_score(tasks) == 75.0

    def test_unsubmitted_and_ungraded_count_as_zero(self):
        tasks = [
            TaskRecord("a", 80),
            TaskRecord("b", 60, submitted=False),
            TaskRecord("c", None),
        ]
        assert task_score(tasks) == pytest.approx(80 / 3)


class TestProactiveness:
    def test_percentage_of_meetings(self):
        assert proactiveness_score(Proactiveness(16, 8, 0), 16) == pytest.approx(50.0)

    def test_no_participation(self):
        assert proactiveness_score(Proactiveness(), 16) == 0.0

    def test_non_positive_meetings_fall_back(self):
        assert proactiveness_score(Proactiveness(15, 15, 15), 0) == pytest.approx(100.0)


class TestSummaryScore:
    def test_default_weighting(self, full_student):
        assert summary_score(full_student) == pytest.approx(85.0)

    def test_exam_only_weighting(self, two_students, exam_only):
        assert summary_score(two_students[0], exam_only) == 85.0
        assert summary_score(two_students[1], exam_only) == 70.0

    def test_empty_student_scores_zero(self):
        assert summary_score(make_student(1)) == 0.0

    def test_clamped_to_range(self, exam_only):
        assert summary_score(make_student(1, exams=[150]), exam_only) == 100.0
        assert summary_score(make_student(2, exams=[-20]), exam_only) == 0.0
        assert summary_score(make_student(3, exams=[100], proactiveness=(99, 99, 99))) == 100.0

    @pytest.mark.parametrize("exams,tasks,counters", [
        ([], [], (0, 0, 0)),
        ([100, 100], [TaskRecord("a", 100)], (16, 16, 16)),
        ([0], [TaskRecord("a", None, submitted=False)], (0, 0, 0)),
        ([55, 61, 78], [TaskRecord("a", 90), TaskRecord("b", 40)], (3, 9, 1)),
        ([300], [TaskRecord("a", 500)], (400, 400, 400)),
        ([-50], [TaskRecord("a", -10)], (0, 0, 0)),
    ])
    def test_always_within_bounds(self, exams, tasks, counters):
        score = summary_score(make_student(1, exams, tasks, counters))
        assert 0 <= score <= 100

    def test_rounded_to_one_decimal(self):
        score = summary_score(make_student(1, exams=[1, 2, 2]))
        assert score == round(score, 1)

    def test_idempotent(self, full_student):
        assert summary_score(full_student) == summary_score(full_student)
        assert score_student(full_student) == score_student(full_student)


class TestWeights:
    def test_defaults(self):
        assert DEFAULT_WEIGHTS == ScoreWeights(0.5, 0.3, 0.2)
        assert DEFAULT_WEIGHTS.validate() is DEFAULT_WEIGHTS

    def test_must_sum_to_one(self):
        with pytest.raises(ScoringConfigError):
            ScoreWeights(0.5, 0.5, 0.5).validate()

    def test_must_be_non_negative(self):
        with pytest.raises(ScoringConfigError):
            ScoreWeights(1.2, -0.2, 0.0).validate()

    def test_from_dict_fills_defaults(self):
        assert ScoreWeights.from_dict(None) == DEFAULT_WEIGHTS
        assert ScoreWeights.from_dict({"exam": 0.6, "task": 0.2}) == ScoreWeights(0.6, 0.2, 0.2)

    def test_from_dict_rejects_bad_values(self):
        with pytest.raises(ScoringConfigError):
            ScoreWeights.from_dict({"exam": "lots"})
        with pytest.raises(ScoringConfigError):
            ScoreWeights.from_dict({"exam": 1.0})


class TestScoreStudent:
    def test_bundles_all_dimensions(self, full_student):
        scores = score_student(full_student)
        assert scores.student_id == 7
        assert scores.exam_average == 85.0
        assert scores.task_score == 75.0
        assert scores.proactiveness == pytest.approx(100.0)
        assert scores.summary == pytest.approx(85.0)
        assert scores.level == "Excellent"

    @pytest.mark.parametrize("score,level", [
        (100, "Excellent"), (85, "Excellent"), (84.9, "Good"), (65, "Good"),
        (64.9, "Developing"), (40, "Developing"), (39.9, "Needs Work"), (0, "Needs Work"),
    ])
    def test_proficiency_level(self, score, level):
        assert proficiency_level(score) == level
