"""
rapor Edu — Roster Records

Read-only student records consumed by the scoring and ranking engine.
A roster arrives fully formed from whatever loads it; this module only
turns plain mappings (decoded JSON, TOML tables) into typed records.

Record shape:
    {
      "id": 1,
      "name": "Ayu Lestari",
      "nim": "2201001",
      "picture": "https://example.org/ayu.png",
      "exams": [80, 90],
      "tasks": [{"title": "Tugas 1", "score": 88, "submitted": true}],
      "proactiveness": {"bertanya": 4, "menjawab": 6, "menambahkan": 2}
    }
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

logger = logging.getLogger(__name__)


# Number of observed class sessions that bound the proactiveness counters
TOTAL_MEETINGS = 16


class RosterError(ValueError):
    """Raised when a roster entry cannot be turned into a Student."""


def _number(value: Any, what: str) -> float:
    """Check a numeric field; strings and booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RosterError(f"{what} must be a number, got {value!r}")
    return value


def _sequence(data: Mapping[str, Any], key: str) -> list:
    items = data.get(key) or []
    if not isinstance(items, (list, tuple)):
        raise RosterError(f"'{key}' must be a list, got {items!r}")
    return list(items)


# ── Data classes ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Proactiveness:
    """Per-student participation tallies over the observed sessions."""
    bertanya: int = 0      # asking
    menjawab: int = 0      # answering
    menambahkan: int = 0   # adding to the discussion

    @property
    def counters(self) -> tuple[int, int, int]:
        return (self.bertanya, self.menjawab, self.menambahkan)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Proactiveness:
        if not data:
            return cls()
        if not isinstance(data, Mapping):
            raise RosterError(f"Proactiveness must be a mapping, got {data!r}")
        return cls(**{
            key: _number(data.get(key) or 0, f"Proactiveness counter {key!r}")
            for key in ("bertanya", "menjawab", "menambahkan")
        })


@dataclass(frozen=True)
class TaskRecord:
    """A single assignment. Ungraded or unsubmitted tasks count as 0."""
    title: str = ""
    score: Optional[float] = None   # 0-100 grade
    submitted: bool = True

    @property
    def contribution(self) -> float:
        if not self.submitted or self.score is None:
            return 0.0
        return float(self.score)

    @classmethod
    def from_dict(cls, data: Any) -> TaskRecord:
        # A bare number is shorthand for a graded, submitted task
        if isinstance(data, (int, float)) and not isinstance(data, bool):
            return cls(score=float(data))
        if not isinstance(data, Mapping):
            raise RosterError(f"Task record must be a mapping or number, got {data!r}")
        return cls(
            title=str(data.get("title", "")),
            score=None if data.get("score") is None else _number(data["score"], "Task score"),
            submitted=bool(data.get("submitted", True)),
        )


@dataclass(frozen=True)
class Student:
    """One student's snapshot for a render. Never mutated by the engine."""
    id: int
    name: str = ""
    nim: str = ""
    picture: str = ""
    exams: tuple[float, ...] = ()
    tasks: tuple[TaskRecord, ...] = ()
    proactiveness: Proactiveness = field(default_factory=Proactiveness)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Student:
        """Build a Student from a plain mapping."""
        if not isinstance(data, Mapping):
            raise RosterError(f"Student record must be a mapping, got {type(data).__name__}")
        if "id" not in data:
            raise RosterError(f"Student record has no 'id': {dict(data)!r}")

        try:
            student_id = int(data["id"])
        except (TypeError, ValueError) as e:
            raise RosterError(f"Invalid student id {data['id']!r}") from e

        return cls(
            id=student_id,
            name=str(data.get("name", "")),
            nim=str(data.get("nim", "")),
            picture=str(data.get("picture", "")),
            exams=tuple(_number(e, "Exam result") for e in _sequence(data, "exams")),
            tasks=tuple(TaskRecord.from_dict(t) for t in _sequence(data, "tasks")),
            proactiveness=Proactiveness.from_dict(data.get("proactiveness")),
        )


# ── Loading ──────────────────────────────────────────────────────────

def load_roster(items: Iterable[Mapping[str, Any]]) -> list[Student]:
    """
    Convert plain mappings into an ordered roster.

    Roster order is preserved; it is the tie-break key for ranking.

    Raises:
        RosterError: on a malformed entry or a duplicated student id.
    """
    roster: list[Student] = []
    seen: set[int] = set()
    for item in items:
        student = Student.from_dict(item)
        if student.id in seen:
            raise RosterError(f"Duplicate student id {student.id} in roster")
        seen.add(student.id)
        roster.append(student)

    logger.debug(f"Loaded roster with {len(roster)} students")
    return roster
