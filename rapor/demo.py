# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""
rapor Demo Mode

Generates a synthetic class roster for testing and demonstration.
Allows users to try the scoring and ranking commands without real
class records.

Usage:
    rapor demo                      # 20 students to roster.json
    rapor demo --students 35        # Larger class
    rapor demo --seed 42 -o a.json  # Reproducible roster
"""

import json
import logging
import random
from pathlib import Path
from typing import Any, Optional

from rapor.edu.roster import TOTAL_MEETINGS

logger = logging.getLogger(__name__)


# ============================================================================
# Embedded Class Configuration (no external files needed)
# ============================================================================

DEMO_CLASS = {
    "first_names": [
        "Ayu", "Budi", "Citra", "Dimas", "Eka", "Fajar", "Gita", "Hendra",
        "Indah", "Joko", "Kartika", "Lukman", "Maya", "Nanda", "Oki", "Putri",
    ],
    "last_names": [
        "Lestari", "Santoso", "Wijaya", "Pratama", "Saputra", "Utami",
        "Hidayat", "Kusuma", "Nugroho", "Rahmawati",
    ],
    "exam_count": 3,
    "task_titles": ["Tugas 1", "Tugas 2", "Tugas 3", "Tugas 4", "Proyek Akhir"],
    "nim_prefix": "2201",
}


class DemoGenerator:
    """Generates a realistic synthetic roster."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def generate_roster(self, n_students: int) -> list[dict[str, Any]]:
        """Generate n_students roster records with ids 1..n."""
        return [self._generate_student(i) for i in range(1, n_students + 1)]

    def _generate_student(self, student_id: int) -> dict[str, Any]:
        """Generate a single student record."""
        rng = self.rng
        name = f"{rng.choice(DEMO_CLASS['first_names'])} {rng.choice(DEMO_CLASS['last_names'])}"

        # Student ability drives every dimension, with per-item noise
        ability = rng.uniform(45, 95)
        exams = [
            round(min(100, max(0, rng.gauss(ability, 8))))
            for _ in range(DEMO_CLASS["exam_count"])
        ]

        tasks = []
        for title in DEMO_CLASS["task_titles"]:
            submitted = rng.random() < 0.6 + ability / 250
            tasks.append({
                "title": title,
                "score": round(min(100, max(0, rng.gauss(ability + 5, 10)))) if submitted else None,
                "submitted": submitted,
            })

        # Participation rate per session
        rate = max(0.0, min(1.0, (ability - 40) / 60))
        proactiveness = {
            key: sum(1 for _ in range(TOTAL_MEETINGS) if rng.random() < rate * factor)
            for key, factor in (("bertanya", 0.6), ("menjawab", 0.8), ("menambahkan", 0.4))
        }

        return {
            "id": student_id,
            "name": name,
            "nim": f"{DEMO_CLASS['nim_prefix']}{student_id:03d}",
            "picture": f"https://i.pravatar.cc/150?u={student_id}",
            "exams": exams,
            "tasks": tasks,
            "proactiveness": proactiveness,
        }


def write_demo_roster(
    output_path: Path,
    n_students: int = 20,
    seed: Optional[int] = None,
) -> Path:
    """Generate a roster and write it as JSON."""
    roster = DemoGenerator(seed).generate_roster(n_students)
    output_path = Path(output_path)
    output_path.write_text(json.dumps(roster, indent=2), encoding="utf-8")
    logger.info(f"Wrote demo roster with {n_students} students to {output_path}")
    return output_path
