# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""
rapor — Student Performance Scoring and Class Ranking

Scores exam results, task records and class proactiveness into
comparable 0-100 numbers and ranks the class by summary score.
"""

__version__ = "0.1.0"
