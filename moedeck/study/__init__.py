"""
Study Module.

Provides:
- Spaced repetition scheduling (Simple, SM2, FSRS)
- Due review queue selection
- Applying answers to learning records
- Progress statistics and daily history
"""

from moedeck.study.due_queue import due_count, due_records
from moedeck.study.progress import (
    DailyProgress,
    OverallStats,
    SubjectProgress,
    daily_progress,
    overall_stats,
    subject_progress,
)
from moedeck.study.review import apply_review
from moedeck.study.review_service import ReviewOutcome, ReviewService
from moedeck.study.scheduling import (
    ALGORITHMS,
    FSRSAlgorithm,
    SchedulingAlgorithm,
    SchedulingAlgorithmName,
    SimpleAlgorithm,
    SM2Algorithm,
    default_algorithm,
    get_algorithm,
)

__all__ = [
    "ALGORITHMS",
    "DailyProgress",
    "FSRSAlgorithm",
    "OverallStats",
    "ReviewOutcome",
    "ReviewService",
    "SM2Algorithm",
    "SchedulingAlgorithm",
    "SchedulingAlgorithmName",
    "SimpleAlgorithm",
    "SubjectProgress",
    "apply_review",
    "daily_progress",
    "default_algorithm",
    "due_count",
    "due_records",
    "get_algorithm",
    "overall_stats",
    "subject_progress",
]
