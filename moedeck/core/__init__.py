"""
Core Module - Shared domain models and interfaces.

Components:
- familiarity: Familiarity tiers and their transition function
- records: LearningRecord, UserAnswer and StudySession
- clock: Injectable current-time source
- repository: Protocols of the external collaborators
"""

from moedeck.core.clock import Clock, fixed_clock, utc_now
from moedeck.core.familiarity import Familiarity, next_familiarity
from moedeck.core.records import LearningRecord, StudySession, UserAnswer

__all__ = [
    "Clock",
    "Familiarity",
    "LearningRecord",
    "StudySession",
    "UserAnswer",
    "fixed_clock",
    "next_familiarity",
    "utc_now",
]
