"""Timed routines built on the guided sequence timer."""

from .base import RoutineBook
from .breathing import BreathingSession
from .fitness import FitnessChecklist
from .stretch import StretchRoutine

__all__ = ["RoutineBook", "BreathingSession", "FitnessChecklist", "StretchRoutine"]
