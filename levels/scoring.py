"""Scoring policies.

Every policy is a small frozen dataclass with a ``validate`` hook (run when a
level is loaded) and a ``score`` method. ``compute_score`` picks the inputs a
policy needs out of a session state.
"""
from dataclasses import dataclass
from typing import Iterable

from .errors import LevelConfigError


@dataclass(frozen=True)
class AttemptPenalty:
    """Single free-form answer: lose ``penalty`` points per wrong attempt, never below ``floor``."""

    base: int = 10
    penalty: int = 1
    floor: int = 0

    def validate(self):
        if self.penalty < 0:
            raise LevelConfigError(f"penalty must be >= 0, got {self.penalty}")
        if self.floor < 0 or self.floor > self.base:
            raise LevelConfigError(
                f"floor must be within [0, {self.base}], got {self.floor}"
            )

    def max_points(self, total_items: int) -> int:
        return self.base

    def score(self, mistakes: int) -> int:
        return max(self.floor, self.base - self.penalty * max(mistakes, 0))


@dataclass(frozen=True)
class ItemMistakes:
    """Independent yes/no classifications: one point lost per misclassified item."""

    base: int = 10

    def validate(self):
        if self.base <= 0:
            raise LevelConfigError(f"base must be positive, got {self.base}")

    def max_points(self, total_items: int) -> int:
        return self.base

    def score(self, mistakes: int) -> int:
        return max(0, self.base - mistakes)


@dataclass(frozen=True)
class FractionCorrect:
    """Decision trees: share of steps answered correctly, scaled and floored."""

    scale: int = 10

    def validate(self):
        if self.scale <= 0:
            raise LevelConfigError(f"scale must be positive, got {self.scale}")

    def max_points(self, total_items: int) -> int:
        return self.scale

    def score(self, correct: int, total: int) -> int:
        if total <= 0:
            raise LevelConfigError("cannot score a level without steps")
        # integer arithmetic keeps correct == total at exactly ``scale``
        return (min(correct, total) * self.scale) // total


@dataclass(frozen=True)
class CorrectCount:
    """Quizzes: one point per correct answer."""

    def validate(self):
        pass

    def max_points(self, total_items: int) -> int:
        return total_items

    def score(self, correct: int) -> int:
        return correct


def count_misclassified(items: Iterable, selected) -> int:
    """Count items whose selection disagrees with their ground truth.

    Both directions count: a selected item that should not be, and an
    unselected item that should be.
    """
    selected = set(selected)
    return sum(1 for item in items if bool(item.answer) != (item.id in selected))


def compute_score(level, state) -> int:
    """Score a session state for ``level`` with the level's policy."""
    policy = level.policy
    if isinstance(policy, AttemptPenalty):
        return policy.score(state.mistakes)
    if isinstance(policy, ItemMistakes):
        return policy.score(count_misclassified(level.items, state.selected))
    if isinstance(policy, FractionCorrect):
        return policy.score(state.correct, len(level.items))
    if isinstance(policy, CorrectCount):
        return policy.score(state.correct)
    raise LevelConfigError(f"unknown scoring policy {policy!r}")
