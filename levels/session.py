"""Per-playthrough level state and the controller that moves it forward."""
from dataclasses import dataclass, field
from typing import Optional

from .definitions import LevelDefinition, LevelKind
from .errors import LevelError, SessionClosedError
from .scoring import compute_score, count_misclassified


@dataclass
class SessionState:
    """Progress through one playthrough of a level.

    Lives in the Flask session between requests, so it round-trips through
    ``to_dict``/``from_dict`` as plain JSON types.
    """

    level_id: int
    index: int = 0
    mistakes: int = 0
    attempts: int = 0
    correct: int = 0
    step_missed: bool = False
    selected: set = field(default_factory=set)
    completed: bool = False
    score: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "level_id": self.level_id,
            "index": self.index,
            "mistakes": self.mistakes,
            "attempts": self.attempts,
            "correct": self.correct,
            "step_missed": self.step_missed,
            "selected": sorted(self.selected),
            "completed": self.completed,
            "score": self.score,
        }

    @classmethod
    def from_dict(cls, payload: dict) -> "SessionState":
        return cls(
            level_id=int(payload["level_id"]),
            index=int(payload.get("index", 0)),
            mistakes=int(payload.get("mistakes", 0)),
            attempts=int(payload.get("attempts", 0)),
            correct=int(payload.get("correct", 0)),
            step_missed=bool(payload.get("step_missed", False)),
            selected=set(payload.get("selected", ())),
            completed=bool(payload.get("completed", False)),
            score=payload.get("score"),
        )


@dataclass(frozen=True)
class Outcome:
    correct: bool
    completed: bool
    score: Optional[int] = None
    explanation: str = ""
    mistakes: int = 0


class LevelSession:
    """Applies player responses to a SessionState according to the level kind."""

    def __init__(self, level: LevelDefinition, state: Optional[SessionState] = None):
        if state is not None and state.level_id != level.id:
            raise LevelError(f"state belongs to level {state.level_id}, not {level.id}")
        self.level = level
        self.state = state if state is not None else SessionState(level_id=level.id)

    @property
    def is_last_item(self) -> bool:
        return self.state.index == len(self.level.items) - 1

    def current_item(self):
        return self.level.items[self.state.index]

    def snapshot(self) -> dict:
        return self.state.to_dict()

    def restore(self, snapshot: dict):
        """Roll back to an earlier snapshot, e.g. after a failed save."""
        self.state = SessionState.from_dict(snapshot)

    def _ensure_open(self):
        if self.state.completed:
            raise SessionClosedError(f"level {self.level.id} is already completed")

    def _complete(self):
        self.state.completed = True
        self.state.score = compute_score(self.level, self.state)

    def answer(self, response) -> Outcome:
        """Answer the current item of a sequential or quiz level."""
        self._ensure_open()
        if self.level.kind is LevelKind.BATCH:
            raise LevelError("batch levels take a single submission, not answers")

        state = self.state
        item = self.current_item()
        correct = item.is_correct(response)
        state.attempts += 1

        if self.level.kind is LevelKind.QUIZ:
            if correct:
                state.correct += 1
            else:
                state.mistakes += 1
            if self.is_last_item:
                self._complete()
            else:
                state.index += 1
        elif correct:
            # a step only counts towards the fraction when nailed first time
            if not state.step_missed:
                state.correct += 1
            state.step_missed = False
            if self.is_last_item:
                self._complete()
            else:
                state.index += 1
        else:
            state.mistakes += 1
            state.step_missed = True

        return Outcome(
            correct=correct,
            completed=state.completed,
            score=state.score,
            explanation=item.explanation,
            mistakes=state.mistakes,
        )

    def _check_batch(self, item_ids):
        if self.level.kind is not LevelKind.BATCH:
            raise LevelError("only batch levels have a selection")
        known = {it.id for it in self.level.items}
        unknown = [i for i in item_ids if i not in known]
        if unknown:
            raise LevelError(f"unknown item ids: {', '.join(map(str, unknown))}")

    def toggle(self, item_id: str) -> SessionState:
        self._ensure_open()
        self._check_batch([item_id])
        self.state.selected ^= {item_id}
        return self.state

    def submit(self, selected=None) -> Outcome:
        """Score the batch selection and complete the level."""
        self._ensure_open()
        if selected is not None:
            selected = set(selected)
            self._check_batch(selected)
            self.state.selected = selected
        else:
            self._check_batch(())
        self.state.attempts += 1
        self.state.mistakes = count_misclassified(self.level.items, self.state.selected)
        self._complete()
        return Outcome(
            correct=self.state.mistakes == 0,
            completed=True,
            score=self.state.score,
            mistakes=self.state.mistakes,
        )
