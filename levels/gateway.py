"""Progress persistence: one record per (user, level)."""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import case, func
from sqlalchemy.exc import SQLAlchemyError

from .errors import PersistenceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressRecord:
    user_id: int
    level_id: int
    score: int
    completed: bool
    attempts: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "level_id": self.level_id,
            "score": self.score,
            "completed": self.completed,
            "attempts": self.attempts,
        }


class ProgressGateway(ABC):
    """Abstract store for level progress."""

    @abstractmethod
    def upsert(self, user_id: int, level_id: int, score: int, completed: bool,
               attempts: Optional[int] = None) -> ProgressRecord:
        """Insert or overwrite the record for (user_id, level_id). Last write wins."""
        pass

    @abstractmethod
    def list_progress(self, user_id: int) -> list:
        """Return the user's ProgressRecords ordered by level."""
        pass

    @abstractmethod
    def list_levels(self) -> list:
        """Return level metadata dicts ordered by level id."""
        pass

    @abstractmethod
    def reset_progress(self, user_id: int) -> int:
        """Delete all of the user's records. Returns how many were removed."""
        pass

    @abstractmethod
    def leaderboard(self, limit: int = 50) -> list:
        """Return [{"username", "total_score", "completed"}] best first."""
        pass


def total_score(records) -> int:
    return sum(r.score for r in records)


class SQLAlchemyProgressGateway(ProgressGateway):
    """Gateway over the Flask-SQLAlchemy models defined in app.py."""

    def __init__(self, db, User, Level, UserProgress):
        self.db = db
        self.User = User
        self.Level = Level
        self.UserProgress = UserProgress

    def _to_record(self, row) -> ProgressRecord:
        return ProgressRecord(
            user_id=row.user_id,
            level_id=row.level_id,
            score=row.score,
            completed=row.completed,
            attempts=row.attempts,
        )

    def upsert(self, user_id, level_id, score, completed, attempts=None):
        try:
            level = self.db.session.get(self.Level, level_id)
        except SQLAlchemyError as e:
            raise PersistenceError("Failed to save progress") from e
        if level is None:
            raise ValueError(f"unknown level {level_id}")
        if not 0 <= score <= level.max_points:
            raise ValueError(f"score {score} outside [0, {level.max_points}]")

        try:
            row = self.UserProgress.query.filter_by(user_id=user_id, level_id=level_id).first()
            if row is None:
                row = self.UserProgress(user_id=user_id, level_id=level_id)
                self.db.session.add(row)
            row.score = score
            row.completed = completed
            row.attempts = attempts
            row.updated_at = datetime.now(timezone.utc)
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.error("Saving progress for user %s level %s failed: %s", user_id, level_id, e)
            raise PersistenceError("Failed to save progress") from e

        logger.info("Saved progress user=%s level=%s score=%s", user_id, level_id, score)
        return self._to_record(row)

    def list_progress(self, user_id):
        try:
            rows = (
                self.UserProgress.query.filter_by(user_id=user_id)
                .order_by(self.UserProgress.level_id.asc())
                .all()
            )
        except SQLAlchemyError as e:
            raise PersistenceError("Failed to load progress") from e
        return [self._to_record(r) for r in rows]

    def list_levels(self):
        try:
            rows = self.Level.query.order_by(self.Level.id.asc()).all()
        except SQLAlchemyError as e:
            raise PersistenceError("Failed to load levels") from e
        return [
            {
                "id": r.id,
                "slug": r.slug,
                "name": r.name,
                "description": r.description,
                "kind": r.kind,
                "max_points": r.max_points,
            }
            for r in rows
        ]

    def reset_progress(self, user_id):
        try:
            removed = self.UserProgress.query.filter_by(user_id=user_id).delete()
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise PersistenceError("Failed to reset progress") from e
        logger.info("Reset %s progress records for user %s", removed, user_id)
        return removed

    def leaderboard(self, limit=50):
        UserProgress = self.UserProgress
        total = func.coalesce(func.sum(UserProgress.score), 0)
        completed = func.sum(case((UserProgress.completed.is_(True), 1), else_=0))
        try:
            rows = (
                self.db.session.query(self.User.username, total.label("total"), completed.label("done"))
                .join(UserProgress, UserProgress.user_id == self.User.id)
                .group_by(self.User.id, self.User.username)
                .order_by(total.desc(), self.User.username.asc())
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            raise PersistenceError("Failed to load leaderboard") from e
        return [
            {"username": username, "total_score": int(t), "completed": int(d)}
            for username, t, d in rows
        ]
