from .definitions import ChallengeItem, LevelDefinition, LevelKind, load_levels
from .errors import LevelConfigError, LevelError, PersistenceError, SessionClosedError
from .gateway import ProgressGateway, ProgressRecord, SQLAlchemyProgressGateway
from .session import LevelSession, Outcome, SessionState

__all__ = [
    "ChallengeItem",
    "LevelDefinition",
    "LevelKind",
    "load_levels",
    "LevelConfigError",
    "LevelError",
    "PersistenceError",
    "SessionClosedError",
    "ProgressGateway",
    "ProgressRecord",
    "SQLAlchemyProgressGateway",
    "LevelSession",
    "Outcome",
    "SessionState",
]
