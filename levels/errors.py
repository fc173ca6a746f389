"""Exceptions raised by the level engine."""


class LevelError(Exception):
    """Base class for level engine errors."""


class LevelConfigError(LevelError):
    """A level definition is missing ground truth or has a bad scoring policy."""


class SessionClosedError(LevelError):
    """The session already completed and accepts no more responses."""


class PersistenceError(LevelError):
    """Progress could not be written to the store."""
