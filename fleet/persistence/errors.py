"""Persistence-specific exceptions."""

from pathlib import Path


class PersistenceError(Exception):
    """Base exception for all persistence errors."""


class NotPersistableError(PersistenceError):
    """Raised when a collection cannot be serialized or written to disk."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot write {path}: {reason}")


class CorruptDataError(PersistenceError):
    """Raised when a data file exists but cannot be decoded or validated."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read {path}: {reason}")
