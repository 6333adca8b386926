"""Unique task identifiers."""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from .repository import ValidationError


@dataclass(frozen=True)
class TaskId:
    """A UUID-based identifier for a task."""

    value: str

    @classmethod
    def generate(cls) -> TaskId:
        """Return a fresh random identifier."""
        return cls(str(uuid.uuid4()))

    @classmethod
    def from_string(cls, text: str) -> TaskId:
        """Build an identifier from text, which must be a UUID."""
        if not text:
            raise ValidationError("taskID", "task ID cannot be empty")
        try:
            uuid.UUID(text)
        except (ValueError, TypeError, AttributeError):
            raise ValidationError("taskID", "task ID must be a valid UUID") from None
        return cls(text)

    def __str__(self) -> str:
        return self.value