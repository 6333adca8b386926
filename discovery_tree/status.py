"""Task status values."""

from __future__ import annotations

from enum import IntEnum

from .repository import ValidationError


class Status(IntEnum):
    """The state a task is in."""

    TODO = 0
    IN_PROGRESS = 1
    DONE = 2
    BLOCKED = 3
    ROOT_WORK_ITEM = 4

    @classmethod
    def parse(cls, text: str) -> Status:
        """Return the status whose label is exactly ``text``."""
        for status in cls:
            if _LABELS[status] == text:
                return status
        raise ValidationError("status", f"invalid status value: {text}")

    def __str__(self) -> str:
        return _LABELS[self]


_LABELS = {
    Status.TODO: "TODO",
    Status.IN_PROGRESS: "In Progress",
    Status.DONE: "DONE",
    Status.BLOCKED: "Blocked",
    Status.ROOT_WORK_ITEM: "Root Work Item",
}


def is_valid_status(value) -> bool:
    """Tell whether ``value`` names one of the known statuses."""
    if isinstance(value, bool):
        return False
    try:
        Status(value)
    except (ValueError, TypeError):
        return False
    return True