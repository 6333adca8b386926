"""The task entity, a work item in the discovery tree."""

from __future__ import annotations

from datetime import datetime, timezone

from .repository import ValidationError
from .status import Status, is_valid_status
from .task_id import TaskId


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _check_description(description: str) -> None:
    if not description.strip():
        raise ValidationError("description", "description cannot be empty")


def _check_position(position: int) -> None:
    if position < 0:
        raise ValidationError("position", "position must be non-negative")


class Task:
    """A work item; root tasks have no parent."""

    def __init__(self, description: str, parent_id: TaskId | None = None, position: int = 0):
        _check_description(description)
        _check_position(position)
        now = _now()
        self._id = TaskId.generate()
        self._description = description
        self._status = Status.ROOT_WORK_ITEM if parent_id is None else Status.TODO
        self._parent_id = parent_id
        self._position = position
        self._created_at = now
        self._updated_at = now

    @classmethod
    def reconstruct(
        cls,
        task_id: TaskId,
        description: str,
        status: Status,
        parent_id: TaskId | None,
        position: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> Task:
        """Rebuild a stored task with every field given, without validation."""
        task = cls.__new__(cls)
        task._id = task_id
        task._description = description
        task._status = status
        task._parent_id = parent_id
        task._position = position
        task._created_at = created_at
        task._updated_at = updated_at
        return task

    @property
    def id(self) -> TaskId:
        return self._id

    @property
    def description(self) -> str:
        return self._description

    @property
    def status(self) -> Status:
        return self._status

    @property
    def parent_id(self) -> TaskId | None:
        return self._parent_id

    @property
    def position(self) -> int:
        return self._position

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_root(self) -> bool:
        """Tell whether the task has no parent."""
        return self._parent_id is None

    def change_status(self, new_status) -> None:
        """Set a new status; only checks that the value is a known status."""
        if not is_valid_status(new_status):
            raise ValidationError("status", "invalid status value")
        self._status = Status(new_status)
        self._updated_at = _now()

    def update_description(self, description: str) -> None:
        """Replace the description, which must not be blank."""
        _check_description(description)
        self._description = description
        self._updated_at = _now()

    def move(self, new_parent_id: TaskId | None, new_position: int) -> None:
        """Change parent and position; sibling bookkeeping is the caller's job."""
        _check_position(new_position)
        self._parent_id = new_parent_id
        self._position = new_position
        self._updated_at = _now()
        if new_parent_id is None:
            self.change_status(Status.ROOT_WORK_ITEM)
        elif self._status is Status.ROOT_WORK_ITEM:
            self.change_status(Status.TODO)

    def __repr__(self) -> str:
        return (
            f"Task(id={self._id}, description={self._description!r}, "
            f"status={self._status}, parent_id={self._parent_id}, position={self._position})"
        )