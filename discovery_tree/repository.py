"""Domain errors and the in-memory task repository."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .task import Task
    from .task_id import TaskId


class DomainError(Exception):
    """Base class for every error raised by the domain."""


class ValidationError(DomainError):
    """A single value failed validation."""

    def __init__(self, field, message):
        super().__init__(f"validation error on {field}: {message}")
        self.field = field
        self.message = message


class ConstraintViolationError(DomainError):
    """An operation would break a rule that spans several tasks."""

    def __init__(self, constraint, message):
        super().__init__(f"constraint violation ({constraint}): {message}")
        self.constraint = constraint
        self.message = message


class NotFoundError(DomainError):
    """A requested resource does not exist."""

    def __init__(self, resource, identifier):
        super().__init__(f"{resource} not found: {identifier}")
        self.resource = resource
        self.identifier = identifier


class TaskRepository:
    """Keeps tasks in memory, keyed by their identifier."""

    def __init__(self) -> None:
        self._tasks: dict[TaskId, Task] = {}

    def save(self, task: Task) -> None:
        """Store a task, replacing any earlier version with the same id."""
        self._tasks[task.id] = task

    def find_by_id(self, task_id: TaskId) -> Task:
        """Return the task with the given id or raise NotFoundError."""
        try:
            return self._tasks[task_id]
        except KeyError:
            raise NotFoundError("task", str(task_id)) from None

    def find_by_parent_id(self, parent_id: TaskId | None) -> list[Task]:
        """Return the tasks under a parent (None for roots), ordered by position."""
        return sorted(
            (task for task in self._tasks.values() if task.parent_id == parent_id),
            key=lambda task: task.position,
        )

    def find_root(self) -> Task:
        """Return the task without a parent or raise NotFoundError."""
        for task in self._tasks.values():
            if task.is_root():
                return task
        raise NotFoundError("task", "root")

    def find_all(self) -> list[Task]:
        """Return every stored task."""
        return list(self._tasks.values())

    def delete(self, task_id: TaskId) -> None:
        """Remove a single task; meant for leaf tasks."""
        if task_id not in self._tasks:
            raise NotFoundError("task", str(task_id))
        del self._tasks[task_id]

    def delete_subtree(self, task_id: TaskId) -> None:
        """Remove a task together with all of its descendants."""
        if task_id not in self._tasks:
            raise NotFoundError("task", str(task_id))
        pending = [task_id]
        doomed: list[TaskId] = []
        while pending:
            current = pending.pop()
            doomed.append(current)
            pending.extend(
                task.id for task in self._tasks.values() if task.parent_id == current
            )
        for doomed_id in doomed:
            self._tasks.pop(doomed_id, None)