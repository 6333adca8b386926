"""Rules for operations that need knowledge of the whole tree."""

from __future__ import annotations

from .repository import ConstraintViolationError, NotFoundError, TaskRepository, ValidationError
from .status import Status
from .task import Task
from .task_id import TaskId


class TaskValidator:
    """Checks status changes, moves and deletes against tree-wide rules."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def validate_status_change(self, task: Task, new_status: Status) -> None:
        """Only allow DONE when every child of the task is already DONE."""
        if new_status != Status.DONE:
            return
        children = self._repository.find_by_parent_id(task.id)
        if any(child.status != Status.DONE for child in children):
            raise ConstraintViolationError(
                "bottom-to-top-completion",
                "cannot mark task as DONE when children are not all DONE",
            )

    def validate_move(
        self, task_id: TaskId, new_parent_id: TaskId | None, new_position: int
    ) -> None:
        """Reject moves that would form a cycle, add a second root or overrun positions."""
        if new_position < 0:
            raise ValidationError("position", "position must be non-negative")

        task = self._repository.find_by_id(task_id)

        if new_parent_id is None:
            if not task.is_root():
                try:
                    self._repository.find_root()
                except NotFoundError:
                    return
                raise ConstraintViolationError(
                    "single-root",
                    "cannot move task to root: a root task already exists",
                )
            return

        new_parent = self._repository.find_by_id(new_parent_id)

        if task_id == new_parent_id:
            raise ConstraintViolationError("cycle-prevention", "cannot move task to itself")

        if self._is_descendant(task_id, new_parent_id):
            raise ConstraintViolationError(
                "cycle-prevention", "cannot move task to its own descendant"
            )

        siblings = self._repository.find_by_parent_id(new_parent_id)
        max_position = len(siblings)
        if task.parent_id is not None and task.parent_id == new_parent.id:
            max_position = len(siblings) - 1

        if new_position > max_position:
            raise ValidationError("position", "position exceeds valid range")

    def validate_delete(self, task_id: TaskId) -> None:
        """Ensure the task to delete exists; raises NotFoundError otherwise."""
        self._repository.find_by_id(task_id)

    def _is_descendant(self, ancestor: TaskId, candidate: TaskId) -> bool:
        current = candidate
        while True:
            try:
                task = self._repository.find_by_id(current)
            except NotFoundError:
                return False
            parent_id = task.parent_id
            if parent_id is None:
                return False
            if parent_id == ancestor:
                return True
            current = parent_id