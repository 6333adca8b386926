"""Task operations that need the repository and tree-wide rules."""

from __future__ import annotations

from typing import Callable

from .repository import ConstraintViolationError, NotFoundError, TaskRepository
from .status import Status
from .task import Task
from .task_id import TaskId
from .validator import TaskValidator


class TaskService:
    """Creates, updates, moves and deletes tasks while keeping positions consistent."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository
        self._validator = TaskValidator(repository)

    def create_root_task(self, description: str) -> Task:
        """Create the single root task; raises if one already exists."""
        try:
            self._repository.find_root()
        except NotFoundError:
            pass
        else:
            raise ConstraintViolationError("single_root", "root task already exists")
        task = Task(description, None, 0)
        self._repository.save(task)
        return task

    def create_child_task(self, description: str, parent_id: TaskId) -> Task:
        """Append a new child at the end of the parent's children."""
        self._repository.find_by_id(parent_id)
        position = len(self._repository.find_by_parent_id(parent_id))
        task = Task(description, parent_id, position)
        self._repository.save(task)
        return task

    def change_task_status(self, task_id: TaskId, new_status: Status) -> None:
        """Change a status, enforcing bottom-to-top completion for DONE."""
        task = self._repository.find_by_id(task_id)
        self._validator.validate_status_change(task, new_status)
        task.change_status(new_status)
        self._repository.save(task)

    def move_task(
        self, task_id: TaskId, new_parent_id: TaskId | None, new_position: int
    ) -> None:
        """Move a task with its subtree, shifting old and new siblings as needed."""
        task = self._repository.find_by_id(task_id)
        self._validator.validate_move(task_id, new_parent_id, new_position)

        old_parent_id = task.parent_id
        old_position = task.position
        same_parent = old_parent_id == new_parent_id

        if same_parent and old_position == new_position:
            return

        if not same_parent:
            self._shift_siblings(old_parent_id, -1, lambda p: p > old_position, skip=task_id)
            self._shift_siblings(new_parent_id, 1, lambda p: p >= new_position)
        elif new_position > old_position:
            self._shift_siblings(
                new_parent_id, -1, lambda p: old_position < p <= new_position, skip=task_id
            )
        else:
            self._shift_siblings(
                new_parent_id, 1, lambda p: new_position <= p < old_position, skip=task_id
            )

        task.move(new_parent_id, new_position)
        self._repository.save(task)

    def delete_task(self, task_id: TaskId) -> None:
        """Delete a task and its descendants; deleting the root clears the tree."""
        task = self._repository.find_by_id(task_id)
        if task.is_root():
            root = self._repository.find_root()
            self._repository.delete_subtree(root.id)
            return

        parent_id = task.parent_id
        position = task.position
        if self._repository.find_by_parent_id(task_id):
            self._repository.delete_subtree(task_id)
        else:
            self._repository.delete(task_id)

        self._shift_siblings(parent_id, -1, lambda p: p > position)

    def _shift_siblings(
        self,
        parent_id: TaskId | None,
        offset: int,
        selects: Callable[[int], bool],
        skip: TaskId | None = None,
    ) -> None:
        for sibling in list(self._repository.find_by_parent_id(parent_id)):
            if sibling.id != skip and selects(sibling.position):
                sibling.move(sibling.parent_id, sibling.position + offset)
                self._repository.save(sibling)