"""Navigation across the task tree."""

from __future__ import annotations

from collections.abc import Iterator

from .repository import TaskRepository
from .task import Task
from .task_id import TaskId


class TreeNavigator:
    """Answers structural questions about the tree held in a repository."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def parent(self, task_id: TaskId) -> Task | None:
        """Return the parent of a task, or None for the root."""
        task = self._repository.find_by_id(task_id)
        if task.parent_id is None:
            return None
        return self._repository.find_by_id(task.parent_id)

    def children(self, task_id: TaskId) -> list[Task]:
        """Return the children of a task, left to right."""
        self._repository.find_by_id(task_id)
        return self._repository.find_by_parent_id(task_id)

    def siblings(self, task_id: TaskId) -> list[Task]:
        """Return all tasks sharing the task's parent, itself included, by position."""
        task = self._repository.find_by_id(task_id)
        return self._repository.find_by_parent_id(task.parent_id)

    def left_sibling(self, task_id: TaskId) -> Task | None:
        """Return the sibling immediately to the left, or None."""
        task = self._repository.find_by_id(task_id)
        if task.position == 0:
            return None
        return self._sibling_at(task, task.position - 1)

    def right_sibling(self, task_id: TaskId) -> Task | None:
        """Return the sibling immediately to the right, or None."""
        task = self._repository.find_by_id(task_id)
        return self._sibling_at(task, task.position + 1)

    def root(self) -> Task:
        """Return the root task."""
        return self._repository.find_root()

    def tree(self) -> list[Task]:
        """Return the root and all its descendants, depth first."""
        return self.subtree(self._repository.find_root().id)

    def subtree(self, task_id: TaskId) -> list[Task]:
        """Return a task followed by all its descendants, depth first."""
        task = self._repository.find_by_id(task_id)
        return [task, *self._descendants(task_id)]

    def _sibling_at(self, task: Task, position: int) -> Task | None:
        siblings = self._repository.find_by_parent_id(task.parent_id)
        return next((s for s in siblings if s.position == position), None)

    def _descendants(self, parent_id: TaskId) -> Iterator[Task]:
        for child in self._repository.find_by_parent_id(parent_id):
            yield child
            yield from self._descendants(child.id)