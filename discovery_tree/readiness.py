"""Whether a task is ready to be worked on, given its ordering constraints."""

from __future__ import annotations

from collections.abc import Iterable

from .navigator import TreeNavigator
from .repository import TaskRepository
from .status import Status
from .task_id import TaskId

LEFT_SIBLING_INCOMPLETE = "left sibling is not complete"
CHILDREN_INCOMPLETE = "not all children are complete"


class ReadinessState:
    """The outcome of a readiness check, with the reasons a task is blocked."""

    __slots__ = ("_left_sibling_complete", "_all_children_complete", "_reasons")

    def __init__(
        self,
        left_sibling_complete: bool,
        all_children_complete: bool,
        reasons: Iterable[str] = (),
    ) -> None:
        self._left_sibling_complete = bool(left_sibling_complete)
        self._all_children_complete = bool(all_children_complete)
        self._reasons = tuple(reasons)

    @property
    def left_sibling_complete(self) -> bool:
        """True when the left sibling is DONE or there is none."""
        return self._left_sibling_complete

    @property
    def all_children_complete(self) -> bool:
        """True when every child is DONE or there are no children."""
        return self._all_children_complete

    def is_ready(self) -> bool:
        """Tell whether both ordering constraints are satisfied."""
        return self._left_sibling_complete and self._all_children_complete

    def reasons(self) -> list[str]:
        """Return a fresh list of the reasons the task is not ready."""
        return list(self._reasons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReadinessState):
            return NotImplemented
        return (
            self._left_sibling_complete == other._left_sibling_complete
            and self._all_children_complete == other._all_children_complete
            and self._reasons == other._reasons
        )

    def __hash__(self) -> int:
        return hash((self._left_sibling_complete, self._all_children_complete, self._reasons))

    def __repr__(self) -> str:
        return (
            f"ReadinessState(left_sibling_complete={self._left_sibling_complete}, "
            f"all_children_complete={self._all_children_complete}, "
            f"reasons={list(self._reasons)!r})"
        )


class ReadinessEvaluator:
    """Decides readiness from the left sibling and the children of a task."""

    def __init__(self, repository: TaskRepository, navigator: TreeNavigator) -> None:
        self._repository = repository
        self._navigator = navigator

    def evaluate(self, task_id: TaskId) -> ReadinessState:
        """Evaluate a task; raises NotFoundError if it does not exist."""
        self._repository.find_by_id(task_id)
        reasons: list[str] = []

        left = self._navigator.left_sibling(task_id)
        left_complete = left is None or left.status == Status.DONE
        if not left_complete:
            reasons.append(LEFT_SIBLING_INCOMPLETE)

        children = self._navigator.children(task_id)
        children_complete = all(child.status == Status.DONE for child in children)
        if not children_complete:
            reasons.append(CHILDREN_INCOMPLETE)

        return ReadinessState(left_complete, children_complete, reasons)