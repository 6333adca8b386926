# discovery-tree

A small domain library for *discovery trees*: a single root work item broken
down into ordered child tasks, worked through left to right and completed
bottom to top.

## Rules the library enforces

- `TaskService.create_root_task` refuses to create a second root; a root task
  carries the status `Root Work Item`.
- Children of a task are ordered by a zero-based position. New children are
  appended at the end, and moves and deletes shift siblings so positions stay
  contiguous.
- A task may only be marked `DONE` once all of its children are `DONE`.
- A task cannot be moved under itself or any of its own descendants, nor to
  the root level while a root exists.
- Deleting a task removes its whole subtree and closes the gap among its
  siblings; deleting the root removes the entire tree.
- A task is *ready* when its left sibling is done (or it has none) and all of
  its children are done (or it has none).

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Pieces

| Module | What it holds |
| --- | --- |
| `discovery_tree.status` | `Status` enum (`TODO`, `IN_PROGRESS`, `DONE`, `BLOCKED`, `ROOT_WORK_ITEM`); `str(status)` gives its label (`"In Progress"`, `"Root Work Item"`, ...), `Status.parse(label)` goes back; `is_valid_status(value)` |
| `discovery_tree.task_id` | `TaskId`, a frozen UUID-backed identifier: `TaskId.generate()`, `TaskId.from_string(text)` |
| `discovery_tree.task` | `Task`, the aggregate, with read-only `id`, `description`, `status`, `parent_id`, `position`, `created_at`, `updated_at`, and `change_status`, `update_description`, `move`, `is_root`, `Task.reconstruct` |
| `discovery_tree.repository` | `TaskRepository`, an in-memory store, and the errors `ValidationError`, `ConstraintViolationError`, `NotFoundError` (all `DomainError`) |
| `discovery_tree.validator` | `TaskValidator`: `validate_status_change`, `validate_move`, `validate_delete` |
| `discovery_tree.navigator` | `TreeNavigator`: `parent`, `children`, `siblings`, `left_sibling`, `right_sibling`, `root`, `tree`, `subtree` |
| `discovery_tree.readiness` | `ReadinessState` (`is_ready()`, `reasons()`, `left_sibling_complete`, `all_children_complete`) and `ReadinessEvaluator` |
| `discovery_tree.service` | `TaskService`: create, change status, move and delete tasks |

`TaskRepository` keeps tasks in a dictionary keyed by `TaskId`. It offers
`save`, `find_by_id`, `find_by_parent_id` (ordered by position; pass `None`
for the root level), `find_root`, `find_all`, `delete` and `delete_subtree`,
raising `NotFoundError` for missing tasks. The services accept any object with
the same methods.

## Example

```python
from discovery_tree.navigator import TreeNavigator
from discovery_tree.readiness import ReadinessEvaluator
from discovery_tree.repository import TaskRepository
from discovery_tree.service import TaskService
from discovery_tree.status import Status

repository = TaskRepository()
service = TaskService(repository)

root = service.create_root_task("Ship the release")
tests = service.create_child_task("Write tests", root.id)
docs = service.create_child_task("Write docs", root.id)

evaluator = ReadinessEvaluator(repository, TreeNavigator(repository))
evaluator.evaluate(docs.id).is_ready()   # False: "Write tests" is not done yet
evaluator.evaluate(docs.id).reasons()    # ["left sibling is not complete"]

service.change_task_status(tests.id, Status.DONE)
evaluator.evaluate(docs.id).is_ready()   # True

service.move_task(docs.id, root.id, 0)   # reorder among siblings
service.delete_task(root.id)             # removes the whole tree
```

Every rule violation is raised as an exception: `ValidationError` for bad
input, `ConstraintViolationError` for broken tree rules, and `NotFoundError`
for unknown tasks.

## What it does not do

This is a domain library only. Tasks live in memory for as long as the
`TaskRepository` object does; nothing is written to disk or a database.
There is no command-line tool, web server or user interface.