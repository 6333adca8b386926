"""Discovery trees: ordered task hierarchies with bottom-up completion and readiness rules."""

__version__ = "0.1.0"
__all__ = [
    "navigator",
    "readiness",
    "repository",
    "service",
    "status",
    "task",
    "task_id",
    "validator",
]