"""Swanky task execution - ordered queue of deferred project operations."""

from swanky.execution.queue import QueueState, Task, TaskFailure, TaskQueue

__all__ = [
    "QueueState",
    "Task",
    "TaskFailure",
    "TaskQueue",
]
