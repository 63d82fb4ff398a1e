"""Ordered task queue for project generation.

Planning code enqueues Task records; run_all() then executes them one
at a time in insertion order. Task arguments are fixed when the task
is created. Anything a later task needs from an earlier one travels
through the threaded state value: a task's callback receives the
current state and the operation's result and returns the new state,
and a task created with ``pass_state=True`` receives the state as its
first argument.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from rich.markup import escape

from swanky.errors import SwankyError, UnknownError
from swanky.status import Spinner

StateT = TypeVar("StateT")


class QueueState(str, Enum):
    """Lifecycle of a TaskQueue. COMPLETED and ABORTED are terminal."""

    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class Task:
    """A deferred operation plus the messages shown while it runs.

    Attributes:
        operation: Sync or async callable.
        args: Positional arguments, bound at enqueue time.
        running_message: Label shown while the task runs.
        success_message: Label shown on success (default: running_message).
        fail_message: Label shown on failure (default: running_message).
        exit_on_error: If True, a failure aborts the whole queue.
        callback: ``(state, result) -> state``; called when the
            operation returns something other than None.
        pass_state: If True, the current state is passed before args.
    """

    operation: Callable[..., Any]
    args: tuple[Any, ...] = ()
    running_message: str = ""
    success_message: str | None = None
    fail_message: str | None = None
    exit_on_error: bool = True
    callback: Callable[[Any, Any], Any] | None = None
    pass_state: bool = False


@dataclass
class TaskFailure:
    """A non-fatal task error recorded during a run."""

    task: Task
    error: BaseException


@dataclass
class TaskQueue(Generic[StateT]):
    """Runs enqueued tasks sequentially, reporting each through a Spinner."""

    spinner: Spinner = field(default_factory=Spinner)
    tasks: list[Task] = field(default_factory=list)
    errors: list[TaskFailure] = field(default_factory=list)
    state: QueueState = QueueState.IDLE

    def enqueue(self, task: Task) -> None:
        if self.state is not QueueState.IDLE:
            raise RuntimeError(f"Cannot enqueue tasks on a {self.state.value} queue")
        self.tasks.append(task)

    def __len__(self) -> int:
        return len(self.tasks)

    async def run_all(self, initial: StateT) -> StateT:
        """Execute every task in order and return the final state.

        Raises:
            SwankyError: The first fatal task failure, whether raised by the
                operation or by its callback. Errors that are not
                SwankyError are wrapped in UnknownError with the original
                exception as ``__cause__``.
            RuntimeError: If the queue has already been run.
        """
        if self.state is not QueueState.IDLE:
            raise RuntimeError(f"Task queue already {self.state.value}")
        self.state = QueueState.RUNNING

        current = initial
        for task in self.tasks:
            self.spinner.start(task.running_message)
            args = (current, *task.args) if task.pass_state else task.args
            try:
                result = task.operation(*args)
                if inspect.isawaitable(result):
                    result = await result
                if task.callback is not None and result is not None:
                    current = task.callback(current, result)
            except Exception as exc:
                self.spinner.fail(task.fail_message or task.running_message)
                if task.exit_on_error:
                    self.state = QueueState.ABORTED
                    if isinstance(exc, SwankyError):
                        raise
                    raise UnknownError(f"{task.running_message} failed: {exc}") from exc
                self.errors.append(TaskFailure(task=task, error=exc))
                self.spinner.console.print(
                    f"[yellow]  {type(exc).__name__}: {escape(str(exc))}[/yellow]"
                )
                continue

            self.spinner.succeed(task.success_message or task.running_message)

        self.state = QueueState.COMPLETED
        return current
