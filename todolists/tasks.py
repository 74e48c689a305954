"""An in-memory, ordered list of tasks."""

from __future__ import annotations

from collections.abc import Iterator


class InvalidTaskIndex(IndexError):
    """Raised when a task index does not point at an existing task."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"invalid task index {index} (the list holds {size} tasks)")
        self.index = index
        self.size = size


class TaskList:
    """Tasks kept in the order they were added."""

    def __init__(self) -> None:
        self._tasks: list[str] = []

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise InvalidTaskIndex(index, len(self._tasks))

    def add(self, task: str) -> None:
        """Append a task to the end of the list."""
        self._tasks.append(task)

    def edit(self, index: int, task: str) -> None:
        """Replace the task at ``index``."""
        self._check(index)
        self._tasks[index] = task

    def delete(self, index: int) -> str:
        """Remove the task at ``index`` and return it."""
        self._check(index)
        return self._tasks.pop(index)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)