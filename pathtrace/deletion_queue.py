"""Queue of clean-up callbacks run in reverse order of registration."""

from __future__ import annotations

from typing import Callable


class DeletionQueue:
    """Collects clean-up callables and runs them last-in, first-out."""

    def __init__(self) -> None:
        self._deletors: list[Callable[[], object]] = []

    def __len__(self) -> int:
        return len(self._deletors)

    def push(self, function: Callable[[], object]) -> None:
        """Register a callable to run on flush."""
        self._deletors.append(function)

    def flush(self) -> None:
        """Run every callable in reverse order, then empty the queue."""
        for deletor in reversed(self._deletors):
            deletor()
        self._deletors.clear()

    def __enter__(self) -> DeletionQueue:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.flush()