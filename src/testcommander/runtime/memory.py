# src/testcommander/runtime/memory.py

import attrs

from testcommander.protocols import TestCommand


class LastCommandMemory:
    """Holds the most recently issued test command so it can be run again."""

    def __init__(self) -> None:
        self._last: TestCommand | None = None

    def record(self, command: TestCommand) -> None:
        # Keep our own copy; replay must not follow later changes to the caller's object.
        self._last = attrs.evolve(command)

    def replay(self) -> TestCommand | None:
        return self._last

    @property
    def is_empty(self) -> bool:
        return self._last is None
