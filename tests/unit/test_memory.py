# tests/unit/test_memory.py

from testcommander.protocols import TestCommand
from testcommander.runtime import LastCommandMemory


def test_empty_memory_replays_nothing():
    memory = LastCommandMemory()
    assert memory.is_empty
    assert memory.replay() is None


def test_keeps_only_latest_command():
    memory = LastCommandMemory()
    memory.record(TestCommand(test_name="A"))
    memory.record(TestCommand(test_name="B", skip_build=True))

    assert memory.replay() == TestCommand(test_name="B", skip_build=True)


def test_stores_a_copy():
    command = TestCommand(test_name="A")
    memory = LastCommandMemory()
    memory.record(command)

    replayed = memory.replay()
    assert replayed == command
    assert replayed is not command
