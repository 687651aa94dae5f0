# src/testcommander/telemetry/usage.py

"""
Usage recording for user-facing operations.

Usage tags are only logged locally; nothing is sent to a remote service.
"""

from typing import Protocol, runtime_checkable

import structlog

log = structlog.get_logger("telemetry.usage")


@runtime_checkable
class UsageRecorder(Protocol):
    def record(self, event: str) -> None: ...


class LoggingUsageRecorder:
    """Records usage tags as debug log entries."""

    def __init__(self) -> None:
        self.counts: dict[str, int] = {}

    def record(self, event: str) -> None:
        self.counts[event] = self.counts.get(event, 0) + 1
        log.debug("Usage recorded", usage_event=event, count=self.counts[event])
