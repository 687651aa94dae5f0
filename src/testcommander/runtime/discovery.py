# src/testcommander/runtime/discovery.py

"""
Runs test discovery and turns its outcome into exactly one notification.
"""

import structlog
from attrs import define

from testcommander.protocols import Discoverer, DiscoveryResult, MessageDisplay
from testcommander.runtime.notifications import EventStream
from testcommander.telemetry import StructLogger

log: StructLogger = structlog.get_logger("runtime.discovery")


@define(frozen=True, slots=True)
class Ok:
    result: DiscoveryResult


@define(frozen=True, slots=True)
class Err:
    cause: BaseException


DiscoveryOutcome = Ok | Err


class DiscoveryCoordinator:
    """
    Calls the discoverer and republishes what it found.

    Whatever happens, each call to :meth:`discover` publishes once on the
    discovery stream. A failed discovery is published as an empty list so
    consumers can always leave their "discovering" state.
    """

    def __init__(
        self,
        discoverer: Discoverer,
        messages: MessageDisplay,
        stream: EventStream[list[str]],
        logger: StructLogger | None = None,
    ):
        self.discoverer = discoverer
        self.messages = messages
        self.stream = stream
        self._log = logger or log

    async def discover(self, directory: str | None, options_suffix: str) -> None:
        outcome = await self._call_discoverer(directory, options_suffix)
        self.publish(outcome)

    async def _call_discoverer(self, directory: str | None, options_suffix: str) -> DiscoveryOutcome:
        try:
            return Ok(await self.discoverer.discover_tests(directory, options_suffix))
        except Exception as e:
            return Err(e)

    def publish(self, outcome: DiscoveryOutcome) -> None:
        """Logs, displays and publishes a discovery outcome."""
        if isinstance(outcome, Err):
            self._log.error(
                "Error while discovering tests",
                error=str(outcome.cause),
                exc_info=outcome.cause,
            )
            self.stream.publish([])
            return

        result = outcome.result
        if result.warning_message:
            self._log.warning(result.warning_message.text)
            self.messages.show_warning(result.warning_message)

        self.stream.publish(list(result.test_names))
