# tests/unit/test_notifications.py

"""Unit tests for the broadcast streams."""

from unittest.mock import MagicMock

from testcommander.runtime import EventStream, NotificationHub


class TestEventStream:
    def test_publish_reaches_all_subscribers_in_order(self):
        stream: EventStream[str] = EventStream("test")
        received = []
        stream.subscribe(lambda v: received.append(("first", v)))
        stream.subscribe(lambda v: received.append(("second", v)))

        stream.publish("x")

        assert received == [("first", "x"), ("second", "x")]

    def test_tokens_are_unique_and_unsubscribe_works(self):
        stream: EventStream[int] = EventStream("test")
        handler = MagicMock()
        first = stream.subscribe(handler)
        second = stream.subscribe(MagicMock())
        assert first != second

        assert stream.unsubscribe(first) is True
        assert stream.unsubscribe(first) is False
        stream.publish(1)

        handler.assert_not_called()
        assert stream.subscriber_count == 1

    def test_late_subscriber_misses_earlier_events(self):
        stream: EventStream[int] = EventStream("test")
        stream.publish(1)
        handler = MagicMock()
        stream.subscribe(handler)

        stream.publish(2)

        handler.assert_called_once_with(2)

    def test_failing_subscriber_does_not_block_others(self):
        stream: EventStream[int] = EventStream("test")
        stream.subscribe(MagicMock(side_effect=RuntimeError("boom")))
        healthy = MagicMock()
        stream.subscribe(healthy)

        stream.publish(7)

        healthy.assert_called_once_with(7)


def test_hub_streams_are_independent():
    hub = NotificationHub()
    discovery, runs = MagicMock(), MagicMock()
    hub.discovery_results.subscribe(discovery)
    hub.test_run_started.subscribe(runs)

    hub.test_run_started.publish("A")

    runs.assert_called_once_with("A")
    discovery.assert_not_called()
