"""Tests for NotificationBus."""

import pytest

from fsmspec.engine.bus import NotificationBus


class TestSubscribe:
    """Tests for subscription and delivery order."""

    def test_publish_without_handlers(self):
        bus = NotificationBus()

        assert bus.publish("event", 1) is False

    def test_handlers_run_in_order(self):
        bus = NotificationBus()
        calls = []
        bus.subscribe("event", lambda value: calls.append(("first", value)))
        bus.subscribe("event", lambda value: calls.append(("second", value)))

        assert bus.publish("event", 1) is True
        assert calls == [("first", 1), ("second", 1)]

    def test_positional_payload(self, recorder):
        bus = NotificationBus()
        bus.subscribe("transition", recorder)

        bus.publish("transition", "a", "b")

        assert recorder.calls == [("a", "b")]

    def test_channels_are_separate(self, recorder):
        bus = NotificationBus()
        bus.subscribe("event", recorder)

        bus.publish("transition", "a", "b")

        assert recorder.calls == []
        assert bus.channels() == ["event"]

    def test_once(self, recorder):
        bus = NotificationBus()
        bus.subscribe_once("event", recorder)

        bus.publish("event", 1)
        bus.publish("event", 2)

        assert recorder.calls == [(1,)]
        assert bus.listener_count("event") == 0

    def test_handler_errors_propagate(self):
        bus = NotificationBus()

        def explode(_):
            raise RuntimeError("boom")

        bus.subscribe("event", explode)

        with pytest.raises(RuntimeError, match="boom"):
            bus.publish("event", 1)


class TestUnsubscribe:
    """Tests for handler removal."""

    def test_unsubscribe(self, recorder):
        bus = NotificationBus()
        bus.subscribe("event", recorder)

        bus.unsubscribe("event", recorder)
        bus.publish("event", 1)

        assert recorder.calls == []
        assert bus.listener_count("event") == 0

    def test_unsubscribe_removes_one_registration(self, recorder):
        bus = NotificationBus()
        bus.subscribe("event", recorder)
        bus.subscribe("event", recorder)

        bus.unsubscribe("event", recorder)
        bus.publish("event", 1)

        assert recorder.calls == [(1,)]

    def test_unsubscribe_once_handler(self, recorder):
        bus = NotificationBus()
        bus.subscribe_once("event", recorder)

        bus.unsubscribe("event", recorder)
        bus.publish("event", 1)

        assert recorder.calls == []

    def test_unknown_handler_is_ignored(self, recorder):
        bus = NotificationBus()

        bus.unsubscribe("event", recorder)

        assert bus.listener_count("event") == 0

    def test_removed_during_delivery_is_skipped(self, recorder):
        bus = NotificationBus()
        bus.subscribe("event", lambda _: bus.unsubscribe("event", recorder))
        bus.subscribe("event", recorder)

        bus.publish("event", 1)
        bus.publish("event", 2)

        assert recorder.calls == []

    def test_added_during_delivery_waits_for_next_publish(self, recorder):
        bus = NotificationBus()
        bus.subscribe_once("event", lambda _: bus.subscribe("event", recorder))

        bus.publish("event", 1)
        bus.publish("event", 2)

        assert recorder.calls == [(2,)]

    def test_clear(self, recorder):
        bus = NotificationBus()
        bus.subscribe("event", recorder)
        bus.subscribe("transition", recorder)

        bus.clear("event")
        assert bus.channels() == ["transition"]

        bus.clear()
        assert bus.channels() == []


class TestListenerLimit:
    """Tests for the max_listeners setting."""

    def test_counts(self):
        bus = NotificationBus(max_listeners=2)
        for _ in range(3):
            bus.subscribe("event", lambda _: None)

        assert bus.listener_count("event") == 3

    def test_zero_disables_limit(self):
        bus = NotificationBus(max_listeners=0)
        for _ in range(50):
            bus.subscribe("event", lambda _: None)

        assert bus.listener_count("event") == 50
