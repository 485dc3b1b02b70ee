"""Synchronous in-process publish/subscribe channels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from fsmspec.utils.logging import get_logger

logger = get_logger("engine.bus")

Handler = Callable[..., Any]

DEFAULT_MAX_LISTENERS = 10


@dataclass(eq=False)
class _Registration:
    handler: Handler
    once: bool = False


class NotificationBus:
    """
    Named channels with synchronous, in-order handler invocation.

    Handlers run in the order they subscribed. Publishing iterates over a
    snapshot, so handlers added during a delivery only see later publishes
    and handlers removed during a delivery are skipped if not reached yet.
    Exceptions raised by a handler propagate to the publisher.
    """

    def __init__(self, max_listeners: int = DEFAULT_MAX_LISTENERS) -> None:
        """
        Initialize the bus.

        Args:
            max_listeners: Handler count per channel above which a warning
                is logged (0 disables the check)
        """
        self.max_listeners = max_listeners
        self._handlers: dict[str, list[_Registration]] = {}
        self._warned: set[str] = set()

    def subscribe(self, channel: str, handler: Handler) -> None:
        """Call ``handler`` on every publish to ``channel``."""
        self._add(channel, _Registration(handler))

    def subscribe_once(self, channel: str, handler: Handler) -> None:
        """Call ``handler`` on the next publish to ``channel`` only."""
        self._add(channel, _Registration(handler, once=True))

    def unsubscribe(self, channel: str, handler: Handler) -> None:
        """
        Remove the most recent registration of ``handler`` on ``channel``.

        Unknown handlers are ignored.
        """
        registrations = self._handlers.get(channel)
        if not registrations:
            return

        for index in range(len(registrations) - 1, -1, -1):
            if registrations[index].handler == handler:
                del registrations[index]
                break

        if not registrations:
            del self._handlers[channel]

    def publish(self, channel: str, *payload: Any) -> bool:
        """
        Deliver ``payload`` to every handler of ``channel``.

        Args:
            channel: Channel name
            *payload: Positional arguments passed to each handler

        Returns:
            True if at least one handler was called
        """
        registrations = self._handlers.get(channel)
        if not registrations:
            return False

        for registration in list(registrations):
            if registration.once:
                if not self._discard(channel, registration):
                    # Already consumed by a re-entrant publish
                    continue
            elif registration not in self._handlers.get(channel, ()):
                continue
            registration.handler(*payload)

        return True

    def listener_count(self, channel: str) -> int:
        return len(self._handlers.get(channel, ()))

    def channels(self) -> list[str]:
        """Channels with at least one handler."""
        return list(self._handlers)

    def clear(self, channel: str | None = None) -> None:
        """Remove all handlers of ``channel``, or of every channel."""
        if channel is None:
            self._handlers.clear()
            self._warned.clear()
        else:
            self._handlers.pop(channel, None)
            self._warned.discard(channel)

    def _add(self, channel: str, registration: _Registration) -> None:
        registrations = self._handlers.setdefault(channel, [])
        registrations.append(registration)

        if (
            self.max_listeners > 0
            and len(registrations) > self.max_listeners
            and channel not in self._warned
        ):
            self._warned.add(channel)
            logger.warning(
                "listener_limit_exceeded",
                channel=channel,
                listeners=len(registrations),
                max_listeners=self.max_listeners,
            )

    def _discard(self, channel: str, registration: _Registration) -> bool:
        registrations = self._handlers.get(channel)
        if not registrations:
            return False
        for index, candidate in enumerate(registrations):
            if candidate is registration:
                del registrations[index]
                if not registrations:
                    del self._handlers[channel]
                return True
        return False
