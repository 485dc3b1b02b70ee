"""Transition engine for parsed machine definitions."""

from fsmspec.engine.bus import NotificationBus
from fsmspec.engine.machine import (
    EVENT_CHANNEL,
    TRANSITION_CHANNEL,
    StateMachine,
    launch,
)
from fsmspec.engine.notification import Notification, NotificationKind

__all__ = [
    "NotificationBus",
    "Notification",
    "NotificationKind",
    "StateMachine",
    "EVENT_CHANNEL",
    "TRANSITION_CHANNEL",
    "launch",
]
