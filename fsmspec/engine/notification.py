"""Cancellable payload delivered on the ``event`` channel."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class NotificationKind(str, Enum):
    """What a notification reports."""

    # Trigger not handled by the current state
    EVENT = "event"

    # Trigger resolved to a pending state change
    TRANSITION = "transition"


@dataclass
class Notification:
    """
    Payload passed by reference to every ``event`` subscriber in turn.

    Any subscriber may call ``stop()``; the engine reads ``is_stopped()``
    only after all subscribers have run, so a later subscriber can veto a
    transition an earlier one let through.
    """

    type: NotificationKind
    trigger: str
    from_state: Optional[str] = None
    to_state: Optional[str] = None
    _proceed: bool = field(default=True, init=False, repr=False, compare=False)

    @classmethod
    def event(cls, trigger: str) -> Notification:
        return cls(type=NotificationKind.EVENT, trigger=trigger)

    @classmethod
    def transition(cls, trigger: str, from_state: str, to_state: str) -> Notification:
        return cls(
            type=NotificationKind.TRANSITION,
            trigger=trigger,
            from_state=from_state,
            to_state=to_state,
        )

    def stop(self) -> None:
        self._proceed = False

    def is_stopped(self) -> bool:
        return not self._proceed
