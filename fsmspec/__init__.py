"""Finite state machine definitions: validation and execution.

A machine is described as plain data::

    {
        "id": "toggle",
        "initial": "off",
        "states": {
            "off": {"on": {"TOGGLE": "on"}},
            "on": {"on": {"TOGGLE": "off"}},
        },
    }

``parse`` checks the whole definition and raises a ParseError listing every
defect it found. ``launch`` turns a parsed definition into a StateMachine
whose ``send`` method processes triggers. Subscribers on the ``event``
channel see each trigger before it is applied and may veto a transition by
calling ``stop()`` on the notification.
"""

from fsmspec.engine import (
    EVENT_CHANNEL,
    TRANSITION_CHANNEL,
    Notification,
    NotificationBus,
    NotificationKind,
    StateMachine,
    launch,
)
from fsmspec.spec import (
    UNDEFINED,
    FsmError,
    MachineSpec,
    ParseError,
    SpecError,
    StateSpec,
    ValidationError,
    parse,
    try_parse,
    type_name,
)

__version__ = "0.1.0"

__all__ = [
    # Specification
    "parse",
    "try_parse",
    "MachineSpec",
    "StateSpec",
    "type_name",
    "UNDEFINED",
    # Errors
    "FsmError",
    "SpecError",
    "ValidationError",
    "ParseError",
    # Engine
    "launch",
    "StateMachine",
    "Notification",
    "NotificationKind",
    "NotificationBus",
    "EVENT_CHANNEL",
    "TRANSITION_CHANNEL",
]
