"""Live machine instances driven by triggers."""

from __future__ import annotations

from typing import Any, Optional

from fsmspec.config.settings import EngineConfig
from fsmspec.engine.bus import Handler, NotificationBus
from fsmspec.engine.notification import Notification
from fsmspec.spec.machine import MachineSpec
from fsmspec.spec.state import StateSpec
from fsmspec.utils.logging import get_logger

logger = get_logger("engine.machine")

EVENT_CHANNEL = "event"
TRANSITION_CHANNEL = "transition"


class StateMachine:
    """
    Running instance of a validated machine definition.

    Each ``send`` first publishes a Notification on the ``event`` channel.
    If the trigger resolves to a transition and no subscriber stopped the
    notification, the state is committed and ``(from_state, to_state)`` is
    published on the ``transition`` channel.
    """

    def __init__(
        self,
        spec: MachineSpec,
        bus: Optional[NotificationBus] = None,
    ) -> None:
        """
        Initialize the instance in the spec's initial state.

        Args:
            spec: Validated machine definition, shared read-only
            bus: Notification bus to publish on (a private one by default)
        """
        self._spec = spec
        self._bus = bus if bus is not None else NotificationBus()

        self._state: str = spec.initial
        self._state_spec: StateSpec = spec.get_state(self._state)

        self._logger = logger.bind(machine_id=spec.id)

    @property
    def spec(self) -> MachineSpec:
        return self._spec

    @property
    def state(self) -> str:
        """Name of the current state."""
        return self._state

    def send(self, trigger: str) -> str:
        """
        Process a trigger.

        Args:
            trigger: Trigger name

        Returns:
            Current state name after processing
        """
        if not self._state_spec.has_event(trigger):
            self._bus.publish(EVENT_CHANNEL, Notification.event(trigger))
            self._logger.debug("trigger_ignored", state=self._state, trigger=trigger)
            return self._state

        old_state = self._state
        new_state = self._state_spec.get_target(trigger)
        notification = Notification.transition(trigger, old_state, new_state)
        self._bus.publish(EVENT_CHANNEL, notification)

        if notification.is_stopped():
            self._logger.info(
                "transition_vetoed",
                trigger=trigger,
                from_state=old_state,
                to_state=new_state,
            )
            return self._state

        self._state = new_state
        self._state_spec = self._spec.get_state(new_state)
        self._logger.debug(
            "state_transition",
            trigger=trigger,
            from_state=old_state,
            to_state=new_state,
        )
        self._bus.publish(TRANSITION_CHANNEL, old_state, new_state)

        return self._state

    def can_send(self, trigger: str) -> bool:
        """Check if the current state handles ``trigger``."""
        return self._state_spec.has_event(trigger)

    def on(self, channel: str, handler: Handler) -> None:
        self._bus.subscribe(channel, handler)

    def once(self, channel: str, handler: Handler) -> None:
        self._bus.subscribe_once(channel, handler)

    def remove_listener(self, channel: str, handler: Handler) -> None:
        self._bus.unsubscribe(channel, handler)

    def __repr__(self) -> str:
        return f"StateMachine(id={self._spec.id!r}, state={self._state!r})"


def launch(spec: Any, config: Optional[EngineConfig] = None) -> StateMachine:
    """
    Start a new instance of a parsed machine definition.

    Args:
        spec: MachineSpec returned by ``parse``
        config: Engine configuration (defaults apply when omitted)

    Returns:
        StateMachine in the initial state

    Raises:
        TypeError: If ``spec`` is not a valid MachineSpec
    """
    if not isinstance(spec, MachineSpec) or not spec.is_valid:
        raise TypeError("spec must be a parsed state machine")

    config = config or EngineConfig()
    bus = NotificationBus(max_listeners=config.bus.max_listeners)

    instance = StateMachine(spec, bus=bus)
    logger.debug("machine_launched", machine_id=spec.id, state=instance.state)
    return instance
