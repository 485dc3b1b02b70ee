"""Shared fixtures for fsmspec tests."""

from __future__ import annotations

import pytest

from fsmspec import launch, parse


@pytest.fixture
def toggle_raw() -> dict:
    """Two-state machine switching on TOGGLE."""
    return {
        "id": "toggleMachine",
        "initial": "deactivated",
        "states": {
            "activated": {"on": {"TOGGLE": "deactivated"}},
            "deactivated": {"on": {"TOGGLE": "activated"}},
        },
    }


@pytest.fixture
def toggle_spec(toggle_raw):
    return parse(toggle_raw)


@pytest.fixture
def toggle_machine(toggle_spec):
    return launch(toggle_spec)


@pytest.fixture
def recorder():
    """Handler collecting every call's positional arguments."""

    class Recorder:
        def __init__(self) -> None:
            self.calls: list[tuple] = []

        def __call__(self, *args) -> None:
            self.calls.append(args)

    return Recorder()
