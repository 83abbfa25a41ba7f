# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, List, Optional
from unittest.mock import MagicMock

import pytest

from fsmware.core.events import Event
from fsmware.core.states import State


class TrackingState(State):
    """State that counts and records its lifecycle calls."""

    def __init__(self, name: str, trace: Optional[List[str]] = None) -> None:
        super().__init__(name)
        self.enter_count = 0
        self.leave_count = 0
        self.entered_from: List[Optional[State]] = []
        self.events: List[Event] = []
        self.trace = trace

    def enter(self, prev_state: Optional[State], event: Event) -> None:
        super().enter(prev_state, event)
        self.enter_count += 1
        self.entered_from.append(prev_state)
        self.events.append(event)
        if self.trace is not None:
            self.trace.append(f"ENTER:{self.name}")

    def leave(self, event: Event) -> None:
        super().leave(event)
        self.leave_count += 1
        self.events.append(event)
        if self.trace is not None:
            self.trace.append(f"LEAVE:{self.name}")


class RecordingHook:
    """Hook that records every lifecycle notification it receives."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def on_enter(self, state: State) -> None:
        self.calls.append(("enter", state.name))

    def on_exit(self, state: State) -> None:
        self.calls.append(("exit", state.name))

    def on_reject(self, rejection: Any) -> None:
        self.calls.append(("reject", rejection))

    def on_error(self, error: Exception) -> None:
        self.calls.append(("error", error))


@pytest.fixture
def tracking_state():
    """The TrackingState class, for tests that build their own states."""
    return TrackingState


@pytest.fixture
def state1():
    return TrackingState("state1")


@pytest.fixture
def state2():
    return TrackingState("state2")


@pytest.fixture
def state3():
    return TrackingState("state3")


@pytest.fixture
def recording_hook():
    return RecordingHook()


@pytest.fixture
def mock_hook():
    """A hook mock whose lifecycle methods return None."""
    hook = MagicMock()
    hook.on_enter = MagicMock(return_value=None)
    hook.on_exit = MagicMock(return_value=None)
    hook.on_reject = MagicMock(return_value=None)
    hook.on_error = MagicMock(return_value=None)
    return hook


@pytest.fixture
def go_event():
    return Event("go")


@pytest.fixture
def error_classes():
    """Provides a tuple of error classes for quick reference."""
    from fsmware.core.errors import FSMError, GuardFaultError, StateNotFoundError, TransitionError, ValidationError

    return (FSMError, StateNotFoundError, TransitionError, ValidationError, GuardFaultError)
