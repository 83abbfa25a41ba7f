# tests/unit/test_errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


def test_error_hierarchy(error_classes):
    FSMError, StateNotFoundError, TransitionError, ValidationError, GuardFaultError = error_classes
    assert issubclass(StateNotFoundError, FSMError)
    assert issubclass(TransitionError, FSMError)
    assert issubclass(ValidationError, FSMError)
    assert issubclass(GuardFaultError, TransitionError)


def test_exceptions_instantiation(error_classes):
    FSMError, StateNotFoundError, TransitionError, ValidationError, GuardFaultError = error_classes
    e = StateNotFoundError("Missing state")
    assert str(e) == "Missing state"
    e = TransitionError("Bad transition")
    assert str(e) == "Bad transition"
    e = ValidationError("Invalid config")
    assert str(e) == "Invalid config"


def test_guard_fault_error_attributes():
    from fsmware.core.errors import GuardFaultError
    from fsmware.core.events import Event

    def guard(next, event, current_state, next_state):
        raise ValueError("boom")

    event = Event("go")
    error = GuardFaultError("Middleware failed", middleware=guard, event=event)

    assert str(error) == "Middleware failed"
    assert error.middleware is guard
    assert error.event is event


def test_guard_fault_error_defaults():
    from fsmware.core.errors import GuardFaultError

    error = GuardFaultError("failed")
    assert error.middleware is None
    assert error.event is None


def test_error_empty_messages():
    from fsmware.core.errors import FSMError, StateNotFoundError, TransitionError, ValidationError

    assert str(FSMError()) == ""
    assert str(StateNotFoundError()) == ""
    assert str(TransitionError()) == ""
    assert str(ValidationError()) == ""
