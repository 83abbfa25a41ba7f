# tests/unit/test_validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from fsmware.core.errors import ValidationError
from fsmware.core.events import Event
from fsmware.core.states import State
from fsmware.core.transitions import Transition
from fsmware.core.validations import Validator


@pytest.fixture
def validator():
    return Validator()


def test_valid_transition_passes(validator):
    validator.validate_transition(Transition("a", "go", "b"))
    validator.validate_transition(
        Transition("a", "go", "b", name="t", middlewares=[lambda next, *args: next()], guard=lambda e: True)
    )


@pytest.mark.parametrize(
    "kwargs",
    [
        {"source": "", "event": "go", "target": "b"},
        {"source": "a", "event": "", "target": "b"},
        {"source": "a", "event": "go", "target": None},
        {"source": "a", "event": 3, "target": "b"},
        {"source": "a", "event": "go", "target": "b", "name": ""},
    ],
)
def test_transition_names_must_be_strings(validator, kwargs):
    with pytest.raises(ValidationError):
        validator.validate_transition(Transition(**kwargs))


def test_middlewares_require_a_name(validator):
    t = Transition("a", "go", "b", middlewares=[lambda next, *args: next()])
    with pytest.raises(ValidationError, match="no name"):
        validator.validate_transition(t)


def test_guard_only_transition_needs_no_name(validator):
    validator.validate_transition(Transition("a", "go", "b", guard=lambda e: True))


def test_transition_middlewares_must_be_callable(validator):
    with pytest.raises(ValidationError, match="callable"):
        validator.validate_transition(Transition("a", "go", "b", name="t", middlewares=["nope"]))


def test_transition_guard_must_be_callable(validator):
    with pytest.raises(ValidationError, match="guard"):
        validator.validate_transition(Transition("a", "go", "b", guard="nope"))


def test_validate_state(validator):
    validator.validate_state(State("ok"))
    with pytest.raises(ValidationError):
        validator.validate_state(State(""))
    with pytest.raises(ValidationError):
        validator.validate_state(object())


def test_validate_middleware(validator):
    validator.validate_middleware(lambda next, *args: next())
    with pytest.raises(ValidationError):
        validator.validate_middleware(42)


def test_validate_event(validator):
    validator.validate_event(Event("go"))
    with pytest.raises(ValidationError):
        validator.validate_event(Event(""))
    with pytest.raises(ValidationError):
        validator.validate_event({"type": "go"})
