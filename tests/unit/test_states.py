# tests/unit/test_states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


def test_state_init():
    from fsmware.core.states import State

    s = State(name="TestState")
    assert s.name == "TestState"
    assert isinstance(s.data, dict)


def test_state_default_hooks_are_noops(go_event):
    from fsmware.core.states import State

    s = State("S")
    assert s.enter(None, go_event) is None
    assert s.leave(go_event) is None


def test_state_subclass_hooks(tracking_state, go_event):
    prev = tracking_state("prev")
    s = tracking_state("S")

    s.enter(prev, go_event)
    s.leave(go_event)

    assert s.enter_count == 1
    assert s.leave_count == 1
    assert s.entered_from == [prev]
    assert s.events == [go_event, go_event]


def test_state_identity_equality():
    from fsmware.core.states import State

    a = State("same")
    b = State("same")
    assert a == a
    assert a != b
    assert len({a, b}) == 2


def test_state_data_isolation():
    from fsmware.core.states import State

    s1 = State("S1")
    s2 = State("S2")

    s1.data["test"] = "value1"
    s2.data["test"] = "value2"

    assert s1.data["test"] == "value1"
    assert s2.data["test"] == "value2"


def test_state_repr(tracking_state):
    from fsmware.core.states import State

    assert repr(State("idle")) == "State('idle')"
    assert repr(tracking_state("busy")) == "TrackingState('busy')"
