# fsmware/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fsmware.core.errors import ValidationError

if TYPE_CHECKING:
    from fsmware.core.events import Event
    from fsmware.core.states import State
    from fsmware.core.transitions import Transition


class Validator:
    """
    Performs construction-time and runtime validation of the machine's
    inputs, ensuring states, transitions, middlewares and events are usable.
    """

    def __init__(self) -> None:
        """
        Initialize the validator with the default rules.
        """
        self._rules_engine = _ValidationRulesEngine()

    def validate_transition(self, transition: "Transition") -> None:
        """
        Check that a given transition is well-formed.

        :param transition: The transition to validate.
        :raises ValidationError: If validation fails.
        """
        self._rules_engine.validate_transition(transition)

    def validate_state(self, state: "State") -> None:
        """
        Check that a state can be registered.

        :param state: The state to validate.
        :raises ValidationError: If validation fails.
        """
        self._rules_engine.validate_state(state)

    def validate_middleware(self, middleware: Any) -> None:
        """
        :raises ValidationError: If the middleware is not callable.
        """
        self._rules_engine.validate_middleware(middleware)

    def validate_event(self, event: "Event") -> None:
        """
        Validate that an event is well-defined and usable.

        :param event: The event to validate.
        :raises ValidationError: If validation fails.
        """
        self._rules_engine.validate_event(event)


class _ValidationRulesEngine:
    """
    Internal engine applying a set of validation rules. Centralizes
    validation logic for easier maintenance.
    """

    def __init__(self) -> None:
        self._default_rules = _DefaultValidationRules

    def validate_transition(self, transition: "Transition") -> None:
        self._default_rules.validate_transition(transition)

    def validate_state(self, state: "State") -> None:
        self._default_rules.validate_state(state)

    def validate_middleware(self, middleware: Any) -> None:
        self._default_rules.validate_middleware(middleware)

    def validate_event(self, event: "Event") -> None:
        self._default_rules.validate_event(event)


def _is_name(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


class _DefaultValidationRules:
    """
    Built-in rules ensuring basic correctness out of the box.
    """

    @staticmethod
    def validate_transition(transition: "Transition") -> None:
        """
        Check that source, event and target are non-empty strings, that
        middlewares are only attached to named transitions, and that guards
        and middlewares are callable.
        """
        for label, value in (
            ("source", transition.source),
            ("event", transition.event),
            ("target", transition.target),
        ):
            if not _is_name(value):
                raise ValidationError(f"Transition {label} must be a non-empty string, got {value!r}.")
        if transition.name is not None and not _is_name(transition.name):
            raise ValidationError(f"Transition name must be a non-empty string, got {transition.name!r}.")
        if transition.middlewares and transition.name is None:
            raise ValidationError(
                f"Transition {transition.source} --{transition.event}--> {transition.target} "
                "attaches middlewares but has no name."
            )
        for m in transition.middlewares:
            _DefaultValidationRules.validate_middleware(m)
        if transition.guard is not None and not callable(transition.guard):
            raise ValidationError("Transition guard must be callable.")

    @staticmethod
    def validate_state(state: "State") -> None:
        if not _is_name(getattr(state, "name", None)):
            raise ValidationError("State must have a non-empty string name.")

    @staticmethod
    def validate_middleware(middleware: Any) -> None:
        if not callable(middleware):
            raise ValidationError(f"Middleware must be callable, got {middleware!r}.")

    @staticmethod
    def validate_event(event: "Event") -> None:
        """
        Check that event type is a non-empty string.
        """
        if not _is_name(getattr(event, "type", None)):
            raise ValidationError("Event must have a non-empty string type.")
