# fsmware/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from fsmware.core.events import Event


class FSMError(Exception):
    """
    Base exception class for errors raised by the state machine library.
    """


class StateNotFoundError(FSMError):
    """
    Raised when a requested state name is not known to the machine at all.
    """


class ValidationError(FSMError):
    """
    Raised when validation detects a malformed state, transition, middleware or event.
    """


class TransitionError(FSMError):
    """
    Raised when a matched transition cannot be completed, e.g. a state's
    ``enter`` or ``leave`` hook raised while the change was being committed.
    """


class GuardFaultError(TransitionError):
    """
    Raised when a middleware raises instead of calling ``next``.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, middleware: Any = None, event: Optional["Event"] = None) -> None:
        super().__init__(message)
        self.middleware = middleware
        self.event = event
