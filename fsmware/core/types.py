"""
Type definitions and enums shared across the engine.

Design:
- No runtime dependencies on other fsmware modules
- Only contains enums and callable aliases
- Used by middleware.py and machine.py
"""

from enum import Enum, auto
from typing import Any, Awaitable, Callable, Optional, Union


class RejectionKind(Enum):
    """Why an attempted transition did not commit."""

    VETO = auto()  # A middleware called next(False, detail)
    FAULT = auto()  # A middleware raised and the fault was recovered


class FaultPolicy(Enum):
    """What the machine does when a middleware raises.

    RECOVER and PROPAGATE clear the in-flight flag and record a FAULT
    rejection. HOLD leaves the flag set, blocking every later transition.
    """

    RECOVER = auto()  # Record the fault, swallow it
    PROPAGATE = auto()  # Record the fault, raise GuardFaultError
    HOLD = auto()  # Leave the flag stuck, raise GuardFaultError


# next(value=None, detail=None); awaiting the result runs the downstream chain
Next = Callable[..., Awaitable[None]]

# middleware(next, event, current_state, next_state)
Middleware = Callable[..., Union[Any, Awaitable[Any]]]

# guard(event) -> bool, possibly awaitable
GuardPredicate = Callable[[Any], Union[bool, Awaitable[bool]]]

Reject = Callable[[Middleware, Optional[Any]], None]
