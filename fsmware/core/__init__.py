"""
Core package providing the state machine engine.

Architecture:
- events/states/transitions: the static model
- registry: name-to-state and name-to-middleware lookups
- middleware: composition of middlewares into one async step
- machine: the receive() protocol tying it all together
"""

# Import order matters to avoid circular dependencies
from .errors import FSMError, GuardFaultError, StateNotFoundError, TransitionError, ValidationError
from .types import FaultPolicy, RejectionKind
from .events import Event, create_event
from .states import State
from .middleware import GuardAdapter, build_chain
from .transitions import Transition, TransitionTable
from .registry import MiddlewareRegistry, StateRegistry
from .hooks import HookManager
from .validations import Validator
from .machine import Machine, Rejection

__all__ = [
    # Errors
    "FSMError",
    "GuardFaultError",
    "StateNotFoundError",
    "TransitionError",
    "ValidationError",
    # Enums
    "FaultPolicy",
    "RejectionKind",
    # Model
    "Event",
    "create_event",
    "State",
    "Transition",
    "TransitionTable",
    # Engine
    "GuardAdapter",
    "build_chain",
    "MiddlewareRegistry",
    "StateRegistry",
    "HookManager",
    "Validator",
    "Machine",
    "Rejection",
]
