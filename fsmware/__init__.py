"""fsmware: finite state machine engine with guard middleware chains

This package resolves typed events against a transition table and runs each
matched transition through an ordered chain of synchronous or asynchronous
middlewares before committing the state change.

Responsibilities:
    - Transition lookup by (current state, event type), first match wins
    - Middleware chains with short-circuit rejection and "around" semantics
    - Serialization of attempts through an in-flight flag
    - State enter/leave lifecycle calls on commit
    - Lazy materialization of states referenced only by transitions

Cross-cutting Concerns:
    Concurrency:
        - Single asyncio event loop, cooperative scheduling
        - Events arriving while a transition is in flight are dropped

    Error Handling:
        - Vetoes and unmatched events are reported structurally, not raised
        - Middleware faults handled according to FaultPolicy

    Logging:
        - Standard library logging, one logger per module
        - No handlers installed by the library
"""

from fsmware.core import (
    Event,
    FaultPolicy,
    FSMError,
    GuardAdapter,
    GuardFaultError,
    HookManager,
    Machine,
    Rejection,
    RejectionKind,
    State,
    StateNotFoundError,
    Transition,
    TransitionError,
    ValidationError,
    Validator,
    create_event,
)

__version__ = "0.1.0"

__all__ = [
    "Event",
    "FaultPolicy",
    "FSMError",
    "GuardAdapter",
    "GuardFaultError",
    "HookManager",
    "Machine",
    "Rejection",
    "RejectionKind",
    "State",
    "StateNotFoundError",
    "Transition",
    "TransitionError",
    "ValidationError",
    "Validator",
    "create_event",
]
