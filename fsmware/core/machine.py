# fsmware/core/machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Set, Tuple

from fsmware.core.errors import GuardFaultError, StateNotFoundError, TransitionError
from fsmware.core.events import Event
from fsmware.core.hooks import HookManager, fire_and_forget
from fsmware.core.middleware import build_chain, middleware_name
from fsmware.core.registry import MiddlewareRegistry, StateRegistry
from fsmware.core.states import State
from fsmware.core.transitions import Transition, TransitionTable
from fsmware.core.types import FaultPolicy, Middleware, RejectionKind
from fsmware.core.validations import Validator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rejection:
    """Outcome of the most recent attempt that did not commit."""

    middleware: Middleware
    detail: Any = None
    kind: RejectionKind = RejectionKind.VETO


class Machine:
    """
    A finite state machine driven by typed events.

    Transitions are looked up by ``(current state name, event type)``; the
    first match in declaration order wins. A matched transition runs through
    its middleware chain and commits only if every middleware passes control
    on. While one attempt is in flight, further events are dropped.
    """

    def __init__(
        self,
        initial_state: str,
        transitions: Iterable[Transition],
        states: Iterable[State] = (),
        *,
        validator: Optional[Validator] = None,
        hooks: Optional[List[Any]] = None,
        fault_policy: FaultPolicy = FaultPolicy.RECOVER,
        state_factory: Callable[[str], State] = State,
    ) -> None:
        """
        :param initial_state: Name of the state adopted as current when a state
            with that name is first registered.
        :param transitions: Transition table, in priority order.
        :param states: States to register right away.
        :param validator: Optional validator for input checks.
        :param hooks: Optional list of hook objects implementing on_enter,
            on_exit, on_reject, on_error.
        :param fault_policy: What to do when a middleware raises.
        :param state_factory: Builds states for names that transitions
            reference but that were never registered.
        """
        self._validator = validator or Validator()
        self._hooks = HookManager(hooks)
        self._fault_policy = fault_policy
        self._initial_state = initial_state
        self._table = TransitionTable(transitions)
        self._states = StateRegistry(state_factory)
        self._middlewares = MiddlewareRegistry()

        self._current_state: Optional[State] = None
        self._transitioning = False
        self._rejection: Optional[Rejection] = None
        self._pending: Set["asyncio.Future[Any]"] = set()

        for transition in self._table:
            self._validator.validate_transition(transition)
            if transition.middlewares:
                self._middlewares.add(transition.name, *transition.middlewares)
        for name in self._table.state_names():
            self._states.reference(name)
        for state in states:
            self.add_state(state)

    @property
    def current_state(self) -> Optional[State]:
        """The current state, or None until the initial state is registered."""
        return self._current_state

    @property
    def transitioning(self) -> bool:
        """True while a transition attempt is in flight."""
        return self._transitioning

    @property
    def rejection(self) -> Optional[Rejection]:
        """Why the latest attempt did not commit; cleared when a new attempt starts."""
        return self._rejection

    @property
    def initial_state(self) -> str:
        return self._initial_state

    @property
    def transitions(self) -> Tuple[Transition, ...]:
        return self._table.as_tuple()

    @property
    def hooks(self) -> HookManager:
        return self._hooks

    @property
    def fault_policy(self) -> FaultPolicy:
        return self._fault_policy

    def get_state(self, name: str) -> Optional[State]:
        """
        Look up a state by name.

        :return: The registered state, or None if the name is only a placeholder.
        :raises StateNotFoundError: If no transition or registration ever used the name.
        """
        if name not in self._states:
            raise StateNotFoundError(f"State '{name}' is not known to this machine")
        return self._states.get(name)

    def add_state(self, state: State) -> None:
        """
        Register a state, replacing any previous one with the same name. The
        first state registered under the initial state name becomes current.
        """
        self._validator.validate_state(state)
        self._states.register(state)
        if self._current_state is None and state.name == self._initial_state:
            self._current_state = state
            logger.debug(f"Initial state '{state.name}' adopted")

    def add_middleware(self, transition_name: str, *middlewares: Middleware) -> None:
        """
        Append middlewares to the chain of the named transition.
        """
        for middleware in middlewares:
            self._validator.validate_middleware(middleware)
        if not any(t.name == transition_name for t in self._table):
            logger.warning(f"Middleware registered for '{transition_name}', which names no transition")
        self._middlewares.add(transition_name, *middlewares)

    async def receive(self, event: Event) -> None:
        """
        Attempt the transition matching ``event`` from the current state.

        Completes once the attempt is over: immediately if nothing matches or
        another attempt is in flight, otherwise after the middleware chain and
        the commit or rejection. Vetoes are reported through ``rejection``,
        not raised.

        :raises ValidationError: If the event has no usable type.
        :raises TransitionError: If a state's enter/leave hook raised.
        :raises GuardFaultError: If a middleware raised and the fault policy
            is PROPAGATE or HOLD.
        """
        self._validator.validate_event(event)
        if self._transitioning:
            logger.debug(f"Dropped '{event.type}': a transition is in flight")
            return

        current = self._current_state
        if current is None:
            logger.debug(f"Ignored '{event.type}': no current state")
            return
        transition = self._table.match(current.name, event.type)
        if transition is None:
            logger.debug(f"No transition from '{current.name}' on '{event.type}'")
            return
        target = self._states.resolve(transition.target)
        if target is None:
            logger.debug(f"Target '{transition.target}' of {transition!r} is not a known state")
            return

        middlewares = self._middlewares_for(transition)
        committed = False
        self._rejection = None
        self._transitioning = True
        try:
            if not middlewares:
                self._commit(event, target)
            else:

                def complete() -> None:
                    nonlocal committed
                    self._commit(event, target)
                    committed = True

                def reject(middleware: Middleware, detail: Any = None) -> None:
                    self._reject(transition, middleware, detail)

                chain = build_chain(middlewares, complete, reject)
                await chain(event, current, target)
        except GuardFaultError as error:
            self._handle_fault(error, committed)
            return
        except TransitionError as error:
            self._transitioning = False
            self._hooks.execute_on_error(error)
            raise
        except BaseException:
            self._transitioning = False
            raise
        self._transitioning = False

    def _middlewares_for(self, transition: Transition) -> Tuple[Middleware, ...]:
        chain = self._middlewares.get(transition.name)
        if transition.guard_middleware is not None:
            chain = (transition.guard_middleware,) + chain
        return chain

    def _commit(self, event: Event, target: State) -> None:
        prev_state = self._current_state
        try:
            fire_and_forget(prev_state.leave(event), self._pending)
            self._hooks.execute_on_exit(prev_state)
        except Exception as exc:
            raise TransitionError(f"Leaving state '{prev_state.name}' failed: {exc!r}") from exc

        self._current_state = target

        try:
            fire_and_forget(target.enter(prev_state, event), self._pending)
            self._hooks.execute_on_enter(target)
        except Exception as exc:
            raise TransitionError(f"Entering state '{target.name}' failed: {exc!r}") from exc
        logger.debug(f"Transitioned '{prev_state.name}' -> '{target.name}' on '{event.type}'")

    def _reject(self, transition: Transition, middleware: Middleware, detail: Any) -> None:
        self._rejection = Rejection(middleware, detail)
        logger.info(f"{transition!r} rejected by {middleware_name(middleware)}")
        self._hooks.execute_on_reject(self._rejection)

    def _handle_fault(self, error: GuardFaultError, committed: bool = False) -> None:
        """
        Apply the fault policy. Must be called from the except block handling ``error``.

        :param committed: True if the state change had already been made when
            the middleware raised. No rejection is recorded in that case.
        """
        self._hooks.execute_on_error(error)
        if self._fault_policy is FaultPolicy.HOLD:
            logger.error(f"{error}; machine left in transitioning state")
            raise error

        self._transitioning = False
        if committed:
            logger.exception(f"{error} after committing to '{self._current_state.name}'")
        else:
            self._rejection = Rejection(error.middleware, error.__cause__, RejectionKind.FAULT)
            logger.exception(str(error))
        if self._fault_policy is FaultPolicy.PROPAGATE:
            raise error
