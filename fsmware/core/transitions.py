# fsmware/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence, Tuple

from fsmware.core.middleware import GuardAdapter
from fsmware.core.types import GuardPredicate, Middleware


class Transition:
    """
    Defines a permitted move from one named state to another when an event of
    a given type arrives. Transitions refer to states by name; the machine
    resolves the names through its state registry.
    """

    def __init__(
        self,
        source: str,
        event: str,
        target: str,
        name: Optional[str] = None,
        middlewares: Optional[Sequence[Middleware]] = None,
        guard: Optional[GuardPredicate] = None,
    ) -> None:
        """
        :param source: Name of the state this transition leaves.
        :param event: Event type that triggers it.
        :param target: Name of the state this transition enters.
        :param name: Key under which middlewares are registered. Required if
            ``middlewares`` is given.
        :param middlewares: Ordered middlewares merged into the machine's
            registry under ``name``.
        :param guard: Optional predicate ``guard(event) -> bool``; runs ahead
            of every registered middleware.
        """
        self._source = source
        self._event = event
        self._target = target
        self._name = name
        self._middlewares: Tuple[Middleware, ...] = tuple(middlewares or ())
        self._guard = guard
        self._guard_middleware = GuardAdapter(guard) if guard is not None else None

    @property
    def source(self) -> str:
        return self._source

    @property
    def event(self) -> str:
        return self._event

    @property
    def target(self) -> str:
        return self._target

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def middlewares(self) -> Tuple[Middleware, ...]:
        """Middlewares attached at construction."""
        return self._middlewares

    @property
    def guard(self) -> Optional[GuardPredicate]:
        return self._guard

    @property
    def guard_middleware(self) -> Optional[GuardAdapter]:
        """The guard predicate wrapped as a middleware, created once per transition."""
        return self._guard_middleware

    def matches(self, state_name: str, event_type: str) -> bool:
        """Return True if this transition leaves ``state_name`` on ``event_type``."""
        return self._source == state_name and self._event == event_type

    def __repr__(self) -> str:
        label = f"{self._name}: " if self._name else ""
        return f"Transition({label}{self._source} --{self._event}--> {self._target})"


class TransitionTable:
    """
    Ordered, read-only collection of transitions.

    Several entries may share a ``(source, event)`` pair; the first one in
    declaration order wins and the ambiguity is not reported.
    """

    def __init__(self, transitions: Iterable[Transition]) -> None:
        self._transitions: Tuple[Transition, ...] = tuple(transitions)

    def match(self, state_name: str, event_type: str) -> Optional[Transition]:
        """
        Return the first transition leaving ``state_name`` on ``event_type``.

        :param state_name: Name of the current state.
        :param event_type: Type of the received event.
        :return: The matching transition, or None.
        """
        for transition in self._transitions:
            if transition.matches(state_name, event_type):
                return transition
        return None

    def state_names(self) -> Iterator[str]:
        """Yield every source and target name referenced by the table, in order."""
        for transition in self._transitions:
            yield transition.source
            yield transition.target

    def as_tuple(self) -> Tuple[Transition, ...]:
        return self._transitions

    def __iter__(self) -> Iterator[Transition]:
        return iter(self._transitions)

    def __len__(self) -> int:
        return len(self._transitions)
