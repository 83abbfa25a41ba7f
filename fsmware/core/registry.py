# fsmware/core/registry.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from fsmware.core.states import State
from fsmware.core.types import Middleware

logger = logging.getLogger(__name__)


class StateRegistry:
    """
    Maps state names to states. A name can be in one of three conditions:

    - absent: never referenced, ``name not in registry``
    - placeholder: referenced by a transition but no state registered yet
    - resolved: a State has been registered or lazily created

    Placeholders are materialized on demand by ``resolve`` using the
    configured factory.
    """

    def __init__(self, state_factory: Callable[[str], State] = State) -> None:
        self._states: Dict[str, Optional[State]] = {}
        self._state_factory = state_factory

    def reference(self, name: str) -> None:
        """Record ``name`` as a placeholder unless it is already known."""
        self._states.setdefault(name, None)

    def register(self, state: State) -> None:
        """Insert or replace the state stored under ``state.name``."""
        self._states[state.name] = state

    def get(self, name: str) -> Optional[State]:
        """Return the resolved state, or None for placeholders and absent names."""
        return self._states.get(name)

    def is_placeholder(self, name: str) -> bool:
        return name in self._states and self._states[name] is None

    def resolve(self, name: str) -> Optional[State]:
        """
        Return the state registered under ``name``, creating it from the
        factory if ``name`` is only a placeholder.

        :param name: State name to resolve.
        :return: The state, or None if the name was never referenced.
        """
        if name not in self._states:
            return None
        state = self._states[name]
        if state is None:
            state = self._state_factory(name)
            self._states[name] = state
            logger.debug(f"Materialized placeholder state '{name}'")
        return state

    def names(self) -> Iterator[str]:
        return iter(self._states)

    def __contains__(self, name: object) -> bool:
        return name in self._states

    def __len__(self) -> int:
        return len(self._states)


class MiddlewareRegistry:
    """
    Ordered middleware lists keyed by transition name. Additions append;
    nothing is ever replaced or removed.
    """

    def __init__(self) -> None:
        self._by_transition: Dict[str, List[Middleware]] = {}

    def add(self, transition_name: str, *middlewares: Middleware) -> None:
        self._by_transition.setdefault(transition_name, []).extend(middlewares)

    def get(self, transition_name: Optional[str]) -> Tuple[Middleware, ...]:
        """Snapshot of the middlewares for ``transition_name``; empty if none."""
        if transition_name is None:
            return ()
        return tuple(self._by_transition.get(transition_name, ()))

    def __contains__(self, transition_name: object) -> bool:
        return transition_name in self._by_transition
