# fsmware/core/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import asyncio
import inspect
from typing import TYPE_CHECKING, Any, List, Optional, Protocol, Set

if TYPE_CHECKING:
    from fsmware.core.machine import Rejection
    from fsmware.core.states import State


class HookProtocol(Protocol):
    """
    Shape of a lifecycle observer. Every method is optional; the manager
    only calls the ones a hook actually defines.
    """

    def on_enter(self, state: "State") -> None: ...

    def on_exit(self, state: "State") -> None: ...

    def on_reject(self, rejection: "Rejection") -> None: ...

    def on_error(self, error: Exception) -> None: ...


def fire_and_forget(result: Any, pending: Set["asyncio.Future[Any]"]) -> None:
    """
    Schedule ``result`` on the running loop if it is awaitable, without
    waiting for it. A reference is kept in ``pending`` until it finishes.
    """
    if not inspect.isawaitable(result):
        return
    future = asyncio.ensure_future(result)
    pending.add(future)
    future.add_done_callback(pending.discard)


class HookManager:
    """
    Manages the registration and execution of hooks that listen to machine
    lifecycle events (on_enter, on_exit, on_reject, on_error). Users can
    attach logging, monitoring, or custom side effects without altering
    core logic.

    Coroutine hook methods are scheduled, not awaited.
    """

    def __init__(self, hooks: Optional[List[Any]] = None) -> None:
        """
        Initialize with an optional list of hook objects.
        """
        self._hooks: List[Any] = list(hooks or [])
        self._pending: Set["asyncio.Future[Any]"] = set()

    def register_hook(self, hook: Any) -> None:
        """
        Add a new hook to the manager's list of hooks.

        :param hook: An object implementing some of the HookProtocol methods.
        """
        self._hooks.append(hook)

    @property
    def hooks(self) -> List[Any]:
        return list(self._hooks)

    def execute_on_enter(self, state: "State") -> None:
        self._invoke("on_enter", state)

    def execute_on_exit(self, state: "State") -> None:
        self._invoke("on_exit", state)

    def execute_on_reject(self, rejection: "Rejection") -> None:
        self._invoke("on_reject", rejection)

    def execute_on_error(self, error: Exception) -> None:
        self._invoke("on_error", error)

    def _invoke(self, method: str, arg: Any) -> None:
        for hook in self._hooks:
            if hasattr(hook, method):
                fire_and_forget(getattr(hook, method)(arg), self._pending)
