# fsmware/core/middleware.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Middleware chain execution.

A middleware is called as ``middleware(next, event, current_state, next_state)``
and decides the fate of one transition attempt by calling ``next``:

- ``next()`` or ``next(value)`` with any value other than ``False`` passes
  control downstream: to the next middleware, or to the completion action
  after the last one.
- ``next(False, detail)`` rejects the attempt. The reject callback receives
  the rejecting middleware and ``detail``; nothing downstream runs.

Calling ``next`` starts the downstream chain at once and runs it until it
either finishes or first suspends, the same way a plain function call would.
The call returns an awaitable continuation; awaiting it (or returning it)
waits for the rest of the chain, which gives every middleware an "around"
hook::

    async def timing(next, event, current_state, next_state):
        started = time.monotonic()
        await next()
        log(time.monotonic() - started)

Plain functions work too. When nothing downstream suspends, code after
``next()`` in a plain function already sees the committed state::

    def audit(next, event, current_state, next_state):
        next()
        log(machine.current_state)

A continuation that nobody awaited is finished as soon as its middleware
returns.
"""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Coroutine, List, Optional, Sequence

from fsmware.core.errors import GuardFaultError, TransitionError
from fsmware.core.types import GuardPredicate, Middleware, Reject

Step = Callable[[Any, Any, Any], Awaitable[None]]


def middleware_name(middleware: Any) -> str:
    """Best-effort readable name for a middleware, for logs and error messages."""
    return getattr(middleware, "__qualname__", None) or repr(middleware)


class _Continuation:
    """
    Awaitable handed out by ``next``.

    The downstream coroutine is stepped once on construction, so it runs
    synchronously up to its first suspension. Exceptions raised before that
    point propagate from the ``next`` call. If it suspended, awaiting the
    continuation re-yields the pending signal to the running task and drives
    the coroutine to completion.
    """

    __slots__ = ("_coro", "_signal", "done", "awaited")

    def __init__(self, coro: Coroutine[Any, Any, None]) -> None:
        self._coro = coro
        self._signal: Any = None
        self.done = False
        self.awaited = False
        try:
            self._signal = coro.send(None)
        except StopIteration:
            self.done = True

    def __await__(self):
        self.awaited = True
        coro = self._coro
        while not self.done:
            try:
                sent = yield self._signal
            except GeneratorExit:
                coro.close()
                raise
            except BaseException as exc:
                resume, arg = coro.throw, exc
            else:
                resume, arg = coro.send, sent
            try:
                self._signal = resume(arg)
            except StopIteration:
                self.done = True


def _link(middleware: Middleware, downstream: Step, reject: Reject) -> Step:
    """
    Wrap one middleware around an already-built downstream step.
    """

    async def step(event: Any, current_state: Any, next_state: Any) -> None:
        pending: List[_Continuation] = []

        def next_(value: Any = None, detail: Any = None) -> _Continuation:
            async def run() -> None:
                if value is False:
                    reject(middleware, detail)
                else:
                    await downstream(event, current_state, next_state)

            continuation = _Continuation(run())
            pending.append(continuation)
            return continuation

        try:
            result = middleware(next_, event, current_state, next_state)
            if inspect.isawaitable(result):
                await result
            for continuation in pending:
                if not continuation.awaited:
                    await continuation
        except TransitionError:
            # Raised further down the chain; already attributed.
            raise
        except Exception as exc:
            raise GuardFaultError(
                f"Middleware {middleware_name(middleware)} raised: {exc!r}",
                middleware=middleware,
                event=event,
            ) from exc

    return step


def build_chain(middlewares: Sequence[Middleware], complete: Callable[[], None], reject: Reject) -> Step:
    """
    Compose middlewares into a single async step, right to left.

    :param middlewares: Middlewares in execution order. Must not be empty.
    :param complete: Called once if every middleware passes control on.
    :param reject: Called with ``(middleware, detail)`` by a rejecting middleware.
    :return: ``async step(event, current_state, next_state)``.
    """

    async def terminal(event: Any, current_state: Any, next_state: Any) -> None:
        complete()

    step: Step = terminal
    for middleware in reversed(middlewares):
        step = _link(middleware, step, reject)
    return step


class GuardAdapter:
    """
    Adapts a plain predicate ``guard(event) -> bool`` (or a coroutine function
    returning bool) to the middleware calling convention. A truthy result
    passes control on; a falsy one rejects with no detail.
    """

    def __init__(self, guard: GuardPredicate) -> None:
        self.guard = guard

    async def __call__(self, next: Callable[..., Awaitable[None]], event: Any, current_state: Any, next_state: Any) -> None:
        result: Optional[Any] = self.guard(event)
        if inspect.isawaitable(result):
            result = await result
        await next(bool(result))

    def __repr__(self) -> str:
        return f"GuardAdapter({middleware_name(self.guard)})"
