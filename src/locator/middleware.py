"""Middleware protocol and chain composition for action runs.

A middleware is any callable matching::

    def my_mw(state, next: Next) -> Any: ...

No base class required. The chain checks the shape, not the lineage.
A middleware may declare a layer condition (an ``active_layers()``
method or a ``layers`` attribute); it is skipped when that condition is
not enabled under the action's settings::

    class Debugger:
        layers = Not("prod")

        def __call__(self, state, next):
            log.debug("input %r", state)
            result = next(state)
            log.debug("response %r", result)
            return result
"""

import logging
from collections.abc import Callable
from typing import Any, Protocol

from locator._internal.invoke import invoke
from locator.config import Settings
from locator.layers import enabled, layers_of

logger = logging.getLogger("locator.middleware")

# The next step in the chain: the inner middleware or the handler
type Next = Callable[[Any], Any]


class Middleware(Protocol):
    """Protocol for action middleware.

    Accepts both functions and callable objects::

        # Function middleware
        def timing(state, next):
            start = time.monotonic()
            result = next(state)
            log.info("took %.3fs", time.monotonic() - start)
            return result

        # Class middleware
        class Retry:
            def __call__(self, state, next): ...
    """

    def __call__(self, state: Any, next: Next) -> Any: ...


def active_middleware(settings: Settings) -> tuple[Middleware, ...]:
    """Return the middleware enabled under *settings*, outermost first."""
    candidates: list[Middleware] = []
    if settings.root is not None:
        candidates.append(settings.root)
    candidates.extend(settings.middleware)

    chain: list[Middleware] = []
    for mw in candidates:
        condition = layers_of(mw)
        if enabled(settings.active_layers, settings.layer_mask, condition):
            chain.append(mw)
        else:
            logger.debug("Skipping middleware %r: layers %r not enabled", mw, condition)
    return tuple(chain)


def compose(middleware: tuple[Middleware, ...], handler: Callable[[Any], Any]) -> Next:
    """Wrap *middleware* around *handler*, outermost first."""
    wrapped: Next = handler
    for mw in reversed(middleware):

        def step(state: Any, _mw: Middleware = mw, _next: Next = wrapped) -> Any:
            return _mw(state, _next)

        wrapped = step
    return wrapped


def compose_async(middleware: tuple[Middleware, ...], handler: Callable[[Any], Any]) -> Next:
    """Async variant of ``compose``.

    Each step awaits its middleware (or the handler) when it returns an
    awaitable, so sync and async callables can be mixed freely. Async
    middleware receive an async ``next``.
    """

    async def call_handler(state: Any) -> Any:
        return await invoke(handler, state)

    wrapped: Next = call_handler
    for mw in reversed(middleware):

        async def step(state: Any, _mw: Middleware = mw, _next: Next = wrapped) -> Any:
            return await invoke(_mw, state, _next)

        wrapped = step
    return wrapped
