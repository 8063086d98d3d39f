"""Invoke helpers — call sync or async callables uniformly.

Action handlers and middleware can be ``def`` or ``async def``. The
async run path calls both through this helper so the sync/async check
lives in exactly one place.

Usage::

    from locator._internal.invoke import invoke

    result = await invoke(handler, state)
"""

import inspect
from typing import Any


async def invoke(fn: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *fn* and await the result if it's awaitable."""
    result = fn(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
