"""Actions — the units of behavior registered at a location.

An action wraps a handler callable. Registries only store and return
actions; they never call them. Applications run the action they located::

    @action(layers=Not("prod"))
    def seed_demo_data(state):
        ...

    locator.locate("admin", "seed").map(lambda a: a.run(state))

``run()`` passes the state through the enabled middleware of the
action's settings, then to the handler.
"""

from collections.abc import Callable
from typing import Any, overload

from locator.config import Settings
from locator.errors import ConfigurationError
from locator.layers import LayerCondition, validate_condition
from locator.middleware import Next, active_middleware, compose, compose_async


class Action:
    """A handler plus the layers it belongs to.

    Immutable after creation. The middleware chain is resolved once,
    from the settings given here, so ``run()`` does no layer checks.
    """

    __slots__ = ("_async_chain", "_chain", "_layers", "handler", "name", "settings")

    def __init__(
        self,
        handler: Callable[[Any], Any],
        *,
        layers: LayerCondition = None,
        settings: Settings | None = None,
        name: str | None = None,
    ) -> None:
        if not callable(handler):
            msg = f"Action handler must be callable, got {type(handler).__name__}"
            raise ConfigurationError(msg)
        self.handler = handler
        self.name: str = name or getattr(handler, "__qualname__", None) or repr(handler)
        self.settings: Settings = settings or Settings()
        self._layers: LayerCondition = validate_condition(layers)

        middleware = active_middleware(self.settings)
        self._chain: Next = compose(middleware, handler)
        self._async_chain: Next = compose_async(middleware, handler)

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_async_chain"):
            msg = f"Action {self.name!r} is immutable"
            raise AttributeError(msg)
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        msg = f"Action {self.name!r} is immutable"
        raise AttributeError(msg)

    def active_layers(self) -> LayerCondition:
        """The layer condition this action was declared with, or ``None``."""
        return self._layers

    def run(self, state: Any) -> Any:
        """Run the handler on *state* through the enabled middleware."""
        return self._chain(state)

    async def arun(self, state: Any) -> Any:
        """Async ``run()``: awaits handlers and middleware that return awaitables."""
        return await self._async_chain(state)

    def __call__(self, state: Any) -> Any:
        return self.run(state)

    def __repr__(self) -> str:
        if self._layers is None:
            return f"Action({self.name})"
        return f"Action({self.name}, layers={self._layers!r})"


@overload
def action(handler: Callable[[Any], Any], /) -> Action: ...


@overload
def action(
    *,
    layers: LayerCondition = None,
    settings: Settings | None = None,
    name: str | None = None,
) -> Callable[[Callable[[Any], Any]], Action]: ...


def action(
    handler: Callable[[Any], Any] | None = None,
    /,
    *,
    layers: LayerCondition = None,
    settings: Settings | None = None,
    name: str | None = None,
) -> Action | Callable[[Callable[[Any], Any]], Action]:
    """Turn a function into an ``Action``.

    Works bare or with options::

        @action
        def find(state): ...

        @action(layers=["dev", "test"], settings=settings)
        def reset(state): ...
    """
    if handler is not None:
        return Action(handler, layers=layers, settings=settings, name=name)

    def decorator(func: Callable[[Any], Any]) -> Action:
        return Action(func, layers=layers, settings=settings, name=name)

    return decorator
