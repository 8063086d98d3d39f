"""Address registries — the per-domain table of address -> action.

Actions are registered on a builder during setup and compiled into an
immutable ``AddressRegistry`` by ``build()``. Registrations whose layer
condition is not enabled under the build settings are left out.

Usage::

    player = AddressRegistryBuilder()

    @player.action("update")
    def update(state):
        record, name = state
        return {**record, "name": name}

    player.register("debug", dump_state, layers=Not("prod"))

    registry = player.build(settings)
    registry.locate("player", "update")   # Ok(Action(update))
"""

from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from locator._internal.entries import PendingEntry, check_key, select_entries
from locator.actions import Action
from locator.config import Settings
from locator.errors import ActionNotFound, ConfigurationError
from locator.layers import LayerCondition, validate_condition
from locator.result import Err, Ok

type LocateResult = Ok[Action] | Err


class AddressRegistry:
    """An immutable address -> action table for one domain.

    The registry does not know its own domain name; ``locate()`` takes it
    so misses can be reported with the full location.
    """

    __slots__ = ("_actions", "_layers", "excluded", "name")

    def __init__(
        self,
        actions: Mapping[str, Action],
        *,
        layers: LayerCondition = None,
        excluded: tuple[str, ...] = (),
        name: str | None = None,
    ) -> None:
        self._actions: Mapping[str, Action] = MappingProxyType(dict(actions))
        self._layers: LayerCondition = validate_condition(layers)
        self.excluded = excluded
        self.name = name

    def locate(self, domain: str, address: str) -> LocateResult:
        """Return ``Ok(action)`` for *address*, or ``Err(ActionNotFound)``."""
        found = self._actions.get(address)
        if found is None:
            return Err(ActionNotFound(domain, address))
        return Ok(found)

    def active_layers(self) -> LayerCondition:
        """The condition declared on the registry itself, or ``None``."""
        return self._layers

    @property
    def actions(self) -> Mapping[str, Action]:
        """Read-only view of the address -> action table."""
        return self._actions

    @property
    def addresses(self) -> list[str]:
        return sorted(self._actions)

    def __contains__(self, address: object) -> bool:
        return address in self._actions

    def __iter__(self) -> Iterator[str]:
        return iter(self._actions)

    def __len__(self) -> int:
        return len(self._actions)

    def __repr__(self) -> str:
        label = self.name or "AddressRegistry"
        return f"<{label} addresses={self.addresses!r}>"


class AddressRegistryBuilder:
    """Collects action registrations until ``build()``.

    Registration is closed once the builder has built a registry.
    Building again with other settings is allowed and yields an
    independent registry.
    """

    __slots__ = ("_built", "_layers", "_pending", "name")

    def __init__(self, *, layers: LayerCondition = None, name: str | None = None) -> None:
        self._pending: list[PendingEntry[Action]] = []
        self._layers: LayerCondition = validate_condition(layers)
        self._built = False
        self.name = name

    def declare_layers(self, condition: LayerCondition) -> None:
        """Set the layers the built registry will report from ``active_layers()``."""
        self._check_not_built()
        self._layers = validate_condition(condition)

    def register(self, address: str, action: Action, *, layers: LayerCondition = None) -> Action:
        """Register *action* at *address*.

        *layers* overrides the action's own condition for this
        registration only.
        """
        self._check_not_built()
        check_key(address, "Address")
        if not isinstance(action, Action):
            msg = (
                f"Cannot register {action!r} at {address!r}: expected an Action. "
                "Wrap plain functions with locator.action() or use @builder.action()."
            )
            raise ConfigurationError(msg)
        self._pending.append(PendingEntry(address, action, validate_condition(layers)))
        return action

    def action(
        self,
        address: str,
        *,
        layers: LayerCondition = None,
        settings: Settings | None = None,
        name: str | None = None,
    ) -> Callable[[Callable[[Any], Any] | Action], Action]:
        """Register a handler at *address* via decorator.

        Plain functions are wrapped in an ``Action`` declared with
        *layers*; an existing ``Action`` is registered as-is with
        *layers* as the explicit condition.
        """

        def decorator(func: Callable[[Any], Any] | Action) -> Action:
            if isinstance(func, Action):
                return self.register(address, func, layers=layers)
            return self.register(
                address, Action(func, layers=layers, settings=settings, name=name)
            )

        return decorator

    def build(self, settings: Settings | None = None, *, name: str | None = None) -> AddressRegistry:
        """Compile the pending registrations into an ``AddressRegistry``."""
        settings = settings or Settings()
        name = name or self.name
        self._built = True
        actions, excluded = select_entries(
            self._pending,
            settings,
            lambda action: action.active_layers(),
            owner=name or "AddressRegistry",
        )
        return AddressRegistry(actions, layers=self._layers, excluded=excluded, name=name)

    def active_layers(self) -> LayerCondition:
        return self._layers

    def _check_not_built(self) -> None:
        if self._built:
            msg = (
                "Cannot register on an address registry after it has been built. "
                "Declare every action before calling build()."
            )
            raise RuntimeError(msg)
