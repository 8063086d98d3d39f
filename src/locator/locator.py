"""The locator — top-level table of domain -> address registry.

Domains are registered on a ``LocatorBuilder`` during setup and compiled
into an immutable ``Locator`` by ``build()``, using the same layer
filtering as address registries: an explicit condition given with the
domain, else the registry's own ``active_layers()``.

Usage::

    app = LocatorBuilder()
    app.domain("player", player)              # an AddressRegistry or its builder
    app.domain("admin", admin, layers=Not("prod"))

    locator = app.build(Settings.from_env())

    match locator.locate("player", "update"):
        case Ok(action):
            action.run(state)
        case Err(failure):
            print(failure.message)
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from locator._internal.entries import PendingEntry, check_key, select_entries
from locator.actions import Action
from locator.config import Settings
from locator.errors import ActionNotFound, ConfigurationError, DomainNotFound
from locator.layers import LayerCondition, validate_condition
from locator.protocol import Locatable
from locator.registry import AddressRegistry, AddressRegistryBuilder, LocateResult
from locator.result import Err


class Locator:
    """An immutable domain -> registry table.

    Thread safety:
        A built locator holds only read-only mappings and is never
        mutated, so ``locate()`` is safe from any number of threads.
    """

    __slots__ = ("_domains", "excluded", "settings")

    def __init__(
        self,
        domains: Mapping[str, Locatable],
        *,
        settings: Settings | None = None,
        excluded: tuple[str, ...] = (),
    ) -> None:
        self._domains: Mapping[str, Locatable] = MappingProxyType(dict(domains))
        self.settings: Settings = settings or Settings()
        self.excluded = excluded

    def locate(self, domain: str, address: str) -> LocateResult:
        """Find the action registered at ``(domain, address)``.

        Returns ``Ok(action)``, ``Err(DomainNotFound)`` when the domain is
        unknown, or ``Err(ActionNotFound)`` when the domain has no action
        at *address*. Never raises for a miss.
        """
        registry = self._domains.get(domain)
        if registry is None:
            return Err(DomainNotFound(domain, address))
        result = registry.locate(domain, address)
        if isinstance(result, Err):
            return Err(ActionNotFound(domain, address))
        return result

    @property
    def domains(self) -> Mapping[str, Locatable]:
        """Read-only view of the domain -> registry table."""
        return self._domains

    @property
    def locations(self) -> list[tuple[str, str, Action]]:
        """Every reachable ``(domain, address, action)``, sorted by location.

        Only registries exposing an ``actions`` mapping can be listed;
        custom ``Locatable`` domains are skipped.
        """
        rows: list[tuple[str, str, Action]] = []
        for domain, registry in self._domains.items():
            actions = getattr(registry, "actions", None)
            if actions is None:
                continue
            rows.extend((domain, address, act) for address, act in actions.items())
        return sorted(rows, key=lambda row: (row[0], row[1]))

    def __contains__(self, domain: object) -> bool:
        return domain in self._domains

    def __iter__(self) -> Iterator[str]:
        return iter(self._domains)

    def __len__(self) -> int:
        return len(self._domains)

    def __repr__(self) -> str:
        return f"<Locator domains={sorted(self._domains)!r}>"


class LocatorBuilder:
    """Collects domain registrations until ``build()``.

    A domain may be given as a built ``AddressRegistry``, any other
    ``Locatable``, or an ``AddressRegistryBuilder``; builders are built
    with the locator's settings, so one settings object drives the whole
    tree.
    """

    __slots__ = ("_built", "_pending")

    def __init__(self) -> None:
        self._pending: list[PendingEntry[Locatable | AddressRegistryBuilder]] = []
        self._built = False

    def domain(
        self,
        domain: str,
        registry: Locatable | AddressRegistryBuilder,
        *,
        layers: LayerCondition = None,
    ) -> None:
        """Register *registry* as *domain*.

        *layers* overrides the registry's own condition for this
        registration only.
        """
        self._check_not_built()
        check_key(domain, "Domain")
        if not isinstance(registry, (AddressRegistry, AddressRegistryBuilder, Locatable)):
            msg = (
                f"Cannot register {registry!r} as domain {domain!r}: expected an "
                "AddressRegistry or an object with locate() and active_layers()."
            )
            raise ConfigurationError(msg)
        self._pending.append(PendingEntry(domain, registry, validate_condition(layers)))

    def build(self, settings: Settings | None = None) -> Locator:
        """Compile the pending domains into a ``Locator``."""
        settings = settings or Settings()
        self._built = True
        selected, excluded = select_entries(
            self._pending,
            settings,
            lambda registry: registry.active_layers(),
            owner="Locator",
        )
        domains: dict[str, Locatable] = {}
        for domain, registry in selected.items():
            if isinstance(registry, AddressRegistryBuilder):
                domains[domain] = registry.build(settings, name=registry.name or domain)
            else:
                domains[domain] = registry
        return Locator(domains, settings=settings, excluded=excluded)

    def _check_not_built(self) -> None:
        if self._built:
            msg = (
                "Cannot register domains after the locator has been built. "
                "Declare every domain before calling build()."
            )
            raise RuntimeError(msg)
