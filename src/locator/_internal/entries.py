"""Pending registrations and the layer filter applied at build time.

Shared by ``AddressRegistryBuilder`` and ``LocatorBuilder``: both keep a
list of pending entries and resolve them against settings the same way.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from locator.config import Settings
from locator.errors import ConfigurationError
from locator.layers import LayerCondition, enabled

logger = logging.getLogger("locator.registry")


@dataclass(frozen=True, slots=True)
class PendingEntry[T]:
    """A registration waiting to be built."""

    key: str
    target: T
    # Explicit condition given at registration; None defers to the target
    layers: LayerCondition = None


def select_entries[T](
    pending: Iterable[PendingEntry[T]],
    settings: Settings,
    default_layers: Callable[[T], LayerCondition],
    *,
    owner: str,
) -> tuple[dict[str, T], tuple[str, ...]]:
    """Filter *pending* by layer and collect survivors by key.

    The effective condition of an entry is its explicit condition, or
    ``default_layers(target)`` when none was given. Entries whose
    condition is not enabled are dropped. When several surviving entries
    share a key, the last one registered wins.

    Returns the surviving mapping and the keys of excluded entries, in
    registration order.
    """
    selected: dict[str, T] = {}
    excluded: list[str] = []
    for entry in pending:
        condition = entry.layers if entry.layers is not None else default_layers(entry.target)
        if not enabled(settings.active_layers, settings.layer_mask, condition):
            logger.debug(
                "%s: excluding %r -> %r (layers %r not enabled by %s)",
                owner,
                entry.key,
                entry.target,
                condition,
                sorted(settings.active_layers),
            )
            excluded.append(entry.key)
            continue
        if entry.key in selected:
            logger.debug(
                "%s: %r -> %r overrides earlier %r",
                owner,
                entry.key,
                entry.target,
                selected[entry.key],
            )
        selected[entry.key] = entry.target
    return selected, tuple(excluded)


def check_key(key: object, kind: str) -> str:
    """Registration keys are non-empty strings."""
    if not isinstance(key, str) or not key:
        msg = f"{kind} must be a non-empty string, got {key!r}"
        raise ConfigurationError(msg)
    return key
