"""Structural protocols shared by actions, registries and locators.

``Layered`` is anything that can report a layer condition; it is a
typing aid for code that accepts actions, registries or middleware
alike. ``Locatable`` is anything that can resolve a ``(domain, address)``
location; ``LocatorBuilder.domain`` checks against it, so a locator
accepts custom address registries as domains without coupling to the
concrete type.
"""

from typing import Protocol, runtime_checkable

from locator.layers import LayerCondition
from locator.result import Err, Ok


@runtime_checkable
class Layered(Protocol):
    """An object declaring the layers it belongs to."""

    def active_layers(self) -> LayerCondition: ...


@runtime_checkable
class Locatable(Protocol):
    """A layered object that resolves locations to actions.

    ``domain`` is passed through for error messages only.
    """

    def active_layers(self) -> LayerCondition: ...
    def locate(self, domain: str, address: str) -> Ok | Err: ...
