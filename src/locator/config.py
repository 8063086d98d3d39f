"""Registry settings.

One frozen Settings value drives a whole registry tree: the layers it
is built against and the middleware its actions run through.
"""

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from locator.layers import Layer

if TYPE_CHECKING:
    from locator.middleware import Middleware


def _split(value: str) -> frozenset[Layer]:
    return frozenset(part.strip() for part in value.split(",") if part.strip())


def _as_layers(value: Layer | Iterable[Layer]) -> frozenset[Layer]:
    if isinstance(value, str):
        return frozenset({value})
    return frozenset(value)


@dataclass(frozen=True, slots=True)
class Settings:
    """Layer and middleware settings. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        settings = Settings(active_layers=frozenset({"dev"}), root=debug_logger)
    """

    # Layers considered active when registries are built
    active_layers: frozenset[Layer] = frozenset()

    # Allow-list of layers that may be active at all (empty = no restriction)
    layer_mask: frozenset[Layer] = frozenset()

    # Outermost middleware wrapped around every action run
    root: "Middleware | None" = None

    # Extra middleware applied inside root, outermost first
    middleware: tuple["Middleware", ...] = ()

    def __post_init__(self) -> None:
        # Accept a single layer name or any iterable of names
        object.__setattr__(self, "active_layers", _as_layers(self.active_layers))
        object.__setattr__(self, "layer_mask", _as_layers(self.layer_mask))
        if not isinstance(self.middleware, tuple):
            object.__setattr__(self, "middleware", tuple(self.middleware))

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        prefix: str = "LOCATOR_",
    ) -> "Settings":
        """Load layer settings from environment variables.

        Reads ``LOCATOR_ACTIVE_LAYERS`` and ``LOCATOR_LAYER_MASK`` as
        comma-separated layer names. Middleware cannot come from the
        environment; add it with ``dataclasses.replace``.
        """
        env = os.environ if environ is None else environ
        return cls(
            active_layers=_split(env.get(f"{prefix}ACTIVE_LAYERS", "")),
            layer_mask=_split(env.get(f"{prefix}LAYER_MASK", "")),
        )

    def with_layers(self, layers: Layer | Iterable[Layer]) -> "Settings":
        """Return a copy with *layers* as the active layers."""
        return replace(self, active_layers=_as_layers(layers))

    def is_active(self, layer: Layer) -> bool:
        """Whether *layer* is active and permitted by the mask."""
        return layer in self.active_layers and (not self.layer_mask or layer in self.layer_mask)
