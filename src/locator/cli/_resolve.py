"""Locator import resolution — resolves ``"module:attribute"`` strings.

Shared utility used by ``locator locations`` and ``locator locate`` to
find a locator from a user-supplied import string.
"""

import importlib
import sys

from locator.config import Settings
from locator.locator import Locator, LocatorBuilder


def resolve_locator(import_string: str, layers: str | None = None) -> Locator:
    """Resolve an import string to a built ``Locator``.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"locator"`` (e.g. ``"myapp"`` resolves to
    ``myapp.locator``).

    The attribute may be a built ``Locator``, a ``LocatorBuilder`` (built
    here with ``Settings.from_env()``), or a zero-argument factory
    returning either.

    Args:
        import_string: Dotted module path with optional ``:attribute``
            suffix (e.g. ``"myapp:locator"``, ``"myapp:create_locator"``).
        layers: Comma-separated active layers overriding the environment
            when a builder has to be built. An already-built locator keeps
            its own layers; a note is printed to stderr.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a locator or builder.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "locator"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    # Support factory functions - call them if they're not already a locator
    if callable(obj) and not isinstance(obj, (Locator, LocatorBuilder)):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, LocatorBuilder):
        settings = Settings.from_env()
        if layers is not None:
            settings = settings.with_layers(_split(layers))
        obj = obj.build(settings)
    elif layers is not None and isinstance(obj, Locator):
        print(
            f"Note: {import_string!r} is already built; --layers {layers!r} is ignored.",
            file=sys.stderr,
        )

    if not isinstance(obj, Locator):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a locator.Locator instance"
        raise TypeError(msg)

    return obj


def _split(layers: str) -> list[str]:
    return [part.strip() for part in layers.split(",") if part.strip()]
