"""Layer conditions — boolean expressions over environment tags.

A layer is a plain string naming an environment or configuration facet
(``"prod"``, ``"dev"``, ``"test"``). Registrations carry an optional
condition over layers, evaluated once against the active layers when a
registry is built::

    None                  # unconditional
    "dev"                 # a single layer
    ["dev", "test"]       # any of these
    Not("prod")           # anything but prod
    [Not("prod"), "ci"]   # conditions nest
"""

from collections.abc import Set
from dataclasses import dataclass

from locator.errors import ConfigurationError

type Layer = str
# None means "unconditional"
type LayerCondition = (
    Layer | Not | list[LayerCondition] | tuple[LayerCondition, ...] | frozenset[Layer] | None
)


@dataclass(frozen=True, slots=True)
class Not:
    """Negation of a layer condition."""

    condition: LayerCondition

    def __repr__(self) -> str:
        return f"Not({self.condition!r})"


def not_(condition: LayerCondition) -> Not:
    """Negate *condition*. ``not_("prod")`` is enabled everywhere but prod."""
    return Not(condition)


def enabled(
    active_layers: Set[Layer],
    mask: Set[Layer],
    condition: LayerCondition,
) -> bool:
    """Evaluate *condition* against the active layers.

    A single layer is enabled when it is active and, if a mask is given,
    permitted by the mask. Collections are OR-ed; an empty collection is
    never enabled. ``None`` is always enabled.

    Never raises: a layer nobody activated simply evaluates to ``False``.
    """
    if condition is None:
        return True
    if isinstance(condition, str):
        return condition in active_layers and (not mask or condition in mask)
    if isinstance(condition, Not):
        return not enabled(active_layers, mask, condition.condition)
    if isinstance(condition, (list, tuple, set, frozenset)):
        return any(enabled(active_layers, mask, c) for c in condition)
    return False


def validate_condition(condition: object) -> LayerCondition:
    """Check that *condition* is well-formed and return an immutable copy.

    Called when a condition is declared, so mistakes surface at
    registration time rather than silently excluding an entry. Lists and
    sets come back as tuples (sets in a stable order) so a caller keeping
    the original cannot change a built registry.

    Raises ``ConfigurationError`` for anything that is not ``None``, a
    string, a ``Not``, or a collection of those.
    """
    if condition is None or isinstance(condition, str):
        return condition
    if isinstance(condition, Not):
        return Not(validate_condition(condition.condition))
    if isinstance(condition, (list, tuple, set, frozenset)):
        items = list(condition)
        if isinstance(condition, (set, frozenset)):
            items.sort(key=repr)
        normalized: list[LayerCondition] = []
        for item in items:
            if item is None:
                msg = "None is not allowed inside a layer list; omit the condition instead."
                raise ConfigurationError(msg)
            normalized.append(validate_condition(item))
        return tuple(normalized)
    msg = (
        f"Invalid layer condition {condition!r} ({type(condition).__name__}). "
        "Expected a layer name, a list of conditions, or Not(condition)."
    )
    raise ConfigurationError(msg)


def layers_of(obj: object) -> LayerCondition:
    """Return the layer condition declared by *obj*, or ``None``.

    Accepts anything exposing ``active_layers()``, or a plain
    ``layers`` attribute (handy for class-based middleware).
    """
    method = getattr(obj, "active_layers", None)
    if callable(method):
        return method()
    return getattr(obj, "layers", None)
