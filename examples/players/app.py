"""Players — one domain, a debug middleware outside production.

Demonstrates the basic flow:
1. Actions registered by address on a domain registry
2. A root middleware gated on layers (logs everywhere but prod)
3. Lookup misses returned as values, not raised

Run:
    LOCATOR_ACTIVE_LAYERS=dev python app.py
"""

import logging
from typing import Any

from locator import AddressRegistryBuilder, Err, LocatorBuilder, Next, Not, Ok, Settings

log = logging.getLogger("players")


class Debugger:
    """Log every action's input and response, except in production."""

    layers = Not("prod")

    def __call__(self, state: Any, next: Next) -> Any:
        log.info("input: %r", state)
        result = next(state)
        log.info("response: %r", result)
        return result


def create_locator(settings: Settings | None = None):
    """Declare the player domain and build it with *settings*."""
    base = settings or Settings.from_env()
    settings = Settings(
        active_layers=base.active_layers,
        layer_mask=base.layer_mask or frozenset({"prod", "dev", "test"}),
        root=Debugger(),
    )

    player = AddressRegistryBuilder()

    @player.action("update", settings=settings)
    def update(state: tuple[dict[str, Any], str]) -> dict[str, Any]:
        record, name = state
        return {**record, "name": name}

    @player.action("new", settings=settings, layers=["dev", "test"])
    def new(name: str) -> dict[str, Any]:
        return {"id": 1, "name": name}

    app = LocatorBuilder()
    app.domain("player", player)
    return app.build(settings)


locator = create_locator

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    players = create_locator()
    for domain, address, payload in [
        ("player", "update", ({"name": "Meep"}, "Sheep")),
        ("player", "new", "Lionel"),
        ("items", "find", None),
    ]:
        match players.locate(domain, address).map(lambda action: action.run(payload)):
            case Ok(value):
                print(f"{domain}:{address} -> {value!r}")
            case Err(failure):
                print(failure.message)
