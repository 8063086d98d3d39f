"""Locator — route application logic through layered (domain, address) locations.

Actions are registered to addresses inside domains. Registrations can be
tagged with layers, so environment-specific behavior is switched in and
out once, when the locator is built, without touching callers.

Basic usage::

    from locator import AddressRegistryBuilder, LocatorBuilder, Not, Settings

    player = AddressRegistryBuilder()

    @player.action("update")
    def update(state):
        record, name = state
        return {**record, "name": name}

    app = LocatorBuilder()
    app.domain("player", player)
    locator = app.build(Settings(active_layers={"dev"}))

    locator.locate("player", "update").map(lambda a: a.run(({"name": "Meep"}, "Sheep")))
    # Ok(value={'name': 'Sheep'})
"""

__version__ = "0.1.0"
__all__ = [
    "Action",
    "ActionNotFound",
    "AddressRegistry",
    "AddressRegistryBuilder",
    "ConfigurationError",
    "DomainNotFound",
    "Err",
    "Locatable",
    "Locator",
    "LocatorBuilder",
    "LocatorError",
    "LookupFailed",
    "Middleware",
    "Next",
    "Not",
    "Ok",
    "Settings",
    "action",
    "enabled",
    "not_",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import locator`` fast while providing a clean top-level API.
    """
    if name in ("Action", "action"):
        from locator import actions as _actions

        return getattr(_actions, name)

    if name in ("AddressRegistry", "AddressRegistryBuilder"):
        from locator import registry as _registry

        return getattr(_registry, name)

    if name in ("Locator", "LocatorBuilder"):
        from locator import locator as _locator

        return getattr(_locator, name)

    if name == "Settings":
        from locator.config import Settings

        return Settings

    if name in ("Not", "enabled", "not_"):
        from locator import layers as _layers

        return getattr(_layers, name)

    if name in ("Ok", "Err"):
        from locator import result as _result

        return getattr(_result, name)

    if name in ("Middleware", "Next"):
        from locator import middleware as _mw

        return getattr(_mw, name)

    if name == "Locatable":
        from locator.protocol import Locatable

        return Locatable

    if name in (
        "ActionNotFound",
        "ConfigurationError",
        "DomainNotFound",
        "LocatorError",
        "LookupFailed",
    ):
        from locator import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
