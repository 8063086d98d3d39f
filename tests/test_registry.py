"""Tests for locator.registry — address registries and their builder."""

import logging
from typing import Any

import pytest

from locator.actions import Action
from locator.config import Settings
from locator.errors import ActionNotFound, ConfigurationError
from locator.layers import Not
from locator.registry import AddressRegistry, AddressRegistryBuilder
from locator.result import Err, Ok

DEV = Settings(active_layers=frozenset({"dev"}))
PROD = Settings(active_layers=frozenset({"prod"}))


def _noop(state: Any) -> Any:
    return state


def _action(name: str, layers: Any = None) -> Action:
    return Action(_noop, name=name, layers=layers)


class TestLocate:
    def test_found(self) -> None:
        find = _action("find")
        builder = AddressRegistryBuilder()
        builder.register("find", find)
        registry = builder.build(DEV)

        result = registry.locate("items", "find")
        assert result == Ok(find)
        assert result.unwrap() is find

    def test_missing_address(self) -> None:
        registry = AddressRegistryBuilder().build(DEV)

        result = registry.locate("player", "new")
        assert result == Err(ActionNotFound("player", "new"))
        assert result.message == "No action found! player:new"

    def test_domain_only_used_for_message(self) -> None:
        find = _action("find")
        builder = AddressRegistryBuilder()
        builder.register("find", find)
        registry = builder.build()

        assert registry.locate("anything", "find") == Ok(find)
        assert registry.locate("other", "find") == Ok(find)

    def test_repeated_calls_equal(self) -> None:
        builder = AddressRegistryBuilder()
        builder.register("find", _action("find"))
        registry = builder.build()

        assert registry.locate("d", "find") == registry.locate("d", "find")
        assert registry.locate("d", "nope") == registry.locate("d", "nope")


class TestLayerFiltering:
    def test_unconditional_always_included(self) -> None:
        builder = AddressRegistryBuilder()
        builder.register("find", _action("find"))

        assert "find" in builder.build(DEV)
        assert "find" in builder.build(PROD)
        assert "find" in builder.build(Settings())

    def test_action_layers_used_by_default(self) -> None:
        builder = AddressRegistryBuilder()
        builder.register("debug", _action("debug", layers=Not("prod")))

        assert "debug" in builder.build(DEV)
        assert "debug" not in builder.build(PROD)

    def test_explicit_layers_override_action(self) -> None:
        builder = AddressRegistryBuilder()
        builder.register("debug", _action("debug", layers=Not("prod")), layers="prod")

        assert "debug" not in builder.build(DEV)
        assert "debug" in builder.build(PROD)

    def test_list_is_or(self) -> None:
        builder = AddressRegistryBuilder()
        builder.register("seed", _action("seed"), layers=["dev", "test"])

        assert "seed" in builder.build(DEV)
        assert "seed" in builder.build(Settings(active_layers=frozenset({"test"})))
        assert "seed" not in builder.build(PROD)

    def test_mask(self) -> None:
        builder = AddressRegistryBuilder()
        builder.register("seed", _action("seed"), layers="dev")

        masked = Settings(active_layers=frozenset({"dev"}), layer_mask=frozenset({"prod"}))
        assert "seed" not in builder.build(masked)

    def test_excluded_recorded(self) -> None:
        builder = AddressRegistryBuilder()
        builder.register("a", _action("a"), layers="prod")
        builder.register("b", _action("b"))
        builder.register("c", _action("c"), layers="test")

        registry = builder.build(DEV)
        assert registry.excluded == ("a", "c")
        assert registry.addresses == ["b"]

    def test_exclusion_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        builder = AddressRegistryBuilder(name="player")
        builder.register("reset", _action("reset"), layers="test")

        with caplog.at_level(logging.DEBUG, logger="locator.registry"):
            builder.build(DEV)

        assert "player: excluding 'reset'" in caplog.text

    def test_filtering_never_raises(self) -> None:
        builder = AddressRegistryBuilder()
        builder.register("x", _action("x"), layers=["nowhere", Not(["dev"])])

        assert len(builder.build(DEV)) == 0

    def test_mutating_registration_list_does_not_change_later_builds(self) -> None:
        layers = ["prod"]
        builder = AddressRegistryBuilder()
        builder.register("send", _action("send"), layers=layers)
        layers.append("dev")

        assert "send" not in builder.build(DEV)
        assert "send" in builder.build(PROD)

    def test_mutating_action_list_does_not_change_later_builds(self) -> None:
        layers = ["prod"]
        builder = AddressRegistryBuilder()
        builder.register("send", _action("send", layers))
        layers.append("dev")

        assert "send" not in builder.build(DEV)


class TestDuplicates:
    def test_last_registration_wins(self) -> None:
        first, second = _action("first"), _action("second")
        builder = AddressRegistryBuilder()
        builder.register("send", first)
        builder.register("send", second)

        assert builder.build().locate("mail", "send") == Ok(second)

    def test_excluded_duplicate_does_not_override(self) -> None:
        real, fake = _action("real"), _action("fake")
        builder = AddressRegistryBuilder()
        builder.register("send", real, layers="prod")
        builder.register("send", fake, layers=Not("prod"))

        assert builder.build(PROD).locate("mail", "send") == Ok(real)
        assert builder.build(DEV).locate("mail", "send") == Ok(fake)


class TestRegistryLayers:
    def test_default_none(self) -> None:
        assert AddressRegistryBuilder().build().active_layers() is None

    def test_constructor_layers(self) -> None:
        registry = AddressRegistryBuilder(layers=Not("prod")).build()
        assert registry.active_layers() == Not("prod")

    def test_declare_layers(self) -> None:
        builder = AddressRegistryBuilder()
        builder.declare_layers(["dev", "test"])

        assert builder.active_layers() == ("dev", "test")
        assert builder.build().active_layers() == ("dev", "test")

    def test_declared_list_is_copied(self) -> None:
        layers = ["dev"]
        builder = AddressRegistryBuilder(layers=layers)
        registry = builder.build()
        layers.append("prod")

        assert builder.active_layers() == ("dev",)
        assert registry.active_layers() == ("dev",)

    def test_declared_layers_do_not_filter_entries(self) -> None:
        builder = AddressRegistryBuilder(layers="prod")
        builder.register("find", _action("find"))

        assert "find" in builder.build(DEV)


class TestBuilder:
    def test_decorator_wraps_function(self) -> None:
        builder = AddressRegistryBuilder()

        @builder.action("update", layers="dev")
        def update(state: tuple[dict[str, str], str]) -> dict[str, str]:
            player, name = state
            return {**player, "name": name}

        assert isinstance(update, Action)
        assert update.active_layers() == "dev"
        located = builder.build(DEV).locate("player", "update").unwrap()
        assert located.run(({"name": "Meep"}, "Sheep")) == {"name": "Sheep"}

    def test_decorator_accepts_action(self) -> None:
        shared = _action("shared", layers="prod")
        builder = AddressRegistryBuilder()
        builder.action("shared", layers="dev")(shared)

        assert builder.build(DEV).locate("d", "shared") == Ok(shared)

    def test_action_shared_between_registries(self) -> None:
        shared = _action("shared")
        a, b = AddressRegistryBuilder(), AddressRegistryBuilder()
        a.register("x", shared)
        b.register("y", shared)

        assert a.build().locate("a", "x").unwrap() is b.build().locate("b", "y").unwrap()

    def test_rejects_plain_function(self) -> None:
        with pytest.raises(ConfigurationError, match="expected an Action"):
            AddressRegistryBuilder().register("find", _noop)  # type: ignore[arg-type]

    @pytest.mark.parametrize("address", ["", None, 3])
    def test_rejects_bad_address(self, address: Any) -> None:
        with pytest.raises(ConfigurationError, match="Address must be a non-empty string"):
            AddressRegistryBuilder().register(address, _action("x"))

    def test_rejects_bad_layers(self) -> None:
        with pytest.raises(ConfigurationError):
            AddressRegistryBuilder().register("x", _action("x"), layers=1.5)  # type: ignore[arg-type]

    def test_register_after_build_fails(self) -> None:
        builder = AddressRegistryBuilder()
        builder.build()

        with pytest.raises(RuntimeError, match="after it has been built"):
            builder.register("late", _action("late"))
        with pytest.raises(RuntimeError):
            builder.declare_layers("dev")

    def test_rebuild_with_other_settings(self) -> None:
        builder = AddressRegistryBuilder()
        builder.register("debug", _action("debug"), layers="dev")

        dev, prod = builder.build(DEV), builder.build(PROD)
        assert dev is not prod
        assert "debug" in dev
        assert "debug" not in prod

    def test_build_is_pure(self) -> None:
        builder = AddressRegistryBuilder()
        builder.register("a", _action("a"))
        builder.register("b", _action("b"), layers="prod")

        first, second = builder.build(DEV), builder.build(DEV)
        assert dict(first.actions) == dict(second.actions)
        assert first.excluded == second.excluded


class TestAddressRegistry:
    def test_actions_read_only(self) -> None:
        registry = AddressRegistry({"find": _action("find")})

        with pytest.raises(TypeError):
            registry.actions["other"] = _action("other")  # type: ignore[index]

    def test_source_mapping_copied(self) -> None:
        source = {"find": _action("find")}
        registry = AddressRegistry(source)
        source["late"] = _action("late")

        assert "late" not in registry

    def test_introspection(self) -> None:
        registry = AddressRegistry({"b": _action("b"), "a": _action("a")}, name="items")

        assert registry.addresses == ["a", "b"]
        assert len(registry) == 2
        assert set(registry) == {"a", "b"}
        assert repr(registry) == "<items addresses=['a', 'b']>"
