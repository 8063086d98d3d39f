"""Locator exception hierarchy and lookup-miss values.

Lookup misses are not exceptions: ``locate()`` returns them inside an
``Err`` so callers branch on the result. Exceptions are reserved for
programming errors made while declaring registries.
"""

from dataclasses import dataclass


class LocatorError(Exception):
    """Base for all locator-specific errors."""


class ConfigurationError(LocatorError):
    """Raised when a registration is invalid.

    Typically raised while declaring entries on a builder, before
    anything has been built.
    """


@dataclass(frozen=True, slots=True)
class DomainNotFound:
    """The location's domain is not registered on the locator."""

    domain: str
    address: str

    @property
    def message(self) -> str:
        return f"Domain not found! {self.domain}:{self.address}"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class ActionNotFound:
    """The domain exists but has no action at the address."""

    domain: str
    address: str

    @property
    def message(self) -> str:
        return f"No action found! {self.domain}:{self.address}"

    def __str__(self) -> str:
        return self.message


type LocateFailure = DomainNotFound | ActionNotFound


class LookupFailed(LocatorError):  # noqa: N818
    """Raised by ``Err.unwrap()`` when a failed lookup is forced.

    The original failure value is available as ``.failure``.
    """

    def __init__(self, failure: LocateFailure) -> None:
        super().__init__(failure.message)
        self.failure = failure
