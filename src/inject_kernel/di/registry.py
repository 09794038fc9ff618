from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Any, Dict, Protocol

from .errors import DuplicateTypeError
from .inject import Injection, invoke

"""
──────────────────────────────────────────────────────────────────────────────
Type-keyed Dependency Registry
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Hold exactly one long-lived value per exact type and call functions
    with those values as arguments.

APIs:
    - new(*values) → Registry          (raises DuplicateTypeError)
    - Registry.inject(fn) → Injection  (value, error)
    - must(injection) → value          (raises the error, if any)

Rules:
    - Type identity is type(value): A(int) and int are different keys
    - The registry never changes after construction
    - Built once at startup, then shared freely (read-only)

Usage:
    registry = new(engine, template, logger)
    handler = must(registry.inject(home))
"""

logger = logging.getLogger(__name__)


class Injector(Protocol):
    """Anything that can call a function with injected arguments."""

    def inject(self, fn: Any) -> Injection:
        ...


class Registry:
    """Immutable mapping of exact type → value, used to call functions."""

    __slots__ = ("_values",)

    def __init__(self, *values: Any):
        needle: Dict[type, Any] = {}
        for value in values:
            typ = type(value)
            if typ in needle:
                raise DuplicateTypeError(needle[typ], value)
            needle[typ] = value
        object.__setattr__(self, "_values", MappingProxyType(needle))
        logger.debug("registry built with %d value(s)", len(needle))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Registry is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Registry is immutable")

    def __repr__(self) -> str:
        names = ", ".join(t.__qualname__ for t in self._values)
        return f"Registry({names})"

    def inject(self, fn: Any) -> Injection:
        """
        Call fn with registered values matched to its parameter annotations.

        fn may take any number of parameters but returns one value,
        optionally paired with an error: `-> tuple[T, Exception | None]`.
        """
        return invoke(self._values, fn)

    def call(self, fn: Any) -> Any:
        """inject() + must(): return fn's value or raise."""
        return must(self.inject(fn))


def new(*values: Any) -> Registry:
    """Build a Registry; there can only be one value of a given type."""
    return Registry(*values)


def must(injection: Injection) -> Any:
    """Unwrap an Injection, raising its error if there was one."""
    value, error = injection
    if error is not None:
        raise error
    return value
