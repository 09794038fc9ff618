# inject_kernel/di/errors.py
"""
Injection failures
──────────────────────────────────────────────
• DuplicateTypeError is raised while building a Registry
• every other error is returned from Registry.inject() as Injection.error
• InvocationError wraps an error the injected callable returned itself
──────────────────────────────────────────────
"""
from __future__ import annotations

import inspect
from typing import Any


def _type_name(typ: Any) -> str:
    if typ is inspect.Parameter.empty:
        return "<no annotation>"
    if isinstance(typ, type):
        if typ.__module__ == "builtins":
            return typ.__qualname__
        return f"{typ.__module__}.{typ.__qualname__}"
    return repr(typ)


def _fn_name(fn: Any) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


class InjectError(RuntimeError):
    """Base class for every failure produced by the registry."""


class DuplicateTypeError(InjectError):
    def __init__(self, first: Any, second: Any):
        self.first = first
        self.second = second
        super().__init__(
            "cannot inject two values of the same type. "
            f"first: {first!r} ({_type_name(type(first))}), "
            f"second: {second!r} ({_type_name(type(second))})"
        )


class NotCallableError(InjectError):
    def __init__(self, value: Any):
        self.kind = type(value).__name__
        super().__init__(f"arg is a {self.kind}, not a callable: {value!r}")


class UnresolvableSignatureError(InjectError):
    def __init__(self, fn: Any, reason: BaseException):
        self.fn = fn
        super().__init__(f"cannot read the signature of {_fn_name(fn)}: {reason}")


class NoReturnValueError(InjectError):
    def __init__(self, fn: Any):
        self.fn = fn
        super().__init__(f"cannot inject function with no return values: {_fn_name(fn)}")


class TooManyReturnValuesError(InjectError):
    def __init__(self, fn: Any, count: int):
        self.fn = fn
        self.count = count
        super().__init__(
            f"cannot inject function with more than 2 return values ({count}): {_fn_name(fn)}"
        )


class InvalidSecondReturnError(InjectError):
    def __init__(self, fn: Any, returned: Any):
        self.fn = fn
        self.returned = returned
        super().__init__(
            "cannot inject function with a non-error second return value: "
            f"{_type_name(returned)}. {_fn_name(fn)}"
        )


class CoroutineReturnError(InjectError):
    def __init__(self, fn: Any):
        self.fn = fn
        super().__init__(
            f"cannot inject coroutine function with an error return value: {_fn_name(fn)}"
        )


class UnsupportedParameterError(InjectError):
    def __init__(self, fn: Any, name: str):
        self.fn = fn
        self.name = name
        super().__init__(f"cannot inject variadic parameter {name!r}: {_fn_name(fn)}")


class MissingDependencyError(InjectError):
    def __init__(self, fn: Any, missing: Any, name: str):
        self.fn = fn
        self.missing = missing
        self.name = name
        super().__init__(
            f"fn requires a type that's missing: {_type_name(missing)}. "
            f"{_fn_name(fn)} (parameter {name!r})"
        )


class InvocationError(InjectError):
    """The injected callable returned an error as its second value."""

    def __init__(self, cause: Any):
        self.cause = cause
        super().__init__(f"cannot inject: {cause}")
        if isinstance(cause, BaseException):
            self.__cause__ = cause
