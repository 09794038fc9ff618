from __future__ import annotations
import functools
import inspect
import logging
import types
import typing
from typing import Any, Mapping, NamedTuple, Optional, Tuple, Union, get_args, get_origin

from .errors import (
    CoroutineReturnError,
    InjectError,
    InvalidSecondReturnError,
    InvocationError,
    MissingDependencyError,
    NoReturnValueError,
    NotCallableError,
    TooManyReturnValuesError,
    UnresolvableSignatureError,
    UnsupportedParameterError,
    _fn_name,
)

"""
──────────────────────────────────────────────────────────────────────────────
Dynamic Invocation (Injection by Signature)
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Call a function with arguments picked from a type → value mapping.

Mechanics:
    - Reads the callable's signature; string annotations are evaluated
      lazily, return annotation first, then each parameter in order
    - A class returns its instance, whatever __init__ declares
    - Return annotation decides the shape:
        no annotation / T            → one value
        None / NoReturn              → rejected (nothing to hand back)
        tuple[T, Exception | None]   → value plus optional error
        tuple[A, B, C, ...]          → rejected (too many values)
    - async def with tuple[T, Exception | None] is rejected: the error
      only exists once the coroutine is awaited
    - Each parameter annotation must match a registered type exactly
    - Nothing is called until every parameter resolves

Used by:
    Registry.inject(fn) → Injection(value, error)

Example:
    def home(tmpl: Template, engine: Engine) -> Handler:
        def handler(request): ...
        return handler

    handler = must(registry.inject(home))
"""

logger = logging.getLogger(__name__)

_NO_RETURN = (None, type(None), typing.NoReturn, getattr(typing, "Never", typing.NoReturn))
_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
_EVAL_ERRORS = (NameError, AttributeError, SyntaxError, TypeError)


class Injection(NamedTuple):
    """Outcome of Registry.inject(): the callable's value and an optional error."""

    value: Any
    error: Optional[InjectError]


def _error_members(typ: Any) -> list:
    if get_origin(typ) is Union or get_origin(typ) is types.UnionType:
        return [a for a in get_args(typ) if a is not type(None)]
    return [typ]


def _is_error_type(typ: Any) -> bool:
    members = _error_members(typ)
    return bool(members) and all(isinstance(t, type) and issubclass(t, Exception) for t in members)


def _return_types(annotation: Any) -> Tuple[Any, ...]:
    """
    Split a return annotation into the values the callable hands back.
    Only fixed-length tuples of two or more members count as several values.
    """
    if annotation is inspect.Signature.empty:
        return (Any,)
    if any(annotation is t for t in _NO_RETURN):
        return ()
    if annotation is tuple or annotation is typing.Tuple or get_origin(annotation) is not tuple:
        return (annotation,)
    args = get_args(annotation)
    if args == ((),):  # tuple[()] before 3.11
        args = ()
    if len(args) == 1 or Ellipsis in args:
        return (annotation,)
    return args


def _globals_of(fn: Any) -> dict:
    target = fn.__init__ if inspect.isclass(fn) else fn
    while isinstance(target, functools.partial):
        target = target.func
    target = inspect.unwrap(getattr(target, "__func__", target))
    if not hasattr(target, "__globals__"):  # instance with __call__
        target = getattr(type(target).__call__, "__func__", type(target).__call__)
    return getattr(target, "__globals__", {})


def _evaluate(annotation: Any, globalns: dict) -> Any:
    """Evaluate a string annotation (from __future__ import annotations) in fn's module."""
    if isinstance(annotation, str):
        return eval(annotation, globalns)
    return annotation


def invoke(values: Mapping[type, Any], fn: Any) -> Injection:
    """
    Validate fn, resolve its parameters from 'values' and call it.
    Failures come back as Injection(None, error); exceptions raised by fn itself propagate.
    """
    if not callable(fn):
        return Injection(None, NotCallableError(fn))
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError, NameError, AttributeError, SyntaxError) as exc:
        return Injection(None, UnresolvableSignatureError(fn, exc))
    globalns = _globals_of(fn)

    # check the function for compatibility; a class always returns its instance
    if inspect.isclass(fn):
        returns: Tuple[Any, ...] = (fn,)
    else:
        try:
            returns = _return_types(_evaluate(sig.return_annotation, globalns))
        except _EVAL_ERRORS as exc:
            return Injection(None, UnresolvableSignatureError(fn, exc))
    if not returns:
        return Injection(None, NoReturnValueError(fn))
    if len(returns) > 2:
        return Injection(None, TooManyReturnValuesError(fn, len(returns)))
    if len(returns) == 2 and not _is_error_type(returns[1]):
        return Injection(None, InvalidSecondReturnError(fn, returns[1]))
    if len(returns) == 2 and inspect.iscoroutinefunction(fn):
        return Injection(None, CoroutineReturnError(fn))

    # build the arguments
    args: list[Any] = []
    kwargs: dict[str, Any] = {}
    for name, param in sig.parameters.items():
        if param.kind in _VARIADIC:
            return Injection(None, UnsupportedParameterError(fn, name))
        try:
            typ = _evaluate(param.annotation, globalns)
        except _EVAL_ERRORS as exc:
            return Injection(None, UnresolvableSignatureError(fn, exc))
        try:
            arg = values[typ]
        except (KeyError, TypeError):  # TypeError: unhashable annotation
            return Injection(None, MissingDependencyError(fn, typ, name))
        if param.kind is inspect.Parameter.KEYWORD_ONLY:
            kwargs[name] = arg
        else:
            args.append(arg)

    logger.debug("injecting %s with %d argument(s)", _fn_name(fn), len(args) + len(kwargs))
    result = fn(*args, **kwargs)
    if len(returns) == 1:
        return Injection(result, None)

    # the annotation promised (value, error)
    value, cause = result
    if cause is None:
        return Injection(value, None)
    return Injection(value, InvocationError(cause))
