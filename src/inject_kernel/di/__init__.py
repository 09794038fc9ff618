"""
Type-keyed dependency injection.
──────────────────────────────────────────────────────────────
Build a Registry once from long-lived values, then call functions
(usually closure factories) with those values as arguments.
──────────────────────────────────────────────────────────────
"""
from .errors import (
    CoroutineReturnError,
    DuplicateTypeError,
    InjectError,
    InvalidSecondReturnError,
    InvocationError,
    MissingDependencyError,
    NoReturnValueError,
    NotCallableError,
    TooManyReturnValuesError,
    UnresolvableSignatureError,
    UnsupportedParameterError,
)
from .inject import Injection
from .registry import Injector, Registry, must, new

__all__ = [
    "Injection",
    "Injector",
    "Registry",
    "must",
    "new",
    "InjectError",
    "DuplicateTypeError",
    "NotCallableError",
    "UnresolvableSignatureError",
    "NoReturnValueError",
    "TooManyReturnValuesError",
    "InvalidSecondReturnError",
    "CoroutineReturnError",
    "UnsupportedParameterError",
    "MissingDependencyError",
    "InvocationError",
]
