# inject_kernel/__init__.py
"""
inject_kernel
──────────────────────────────────────────────────────────────
A small type-keyed dependency injector.
Provides:
    - Registry: one value per exact type, immutable once built
    - inject(): call any function with arguments resolved by type
    - must(): opt-in unwrap that raises on injection errors
    - An example FastAPI server wired through the registry
──────────────────────────────────────────────────────────────
"""

__version__ = "0.1.0"

from inject_kernel.di import Injection, Injector, InjectError, Registry, must, new

__all__ = [
    "Injection",
    "Injector",
    "InjectError",
    "Registry",
    "must",
    "new",
]
