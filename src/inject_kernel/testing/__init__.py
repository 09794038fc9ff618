"""
Testing utilities for inject_kernel apps.
──────────────────────────────────────────────────────────────
Provides pytest fixtures for a registry and the example app.
──────────────────────────────────────────────────────────────
"""
from .fixtures import client, registry, settings

__all__ = ["client", "registry", "settings"]
