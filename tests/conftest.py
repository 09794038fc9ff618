"""
pytest configuration

Shared fixtures come from inject_kernel.testing.
"""
from inject_kernel.testing.fixtures import client, registry, settings  # noqa: F401
