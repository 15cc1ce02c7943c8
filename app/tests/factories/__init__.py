"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    StaticBackend,
    make_file_backend,
    make_registry,
    make_resolver,
    make_tree,
)

__all__ = [
    "StaticBackend",
    "make_file_backend",
    "make_registry",
    "make_resolver",
    "make_tree",
]
