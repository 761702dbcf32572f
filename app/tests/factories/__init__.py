"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_database_backend,
    make_memory_backend,
    make_translation_rows,
    make_translation_tree,
)

__all__ = [
    "make_database_backend",
    "make_memory_backend",
    "make_translation_rows",
    "make_translation_tree",
]
