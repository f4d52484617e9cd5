"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_language_resolution_context,
    make_localization_settings,
    make_translation_document,
    write_translation,
)

__all__ = [
    "make_language_resolution_context",
    "make_localization_settings",
    "make_translation_document",
    "write_translation",
]
