"""Root-level fixtures shared across all tests."""

import pytest

LOCALIZATION_ENV_VARS = (
    "LOCALIZATION_LANG_DIR",
    "LOCALIZATION_DEFAULT_LANG",
    "LOCALIZATION_FALLBACK_LANG",
    "LOCALIZATION_DEFAULT_LANG_DIR",
    "LOCALIZATION_USE_RESOURCES",
    "LOCALIZATION_RESOURCE_PACKAGE",
    "LOCALIZATION_RESOURCE_PREFIX",
    "LOCALIZATION_DOCUMENT_FORMAT",
)


@pytest.fixture(autouse=True)
def isolated_localization_env(monkeypatch):
    """Keep the host's localization variables out of settings under test."""
    for name in LOCALIZATION_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
