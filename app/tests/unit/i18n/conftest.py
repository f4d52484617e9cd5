"""Feature-level fixtures for i18n system tests.

Provides translation directories on disk and translators built on them.
"""

import sys

import pytest

from jsonlocale.i18n import FileLocalizationProvider, Translator
from tests.factories.i18n import (
    make_localization_settings,
    make_translation_document,
    write_translation,
)


@pytest.fixture
def lang_dir(tmp_path):
    """Create a directory with English and German translation files.

    Returns a directory structure like:
    - en.json
    - de.json
    """
    directory = tmp_path / "lang"
    write_translation(
        directory,
        "en",
        make_translation_document(
            title="Base",
            language_name="English",
            count=3,
            ratio=0.5,
            enabled=True,
            nothing=None,
            items=["a", "b"],
            only_en="English only",
        ),
    )
    write_translation(
        directory,
        "de",
        make_translation_document(title="Titel", language_name="Deutsch"),
    )
    return directory


@pytest.fixture
def override_dir(tmp_path):
    """Create an override directory that replaces app.title in English."""
    directory = tmp_path / "override"
    write_translation(directory, "en", {"app": {"title": "Override"}})
    return directory


@pytest.fixture
def file_provider():
    """JSON file provider."""
    return FileLocalizationProvider()


@pytest.fixture
def translator(lang_dir):
    """Translator on lang_dir with English active and no host detection."""
    config = make_localization_settings(lang_dir=lang_dir, default_lang="en")
    return Translator(config, detected_languages=[])


@pytest.fixture
def resource_package(tmp_path, monkeypatch):
    """Create an importable package shipping translations under lang/."""
    package_dir = tmp_path / "site_packages" / "demo_translations"
    package_dir.mkdir(parents=True)
    (package_dir / "__init__.py").write_text("", encoding="utf-8")
    write_translation(package_dir / "lang", "en", make_translation_document())
    write_translation(
        package_dir / "lang", "de", make_translation_document("Titel", "Deutsch")
    )
    monkeypatch.syspath_prepend(str(tmp_path / "site_packages"))
    yield "demo_translations"
    sys.modules.pop("demo_translations", None)
