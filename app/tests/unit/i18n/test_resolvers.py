"""Tests for jsonlocale.i18n.resolvers module."""

import locale

import pytest

from jsonlocale.i18n import LanguageResolver, detect_system_languages
from jsonlocale.i18n.resolvers import tag_variants
from tests.factories.i18n import make_language_resolution_context

pytestmark = pytest.mark.unit


class TestTagVariants:
    """Tests for tag_variants()."""

    def test_posix_locale(self):
        assert tag_variants("de_DE.UTF-8") == ["de_DE", "de", "de-DE"]

    def test_bcp47_tag(self):
        assert tag_variants("pt-BR") == ["pt_BR", "pt", "pt-BR"]

    def test_language_only(self):
        assert tag_variants("fr") == ["fr"]

    def test_modifier_stripped(self):
        assert tag_variants("sr_RS@latin") == ["sr_RS", "sr", "sr-RS"]

    @pytest.mark.parametrize("name", ["", "C", "POSIX", "C.UTF-8"])
    def test_neutral_locales(self, name):
        assert tag_variants(name) == []


class TestDetectSystemLanguages:
    """Tests for detect_system_languages()."""

    def test_reads_environment_in_priority_order(self):
        environ = {"LANGUAGE": "de_DE:fr", "LANG": "en_US.UTF-8"}
        assert detect_system_languages(environ) == [
            "de_DE",
            "de",
            "de-DE",
            "fr",
            "en_US",
            "en",
            "en-US",
        ]

    def test_skips_neutral_locale(self):
        assert detect_system_languages({"LC_ALL": "C"}) == []

    def test_falls_back_to_locale_module(self, monkeypatch):
        monkeypatch.setattr(locale, "getlocale", lambda *args: ("it_IT", "UTF-8"))
        assert detect_system_languages({}) == ["it_IT", "it", "it-IT"]

    def test_locale_module_without_language(self, monkeypatch):
        monkeypatch.setattr(locale, "getlocale", lambda *args: (None, None))
        assert detect_system_languages({}) == []


class TestLanguageResolutionContext:
    """Tests for LanguageResolutionContext."""

    def test_requested_language_with_source(self):
        context = make_language_resolution_context(requested="de", detected=["fr"])
        assert context.resolve(lambda tag: True) == "de"

    def test_requested_language_without_source(self):
        context = make_language_resolution_context(requested="de", detected=["fr"])
        assert context.resolve(lambda tag: tag == "fr") == "fr"

    def test_first_detected_with_source(self):
        context = make_language_resolution_context(detected=["de_DE", "de", "fr"])
        assert context.resolve(lambda tag: tag in ("de", "fr")) == "de"

    def test_fallback_when_nothing_exists(self):
        context = make_language_resolution_context(requested="de", fallback="es")
        assert context.resolve(lambda tag: False) == "es"

    def test_default_when_no_fallback(self):
        context = make_language_resolution_context(requested="de", fallback=None)
        assert context.resolve(lambda tag: False) == "en"

    def test_blank_values_are_skipped(self):
        context = make_language_resolution_context(
            requested="  ", detected=["", "fr"], fallback=" "
        )
        assert context.candidates() == ["fr"]
        assert context.resolve(lambda tag: False) == "en"


class TestLanguageResolver:
    """Tests for LanguageResolver."""

    def test_resolves_with_source_check(self):
        available = {"en", "de"}
        resolver = LanguageResolver(lambda tag: tag in available)
        assert resolver.resolve("fr", ["de_AT", "de"], "en") == "de"

    def test_result_is_never_empty(self):
        resolver = LanguageResolver(lambda tag: False)
        assert resolver.resolve(None, [], None) == "en"
