"""Unit tests for i18nkit.configuration settings.

Tests cover:
- I18nSettings defaults and environment overrides
- Conversion to I18nConfig
- Settings aggregator initialization
"""

import pytest

from i18nkit import I18nConfig
from i18nkit.configuration import I18nSettings, Settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove i18n variables that could leak in from the host."""
    for name in (
        "I18N_FALLBACK_LANGUAGE",
        "I18N_DISABLE_CONSISTENCY_CHECK",
        "I18N_TRANSLATIONS_DIR",
        "PREFIX",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestI18nSettings:
    """Test suite for I18nSettings configuration."""

    def test_defaults(self):
        """Test I18nSettings uses correct default values."""
        i18n = I18nSettings()

        assert i18n.FALLBACK_LANGUAGE_NAME == "en"
        assert i18n.DISABLE_CONSISTENCY_CHECK is False
        assert i18n.TRANSLATIONS_DIR is None

    def test_environment_overrides(self, monkeypatch):
        """Test I18nSettings reads the I18N_* variables."""
        monkeypatch.setenv("I18N_FALLBACK_LANGUAGE", "es")
        monkeypatch.setenv("I18N_DISABLE_CONSISTENCY_CHECK", "true")
        monkeypatch.setenv("I18N_TRANSLATIONS_DIR", "/srv/translations")

        i18n = I18nSettings()

        assert i18n.FALLBACK_LANGUAGE_NAME == "es"
        assert i18n.DISABLE_CONSISTENCY_CHECK is True
        assert i18n.TRANSLATIONS_DIR == "/srv/translations"

    def test_blank_fallback_language_means_english(self, monkeypatch):
        monkeypatch.setenv("I18N_FALLBACK_LANGUAGE", "  ")
        assert I18nSettings().FALLBACK_LANGUAGE_NAME == "en"

    def test_populate_by_field_name(self):
        i18n = I18nSettings(FALLBACK_LANGUAGE_NAME="fr")
        assert i18n.FALLBACK_LANGUAGE_NAME == "fr"

    def test_to_config(self):
        config = I18nSettings(
            I18N_FALLBACK_LANGUAGE="es", I18N_DISABLE_CONSISTENCY_CHECK=True
        ).to_config()

        assert config == I18nConfig(
            fallback_language_name="es", disable_consistency_check=True
        )


class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_settings_initialization(self):
        """Test Settings instantiates sub-settings automatically."""
        settings = Settings()

        assert isinstance(settings.i18n, I18nSettings)
        assert settings.LOG_LEVEL == "INFO"

    def test_settings_subsettings_override(self):
        """Test Settings accepts explicit sub-settings."""
        custom = I18nSettings(I18N_FALLBACK_LANGUAGE="de")
        settings = Settings(i18n=custom)

        assert settings.i18n.FALLBACK_LANGUAGE_NAME == "de"

    def test_is_production(self, monkeypatch):
        """Test is_production depends on PREFIX."""
        assert Settings().is_production is True

        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False

    def test_settings_read_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("I18N_FALLBACK_LANGUAGE", "pt")

        settings = Settings()

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.i18n.FALLBACK_LANGUAGE_NAME == "pt"
