"""Translation registry settings."""

from pydantic import Field, field_validator

from i18nkit.configuration.base import FeatureSettings
from i18nkit.models import DEFAULT_FALLBACK_LANGUAGE, I18nConfig


class I18nSettings(FeatureSettings):
    """Configuration for the translation registry.

    Environment Variables:
        I18N_FALLBACK_LANGUAGE: Language used when the requested language or
            key is missing (default: en)
        I18N_DISABLE_CONSISTENCY_CHECK: Skip key-set comparison on
            add_language (default: false)
        I18N_TRANSLATIONS_DIR: Directory preloaded by create_i18n() (optional)

    Example:
        ```python
        from i18nkit.configuration import settings

        config = settings.i18n.to_config()
        ```
    """

    FALLBACK_LANGUAGE_NAME: str = Field(
        default=DEFAULT_FALLBACK_LANGUAGE, alias="I18N_FALLBACK_LANGUAGE"
    )
    DISABLE_CONSISTENCY_CHECK: bool = Field(
        default=False, alias="I18N_DISABLE_CONSISTENCY_CHECK"
    )
    TRANSLATIONS_DIR: str | None = Field(default=None, alias="I18N_TRANSLATIONS_DIR")

    @field_validator("FALLBACK_LANGUAGE_NAME", mode="before")
    @classmethod
    def validate_fallback_language(cls, v):
        """Treat a blank fallback language as the default one."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_FALLBACK_LANGUAGE
        return v

    def to_config(self) -> I18nConfig:
        """Build the registry configuration from these settings."""
        return I18nConfig(
            fallback_language_name=self.FALLBACK_LANGUAGE_NAME,
            disable_consistency_check=self.DISABLE_CONSISTENCY_CHECK,
        )
