"""Configuration module - public API.

Centralized configuration for i18nkit using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation registry settings class

Example:
    ```python
    from i18nkit.configuration import settings

    fallback = settings.i18n.FALLBACK_LANGUAGE_NAME
    ```
"""

from i18nkit.configuration.i18n import I18nSettings
from i18nkit.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
