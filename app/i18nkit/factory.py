"""Factory functions for creating configured I18n registries.

Translation directories hold one or more files per language. The language
name is the last dot-separated part of the file stem:

    translations/
        en.yaml
        es.yaml
        emails.en.json
        emails.es.json
"""

from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Optional, Union

from i18nkit.configuration import I18nSettings
from i18nkit.configuration import settings as app_settings
from i18nkit.loader import JSONTranslationLoader, TranslationLoader, YAMLTranslationLoader
from i18nkit.logging import get_module_logger
from i18nkit.models import TranslateEntries
from i18nkit.translator import I18n

logger = get_module_logger()

LOADERS_BY_SUFFIX: Dict[str, TranslationLoader] = {
    ".json": JSONTranslationLoader(),
    ".yaml": YAMLTranslationLoader(),
    ".yml": YAMLTranslationLoader(),
}


def language_name_from_path(path: Path) -> str:
    """Extract the language name from a translation file path.

    Example:
        "emails.es-ES.json" -> "es-ES", "en.yaml" -> "en"
    """
    return path.stem.split(".")[-1]


def load_translations_dir(
    i18n: I18n,
    translations_dir: Union[Path, str],
) -> Dict[str, List[str]]:
    """Load every translation file of a directory into a registry.

    Files of the same language are merged in name order, then each language
    is added once.

    Args:
        i18n: Registry to add the languages to.
        translations_dir: Directory containing *.json, *.yaml or *.yml files.

    Returns:
        Consistency warnings per language name.

    Raises:
        ValueError: If the directory does not exist.
        TranslationLoadError: If a file is not a valid document.
    """
    directory = Path(translations_dir)
    if not directory.is_dir():
        raise ValueError(f"Translations directory not found: {directory}")

    entries_by_language: Dict[str, TranslateEntries] = defaultdict(list)
    for path in sorted(directory.iterdir()):
        loader = LOADERS_BY_SUFFIX.get(path.suffix.lower())
        if loader is None or not path.is_file():
            continue
        language_name = language_name_from_path(path)
        entries_by_language[language_name].extend(
            loader.load_bytes(path.read_bytes(), source=str(path))
        )

    warnings = {
        language_name: i18n.add_language(language_name, entries)
        for language_name, entries in entries_by_language.items()
    }

    logger.info(
        "loaded_translations_dir",
        translations_dir=str(directory),
        language_count=len(entries_by_language),
    )
    return warnings


def create_i18n(
    translations_dir: Union[Path, str, None] = None,
    settings: Optional[I18nSettings] = None,
    preload: bool = True,
) -> I18n:
    """Create and configure an I18n registry.

    Args:
        translations_dir: Directory to load translations from (default:
            settings.TRANSLATIONS_DIR, if set).
        settings: I18n settings (default: the application settings).
        preload: Whether to load the translations directory immediately.

    Returns:
        I18n: Configured registry

    Raises:
        ValueError: If preloading and the translations directory does not exist.

    Usage:
        # Use settings from the environment
        i18n = create_i18n()

        # Custom translations directory
        i18n = create_i18n(translations_dir=Path("/srv/app/translations"))
    """
    i18n_settings = settings or app_settings.i18n
    i18n = I18n(i18n_settings.to_config())

    directory = translations_dir or i18n_settings.TRANSLATIONS_DIR
    if directory is None or not preload:
        logger.info(
            "i18n_created_without_preload",
            translations_dir=str(directory) if directory else None,
        )
        return i18n

    load_translations_dir(i18n, directory)
    logger.info(
        "i18n_created_with_preload",
        translations_dir=str(directory),
        language_count=len(i18n.get_available_languages()),
    )
    return i18n
