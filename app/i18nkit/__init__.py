"""i18nkit - variant-aware translation registry.

Resolves a translation key, a language and optional count, gender and
interpolation data into one localized string.

Main components:
- models: TranslateEntry, Variant, Options, I18nConfig
- translator: I18n registry and resolution engine
- pluralization: default and per-language pluralization functions
- consistency: key-set comparison between languages
- interpolation: {{.Field}} placeholder rendering
- templating: translate callback for template engines
- loader: JSON and YAML loaders
- factory: create_i18n() from settings and a translations directory

Example:
    from i18nkit import I18n, Options, TranslateEntry

    i18n = I18n()
    i18n.add_language("en", [
        TranslateEntry(key="emails", one="You have one email", many="You have {{.N}} emails"),
    ])
    i18n.translate("en", "emails", Options(count=3, data={"N": 3}))
"""

from i18nkit.models import (
    Data,
    Gender,
    I18nConfig,
    Options,
    PluralCategory,
    PluralizationFunc,
    TranslateEntries,
    TranslateEntry,
    TranslationMode,
    Variant,
)
from i18nkit.pluralization import PluralizationRegistry, default_pluralization_func
from i18nkit.interpolation import execute_template
from i18nkit.translator import I18n, new_i18n
from i18nkit.templating import new_templating_translate_func
from i18nkit.loader import (
    JSONTranslationLoader,
    TranslationLoadError,
    TranslationLoader,
    YAMLTranslationLoader,
    load_from_json_bytes,
    load_from_json_files,
    load_from_json_fs,
    load_from_json_string,
    load_from_yaml_bytes,
    load_from_yaml_files,
    load_from_yaml_fs,
    load_from_yaml_string,
)
from i18nkit.factory import create_i18n, load_translations_dir

__version__ = "0.1.0"

__all__ = [
    # Models
    "Data",
    "Gender",
    "I18nConfig",
    "Options",
    "PluralCategory",
    "PluralizationFunc",
    "TranslateEntries",
    "TranslateEntry",
    "TranslationMode",
    "Variant",
    # Registry
    "I18n",
    "new_i18n",
    "PluralizationRegistry",
    "default_pluralization_func",
    # Rendering
    "execute_template",
    "new_templating_translate_func",
    # Loaders
    "TranslationLoader",
    "JSONTranslationLoader",
    "YAMLTranslationLoader",
    "TranslationLoadError",
    "load_from_json_bytes",
    "load_from_json_string",
    "load_from_json_files",
    "load_from_json_fs",
    "load_from_yaml_bytes",
    "load_from_yaml_string",
    "load_from_yaml_files",
    "load_from_yaml_fs",
    # Factory
    "create_i18n",
    "load_translations_dir",
]
