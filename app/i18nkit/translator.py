"""Translation registry and resolution engine.

The I18n registry holds one language table (a list of TranslateEntry) per
language name, one pluralization function per language, and the fallback
language. translate() picks the entry, selects the variant matching the
count and gender options, and interpolates data into it.
"""

import threading
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from i18nkit.consistency import check_language_consistency
from i18nkit.interpolation import execute_template
from i18nkit.logging import get_module_logger
from i18nkit.models import (
    Gender,
    I18nConfig,
    Options,
    PluralCategory,
    PluralizationFunc,
    TranslateEntry,
    TranslationMode,
    Variant,
)
from i18nkit.pluralization import PluralizationRegistry, default_pluralization_func

logger = get_module_logger()

LangTranslateFunc = Callable[..., str]


class I18n:
    """Registry of language tables with variant-aware translation.

    Writers (add_language, set_pluralization_func) are serialized and publish
    new copies of the internal mappings; translate() works on whichever copy
    it read first, so it is safe to call while languages are being added.

    Attributes:
        fallback_language_name: Language used when the requested language or
            key is missing.
        disable_consistency_check: Whether add_language() skips the key-set
            comparison.
    """

    def __init__(self, config: Optional[I18nConfig] = None):
        """Initialize the registry.

        Args:
            config: Optional configuration. Defaults to fallback "en" with the
                consistency check enabled.
        """
        config = config or I18nConfig()
        self.fallback_language_name = config.fallback_language_name
        self.disable_consistency_check = config.disable_consistency_check
        self._languages: Dict[str, Tuple[TranslateEntry, ...]] = {}
        self._pluralization = PluralizationRegistry()
        self._write_lock = threading.Lock()
        logger.info(
            "initialized_i18n",
            fallback_language=self.fallback_language_name,
            consistency_check=not self.disable_consistency_check,
        )

    def add_language(
        self,
        language_name: str,
        translate_strings: Iterable[Any],
    ) -> List[str]:
        """Register (or replace) the translations of a language.

        A previously registered language with the same name is overwritten,
        not merged. The default pluralization function is registered unless
        the language already has one. Afterwards the key set is compared with
        the other languages, unless disabled by configuration.

        Args:
            language_name: Language name (e.g., "en", "es-ES").
            translate_strings: TranslateEntry instances, or mappings validated
                into TranslateEntry.

        Returns:
            Consistency warnings; empty when consistent or when the check is
            disabled.

        Raises:
            pydantic.ValidationError: If a mapping is not a valid entry.
        """
        entries = tuple(
            item if isinstance(item, TranslateEntry) else TranslateEntry.model_validate(item)
            for item in translate_strings
        )

        with self._write_lock:
            languages = dict(self._languages)
            languages[language_name] = entries
            self._languages = languages

            if not self._pluralization.has(language_name):
                self._pluralization = self._pluralization.with_func(
                    language_name, default_pluralization_func
                )

        logger.info("added_language", language=language_name, entry_count=len(entries))

        if self.disable_consistency_check:
            return []

        is_consistent, warnings = self.check_language_consistency(language_name)
        if not is_consistent:
            for warning in warnings:
                logger.warning(
                    "language_inconsistency", language=language_name, detail=warning
                )
        return warnings

    def has_language(self, language_name: str) -> bool:
        """Check if a language is registered."""
        return language_name in self._languages

    def get_available_languages(self) -> List[str]:
        """Get names of registered languages."""
        return list(self._languages.keys())

    def get_language(self, language_name: str) -> Optional[List[TranslateEntry]]:
        """Get the entries registered for a language.

        Returns:
            Copy of the entry list, or None if the language is not registered.
        """
        entries = self._languages.get(language_name)
        return list(entries) if entries is not None else None

    def set_pluralization_func(self, language_name: str, fn: PluralizationFunc) -> None:
        """Set the pluralization function for a language.

        May be called before or after add_language().

        Args:
            language_name: Language the function applies to.
            fn: Function mapping a count to "Zero", "One", "Two", "Few" or "Many".
        """
        with self._write_lock:
            self._pluralization = self._pluralization.with_func(language_name, fn)
        logger.info("set_pluralization_func", language=language_name)

    def check_language_consistency(self, language_name: str) -> Tuple[bool, List[str]]:
        """Check that a language has the same keys as all other languages.

        Returns:
            Tuple (is_consistent, warnings). An unregistered language yields a
            single warning saying it doesn't exist.
        """
        return check_language_consistency(self._languages, language_name)

    def translate(
        self,
        language_name: str,
        translate_key: str,
        options: Optional[Options] = None,
    ) -> str:
        """Translate a key into a language.

        Falls back to the fallback language when the language or the key is
        missing. Count and gender options select the plural, gender or
        combined variant; an empty or unknown variant falls back to the less
        specific one and finally to the default text. Data is interpolated
        only when options.data is not None.

        Args:
            language_name: Requested language.
            translate_key: Key of the translation entry.
            options: Optional count, gender and data.

        Returns:
            Translated string, or "" when neither the language nor the
            fallback language has the key.
        """
        options = options or Options()

        # Work on a single snapshot for the whole call
        languages = self._languages
        pluralization = self._pluralization
        fallback_name = self.fallback_language_name

        table = languages.get(language_name)
        fallback_table = languages.get(fallback_name)

        if table is None and fallback_table is None:
            logger.debug(
                "language_not_found",
                language=language_name,
                fallback_language=fallback_name,
            )
            return ""

        if table is None:
            logger.debug(
                "used_fallback_language",
                requested_language=language_name,
                fallback_language=fallback_name,
            )
            table = fallback_table
            language_name = fallback_name

        entry = _find_entry(table, translate_key)
        if entry is None and fallback_table is not None:
            entry = _find_entry(fallback_table, translate_key)
            if entry is not None:
                logger.debug(
                    "used_fallback_translation",
                    key=translate_key,
                    requested_language=language_name,
                    fallback_language=fallback_name,
                )

        if entry is None:
            logger.debug(
                "translation_not_found",
                key=translate_key,
                language=language_name,
                fallback_language=fallback_name,
            )
            return ""

        mode = options.mode
        plural = None
        gender = None
        if mode.uses_count:
            plural = pluralization.category_for(language_name, options.count)
        if mode.uses_gender:
            gender = Gender.parse(options.gender)

        translation = select_variant(entry, mode, plural, gender)

        if options.data is not None:
            translation = execute_template(translation, options.data)

        return translation

    def t(
        self,
        language_name: str,
        translate_key: str,
        options: Optional[Options] = None,
    ) -> str:
        """Shortcut for translate()."""
        return self.translate(language_name, translate_key, options)

    def translator_for(self, language_name: str) -> LangTranslateFunc:
        """Create a translate function bound to one language.

        Example:
            t_es = i18n.translator_for("es")
            t_es("welcome", Options(gender="female"))
        """

        def translate(translate_key: str, options: Optional[Options] = None) -> str:
            return self.translate(language_name, translate_key, options)

        return translate

    new_lang_translate_func = translator_for

    def new_templating_translate_func(self) -> Callable[..., str]:
        """Create a translate callback for template engines.

        See i18nkit.templating.new_templating_translate_func.
        """
        from i18nkit.templating import new_templating_translate_func

        return new_templating_translate_func(self)


def new_i18n(config: Optional[I18nConfig] = None) -> I18n:
    """Create a new I18n registry."""
    return I18n(config)


def _find_entry(
    entries: Sequence[TranslateEntry], translate_key: str
) -> Optional[TranslateEntry]:
    # First match wins when a key is duplicated
    if not translate_key:
        return None
    for entry in entries:
        if entry.key == translate_key:
            return entry
    return None


def variant_candidates(
    mode: TranslationMode,
    plural: Optional[PluralCategory],
    gender: Optional[Gender],
) -> List[Variant]:
    """List the variants to try, most specific first.

    Args:
        mode: Resolution mode from the options.
        plural: Plural category (ignored outside pluralized modes).
        gender: Recognized gender (ignored outside gendered modes).

    Returns:
        Candidate variants, always ending with Variant.DEFAULT.
    """
    candidates: List[Optional[Variant]] = []

    if mode is TranslationMode.PLURALIZED_GENDERED:
        if plural is not None and gender is not None:
            candidates.append(Variant.compose(plural, gender))
        candidates.append(Variant.compose(plural=plural))
    elif mode is TranslationMode.PLURALIZED:
        candidates.append(Variant.compose(plural=plural))
    elif mode is TranslationMode.GENDERED:
        candidates.append(Variant.compose(gender=gender))

    result = [variant for variant in candidates if variant is not None]
    result.append(Variant.DEFAULT)
    return result


def select_variant(
    entry: TranslateEntry,
    mode: TranslationMode,
    plural: Optional[PluralCategory],
    gender: Optional[Gender],
) -> str:
    """Return the first non-empty candidate variant of entry.

    Returns:
        Variant text, or the (possibly empty) default text.
    """
    for variant in variant_candidates(mode, plural, gender):
        text = entry.variant(variant)
        if text:
            return text
    return entry.default
