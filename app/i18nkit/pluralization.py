"""Pluralization strategies per language.

A pluralization function maps a count to a plural category label
("Zero", "One", "Two", "Few" or "Many"). Any other label selects no plural
variant, so the translation falls back to the default text.
"""

from typing import Dict, Mapping, Optional

from i18nkit.models import PluralCategory, PluralizationFunc


def default_pluralization_func(count: int) -> str:
    """Pluralization used when no custom function is set for a language.

    Returns "One" for exactly 1 and "Many" for everything else, including
    zero and negative counts.
    """
    if count == 1:
        return PluralCategory.ONE.value
    return PluralCategory.MANY.value


class PluralizationRegistry:
    """Immutable mapping from language name to pluralization function.

    Updates return a new registry so readers holding the previous instance
    keep a consistent view.
    """

    def __init__(self, funcs: Optional[Mapping[str, PluralizationFunc]] = None):
        self._funcs: Dict[str, PluralizationFunc] = dict(funcs or {})

    def with_func(
        self, language_name: str, fn: PluralizationFunc
    ) -> "PluralizationRegistry":
        """Return a copy of this registry with fn set for language_name."""
        funcs = dict(self._funcs)
        funcs[language_name] = fn
        return PluralizationRegistry(funcs)

    def has(self, language_name: str) -> bool:
        return language_name in self._funcs

    def get(self, language_name: str) -> PluralizationFunc:
        """Return the function for a language, or the default one."""
        return self._funcs.get(language_name, default_pluralization_func)

    def category_for(self, language_name: str, count: int) -> Optional[PluralCategory]:
        """Compute the plural category of count for a language.

        Args:
            language_name: Language whose function is used.
            count: Count to categorize.

        Returns:
            PluralCategory, or None if the function returned an unknown label.
        """
        return PluralCategory.from_label(self.get(language_name)(count))

    def __contains__(self, language_name: str) -> bool:
        return self.has(language_name)

    def __len__(self) -> int:
        return len(self._funcs)
