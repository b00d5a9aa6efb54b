"""Key-set consistency checks between registered languages."""

from typing import List, Mapping, Sequence, Tuple

from i18nkit.models import TranslateEntry


def language_missing_message(language_name: str) -> str:
    return f"the language '{language_name}' doesn't exist"


def missing_key_message(language_name: str, key: str, other_language_name: str) -> str:
    return (
        f"the language '{language_name}' has the key '{key}' "
        f"that doesn't exist in '{other_language_name}'"
    )


def check_language_consistency(
    languages: Mapping[str, Sequence[TranslateEntry]],
    language_name: str,
) -> Tuple[bool, List[str]]:
    """Compare the keys of one language against every other language.

    Each pair is compared in both directions: keys of the checked language
    missing from the other one, and keys of the other language missing from
    the checked one. The order of the returned warnings follows the mapping
    iteration order and must not be relied upon.

    Args:
        languages: Language tables keyed by language name.
        language_name: Language to check.

    Returns:
        Tuple (is_consistent, warnings).
    """
    entries = languages.get(language_name)
    if entries is None:
        return False, [language_missing_message(language_name)]

    keys = {entry.key for entry in entries}
    warnings: List[str] = []

    for other_name, other_entries in languages.items():
        if other_name == language_name:
            continue

        other_keys = {entry.key for entry in other_entries}

        for entry in entries:
            if entry.key not in other_keys:
                warnings.append(missing_key_message(language_name, entry.key, other_name))

        for entry in other_entries:
            if entry.key not in keys:
                warnings.append(missing_key_message(other_name, entry.key, language_name))

    return not warnings, warnings
