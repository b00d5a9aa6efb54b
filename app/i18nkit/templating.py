"""Translate callback for template engines.

The callback takes its arguments as key/value pairs, in any order:

    T("lang", "en", "key", "hello_emails", "gender", "nonbinary", "count", "100", "Name", "Ana")

Keyword arguments are accepted too, which reads better in engines such as
Jinja2:

    env.globals["T"] = i18n.new_templating_translate_func()
    {{ T(lang="en", key="hello_emails", count=3, Name="Ana") }}

"lang", "key", "count" and "gender" are reserved. Every other pair is added
to the interpolation data.
"""

import re
from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional, Tuple

from i18nkit.models import Data, Options

if TYPE_CHECKING:
    from i18nkit.translator import I18n

RESERVED_ARGUMENTS = ("lang", "key", "count", "gender")

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_count(value: Any) -> Optional[int]:
    """Parse a count argument.

    Returns:
        The integer, or None when value is not an integer or an integer string.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value):
        return int(value)
    return None


def parse_templating_arguments(
    pairs: Iterable[Tuple[Any, Any]],
) -> Tuple[str, str, Options]:
    """Split key/value pairs into language, key and translate options.

    Pairs whose name is not a string are skipped. The returned options always
    carry a data dict, so interpolation always runs.

    Returns:
        Tuple (language_name, translate_key, options).
    """
    lang = ""
    key = ""
    count = None
    gender = None
    data: Data = {}

    for name, value in pairs:
        if not isinstance(name, str):
            continue

        if name == "lang":
            lang = str(value)
        elif name == "key":
            key = str(value)
        elif name == "count":
            count = parse_count(value)
        elif name == "gender":
            gender = value if isinstance(value, str) else None
        else:
            data[name] = value

    return lang, key, Options(count=count, gender=gender, data=data)


def new_templating_translate_func(i18n: "I18n") -> Callable[..., str]:
    """Create a translate callback bound to a registry.

    Positional arguments are read two at a time; a trailing unpaired argument
    is ignored, and positional pairs that are not both strings are skipped.
    Keyword arguments are applied after the positional pairs.

    Args:
        i18n: Registry used for translation.

    Returns:
        Callback returning the translated string.
    """

    def translate(*args: Any, **kwargs: Any) -> str:
        pairs = [
            (name, value)
            for name, value in zip(args[0::2], args[1::2])
            if isinstance(name, str) and isinstance(value, str)
        ]
        pairs.extend(kwargs.items())

        lang, key, options = parse_templating_arguments(pairs)
        return i18n.translate(lang, key, options)

    return translate
