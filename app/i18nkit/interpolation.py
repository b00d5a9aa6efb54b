"""Variable interpolation for translated messages.

Messages use ``{{.Field}}`` placeholders. Dotted paths reach into nested
data (``{{.User.Name}}``) and ``{{.}}`` renders the data itself. Whitespace
inside the braces is allowed. Other ``{{ ... }}`` content is left as-is.
"""

import re
from collections.abc import Mapping
from typing import Any

_PLACEHOLDER_PATTERN = re.compile(r"\{\{-?\s*(\.(?:\w+(?:\.\w+)*)?)\s*-?\}\}")

_MISSING = object()


def _lookup(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(name, _MISSING)
    # Private and dunder attributes are never exposed to templates
    if name.startswith("_"):
        return _MISSING
    return getattr(value, name, _MISSING)


def resolve_path(data: Any, path: str) -> Any:
    """Resolve a placeholder path such as ".User.Name" against data.

    Mapping keys are looked up first, then attributes.

    Returns:
        The resolved value, or None if any segment is missing.
    """
    value = data
    for name in path.split(".")[1:]:
        if not name:
            continue
        value = _lookup(value, name)
        if value is _MISSING:
            return None
    return value


def execute_template(template: str, data: Any) -> str:
    """Render placeholders in template from data.

    Missing values and None render as the empty string. Never raises for
    missing keys.

    Args:
        template: Message with ``{{.Field}}`` placeholders.
        data: Mapping or object providing the values.

    Returns:
        Rendered message.
    """

    def replacer(match: re.Match) -> str:
        value = resolve_path(data, match.group(1))
        return "" if value is None else str(value)

    return _PLACEHOLDER_PATTERN.sub(replacer, template)
