"""Placeholder interpolation for resolved translations.

Placeholders use the ``%{name}`` syntax. Placeholders without a matching
argument are kept verbatim so a template can be filled in several passes.
"""

import re
from typing import Any, Mapping, Optional

from transkit.i18n.models import format_scalar

PLACEHOLDER_PATTERN = re.compile(r"%\{([\w.\-]+)\}")


def format_value(value: Any) -> str:
    """Render an argument value; numbers keep their natural decimal form."""
    return format_scalar(value)


def interpolate(text: str, args: Optional[Mapping[str, Any]] = None) -> str:
    """Replace ``%{name}`` placeholders with values from ``args``.

    Args:
        text: Resolved translation.
        args: Argument name -> value.

    Returns:
        Text with known placeholders replaced.

    Example:
        >>> interpolate("Hello, %{name}. Your message is: %{msg}", {"name": "Jason"})
        'Hello, Jason. Your message is: %{msg}'
    """
    if not args or "%{" not in text:
        return text

    def replace(match: re.Match) -> str:
        name = match.group(1)
        if name not in args:
            return match.group(0)
        return format_value(args[name])

    return PLACEHOLDER_PATTERN.sub(replace, text)
