"""Locale code helpers.

Locale codes are opaque strings compared by equality. The only structure the
engine relies on is the ``-`` subtag separator used to find parent locales.
"""

from typing import Iterable, List, Tuple

SUBTAG_SEPARATOR = "-"


def parent_locale(locale: str) -> str | None:
    """Return ``locale`` without its last subtag (``"zh-CN"`` -> ``"zh"``).

    Returns:
        The parent code, or None when ``locale`` has no subtag.
    """
    head, separator, _ = locale.rpartition(SUBTAG_SEPARATOR)
    if not separator or not head:
        return None
    return head


def with_parents(locale: str) -> List[str]:
    """``locale`` followed by its ancestors, most specific first.

    Example:
        >>> with_parents("zh-Hant-TW")
        ['zh-Hant-TW', 'zh-Hant', 'zh']
    """
    chain = [locale]
    parent = parent_locale(locale)
    while parent is not None:
        chain.append(parent)
        parent = parent_locale(parent)
    return chain


def unique(locales: Iterable[str]) -> Tuple[str, ...]:
    """Drop repeated locales while keeping first-seen order."""
    seen = []
    for locale in locales:
        if locale not in seen:
            seen.append(locale)
    return tuple(seen)
