"""Translation models for the i18n engine.

Defines the locale tree parsed from one file and the options of a single
translation request.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

# Locale code -> flat table of dot-joined key -> text
FlatTable = Dict[str, str]
TranslationStore = Dict[str, FlatTable]


@dataclass(frozen=True)
class Leaf:
    """A single translated text at the end of a key path."""

    text: str


@dataclass(frozen=True)
class Node:
    """A nested mapping of key segment -> Value.

    Attributes:
        children: Child values by key segment, in file order.
    """

    children: Mapping[str, "Value"] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.children)


Value = Union[Leaf, Node]


def format_scalar(value: Any) -> str:
    """Render a scalar as text the way it appears in locale files.

    Booleans become ``true``/``false``; numbers keep their natural decimal
    form, ``None`` becomes an empty string.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        # str() would switch to scientific notation for small exponents
        return format(value, "f")
    return str(value)


def to_value(data: Any) -> Value:
    """Convert already-parsed file content into a Value.

    Args:
        data: Output of a format parser (dicts, lists, scalars).

    Returns:
        Node for mappings, Leaf for everything else. Sequences have no
        flat-table representation and become an empty Leaf.
    """
    if isinstance(data, Mapping):
        return Node(
            {format_scalar(key): to_value(child) for key, child in data.items()}
        )
    if isinstance(data, (list, tuple, set)):
        return Leaf("")
    return Leaf(format_scalar(data))


@dataclass(frozen=True)
class MinifyPolicy:
    """Policy for building minified translation keys.

    Attributes:
        enabled: Whether stored keys are minified at all.
        length: Number of hash characters kept in a minified key.
        prefix: String prepended to every minified key.
        threshold: Keys whose length is at or below this value are kept as is.
    """

    enabled: bool = False
    length: int = 24
    prefix: str = ""
    threshold: int = 127


@dataclass(frozen=True)
class TranslateOptions:
    """Options of a single translation request.

    Attributes:
        locale: Explicit locale; overrides the active locale.
        fallback: One locale or an ordered sequence of locales tried when
            the primary locale misses.
        args: Values interpolated into ``%{name}`` placeholders.
    """

    locale: Optional[str] = None
    fallback: Union[str, Sequence[str], None] = None
    args: Mapping[str, Any] = field(default_factory=dict)

    @property
    def fallback_locales(self) -> Tuple[str, ...]:
        """Explicit fallback normalized to a tuple (empty when not given)."""
        if self.fallback is None:
            return ()
        if isinstance(self.fallback, str):
            return (self.fallback,)
        return tuple(self.fallback)
