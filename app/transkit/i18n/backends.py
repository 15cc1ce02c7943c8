"""Translation backends.

A backend is anything that can list the locales it serves and answer
``translate(locale, key)`` with a text or ``None``. ``None`` means "no entry"
and is never an error; a backend must not raise for unknown locales or keys.
"""

from pathlib import Path
from typing import Mapping, Optional, Protocol, Set, Union, runtime_checkable

from transkit.i18n.loader import IgnorePredicate, load_locales
from transkit.i18n.models import TranslationStore
from transkit.i18n.parsers import Parser


@runtime_checkable
class Backend(Protocol):
    """Protocol for translation sources (files, databases, remote services)."""

    def available_locales(self) -> Set[str]:  # pragma: no cover - typing helper
        ...

    def translate(
        self, locale: str, key: str
    ) -> Optional[str]:  # pragma: no cover - typing helper
        ...


class FileBackend:
    """Backend over an in-memory translation store built from locale files.

    Attributes:
        store: Mapping locale -> flat table.
    """

    def __init__(self, store: Optional[TranslationStore] = None):
        self.store: TranslationStore = {
            locale: dict(table) for locale, table in (store or {}).items()
        }

    @classmethod
    def from_directory(
        cls,
        root: Union[str, Path],
        ignore_if: Optional[IgnorePredicate] = None,
        parsers: Optional[Mapping[str, Parser]] = None,
    ) -> "FileBackend":
        """Build a backend from every locale file under ``root``."""
        return cls(load_locales(root, ignore_if=ignore_if, parsers=parsers))

    def available_locales(self) -> Set[str]:
        return set(self.store)

    def translate(self, locale: str, key: str) -> Optional[str]:
        table = self.store.get(locale)
        if table is None:
            return None
        return table.get(key)

    def add_translations(self, locale: str, table: Mapping[str, str]) -> None:
        """Add flat translations to a locale; existing keys are overwritten.

        Args:
            locale: Locale code.
            table: Dot-joined key -> text.
        """
        self.store.setdefault(locale, {}).update(table)

    def keys(self) -> Set[str]:
        """All keys present in any locale."""
        keys: Set[str] = set()
        for table in self.store.values():
            keys.update(table)
        return keys
