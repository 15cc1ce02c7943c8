"""Exceptions raised by the i18n engine.

A missing translation is not an error: the key itself is returned. These
exceptions cover the failures that must stop initialization.
"""

from pathlib import Path
from typing import Iterable, Optional, Union


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            transkit.init(locales_dir="locales")
        except I18nError as e:
            logger.error("i18n_init_failed", error=str(e))
    """

    pass


class LoadError(I18nError):
    """Raised when locale files cannot be discovered or parsed.

    Example:
        >>> load_locales("broken/")
        Traceback (most recent call last):
        ...
        LoadError: Failed to load broken/en.yml: mapping values are not allowed here
    """

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to load {self.path}: {reason}")


class KeyCollisionError(I18nError):
    """Raised when two different keys minify to the same short key."""

    def __init__(self, code: str, keys: Iterable[str]):
        self.code = code
        self.keys = tuple(sorted(keys))
        super().__init__(
            f"Minified key {code!r} is shared by {', '.join(map(repr, self.keys))}"
        )


class NotInitializedError(I18nError):
    """Raised when translations are requested before transkit.init() succeeded."""

    def __init__(self, reason: Optional[str] = None):
        message = "transkit is not initialized; call transkit.init() at startup"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
