"""Translation service and process-wide runtime API.

``TranslationService`` is a thin class facade over a Resolver, convenient for
dependency injection and tests. The module-level functions operate on the
process-wide service installed by ``init()``.

Usage:
    import transkit

    # Once, at startup
    transkit.init(locales_dir="locales", fallback=["en"])

    transkit.t("messages.hello", name="Jason")
    transkit.t("messages.hello", locale="zh-CN", name="Jason")
    transkit.set_locale("fr")

The active locale is shared by the whole process. Switching it while other
threads are translating must be sequenced by the host (for example only at
startup, or from a single UI thread).
"""

import threading
from typing import Any, List, Mapping, Optional

from transkit.i18n.backends import Backend
from transkit.i18n.exceptions import NotInitializedError
from transkit.i18n.factory import create_resolver
from transkit.i18n.registry import I18nRegistry
from transkit.i18n.resolver import Fallback, Resolver
from transkit.logging import get_module_logger

logger = get_module_logger()


class TranslationService:
    """Class-based translation service.

    All work is delegated to the underlying Resolver and its registry.
    """

    def __init__(self, resolver: Optional[Resolver] = None, **factory_kwargs):
        """Initialize translation service.

        Args:
            resolver: Optional pre-configured Resolver. If not provided, one is
                created by the factory with ``factory_kwargs``.
        """
        self._resolver = resolver or create_resolver(**factory_kwargs)

    def translate(
        self,
        key: str,
        *,
        locale: Optional[str] = None,
        fallback: Fallback = None,
        args: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> str:
        """Resolve and interpolate a translation.

        Args:
            key: Dot-joined translation key.
            locale: Explicit locale overriding the active locale.
            fallback: Locale or locales tried when the primary locale misses.
            args: Placeholder values; use this for names such as ``locale``.
            **kwargs: Further placeholder values, merged over ``args``.

        Returns:
            The translation, or ``key`` unchanged when no locale has it.
        """
        merged = {**(args or {}), **kwargs}
        return self._resolver.resolve(
            key, locale=locale, fallback=fallback, args=merged
        )

    def try_translate(
        self,
        key: str,
        *,
        locale: Optional[str] = None,
        fallback: Fallback = None,
    ) -> Optional[str]:
        """Raw translation for ``key`` or None; no interpolation, no key sentinel."""
        return self._resolver.try_resolve(key, locale=locale, fallback=fallback)

    def has_key(self, key: str, locale: str) -> bool:
        """Check whether a backend has ``key`` in exactly ``locale``."""
        return self.registry.lookup(locale, key) is not None

    def set_locale(self, locale: str) -> None:
        self.registry.set_active_locale(locale)

    def get_locale(self) -> str:
        return self.registry.active_locale

    def available_locales(self) -> List[str]:
        return self.registry.available_locales()

    def register_backend(self, backend: Backend, priority: int = 0) -> None:
        self.registry.register_backend(backend, priority=priority)

    @property
    def registry(self) -> I18nRegistry:
        return self._resolver.registry

    @property
    def resolver(self) -> Resolver:
        """Access the underlying Resolver for advanced use cases."""
        return self._resolver


# Process-wide service instance
_global_service: Optional[TranslationService] = None
_global_service_lock = threading.Lock()


def init(**factory_kwargs) -> TranslationService:
    """Load translations and install the process-wide service.

    Everything is loaded before the service is installed; when loading fails
    the previously installed service (if any) stays in place.

    Args:
        **factory_kwargs: Passed to ``create_resolver``/``create_registry``
            (``locales_dir``, ``default_locale``, ``fallback``, ``minify``,
            ``backends``, ``ignore_if``, ``parsers``, ``lookup_parent_locales``,
            ``log_missing``, ``i18n_settings``).

    Returns:
        The installed TranslationService.

    Raises:
        LoadError: If a locale file cannot be loaded.
        KeyCollisionError: If minified keys collide.
    """
    global _global_service

    service = TranslationService(**factory_kwargs)
    with _global_service_lock:
        _global_service = service
    logger.info(
        "translation_service_initialized",
        active_locale=service.get_locale(),
        available_locales=service.available_locales(),
    )
    return service


def get_translation_service() -> TranslationService:
    """Return the process-wide service.

    Raises:
        NotInitializedError: If ``init()`` has not completed.
    """
    service = _global_service
    if service is None:
        raise NotInitializedError()
    return service


def reset() -> None:
    """Drop the process-wide service.

    Primarily used for testing.
    """
    global _global_service

    with _global_service_lock:
        _global_service = None


def t(
    key: str,
    *,
    locale: Optional[str] = None,
    fallback: Fallback = None,
    args: Optional[Mapping[str, Any]] = None,
    **kwargs: Any,
) -> str:
    """Translate ``key`` with the process-wide service.

    Example:
        t("hello")                                  # active locale
        t("hello", locale="zh-CN")                  # explicit locale
        t("missing.default", locale="zh-CN", fallback="en")
        t("messages.other", count=3)                # "You have 3 messages."
    """
    return get_translation_service().translate(
        key, locale=locale, fallback=fallback, args=args, **kwargs
    )


def try_t(
    key: str,
    *,
    locale: Optional[str] = None,
    fallback: Fallback = None,
) -> Optional[str]:
    return get_translation_service().try_translate(
        key, locale=locale, fallback=fallback
    )


def set_locale(locale: str) -> None:
    """Set the process-wide active locale."""
    get_translation_service().set_locale(locale)


def get_locale() -> str:
    """Current process-wide active locale."""
    return get_translation_service().get_locale()


def available_locales() -> List[str]:
    """Sorted locales served by any backend."""
    return get_translation_service().available_locales()
