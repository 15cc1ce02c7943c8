"""Translation resolution with locale fallback.

Resolution order, first hit wins:

1. Explicit locale given: that locale (and its parent locales). On a hit
   the fallback is never consulted.
2. Explicit locale missed and an explicit fallback given: each fallback
   locale in order.
3. Explicit locale missed and no explicit fallback: the global fallback
   chain.
4. No explicit locale: the active locale (and its parent locales), then
   the explicit fallback if given, then the global fallback chain.

When nothing matches, the key itself is returned unchanged.
"""

from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from transkit.i18n.interpolation import interpolate
from transkit.i18n.locales import unique, with_parents
from transkit.i18n.models import TranslateOptions
from transkit.i18n.registry import I18nRegistry
from transkit.logging import get_module_logger

logger = get_module_logger()

Fallback = Union[str, Sequence[str], None]


class Resolver:
    """Resolves keys against an I18nRegistry.

    Attributes:
        registry: Registry providing backends, fallback chain and active locale.
        lookup_parent_locales: Try "zh" after "zh-CN" misses, before fallbacks.
        log_missing: Log a warning for every key that resolves to nothing.
    """

    def __init__(
        self,
        registry: I18nRegistry,
        lookup_parent_locales: bool = True,
        log_missing: bool = False,
    ):
        self.registry = registry
        self.lookup_parent_locales = lookup_parent_locales
        self.log_missing = log_missing

    def candidate_locales(
        self,
        locale: Optional[str] = None,
        fallback: Fallback = None,
    ) -> Tuple[str, ...]:
        """Locales tried for a request, in lookup order.

        Args:
            locale: Explicit locale, or None for the active locale.
            fallback: Explicit fallback locale(s).

        Returns:
            Ordered, de-duplicated locale codes.
        """
        explicit_fallback = TranslateOptions(fallback=fallback).fallback_locales

        if locale:
            primary = locale
            rest = explicit_fallback or self.registry.fallback_chain
        else:
            primary = self.registry.active_locale
            rest = explicit_fallback + self.registry.fallback_chain

        if self.lookup_parent_locales:
            head = with_parents(primary)
        else:
            head = [primary]
        return unique([*head, *rest])

    def try_resolve(
        self,
        key: str,
        locale: Optional[str] = None,
        fallback: Fallback = None,
    ) -> Optional[str]:
        """Find the raw (uninterpolated) translation for ``key``.

        Returns:
            The translation, or None when no candidate locale has the key.
        """
        candidates = self.candidate_locales(locale, fallback)
        for candidate in candidates:
            value = self.registry.lookup(candidate, key)
            if value is not None:
                return value

        if self.log_missing:
            logger.warning(
                "translation_missing",
                key=key,
                locale=locale or self.registry.active_locale,
                tried_locales=list(candidates),
            )
        return None

    def resolve(
        self,
        key: str,
        locale: Optional[str] = None,
        fallback: Fallback = None,
        args: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Resolve and interpolate ``key``.

        Args:
            key: Dot-joined translation key.
            locale: Explicit locale overriding the active locale.
            fallback: Locale or locales tried when the primary locale misses.
            args: Values for ``%{name}`` placeholders.

        Returns:
            The interpolated translation, or ``key`` unchanged when missing.
        """
        value = self.try_resolve(key, locale=locale, fallback=fallback)
        if value is None:
            return key
        return interpolate(value, args)

    def resolve_options(self, key: str, options: TranslateOptions) -> str:
        """Resolve ``key`` using a TranslateOptions bundle."""
        return self.resolve(
            key,
            locale=options.locale,
            fallback=options.fallback,
            args=options.args,
        )
