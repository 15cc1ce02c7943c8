"""Factory functions for creating i18n components.

Builds the file backend, key codec, registry and resolver from explicit
arguments, falling back to configuration for anything not given.
"""

from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import structlog

from transkit.configuration import I18nSettings, settings as app_settings
from transkit.i18n.backends import Backend, FileBackend
from transkit.i18n.loader import IgnorePredicate, load_locales
from transkit.i18n.minify import KeyCodec, MinifiedBackend
from transkit.i18n.models import MinifyPolicy
from transkit.i18n.parsers import Parser
from transkit.i18n.registry import I18nRegistry
from transkit.i18n.resolver import Resolver

logger = structlog.get_logger()

BackendEntry = Union[Backend, Tuple[Backend, int]]


def minify_policy_from_settings(i18n_settings: I18nSettings) -> MinifyPolicy:
    """Build a MinifyPolicy from the I18N_MINIFY_* settings."""
    return MinifyPolicy(
        enabled=i18n_settings.minify_key,
        length=i18n_settings.minify_key_len,
        prefix=i18n_settings.minify_key_prefix,
        threshold=i18n_settings.minify_key_thresh,
    )


def create_file_backend(
    locales_dirs: Union[str, Path, Sequence[Union[str, Path]]],
    minify: Optional[MinifyPolicy] = None,
    ignore_if: Optional[IgnorePredicate] = None,
    parsers: Optional[Mapping[str, Parser]] = None,
) -> Backend:
    """Load locale files and wrap them in a backend.

    Several directories are loaded in order and merged per locale at the
    flat-table level; later directories win.

    Args:
        locales_dirs: One directory or an ordered list of directories.
        minify: Minification policy; a MinifiedBackend is returned when enabled.
        ignore_if: Predicate on root-relative paths excluding files.
        parsers: Extension -> parser table.

    Raises:
        LoadError: If any directory or file fails to load.
        KeyCollisionError: If minified keys collide.
    """
    if isinstance(locales_dirs, (str, Path)):
        locales_dirs = [locales_dirs]

    backend = FileBackend()
    for locales_dir in locales_dirs:
        store = load_locales(locales_dir, ignore_if=ignore_if, parsers=parsers)
        for locale, table in store.items():
            backend.add_translations(locale, table)

    if minify is None or not minify.enabled:
        return backend

    codec = KeyCodec.build(backend.keys(), minify)
    return MinifiedBackend(FileBackend(codec.minify_store(backend.store)), codec)


def _normalize_backends(backends: Iterable[BackendEntry]) -> List[Tuple[Backend, int]]:
    normalized = []
    for entry in backends:
        if isinstance(entry, tuple):
            backend, priority = entry
        else:
            backend, priority = entry, 0
        normalized.append((backend, priority))
    return normalized


def create_registry(
    locales_dir: Union[str, Path, Sequence[Union[str, Path]], None] = None,
    default_locale: Optional[str] = None,
    fallback: Union[str, Sequence[str], None] = None,
    minify: Optional[MinifyPolicy] = None,
    backends: Iterable[BackendEntry] = (),
    ignore_if: Optional[IgnorePredicate] = None,
    parsers: Optional[Mapping[str, Parser]] = None,
    i18n_settings: Optional[I18nSettings] = None,
) -> I18nRegistry:
    """Create a registry with the file backend and any external backends.

    Args:
        locales_dir: Locale directory or directories (default: I18N_LOCALES_DIR).
        default_locale: Initial active locale (default: I18N_DEFAULT_LOCALE).
        fallback: Global fallback chain (default: I18N_FALLBACK_LOCALES).
        minify: Minification policy (default: from I18N_MINIFY_* settings).
        backends: Extra backends, each a Backend or a (Backend, priority) pair.
        ignore_if: Predicate on root-relative paths excluding files.
        parsers: Extension -> parser table.
        i18n_settings: Settings used for defaults (default: app settings).

    Returns:
        Fully loaded I18nRegistry.
    """
    config = i18n_settings or app_settings.i18n

    if locales_dir is None:
        locales_dir = config.locales_dir
    if default_locale is None:
        default_locale = config.default_locale
    if fallback is None:
        fallback = config.fallback_locales
    if isinstance(fallback, str):
        fallback = [fallback]
    if minify is None:
        minify = minify_policy_from_settings(config)

    file_backend = create_file_backend(
        locales_dir, minify=minify, ignore_if=ignore_if, parsers=parsers
    )
    registry = I18nRegistry(
        default_locale=default_locale,
        fallback=fallback,
        file_backend=file_backend,
    )
    for backend, priority in _normalize_backends(backends):
        registry.register_backend(backend, priority=priority)

    logger.info(
        "registry_created",
        default_locale=default_locale,
        fallback=list(fallback),
        minify=minify.enabled,
        available_locales=registry.available_locales(),
    )
    return registry


def create_resolver(
    registry: Optional[I18nRegistry] = None,
    lookup_parent_locales: Optional[bool] = None,
    log_missing: Optional[bool] = None,
    i18n_settings: Optional[I18nSettings] = None,
    **registry_kwargs,
) -> Resolver:
    """Create a resolver, building the registry when none is given.

    Usage:
        # Use defaults from configuration
        resolver = create_resolver()

        # Custom directory and fallback chain
        resolver = create_resolver(locales_dir="locales", fallback=["en"])
    """
    config = i18n_settings or app_settings.i18n
    if registry is None:
        registry = create_registry(i18n_settings=config, **registry_kwargs)
    return Resolver(
        registry,
        lookup_parent_locales=(
            config.lookup_parent_locales
            if lookup_parent_locales is None
            else lookup_parent_locales
        ),
        log_missing=config.log_missing if log_missing is None else log_missing,
    )
