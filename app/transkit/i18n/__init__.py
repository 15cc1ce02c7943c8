"""i18n engine - locale loading, fallback resolution and interpolation.

Main components:
- models: Leaf, Node, MinifyPolicy, TranslateOptions
- loader: LocaleFileLoader and load_locales
- merger / flattener: per-locale tree merging and key flattening
- backends: Backend protocol and FileBackend
- minify: KeyCodec and MinifiedBackend
- registry: I18nRegistry (backend order, fallback chain, active locale)
- resolver: Resolver implementing the fallback algorithm
- interpolation: %{name} placeholder substitution
- service: TranslationService and the process-wide runtime API
"""

from transkit.i18n.backends import Backend, FileBackend
from transkit.i18n.exceptions import (
    I18nError,
    KeyCollisionError,
    LoadError,
    NotInitializedError,
)
from transkit.i18n.factory import create_registry, create_resolver
from transkit.i18n.flattener import flatten
from transkit.i18n.interpolation import interpolate
from transkit.i18n.loader import LocaleFileLoader, load_locales
from transkit.i18n.merger import merge, merge_trees
from transkit.i18n.minify import KeyCodec, MinifiedBackend, minify_key
from transkit.i18n.models import Leaf, MinifyPolicy, Node, TranslateOptions
from transkit.i18n.registry import I18nRegistry
from transkit.i18n.resolver import Resolver
from transkit.i18n.service import TranslationService

__all__ = [
    "Backend",
    "FileBackend",
    "I18nError",
    "KeyCollisionError",
    "LoadError",
    "NotInitializedError",
    "create_registry",
    "create_resolver",
    "flatten",
    "interpolate",
    "LocaleFileLoader",
    "load_locales",
    "merge",
    "merge_trees",
    "KeyCodec",
    "MinifiedBackend",
    "minify_key",
    "Leaf",
    "MinifyPolicy",
    "Node",
    "TranslateOptions",
    "I18nRegistry",
    "Resolver",
    "TranslationService",
]
