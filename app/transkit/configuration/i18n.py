"""Translation engine settings."""

import json
from typing import Annotated, List

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from transkit.configuration.base import TranskitSettings


class I18nSettings(TranskitSettings):
    """Locale loading and resolution configuration.

    Environment Variables:
        I18N_LOCALES_DIR: Directory scanned for locale files (default: locales)
        I18N_DEFAULT_LOCALE: Active locale at startup (default: en)
        I18N_FALLBACK_LOCALES: Global fallback chain, comma-separated or JSON list
        I18N_LOOKUP_PARENT_LOCALES: Try "zh" after "zh-CN" misses (default: True)
        I18N_LOG_MISSING: Log a warning for every missing translation (default: False)
        I18N_MINIFY_KEY: Store translations under minified keys (default: False)
        I18N_MINIFY_KEY_LEN: Length of the hash part of a minified key (default: 24)
        I18N_MINIFY_KEY_PREFIX: Prefix prepended to minified keys (default: "")
        I18N_MINIFY_KEY_THRESH: Keys this long or shorter stay unminified (default: 127)

    Example:
        ```python
        from transkit.configuration import settings

        locales_dir = settings.i18n.locales_dir
        chain = settings.i18n.fallback_locales  # ["en"]
        ```
    """

    locales_dir: str = Field(
        default="locales",
        alias="I18N_LOCALES_DIR",
        description="Directory scanned recursively for locale files",
    )
    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Active locale at startup",
    )
    fallback_locales: Annotated[List[str], NoDecode] = Field(
        default_factory=list,
        alias="I18N_FALLBACK_LOCALES",
        description="Locales consulted, in order, when a key is missing",
    )
    lookup_parent_locales: bool = Field(
        default=True,
        alias="I18N_LOOKUP_PARENT_LOCALES",
        description="Strip region subtags (zh-CN -> zh) before using fallbacks",
    )
    log_missing: bool = Field(
        default=False,
        alias="I18N_LOG_MISSING",
        description="Log missing translations as warnings",
    )
    minify_key: bool = Field(
        default=False,
        alias="I18N_MINIFY_KEY",
        description="Store translations under minified keys",
    )
    minify_key_len: int = Field(
        default=24,
        alias="I18N_MINIFY_KEY_LEN",
        description="Length of the hash part of a minified key",
    )
    minify_key_prefix: str = Field(
        default="",
        alias="I18N_MINIFY_KEY_PREFIX",
        description="Prefix prepended to minified keys",
    )
    minify_key_thresh: int = Field(
        default=127,
        alias="I18N_MINIFY_KEY_THRESH",
        description="Keys at or below this length are left unminified",
    )

    @field_validator("fallback_locales", mode="before")
    @classmethod
    def _split_locales(cls, value):
        if isinstance(value, str):
            value = value.strip()
            if value.startswith("["):
                return json.loads(value)
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("default_locale")
    @classmethod
    def _non_empty_locale(cls, value: str) -> str:
        if not value:
            raise ValueError("default_locale must not be empty")
        return value
