"""transkit - multi-locale translation resolution.

Example:
    import transkit

    transkit.init(locales_dir="locales", default_locale="en", fallback=["en"])

    transkit.t("messages.hello", name="Jason")       # "Hello, Jason!"
    transkit.set_locale("zh-CN")
    transkit.available_locales()                     # ["en", "zh-CN"]
"""

from transkit.i18n.service import (
    available_locales,
    get_locale,
    get_translation_service,
    init,
    set_locale,
    t,
    try_t,
)

__version__ = "0.1.0"

__all__ = [
    "available_locales",
    "get_locale",
    "get_translation_service",
    "init",
    "set_locale",
    "t",
    "try_t",
]
