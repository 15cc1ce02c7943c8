"""Minified translation keys.

Long keys (typically whole source sentences used as keys) can be stored under
a short deterministic code: ``prefix + base62(blake2b(key))[:length]``. Keys at
or below the policy threshold are stored unchanged.

The codec is built once from every key known at load time and refuses to
build when two keys would share a code.
"""

import hashlib
from typing import Dict, Iterable, Mapping, Optional, Set

from transkit.i18n.backends import Backend
from transkit.i18n.exceptions import KeyCollisionError
from transkit.i18n.models import FlatTable, MinifyPolicy, TranslationStore
from transkit.logging import get_module_logger

logger = get_module_logger()

BASE62_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

_DIGEST_SIZE = 32
# Characters needed to render a 256-bit digest in base62
MAX_KEY_LENGTH = 43


def base62(number: int, width: int = 0) -> str:
    """Render a non-negative integer in base62, left-padded to ``width``."""
    if number < 0:
        raise ValueError("base62 expects a non-negative integer")
    digits = []
    while number:
        number, remainder = divmod(number, 62)
        digits.append(BASE62_ALPHABET[remainder])
    encoded = "".join(reversed(digits)) or BASE62_ALPHABET[0]
    return encoded.rjust(width, BASE62_ALPHABET[0])


def minify_key(key: str, policy: MinifyPolicy) -> str:
    """Return the minified form of ``key`` under ``policy``.

    Args:
        key: Original translation key.
        policy: Minification policy.

    Returns:
        The key unchanged when minification is off or the key is short,
        otherwise ``policy.prefix`` followed by ``policy.length`` hash characters.
    """
    if not policy.enabled or len(key) <= policy.threshold:
        return key
    if not 0 < policy.length <= MAX_KEY_LENGTH:
        raise ValueError(
            f"minify key length must be in 1..{MAX_KEY_LENGTH}, got {policy.length}"
        )
    digest = hashlib.blake2b(key.encode("utf-8"), digest_size=_DIGEST_SIZE).digest()
    rendered = base62(int.from_bytes(digest, "big"), width=MAX_KEY_LENGTH)
    return f"{policy.prefix}{rendered[: policy.length]}"


class KeyCodec:
    """Bidirectional original key <-> minified key table.

    Attributes:
        policy: Policy the table was built with.
    """

    def __init__(self, policy: MinifyPolicy):
        self.policy = policy
        self._encode: Dict[str, str] = {}
        self._decode: Dict[str, str] = {}

    @classmethod
    def build(cls, keys: Iterable[str], policy: MinifyPolicy) -> "KeyCodec":
        """Build the table for every key known at load time.

        Args:
            keys: Original keys.
            policy: Minification policy.

        Returns:
            KeyCodec covering ``keys``.

        Raises:
            KeyCollisionError: If two distinct keys map to the same code.
        """
        codec = cls(policy)
        for key in sorted(set(keys)):
            code = minify_key(key, policy)
            owner = codec._decode.get(code)
            if owner is not None and owner != key:
                logger.error(
                    "minify_key_collision",
                    code=code,
                    keys=sorted([owner, key]),
                )
                raise KeyCollisionError(code, [owner, key])
            codec._encode[key] = code
            codec._decode[code] = key

        logger.info(
            "key_codec_built",
            key_count=len(codec._encode),
            minified_count=sum(1 for k, c in codec._encode.items() if k != c),
        )
        return codec

    def encode(self, key: str) -> str:
        """Code for ``key``; keys unknown at build time are minified on the fly."""
        code = self._encode.get(key)
        if code is None:
            code = minify_key(key, self.policy)
        return code

    def decode(self, code: str) -> str:
        """Original key for ``code``; unknown codes are returned unchanged."""
        return self._decode.get(code, code)

    def minify_table(self, table: Mapping[str, str]) -> FlatTable:
        """Re-key a flat table by code."""
        return {self.encode(key): text for key, text in table.items()}

    def minify_store(self, store: TranslationStore) -> TranslationStore:
        return {locale: self.minify_table(table) for locale, table in store.items()}

    def __len__(self) -> int:
        return len(self._encode)

    def __contains__(self, key: object) -> bool:
        return key in self._encode


class MinifiedBackend:
    """Backend whose store is keyed by minified codes.

    Lookups arrive with original keys and are encoded right before
    delegating, so callers never see minified keys.
    """

    def __init__(self, backend: Backend, codec: KeyCodec):
        self.backend = backend
        self.codec = codec

    def available_locales(self) -> Set[str]:
        return self.backend.available_locales()

    def translate(self, locale: str, key: str) -> Optional[str]:
        return self.backend.translate(locale, self.codec.encode(key))
