"""Backend registry and active-locale state.

Holds the ordered list of backends, the global fallback chain and the
process-wide active locale. Only the resolver reads from it.
"""

import threading
from typing import Iterable, List, Optional, Set, Tuple

from transkit.i18n.backends import Backend, FileBackend
from transkit.logging import get_module_logger

logger = get_module_logger()

DEFAULT_LOCALE = "en"


class I18nRegistry:
    """Registry of translation backends.

    Lookup order: externally registered backends by descending priority
    (ties in registration order), then the built-in file backend.

    The active locale is a single shared cell. The lock makes every read and
    write atomic; a host switching locales while other threads resolve must
    still sequence the switch itself.

    Attributes:
        file_backend: Built-in backend over the loaded locale files.
    """

    def __init__(
        self,
        default_locale: str = DEFAULT_LOCALE,
        fallback: Iterable[str] = (),
        file_backend: Optional[Backend] = None,
    ):
        """Initialize the registry.

        Args:
            default_locale: Initial active locale.
            fallback: Global fallback chain, in lookup order.
            file_backend: Built-in backend consulted after registered ones.

        Raises:
            ValueError: If ``default_locale`` is empty.
        """
        if not default_locale:
            raise ValueError("Active locale must be a non-empty string")
        self.file_backend: Backend = (
            file_backend if file_backend is not None else FileBackend()
        )
        self._fallback: Tuple[str, ...] = tuple(fallback)
        self._active_locale = default_locale
        # (priority, registration sequence, backend)
        self._external: List[Tuple[int, int, Backend]] = []
        self._sequence = 0
        self._lock = threading.Lock()

    @property
    def fallback_chain(self) -> Tuple[str, ...]:
        return self._fallback

    @property
    def active_locale(self) -> str:
        with self._lock:
            return self._active_locale

    def set_active_locale(self, locale: str) -> None:
        """Set the process-wide active locale.

        Args:
            locale: Locale code; does not need to be loaded, missing locales
                simply resolve through the fallback chain.

        Raises:
            ValueError: If ``locale`` is empty.
        """
        if not locale:
            raise ValueError("Active locale must be a non-empty string")
        with self._lock:
            previous = self._active_locale
            self._active_locale = locale
        logger.info("active_locale_set", locale=locale, previous=previous)

    def register_backend(self, backend: Backend, priority: int = 0) -> None:
        """Register an external backend, consulted before the file backend.

        Args:
            backend: Object implementing the Backend protocol.
            priority: Higher values are consulted first.

        Raises:
            TypeError: If ``backend`` does not implement the Backend protocol.
        """
        if not isinstance(backend, Backend):
            raise TypeError(
                f"{type(backend).__name__} does not implement the Backend protocol"
            )
        with self._lock:
            self._external.append((priority, self._sequence, backend))
            self._sequence += 1
            self._external.sort(key=lambda entry: (-entry[0], entry[1]))
        logger.info(
            "backend_registered",
            backend=type(backend).__name__,
            priority=priority,
        )

    def unregister_backend(self, backend: Backend) -> None:
        """Remove a previously registered backend.

        Raises:
            KeyError: If ``backend`` is not registered.
        """
        with self._lock:
            for index, (_, _, registered) in enumerate(self._external):
                if registered is backend:
                    del self._external[index]
                    break
            else:
                raise KeyError(f"Backend {type(backend).__name__} is not registered")
        logger.info("backend_unregistered", backend=type(backend).__name__)

    def backends(self) -> List[Backend]:
        """Backends in lookup order, file backend last."""
        with self._lock:
            ordered = [backend for _, _, backend in self._external]
        ordered.append(self.file_backend)
        return ordered

    def lookup(self, locale: str, key: str) -> Optional[str]:
        """Ask each backend in order; the first non-None answer wins.

        An empty string is a translation, not a miss. Exceptions raised by a
        backend propagate to the caller.
        """
        for backend in self.backends():
            value = backend.translate(locale, key)
            if value is not None:
                return value
        return None

    def available_locales(self) -> List[str]:
        """Sorted union of the locales served by every backend."""
        locales: Set[str] = set()
        for backend in self.backends():
            locales.update(backend.available_locales())
        return sorted(locales)

    def clear(self) -> None:
        """Remove all external backends.

        Primarily used for testing.
        """
        with self._lock:
            self._external.clear()
        logger.debug("backend_registry_cleared")
