from __future__ import annotations

import logging
import threading
from typing import Any, Callable

from .errors import DuplicateNameError, InvalidValueError, MissingNameError
from .naming import digest_name, is_storable, type_name

logger = logging.getLogger(__name__)


def _check_name(name: object) -> None:
    # "" is the only "no name" value
    if not isinstance(name, str):
        raise TypeError(f"name must be a str, got {type(name).__name__}")


class Registry:
    """Container for object instances stored under (digested) names.

    Use :func:`root` for the process-wide shared registry and :func:`local`
    for an isolated one.

    Notes:
    - Keys are SHA-256 digests of the names, never the names themselves.
    - The last remembered name is kept as a fallback for ``make()`` without
      arguments and is consumed by the next successful lookup.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._instances: dict[str, object] = {}
        self._current = ""

    @property
    def current(self) -> str:
        with self._lock:
            return self._current

    def remember(self, factory: Callable[[], Any], name: str = "", force: bool = False) -> Registry:
        """Store the object returned by ``factory``.

        Args:
            factory: Zero-argument callable returning the object to store.
            name: Storage name. Defaults to the object's class name (see ``type_name``).
            force: Overwrite an existing entry with the same name.

        Returns:
            The registry itself, for chaining.

        Raises:
            InvalidValueError: If the factory returned a scalar value.
            DuplicateNameError: If the name is already stored and ``force`` is false.
        """
        if not callable(factory):
            raise TypeError("factory must be callable")
        _check_name(name)

        # Run user code outside the lock so a factory may use this registry too.
        obj = factory()
        if not is_storable(obj):
            raise InvalidValueError("Factory must return an object.")

        stored_name = name or type_name(obj)
        key = digest_name(stored_name)

        with self._lock:
            exists = key in self._instances
            if exists and not force:
                raise DuplicateNameError(stored_name)
            self._instances[key] = obj
            self._current = stored_name

        if exists:
            logger.debug("Replaced instance %r (%s)", stored_name, key[:12])
        else:
            logger.debug("Stored instance %r (%s)", stored_name, key[:12])
        return self

    def make(self, name: str = "") -> Any | None:
        """Return the object stored under ``name``, or ``None`` if there is none.

        Without a name, the last remembered name is used. A successful lookup
        clears that fallback.

        Raises:
            MissingNameError: If no name is given and no fallback is remembered.
        """
        _check_name(name)
        with self._lock:
            stored_name = name or self._current
            if not stored_name:
                raise MissingNameError()

            key = digest_name(stored_name)
            if key not in self._instances:
                return None

            if not name:
                logger.debug("Consumed fallback name %r", stored_name)
            self._current = ""
            return self._instances[key]

    def __repr__(self) -> str:
        with self._lock:
            return f"Registry(entries={len(self._instances)}, current={self._current!r})"


_ROOT: Registry | None = None
_ROOT_LOCK = threading.Lock()


def root() -> Registry:
    """Return the process-wide shared registry, creating it on first use."""
    global _ROOT
    if _ROOT is None:
        with _ROOT_LOCK:
            if _ROOT is None:
                _ROOT = Registry()
                logger.debug("Created shared registry")
    return _ROOT


def local() -> Registry:
    """Return a new registry that shares no state with any other."""
    reg = Registry()
    logger.debug("Created local registry")
    return reg
