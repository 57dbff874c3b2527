from __future__ import annotations

import builtins
import hashlib
import numbers
from typing import Any

import numpy as np

_SCALAR_TYPES: tuple[type, ...] = (bool, numbers.Number, str, bytes, bytearray, np.generic)


def digest_name(name: str) -> str:
    """Return the storage key for ``name``: the SHA-256 hex digest of its UTF-8 bytes.

    The digest is one-way; distinct names that collide share a slot.
    """
    if not isinstance(name, str):
        raise TypeError(f"name must be a str, got {type(name).__name__}")
    return hashlib.sha256(name.encode("utf-8")).hexdigest()


def type_name(value: Any) -> str:
    """Name used when an object is remembered without an explicit name.

    Accepts an instance or a class. Builtin classes keep their bare name
    (``"list"``), everything else is ``"<module>.<qualname>"``.
    """
    cls = value if isinstance(value, type) else type(value)
    module = getattr(cls, "__module__", None)
    if not module or module == builtins.__name__:
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def is_storable(value: Any) -> bool:
    """Return False for scalars (None, numbers, text, bytes, numpy scalars), True for object references."""
    if value is None:
        return False
    return not isinstance(value, _SCALAR_TYPES)
