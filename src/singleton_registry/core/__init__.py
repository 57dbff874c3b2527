from __future__ import annotations

from .errors import DuplicateNameError, InvalidValueError, MissingNameError, RegistryError
from .naming import digest_name, is_storable, type_name
from .registry import Registry, local, root

__all__ = [
    "Registry",
    "root",
    "local",
    "RegistryError",
    "InvalidValueError",
    "DuplicateNameError",
    "MissingNameError",
    "digest_name",
    "type_name",
    "is_storable",
]
