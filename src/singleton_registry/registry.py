from __future__ import annotations

"""Flat import path for the registry.

The implementation lives in `core/registry.py`.
"""

from .core.errors import DuplicateNameError, InvalidValueError, MissingNameError, RegistryError
from .core.registry import Registry, local, root

__all__ = [
    "Registry",
    "root",
    "local",
    "RegistryError",
    "InvalidValueError",
    "DuplicateNameError",
    "MissingNameError",
]
