from __future__ import annotations

import logging

from .core import (
    DuplicateNameError,
    InvalidValueError,
    MissingNameError,
    Registry,
    RegistryError,
    digest_name,
    is_storable,
    local,
    root,
    type_name,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

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
    "__version__",
]
