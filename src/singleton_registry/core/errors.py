from __future__ import annotations


class RegistryError(ValueError):
    """Base class for registry misuse errors."""


class InvalidValueError(RegistryError):
    """The factory passed to ``remember`` returned a scalar instead of an object."""


class DuplicateNameError(RegistryError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Instance with name '{name}' already exists.")
        self.name = name


class MissingNameError(RegistryError):
    """``make`` was called without a name and no fallback name is remembered."""

    def __init__(self) -> None:
        super().__init__("No instance name provided.")
