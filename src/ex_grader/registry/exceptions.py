from __future__ import annotations


class RegistryError(Exception):
    """Base exception for the registry module."""


class InvalidDescriptorError(RegistryError):
    """Raised when a descriptor has an empty id or an alias that normalizes to nothing."""


class AliasCollisionError(RegistryError):
    """Raised when a type id or alias is already taken by a different descriptor."""

    def __init__(self, key: str, existing_id: str, new_id: str) -> None:
        super().__init__(
            f"Type key {key!r} of {new_id!r} is already registered for {existing_id!r}"
        )
        self.key = key
        self.existing_id = existing_id
        self.new_id = new_id


class RegistryFrozenError(RegistryError):
    """Raised when registering into a registry that has been frozen."""
