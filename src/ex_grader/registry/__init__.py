from __future__ import annotations

from .builtin import BUILTIN_TYPES, create_registry
from .exceptions import (
    AliasCollisionError,
    InvalidDescriptorError,
    RegistryError,
    RegistryFrozenError,
)
from .main import ExerciseRegistry, normalize_type_id
from .schema import RendererRef, TypeDescriptor

__all__ = [
    "BUILTIN_TYPES",
    "AliasCollisionError",
    "ExerciseRegistry",
    "InvalidDescriptorError",
    "RegistryError",
    "RegistryFrozenError",
    "RendererRef",
    "TypeDescriptor",
    "create_registry",
    "normalize_type_id",
]
