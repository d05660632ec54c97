from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Final

from attrs import define, field
from loguru import logger

from ex_grader.exercise import ExerciseKind
from ex_grader.scorer import ScorerProtocol
from ex_grader.scorer.builtin import StandardScorer
from ex_grader.validator import ValidatorProtocol
from ex_grader.validator.builtin import default_validator

from .exceptions import (
    AliasCollisionError,
    InvalidDescriptorError,
    RegistryFrozenError,
)
from .schema import RendererRef, TypeDescriptor

_SEPARATORS: Final = re.compile(r"[-_\s]")


def normalize_type_id(type_id: str) -> str:
    """Lowercase and drop hyphens, underscores and whitespace."""
    return _SEPARATORS.sub("", type_id.lower())


@define
class ExerciseRegistry:
    """
    Lookup table from exercise type identifiers to their grading contract.

    Build it once (see `create_registry`), freeze it, then share it: after
    `freeze()` the registry is read-only and safe to query from any thread.

    Identifiers are resolved in three tiers:
        1. exact match on a registered id or alias;
        2. match on the normalized form (see `normalize_type_id`), so
           `"Multiple-Choice"` finds `multipleChoice`;
        3. fuzzy fallback: the first registered key, in registration order,
           whose normalized form contains the normalized input or is
           contained in it. This is a heuristic; short keys may match
           unrelated input.
    """

    fallback_validator: ValidatorProtocol = field(default=default_validator)
    """Validator handed out for unknown types or descriptors without one."""

    fallback_scorer: ScorerProtocol = field(factory=StandardScorer)
    """Scorer handed out for unknown types or descriptors without one."""

    _keys: dict[str, TypeDescriptor] = field(init=False, factory=dict)
    _normalized: dict[str, TypeDescriptor] = field(init=False, factory=dict)
    _frozen: bool = field(init=False, default=False)

    def register(self, descriptor: TypeDescriptor, *, replace: bool = False) -> None:
        """
        Register a descriptor under its id and every alias.

        Keys are compared in normalized form, so `"multiple-choice"` and
        `"multiple_choice"` are the same key. Registering the same descriptor
        again is a no-op.

        Args:
            descriptor: The descriptor to add.
            replace: Take over keys owned by other descriptors instead of
                failing.

        Raises:
            RegistryFrozenError: if the registry was frozen.
            InvalidDescriptorError: if the id is empty or a key normalizes to
                an empty string.
            AliasCollisionError: if a key belongs to a different descriptor
                and `replace` is false.
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register {descriptor.id!r}: registry is frozen"
            )
        if not descriptor.id:
            raise InvalidDescriptorError("Exercise type must have a non-empty id")

        normalized_keys: dict[str, str] = {}
        for key in descriptor.keys:
            normalized = normalize_type_id(key)
            if not normalized:
                raise InvalidDescriptorError(
                    f"Key {key!r} of {descriptor.id!r} normalizes to an empty id"
                )
            existing = self._normalized.get(normalized)
            if existing is not None and existing is not descriptor and not replace:
                raise AliasCollisionError(key, existing.id, descriptor.id)
            normalized_keys[key] = normalized

        taken = set(normalized_keys.values())
        for key, owner in self._keys.items():
            if owner is not descriptor and normalize_type_id(key) in taken:
                logger.warning(
                    "Key {!r} moves from {!r} to {!r}", key, owner.id, descriptor.id
                )
                self._keys[key] = descriptor

        for key, normalized in normalized_keys.items():
            self._keys[key] = descriptor
            self._normalized[normalized] = descriptor

        logger.debug(
            "Registered exercise type {} with aliases {}",
            descriptor.id,
            list(descriptor.aliases),
        )

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, type_id: str | None) -> TypeDescriptor | None:
        """Resolve an identifier to its descriptor, or `None` if nothing matches."""
        if not isinstance(type_id, str) or not type_id:
            return None

        if (descriptor := self._keys.get(type_id)) is not None:
            return descriptor

        normalized = normalize_type_id(type_id)
        if not normalized:
            return None

        if (descriptor := self._normalized.get(normalized)) is not None:
            logger.debug("Resolved {!r} to {} by normalized id", type_id, descriptor.id)
            return descriptor

        for key, descriptor in self._keys.items():
            candidate = normalize_type_id(key)
            if candidate in normalized or normalized in candidate:
                logger.debug(
                    "Resolved {!r} to {} by fuzzy match on {!r}",
                    type_id,
                    descriptor.id,
                    key,
                )
                return descriptor

        logger.debug("No exercise type matches {!r}", type_id)
        return None

    def resolve_kind(self, type_id: str | None) -> ExerciseKind | None:
        """Parse a raw identifier into a built-in kind."""
        descriptor = self.get(type_id)
        return descriptor.kind if descriptor is not None else None

    def get_renderer(self, type_id: str | None) -> RendererRef | None:
        descriptor = self.get(type_id)
        if descriptor is None:
            return None
        return descriptor.renderer or descriptor.fallback_renderer

    def get_validator(self, type_id: str | None) -> ValidatorProtocol:
        descriptor = self.get(type_id)
        if descriptor is None or descriptor.validator is None:
            return self.fallback_validator
        return descriptor.validator

    def get_scorer(self, type_id: str | None) -> ScorerProtocol:
        descriptor = self.get(type_id)
        if descriptor is None or descriptor.scorer is None:
            return self.fallback_scorer
        return descriptor.scorer

    def get_config(self, type_id: str | None) -> dict[str, Any]:
        """A copy of the type's configuration; empty for unknown types."""
        descriptor = self.get(type_id)
        config: Mapping[str, Any] = descriptor.config if descriptor else {}
        return dict(config)

    def get_all_types(self) -> list[TypeDescriptor]:
        """Distinct descriptors, in registration order."""
        return list({id(d): d for d in self._keys.values()}.values())

    def __contains__(self, type_id: object) -> bool:
        return isinstance(type_id, str) and self.get(type_id) is not None
