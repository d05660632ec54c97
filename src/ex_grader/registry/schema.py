from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from attrs import field, frozen

from ex_grader.exercise import ExerciseKind
from ex_grader.scorer import ScorerProtocol
from ex_grader.validator import ValidatorProtocol

type RendererRef = object
"""Opaque reference to the UI component that renders an exercise type."""


def _as_aliases(value: str | Iterable[str]) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def _readonly_config(value: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(value or {}))


@frozen(eq=False)
class TypeDescriptor:
    """
    Grading contract of one exercise format.

    Descriptors compare by identity: every alias resolves to the very same
    object.
    """

    id: str = field(converter=str)
    """Canonical type id, unique within a registry."""

    name: str = ""
    """Human readable name."""

    aliases: tuple[str, ...] = field(default=(), converter=_as_aliases)
    """Alternative identifiers that resolve to this descriptor."""

    validator: ValidatorProtocol | None = None
    """Grading rule; the registry falls back to its default validator when unset."""

    scorer: ScorerProtocol | None = None
    """Points rule; the registry falls back to its default scorer when unset."""

    config: Mapping[str, Any] = field(factory=dict, converter=_readonly_config)
    """Per-type UI options, passed through uninterpreted."""

    renderer: RendererRef | None = None
    fallback_renderer: RendererRef | None = None

    @property
    def keys(self) -> tuple[str, ...]:
        """Every identifier this descriptor is registered under."""
        return (self.id, *self.aliases)

    @property
    def kind(self) -> ExerciseKind | None:
        """The built-in kind this descriptor implements, if any."""
        return ExerciseKind.from_id(self.id)