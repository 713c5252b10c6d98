"""
Mode lookup - the query surface over the registry.

mode() accepts a plain name, a mapping with a "name" key, or anything with a
`name` attribute (a Mode, a Scale, a user object). Internally that becomes
one of two query variants:

    ByName("Dorian")       -> lowercased index lookup
    ByEntity(some_object)  -> read .name once, then ByName

ByEntity never recurses: if the extracted name is itself an object, the
lookup misses. Misses return NO_MODE, never raise.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from chuk_mcp_modes.constants import Step
from chuk_mcp_modes.models.mode import NO_MODE, Mode
from chuk_mcp_modes.modes.registry import REGISTRY
from chuk_mcp_modes.modes.table import MODE_NAMES, MODE_STEPS


class Named(Protocol):
    """Anything carrying a name."""

    @property
    def name(self) -> str: ...


@dataclass(frozen=True)
class ByName:
    """Look a mode up by name or alias (case-insensitive)."""

    name: str


@dataclass(frozen=True)
class ByEntity:
    """Look a mode up by the name of another object or mapping."""

    ref: Any

    def to_name(self) -> ByName | None:
        if isinstance(self.ref, Mapping):
            name = self.ref.get("name")
        else:
            name = getattr(self.ref, "name", None)
        return ByName(name) if isinstance(name, str) else None


ModeQuery = ByName | ByEntity


def as_query(query: object) -> ModeQuery | None:
    """Classify a raw mode() argument; None when it can't name a mode."""
    if isinstance(query, (ByName, ByEntity)):
        return query
    if isinstance(query, str):
        return ByName(query)
    if isinstance(query, Mapping) and "name" in query:
        return ByEntity(query)
    if query is not None and hasattr(query, "name"):
        return ByEntity(query)
    return None


def mode(query: str | Named | ModeQuery | None) -> Mode:
    """
    Get a mode by name, alias, or named object.

    Example:
        mode("Dorian") is mode("dorian")
        mode("minor") is mode("aeolian")
        mode("xyz") is NO_MODE
    """
    resolved = as_query(query)
    if isinstance(resolved, ByEntity):
        resolved = resolved.to_name()
    if isinstance(resolved, ByName) and isinstance(resolved.name, str):
        found = REGISTRY.get(resolved.name.lower())
        if found is not None:
            return found
    return NO_MODE


def entries() -> list[Mode]:
    """All seven modes in canonical order (a new list on every call)."""
    return list(REGISTRY.modes)


def mode_names() -> list[str]:
    """Canonical mode names, ionian to locrian."""
    return list(MODE_NAMES)


def mode_steps(query: str | Named | ModeQuery | None) -> list[Step]:
    """
    Whole/half step pattern of a mode, or an empty list if unknown.

    Example:
        mode_steps("dorian")  # => [W, H, W, W, W, H, W]
    """
    found = mode(query)
    return list(MODE_STEPS.get(found.name, ()))
