"""
Mode registry - decodes the mode table and indexes it by name.

The registry is built once, at import, from MODE_DEFINITIONS. After that it
only answers reads: modes are frozen models, the index is a read-only
mapping, so concurrent readers need no locking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from chuk_mcp_modes.core.pcset import chroma_from_num, chroma_to_intervals
from chuk_mcp_modes.models.mode import Mode, ModeDefinition
from chuk_mcp_modes.modes.errors import DuplicateModeKeyError
from chuk_mcp_modes.modes.table import MODE_DEFINITIONS

logger = logging.getLogger(__name__)


def to_mode(definition: ModeDefinition) -> Mode:
    """Decode one table row into a Mode."""
    chroma = chroma_from_num(definition.set_num)
    return Mode(
        mode_num=definition.mode_num,
        name=definition.name,
        chroma=chroma,
        num=definition.set_num,
        normalized=chroma,
        intervals=tuple(chroma_to_intervals(chroma)),
        alt=definition.alt,
        triad=definition.triad,
        seventh=definition.seventh,
        aliases=(definition.alias,) if definition.alias else (),
    )


class ModeRegistry:
    """
    Decoded modes plus a case-insensitive name/alias index.

    Several keys may point at the same mode ("aeolian" and "minor"),
    but one key never points at two modes.
    """

    def __init__(self, definitions: Iterable[ModeDefinition]):
        """
        Build the registry.

        Args:
            definitions: Mode table rows, in canonical order

        Raises:
            DuplicateModeKeyError: If two modes share a name or alias
        """
        self._modes = self.build(definitions)
        self._index: Mapping[str, Mode] = MappingProxyType(self.index(self._modes))
        logger.debug(f"Indexed {len(self._modes)} modes under {len(self._index)} keys")

    @staticmethod
    def build(definitions: Iterable[ModeDefinition]) -> tuple[Mode, ...]:
        """Decode every definition, keeping table order."""
        return tuple(to_mode(definition) for definition in definitions)

    @staticmethod
    def index(modes: Iterable[Mode]) -> dict[str, Mode]:
        """
        Map lowercased names and aliases to their modes.

        Raises:
            DuplicateModeKeyError: If a key is already taken by a different mode
        """
        index: dict[str, Mode] = {}
        for mode in modes:
            for key in (mode.name, *mode.aliases):
                key = key.lower()
                existing = index.get(key)
                if existing is not None and existing is not mode:
                    raise DuplicateModeKeyError(key, existing.name, mode.name)
                index[key] = mode
        return index

    @property
    def modes(self) -> tuple[Mode, ...]:
        """All modes in canonical order."""
        return self._modes

    @property
    def keys(self) -> list[str]:
        """Every name and alias the index answers to."""
        return list(self._index)

    def get(self, key: str) -> Mode | None:
        """Exact (already lowercased) index lookup."""
        return self._index.get(key)

    def __len__(self) -> int:
        return len(self._modes)

    def __contains__(self, key: object) -> bool:
        return key in self._index


REGISTRY = ModeRegistry(MODE_DEFINITIONS)
