"""
Mode errors.

Both derive from ValueError, matching how the core primitives report
malformed input.
"""

from chuk_mcp_modes.constants import ErrorMessages


class UnknownModeError(ValueError):
    """A mode name has no entry in the per-degree chord table."""

    def __init__(self, name: str) -> None:
        super().__init__(ErrorMessages.UNKNOWN_MODE.format(name=name))
        self.name = name


class DuplicateModeKeyError(ValueError):
    """Two different modes claim the same name or alias."""

    def __init__(self, key: str, existing: str, name: str) -> None:
        super().__init__(
            ErrorMessages.DUPLICATE_MODE_KEY.format(key=key, existing=existing, name=name)
        )
        self.key = key
