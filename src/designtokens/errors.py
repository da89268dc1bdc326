from __future__ import annotations

"""Exception types raised by the designtokens core."""


class TokensError(Exception):
    """Base class for all errors raised by designtokens."""


class InvalidColorError(TokensError, ValueError):
    """Raised when a value cannot be parsed as a color."""

    def __init__(self, value: object, reason: str | None = None) -> None:
        message = f"Invalid color: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.value = value
        self.reason = reason


class MissingPaletteRoleError(TokensError, KeyError):
    """Raised when a palette lacks a role that semantic generation needs."""

    def __init__(self, role: str, available: tuple[str, ...] = ()) -> None:
        super().__init__(role)
        self.role = role
        self.available = available

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the key only.
        if self.available:
            return f"Palette role {self.role!r} not found (available: {', '.join(self.available)})"
        return f"Palette role {self.role!r} not found"


__all__ = ["TokensError", "InvalidColorError", "MissingPaletteRoleError"]
