from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sanmove.enums import BoardState


class NotationError(ValueError):
    """Base exception for all notation errors."""

    pass


class InvalidNotationError(NotationError):
    """Text is not valid SAN (e.g., 'Kx9', 'e8=K' or a stray character)."""

    def __init__(self, text: str, reason: str | None = None) -> None:
        self.text = text
        self.reason = reason
        message = f"Invalid notation: '{text}'"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class NotAnActionError(NotationError):
    """Board state has no move-ending glyph (normal play or stalemate)."""

    def __init__(self, state: BoardState) -> None:
        self.state = state
        super().__init__(f"Board state {state.name} is not a move action")
