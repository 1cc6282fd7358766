"""Closed chess vocabularies shared by the move model and the codec."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering

from sanmove.exceptions import InvalidNotationError, NotAnActionError


@total_ordering
class OrderedEnum(Enum):
    """Enum whose members compare by declaration order."""

    def _rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() < other._rank()


class PieceColour(OrderedEnum):
    BLACK = "black"
    WHITE = "white"

    def negate(self) -> PieceColour:
        """Return the opposite colour."""
        return PieceColour.WHITE if self is PieceColour.BLACK else PieceColour.BLACK

    def __invert__(self) -> PieceColour:
        return self.negate()


class PieceKind(OrderedEnum):
    KING = "K"
    QUEEN = "Q"
    BISHOP = "B"
    KNIGHT = "N"
    ROOK = "R"
    PAWN = "P"

    def to_char(self) -> str:
        return self.value

    @classmethod
    def from_char(cls, char: str) -> PieceKind:
        """Decode an uppercase SAN piece letter.

        Args:
            char: One of 'K', 'Q', 'B', 'N', 'R', 'P'.

        Returns:
            The matching piece kind.

        Raises:
            InvalidNotationError: For any other input, lowercase included.
        """
        try:
            return cls(char)
        except ValueError as e:
            raise InvalidNotationError(char, "not a piece letter") from e

    @classmethod
    def promotable(cls) -> tuple[PieceKind, ...]:
        """Kinds a pawn may promote to."""
        return (cls.QUEEN, cls.ROOK, cls.BISHOP, cls.KNIGHT)

    @property
    def is_promotable(self) -> bool:
        return self in PieceKind.promotable()


class BoardState(OrderedEnum):
    """Status of the game after a move, based on king safety."""

    # Normal play, no restrictions on moves
    NORMAL = "normal"
    # King is attacked; only moves breaking the check are legal
    CHECK = "check"
    # No legal moves and king not attacked
    STALEMATE = "stalemate"
    # No legal moves and king attacked
    CHECKMATE = "checkmate"


class MoveAction(OrderedEnum):
    """Board state announced by a trailing glyph on a move."""

    CHECK = "+"
    CHECKMATE = "#"

    def to_char(self) -> str:
        return self.value

    @classmethod
    def from_char(cls, char: str) -> MoveAction:
        """Decode a '+' or '#' glyph.

        Raises:
            InvalidNotationError: If the character is not an action glyph.
        """
        try:
            return cls(char)
        except ValueError as e:
            raise InvalidNotationError(char, "not an action glyph") from e

    def to_board_state(self) -> BoardState:
        return BoardState.CHECK if self is MoveAction.CHECK else BoardState.CHECKMATE

    @classmethod
    def from_board_state(cls, state: BoardState) -> MoveAction:
        """Convert a board state to the action announcing it.

        Args:
            state: State reached after the move.

        Returns:
            CHECK or CHECKMATE.

        Raises:
            NotAnActionError: For NORMAL and STALEMATE, which have no glyph.
        """
        if state is BoardState.CHECK:
            return cls.CHECK
        if state is BoardState.CHECKMATE:
            return cls.CHECKMATE
        raise NotAnActionError(state)


class CastlingSide(OrderedEnum):
    KING_SIDE = "O-O"
    QUEEN_SIDE = "O-O-O"

    def to_text(self) -> str:
        """Return the PGN text for castling on this side."""
        return self.value


def action_to_state(action: MoveAction) -> BoardState:
    return action.to_board_state()


def state_to_action(state: BoardState) -> MoveAction:
    return MoveAction.from_board_state(state)


def action_to_char(action: MoveAction) -> str:
    return action.to_char()
