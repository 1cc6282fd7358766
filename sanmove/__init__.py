"""Codec between SAN move tokens and ambiguous chess moves."""

from sanmove.codec import decode, encode
from sanmove.enums import (
    BoardState,
    CastlingSide,
    MoveAction,
    PieceColour,
    PieceKind,
    action_to_char,
    action_to_state,
    state_to_action,
)
from sanmove.exceptions import InvalidNotationError, NotAnActionError, NotationError
from sanmove.types import AmbiguousMove, CastleMove, NormalMove

__all__ = [
    "AmbiguousMove",
    "BoardState",
    "CastleMove",
    "CastlingSide",
    "InvalidNotationError",
    "MoveAction",
    "NormalMove",
    "NotAnActionError",
    "NotationError",
    "PieceColour",
    "PieceKind",
    "action_to_char",
    "action_to_state",
    "decode",
    "encode",
    "state_to_action",
]
