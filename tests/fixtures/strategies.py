"""Hypothesis strategies for the notation vocabulary and ambiguous moves.

Generated moves are well-formed but not necessarily playable on any board.
"""

from hypothesis import strategies as st

from sanmove.enums import (
    BoardState,
    CastlingSide,
    MoveAction,
    PieceColour,
    PieceKind,
)
from sanmove.types import CastleMove, NormalMove

piece_colours = st.sampled_from(PieceColour)
piece_kinds = st.sampled_from(PieceKind)
promotable_kinds = st.sampled_from(PieceKind.promotable())
board_states = st.sampled_from(BoardState)
move_actions = st.sampled_from(MoveAction)
castling_sides = st.sampled_from(CastlingSide)

file_indices = st.integers(min_value=0, max_value=7)
rank_indices = st.integers(min_value=0, max_value=7)
squares = st.integers(min_value=0, max_value=63)


@st.composite
def normal_moves(draw):
    """Generate a normal move with a promotable (or no) promotion target."""
    return NormalMove(
        piece_kind=draw(piece_kinds),
        src_file=draw(st.none() | file_indices),
        src_rank=draw(st.none() | rank_indices),
        takes=draw(st.booleans()),
        dest=draw(squares),
        promote_to=draw(st.none() | promotable_kinds),
        action=draw(st.none() | move_actions),
    )


@st.composite
def castle_moves(draw):
    """Generate a castling move on either side, with or without a glyph."""
    return CastleMove(side=draw(castling_sides), action=draw(st.none() | move_actions))


def ambiguous_moves():
    """Generate either move variant."""
    return normal_moves() | castle_moves()
