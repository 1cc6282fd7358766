"""Shared test fixtures and utilities for the test suite."""

from pathlib import Path

import chess
import pytest
from dotenv import load_dotenv

# Load environment variables from .env file for tests
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

from sanmove.enums import CastlingSide, MoveAction, PieceKind  # noqa: E402
from sanmove.types import CastleMove, NormalMove  # noqa: E402


@pytest.fixture
def canonical_tokens():
    """SAN tokens paired with the moves they decode to.

    Every token is canonical, so encoding the move gives the token back.
    """
    return {
        "e4": NormalMove(piece_kind=PieceKind.PAWN, dest=chess.E4),
        "Nf3": NormalMove(piece_kind=PieceKind.KNIGHT, dest=chess.F3),
        "Qh5+": NormalMove(
            piece_kind=PieceKind.QUEEN, dest=chess.H5, action=MoveAction.CHECK
        ),
        "Ncxf3": NormalMove(
            piece_kind=PieceKind.KNIGHT, src_file=2, takes=True, dest=chess.F3
        ),
        "R1e2": NormalMove(piece_kind=PieceKind.ROOK, src_rank=0, dest=chess.E2),
        "Qh4e1": NormalMove(
            piece_kind=PieceKind.QUEEN, src_file=7, src_rank=3, dest=chess.E1
        ),
        "exd8=Q#": NormalMove(
            piece_kind=PieceKind.PAWN,
            src_file=4,
            takes=True,
            dest=chess.D8,
            promote_to=PieceKind.QUEEN,
            action=MoveAction.CHECKMATE,
        ),
        "a1=N": NormalMove(
            piece_kind=PieceKind.PAWN, dest=chess.A1, promote_to=PieceKind.KNIGHT
        ),
        "Kxh8": NormalMove(piece_kind=PieceKind.KING, takes=True, dest=chess.H8),
        "O-O": CastleMove(side=CastlingSide.KING_SIDE),
        "O-O-O": CastleMove(side=CastlingSide.QUEEN_SIDE),
        "O-O+": CastleMove(side=CastlingSide.KING_SIDE, action=MoveAction.CHECK),
        "O-O-O#": CastleMove(
            side=CastlingSide.QUEEN_SIDE, action=MoveAction.CHECKMATE
        ),
    }


@pytest.fixture
def malformed_tokens():
    """Tokens the decoder must reject as a whole."""
    return [
        "",
        "Kx9",
        "e9",
        "i4",
        "Ze4",
        "ke4",
        "e8=K",
        "e8=P",
        "e8=q",
        "e8=",
        "e4!",
        "e4 ",
        " e4",
        "e4++",
        "Nf3x",
        "O-O-O-O",
        "O-O-",
        "o-o",
        "O-O+#",
        "Nf",
    ]
