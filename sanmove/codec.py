import re

from loguru import logger

from sanmove.enums import CastlingSide, MoveAction, PieceKind
from sanmove.exceptions import InvalidNotationError
from sanmove.squares import char_to_file, char_to_rank, text_to_square
from sanmove.types import AmbiguousMove, CastleMove, NormalMove

# Digit-zero castling appears in hand-written PGN; queen side is listed first
# so the longer text always wins.
_CASTLING_TEXTS: tuple[tuple[str, CastlingSide], ...] = (
    ("O-O-O", CastlingSide.QUEEN_SIDE),
    ("0-0-0", CastlingSide.QUEEN_SIDE),
    ("O-O", CastlingSide.KING_SIDE),
    ("0-0", CastlingSide.KING_SIDE),
)

_NORMAL_MOVE_PATTERN = re.compile(
    r"""
    (?P<piece>[KQBNRP])?
    (?P<src_file>[a-h])?
    (?P<src_rank>[1-8])?
    (?P<takes>x)?
    (?P<dest>[a-h][1-8])
    (?:=(?P<promote_to>.))?
    (?P<action>[+\#])?
    """,
    re.VERBOSE,
)


def encode(move: AmbiguousMove) -> str:
    """Convert an ambiguous move to canonical SAN.

    Args:
        move: Normal or castling move.

    Returns:
        SAN text (e.g., "Nf3", "exd8=Q#", "O-O-O").
    """
    return move.to_san()


def decode(text: str) -> AmbiguousMove:
    """Parse a single SAN move token.

    The grammar is more liberal than the encoder: an explicit 'P', redundant
    full-square disambiguation and digit-zero castling are accepted, so
    encode(decode(text)) == text only holds for canonical text.

    Args:
        text: Move token such as "e4", "Qh5+", "Nbd7" or "O-O-O#".

    Returns:
        The decoded NormalMove or CastleMove.

    Raises:
        InvalidNotationError: If any part of the token is malformed or
            characters are left over. Carries the original text.
    """
    try:
        castle = _decode_castle(text)
        if castle is not None:
            return castle
        return _decode_normal(text)
    except InvalidNotationError as e:
        logger.debug(f"Rejected SAN token {text!r}: {e.reason or e}")
        if e.text == text:
            raise
        raise InvalidNotationError(text, e.reason) from e


def _split_action(text: str) -> tuple[str, MoveAction | None]:
    if text and text[-1] in "+#":
        return text[:-1], MoveAction.from_char(text[-1])
    return text, None


def _decode_castle(text: str) -> CastleMove | None:
    body, action = _split_action(text)
    for castling_text, side in _CASTLING_TEXTS:
        if body == castling_text:
            return CastleMove(side=side, action=action)
    if body.startswith(("O-O", "0-0")):
        raise InvalidNotationError(text, "malformed castling")
    return None


def _decode_normal(text: str) -> NormalMove:
    match = _NORMAL_MOVE_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidNotationError(text, "does not match SAN move grammar")

    piece = match.group("piece")
    src_file = match.group("src_file")
    src_rank = match.group("src_rank")
    promote_to = match.group("promote_to")
    action = match.group("action")

    promotion_kind = None
    if promote_to is not None:
        promotion_kind = PieceKind.from_char(promote_to)
        if not promotion_kind.is_promotable:
            raise InvalidNotationError(
                text, f"cannot promote to {promotion_kind.name.lower()}"
            )

    return NormalMove(
        piece_kind=PieceKind.from_char(piece) if piece else PieceKind.PAWN,
        src_file=char_to_file(src_file) if src_file else None,
        src_rank=char_to_rank(src_rank) if src_rank else None,
        takes=match.group("takes") is not None,
        dest=text_to_square(match.group("dest")),
        promote_to=promotion_kind,
        action=MoveAction.from_char(action) if action else None,
    )
