"""File, rank and square text primitives.

Squares are plain python-chess square indices (``chess.A1`` == 0 up to
``chess.H8`` == 63); files and ranks are zero-based indices.
"""

import chess

from sanmove.exceptions import InvalidNotationError

Square = chess.Square


def file_to_char(file_index: int) -> str:
    """Convert a file index to its letter.

    Args:
        file_index: File index, 0 (a) through 7 (h).

    Returns:
        File letter (e.g., 'c' for 2).

    Raises:
        InvalidNotationError: If the index is outside 0-7.
    """
    if not 0 <= file_index <= 7:
        raise InvalidNotationError(str(file_index), "file index out of range")
    return chess.FILE_NAMES[file_index]


def rank_to_char(rank_index: int) -> str:
    """Convert a rank index to its digit.

    Args:
        rank_index: Rank index, 0 (rank 1) through 7 (rank 8).

    Returns:
        Rank digit (e.g., '1' for 0).

    Raises:
        InvalidNotationError: If the index is outside 0-7.
    """
    if not 0 <= rank_index <= 7:
        raise InvalidNotationError(str(rank_index), "rank index out of range")
    return chess.RANK_NAMES[rank_index]


def char_to_file(char: str) -> int:
    """Convert a file letter ('a'-'h') to its index."""
    if char not in chess.FILE_NAMES:
        raise InvalidNotationError(char, "not a file")
    return chess.FILE_NAMES.index(char)


def char_to_rank(char: str) -> int:
    """Convert a rank digit ('1'-'8') to its index."""
    if char not in chess.RANK_NAMES:
        raise InvalidNotationError(char, "not a rank")
    return chess.RANK_NAMES.index(char)


def square_to_text(square: Square) -> str:
    """Lowercase two-character name of a square (e.g., 'f3')."""
    if not 0 <= square <= 63:
        raise InvalidNotationError(str(square), "square index out of range")
    return chess.square_name(square)


def text_to_square(text: str) -> Square:
    """Parse a lowercase square name such as 'e4'.

    Raises:
        InvalidNotationError: If the text is not a square name.
    """
    try:
        return chess.parse_square(text)
    except ValueError as e:
        raise InvalidNotationError(text, "not a square") from e
