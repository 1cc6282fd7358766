from functools import total_ordering
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from sanmove.enums import CastlingSide, MoveAction, PieceKind
from sanmove.squares import (
    Square,
    file_to_char,
    rank_to_char,
    square_to_text,
    text_to_square,
)


def _optional_key(value: Any) -> tuple:
    # Absent values sort before present ones
    return (0,) if value is None else (1, value)


@total_ordering
class _MoveBase(BaseModel):
    """Shared behaviour of both ambiguous move variants.

    Moves are immutable value objects: equal when their fields are equal,
    hashable, and ordered lexicographically by field declaration order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    def sort_key(self) -> tuple:
        raise NotImplementedError

    def to_san(self) -> str:
        raise NotImplementedError

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _MoveBase):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return self.to_san()


class NormalMove(_MoveBase):
    """Non-castling move as written in SAN, before board resolution.

    Promotion targets and promotion ranks are not checked here; the decoder
    rejects non-promotable targets and board legality is left to the caller.
    """

    kind: Literal["normal"] = "normal"
    piece_kind: PieceKind
    # Disambiguation, independently optional
    src_file: int | None = Field(default=None, ge=0, le=7)
    src_rank: int | None = Field(default=None, ge=0, le=7)
    takes: bool = False
    dest: Square = Field(ge=0, le=63)
    promote_to: PieceKind | None = None
    action: MoveAction | None = None

    @field_validator("dest", mode="before")
    @classmethod
    def parse_square_name(cls, v: Any) -> Any:
        """Accept square names such as 'e4' as well as square indices.

        Args:
            v: Raw destination value.

        Returns:
            Square index, or the untouched value for non-string input.

        Raises:
            ValidationError: If a string is not a square name (pydantic wraps
                the InvalidNotationError raised while parsing it).
        """
        if isinstance(v, str):
            return text_to_square(v)
        return v

    def sort_key(self) -> tuple:
        return (
            0,
            self.piece_kind,
            _optional_key(self.src_file),
            _optional_key(self.src_rank),
            self.takes,
            self.dest,
            _optional_key(self.promote_to),
            _optional_key(self.action),
        )

    def to_san(self) -> str:
        """Convert to SAN text, e.g. 'Ncxf3' or 'exd8=Q#'."""
        parts = []
        if self.piece_kind is not PieceKind.PAWN:
            parts.append(self.piece_kind.to_char())
        if self.src_file is not None:
            parts.append(file_to_char(self.src_file))
        if self.src_rank is not None:
            parts.append(rank_to_char(self.src_rank))
        if self.takes:
            parts.append("x")
        parts.append(square_to_text(self.dest))
        if self.promote_to is not None:
            parts.append("=" + self.promote_to.to_char())
        if self.action is not None:
            parts.append(self.action.to_char())
        return "".join(parts)


class CastleMove(_MoveBase):
    """Castling move, with the check/checkmate glyph it was written with."""

    kind: Literal["castle"] = "castle"
    side: CastlingSide
    action: MoveAction | None = None

    def sort_key(self) -> tuple:
        return (1, self.side, _optional_key(self.action))

    def to_san(self) -> str:
        san = self.side.to_text()
        if self.action is not None:
            san += self.action.to_char()
        return san


AmbiguousMove = Annotated[NormalMove | CastleMove, Field(discriminator="kind")]

# Validates and serialises either variant, e.g. when moves travel as JSON
ambiguous_move_adapter: TypeAdapter[AmbiguousMove] = TypeAdapter(AmbiguousMove)
