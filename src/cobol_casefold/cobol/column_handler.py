"""
COBOL Column Handler - Fixed-format card reading and classification.

COBOL fixed-column format:
- Columns 1-6:  Sequence number area
- Column 7:     Indicator area (' ', '-', '*', '$', or '/')
- Columns 8-72: Area A and Area B (the margins)
- Columns 73+:  Comment area (free text, any length)

A card holds at most the first 72 columns of a physical line. The comment
area and the line terminator are left in the input stream for the echo
steps to copy verbatim.
"""

from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, List, Optional


class LineKind(Enum):
    """Kinds of cards, derived from the indicator and the margin text."""

    EMPTY = "empty"  # Nothing before the line terminator
    NORMAL = "normal"  # Code line
    CONTINUATION = "continuation"  # Continuation of previous line
    COMMENT = "comment"  # Comment line, printed verbatim
    DEBUG = "debug"  # Debugging line, folded like code
    COMMENT_PARAGRAPH = "comment_paragraph"  # AUTHOR. and friends


class IndicatorType(Enum):
    """COBOL column 7 indicator types."""

    BLANK = b" "  # Normal code line
    CONTINUATION = b"-"  # Continuation of previous line
    COMMENT = b"*"  # Comment line
    COMPILER_COMMENT = b"$"  # Comment line
    DEBUG = b"/"  # Debugging line


# Column position constants (0-indexed)
SEQUENCE_START = 0  # Column 1
INDICATOR_COL = 6  # Column 7
MARGIN_START = 7  # Column 8
COMMENT_AREA_START = 72  # Column 73
CARD_SIZE = COMMENT_AREA_START

CR = 0x0D
LF = 0x0A

# Documentation paragraphs whose text after the header is free-form
COMMENT_PARAGRAPHS: List[bytes] = [
    b"AUTHOR.",
    b"INSTALLATION.",
    b"DATE-WRITTEN.",
    b"DATE-COMPILED.",
    b"SECURITY.",
    b"REMARKS.",
]

_KIND_BY_INDICATOR = {
    IndicatorType.BLANK.value: LineKind.NORMAL,
    IndicatorType.CONTINUATION.value: LineKind.CONTINUATION,
    IndicatorType.COMMENT.value: LineKind.COMMENT,
    IndicatorType.COMPILER_COMMENT.value: LineKind.COMMENT,
    IndicatorType.DEBUG.value: LineKind.DEBUG,
}


class ByteReader:
    """
    Byte-at-a-time reader over a binary stream with one byte of push-back.

    The card reader and the echo steps stop in front of a line terminator
    by reading it and pushing it back.
    """

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self._pushed: Optional[int] = None

    def read(self) -> Optional[int]:
        """Read one byte. Returns None at end of stream."""
        if self._pushed is not None:
            byte, self._pushed = self._pushed, None
            return byte
        chunk = self._stream.read(1)
        if not chunk:
            return None
        return chunk[0]

    def unread(self, byte: int) -> None:
        """Push one byte back so the next read() returns it."""
        if self._pushed is not None:
            raise RuntimeError("only one byte of push-back is supported")
        self._pushed = byte


@dataclass(frozen=True)
class Card:
    """
    One physical source line, columns 1-72.

    Attributes:
        data: The bytes read before a terminator, end of stream, or column 72
        line_number: 1-based physical line number in the input
    """

    data: bytes
    line_number: int = 1

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def has_data(self) -> bool:
        """Check if the card has anything in columns 1-72."""
        return self.length > 0

    @property
    def has_comment_area(self) -> bool:
        """Check if the line reached column 72, so a comment area may follow."""
        return self.length == CARD_SIZE

    @property
    def sequence_area(self) -> bytes:
        """Columns 1-6, or as much of them as was read."""
        return self.data[SEQUENCE_START:INDICATOR_COL]

    @property
    def indicator(self) -> Optional[bytes]:
        """Column 7, or None if the card is too short to have one."""
        if self.length <= INDICATOR_COL:
            return None
        return self.data[INDICATOR_COL:MARGIN_START]

    @property
    def margin(self) -> bytes:
        """Columns 8-72 (Area A + Area B)."""
        return self.data[MARGIN_START:COMMENT_AREA_START]

    @property
    def comment_paragraph(self) -> Optional[bytes]:
        """The documentation header the margin starts with, if any."""
        return match_comment_paragraph(self.margin)

    @property
    def kind(self) -> LineKind:
        return classify_card(self)

    @property
    def is_code(self) -> bool:
        """Check if the margins go through the case-folding scanner."""
        return self.kind in (LineKind.NORMAL, LineKind.CONTINUATION, LineKind.DEBUG)


def match_comment_paragraph(margin: bytes) -> Optional[bytes]:
    """
    Find the documentation header that the margin text starts with.

    The comparison is ASCII case-insensitive and only needs the header
    to be a prefix of the margin.

    Args:
        margin: Columns 8-72 of a card

    Returns:
        The canonical uppercase header, or None
    """
    upper = margin.upper()
    for header in COMMENT_PARAGRAPHS:
        if upper.startswith(header):
            return header
    return None


def classify_card(card: Card) -> LineKind:
    """
    Determine the kind of a card.

    Comment lines win over comment paragraphs, and both win over the
    code kinds. Unknown indicators fold like normal code. A card too
    short to have an indicator is NORMAL; emission stops after its
    sequence area anyway.

    Args:
        card: The card to classify

    Returns:
        The LineKind of the card
    """
    if not card.has_data:
        return LineKind.EMPTY

    kind = _KIND_BY_INDICATOR.get(card.indicator, LineKind.NORMAL)
    if kind == LineKind.COMMENT:
        return kind
    if match_comment_paragraph(card.margin) is not None:
        return LineKind.COMMENT_PARAGRAPH
    return kind


def read_card(reader: ByteReader, line_number: int = 1) -> Card:
    """
    Read the next card from the input.

    Reading stops in front of a CR or LF (which stays in the stream), at
    end of stream, or once 72 columns have been read. Columns 73+ are
    left in the stream as the comment area.

    Args:
        reader: The input reader
        line_number: The physical line number of the card

    Returns:
        The card read, possibly empty
    """
    buf = bytearray()
    while len(buf) < CARD_SIZE:
        byte = reader.read()
        if byte is None:
            break
        if byte in (CR, LF):
            reader.unread(byte)
            break
        buf.append(byte)
    return Card(data=bytes(buf), line_number=line_number)
