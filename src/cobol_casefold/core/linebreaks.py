"""
Line-break and comment-area echo.

Both steps copy input to output verbatim. The comment area (columns 73+)
has no length limit. Line terminators are either LF or CR LF; a CR that
is not followed by LF is the one fatal input condition.
"""

from dataclasses import dataclass
from typing import BinaryIO

from cobol_casefold.cobol.column_handler import CR, LF, ByteReader
from cobol_casefold.exceptions import MalformedLineBreakError
from cobol_casefold.logging_config import get_logger

logger = get_logger("linebreaks")


@dataclass
class LineBreakResult:
    """
    What echo_linebreaks consumed.

    Attributes:
        lf_count: Number of bare LF terminators echoed
        crlf_count: Number of CR LF terminators echoed
        at_eof: True if the input ended
    """

    lf_count: int = 0
    crlf_count: int = 0
    at_eof: bool = False

    @property
    def count(self) -> int:
        """Total number of line terminators echoed."""
        return self.lf_count + self.crlf_count


def echo_comment_area(reader: ByteReader, output: BinaryIO) -> int:
    """
    Copy the comment area verbatim up to the line terminator or end of stream.

    Args:
        reader: The input reader, positioned at column 73
        output: The output stream

    Returns:
        Number of bytes copied
    """
    buf = bytearray()
    while True:
        byte = reader.read()
        if byte is None:
            break
        if byte in (CR, LF):
            reader.unread(byte)
            break
        buf.append(byte)
    output.write(bytes(buf))
    return len(buf)


def echo_linebreaks(
    reader: ByteReader,
    output: BinaryIO,
    line_number: int = 1,
) -> LineBreakResult:
    """
    Copy line terminators until a line with content or end of stream.

    Each blank line (a terminator directly after a terminator) is echoed
    as well, so the next read_card() starts on a line with content.

    Args:
        reader: The input reader, positioned at the end of a line
        output: The output stream
        line_number: The physical line number of the line being ended

    Returns:
        LineBreakResult with terminator counts and end-of-stream flag

    Raises:
        MalformedLineBreakError: If a CR is not followed by LF
    """
    result = LineBreakResult()
    while True:
        byte = reader.read()
        if byte is None:
            result.at_eof = True
            return result
        if byte == LF:
            output.write(b"\n")
            result.lf_count += 1
        elif byte == CR:
            following = reader.read()
            if following != LF:
                bad_line = line_number + result.count
                logger.error(f"CR without LF at line {bad_line}")
                raise MalformedLineBreakError(line=bad_line, byte=following)
            output.write(b"\r\n")
            result.crlf_count += 1
        else:
            reader.unread(byte)
            return result
