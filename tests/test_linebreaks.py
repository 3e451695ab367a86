"""
Tests for comment-area and line-break echo.
"""

import pytest

from cobol_casefold.core.linebreaks import echo_comment_area, echo_linebreaks
from cobol_casefold.exceptions import CaseFoldError, MalformedLineBreakError


class TestEchoCommentArea:
    """Tests for echo_comment_area."""

    def test_copies_until_terminator(self, reader_for, output):
        """The comment area is copied and the terminator left in the stream."""
        reader = reader_for(b"CHG001 Mixed Case\r\nNEXT")
        assert echo_comment_area(reader, output) == 17
        assert output.getvalue() == b"CHG001 Mixed Case"
        assert reader.read() == ord("\r")

    def test_copies_until_eof(self, reader_for, output):
        """A comment area at end of stream is copied in full."""
        reader = reader_for(b"TAIL")
        echo_comment_area(reader, output)
        assert output.getvalue() == b"TAIL"
        assert reader.read() is None

    def test_no_length_limit(self, reader_for, output):
        """Comment areas longer than eight columns are not truncated."""
        text = b"x" * 500
        echo_comment_area(reader_for(text + b"\n"), output)
        assert output.getvalue() == text

    def test_empty_comment_area(self, reader_for, output):
        """A line ending at column 72 has nothing to echo."""
        assert echo_comment_area(reader_for(b"\n"), output) == 0
        assert output.getvalue() == b""


class TestEchoLinebreaks:
    """Tests for echo_linebreaks."""

    def test_lf(self, reader_for, output):
        """A single LF is echoed and the next line left in the stream."""
        reader = reader_for(b"\nNEXT")
        result = echo_linebreaks(reader, output)
        assert output.getvalue() == b"\n"
        assert result.lf_count == 1
        assert result.crlf_count == 0
        assert not result.at_eof
        assert reader.read() == ord("N")

    def test_crlf(self, reader_for, output):
        """CR LF is echoed as CR LF."""
        result = echo_linebreaks(reader_for(b"\r\nNEXT"), output)
        assert output.getvalue() == b"\r\n"
        assert result.crlf_count == 1

    def test_blank_lines_absorbed(self, reader_for, output):
        """Consecutive blank lines are all echoed, mixed terminators kept."""
        result = echo_linebreaks(reader_for(b"\n\r\n\n\r\nX"), output)
        assert output.getvalue() == b"\n\r\n\n\r\n"
        assert result.lf_count == 2
        assert result.crlf_count == 2
        assert result.count == 4
        assert not result.at_eof

    def test_eof(self, reader_for, output):
        """End of stream ends the echo normally."""
        result = echo_linebreaks(reader_for(b"\n"), output)
        assert result.at_eof
        assert output.getvalue() == b"\n"

    def test_immediate_eof(self, reader_for, output):
        """End of stream with no terminator is not an error."""
        result = echo_linebreaks(reader_for(b""), output)
        assert result.at_eof
        assert result.count == 0

    def test_cr_at_eof(self, reader_for, output):
        """A lone CR at end of input is fatal and not echoed."""
        with pytest.raises(MalformedLineBreakError) as exc_info:
            echo_linebreaks(reader_for(b"\r"), output, line_number=3)
        assert exc_info.value.line == 3
        assert exc_info.value.byte is None
        assert output.getvalue() == b""

    def test_cr_without_lf(self, reader_for, output):
        """A CR followed by anything but LF is fatal."""
        with pytest.raises(MalformedLineBreakError) as exc_info:
            echo_linebreaks(reader_for(b"\n\rX"), output, line_number=1)
        assert exc_info.value.line == 2
        assert exc_info.value.byte == ord("X")
        assert output.getvalue() == b"\n"

    def test_error_message(self):
        """The error names the condition and is a CaseFoldError."""
        error = MalformedLineBreakError(line=7)
        assert isinstance(error, CaseFoldError)
        assert "CR without LF" in str(error)
        assert "line 7" in str(error)
