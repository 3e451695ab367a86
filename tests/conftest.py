"""
Pytest configuration and fixtures for COBOL case folder tests.
"""

import io
import logging

import pytest

from cobol_casefold.cobol.column_handler import ByteReader


def make_line(margin: str = "", indicator: str = " ", sequence: str = "      ") -> bytes:
    """Build a fixed-format line from its areas."""
    return (sequence + indicator + margin).encode("ascii")


def make_long_line(margin: str, comment_area: str, indicator: str = " ", sequence: str = "000100") -> bytes:
    """Build a line that fills columns 1-72 and has a comment area."""
    return make_line(margin.ljust(65), indicator, sequence) + comment_area.encode("ascii")


@pytest.fixture
def reader_for():
    """Create a ByteReader over the given bytes."""

    def _reader(data: bytes) -> ByteReader:
        return ByteReader(io.BytesIO(data))

    return _reader


@pytest.fixture
def output():
    """An in-memory binary output stream."""
    return io.BytesIO()


@pytest.fixture
def sample_program():
    """A small fixed-format program with CRLF line endings."""
    lines = [
        "000100 IDENTIFICATION DIVISION.",
        "000200 PROGRAM-ID. SAMPLE.",
        "000300 AUTHOR. Jane DOE.",
        "000400* Written for the Payroll TEAM",
        "000500 PROCEDURE DIVISION.",
        "000600     DISPLAY \"Hello, World\".",
        "000700     STOP RUN.",
    ]
    return ("\r\n".join(lines) + "\r\n").encode("ascii")


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging so they don't outlive captured streams."""
    yield
    logger = logging.getLogger("cobol_casefold")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
