"""
Tests for the Line Emitter.

Tests for the area-by-area printing chain and print_card.
"""

import pytest

from cobol_casefold.cobol.column_handler import Card, read_card
from cobol_casefold.core.emitter import (
    CardPrinter,
    CommentArea,
    IndicatorArea,
    MarginArea,
    print_card,
)
from cobol_casefold.core.scanner import FoldCase, ScanContext

from conftest import make_line, make_long_line


class TestEmissionChain:
    """Tests for the typestate printing steps."""

    def test_sequence_only(self, output):
        """A card without indicator stops after the sequence area."""
        step = CardPrinter(Card(b"00010"), output, FoldCase.LOWER).print_sequence_area()
        assert step is None
        assert output.getvalue() == b"00010"

    def test_sequence_area_verbatim(self, output):
        """Letters in the sequence area are not folded."""
        step = CardPrinter(Card(b"ABCDEF*"), output, FoldCase.LOWER).print_sequence_area()
        assert isinstance(step, IndicatorArea)
        assert output.getvalue() == b"ABCDEF"

    def test_indicator_folded(self, output):
        """The indicator goes through case folding."""
        step = CardPrinter(Card(b"000100D"), output, FoldCase.LOWER).print_sequence_area()
        assert step.print() is None
        assert output.getvalue() == b"000100d"

    def test_margin_step(self, output):
        """A card with margins reaches the margin step."""
        card = Card(make_line("MOVE A TO B."))
        margins = CardPrinter(card, output, FoldCase.LOWER).print_sequence_area().print()
        assert isinstance(margins, MarginArea)
        assert margins.print() is None
        assert output.getvalue() == b"       move a to b."

    def test_comment_area_step(self, output, reader_for):
        """A full-width card leads to the comment area step."""
        data = make_long_line("MOVE A TO B.", "CHG0001X")
        reader = reader_for(data)
        card = read_card(reader)
        margins = CardPrinter(card, output, FoldCase.LOWER).print_sequence_area().print()
        comment_area = margins.print()
        assert isinstance(comment_area, CommentArea)
        comment_area.echo(reader)
        assert output.getvalue() == data.replace(b"MOVE A TO B.", b"move a to b.")

    def test_end_state_recorded(self, output):
        """The margin step keeps the scanner state at the end of the line."""
        card = Card(make_line('DISPLAY "OPEN'))
        margins = CardPrinter(card, output, FoldCase.LOWER).print_sequence_area().print()
        margins.print()
        assert margins.end_state.context is ScanContext.LITERAL


class TestPrintCard:
    """Tests for print_card."""

    def test_empty_card_prints_nothing(self, output, reader_for):
        """An empty card writes nothing."""
        assert print_card(Card(b""), reader_for(b""), output) is None
        assert output.getvalue() == b""

    def test_comment_line_verbatim(self, output, reader_for):
        """Comment lines keep their margins as they are."""
        line = make_line(" AUTHOR. Jane Doe", "*")
        print_card(Card(line), reader_for(b""), output)
        assert output.getvalue() == line

    def test_dollar_comment_line_verbatim(self, output, reader_for):
        """Lines with $ in column 7 are comments too."""
        line = make_line('SET SOURCEFORMAT"FIXED"', "$")
        print_card(Card(line), reader_for(b""), output)
        assert output.getvalue() == line

    def test_comment_paragraph(self, output, reader_for):
        """Only the paragraph header is folded."""
        print_card(Card(make_line("AUTHOR. Jane DOE.")), reader_for(b""), output)
        assert output.getvalue() == b"       author. Jane DOE."

    def test_debug_line_folds(self, output, reader_for):
        """Debugging lines fold like code."""
        print_card(Card(make_line("DISPLAY WS-X", "/")), reader_for(b""), output)
        assert output.getvalue() == b"      /display ws-x"

    def test_continuation_literal(self, output, reader_for):
        """Continuation lines fold code and keep literals."""
        print_card(Card(make_line('    "REST OF LITERAL" TO X', "-")), reader_for(b""), output)
        assert output.getvalue() == b'      -    "REST OF LITERAL" to x'

    def test_comment_area_echoed(self, output, reader_for):
        """The comment area is copied verbatim after the margins."""
        data = make_long_line("ADD 1 TO WS-COUNT.", "Fix For BUG 42")
        reader = reader_for(data + b"\n")
        card = read_card(reader)
        print_card(card, reader, output, FoldCase.LOWER)
        assert output.getvalue() == data.replace(b"ADD 1 TO WS-COUNT.", b"add 1 to ws-count.")
        assert reader.read() == ord("\n")

    @pytest.mark.parametrize("case", list(FoldCase))
    def test_returns_margin_step(self, case, output, reader_for):
        """print_card returns the margin step once the margins were printed."""
        margins = print_card(Card(make_line("X")), reader_for(b""), output, case)
        assert isinstance(margins, MarginArea)
