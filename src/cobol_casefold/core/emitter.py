"""
Line Emitter - Prints a card area by area.

Each step prints one area and returns the step for the next area, or
None when the card has nothing more to print. The order sequence area,
indicator, margins, comment area is therefore the only order in which
the areas can be printed.
"""

from typing import BinaryIO, Optional

from cobol_casefold.cobol.column_handler import ByteReader, Card, LineKind
from cobol_casefold.core.linebreaks import echo_comment_area
from cobol_casefold.core.scanner import (
    FoldCase,
    ScanState,
    fold_comment_paragraph,
    fold_margin,
)
from cobol_casefold.logging_config import get_logger

logger = get_logger("emitter")


class _AreaStep:
    def __init__(self, card: Card, output: BinaryIO, case: FoldCase):
        self.card = card
        self.output = output
        self.case = case


class CommentArea(_AreaStep):
    """Columns 73+, echoed straight from the input."""

    def echo(self, reader: ByteReader) -> int:
        return echo_comment_area(reader, self.output)


class MarginArea(_AreaStep):
    """Columns 8-72."""

    end_state: Optional[ScanState] = None

    def print(self) -> Optional[CommentArea]:
        """
        Print the margins according to the card kind.

        Comment lines are printed verbatim, comment paragraphs fold only
        their header, and code lines go through the scanner.
        """
        kind = self.card.kind
        margin = self.card.margin
        if kind == LineKind.COMMENT:
            self.output.write(margin)
        elif kind == LineKind.COMMENT_PARAGRAPH:
            self.output.write(fold_comment_paragraph(margin, self.case))
        else:
            folded, self.end_state = fold_margin(margin, self.case)
            self.output.write(folded)
            if self.end_state.is_open:
                logger.debug(
                    f"Line {self.card.line_number}: "
                    f"{self.end_state.context.name.lower()} span open at end of line"
                )

        if not self.card.has_comment_area:
            return None
        return CommentArea(self.card, self.output, self.case)


class IndicatorArea(_AreaStep):
    """Column 7."""

    def print(self) -> Optional[MarginArea]:
        self.output.write(self.case.fold_bytes(self.card.indicator))
        if not self.card.margin:
            return None
        return MarginArea(self.card, self.output, self.case)


class CardPrinter(_AreaStep):
    """Entry point of the emission chain for one card."""

    def print_sequence_area(self) -> Optional[IndicatorArea]:
        """Print columns 1-6 verbatim."""
        self.output.write(self.card.sequence_area)
        if self.card.indicator is None:
            return None
        return IndicatorArea(self.card, self.output, self.case)


def print_card(
    card: Card,
    reader: ByteReader,
    output: BinaryIO,
    case: FoldCase = FoldCase.LOWER,
) -> Optional[MarginArea]:
    """
    Print a card and its comment area.

    Printing stops at the first area the card does not have.

    Args:
        card: The card to print
        reader: The input reader, for the comment area
        output: The output stream
        case: The target case

    Returns:
        The margin step if the card got that far, else None
    """
    if not card.has_data:
        return None

    logger.debug(f"Line {card.line_number}: {card.kind.value}")

    indicator = CardPrinter(card, output, case).print_sequence_area()
    if indicator is None:
        return None
    margins = indicator.print()
    if margins is None:
        return None
    comment_area = margins.print()
    if comment_area is not None:
        comment_area.echo(reader)
    return margins
