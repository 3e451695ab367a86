"""
Main entry point for the COBOL case folder.

This module runs the processing loop (read card, print card, echo line
breaks) and provides a programmatic API for it.
"""

import io
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import BinaryIO, Dict, Optional

from cobol_casefold.cobol.column_handler import ByteReader, LineKind, read_card
from cobol_casefold.config import Config, create_default_config
from cobol_casefold.core.emitter import print_card
from cobol_casefold.core.linebreaks import echo_linebreaks
from cobol_casefold.core.scanner import FoldCase
from cobol_casefold.exceptions import MalformedLineBreakError
from cobol_casefold.logging_config import get_logger

logger = get_logger("main")


@dataclass
class FoldResult:
    """Result of folding one input stream."""

    success: bool = True
    lines: int = 0
    kind_counts: Dict[str, int] = field(default_factory=dict)
    lf_count: int = 0
    crlf_count: int = 0
    unterminated_spans: int = 0
    error: Optional[str] = None
    processing_time: float = 0.0


@dataclass
class FoldContext:
    """
    State of one run, owned by the processing loop.

    Attributes:
        reader: The input reader
        output: The output stream
        case: The target case
        line_number: The physical line number of the next card
        kinds: Cards seen, by kind
    """

    reader: ByteReader
    output: BinaryIO
    case: FoldCase = FoldCase.LOWER
    line_number: int = 1
    kinds: Counter = field(default_factory=Counter)
    lf_count: int = 0
    crlf_count: int = 0
    unterminated_spans: int = 0
    unterminated_last_line: bool = False


class CaseFolder:
    """
    Folds letter case in fixed-format COBOL source.

    Usage:
        folder = CaseFolder(config)
        result = folder.fold_stream(sys.stdin.buffer, sys.stdout.buffer)
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or create_default_config()
        self.result: Optional[FoldResult] = None

    def fold_stream(self, input_stream: BinaryIO, output_stream: BinaryIO) -> FoldResult:
        """
        Fold one input stream into an output stream.

        Args:
            input_stream: Binary stream to read source from
            output_stream: Binary stream to write folded source to

        Returns:
            FoldResult with statistics for the run

        Raises:
            MalformedLineBreakError: If a CR is not followed by LF. The
                output written so far is flushed before raising, and
                self.result holds the partial statistics.
        """
        start_time = time.time()
        ctx = FoldContext(
            reader=ByteReader(input_stream),
            output=output_stream,
            case=self.config.fold_case,
        )

        try:
            self._run(ctx)
        except MalformedLineBreakError as e:
            output_stream.flush()
            self.result = self._build_result(ctx, start_time, error=str(e))
            raise

        output_stream.flush()
        self.result = self._build_result(ctx, start_time)
        logger.info(f"Folded {self.result.lines} lines to {ctx.case.value}case")
        return self.result

    @staticmethod
    def _build_result(
        ctx: FoldContext,
        start_time: float,
        error: Optional[str] = None,
    ) -> FoldResult:
        lines = ctx.lf_count + ctx.crlf_count
        if ctx.unterminated_last_line:
            lines += 1
        kinds = dict(ctx.kinds)
        blank_lines = lines - sum(kinds.values())
        if blank_lines > 0:
            kinds[LineKind.EMPTY.value] = blank_lines
        return FoldResult(
            success=error is None,
            lines=lines,
            kind_counts=kinds,
            lf_count=ctx.lf_count,
            crlf_count=ctx.crlf_count,
            unterminated_spans=ctx.unterminated_spans,
            error=error,
            processing_time=time.time() - start_time,
        )

    def _run(self, ctx: FoldContext) -> None:
        while True:
            card = read_card(ctx.reader, ctx.line_number)
            if card.has_data:
                ctx.kinds[card.kind.value] += 1

            margins = print_card(card, ctx.reader, ctx.output, ctx.case)
            if margins is not None and margins.end_state is not None:
                if margins.end_state.is_open:
                    ctx.unterminated_spans += 1

            breaks = echo_linebreaks(ctx.reader, ctx.output, ctx.line_number)
            ctx.lf_count += breaks.lf_count
            ctx.crlf_count += breaks.crlf_count
            ctx.line_number += breaks.count
            if breaks.at_eof:
                ctx.unterminated_last_line = card.has_data and breaks.count == 0
                return


def fold_bytes(data: bytes, case: FoldCase = FoldCase.LOWER) -> bytes:
    """
    Fold an in-memory source.

    Args:
        data: The source bytes
        case: The target case

    Returns:
        The folded source bytes

    Raises:
        MalformedLineBreakError: If a CR is not followed by LF
    """
    output = io.BytesIO()
    CaseFolder(Config(fold_case=case)).fold_stream(io.BytesIO(data), output)
    return output.getvalue()
