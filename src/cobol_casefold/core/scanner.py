"""
Case-Folding Scanner - Folds letter case in the margins of a code card.

The scanner walks columns 8-72 of a card one byte at a time. Letters in
code are folded to the target case. Two kinds of spans are copied
verbatim instead:

- Literals: opened by ' or " and closed by the same quote character.
- Pseudo-text: opened by an adjacent == pair and closed by the next one.

The scanner starts every card in CODE state. A span left open at the end
of a card is not carried to the next card.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

QUOTE = 0x22  # "
APOSTROPHE = 0x27  # '
EQUALS = 0x3D  # =
PERIOD = 0x2E  # .

_UPPER_A, _UPPER_Z = 0x41, 0x5A
_LOWER_A, _LOWER_Z = 0x61, 0x7A
_CASE_OFFSET = _LOWER_A - _UPPER_A


class FoldCase(Enum):
    """Target case for folding. Mapping is ASCII-only."""

    LOWER = "lower"
    UPPER = "upper"

    def fold(self, byte: int) -> int:
        """Fold a single byte; non-letters are returned unchanged."""
        if self is FoldCase.LOWER:
            if _UPPER_A <= byte <= _UPPER_Z:
                return byte + _CASE_OFFSET
        elif _LOWER_A <= byte <= _LOWER_Z:
            return byte - _CASE_OFFSET
        return byte

    def fold_bytes(self, data: bytes) -> bytes:
        """Fold every byte of data."""
        return data.lower() if self is FoldCase.LOWER else data.upper()


class ScanContext(Enum):
    """Where the scanner is within a line."""

    CODE = auto()
    LITERAL = auto()
    PSEUDOTEXT = auto()


@dataclass(frozen=True)
class ScanState:
    """
    Scanner state.

    Attributes:
        context: The current scan context
        quote: The quote byte that opened the literal (LITERAL only)
    """

    context: ScanContext = ScanContext.CODE
    quote: Optional[int] = None

    @property
    def is_open(self) -> bool:
        """Check if a literal or pseudo-text span is still open."""
        return self.context is not ScanContext.CODE


CODE_STATE = ScanState()
PSEUDOTEXT_STATE = ScanState(ScanContext.PSEUDOTEXT)


def transition(
    state: ScanState,
    prev: Optional[int],
    curr: int,
    case: FoldCase = FoldCase.LOWER,
) -> Tuple[ScanState, int]:
    """
    Advance the scanner by one byte.

    Args:
        state: The state before curr
        prev: The byte before curr, or None when there is no usable lookback
        curr: The byte being scanned
        case: The target case

    Returns:
        Tuple of (state after curr, byte to emit for curr)
    """
    if state.context is ScanContext.CODE:
        emitted = case.fold(curr)
        if curr in (QUOTE, APOSTROPHE):
            return ScanState(ScanContext.LITERAL, curr), emitted
        if prev == EQUALS and curr == EQUALS:
            return PSEUDOTEXT_STATE, emitted
        return state, emitted

    if state.context is ScanContext.LITERAL:
        if curr == state.quote:
            return CODE_STATE, curr
        return state, curr

    if prev == EQUALS and curr == EQUALS:
        return CODE_STATE, curr
    return state, curr


def fold_margin(
    margin: bytes,
    case: FoldCase = FoldCase.LOWER,
) -> Tuple[bytes, ScanState]:
    """
    Fold the margins of a code card.

    The lookback byte is cleared whenever the context changes, so the =
    that completes a == pair is never reused as the start of another pair.

    Args:
        margin: Columns 8-72 of a NORMAL, CONTINUATION or DEBUG card
        case: The target case

    Returns:
        Tuple of (folded bytes, state at end of margin)
    """
    out = bytearray()
    state = CODE_STATE
    prev: Optional[int] = None
    for curr in margin:
        new_state, emitted = transition(state, prev, curr, case)
        out.append(emitted)
        prev = None if new_state.context is not state.context else curr
        state = new_state
    return bytes(out), state


def fold_comment_paragraph(margin: bytes, case: FoldCase = FoldCase.LOWER) -> bytes:
    """
    Fold a comment paragraph header and keep its text verbatim.

    Everything up to and including the first period is folded; the rest
    of the margin is copied as is.

    Args:
        margin: Columns 8-72 of a COMMENT_PARAGRAPH card
        case: The target case

    Returns:
        The margin with only the header folded
    """
    end = margin.find(b".")
    if end < 0:
        return margin
    return case.fold_bytes(margin[: end + 1]) + margin[end + 1 :]
