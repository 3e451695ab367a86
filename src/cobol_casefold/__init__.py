"""
COBOL Case Folder - Fold letter case in fixed-format COBOL source.

Code in columns 8-72 is folded to lowercase (or uppercase). String
literals, pseudo-text, sequence numbers, comment lines, comment paragraph
text and the comment area are copied byte for byte, as are the original
line terminators.

Basic Usage:
    from cobol_casefold import fold_bytes, FoldCase

    folded = fold_bytes(b"       MOVE 'ABC' TO X-FIELD.\n")
    shouted = fold_bytes(source, case=FoldCase.UPPER)

    # Streams
    folder = CaseFolder(Config(fold_case=FoldCase.LOWER))
    result = folder.fold_stream(sys.stdin.buffer, sys.stdout.buffer)

Command-Line Usage:
    cobol-casefold < PROGRAM.cbl > program.cbl
    cobol-casefold --upper --input program.cbl --output PROGRAM.cbl
"""

__version__ = "1.0.0"

from cobol_casefold.exceptions import (
    CaseFoldError,
    ConfigError,
    MalformedLineBreakError,
)

from cobol_casefold.config import Config, create_default_config
from cobol_casefold.cobol.column_handler import Card, LineKind, classify_card
from cobol_casefold.core.scanner import FoldCase
from cobol_casefold.main import CaseFolder, FoldResult, fold_bytes

__all__ = [
    # Version
    "__version__",
    # Main API
    "fold_bytes",
    "CaseFolder",
    "FoldResult",
    # Configuration
    "Config",
    "create_default_config",
    # Data Types
    "Card",
    "LineKind",
    "FoldCase",
    "classify_card",
    # Exceptions
    "CaseFoldError",
    "MalformedLineBreakError",
    "ConfigError",
]
