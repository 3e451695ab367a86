"""
Core modules for the case folder.

This package contains the core processing logic:
- scanner: Context-sensitive case folding of the margins
- linebreaks: Comment-area and line-terminator echo
- emitter: Area-by-area card printing
"""

from cobol_casefold.core.scanner import (
    FoldCase,
    ScanContext,
    ScanState,
    fold_comment_paragraph,
    fold_margin,
    transition,
)

__all__ = [
    "FoldCase",
    "ScanContext",
    "ScanState",
    "transition",
    "fold_margin",
    "fold_comment_paragraph",
]
