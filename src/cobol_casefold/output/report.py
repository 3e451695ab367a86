"""
Report Generator - Summarizes a case folding run.

This module handles:
- A text summary for the diagnostic stream
- A JSON report with line counts by kind and terminator counts
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from cobol_casefold.cobol.column_handler import LineKind
from cobol_casefold.main import FoldResult


@dataclass
class FoldReport:
    """Report for one case folding run."""

    result: FoldResult
    fold_case: str = "lower"
    input_name: str = "<stdin>"
    output_name: str = "<stdout>"
    tool_version: str = ""
    generated_at: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> dict[str, Any]:
        """Convert report to dictionary."""
        return {
            "metadata": {
                "generated_at": self.generated_at,
                "tool_version": self.tool_version,
                "input": self.input_name,
                "output": self.output_name,
                "fold_case": self.fold_case,
                "processing_time_seconds": self.result.processing_time,
            },
            "summary": {
                "success": self.result.success,
                "total_lines": self.result.lines,
                "lines_by_kind": dict(self.result.kind_counts),
                "lf_terminators": self.result.lf_count,
                "crlf_terminators": self.result.crlf_count,
                "unterminated_spans": self.result.unterminated_spans,
                "error": self.result.error,
            },
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert report to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def save_json(self, path: Path) -> None:
        """Save report as JSON file."""
        path.write_text(self.to_json())


def create_summary_report(result: FoldResult, fold_case: Optional[str] = None) -> str:
    """
    Create a human-readable summary of a run.

    Args:
        result: The result of the run
        fold_case: Optional target case name to include

    Returns:
        Multi-line summary text
    """
    lines = ["CASE FOLDING SUMMARY", "=" * 40]
    if fold_case:
        lines.append(f"Folded to:          {fold_case}case")
    lines.append(f"Lines:              {result.lines}")
    for kind in LineKind:
        count = result.kind_counts.get(kind.value, 0)
        if count:
            label = kind.value.replace("_", " ").capitalize() + ":"
            lines.append(f"  {label:<20}{count}")
    lines.append(f"LF terminators:     {result.lf_count}")
    lines.append(f"CRLF terminators:   {result.crlf_count}")
    if result.unterminated_spans:
        lines.append(f"Open spans at EOL:  {result.unterminated_spans}")
    if result.error:
        lines.append(f"Error:              {result.error}")
    return "\n".join(lines)
