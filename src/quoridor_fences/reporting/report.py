from __future__ import annotations
from typing import Any, Dict, List

from quoridor_fences.counting.aggregator import FenceCountSummary


def _format_count(count: int, excel_quote: bool) -> str:
    # Spreadsheets keep only ~15 significant digits of a bare number; ="..." keeps it text.
    return f'="{count}"' if excel_quote else str(count)


def format_csv_report(summary: FenceCountSummary, excel_quote: bool = True) -> List[str]:
    """
    Renders a summary as CSV lines.

    The first line describes the board, the second is the `Fences,Ways`
    header, then one line per fence count and a final `Total` line.

    Parameters
    ----------
    summary : FenceCountSummary
        The aggregated counts.
    excel_quote : bool, optional
        Wrap each count as `="N"` so spreadsheet tools show every digit.
        By default True.

    Returns
    -------
    List[str]
        The report lines, without trailing newlines.
    """
    config = summary.config
    lines = [
        f"For a {config.column_count}x{config.row_count} Quoridor board "
        f"with up to {config.max_fence_count} fences.",
        "Fences,Ways",
    ]
    for fence_count, ways in summary:
        lines.append(f"{fence_count},{_format_count(ways, excel_quote)}")
    lines.append(f"Total,{_format_count(summary.total, excel_quote)}")
    return lines


def summary_to_json(summary: FenceCountSummary) -> Dict[str, Any]:
    """
    Builds a JSON-ready dict. Counts are decimal strings so JSON readers
    with float-only numbers keep every digit.
    """
    config = summary.config
    return {
        "columns": config.column_count,
        "rows": config.row_count,
        "max_fences": config.max_fence_count,
        "ways_by_fence_count": [
            {"fences": fence_count, "ways": str(ways)} for fence_count, ways in summary
        ],
        "total": str(summary.total),
    }
