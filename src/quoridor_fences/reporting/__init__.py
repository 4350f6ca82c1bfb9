from quoridor_fences.reporting.report import format_csv_report, summary_to_json

__all__ = [
    "format_csv_report",
    "summary_to_json",
]
