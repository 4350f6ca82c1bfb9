#!/usr/bin/env python3
"""
Count legal Quoridor fence placements for every fence count.

Prints one exact count per number of fences placed (0 up to the ceiling) and
a total, as CSV ready to paste into a spreadsheet, or as JSON.

Examples:
  - python -m quoridor_fences
  - python count_fences.py --columns 4 --rows 4 --max-fences 6 --no-excel-quote
  - python count_fences.py -v --json --config /path/to/board.yaml
  - python count_fences.py --show-row 17 4
"""

# --- Standard Library Imports ---
from __future__ import annotations
import argparse
import json
import logging
import sys
import time
from dataclasses import replace
from typing import Optional

# --- Third-Party Imports ---
from importlib.resources import files as importlib_files

# --- Local Application Imports ---
from quoridor_fences.utils.logging_utils import setup_loggers, DEFAULT_LOG_DIR
from quoridor_fences.config import BoardConfig, load_board_config
from quoridor_fences.counting import FenceGridEngine, aggregate
from quoridor_fences.counting.row_enumerator import arrangements_for
from quoridor_fences.reporting import format_csv_report, summary_to_json

# Set up module logger
logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "quoridor_8x8.yaml"


# --------------------------
# Logging Configuration
# --------------------------
def setup_cli_logging(verbose_level: int, log_file: Optional[str] = None) -> None:
    """
    Configures logging for the CLI and the counting modules.

    Parameters
    ----------
    verbose_level : int
        0 for WARNING, 1 for INFO, 2 or more for DEBUG.
    log_file : Optional[str]
        Explicit log file path. Without it, a timestamped file under
        `var/log/` is written only when verbose_level > 0.
    """
    level_map = {
        0: logging.WARNING,
        1: logging.INFO,
        2: logging.DEBUG,
    }
    log_level = level_map.get(min(verbose_level, 2), logging.INFO)
    should_log_to_file = (verbose_level > 0) or (log_file is not None)

    setup_loggers(
        [__name__, "quoridor_fences.counting", "quoridor_fences.config"],
        level=log_level,
        log_file=log_file,
        enable_file_logging=should_log_to_file,
    )

    if should_log_to_file and log_file is None:
        logger.info(f"Logs will be saved to: {DEFAULT_LOG_DIR.resolve()}")


# --------------------------
# Helpers
# --------------------------
def resolve_board_config(
    config_path: Optional[str],
    columns: Optional[int],
    rows: Optional[int],
    max_fences: Optional[int],
) -> BoardConfig:
    """
    Loads the board config and applies command-line overrides.

    Without `config_path` the bundled standard 8x8 board is used.

    Raises
    ------
    ValueError
        If the YAML file or any override is invalid.
    """
    if config_path is None:
        config_path = str(importlib_files("quoridor_fences") / "data" / DEFAULT_CONFIG_NAME)

    logger.info(f"Loading board config from: {config_path}")
    config = load_board_config(config_path)

    overrides = {}
    if columns is not None:
        overrides["column_count"] = columns
    if rows is not None:
        overrides["row_count"] = rows
    if max_fences is not None:
        overrides["max_fence_count"] = max_fences

    if overrides:
        # replace() re-runs validation in __post_init__.
        config = replace(config, **overrides)
        logger.info(f"Command-line overrides applied: {overrides}")

    return config


# --------------------------
# Command-Line Interface
# --------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Count Quoridor fence placements per number of fences.")
    parser.add_argument("--config", default=None,
                        help="Path to a board YAML with columns/rows/max_fences (defaults to the 8x8 board).")
    parser.add_argument("--columns", type=int, default=None,
                        help="Override the number of fence columns.")
    parser.add_argument("--rows", type=int, default=None,
                        help="Override the number of fence rows.")
    parser.add_argument("--max-fences", type=int, default=None,
                        help="Override the maximum number of fences.")
    parser.add_argument("--json", action="store_true",
                        help="Emit JSON instead of CSV.")
    parser.add_argument("--no-excel-quote", action="store_true",
                        help='Write counts bare instead of as ="N".')
    parser.add_argument("--show-row", nargs=2, type=int, metavar=("SIGNATURE", "FENCES"), default=None,
                        help="List the single-row arrangements behind one row table cell, then exit "
                             "(boards of up to 12 columns).")

    # Logging arguments
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase verbosity (-v=INFO, -vv=DEBUG)")
    parser.add_argument("--log-file", default=None,
                        help="Path to log file (default: var/log/<logger>_TIMESTAMP.log if verbose)")
    parser.add_argument("--quiet", action="store_true",
                        help="Suppress all output except the result")
    return parser


def main(argv=None) -> int:
    """
    Parses command-line arguments, runs the count and prints the report.
    """
    # --- Argument Parsing ---
    cli_args = build_parser().parse_args(argv)

    # --- Setup ---
    # Configure logging based on --verbose, --quiet and --log-file flags.
    verbose_level = 0 if cli_args.quiet else cli_args.verbose
    setup_cli_logging(verbose_level, cli_args.log_file)

    # Load the board from YAML (bundled 8x8 by default) and apply overrides.
    try:
        config = resolve_board_config(cli_args.config, cli_args.columns, cli_args.rows, cli_args.max_fences)
    except (OSError, ValueError) as e:
        logger.error(f"Invalid board configuration: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2

    # --- Row Inspection ---
    # --show-row only lists single-row arrangements; no board count is run.
    if cli_args.show_row is not None:
        signature, fence_count = cli_args.show_row
        if not 0 <= signature <= config.max_vertical_signature:
            print(f"Error: signature must be in [0, {config.max_vertical_signature}]", file=sys.stderr)
            return 2
        try:
            arrangements = arrangements_for(config.column_count, signature, fence_count)
        except ValueError as e:
            # Too many columns to list every row.
            logger.error(f"Cannot list row arrangements: {e}")
            print(f"Error: {e}", file=sys.stderr)
            return 2
        print(f"{len(arrangements)} arrangements")
        for arrangement in arrangements:
            print(arrangement)
        return 0

    # --- Counting ---
    start_time = time.perf_counter()
    try:
        engine = FenceGridEngine(config=config, verbose=logger.isEnabledFor(logging.INFO))
        summary = aggregate(engine.compute_final_table())
    except Exception as e:
        logger.error(f"Counting failed: {e}", exc_info=True)
        print(f"Counting failed: {e}", file=sys.stderr)
        return 1
    logger.info(f"Counted {config.describe()} in {time.perf_counter() - start_time:.2f}s")

    # --- Output ---
    # Print the report to standard output in the requested format.
    if cli_args.json:
        print(json.dumps(summary_to_json(summary), indent=2))
    else:
        for line in format_csv_report(summary, excel_quote=not cli_args.no_excel_quote):
            print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
