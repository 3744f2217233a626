"""Command-line entry point for drawing a Venn diagram from a table.

Usage:
    python -m protein_util.main sets.xlsx out/VennDiagram [--log-file run.log] [--format png]
    python -m protein_util.main --demo VennDemo

The input table holds one set per column. The figure is written next to
OUTPUT_STEM with .png and/or .pdf, and the padded membership table is written
to OUTPUT_STEM.tsv.
"""

import argparse
import logging
import sys
from typing import List, Optional

from protein_util.base.log import LoggedFatalError, get_logger
from protein_util.base.util import read_data_frame
from protein_util.config import Config, PlotConfig
from protein_util.constants import PLOT_FORMATS
from protein_util.plotting.venn import (
    DuplicateSetNameError,
    UnsupportedSetCountError,
    draw_venn_plot,
    venn_diagram_demo,
)

# Library warnings (pandas, matplotlib) go through the standard logging setup
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s | %(levelname)s | %(message)s',
    datefmt='%H:%M:%S'
)
logging.captureWarnings(True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Draw a Venn diagram from a table of 2-4 sets')
    parser.add_argument('input', nargs='?', help='Table file (.xlsx, .xls, .csv, .tsv, .txt)')
    parser.add_argument('output', nargs='?', help='Output path without extension')
    parser.add_argument('--demo', metavar='DIR', help='Draw the built-in three-set example into DIR')
    parser.add_argument('--log-file', default='log.txt', help='Append-only log file (default: log.txt)')
    parser.add_argument('--format', choices=PLOT_FORMATS, default='both', help='Figure format (default: both)')
    parser.add_argument('--delim', help='Delimiter for text tables (default: by extension)')
    parser.add_argument('--no-console', action='store_true', help='Do not mirror log lines to stdout')
    parser.add_argument('--no-file', action='store_true', help='Do not write the log file')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.demo is None and (args.input is None or args.output is None):
        parser.error("INPUT and OUTPUT are required unless --demo is given")

    if args.demo is not None:
        try:
            venn_diagram_demo(args.demo)
        except (LoggedFatalError, UnsupportedSetCountError, DuplicateSetNameError) as e:
            print(f"Venn demo failed: {e}", file=sys.stderr)
            return 1
        return 0

    logger = get_logger(args.log_file, console_output=not args.no_console, file_output=not args.no_file)
    config = Config(plot=PlotConfig(plot_format=args.format))

    try:
        logger.info(f"Reading input table: {args.input}")
        input_data_frame = read_data_frame(args.input, delim=args.delim)
        logger.debug(input_data_frame)

        result = draw_venn_plot(input_data_frame, args.output, logger, config=config)

        table_path = f"{args.output}.tsv"
        result.data_frame.to_csv(table_path, sep='\t', index=False)
        logger.info(f"Membership table saved: {table_path}")
    except LoggedFatalError:
        # Already written to the log by Logger.error
        return 1
    except (UnsupportedSetCountError, DuplicateSetNameError) as e:
        logger.log_message("ERROR", str(e))
        return 1
    finally:
        logger.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
