#!/usr/bin/env python3
"""
Main script for running a least-squares fit from a data file.
"""

# Pipeline overview:
# 1) Load the display-format preference (optionally overridden and saved).
# 2) Parse whitespace/comma/tab separated x y pairs into a regression session.
# 3) Fit the line, print the equation, standard errors and derivation steps.
# 4) Print the calculation table and export it (plus raw points) as CSV.
# 5) Optionally summarize one or more files of values (mean, s, SE).

import argparse
import logging
import os
import sys
import time

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from lsqcalc.datasets import SAMPLE_DISPLAY_DIGITS, SampleWorkbook
from lsqcalc.formatting import NumberFormatter
from lsqcalc.output import save_points_to_csv, save_table_to_csv
from lsqcalc.parsing import parse_float
from lsqcalc.reporting import format_equation, formula_lines, result_panel, sample_panel
from lsqcalc.session import RegressionSession
from lsqcalc.settings import (
    DEFAULT_PREFERENCES_PATH,
    load_display_format,
    save_display_format,
)


def build_parser():
    parser = argparse.ArgumentParser(description="Least-squares line fit with standard errors.")
    parser.add_argument("data", nargs="?", help="File with one 'x y' pair per line.")
    parser.add_argument("--output-dir", default="output", help="Directory for CSV exports.")
    parser.add_argument("--mode", choices=["sig", "dec"], help="Display rounding mode.")
    parser.add_argument("--digits", type=int, help="Significant figures or decimal places.")
    parser.add_argument(
        "--preferences",
        default=str(DEFAULT_PREFERENCES_PATH),
        help="Display preference file.",
    )
    parser.add_argument(
        "--save-format",
        action="store_true",
        help="Store --mode/--digits as the new default.",
    )
    parser.add_argument(
        "--sample",
        nargs="*",
        default=[],
        metavar="FILE",
        help="Files of values to summarize (one dataset per file).",
    )
    return parser


def print_table(session):
    df = session.table().to_dataframe()
    fmt = session.formatter.format_text
    print(df.to_string(index=False, formatters={c: fmt for c in df.columns[1:]}))


def run_regression(path, formatter, output_dir):
    session = RegressionSession(formatter=formatter)
    with open(path, encoding="utf-8") as fh:
        imported = session.import_text(fh.read())
    logging.info("Loaded %d points from %s", len(imported), path)

    result = session.result
    if result.is_degenerate:
        logging.warning("Fit failed: %s", result.error_message)
    print()
    print(format_equation(result, formatter))
    panel = result_panel(result, formatter)
    print(f"  slope a     = {panel.slope} {panel.std_err_slope or ''}".rstrip())
    print(f"  intercept b = {panel.intercept} {panel.std_err_intercept or ''}".rstrip())
    print()
    for line in formula_lines(session.statistics, result, formatter):
        print(f"  {line}")
    print()
    if not session.points:
        logging.warning("No points to export from %s", path)
        return None

    print_table(session)
    table_csv = save_table_to_csv(session.table(), output_dir)
    points_csv = save_points_to_csv(session.points, output_dir)
    return table_csv, points_csv


def run_sample(paths, formatter):
    workbook = SampleWorkbook()
    for i, path in enumerate(paths):
        if i > 0:
            workbook.add_dataset()
        with open(path, encoding="utf-8") as fh:
            for token in fh.read().replace(",", " ").split():
                if parse_float(token) is not None:
                    workbook.submit_value(token)

    print("\nStandard error of the mean:")
    for dataset, summary in zip(workbook.datasets, workbook.summaries()):
        panel = sample_panel(summary, formatter, SAMPLE_DISPLAY_DIGITS)
        print(
            f" - {dataset.name}: n={panel['n']} mean={panel['mean']} "
            f"s={panel['sample_std_dev']} SE={panel['standard_error']}"
        )


def main(argv=None):
    """Main execution function."""
    args = build_parser().parse_args(argv)
    start_time = time.time()

    display_format = load_display_format(args.preferences)
    formatter = NumberFormatter(display_format)
    formatter.set_format(args.mode, args.digits)
    logging.info("Display format: %s", formatter.display_format)
    if args.save_format:
        save_display_format(formatter.display_format, args.preferences)

    if not args.data and not args.sample:
        logging.error("Nothing to do: give a data file and/or --sample files.")
        return 1

    if args.data:
        if not os.path.exists(args.data):
            logging.error("Input file does not exist: %s", args.data)
            return 1
        exported = run_regression(args.data, formatter, args.output_dir)
        if exported:
            table_csv, points_csv = exported
            logging.info("  - Calculation table CSV: %s", table_csv)
            logging.info("  - Points CSV: %s", points_csv)

    if args.sample:
        run_sample(args.sample, formatter)

    logging.info(f"Total execution time: {time.time() - start_time:.2f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
