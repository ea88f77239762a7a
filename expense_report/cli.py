"""
Command line driver for the monthly expense report.

Usage:
    expense-report --path ~/statements --month 1 --year 2024

Appends the transactions of the given month from every statement in the
directory to <path>/output/output.csv. The first error stops the run with a
non-zero exit status.
"""

import argparse
import logging
import sys
from datetime import datetime

from expense_report.errors import ExpenseReportError
from expense_report.statements import process_directory
from expense_report.utils import default_statement_dir, setup_logging

logger = logging.getLogger(__name__)


def build_parser():
    now = datetime.now()
    parser = argparse.ArgumentParser(description='Generate a monthly expense report from bank statements')
    parser.add_argument('--path', type=str, default=default_statement_dir(),
                        help='Directory of bank statements in CSV')
    parser.add_argument('--month', type=int, default=now.month, choices=range(1, 13),
                        metavar='1-12', help='Month to report on')
    parser.add_argument('--year', type=int, default=now.year,
                        metavar='YYYY', help='Year to report on')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--log-level', type=str, default='info',
                        help='Logging level (debug, info, warning, error)')
    return parser


def main(argv=None):
    """Main execution function.

    Returns:
        int: Exit status, 0 on success and 1 on a fatal error
    """
    args = build_parser().parse_args(argv)
    setup_logging(debug=args.debug, log_level=args.log_level)

    logger.info(f"Generating expense report for {args.month}/{args.year}")
    try:
        results = process_directory(args.path, args.month, args.year)
    except ExpenseReportError as e:
        logger.error(f"Error generating expense report: {e}")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error generating expense report: {e}")
        raise

    logger.info(f"Processed {len(results)} statements")
    return 0


if __name__ == '__main__':
    sys.exit(main())
