"""
Expense Report Writer

Appends normalized statement lines to <statement dir>/output/output.csv.

Report Format (one block per processed statement):

    <blank line>
    <statement filename>
    <blank line>
    <date>,<description>,<amount>
    ...
    <blank line>
    Subtotal,,
    <blank line>

The report is only ever appended to, so processing the same statements twice
writes their blocks twice. The output directory is not created here.
"""

import logging
import pathlib

from expense_report.errors import OutputWriteError

logger = logging.getLogger(__name__)

OUTPUT_DIR = 'output'
OUTPUT_FILE = 'output.csv'

# No total is computed, the line is filled in by hand
SUBTOTAL_PLACEHOLDER = "\nSubtotal,,\n\n"


def output_path_for(file_path):
    """Return the report path for a statement file."""
    return pathlib.Path(file_path).parent / OUTPUT_DIR / OUTPUT_FILE


def format_block_header(file_path):
    return f"\n{pathlib.Path(file_path).name}\n\n"


def update_expense_report(file_path, records):
    """Append a statement's lines to the expense report.

    Args:
        file_path (str or pathlib.Path): Path of the source statement
        records (list): Lines to write, each ending in a newline

    Returns:
        int: Number of lines written

    Raises:
        OutputWriteError: If the report cannot be opened or written. Lines
            already written are left in place.
    """
    output_path = output_path_for(file_path)
    logger.info(f"Writing records to output file: {output_path}")

    num = 0
    try:
        with open(output_path, 'a', encoding='utf-8', newline='') as f:
            f.write(format_block_header(file_path))
            for record in records:
                logger.info(f"Writing record: {record.strip()}")
                f.write(record)
                num += 1
    except OSError as e:
        raise OutputWriteError(f"Failed to write to output file {output_path}: {e}") from e

    return num
