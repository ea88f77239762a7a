"""
Statement Processing

Reads bank statement CSV files, keeps the transactions of a target month and
normalizes them into (date, description, amount) lines for the expense report.

Processing Steps (per statement):
1. Identify the bank from the statement's filename
2. Read every row of the CSV file as raw text
3. Drop the bank's preamble rows (Bank of America checking exports carry 7)
4. Skip the header row
5. Apply the skip rules to each remaining row
6. Append the kept rows, followed by a subtotal placeholder, to the report

Skip Rules:
- The transaction date must parse as MM/DD/YYYY or M/D/YY
- The parsed month must equal the target month. The target year is accepted
  but never compared, so a December statement from a previous year still
  matches month 12.
- Any additional rules registered in SKIP_RULES, in order, first match wins

Unparseable dates skip the row. Every other failure (unknown bank, unreadable
file, malformed CSV, unwritable report) raises and ends the run.
"""

import csv
import logging
import os
import pathlib
import re

import pandas as pd

from expense_report.banks import get_column_layout, identify_bank, preamble_rows
from expense_report.errors import CsvParseError, FileOpenError
from expense_report.report import SUBTOTAL_PLACEHOLDER, update_expense_report

logger = logging.getLogger(__name__)

STATEMENT_EXTENSIONS = ('.csv', '.CSV')

# Each format is only tried when the value has its exact shape
DATE_FORMATS = [
    (re.compile(r'\d{2}/\d{2}/\d{4}'), '%m/%d/%Y'),  # 01/15/2024
    (re.compile(r'\d{1,2}/\d{1,2}/\d{2}'), '%m/%d/%y'),  # 1/15/24
]

DATE_ERROR = "transaction date error"
MONTH_MISMATCH = "transaction date month mismatch"

# Additional skip rules, evaluated after the date rule. Each rule takes
# (record, layout) and returns a skip reason or None.
SKIP_RULES = []


def read_statement_rows(file_path):
    """Read all rows of a statement file, header included.

    Args:
        file_path (str or pathlib.Path): Path to the CSV file

    Returns:
        list: Rows in file order, each a list of strings

    Raises:
        FileOpenError: If the file cannot be opened
        CsvParseError: If the content is not well-formed CSV
    """
    encodings = ['utf-8-sig', 'cp1252']
    for encoding in encodings:
        try:
            with open(file_path, 'r', encoding=encoding, newline='') as f:
                reader = csv.reader(f, delimiter=',', quotechar='"', strict=True)
                # Skip empty rows
                rows = [row for row in reader if row]
            logger.debug(f"Read {len(rows)} rows from {file_path} with encoding {encoding}")
            return rows
        except UnicodeDecodeError:
            continue
        except csv.Error as e:
            raise CsvParseError(f"Failed to process data from file {file_path}: {e}") from e
        except OSError as e:
            raise FileOpenError(f"Failed to open file {file_path}: {e}") from e
    raise CsvParseError(f"Could not decode {file_path} with any supported encoding")


def parse_transaction_date(value):
    """Parse a statement date as MM/DD/YYYY, falling back to M/D/YY.

    Two-digit years 69-99 map to the 1900s and 00-68 to the 2000s.

    Returns:
        pd.Timestamp or None: The parsed date, or None if neither format applies
    """
    if not isinstance(value, str):
        return None
    for pattern, fmt in DATE_FORMATS:
        if not pattern.fullmatch(value):
            continue
        try:
            return pd.to_datetime(value, format=fmt)
        except (ValueError, OverflowError):
            continue
    return None


def _field(record, index):
    return record[index] if index < len(record) else ''


def description_contains(substring, reason):
    """Build a skip rule matching records whose description contains substring."""
    def rule(record, layout):
        if substring in _field(record, layout.description):
            return reason
        return None
    return rule


def skip_record_rules(record, layout, month, year, rules=None):
    """Decide whether a statement row is left out of the report.

    Args:
        record (list): Raw CSV row
        layout (ColumnLayout): Column layout of the statement's bank
        month (int): Target month (1-12)
        year (int): Target year, not compared against the transaction date
        rules (list, optional): Additional skip rules. Defaults to SKIP_RULES.

    Returns:
        tuple: (skip, reason) where reason is empty when the row is kept
    """
    if rules is None:
        rules = SKIP_RULES

    date_str = _field(record, layout.transaction_date)
    tdate = parse_transaction_date(date_str)
    if tdate is None:
        return True, DATE_ERROR

    if tdate.month != month:
        logger.debug(f"Month mismatch: {date_str} is not in month {month}")
        return True, MONTH_MISMATCH

    for rule in rules:
        reason = rule(record, layout)
        if reason:
            return True, reason

    return False, ""


def normalize_record(record, layout):
    """Pick the (date, description, amount) fields out of a raw row.

    Raises:
        CsvParseError: If the row has fewer columns than the layout needs
    """
    needed = max(layout) + 1
    if len(record) < needed:
        raise CsvParseError(f"Record {record} has {len(record)} fields, expected at least {needed}")
    return (
        record[layout.transaction_date],
        record[layout.description],
        record[layout.amount],
    )


def format_record(record, layout):
    return "%s,%s,%s\n" % normalize_record(record, layout)


def process_statement(file_path, month, year, rules=None):
    """Process one bank statement into the expense report.

    Args:
        file_path (str or pathlib.Path): Path to the statement CSV file
        month (int): Target month (1-12)
        year (int): Target year
        rules (list, optional): Additional skip rules. Defaults to SKIP_RULES.

    Returns:
        int: Number of lines written to the report

    Raises:
        ExpenseReportError: On any failure; nothing is recovered
    """
    file_path = pathlib.Path(file_path)
    bank = identify_bank(file_path.name)
    records = read_statement_rows(file_path)

    preamble = preamble_rows(bank)
    if preamble:
        logger.info(f"Skip {preamble} rows of {bank} bank statement")
        records = records[preamble:]

    layout = get_column_layout(bank)

    output_records = []
    for index, record in enumerate(records):
        if index == 0:
            logger.info("Skip header")
            continue

        skip, reason = skip_record_rules(record, layout, month, year, rules)
        if skip:
            logger.info(f"Skip record: {record} --> {reason}")
            continue

        output_records.append(format_record(record, layout))

    output_records.append(SUBTOTAL_PLACEHOLDER)
    num = update_expense_report(file_path, output_records)
    logger.info(f"Successfully wrote {num} records to expense report")
    return num


def process_directory(dir_path, month, year, rules=None):
    """Process every statement directly inside a directory.

    Only regular files ending in ".csv" or ".CSV" are processed, in filename
    order. Subdirectories are not descended into. The first failing statement
    stops the run, leaving later statements unprocessed.

    Returns:
        list: (filename, lines written) for each processed statement

    Raises:
        FileOpenError: If the directory cannot be listed
        ExpenseReportError: If any statement fails
    """
    try:
        names = sorted(os.listdir(dir_path))
    except OSError as e:
        raise FileOpenError(f"Failed to list directory {dir_path}: {e}") from e

    results = []
    for name in names:
        file_path = os.path.join(dir_path, name)
        if not os.path.isfile(file_path):
            continue
        _, ext = os.path.splitext(name)
        if ext not in STATEMENT_EXTENSIONS:
            continue
        logger.info(f"Processing statement {name}")
        results.append((name, process_statement(file_path, month, year, rules)))
    return results
