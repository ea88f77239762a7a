"""
Expense Report - A tool for building a monthly expense report from bank statements.

This package provides functionality to:
- Identify the bank of a statement from its filename (Bank of America checking
  and credit, Discover, Chase)
- Read statement CSV files and keep the transactions of a target month
- Normalize each bank's column layout into date, description and amount
- Append the results to <statement dir>/output/output.csv

The report format per statement:
- A header line with the statement filename
- One "date,description,amount" line per kept transaction
- A "Subtotal,," placeholder line
"""

from .banks import (
    Bank,
    ColumnLayout,
    identify_bank,
    get_column_layout
)
from .errors import (
    ExpenseReportError,
    FileOpenError,
    CsvParseError,
    UnknownBankError,
    UnknownLayoutError,
    OutputWriteError
)
from .report import update_expense_report
from .statements import (
    read_statement_rows,
    skip_record_rules,
    description_contains,
    process_statement,
    process_directory
)

__all__ = [
    'Bank',
    'ColumnLayout',
    'identify_bank',
    'get_column_layout',
    'ExpenseReportError',
    'FileOpenError',
    'CsvParseError',
    'UnknownBankError',
    'UnknownLayoutError',
    'OutputWriteError',
    'update_expense_report',
    'read_statement_rows',
    'skip_record_rules',
    'description_contains',
    'process_statement',
    'process_directory'
]
