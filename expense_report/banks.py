"""
Bank Format Registry

Maps statement filenames to the bank that exported them, and each bank to the
column layout of its CSV export.

Supported Banks:
- Bank of America checking (7 preamble rows before the header)
- Bank of America credit card
- Discover
- Chase

Filename matching is substring based and case-sensitive on the raw filename.
Rules are evaluated in order and the first match wins, so a filename containing
both "chase" and "bofa" is classified as Chase.
"""

import enum
import logging
from typing import NamedTuple

from expense_report.errors import UnknownBankError, UnknownLayoutError

logger = logging.getLogger(__name__)


class Bank(enum.Enum):
    UNKNOWN = 0
    BOFA_CHECK = 1
    BOFA_CREDIT = 2
    DISCOVER = 3
    CHASE = 4

    def __str__(self):
        return self.name


class ColumnLayout(NamedTuple):
    """Zero-based column indices of the fields used in the report."""
    transaction_date: int
    description: int
    amount: int

    def fields(self):
        return {
            'transactionDate': self.transaction_date,
            'description': self.description,
            'amount': self.amount,
        }


COLUMN_LAYOUTS = {
    Bank.BOFA_CHECK: ColumnLayout(transaction_date=0, description=1, amount=2),
    Bank.BOFA_CREDIT: ColumnLayout(transaction_date=0, description=2, amount=4),
    Bank.DISCOVER: ColumnLayout(transaction_date=0, description=2, amount=3),
    Bank.CHASE: ColumnLayout(transaction_date=0, description=2, amount=5),
}

# Leading rows of an export that precede the CSV header
PREAMBLE_ROWS = {
    Bank.BOFA_CHECK: 7,
}

BANK_RULES = [
    (lambda name: name.startswith('discover'), Bank.DISCOVER),
    (lambda name: 'chase' in name, Bank.CHASE),
    (lambda name: 'bofa' in name and 'check' in name, Bank.BOFA_CHECK),
    (lambda name: 'bofa' in name, Bank.BOFA_CREDIT),
]


def identify_bank(filename: str) -> Bank:
    """Identify the bank that produced a statement from its filename.

    Args:
        filename (str): Base name of the statement file (not a full path)

    Returns:
        Bank: The matched bank

    Raises:
        UnknownBankError: If no rule matches the filename
    """
    for matches, bank in BANK_RULES:
        if matches(filename):
            logger.debug(f"Identified bank {bank} for {filename}")
            return bank
    raise UnknownBankError(f"Failed to get bank type for filename {filename}")


def get_column_layout(bank: Bank) -> ColumnLayout:
    """Look up the column layout of a bank's CSV export.

    Raises:
        UnknownLayoutError: If the bank has no registered layout
    """
    try:
        return COLUMN_LAYOUTS[bank]
    except KeyError:
        raise UnknownLayoutError(f"Failed to get record format for bank {bank}") from None


def preamble_rows(bank: Bank) -> int:
    return PREAMBLE_ROWS.get(bank, 0)
