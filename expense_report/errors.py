"""
Error kinds raised by the expense report pipeline.

Library code raises these and never exits the process; the command line
driver decides to log and abort.
"""


class ExpenseReportError(Exception):
    """Base class for all fatal expense report errors."""


class FileOpenError(ExpenseReportError):
    """A statement file or directory could not be opened."""


class CsvParseError(ExpenseReportError):
    """A statement file is not well-formed CSV."""


class UnknownBankError(ExpenseReportError):
    """A statement filename does not match any known bank."""


class UnknownLayoutError(ExpenseReportError):
    """No column layout is registered for a bank."""


class OutputWriteError(ExpenseReportError):
    """The expense report output file could not be written."""
