"""
Utility functions for the expense report.

This module contains logging and configuration helpers that are used by the
command line driver but are not part of statement processing.
"""

import os
import logging

logger = logging.getLogger(__name__)

def setup_logging(debug=False, log_level='info'):
    """Configure logging for the application.

    Logs go to the console and to the file named by the LOG_FILE environment
    variable (default: expense_report.log).

    Returns:
        str: Path of the log file
    """
    # Determine log level
    if debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, log_level.upper(), logging.INFO)

    format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    log_file = os.getenv('LOG_FILE', 'expense_report.log')

    # Create log directory if needed
    log_dir = os.path.dirname(log_file)
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir, exist_ok=True)

    logging.basicConfig(
        level=level,
        format=format,
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )

    return log_file

def default_statement_dir():
    """Directory of bank statements, from EXPENSE_REPORT_DIR or the working directory."""
    return os.getenv('EXPENSE_REPORT_DIR', os.getcwd())
