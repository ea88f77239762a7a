"""Generate the monthly expense report from a directory of bank statements."""

import sys

from expense_report.cli import main

if __name__ == '__main__':
    sys.exit(main())
