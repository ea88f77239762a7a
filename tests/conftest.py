import csv

import pytest

# Sample rows for each bank, header first
bofa_check_preamble_data = [
    ['Description', '', 'Summary Amt.'],
    ['Beginning balance as of 01/01/2024', '', '1000.00'],
    ['Total credits', '', '2500.00'],
    ['Total debits', '', '-1200.00'],
    ['Ending balance as of 01/31/2024', '', '2300.00'],
    ['', 'Account', '1234'],
    ['', 'Statement', 'January'],
]

bofa_check_sample_data = [
    ['Date', 'Description', 'Amount', 'Running Bal.'],
    ['01/15/2024', 'COFFEE', '4.50', '995.50'],
    ['02/01/2024', 'RENT', '-1500.00', '-504.50'],
]

bofa_credit_sample_data = [
    ['Posted Date', 'Reference Number', 'Payee', 'Address', 'Amount'],
    ['01/03/2024', '24492154003', 'AMAZON.COM', 'SEATTLE WA', '-25.99'],
    ['01/28/2024', '24492154004', 'PAYMENT - THANK YOU', '', '250.00'],
]

discover_sample_data = [
    ['Trans. Date', 'Post Date', 'Description', 'Amount', 'Category'],
    ['01/01/2024', '01/02/2024', 'GROCERY STORE', '40.33', 'Supermarkets'],
    ['12/30/2023', '01/02/2024', 'GAS STATION', '30.00', 'Gasoline'],
]

chase_sample_data = [
    ['Transaction Date', 'Post Date', 'Description', 'Category', 'Type', 'Amount', 'Memo'],
    ['1/5/24', '1/6/24', 'RESTAURANT', 'Food & Drink', 'Sale', '-45.67', ''],
    ['1/20/24', '1/21/24', 'Payment Thank You', '', 'Payment', '500.00', ''],
]


def write_csv(path, rows):
    with open(path, 'w', newline='') as f:
        csv.writer(f).writerows(rows)
    return path


@pytest.fixture
def statement_dir(tmp_path):
    """Statement directory with its output directory already in place."""
    (tmp_path / "output").mkdir()
    return tmp_path


@pytest.fixture
def write_statement(statement_dir):
    """Helper fixture to write a statement CSV into the statement directory"""
    def _write(filename, rows):
        return write_csv(statement_dir / filename, rows)
    return _write


@pytest.fixture
def create_statement(write_statement):
    """Helper fixture to write a sample statement for a bank"""
    def _create(bank_name, filename=None):
        sample_data = {
            'bofa_check': bofa_check_preamble_data + bofa_check_sample_data,
            'bofa_credit': bofa_credit_sample_data,
            'discover': discover_sample_data,
            'chase': chase_sample_data,
        }
        if bank_name not in sample_data:
            raise ValueError(f"Unknown bank: {bank_name}")
        return write_statement(filename or f"{bank_name}_jan.csv", sample_data[bank_name])
    return _create


@pytest.fixture
def read_report(statement_dir):
    """Helper fixture to read back the expense report"""
    def _read():
        return (statement_dir / "output" / "output.csv").read_text(encoding='utf-8')
    return _read


@pytest.fixture
def bofa_check_preamble():
    """The 7 summary rows at the top of a Bank of America checking export"""
    return [list(row) for row in bofa_check_preamble_data]
