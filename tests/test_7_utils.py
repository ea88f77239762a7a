import os

from expense_report.utils import setup_logging, default_statement_dir

def test_setup_logging_uses_log_file_env(tmp_path, monkeypatch):
    """Test that LOG_FILE picks the log path and its directory is created"""
    log_file = tmp_path / "logs" / "run.log"
    monkeypatch.setenv('LOG_FILE', str(log_file))

    assert setup_logging(debug=True) == str(log_file)
    assert log_file.parent.is_dir()

def test_setup_logging_default_file(monkeypatch, tmp_path):
    monkeypatch.delenv('LOG_FILE', raising=False)
    monkeypatch.chdir(tmp_path)

    assert setup_logging(log_level='warning') == 'expense_report.log'

def test_default_statement_dir(monkeypatch, tmp_path):
    monkeypatch.setenv('EXPENSE_REPORT_DIR', str(tmp_path))
    assert default_statement_dir() == str(tmp_path)

    monkeypatch.delenv('EXPENSE_REPORT_DIR')
    assert default_statement_dir() == os.getcwd()
