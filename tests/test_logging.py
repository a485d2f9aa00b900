import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from flagwork.utils import get_program_invocation, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_setup_logging_cli():
    setup_logging(mode="cli", console_log_level=logging.INFO)
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], RichHandler)
    assert root.handlers[0].level == logging.INFO


def test_setup_logging_json():
    setup_logging(mode="json")
    handler = logging.getLogger().handlers[0]
    assert isinstance(handler.formatter, JsonFormatter)
    assert handler.level == logging.WARNING


def test_setup_logging_from_environment(monkeypatch):
    monkeypatch.setenv("FLAGWORK_LOG_MODE", "json")
    setup_logging()
    assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError):
        setup_logging(mode="xml")


def test_setup_logging_file(tmp_path):
    log_file = tmp_path / "flagwork.log"
    setup_logging(mode="cli", log_filename=str(log_file), json_log_to_file=True)
    handlers = logging.getLogger().handlers
    file_handlers = [h for h in handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert isinstance(file_handlers[0].formatter, JsonFormatter)

    logging.getLogger("flagwork").debug("written to file")
    file_handlers[0].flush()
    assert "written to file" in log_file.read_text(encoding="UTF-8")


def test_get_program_invocation(monkeypatch):
    monkeypatch.setattr("sys.argv", ["/nonexistent/bin/mytool"])
    assert get_program_invocation() == "mytool"
    monkeypatch.setattr("sys.argv", ["/somewhere/flagwork/__main__.py"])
    assert get_program_invocation() == "flagwork"
