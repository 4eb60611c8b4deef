import json
import logging

import pytest
from rich.logging import RichHandler

from argline.utils import reset_logging, setup_logging


@pytest.fixture
def argline_logger():
    logger = logging.getLogger("argline")
    yield logger
    reset_logging()


def flush(logger):
    for handler in logger.handlers:
        handler.flush()


def test_setup_logging_cli(tmp_path, argline_logger):
    log_file = tmp_path / "argline.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    handlers = argline_logger.handlers
    assert any(isinstance(handler, RichHandler) for handler in handlers)
    assert any(isinstance(handler, logging.FileHandler) for handler in handlers)
    argline_logger.debug("hello from argline")
    flush(argline_logger)
    assert "hello from argline" in log_file.read_text(encoding="UTF-8")


def test_setup_logging_json_file(tmp_path, argline_logger):
    log_file = tmp_path / "argline.json.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)
    argline_logger.warning("structured")
    flush(argline_logger)
    lines = log_file.read_text(encoding="UTF-8").splitlines()
    assert json.loads(lines[-1])["message"] == "structured"


def test_setup_logging_without_file(tmp_path, monkeypatch, argline_logger):
    monkeypatch.chdir(tmp_path)
    setup_logging(mode="json")
    assert not any(
        isinstance(handler, logging.FileHandler) for handler in argline_logger.handlers
    )
    assert list(tmp_path.iterdir()) == []


def test_setup_logging_env_mode(monkeypatch, argline_logger):
    monkeypatch.setenv("ARGLINE_LOG_MODE", "json")
    setup_logging()
    assert not any(isinstance(handler, RichHandler) for handler in argline_logger.handlers)


def test_setup_logging_invalid_mode(argline_logger):
    with pytest.raises(ValueError):
        setup_logging(mode="xml")
    assert argline_logger.handlers == []


def test_setup_logging_leaves_root_logger_alone(argline_logger):
    root = logging.getLogger()
    before = list(root.handlers)
    setup_logging(mode="json")
    assert root.handlers == before
    assert argline_logger.propagate is False


def test_setup_logging_twice_closes_previous_handlers(tmp_path, argline_logger):
    setup_logging(mode="json", log_filename=str(tmp_path / "first.log"))
    first = [
        handler
        for handler in argline_logger.handlers
        if isinstance(handler, logging.FileHandler)
    ]
    setup_logging(mode="json", log_filename=str(tmp_path / "second.log"))

    assert len(first) == 1
    assert first[0].stream is None or first[0].stream.closed
    assert first[0] not in argline_logger.handlers
    assert len(argline_logger.handlers) == 2


def test_reset_logging_keeps_foreign_handlers(argline_logger):
    foreign = logging.NullHandler()
    argline_logger.addHandler(foreign)
    try:
        setup_logging(mode="json")
        reset_logging()
        assert argline_logger.handlers == [foreign]
        assert argline_logger.propagate is True
    finally:
        argline_logger.removeHandler(foreign)
