"""
Unit tests for the logging helpers.
"""
import logging

from quoridor_fences.utils.logging_utils import get_log_file_path, setup_logger, setup_loggers


def test_get_log_file_path_sanitizes_name(tmp_path):
    path = get_log_file_path("quoridor_fences.counting", log_dir=tmp_path, include_timestamp=False)
    assert path == tmp_path / "quoridor_fences_counting.log"


def test_get_log_file_path_with_timestamp_creates_dir(tmp_path):
    log_dir = tmp_path / "nested" / "logs"
    path = get_log_file_path("a.b", log_dir=log_dir)
    assert log_dir.is_dir()
    assert path.name.startswith("a_b_") and path.suffix == ".log"


def test_setup_logger_does_not_duplicate_handlers():
    """Calling setup twice replaces handlers rather than stacking them."""
    name = "quoridor_fences.tests.dup"
    setup_logger(name, level=logging.DEBUG)
    logger = setup_logger(name, level=logging.DEBUG)
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_setup_logger_explicit_file(tmp_path):
    log_file = tmp_path / "out" / "run.log"
    logger = setup_logger("quoridor_fences.tests.file", level=logging.INFO, log_file=str(log_file))
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()

    assert "hello" in log_file.read_text(encoding="utf-8")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_loggers_applies_level_to_all():
    names = ["quoridor_fences.tests.x", "quoridor_fences.tests.y"]
    setup_loggers(names, level=logging.WARNING)
    assert all(logging.getLogger(name).level == logging.WARNING for name in names)
