"""
Tests for log handler construction (stdout + optional log directory).
"""

import logging

from logging_config import LOG_FILE_NAME, build_handlers


def test_without_log_dir_only_stdout():
    handlers = build_handlers("")

    assert len(handlers) == 1
    assert type(handlers[0]) is logging.StreamHandler


def test_log_dir_adds_file_handler(tmp_path):
    log_dir = tmp_path / "logs" / "nested"

    handlers = build_handlers(str(log_dir))

    try:
        assert len(handlers) == 2
        file_handler = handlers[1]
        assert isinstance(file_handler, logging.FileHandler)
        assert log_dir.is_dir()

        logger = logging.getLogger("imageshell.test.file_handler")
        logger.propagate = False
        logger.setLevel(logging.INFO)
        logger.addHandler(file_handler)
        logger.info("launch ingest accepted 2 image(s)")
        file_handler.flush()

        content = (log_dir / LOG_FILE_NAME).read_text(encoding="utf-8")
        assert "launch ingest accepted 2 image(s)" in content
    finally:
        logging.getLogger("imageshell.test.file_handler").handlers.clear()
        for handler in handlers:
            handler.close()
