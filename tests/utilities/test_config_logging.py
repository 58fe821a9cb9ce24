# tests/utilities/test_config_logging.py
import logging

from qif_json.utilities import LOGGING, build_logging_config, configure_logging


def test_build_config_does_not_mutate_base_dict():
    # Act
    cfg = build_logging_config("DEBUG")

    # Assert
    assert cfg["handlers"]["console"]["level"] == "DEBUG"
    assert LOGGING["handlers"]["console"]["level"] == "WARNING"
    assert "file" not in cfg["handlers"]


def test_build_config_with_log_file_adds_rotating_handler(tmp_path):
    # Arrange
    log_file = tmp_path / "logs" / "qif.log"

    # Act
    cfg = build_logging_config(log_file=log_file)

    # Assert
    handler = cfg["handlers"]["file"]
    assert handler["class"] == "logging.handlers.RotatingFileHandler"
    assert handler["filename"] == str(log_file)
    assert cfg["loggers"][""]["handlers"] == ["console", "file"]
    assert LOGGING["loggers"][""]["handlers"] == ["console"]


def test_configure_logging_creates_log_directory_and_writes(tmp_path):
    # Arrange
    log_file = tmp_path / "logs" / "qif.log"
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level

    try:
        # Act
        configure_logging("WARNING", log_file)
        logging.getLogger("qif_json.test").debug("hello file")
        for h in root.handlers:
            h.flush()

        # Assert
        assert log_file.exists()
        assert "hello file" in log_file.read_text(encoding="utf-8")
    finally:
        for h in root.handlers:
            if h not in saved_handlers:
                h.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
