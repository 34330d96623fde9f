import pytest

from complexity_cli.core.logging import (
    configure_logging,
    is_debug_enabled,
    log_context,
    log_debug,
    log_error,
    log_info,
    logged_operation,
)


def test_log_file_includes_context(tmp_path):
    log_path = tmp_path / "run.log"
    configure_logging(log_file=str(log_path))
    try:
        log_info("Scanning lines", source="main.cpp")
        with log_context(command="analyze_command"):
            log_debug("Discovered functions: none")
        text = log_path.read_text(encoding="utf-8")
    finally:
        configure_logging()

    assert "[source=main.cpp]" in text
    assert "Scanning lines" in text
    assert "[command=analyze_command] " in text
    assert "DEBUG" in text


def test_log_context_is_restored(tmp_path):
    log_path = tmp_path / "run.log"
    configure_logging(log_file=str(log_path))
    try:
        with log_context(source="a.cpp"):
            log_info("inside")
        log_info("outside")
        lines = log_path.read_text(encoding="utf-8").splitlines()
    finally:
        configure_logging()

    assert lines[0].startswith("[source=a.cpp]")
    assert not lines[1].startswith("[")


def test_log_error_writes_error_record(tmp_path):
    log_path = tmp_path / "run.log"
    configure_logging(log_file=str(log_path))
    try:
        log_error("Export failed", source="main.cpp")
        text = log_path.read_text(encoding="utf-8")
    finally:
        configure_logging()

    assert "[source=main.cpp]" in text
    assert " - ERROR - Export failed" in text


def test_logged_operation_logs_failure(tmp_path):
    log_path = tmp_path / "run.log"

    @logged_operation("analyze_command")
    def failing():
        raise ValueError("bad input")

    configure_logging(log_file=str(log_path))
    try:
        with pytest.raises(ValueError):
            failing()
        text = log_path.read_text(encoding="utf-8")
    finally:
        configure_logging()

    assert "[command=analyze_command]" in text
    assert "ERROR - Failed analyze_command after" in text
    assert "bad input" in text


def test_debug_flag_follows_latest_configuration():
    configure_logging(debug=True)
    try:
        assert is_debug_enabled()
    finally:
        configure_logging()
    assert not is_debug_enabled()
