"""Tests for ShiftLogger."""

import logging

import pytest

from colormap_shift import ShiftLogger
from colormap_shift.logger import LOGGER_NAME


@pytest.fixture
def messages():
    return []


@pytest.fixture(autouse=True)
def restore_level():
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    yield
    logger.setLevel(level)


def make_logger(tmp_path, messages, **kwargs):
    log = ShiftLogger(logfile=str(tmp_path / "shift.log"),
                      messenger=messages.append, **kwargs)
    return log


def read_log(tmp_path):
    return (tmp_path / "shift.log").read_text(encoding="utf-8")


def test_messages_go_to_log_file(tmp_path, messages):
    log = make_logger(tmp_path, messages, interactive=False)
    assert log.enabled
    log.message("hello")
    log.warning("careful")
    log.error("broken")
    log.close()
    text = read_log(tmp_path)
    assert "| colormap_shift | INFO | hello" in text
    assert "| WARNING | careful" in text
    assert "| ERROR | broken" in text
    assert messages == []


def test_interactive_messages_reach_the_user(tmp_path, messages, capsys):
    log = make_logger(tmp_path, messages, interactive=True)
    log.message("hello")
    log.error("broken")
    log.close()
    assert messages == ["hello", "ERROR: broken"]
    assert "ERROR: broken" in capsys.readouterr().out


def test_debug_needs_debugging(tmp_path, messages):
    log = make_logger(tmp_path, messages, interactive=False)
    log.debug("hidden")
    log.close()
    assert "hidden" not in read_log(tmp_path)

    log = make_logger(tmp_path, messages, interactive=False, debugging=True)
    log.debug("shown")
    log.close()
    assert "shown" in read_log(tmp_path)


def test_info_needs_verbose(tmp_path, messages):
    log = make_logger(tmp_path, messages, interactive=True, verbose=False)
    log.info("quiet")
    log.gimp_verbose_message("quiet too")
    log.close()
    assert "quiet" not in read_log(tmp_path)
    assert messages == []

    log = make_logger(tmp_path, messages, interactive=True, verbose=True)
    log.info("loud")
    log.gimp_verbose_message("loud too")
    log.close()
    assert "loud" in read_log(tmp_path)
    assert messages == ["loud too"]


def test_append_keeps_earlier_lines(tmp_path, messages):
    log = make_logger(tmp_path, messages, interactive=False)
    log.message("first")
    log.close()
    log = make_logger(tmp_path, messages, interactive=False, append=True)
    log.message("second")
    log.close()
    text = read_log(tmp_path)
    assert "first" in text and "second" in text


def test_set_interactive(tmp_path, messages):
    log = make_logger(tmp_path, messages, interactive=False)
    log.set_interactive(True)
    log.warning("now visible")
    log.close()
    assert messages == ["WARNING: now visible"]


def test_unwritable_log_file_disables_logging(tmp_path, messages, capsys):
    log = ShiftLogger(True, logfile=str(tmp_path / "missing" / "shift.log"),
                      messenger=messages.append)
    assert not log.enabled
    assert len(messages) == 1
    assert "COLORMAP_SHIFT_LOG_FILE" in messages[0]
    log.message("still works")
    assert messages[-1] == "still works"


def test_no_log_file(messages):
    log = ShiftLogger(False, messenger=messages.append)
    assert not log.enabled
    log.message("console only")
    log.close()
