"""Tests for ShiftConfig."""

import pytest

from colormap_shift import ConfigError, DEFAULT_OFFSET, DEFAULT_STRIDE, ShiftConfig, ShiftLogger


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("COLORMAP_SHIFT_CONFIG_FILE", raising=False)
    monkeypatch.delenv("COLORMAP_SHIFT_LOG_FILE", raising=False)


def write_config(tmp_path, body):
    path = tmp_path / "shift.ini"
    path.write_text(body, encoding="utf-8")
    return str(path)


def test_defaults_without_config_file(tmp_path):
    config = ShiftConfig(log_path=str(tmp_path / "shift.log"))
    assert config.stride == DEFAULT_STRIDE
    assert config.default_offset == DEFAULT_OFFSET
    assert config.legacy_reset is False
    assert config.verbose is False
    assert config.debugging is False
    assert config.log_file == str(tmp_path / "shift.log")


def test_values_from_main_section(tmp_path):
    path = write_config(tmp_path, "[main]\n"
                                  "stride = 8\n"
                                  "default-offset = 32\n"
                                  "legacy-reset = yes\n"
                                  "verbose = true\n"
                                  "debugging = 1\n"
                                  "log-file = /tmp/elsewhere.log\n")
    config = ShiftConfig(config_path=path)
    assert config.stride == 8
    assert config.default_offset == 32
    assert config.legacy_reset is True
    assert config.verbose is True
    assert config.debugging is True
    assert config.log_file == "/tmp/elsewhere.log"


def test_other_sections_are_ignored(tmp_path):
    path = write_config(tmp_path, "[other]\nstride = 3\n")
    assert ShiftConfig(config_path=path).stride == DEFAULT_STRIDE


def test_env_vars_are_used(tmp_path, monkeypatch):
    path = write_config(tmp_path, "[main]\nstride = 4\nlog-file = ignored.log\n")
    monkeypatch.setenv("COLORMAP_SHIFT_CONFIG_FILE", path)
    monkeypatch.setenv("COLORMAP_SHIFT_LOG_FILE", str(tmp_path / "env.log"))
    config = ShiftConfig()
    assert config.config_file == path
    assert config.stride == 4
    assert config.log_file == str(tmp_path / "env.log")


def test_explicit_log_path_wins(tmp_path, monkeypatch):
    monkeypatch.setenv("COLORMAP_SHIFT_LOG_FILE", "env.log")
    assert ShiftConfig(log_path="arg.log").log_file == "arg.log"


def test_missing_named_config_file(tmp_path):
    with pytest.raises(ConfigError):
        ShiftConfig(config_path=str(tmp_path / "missing.ini"))


@pytest.mark.parametrize("body", [
    "[main]\nstride = wide\n",
    "[main]\nstride = 0\n",
    "[main]\ndefault-offset = 256\n",
    "[main]\ndefault-offset = -1\n",
    "[main]\nlegacy-reset = maybe\n",
    "stride = 16\n",
    "[main]\nstride = 1%\n",
    "[main]\ndefault-offset = %(stride)s\n",
])
def test_invalid_config(tmp_path, body):
    with pytest.raises(ConfigError):
        ShiftConfig(config_path=write_config(tmp_path, body))


def test_percent_in_log_file_is_kept_literally(tmp_path):
    path = write_config(tmp_path, "[main]\nlog-file = C:\\%USERPROFILE%\\shift.log\n")
    assert ShiftConfig(config_path=path).log_file == "C:\\%USERPROFILE%\\shift.log"


def test_config_file_that_is_not_utf8(tmp_path):
    path = tmp_path / "shift.ini"
    path.write_bytes(b"[main]\nlog-file = \xff\xfe.log\n")
    with pytest.raises(ConfigError):
        ShiftConfig(config_path=str(path))


def test_no_log_file_by_default(tmp_path, monkeypatch):
    monkeypatch.setenv("COLORMAP_SHIFT_CONFIG_FILE", write_config(tmp_path, "[main]\nstride = 8\n"))
    assert ShiftConfig().log_file is None


def test_default_config_opens_no_log_handler():
    config = ShiftConfig()
    log = ShiftLogger(False, config.log_file, messenger=[].append)
    assert not log.enabled
    assert log.handler is None
    log.close()
