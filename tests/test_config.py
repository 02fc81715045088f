# tests/test_config.py
import io
import json
import logging
import sys

import pytest

from wordcount.utils.config_manager import Config, CounterConfig
from wordcount.utils.logger_utils import configure_logging, time_block


def test_defaults_without_file(tmp_path):
    cfg = Config(str(tmp_path / "absent.json"))
    assert cfg.counter_config() == CounterConfig()
    # nothing written back
    assert not (tmp_path / "absent.json").exists()


def test_file_overrides_defaults(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"initial_capacity": "8", "growth_factor": 4}))
    cc = Config(str(p)).counter_config()
    assert cc.initial_capacity == 8
    assert cc.growth_factor == 4
    assert cc.load_factor == 0.75


def test_env_var_path(tmp_path, monkeypatch):
    p = tmp_path / "env.json"
    p.write_text(json.dumps({"log_level": "debug"}))
    monkeypatch.setenv("WORDCOUNT_CONFIG", str(p))
    assert Config().counter_config().log_level == "debug"


def test_unknown_key_warns(tmp_path, caplog):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"colour": "blue"}))
    with caplog.at_level(logging.WARNING):
        cfg = Config(str(p))
    assert "colour" not in cfg.data
    assert "unknown config option" in caplog.text


@pytest.mark.parametrize("content", [
    json.dumps({"initial_capacity": 1.9}),
    json.dumps({"growth_factor": True}),
    json.dumps({"log_level": 5}),
    "{not json",
    "[1, 2]",
    json.dumps({"initial_capacity": "many"}),
])
def test_malformed_file(tmp_path, content):
    p = tmp_path / "cfg.json"
    p.write_text(content)
    with pytest.raises(ValueError):
        Config(str(p))


def test_bad_log_level():
    with pytest.raises(ValueError):
        CounterConfig(log_level="LOUD")


def test_configure_logging_is_idempotent():
    log = configure_logging("info")
    n = len(log.handlers)
    configure_logging("debug")
    assert len(log.handlers) == n
    assert log.level == logging.DEBUG
    configure_logging("warning")


def test_time_block_logs(caplog):
    configure_logging("info")
    with caplog.at_level(logging.INFO, logger="wordcount"):
        with time_block("counting"):
            pass
    assert "counting done in" in caplog.text
    configure_logging("warning")


def test_whole_float_accepted_for_int_option(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"initial_capacity": 8.0}))
    assert Config(str(p)).counter_config().initial_capacity == 8


def test_directory_config_path(tmp_path):
    d = tmp_path / "cfg.json"
    d.mkdir()
    with pytest.raises(ValueError, match="invalid config file"):
        Config(str(d))


def test_configure_logging_after_stream_closed(monkeypatch):
    old = io.StringIO()
    monkeypatch.setattr(sys, "stderr", old)
    configure_logging("warning")
    old.close()

    fresh = io.StringIO()
    monkeypatch.setattr(sys, "stderr", fresh)
    log = configure_logging("warning")
    log.warning("still logging")
    assert "still logging" in fresh.getvalue()
    assert sum(1 for h in log.handlers if isinstance(h, logging.StreamHandler)) == 1


def test_time_block_keeps_elapsed():
    with time_block("phase") as t:
        pass
    assert t.elapsed >= 0.0
