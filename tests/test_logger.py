# tests/test_logger.py
import pytest

from autosuggest.utils.logger_utils import Log
from autosuggest.utils.metrics_tracker import Metrics


def test_write_format(log_to_tmp):
    Log.info("hello")
    line = log_to_tmp.read_text(encoding="utf-8").strip()
    assert line.endswith("INFO    | hello")
    assert line.startswith("[")


def test_level_threshold(log_to_tmp):
    Log.configure(level="warning")
    Log.info("quiet")
    Log.error("loud")
    text = log_to_tmp.read_text(encoding="utf-8")
    assert "quiet" not in text
    assert "loud" in text


def test_unknown_level():
    with pytest.raises(ValueError):
        Log.configure(level="chatty")


def test_echo(capsys, log_to_tmp):
    Log.configure(echo=True, use_color=False)
    try:
        Log.warning("shown")
    finally:
        Log.configure(echo=False, use_color=True)
    assert "WARNING | shown" in capsys.readouterr().out


def test_time_block(log_to_tmp):
    with Log.time_block("work") as t:
        sum(range(100))
    assert t.elapsed >= 0
    assert "work done" in log_to_tmp.read_text(encoding="utf-8")


def test_file_disabled(tmp_path):
    Log.configure(path=None)
    Log.error("nowhere")
    assert not (tmp_path / "test.log").exists()


def test_metrics():
    m = Metrics()
    assert m.avg("x") == 0.0
    m.record("x", 1.0)
    m.record("x", 3.0)
    assert m.avg("x") == 2.0
    assert m.count("x") == 2
    assert m.summary() == {"x": {"avg": 2.0, "count": 2}}
    m.reset()
    assert m.count("x") == 0
