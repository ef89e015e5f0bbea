# tests/conftest.py
import pytest

from autosuggest.utils.logger_utils import Log


@pytest.fixture(autouse=True)
def log_to_tmp(tmp_path):
    """Keep test runs from writing into ./logs."""
    saved = (Log.path, Log.echo, Log.level)
    Log.configure(path=str(tmp_path / "test.log"), echo=False, level="DEBUG")
    yield tmp_path / "test.log"
    Log.path, Log.echo, Log.level = saved
