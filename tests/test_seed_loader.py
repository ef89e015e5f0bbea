# tests/test_seed_loader.py
import pytest

from autosuggest.core.seed_loader import SeedFormatError, load_seed_file


def test_parse(tmp_path):
    p = tmp_path / "words.csv"
    p.write_text("# comment\nalpha,10\n\nbeta\ngamma, 3\ndelta,\n", encoding="utf-8")
    assert load_seed_file(str(p)) == [("alpha", 10), ("beta", 1), ("gamma", 3), ("delta", 1)]


@pytest.mark.parametrize("line", ["word,abc", "word,-2", "a,1,2"])
def test_bad_lines(tmp_path, line):
    p = tmp_path / "bad.csv"
    p.write_text("ok,1\n" + line + "\n", encoding="utf-8")
    with pytest.raises(SeedFormatError) as info:
        load_seed_file(str(p))
    assert info.value.lineno == 2
    assert "bad.csv:2" in str(info.value)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_seed_file(str(tmp_path / "nope.csv"))


def test_byte_order_mark_is_dropped(tmp_path):
    p = tmp_path / "exported.csv"
    p.write_text("\ufeffhello,3\nworld\n", encoding="utf-8")
    assert load_seed_file(str(p)) == [("hello", 3), ("world", 1)]
