import logging

import pytest

from core.errors import HighScoreError
from core.high_score import HighScoreStore


def write(store, text):
    with open(store.path, "w") as f:
        f.write(text)


def test_missing_file_reads_as_zero(store):
    assert store.load() == 0


@pytest.mark.parametrize("text, expected", [
    ("123", 123),
    ("42\n", 42),
    ("  7  ", 7),
    ("0", 0),
])
def test_stored_value_is_read_back(store, text, expected):
    write(store, text)

    assert store.load() == expected


@pytest.mark.parametrize("text", ["", "abc", "12.5", "-5"])
def test_garbage_reads_as_zero_with_a_warning(store, caplog, text):
    write(store, text)

    with caplog.at_level(logging.WARNING, logger="fattybird"):
        assert store.load() == 0

    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_save_overwrites_instead_of_appending(store):
    write(store, "999")

    store.save(7)

    with open(store.path) as f:
        assert f.read() == "7"
    assert store.load() == 7


def test_unwritable_path_raises(broken_store):
    with pytest.raises(HighScoreError):
        broken_store.save(1)


def test_accepts_path_objects(tmp_path):
    store = HighScoreStore(tmp_path / "hs.txt")
    store.save(12)

    assert store.load() == 12
