import io
import json
from pathlib import Path

import pytest

from baus.config import SelectorConfig
from baus.lines import InputError
from baus.runner import SelectorRunner
from ranking import ClockError
from store import ScoreStore, StoreFormatError


def _write_store(path: Path, scores: dict[str, int]) -> None:
    path.write_text(json.dumps(scores), encoding="utf-8")


def _runner(tmp_path: Path, **overrides: object) -> SelectorRunner:
    config = SelectorConfig.from_dict({"name": "pets", "cache_dir": str(tmp_path), **overrides})
    return SelectorRunner(config)


def test_cache_file_follows_name(tmp_path: Path) -> None:
    runner = _runner(tmp_path)

    assert runner.cache_file == tmp_path / "pets.json"


def test_sort_ascending(tmp_path: Path) -> None:
    _write_store(tmp_path / "pets.json", {"horse": 2, "hamster": 1})

    output = _runner(tmp_path).run(io.StringIO("horse\nhamster\n"))

    assert output == ["hamster", "horse"]


def test_sort_descending(tmp_path: Path) -> None:
    _write_store(tmp_path / "pets.json", {"horse": 2, "hamster": 1})

    output = _runner(tmp_path, desc=True).run(io.StringIO("horse\nhamster\n"))

    assert output == ["horse", "hamster"]


def test_sort_without_cleanup_leaves_file_alone(tmp_path: Path) -> None:
    path = tmp_path / "pets.json"
    _write_store(path, {"horse": 2, "dodo": 1})
    before = path.read_text(encoding="utf-8")

    _ = _runner(tmp_path).run(io.StringIO("horse\ncat\n"))

    assert path.read_text(encoding="utf-8") == before


def test_sort_creates_empty_store(tmp_path: Path) -> None:
    output = _runner(tmp_path).run(io.StringIO("b\na\n"))

    assert output == ["b", "a"]
    assert ScoreStore.load(tmp_path / "pets.json").to_dict() == {}


def test_sort_with_cleanup_on_empty_store(tmp_path: Path) -> None:
    output = _runner(tmp_path, cleanup=True).run(io.StringIO("a\nb\n"))

    assert output == ["a", "b"]
    assert ScoreStore.load(tmp_path / "pets.json").to_dict() == {"a": 0, "b": 0}


def test_sort_with_cleanup_evicts_stale_lines(tmp_path: Path) -> None:
    _write_store(tmp_path / "pets.json", {"horse": 2, "hamster": 1, "dodo": 4})

    output = _runner(tmp_path, cleanup=True, desc=True).run(io.StringIO("horse\nhamster\ncat\n"))

    assert output == ["horse", "hamster", "cat"]
    assert ScoreStore.load(tmp_path / "pets.json").to_dict() == {"horse": 2, "hamster": 1, "cat": 0}


def test_save_count(tmp_path: Path) -> None:
    _write_store(tmp_path / "pets.json", {"horse": 2, "hamster": 1})

    output = _runner(tmp_path, action="save").run(io.StringIO("horse\nhamster\n"))

    assert output == ["horse"]
    assert ScoreStore.load(tmp_path / "pets.json").to_dict() == {"horse": 3, "hamster": 1}


def test_save_timestamp(tmp_path: Path) -> None:
    config = SelectorConfig.from_dict(
        {"name": "pets", "cache_dir": str(tmp_path), "action": "save", "value": "timestamp"}
    )
    runner = SelectorRunner(config, clock=lambda: 1_700_000_123.0)

    output = runner.run(io.StringIO("horse\r\n"))

    assert output == ["horse"]
    assert ScoreStore.load(tmp_path / "pets.json").to_dict() == {"horse": 1_700_000_123}


def test_save_empty_input(tmp_path: Path) -> None:
    _write_store(tmp_path / "pets.json", {"horse": 2})

    output = _runner(tmp_path, action="save").run(io.StringIO(""))

    assert output == []
    assert ScoreStore.load(tmp_path / "pets.json").to_dict() == {"horse": 2}


def test_save_clock_error_persists_nothing(tmp_path: Path) -> None:
    path = tmp_path / "pets.json"
    _write_store(path, {"horse": 2})
    config = SelectorConfig.from_dict(
        {"name": "pets", "cache_dir": str(tmp_path), "action": "save", "value": "timestamp"}
    )

    with pytest.raises(ClockError):
        SelectorRunner(config, clock=lambda: -1.0).run(io.StringIO("horse\n"))
    assert ScoreStore.load(path).to_dict() == {"horse": 2}


def test_corrupt_store_aborts_before_reading_input(tmp_path: Path) -> None:
    (tmp_path / "pets.json").write_text("{broken", encoding="utf-8")
    source = io.StringIO("horse\n")

    with pytest.raises(StoreFormatError):
        _runner(tmp_path).run(source)
    assert source.tell() == 0


def test_explicit_cache_file(tmp_path: Path) -> None:
    path = tmp_path / "elsewhere.json"
    _write_store(path, {"b": 1})
    runner = SelectorRunner(SelectorConfig(), cache_file=path)

    assert runner.run(io.StringIO("b\na\n")) == ["a", "b"]


def test_undecodable_input_persists_nothing(tmp_path: Path) -> None:
    path = tmp_path / "pets.json"
    _write_store(path, {"horse": 2})
    source = io.TextIOWrapper(io.BytesIO(b"horse\n\xff\xfe\n"), encoding="utf-8")

    with pytest.raises(InputError):
        _runner(tmp_path, action="save").run(source)
    assert ScoreStore.load(path).to_dict() == {"horse": 2}
