from __future__ import annotations

import codecs
import csv
from pathlib import Path

import pyarrow.parquet as pq
import pytest

from under.cli import format_time, format_value, main


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "lib").mkdir()
    (tmp_path / "app.js").write_text("zig_ zig_ zig_ boston_ apple", encoding="utf-8")
    (tmp_path / "lib" / "util.js").write_text("boston_(apple)", encoding="utf-8")
    return tmp_path


def test_rename_rewrites_matching_files(workspace: Path) -> None:
    exit_code = main(["--no-log-file", "rename", "--no-progress", "*.js", "-l", "ab"])

    assert exit_code == 0
    assert (workspace / "app.js").read_bytes() == codecs.BOM_UTF8 + b"a a a b apple"
    assert (workspace / "lib" / "util.js").read_bytes() == codecs.BOM_UTF8 + b"b(apple)"


def test_rename_uses_default_config_file(workspace: Path) -> None:
    (workspace / "under.yaml").write_text("letters: xy\n", encoding="utf-8")

    assert main(["--no-log-file", "rename", "--no-progress", "app.js"]) == 0
    assert (workspace / "app.js").read_text(encoding="utf-8-sig") == "x x x y apple"


def test_rename_without_letters_fails_and_keeps_files(workspace: Path) -> None:
    path = workspace / "numbers.txt"
    path.write_bytes(b"1_ 22 3$")

    assert main(["--no-log-file", "rename", "--no-progress", "numbers.txt"]) == 1
    assert path.read_bytes() == b"1_ 22 3$"


def test_rename_file_without_targets_succeeds(workspace: Path) -> None:
    path = workspace / "numbers.txt"
    path.write_bytes(b"1 22 3$")

    assert main(["--no-log-file", "rename", "--no-progress", "numbers.txt"]) == 0
    assert path.read_bytes() == codecs.BOM_UTF8 + b"1 22 3$"


def test_rename_missing_file_fails(workspace: Path) -> None:
    assert main(["--no-log-file", "rename", "--no-progress", "missing.js"]) == 1
    assert (workspace / "app.js").read_text(encoding="utf-8") == "zig_ zig_ zig_ boston_ apple"


def test_bad_arguments_exit_with_usage_error(workspace: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["rename"])
    assert excinfo.value.code == 2


def test_analyze_writes_reports_without_touching_sources(workspace: Path) -> None:
    map_path = workspace / "out" / "map.csv"
    frequency_path = workspace / "out" / "frequency.parquet"

    exit_code = main(
        [
            "--no-log-file",
            "analyze",
            "--no-progress",
            "*.js",
            "-l",
            "ab",
            "--output-map",
            str(map_path),
            "--output-frequency",
            str(frequency_path),
        ]
    )

    assert exit_code == 0
    assert (workspace / "app.js").read_text(encoding="utf-8") == "zig_ zig_ zig_ boston_ apple"
    assert pq.read_table(frequency_path).to_pydict() == {"word": ["zig_", "boston_"], "frequency": [3, 2]}

    with map_path.open(newline="", encoding="utf-8") as handle:
        rows = list(csv.DictReader(handle))
    assert [(row["original"], row["replacement"], row["saved_chars"]) for row in rows] == [
        ("zig_", "a", "9"),
        ("boston_", "b", "12"),
    ]


def test_format_helpers() -> None:
    assert format_time(0.25) == "250ms"
    assert format_time(75) == "1분 15.0초"
    assert format_value(12345) == "12,345"
    assert format_value("x" * 200).endswith("...")
