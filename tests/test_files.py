from __future__ import annotations

import codecs
from pathlib import Path

import pytest

from under.corpus.files import (
    FileBuffer,
    detect_encoding,
    expand_file_specs,
    read_file_buffer,
    read_file_buffers,
    write_file_buffers,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (codecs.BOM_UTF8 + b"x", ("utf-8", 3)),
        (codecs.BOM_UTF16_LE + b"x\x00", ("utf-16-le", 2)),
        (codecs.BOM_UTF16_BE + b"\x00x", ("utf-16-be", 2)),
        (codecs.BOM_UTF32_LE + b"x\x00\x00\x00", ("utf-32-le", 4)),
        (codecs.BOM_UTF32_BE + b"\x00\x00\x00x", ("utf-32-be", 4)),
        (b"plain", ("utf-8", 0)),
    ],
)
def test_detect_encoding(raw: bytes, expected: tuple[str, int]) -> None:
    assert detect_encoding(raw) == expected


def test_read_strips_bom_and_decodes(tmp_path: Path) -> None:
    path = tmp_path / "wide.js"
    path.write_bytes(codecs.BOM_UTF16_LE + "var é_ = 1;".encode("utf-16-le"))

    buffer = read_file_buffer(path)

    assert buffer.content == "var é_ = 1;"
    assert buffer.encoding == "utf-16-le"


def test_write_uses_utf8_bom_and_keeps_newlines(tmp_path: Path) -> None:
    path = tmp_path / "out.js"
    path.write_bytes(b"a\r\nb\n")

    buffers = read_file_buffers([path], progress=False)
    write_file_buffers(buffers, progress=False)

    assert path.read_bytes() == codecs.BOM_UTF8 + b"a\r\nb\n"


def test_write_overwrites_unconditionally(tmp_path: Path) -> None:
    path = tmp_path / "same.css"
    path.write_bytes(codecs.BOM_UTF8 + b"p {}")

    write_file_buffers([FileBuffer(path, "p {}")], progress=False)

    assert path.read_bytes() == codecs.BOM_UTF8 + b"p {}"


def _make_tree(root: Path) -> None:
    (root / "sub" / "deep").mkdir(parents=True)
    for name in ("a.js", "c.css", "sub/b.js", "sub/deep/d.js", "sub/e.css"):
        (root / name).write_text(name, encoding="utf-8")


def test_wildcard_specs_search_recursively(tmp_path: Path) -> None:
    _make_tree(tmp_path)

    paths = expand_file_specs(["*.js"], root=tmp_path)

    assert [path.relative_to(tmp_path).as_posix() for path in paths] == ["a.js", "sub/b.js", "sub/deep/d.js"]


def test_wildcard_specs_with_directory(tmp_path: Path) -> None:
    _make_tree(tmp_path)

    paths = expand_file_specs(["sub/*.css", "sub/?.js"], root=tmp_path)

    assert [path.relative_to(tmp_path).as_posix() for path in paths] == ["sub/e.css", "sub/b.js", "sub/deep/d.js"]


def test_duplicate_specs_are_collapsed(tmp_path: Path) -> None:
    _make_tree(tmp_path)

    paths = expand_file_specs(["a.js", "*.js", "a.js"], root=tmp_path)

    assert [path.relative_to(tmp_path).as_posix() for path in paths] == ["a.js", "sub/b.js", "sub/deep/d.js"]


def test_missing_literal_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        expand_file_specs(["nope.js"], root=tmp_path)


def test_unmatched_pattern_yields_nothing(tmp_path: Path) -> None:
    assert expand_file_specs(["*.ts"], root=tmp_path) == []
