"""대상 파일 수집과 읽기/쓰기를 담당하는 헬퍼입니다.

모든 파일을 읽은 뒤에야 쓰기를 시작합니다. 쓰기는 파일 단위로 이루어지므로
도중에 실패하면 이미 쓴 파일은 변경된 상태로, 나머지는 원본 그대로 남습니다.
"""

from __future__ import annotations

import codecs
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from tqdm import tqdm

logger = logging.getLogger(__name__)

_WILDCARD_CHARS = ("*", "?")

# 긴 BOM 을 먼저 검사해야 UTF-32 LE 를 UTF-16 LE 로 오인하지 않습니다.
_BOMS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)

OUTPUT_ENCODING = "utf-8-sig"


@dataclass(slots=True)
class FileBuffer:
    """실행 동안 메모리에 올려 둔 파일 내용."""

    path: Path
    content: str
    encoding: str = "utf-8"


def _is_wildcard(spec: str) -> bool:
    return any(ch in spec for ch in _WILDCARD_CHARS)


def expand_file_specs(specs: Iterable[str], root: Path | None = None) -> list[Path]:
    """파일 이름 또는 검색 패턴 목록을 실제 파일 경로 목록으로 확장합니다.

    ``*`` 나 ``?`` 가 들어 있으면 디렉토리 부분(없으면 현재 디렉토리) 아래를
    재귀적으로 검색합니다. 중복 경로는 처음 나온 것만 남깁니다.

    Raises:
        FileNotFoundError: 와일드카드가 없는 경로가 파일이 아닌 경우
    """
    base = root or Path(".")
    files: dict[Path, None] = {}

    for spec in specs:
        if _is_wildcard(spec):
            directory, _, pattern = spec.replace("\\", "/").rpartition("/")
            search_dir = base / (directory or ".")
            matches = sorted(path for path in search_dir.rglob(pattern) if path.is_file())
            if not matches:
                logger.warning("패턴과 일치하는 파일이 없습니다: %s", spec)
            for path in matches:
                files.setdefault(path, None)
            continue

        path = base / spec
        if not path.is_file():
            raise FileNotFoundError(f"파일을 찾을 수 없습니다: {spec}")
        files.setdefault(path, None)

    return list(files)


def detect_encoding(raw: bytes) -> tuple[str, int]:
    """BOM 으로 인코딩을 판별하여 (인코딩, BOM 길이)를 반환합니다.

    BOM 이 없으면 UTF-8 로 간주합니다.
    """
    for bom, encoding in _BOMS:
        if raw.startswith(bom):
            return encoding, len(bom)
    return "utf-8", 0


def read_file_buffer(path: Path) -> FileBuffer:
    """파일 하나를 읽어 BOM 을 제거한 텍스트 버퍼로 만듭니다."""
    raw = path.read_bytes()
    encoding, bom_length = detect_encoding(raw)
    return FileBuffer(path=path, content=raw[bom_length:].decode(encoding), encoding=encoding)


def read_file_buffers(paths: Sequence[Path], *, progress: bool = True) -> list[FileBuffer]:
    """모든 파일을 읽습니다."""
    buffers = [
        read_file_buffer(path)
        for path in tqdm(paths, desc="📂 파일 읽기", unit="개", disable=not progress)
    ]
    logger.debug("파일 %d개를 읽었습니다.", len(buffers))
    return buffers


def write_file_buffer(buffer: FileBuffer) -> None:
    """버퍼를 BOM 이 붙은 UTF-8 로 덮어씁니다."""
    # newline="" 로 읽은 줄바꿈을 그대로 보존합니다.
    with buffer.path.open("w", encoding=OUTPUT_ENCODING, newline="") as handle:
        handle.write(buffer.content)


def write_file_buffers(buffers: Sequence[FileBuffer], *, progress: bool = True) -> None:
    """변경 여부와 관계없이 모든 버퍼를 파일로 씁니다."""
    for buffer in tqdm(buffers, desc="💾 파일 쓰기", unit="개", disable=not progress):
        write_file_buffer(buffer)
    logger.info("💾 파일 %d개를 UTF-8(BOM)으로 저장했습니다.", len(buffers))
