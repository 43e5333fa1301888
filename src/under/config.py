"""YAML 설정 파일 로드 모듈.

설정 파일 예시 (under.yaml)::

    letters: vV,aA4,rR,iI1
    extra_reserved_words:
      - undefined
      - NaN
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from under.analysis.alphabet import parse_letter_groups
from under.constants import RESERVED_WORDS
from under.errors import ConfigurationError
from under.utils.logging_config import get_logger

logger = get_logger(__name__)

_KNOWN_KEYS = {"letters", "reserved_words", "extra_reserved_words"}


@dataclass(slots=True)
class RenameConfig:
    """치환 실행 설정.

    Attributes:
        letter_groups: 명시적 글자 그룹 (None 이면 코퍼스에서 자동 계산)
        reserved_words: 식별자로 사용하지 않을 예약어 집합
    """

    letter_groups: list[str] | None = None
    reserved_words: frozenset[str] = RESERVED_WORDS


def _as_word_list(value: Any, key: str) -> list[str]:
    if isinstance(value, str):
        return [word.strip() for word in value.split(",") if word.strip()]
    if isinstance(value, Sequence) and all(isinstance(word, str) for word in value):
        return list(value)
    raise ConfigurationError(f"'{key}' 항목은 문자열 또는 문자열 목록이어야 합니다.")


def _as_letter_groups(value: Any) -> list[str]:
    if isinstance(value, str):
        return parse_letter_groups(value)
    return _as_word_list(value, "letters")


def load_rename_config(config_path: Path) -> RenameConfig:
    """설정 파일을 로드한다.

    Args:
        config_path: YAML 설정 파일 경로

    Returns:
        로드된 설정

    Raises:
        FileNotFoundError: 설정 파일이 없는 경우
        ConfigurationError: 설정 형식이 올바르지 않은 경우
    """
    with open(config_path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f)

    if loaded is None:
        logger.warning("설정 파일이 비어 있습니다: %s", config_path)
        return RenameConfig()
    if not isinstance(loaded, dict):
        raise ConfigurationError(
            "설정 파일 형식이 올바르지 않습니다. YAML 매핑(dict) 형식이어야 합니다."
        )

    unknown = sorted(set(loaded) - _KNOWN_KEYS)
    if unknown:
        logger.warning("알 수 없는 설정 항목을 무시합니다: %s", ", ".join(map(str, unknown)))

    config = RenameConfig()
    if loaded.get("letters") is not None:
        config.letter_groups = _as_letter_groups(loaded["letters"])
    if loaded.get("reserved_words") is not None:
        config.reserved_words = frozenset(_as_word_list(loaded["reserved_words"], "reserved_words"))
    if loaded.get("extra_reserved_words") is not None:
        extra = _as_word_list(loaded["extra_reserved_words"], "extra_reserved_words")
        config.reserved_words = config.reserved_words | frozenset(extra)

    logger.info("⚙️  설정 파일 로드: %s", config_path)
    return config


def resolve_rename_config(
    config_path: Path | None,
    letters: str | None,
    default_path: Path | None = None,
) -> RenameConfig:
    """설정 파일과 CLI 인자를 합쳐 최종 설정을 만든다.

    config_path 가 없으면 default_path 가 존재할 때만 읽는다.
    CLI 의 letters 가 설정 파일보다 우선한다.
    """
    if config_path is not None:
        config = load_rename_config(config_path)
    elif default_path is not None and default_path.is_file():
        config = load_rename_config(default_path)
    else:
        config = RenameConfig()

    if letters is not None:
        config.letter_groups = parse_letter_groups(letters)
    return config
