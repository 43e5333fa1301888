"""단어 토큰화 및 분류 모듈.

코퍼스를 ``[A-Za-z0-9_$]+`` 단어 토큰으로 나누고, 치환 대상(Target) 단어의
출현 빈도와 그 외(Other) 단어의 존재 집합, 글자 빈도를 집계한다.
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from under.constants import CORPUS_SEPARATOR
from under.utils.logging_config import get_logger

logger = get_logger(__name__)

WORD_PATTERN = re.compile(r"[A-Za-z0-9_$]+")
_ASCII_LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")


@dataclass(slots=True)
class WordStatistics:
    """단어 분류 결과.

    Attributes:
        target_frequency: 치환 대상 단어별 출현 횟수 (최초 출현 순서 유지)
        other_words: 치환 대상이 아닌 단어의 존재 집합
        letter_frequency: Other 단어에 포함된 ASCII 글자별 출현 횟수 (최초 출현 순서 유지)
    """

    target_frequency: Counter[str] = field(default_factory=Counter)
    other_words: set[str] = field(default_factory=set)
    letter_frequency: Counter[str] = field(default_factory=Counter)

    @property
    def unique_word_count(self) -> int:
        """서로 다른 단어의 총 개수."""
        return len(self.other_words) + len(self.target_frequency)


def join_corpus(texts: Iterable[str]) -> str:
    """여러 파일 내용을 중립 구분자로 이어 하나의 코퍼스를 만든다."""
    return CORPUS_SEPARATOR.join(texts)


def iter_words(text: str) -> Iterator[str]:
    """텍스트에서 단어 토큰을 왼쪽부터 순서대로 생성한다.

    중복 제거나 필터링을 하지 않으므로 출현 순서와 횟수가 그대로 보존된다.
    """
    for match in WORD_PATTERN.finditer(text):
        yield match.group()


def is_target_word(word: str) -> bool:
    """치환 대상 단어인지 판정한다.

    두 글자 이상이면서 마지막 글자가 밑줄인 단어가 대상이다.
    ``foo__`` 처럼 밑줄이 여러 개로 끝나는 단어도 포함된다.
    """
    return len(word) >= 2 and word[-1] == "_"


def classify_words(words: Iterable[str], *, count_letters: bool = True) -> WordStatistics:
    """단어 토큰을 Target/Other 로 분류한다.

    Args:
        words: 단어 토큰 이터러블 (한 번만 순회한다)
        count_letters: Other 단어의 글자 빈도를 집계할지 여부
            (명시적 알파벳이 주어지면 불필요하다)

    Returns:
        분류 결과
    """
    stats = WordStatistics()
    for word in words:
        if is_target_word(word):
            stats.target_frequency[word] += 1
            continue

        stats.other_words.add(word)
        if count_letters:
            stats.letter_frequency.update(ch for ch in word if ch in _ASCII_LETTERS)

    logger.debug(
        "단어 분류 완료: target=%d, other=%d, letters=%d",
        len(stats.target_frequency),
        len(stats.other_words),
        len(stats.letter_frequency),
    )
    return stats
