"""단어 빈도 분석 및 알파벳 구성 모듈.

코퍼스를 단어 토큰으로 나누어 치환 대상 단어의 빈도와 Other 단어의 글자 빈도를
집계하고, 이를 바탕으로 식별자 생성용 알파벳을 구성한다.
"""

from __future__ import annotations

from .alphabet import Alphabet, build_alphabet, build_explicit_alphabet, derive_alphabet, parse_letter_groups
from .word_frequency import WordStatistics, classify_words, is_target_word, iter_words, join_corpus

__all__ = [
    "Alphabet",
    "WordStatistics",
    "build_alphabet",
    "build_explicit_alphabet",
    "classify_words",
    "derive_alphabet",
    "is_target_word",
    "iter_words",
    "join_corpus",
    "parse_letter_groups",
]
