"""단어 치환 모듈.

계획된 식별자로 모든 파일 버퍼의 대상 단어를 통째로 치환한다.

긴 원래 단어를 먼저 처리해야 한다. ``zig_`` 를 ``zig_ging_`` 보다 먼저 치환하면
긴 단어가 깨지기 때문이다. 여기서는 모든 대상 단어를 길이 내림차순
대안(alternation) 하나로 묶어 파일마다 한 번만 훑으므로 이 순서가 구조적으로 보장된다.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from under.corpus.files import FileBuffer
from under.renaming.planner import ReplacementEntry, ReplacementPlan
from under.utils.logging_config import get_logger

logger = get_logger(__name__)

# 경계 판정은 유니코드 \w (글자, 숫자, 밑줄) 기준이다. '$' 는 포함하지 않는다.
_BOUNDARY_BEFORE = r"(?<!\w)"
_BOUNDARY_AFTER = r"(?!\w)"


@dataclass(frozen=True, slots=True)
class SubstitutionStats:
    """파일 하나의 치환 결과."""

    path: str
    replacements: int


def substitution_order(entries: Iterable[ReplacementEntry]) -> list[ReplacementEntry]:
    """원래 단어 길이 내림차순으로 정렬한다. 같은 길이는 계획 순서를 따른다."""
    return sorted(entries, key=lambda entry: -len(entry.original))


def build_word_pattern(originals: Sequence[str]) -> re.Pattern[str]:
    """주어진 단어를 온전한 단어로만 찾는 정규식을 만든다.

    originals 는 길이 내림차순이어야 한다.
    """
    alternatives = "|".join(re.escape(original) for original in originals)
    return re.compile(f"{_BOUNDARY_BEFORE}(?:{alternatives}){_BOUNDARY_AFTER}")


def _replacement_table(plan: ReplacementPlan) -> dict[str, str]:
    table: dict[str, str] = {}
    for entry in substitution_order(plan.entries):
        if entry.replacement is None:
            raise ValueError(f"치환 식별자가 배정되지 않은 단어입니다: {entry.original}")
        table[entry.original] = entry.replacement
    return table


def replace_words(text: str, pattern: re.Pattern[str], table: Mapping[str, str]) -> tuple[str, int]:
    """텍스트 하나를 치환하고 (결과, 치환 횟수)를 반환한다."""
    return pattern.subn(lambda match: table[match.group()], text)


def apply_replacements(buffers: Sequence[FileBuffer], plan: ReplacementPlan) -> list[SubstitutionStats]:
    """모든 파일 버퍼의 내용을 제자리에서 치환한다.

    Args:
        buffers: 파일 버퍼 목록 (content 가 갱신된다)
        plan: 모든 단어에 식별자가 배정된 치환 계획

    Returns:
        파일별 치환 횟수

    Raises:
        ValueError: 식별자가 배정되지 않은 단어가 있는 경우
    """
    table = _replacement_table(plan)
    if not table:
        return [SubstitutionStats(str(buffer.path), 0) for buffer in buffers]

    pattern = build_word_pattern(list(table))
    stats: list[SubstitutionStats] = []
    for buffer in buffers:
        buffer.content, replaced = replace_words(buffer.content, pattern, table)
        stats.append(SubstitutionStats(str(buffer.path), replaced))
        logger.debug("%s: %d곳 치환", buffer.path, replaced)

    return stats
