"""치환 계획 수립 모듈.

빈도가 높은 단어부터 순서대로, 충돌하지 않는 가장 짧은 식별자를 배정한다.
모든 단어가 하나의 증가 카운터를 공유하므로 배정되는 식별자의 길이는 줄어들지 않는다.
"""

from __future__ import annotations

from collections.abc import Mapping, Set
from dataclasses import dataclass
from types import MappingProxyType

from under.analysis.alphabet import Alphabet
from under.renaming.identifiers import iter_identifiers
from under.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class ReplacementEntry:
    """치환 대상 단어 하나의 계획 레코드.

    replacement 는 계획 단계에서 한 번만 채워진다.
    """

    original: str
    frequency: int
    replacement: str | None = None


@dataclass(frozen=True, slots=True)
class ReplacementPlan:
    """치환 계획.

    Attributes:
        entries: 빈도 내림차순으로 정렬된 치환 레코드
        alphabet: 식별자 생성에 사용한 알파벳 (치환 대상이 없으면 None 일 수 있다)
        identifiers_tried: 배정을 위해 생성해 본 후보 식별자 수
    """

    entries: tuple[ReplacementEntry, ...]
    alphabet: Alphabet | None
    identifiers_tried: int

    @property
    def mapping(self) -> Mapping[str, str]:
        """원래 단어 → 치환 식별자 매핑 (읽기 전용)."""
        return MappingProxyType(
            {entry.original: entry.replacement for entry in self.entries if entry.replacement is not None}
        )

    def most_frequent(self, limit: int) -> list[ReplacementEntry]:
        """가장 빈번한 단어 limit 개를 반환한다."""
        return list(self.entries[:limit])


def plan_replacements(
    target_frequency: Mapping[str, int],
    excluded: Set[str],
    alphabet: Alphabet | None,
) -> ReplacementPlan:
    """각 치환 대상 단어에 고유한 식별자를 배정한다.

    excluded 외에 치환 대상 단어 자신도 후보에서 제외한다. 알파벳에 밑줄이 있을 때
    치환 결과가 아직 치환되지 않은 다른 대상 단어와 같아지는 일을 막는다.

    Args:
        target_frequency: 치환 대상 단어별 빈도 (최초 출현 순서)
        excluded: 식별자로 사용할 수 없는 단어 집합 (Other 단어 ∪ 예약어)
        alphabet: 식별자 생성용 알파벳 (치환 대상이 없을 때만 None 허용)

    Returns:
        빈도 내림차순 치환 계획

    Raises:
        ValueError: 치환 대상이 있는데 알파벳이 None 인 경우
    """
    if alphabet is None:
        if target_frequency:
            raise ValueError("치환 대상 단어가 있으면 알파벳이 필요합니다.")
        return ReplacementPlan((), None, 0)

    # 동일 빈도는 최초 출현 순서를 유지하는 안정 정렬
    entries = sorted(
        (ReplacementEntry(original, frequency) for original, frequency in target_frequency.items()),
        key=lambda entry: -entry.frequency,
    )

    assigned: set[str] = set()
    candidates = iter_identifiers(alphabet)
    tried = 0
    for entry in entries:
        for tried, candidate in candidates:
            if candidate in excluded or candidate in assigned or candidate in target_frequency:
                continue
            entry.replacement = candidate
            assigned.add(candidate)
            break

    identifiers_tried = tried + 1 if entries else 0
    logger.debug("치환 식별자 %d개 배정 (후보 %d개 검사)", len(entries), identifiers_tried)
    return ReplacementPlan(tuple(entries), alphabet, identifiers_tried)
