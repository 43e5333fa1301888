"""식별자 치환 파이프라인.

모두 읽기 → 토큰화 → 분류 → 알파벳 구성 → 치환 계획 → 치환 → 모두 쓰기 순서로
한 번에 하나의 단계만 실행한다. Other 단어 집합은 코퍼스 전체에 의존하므로
모든 계산이 끝나기 전에는 어떤 파일도 쓰지 않는다.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from under.analysis import Alphabet, build_alphabet, classify_words, iter_words, join_corpus
from under.constants import RESERVED_WORDS
from under.corpus.files import FileBuffer, read_file_buffers, write_file_buffers
from under.renaming import ReplacementPlan, SubstitutionStats, apply_replacements, plan_replacements
from under.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RenameResult:
    """치환 실행 결과.

    Attributes:
        buffers: 치환이 끝난 파일 버퍼
        unique_words: 서로 다른 단어 수
        alphabet: 사용한 알파벳 (치환 대상이 없어 구성하지 않았으면 None)
        plan: 치환 계획
        stats: 파일별 치환 횟수
        written: 파일을 실제로 썼는지 여부
    """

    buffers: tuple[FileBuffer, ...]
    unique_words: int
    alphabet: Alphabet | None
    plan: ReplacementPlan
    stats: tuple[SubstitutionStats, ...]
    written: bool

    @property
    def target_words(self) -> int:
        """치환 대상 단어 수."""
        return len(self.plan.entries)

    @property
    def total_replacements(self) -> int:
        """전체 치환 횟수."""
        return sum(stat.replacements for stat in self.stats)

    @property
    def letters(self) -> str:
        """결과 표시용 알파벳 문자열."""
        return self.alphabet.describe() if self.alphabet is not None else "-"


def rename_buffers(
    buffers: Sequence[FileBuffer],
    *,
    letter_groups: Sequence[str] | None = None,
    reserved_words: Iterable[str] = RESERVED_WORDS,
) -> RenameResult:
    """메모리에 올린 파일 버퍼를 치환한다. 파일은 쓰지 않는다.

    Args:
        buffers: 파일 버퍼 목록 (content 가 갱신된다)
        letter_groups: 명시적 글자 그룹 (None 이면 코퍼스에서 자동 계산)
        reserved_words: 식별자로 사용하지 않을 예약어

    Returns:
        치환 결과 (written=False)

    Raises:
        ConfigurationError: 치환 대상 단어가 있는데 알파벳을 구성할 수 없거나,
            명시적 글자 그룹이 유효하지 않은 경우
    """
    corpus = join_corpus(buffer.content for buffer in buffers)
    stats = classify_words(iter_words(corpus), count_letters=letter_groups is None)

    logger.info("🔎 고유 단어: %d개", stats.unique_word_count)
    logger.info("🎯 치환 대상 단어: %d개", len(stats.target_frequency))

    # 예약어는 코퍼스에 없어도 이미 존재하는 단어로 취급한다
    excluded = stats.other_words | frozenset(reserved_words)

    # 치환 대상이 없으면 자동 알파벳은 만들지 않는다
    alphabet: Alphabet | None = None
    if letter_groups is not None or stats.target_frequency:
        alphabet = build_alphabet(letter_groups, stats.letter_frequency)
    else:
        logger.info("🔤 치환 대상 단어가 없어 알파벳을 구성하지 않습니다.")
    plan = plan_replacements(stats.target_frequency, excluded, alphabet)
    substitution_stats = apply_replacements(buffers, plan)

    return RenameResult(
        buffers=tuple(buffers),
        unique_words=stats.unique_word_count,
        alphabet=alphabet,
        plan=plan,
        stats=tuple(substitution_stats),
        written=False,
    )


def rename_texts(
    texts: Sequence[str],
    *,
    letter_groups: Sequence[str] | None = None,
    reserved_words: Iterable[str] = RESERVED_WORDS,
) -> list[str]:
    """문자열 목록을 치환하여 결과 문자열 목록을 반환한다."""
    buffers = [FileBuffer(Path(f"<text{index}>"), text) for index, text in enumerate(texts)]
    rename_buffers(buffers, letter_groups=letter_groups, reserved_words=reserved_words)
    return [buffer.content for buffer in buffers]


def run_rename(
    paths: Sequence[Path],
    *,
    letter_groups: Sequence[str] | None = None,
    reserved_words: Iterable[str] = RESERVED_WORDS,
    write: bool = True,
    progress: bool = True,
) -> RenameResult:
    """파일 집합 전체에 대해 치환 파이프라인을 실행한다.

    Args:
        paths: 대상 파일 경로
        letter_groups: 명시적 글자 그룹 (None 이면 코퍼스에서 자동 계산)
        reserved_words: 식별자로 사용하지 않을 예약어
        write: 결과를 파일에 쓸지 여부
        progress: 진행바 표시 여부

    Returns:
        치환 결과

    Raises:
        ConfigurationError: 알파벳을 구성할 수 없는 경우 (파일은 수정되지 않는다)
        OSError: 파일 읽기/쓰기에 실패한 경우
    """
    logger.info("📁 대상 파일: %d개", len(paths))
    buffers = read_file_buffers(paths, progress=progress)
    result = rename_buffers(buffers, letter_groups=letter_groups, reserved_words=reserved_words)

    if not write:
        return result

    write_file_buffers(buffers, progress=progress)
    return RenameResult(
        buffers=result.buffers,
        unique_words=result.unique_words,
        alphabet=result.alphabet,
        plan=result.plan,
        stats=result.stats,
        written=True,
    )
