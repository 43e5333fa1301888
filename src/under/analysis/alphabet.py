"""식별자 생성용 알파벳 구성 모듈.

명시적으로 지정된 글자 그룹 또는 Other 단어의 글자 빈도로부터
위치별 문자 집합 목록(알파벳)을 만든다.

알파벳 규칙:
    - positions[0] 은 첫 글자 전용이며 숫자를 포함하지 않는다.
    - 두 번째 위치부터는 positions[1:] 을 순환하고, 끝에 도달하면 1번으로 돌아간다.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from under.constants import BEST_LETTER_RATIO, WORD_CHARS
from under.errors import ConfigurationError
from under.utils.logging_config import get_logger

logger = get_logger(__name__)

_DIGITS = frozenset("0123456789")
_ALLOWED_CHARS = frozenset(WORD_CHARS)


def strip_digits(chars: str) -> str:
    """문자열에서 숫자를 제거한다."""
    return "".join(ch for ch in chars if ch not in _DIGITS)


def _unique_chars(chars: str) -> str:
    """순서를 유지하며 중복 글자를 제거한다."""
    return "".join(dict.fromkeys(chars))


@dataclass(frozen=True, slots=True)
class Alphabet:
    """위치별 문자 집합 목록.

    Attributes:
        positions: 위치별 문자 집합. 0번은 첫 글자 전용이다.
    """

    positions: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.positions:
            raise ConfigurationError("알파벳에 문자 그룹이 하나도 없습니다.")
        for index, chars in enumerate(self.positions):
            if not chars:
                raise ConfigurationError(f"알파벳 {index}번 위치의 문자 집합이 비어 있습니다.")
        if any(ch in _DIGITS for ch in self.positions[0]):
            raise ConfigurationError("알파벳의 첫 글자 집합에는 숫자를 넣을 수 없습니다.")
        if len(self.positions) == 1:
            raise ConfigurationError("알파벳에는 첫 글자 집합 외에 최소 하나의 그룹이 필요합니다.")

    @property
    def leading(self) -> str:
        """첫 글자 집합."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def describe(self) -> str:
        """로그 출력용 문자열을 반환한다."""
        return " ".join(self.positions)


def parse_letter_groups(text: str) -> list[str]:
    """``vV,aA4,rR`` 형태의 문자열을 글자 그룹 목록으로 나눈다."""
    return [group.strip() for group in text.split(",")]


def build_explicit_alphabet(groups: Sequence[str]) -> Alphabet:
    """명시적 글자 그룹으로 알파벳을 만든다.

    positions[0] 은 group[0], 이후 위치는 group[1:] 뒤에 숫자를 제거한 group[0] 을
    덧붙인 것이다. 다른 그룹을 모두 소진하면 첫 그룹이 다시 등장하므로
    주제가 반복되는 이름을 만들 수 있다.

    Args:
        groups: 순서가 있는 글자 그룹 목록

    Returns:
        구성된 알파벳

    Raises:
        ConfigurationError: 그룹이 없거나, 비어 있거나, 단어 문자가 아닌 글자를 포함하는 경우
    """
    if not groups:
        raise ConfigurationError("글자 그룹이 지정되지 않았습니다.")

    for group in groups:
        invalid = sorted({ch for ch in group if ch not in _ALLOWED_CHARS})
        if invalid:
            raise ConfigurationError(
                f"글자 그룹 '{group}'에 사용할 수 없는 문자가 있습니다: {''.join(invalid)}"
            )
        if "_" in group:
            logger.warning("⚠️  글자 그룹 '%s'에 밑줄이 있어 결과가 다시 치환될 수 있습니다.", group)

    first = _unique_chars(groups[0])
    leading = strip_digits(first)
    if leading != first:
        logger.warning("⚠️  첫 글자 그룹 '%s'의 숫자는 첫 글자로 사용하지 않습니다.", groups[0])

    positions = (leading, *(_unique_chars(group) for group in groups[1:]), leading)
    return Alphabet(positions)


def select_best_letters(letter_frequency: Counter[str]) -> str:
    """전체 글자 빈도의 80%에 도달할 때까지 빈도순으로 글자를 모은다.

    동일 빈도의 글자는 최초 출현 순서를 따른다. 글자가 하나라도 있으면
    최소 한 글자는 선택된다.
    """
    numerator, denominator = BEST_LETTER_RATIO
    ideal = sum(letter_frequency.values()) * numerator // denominator

    # Counter 의 삽입 순서를 유지하는 안정 정렬
    ranked = sorted(letter_frequency.items(), key=lambda item: -item[1])

    best = []
    total = 0
    for letter, frequency in ranked:
        if total >= ideal and best:
            break
        best.append(letter)
        total += frequency
    return "".join(best)


def derive_alphabet(letter_frequency: Counter[str]) -> Alphabet:
    """Other 단어의 글자 빈도로 알파벳을 만든다.

    빈번한 글자만으로 식별자를 만들어 gzip 압축률을 높인다.

    Raises:
        ConfigurationError: 코퍼스에 사용 가능한 글자가 없는 경우
    """
    best_letters = select_best_letters(letter_frequency)
    if not best_letters:
        raise ConfigurationError(
            "코퍼스에서 식별자에 사용할 글자를 찾지 못했습니다. --letters 로 글자를 지정하세요."
        )
    return Alphabet((strip_digits(best_letters), best_letters))


def build_alphabet(groups: Sequence[str] | None, letter_frequency: Counter[str]) -> Alphabet:
    """명시 그룹이 있으면 명시 알파벳을, 없으면 빈도 기반 알파벳을 만든다."""
    if groups is not None:
        alphabet = build_explicit_alphabet(groups)
    else:
        alphabet = derive_alphabet(letter_frequency)

    logger.info("🔤 사용 글자: %s", alphabet.describe())
    return alphabet
