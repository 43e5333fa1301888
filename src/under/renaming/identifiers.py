"""식별자 생성 모듈.

위치마다 문자 집합이 다른 전단사(bijective) 혼합 기수 표기법으로
음이 아닌 정수를 식별자 문자열에 일대일 대응시킨다.

알파벳이 ``("gG", "oO", "gG")`` 라면 다음 순서로 생성된다::

    g, G, go, Go, gO, GO, gog, Gog, gOg, GOg, goG, GoG, gOG, GOG, gogo, ...

번호가 커질수록 문자열 길이는 줄어들지 않는다.
"""

from __future__ import annotations

from collections.abc import Iterator
from itertools import count

from under.analysis.alphabet import Alphabet


def identifier_at(n: int, alphabet: Alphabet) -> str:
    """n 번째 후보 식별자를 반환한다.

    Args:
        n: 0 이상의 번호
        alphabet: 위치별 문자 집합

    Returns:
        생성된 식별자

    Raises:
        ValueError: n 이 음수인 경우
    """
    if n < 0:
        raise ValueError(f"식별자 번호는 0 이상이어야 합니다: {n}")

    positions = alphabet.positions
    position = 0
    chars: list[str] = []
    while True:
        choices = positions[position]
        n, index = divmod(n, len(choices))
        chars.append(choices[index])
        if n == 0:
            break
        n -= 1
        position += 1
        # 첫 글자 집합(0번)으로는 돌아가지 않는다
        if position == len(positions):
            position = 1
    return "".join(chars)


def iter_identifiers(alphabet: Alphabet, start: int = 0) -> Iterator[tuple[int, str]]:
    """(번호, 식별자) 쌍을 무한히 생성한다."""
    for n in count(start):
        yield n, identifier_at(n, alphabet)
