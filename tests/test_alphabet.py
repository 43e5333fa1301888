from __future__ import annotations

from collections import Counter

import pytest

from under.analysis.alphabet import (
    Alphabet,
    build_alphabet,
    build_explicit_alphabet,
    derive_alphabet,
    parse_letter_groups,
    select_best_letters,
)
from under.errors import ConfigurationError


def test_parse_letter_groups() -> None:
    assert parse_letter_groups("vV,aA4,rR") == ["vV", "aA4", "rR"]


def test_explicit_single_group_repeats_without_digits() -> None:
    assert build_explicit_alphabet(["ab"]).positions == ("ab", "ab")


def test_explicit_groups_append_first_group_at_end() -> None:
    alphabet = build_explicit_alphabet(["vV", "aA4", "rR"])
    assert alphabet.positions == ("vV", "aA4", "rR", "vV")
    assert alphabet.leading == "vV"
    assert len(alphabet) == 4


def test_explicit_leading_group_never_yields_digits() -> None:
    alphabet = build_explicit_alphabet(["aA4", "jJ"])
    assert alphabet.positions == ("aA", "jJ", "aA")


def test_explicit_groups_drop_duplicate_characters() -> None:
    assert build_explicit_alphabet(["aab", "cc"]).positions == ("ab", "c", "ab")


@pytest.mark.parametrize("groups", [[], [""], ["ab", ""], ["123"], ["a-b"], ["a b"]])
def test_explicit_alphabet_rejects_invalid_groups(groups: list[str]) -> None:
    with pytest.raises(ConfigurationError):
        build_explicit_alphabet(groups)


def test_alphabet_requires_more_than_leading_set() -> None:
    with pytest.raises(ConfigurationError):
        Alphabet(("ab",))


def test_best_letters_cover_eighty_percent() -> None:
    assert select_best_letters(Counter("aaaab")) == "a"
    assert select_best_letters(Counter("aaabbn")) == "ab"


def test_best_letters_ties_follow_first_seen_order() -> None:
    assert select_best_letters(Counter("abab")) == "ab"
    assert select_best_letters(Counter("baba")) == "ba"


def test_best_letters_take_at_least_one_letter() -> None:
    assert select_best_letters(Counter("q")) == "q"


def test_derived_alphabet_has_two_positions() -> None:
    alphabet = derive_alphabet(Counter("eeeeettta"))
    assert alphabet.positions == ("et", "et")


def test_derived_alphabet_fails_without_letters() -> None:
    with pytest.raises(ConfigurationError):
        derive_alphabet(Counter())


def test_build_alphabet_prefers_explicit_groups() -> None:
    assert build_alphabet(["xy"], Counter("aaaa")).positions == ("xy", "xy")
    assert build_alphabet(None, Counter("aaaa")).positions == ("a", "a")
