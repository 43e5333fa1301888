from __future__ import annotations

import pytest

from under.analysis.word_frequency import classify_words, is_target_word, iter_words, join_corpus


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("foo_", True),
        ("a_", True),
        ("foo__", True),
        ("$x_", True),
        ("_", False),
        ("foo", False),
        ("_foo", False),
        ("f_oo", False),
    ],
)
def test_target_predicate(word: str, expected: bool) -> None:
    assert is_target_word(word) is expected


def test_iter_words_keeps_order_and_duplicates() -> None:
    text = "var a_ = b.c$_(a_, 12); // x-y"
    assert list(iter_words(text)) == ["var", "a_", "b", "c$_", "a_", "12", "x", "y"]


def test_iter_words_is_restartable() -> None:
    text = "one two"
    assert list(iter_words(text)) == list(iter_words(text)) == ["one", "two"]


def test_join_corpus_keeps_file_boundaries() -> None:
    assert list(iter_words(join_corpus(["ab", "cd"]))) == ["ab", "cd"]


def test_classify_counts_targets_in_first_seen_order() -> None:
    stats = classify_words(iter_words("zig_ boston_ zig_ apple zig_ boston_"))
    assert list(stats.target_frequency.items()) == [("zig_", 3), ("boston_", 2)]
    assert stats.other_words == {"apple"}
    assert stats.unique_word_count == 3


def test_classify_counts_only_ascii_letters_of_other_words() -> None:
    stats = classify_words(iter_words("ab1_c a$b_ x9 skip_"))
    assert stats.other_words == {"ab1_c", "x9"}
    assert dict(stats.letter_frequency) == {"a": 1, "b": 1, "c": 1, "x": 1}
    assert list(stats.letter_frequency) == ["a", "b", "c", "x"]


def test_classify_skips_letter_counting_for_explicit_alphabet() -> None:
    stats = classify_words(iter_words("apple banana"), count_letters=False)
    assert stats.other_words == {"apple", "banana"}
    assert not stats.letter_frequency
