from __future__ import annotations

from collections import Counter

import pytest

from under.analysis.alphabet import Alphabet, build_explicit_alphabet
from under.constants import RESERVED_WORDS
from under.renaming.planner import plan_replacements

AB = Alphabet(("ab", "ab"))


def test_most_frequent_word_gets_first_identifier() -> None:
    plan = plan_replacements(Counter({"boston_": 2, "zig_": 3}), {"apple"} | RESERVED_WORDS, AB)
    assert [entry.original for entry in plan.entries] == ["zig_", "boston_"]
    assert dict(plan.mapping) == {"zig_": "a", "boston_": "b"}


def test_frequency_ties_keep_first_seen_order() -> None:
    plan = plan_replacements({"b_": 1, "a_": 1}, set(), AB)
    assert dict(plan.mapping) == {"b_": "a", "a_": "b"}


def test_colliding_candidates_are_skipped() -> None:
    plan = plan_replacements({"a_": 2}, {"a", "b"}, AB)
    assert plan.mapping["a_"] == "aa"
    assert plan.identifiers_tried == 3


def test_counter_is_shared_across_words() -> None:
    plan = plan_replacements({"x_": 3, "y_": 2, "z_": 1}, {"b"}, AB)
    assert dict(plan.mapping) == {"x_": "a", "y_": "aa", "z_": "ba"}


def test_reserved_words_are_never_assigned() -> None:
    alphabet = build_explicit_alphabet(["if", "fn"])
    targets = {f"word{index}_": 100 - index for index in range(30)}
    plan = plan_replacements(targets, RESERVED_WORDS, alphabet)

    replacements = list(plan.mapping.values())
    assert "if" not in replacements
    assert not set(replacements) & RESERVED_WORDS
    assert len(set(replacements)) == len(replacements) == 30


def test_replacements_never_shadow_other_targets() -> None:
    plan = plan_replacements({"x_": 2, "a_": 1}, set(), Alphabet(("a", "_")))
    assert plan.mapping["x_"] == "a"
    assert plan.mapping["a_"] == "a__"


def test_replacement_lengths_follow_frequency_order() -> None:
    targets = {f"t{index}_": 50 - index for index in range(40)}
    plan = plan_replacements(targets, {"a", "ab", "bba"}, AB)
    lengths = [len(entry.replacement or "") for entry in plan.entries]
    assert lengths == sorted(lengths)
    assert not any((entry.replacement or "0")[0].isdigit() for entry in plan.entries)


def test_empty_targets_make_empty_plan() -> None:
    plan = plan_replacements({}, set(), AB)
    assert plan.entries == ()
    assert plan.identifiers_tried == 0


def test_empty_targets_need_no_alphabet() -> None:
    plan = plan_replacements({}, set(), None)
    assert plan.entries == ()
    assert plan.alphabet is None
    assert dict(plan.mapping) == {}


def test_targets_without_alphabet_are_rejected() -> None:
    with pytest.raises(ValueError):
        plan_replacements({"x_": 1}, set(), None)


def test_mapping_is_read_only() -> None:
    plan = plan_replacements({"x_": 1}, set(), AB)
    with pytest.raises(TypeError):
        plan.mapping["x_"] = "z"  # type: ignore[index]


def test_most_frequent_limits_entries() -> None:
    plan = plan_replacements({"a_": 1, "b_": 5, "c_": 3}, set(), AB)
    assert [entry.original for entry in plan.most_frequent(2)] == ["b_", "c_"]
