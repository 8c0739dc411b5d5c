"""
Unit tests for the character diff (common prefix/suffix collapse).
"""

import pytest

from scalpel.diff import character_diff


class TestCharacterDiff:

    def test_single_word_change(self):
        diff = character_diff("Hello world!", "Hi there!")
        assert diff.common_prefix == "H"
        assert diff.common_suffix == "!"
        assert diff.removed_span == "ello world"
        assert diff.added_span == "i there"
        assert diff.rendered == "H{-ello world-}{+i there+}!"
        assert diff.change_magnitude == 10

    def test_identical_strings(self):
        diff = character_diff("same", "same")
        assert diff.removed_span == ""
        assert diff.added_span == ""
        assert diff.change_magnitude == 0
        assert diff.rendered == "same{--}{++}"

    def test_pure_insertion(self):
        diff = character_diff("ac", "abc")
        assert diff.common_prefix == "a"
        assert diff.common_suffix == "c"
        assert diff.removed_span == ""
        assert diff.added_span == "b"
        assert diff.change_magnitude == 1

    def test_prefix_and_suffix_never_overlap(self):
        # "aa" -> "aaa": prefix takes both old chars, nothing left for suffix
        diff = character_diff("aa", "aaa")
        assert diff.common_prefix_length + diff.common_suffix_length <= 2
        assert diff.added_span == "a"
        assert diff.removed_span == ""

    def test_empty_sides(self):
        diff = character_diff("", "new")
        assert diff.common_prefix_length == 0
        assert diff.common_suffix_length == 0
        assert diff.added_span == "new"
        assert diff.change_magnitude == 3

    @pytest.mark.parametrize("old,new", [
        ("function oldName() {}", "function newName() {}"),
        ("abcabc", "abc"),
        ("x", ""),
        ("aXbXc", "aYbYc"),
        ("tail", "retail"),
        ("", ""),
    ])
    def test_round_trip(self, old, new):
        diff = character_diff(old, new)
        assert diff.common_prefix + diff.removed_span + diff.common_suffix == old
        assert diff.common_prefix + diff.added_span + diff.common_suffix == new
        assert diff.common_prefix_length == len(diff.common_prefix)
        assert diff.common_suffix_length == len(diff.common_suffix)
        assert diff.change_magnitude == max(len(diff.removed_span), len(diff.added_span))
