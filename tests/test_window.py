"""Tests for the context windower — boundaries and window merging."""

import pytest

from linediff.diff.differ import diff_lines
from linediff.diff.models import ChangeTag, LineRecord
from linediff.diff.window import window

C, A, R = ChangeTag.CONTEXT, ChangeTag.ADDITION, ChangeTag.REMOVAL


def _contents(records):
    return [r.content for r in records]


class TestBoundaries:
    def test_single_change_context_one(self, padded_insert):
        old, new = padded_insert
        shown = window(diff_lines(old, new), 1)
        assert _contents(shown) == ["before5", "inserted", "after1"]
        assert [r.line_number for r in shown] == [5, 6, 7]

    def test_single_change_context_two(self, padded_insert):
        old, new = padded_insert
        shown = window(diff_lines(old, new), 2)
        assert _contents(shown) == ["before4", "before5", "inserted", "after1", "after2"]

    def test_clamped_at_start(self):
        shown = window(diff_lines("a\nb\n", "x\na\nb\n"), 5)
        assert _contents(shown) == ["x", "a", "b"]

    def test_clamped_at_end(self):
        shown = window(diff_lines("a\nb\n", "a\nb\ny\n"), 5)
        assert _contents(shown) == ["a", "b", "y"]

    def test_context_zero_keeps_only_changes(self, three_lines, three_lines_changed):
        shown = window(diff_lines(three_lines, three_lines_changed), 0)
        assert [(r.tag, r.content) for r in shown] == [(R, "line2"), (A, "CHANGED")]

    def test_window_larger_than_script(self, three_lines, three_lines_changed):
        script = diff_lines(three_lines, three_lines_changed)
        assert window(script, 2) == script

    def test_removal_with_shared_number_kept(self):
        script = diff_lines("a\nb\nc\n", "a\nc\n")
        assert window(script, 2) == script


class TestNoChanges:
    def test_all_context_gives_nothing(self, python_module):
        assert window(diff_lines(python_module, python_module), 3) == []

    def test_empty_script(self):
        assert window(diff_lines("", ""), 2) == []


class TestMerging:
    def test_single_shared_line_appears_once(self):
        script = diff_lines("a\nb\nm\nd\ne\n", "a\nb\nX\nm\nY\nd\ne\n")
        shown = window(script, 2)
        assert _contents(shown) == ["a", "b", "X", "m", "Y", "d", "e"]

    def test_distant_runs_stay_separate(self):
        old = "".join(f"{i}\n" for i in range(1, 11))
        new = old.replace("2\n", "two\n").replace("9\n", "nine\n")
        shown = window(diff_lines(old, new), 1)
        assert _contents(shown) == ["1", "2", "two", "3", "8", "9", "nine", "10"]

    def test_last_rule_repeats_wider_overlap(self):
        script = diff_lines("a\nm1\nm2\nb\n", "a\nX\nm1\nm2\nY\nb\n")
        shown = window(script, 2, merge="last")
        assert _contents(shown) == ["a", "X", "m1", "m2", "m1", "m2", "Y", "b"]

    def test_full_rule_never_repeats(self):
        script = diff_lines("a\nm1\nm2\nb\n", "a\nX\nm1\nm2\nY\nb\n")
        shown = window(script, 2, merge="full")
        assert _contents(shown) == ["a", "X", "m1", "m2", "Y", "b"]

    def test_rules_agree_on_single_line_overlap(self):
        script = diff_lines("a\nb\nm\nd\ne\n", "a\nb\nX\nm\nY\nd\ne\n")
        assert window(script, 2, merge="last") == window(script, 2, merge="full")

    def test_order_preserved(self, python_module):
        new = python_module.replace("import os", "import sys").replace("world", "you")
        script = diff_lines(python_module, new)
        shown = window(script, 1, merge="full")
        positions = [script.index(r) for r in shown]
        assert positions == sorted(positions)


class TestArguments:
    def test_negative_context_rejected(self):
        with pytest.raises(ValueError):
            window([LineRecord(1, A, "x")], -1)

    def test_unknown_merge_rule_rejected(self):
        with pytest.raises(ValueError):
            window([LineRecord(1, A, "x")], 2, merge="union")
