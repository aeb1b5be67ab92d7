"""Tests for checkbox selection state."""

from __future__ import annotations

from recruitdesk.evaluation.selection import SelectionState


def test_toggle_flips_membership():
    selection = SelectionState()
    assert selection.toggle("a") is True
    assert "a" in selection
    assert selection.toggle("a") is False
    assert "a" not in selection


def test_toggle_all_selects_visible_then_clears_them():
    selection = SelectionState()
    selection.toggle_all(["a", "b", "c"])
    assert set(selection.selected_ids) == {"a", "b", "c"}
    selection.toggle_all(["a", "b", "c"])
    assert selection.selected_ids == ()


def test_toggle_all_leaves_hidden_ids_alone():
    selection = SelectionState(["x", "a"])
    selection.toggle_all(["a", "b"])
    assert set(selection.selected_ids) == {"x", "a", "b"}
    selection.toggle_all(["a", "b"])
    assert selection.selected_ids == ("x",)


def test_summary_indeterminate_and_all_selected():
    selection = SelectionState(["a"])
    summary = selection.summary(["a", "b"])
    assert summary.indeterminate is True
    assert summary.all_selected is False
    assert summary.visible_selected_count == 1

    selection.toggle("b")
    summary = selection.summary(["a", "b"])
    assert summary.indeterminate is False
    assert summary.all_selected is True


def test_summary_counts_hidden_selection_separately():
    selection = SelectionState(["a", "hidden"])
    summary = selection.summary(["a", "b"])
    assert summary.selected_count == 2
    assert summary.visible_selected_count == 1


def test_empty_visible_set_is_never_all_selected():
    summary = SelectionState(["a"]).summary([])
    assert summary.all_selected is False
    assert summary.indeterminate is False


def test_selection_keeps_check_order():
    selection = SelectionState()
    for cid in ("c", "a", "b"):
        selection.toggle(cid)
    assert selection.selected_ids == ("c", "a", "b")
