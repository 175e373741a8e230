"""Tests for the interactive selector."""

from __future__ import annotations

import pytest

from batch_upgrader.domain.candidate import UpgradeCandidate
from batch_upgrader.ui.selector import Selector


@pytest.fixture
def candidates():
    return [
        UpgradeCandidate("App One", "Vendor.One", "1.0", "1.1"),
        UpgradeCandidate("App Two", "Vendor.Two", "2.0", "2.1"),
        UpgradeCandidate("App Three", "Vendor.Three", "3.0", "3.1"),
        UpgradeCandidate("App Four", "Vendor.Four", "4.0", "4.1"),
    ]


class TestSelect:
    """Tests for Selector.select."""

    def test_yes_and_no(self, console, candidates, scripted_input):
        answers = scripted_input(["y", "n", "Y", ""])
        ids = Selector(console, input_fn=answers).select(candidates)
        assert ids == ["Vendor.One", "Vendor.Three"]
        assert [c.selected for c in candidates] == [True, False, True, False]
        assert len(answers.prompts) == 4

    def test_unknown_answer_is_skip(self, console, candidates, scripted_input):
        answers = scripted_input(["yes", "maybe", "1", " y "])
        ids = Selector(console, input_fn=answers).select(candidates)
        assert ids == ["Vendor.Four"]

    def test_stop_all_leaves_remaining_unselected(self, console, candidates, scripted_input):
        """'A' on candidate 2 stops prompting; 3 and 4 are never asked about."""
        answers = scripted_input(["y", "A", "y", "y"])
        ids = Selector(console, input_fn=answers).select(candidates)
        assert ids == ["Vendor.One"]
        assert len(answers.prompts) == 2
        assert answers.answers == ["y", "y"]
        assert not any(c.selected for c in candidates[1:])

    def test_stop_all_keeps_earlier_selections(self, console, candidates, scripted_input):
        answers = scripted_input(["y", "y", "a"])
        ids = Selector(console, input_fn=answers).select(candidates)
        assert ids == ["Vendor.One", "Vendor.Two"]

    def test_eof_stops_prompting(self, console, candidates, scripted_input):
        answers = scripted_input(["y"])
        ids = Selector(console, input_fn=answers).select(candidates)
        assert ids == ["Vendor.One"]
        assert len(answers.prompts) == 2

    def test_shows_candidate_fields(self, console, candidates, capsys, scripted_input):
        Selector(console, input_fn=scripted_input(["n"])).select(candidates[:1])
        out = capsys.readouterr().out
        assert "App One" in out
        assert "Vendor.One" in out
        assert "1.0" in out and "1.1" in out

    def test_empty(self, console, scripted_input):
        answers = scripted_input([])
        assert Selector(console, input_fn=answers).select([]) == []
        assert answers.prompts == []


class TestConfirm:
    """Tests for Selector.confirm."""

    def test_lists_selection(self, console, candidates, capsys, scripted_input):
        assert Selector(console, input_fn=scripted_input(["Y"])).confirm(candidates[:2])
        out = capsys.readouterr().out
        assert "App One" in out and "App Two" in out
        assert "2.0" in out and "2.1" in out

    def test_declined(self, console, candidates, scripted_input):
        assert not Selector(console, input_fn=scripted_input(["n"])).confirm(candidates)

    def test_other_answer_declines(self, console, candidates, scripted_input):
        assert not Selector(console, input_fn=scripted_input(["a"])).confirm(candidates)

    def test_eof_declines(self, console, candidates, scripted_input):
        assert not Selector(console, input_fn=scripted_input([])).confirm(candidates)
