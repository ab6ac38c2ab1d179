"""Unit tests for the reviewer selection loop."""

from commands.reviewers import (
    Candidate,
    ReviewerSelector,
    build_candidates,
    selected_usernames,
    toggle_ordinal,
)
from fakes import ScriptedInput, output_of


class TestCandidates:

    def test_ordinals_follow_retrieval_order(self):
        candidates = build_candidates(["alice", "bob", "carol"])

        assert [(c.ordinal, c.username) for c in candidates] == [
            (0, "alice"),
            (1, "bob"),
            (2, "carol"),
        ]
        assert not any(c.selected for c in candidates)

    def test_toggle_twice_restores_state(self):
        candidate = Candidate("alice", 0)
        candidate.toggle()
        assert candidate.selected
        candidate.toggle()
        assert not candidate.selected

    def test_toggle_unknown_ordinal_changes_nothing(self):
        candidates = build_candidates(["alice", "bob"])
        candidates[1].selected = True

        assert toggle_ordinal(candidates, 5) is False
        assert toggle_ordinal(candidates, -1) is False
        assert [c.selected for c in candidates] == [False, True]

    def test_toggle_known_ordinal(self):
        candidates = build_candidates(["alice", "bob"])
        assert toggle_ordinal(candidates, 1) is True
        assert selected_usernames(candidates) == ["bob"]

    def test_render_marks_selection(self):
        candidate = Candidate("alice", 3)
        assert "3" in candidate.render() and "alice" in candidate.render()
        candidate.toggle()
        assert candidate.render().startswith("[cyan]")


class TestReviewerSelector:

    def test_empty_line_finishes_with_no_selection(self, console):
        selector = ReviewerSelector(ScriptedInput([""]), console)
        assert selector.select(build_candidates(["alice"])) == []

    def test_select_then_deselect(self, console):
        line_input = ScriptedInput(["0", "2", "0", ""])
        selector = ReviewerSelector(line_input, console)

        result = selector.select(build_candidates(["alice", "bob", "carol"]))

        assert result == ["carol"]
        assert line_input.remaining == 0

    def test_unknown_ordinal_reports_not_found(self, console):
        selector = ReviewerSelector(ScriptedInput(["9", "1", ""]), console)

        result = selector.select(build_candidates(["alice", "bob"]))

        assert result == ["bob"]
        assert "Reviewer not found" in output_of(console)

    def test_non_numeric_input_reports_invalid_option(self, console):
        selector = ReviewerSelector(ScriptedInput(["bob", "1.5", ""]), console)

        result = selector.select(build_candidates(["alice", "bob"]))

        assert result == []
        assert output_of(console).count("Invalid option, it must be a valid number") == 2

    def test_only_plain_digits_are_ordinals(self, console):
        usernames = [f"u{i}" for i in range(11)]
        selector = ReviewerSelector(ScriptedInput(["1_0", "+1", "-1", "１", " "]), console)

        result = selector.select(build_candidates(usernames))

        assert result == []
        assert output_of(console).count("Invalid option, it must be a valid number") == 4

    def test_closed_input_finishes_with_current_selection(self, console):
        selector = ReviewerSelector(ScriptedInput(["2"]), console)

        result = selector.select(build_candidates(["alice", "bob", "carol"]))

        assert result == ["carol"]

    def test_result_keeps_ordinal_order(self, console):
        selector = ReviewerSelector(ScriptedInput(["2", "0", ""]), console)
        assert selector.select(build_candidates(["alice", "bob", "carol"])) == [
            "alice",
            "carol",
        ]

    def test_list_is_shown_every_iteration(self, console):
        selector = ReviewerSelector(ScriptedInput(["0", ""]), console)
        selector.select(build_candidates(["alice"]))

        output = output_of(console)
        assert output.count("** Reviewers **") == 2
        assert "0 - alice" in output
