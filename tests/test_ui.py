from __future__ import annotations

import pytest
import typer

from github_templates import ui

OPTIONS = {"issues": "Issue templates", "pr": "Pull request template", "claude": "Claude Code integration"}


@pytest.fixture()
def keys(monkeypatch: pytest.MonkeyPatch):
    """Feed scripted keypresses to the selector."""

    def feed(*pressed):
        sequence = iter(pressed)
        monkeypatch.setattr(ui, "get_key", lambda: next(sequence))

    return feed


def test_enter_accepts_defaults(keys):
    keys("enter")
    assert ui.multi_select_with_arrows(OPTIONS, default_keys=["issues", "pr"]) == ["issues", "pr"]


def test_space_toggles_under_cursor(keys):
    keys(" ", "down", "down", " ", "enter")
    assert ui.multi_select_with_arrows(OPTIONS, default_keys=["issues", "pr"]) == ["pr", "claude"]


def test_up_wraps_around(keys):
    keys("up", " ", "enter")
    assert ui.multi_select_with_arrows(OPTIONS) == ["claude"]


def test_enter_with_nothing_checked_keeps_prompting(keys):
    keys("enter", "down", " ", "enter")
    assert ui.multi_select_with_arrows(OPTIONS, default_keys=[]) == ["pr"]


def test_escape_cancels(keys):
    keys("escape")
    with pytest.raises(typer.Exit):
        ui.multi_select_with_arrows(OPTIONS)


def test_step_tracker_renders_outcomes(capsys):
    tracker = ui.StepTracker("Install templates")
    tracker.add("bug", "Bug report")
    tracker.add("pr", "Pull request")
    tracker.add("bug", "duplicate key is ignored")
    tracker.complete("bug", ".github/ISSUE_TEMPLATE/bug_report.md")
    tracker.skip("pr", "kept existing file")

    assert [s["status"] for s in tracker.steps] == ["done", "skipped"]

    ui.console.print(tracker.render())
    out = capsys.readouterr().out
    assert "Install templates" in out
    assert "kept existing file" in out


def test_step_tracker_ignores_unknown_keys():
    tracker = ui.StepTracker("Remove templates")
    tracker.add("bug", "Bug report")
    tracker.error("typo", "never added")

    assert [s["key"] for s in tracker.steps] == ["bug"]
    assert "running" not in ui.STATUS_SYMBOLS
