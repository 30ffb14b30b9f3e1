from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from github_templates import selection, sync
from github_templates.registry import get_source_file, get_target_file, get_templates_by_type


class PromptRecorder:
    """Stands in for a prompt: records each call and replays scripted answers."""

    def __init__(self):
        self.answers: list = []
        self.calls: list = []

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        if self.answers:
            return self.answers.pop(0)
        return kwargs.get("default", False)


@pytest.fixture()
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty repository root used as the working directory."""
    repo = tmp_path / "repo"
    repo.mkdir()
    (repo / "package.json").write_text("{}", encoding="utf-8")
    monkeypatch.chdir(repo)
    return repo


@pytest.fixture()
def confirm_prompts(monkeypatch: pytest.MonkeyPatch) -> PromptRecorder:
    recorder = PromptRecorder()
    monkeypatch.setattr(sync, "confirm", recorder)
    return recorder


@pytest.fixture()
def multi_select(monkeypatch: pytest.MonkeyPatch) -> PromptRecorder:
    recorder = PromptRecorder()
    monkeypatch.setattr(selection, "multi_select_with_arrows", recorder)
    return recorder


def place(*types: str) -> list[Path]:
    """Copy the packaged templates of ``types`` into the working directory."""
    targets = []
    for template in get_templates_by_type(types):
        target = get_target_file(template)
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(get_source_file(template), target)
        targets.append(target)
    return targets
