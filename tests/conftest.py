"""Shared fixtures: scripted stdin, fake package managers, isolated log dir."""

from __future__ import annotations

from typing import Iterable

import pytest

from batch_upgrader.core.console import Console
from batch_upgrader.domain.errors import ToolUnavailable, UpgradeInvocationError
from batch_upgrader.services.parser import TableParser

WINGET_OUTPUT = """\
   - \r   \\ \r
Name                             Id                          Version        Available      Source
----------------------------------------------------------------------------------------------------
Google Chrome                    Google.Chrome               120.0          121.0          winget
Microsoft Visual Studio Code     Microsoft.VisualStudioCode  1.85.0         1.86.1         winget
7-Zip 23.01 (x64)                7zip.7zip                   23.01          24.05          winget
3 upgrades available.
"""


class ScriptedInput:
    """Stands in for input(): returns answers in order, raises EOFError when exhausted."""

    def __init__(self, answers: Iterable[str]):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


class FakeManager:
    """Package manager double; `failing` ids raise UpgradeInvocationError."""

    def __init__(self, text: str = WINGET_OUTPUT, failing: Iterable[str] = (), available: bool = True):
        self.exe = "winget"
        self.text = text
        self.failing = set(failing)
        self.available = available
        self.parser = TableParser("winget ")
        self.upgraded: list[str] = []
        self.listed = 0

    def check_available(self) -> str:
        if not self.available:
            raise ToolUnavailable(self.exe, "not found on PATH")
        return "v1.7.10861"

    def list_upgrades_text(self) -> str:
        self.listed += 1
        return self.text

    def parse_upgrades(self, text: str):
        return self.parser.parse(text)

    def upgrade(self, pkg_id: str) -> None:
        self.upgraded.append(pkg_id)
        if pkg_id in self.failing:
            raise UpgradeInvocationError(pkg_id, 1, "winget exited with code 1")


@pytest.fixture
def console() -> Console:
    return Console()


@pytest.fixture
def winget_output() -> str:
    return WINGET_OUTPUT


@pytest.fixture
def scripted_input():
    """Factory for ScriptedInput: `scripted_input(["y", "n"])`."""
    return ScriptedInput


@pytest.fixture
def fake_manager():
    """Factory for FakeManager: `fake_manager(failing={"A.B"})`."""
    return FakeManager


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path, monkeypatch):
    """Keep run logs out of the real user data directory."""
    log_dir = tmp_path / "logs"
    monkeypatch.setattr("batch_upgrader.core.console.LOG_DIR", log_dir)
    return log_dir
