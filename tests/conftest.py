"""Shared test fixtures for namecraft tests."""

import json
import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from namecraft.errors import PromptCancelled
from namecraft.models import Item


class ScriptedTransport:
    """Prompt transport that replays fixed input lines.

    Raises PromptCancelled when the script runs out, like Ctrl+D.
    """

    def __init__(self, lines: list[str]) -> None:
        self.lines = list(lines)
        self.prompts: list[str] = []

    def show(self, text: str) -> None:
        self.prompts.append(text)

    def next_line(self) -> str:
        if not self.lines:
            raise PromptCancelled("script exhausted")
        return self.lines.pop(0)


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def scripted() -> Callable[..., ScriptedTransport]:
    """Factory for scripted transports: scripted("cat", "red")."""

    def make(*lines: str) -> ScriptedTransport:
        return ScriptedTransport(list(lines))

    return make


@pytest.fixture
def sample_definition() -> list[dict[str, Any]]:
    """Animal/color definition where color depends on the animal."""
    return [
        {"id": "a", "prompt": "Animal", "default": "cat", "order": 2, "format": "${0}"},
        {
            "id": "b",
            "prompt": "Color",
            "order": 1,
            "format": "${0}-colored",
            "constraints": [{"id": "a", "answers": ["cat"]}],
        },
    ]


@pytest.fixture
def sample_items(sample_definition: list[dict[str, Any]]) -> list[Item]:
    """Validated items for sample_definition."""
    return [Item.model_validate(d) for d in sample_definition]


@pytest.fixture
def workdir(tmp_path: Path) -> Generator[Path, None, None]:
    """Change cwd to an empty temporary directory for the duration of the test."""
    original_cwd = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)


@pytest.fixture
def project_dir(workdir: Path, sample_definition: list[dict[str, Any]]) -> Path:
    """Working directory containing definition.json with the sample definition."""
    (workdir / "definition.json").write_text(json.dumps(sample_definition))
    return workdir
