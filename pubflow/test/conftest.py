from __future__ import annotations

from pathlib import Path

import pytest

from pubflow.core.project import Project
from pubflow.output.console import MockConsole

from ._fakes import PYPROJECT, FakeTools


@pytest.fixture
def fake_tools(monkeypatch: pytest.MonkeyPatch) -> FakeTools:
    import pubflow.services.base as base
    import pubflow.services.verify as verify

    tools = FakeTools()
    monkeypatch.setattr(base, "run_silent", tools.run_silent)
    monkeypatch.setattr(verify, "run", tools.run)
    return tools


@pytest.fixture
def project(tmp_path: Path) -> Project:
    root = tmp_path / "demo"
    root.mkdir()
    (root / "pyproject.toml").write_text(PYPROJECT, encoding="utf-8")
    return Project(root=root)


@pytest.fixture
def console() -> MockConsole:
    return MockConsole()
