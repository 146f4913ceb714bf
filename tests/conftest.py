"""Shared pytest fixtures for the Kaboomer test suite.

Provides reusable fixtures for:
- A temporary working directory the CLI and ``add`` run inside
- A mocked ``git init`` so unit tests never spawn processes
- A pre-scaffolded project for ``add`` tests
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from kaboomer.config import GenerationOptions
from kaboomer.scaffolder import ProjectGenerator


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary directory that is also the current working directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("KABOOMER_TEMPLATE", raising=False)
    monkeypatch.delenv("KABOOMER_NOGIT", raising=False)
    return tmp_path


# ---------------------------------------------------------------------------
# Mock git
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_git_init():
    """Replace ``git init`` with an AsyncMock for the generator."""
    with patch(
        "kaboomer.scaffolder.generator.init_repository",
        new_callable=AsyncMock,
    ) as mock:
        yield mock


# ---------------------------------------------------------------------------
# Scaffolded project
# ---------------------------------------------------------------------------

@pytest.fixture
async def scaffolded_project(workspace: Path) -> Path:
    """An ``empty``-template project generated without git."""
    options = GenerationOptions(template="empty", nogit=True)
    return await ProjectGenerator(workspace / "my-game", options).generate()
