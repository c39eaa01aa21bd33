import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from agent_projection.env import (
    HOME_ENV,
    OPENCODE_CONFIG_DIR_ENV,
    STORE_CONTENT_ENV,
    XDG_CONFIG_HOME_ENV,
)
from agent_projection.models import Skill, SubAgent


@pytest.fixture
def sample_skill() -> Skill:
    """A skill with every projected field set."""
    return Skill(
        id=1,
        name="test-agent",
        description="An agent skill",
        content="You are a helpful assistant.",
        allowed_tools=["Bash", "Glob"],
        model="opus",
        disable_model_invocation=True,
        created_at="2024-01-01",
        updated_at="2024-01-01",
    )


@pytest.fixture
def minimal_skill() -> Skill:
    """A skill with every optional field absent."""
    return Skill(id=2, name="minimal", content="Minimal content.")


@pytest.fixture
def full_subagent() -> SubAgent:
    """A sub-agent with every projected field set."""
    return SubAgent(
        id=1,
        name="code-reviewer",
        description="Reviews code for bugs and improvements",
        content=(
            "You are a code review expert. "
            "Analyze code for bugs, security issues, and best practices."
        ),
        tools=["Read", "Grep", "Glob"],
        model="sonnet",
        permission_mode="bypassPermissions",
        skills=["lint", "format"],
        tags=["review", "quality"],
    )


@pytest.fixture
def minimal_subagent() -> SubAgent:
    """A sub-agent with only the required fields."""
    return SubAgent(
        id=2,
        name="simple-agent",
        description="A simple agent",
        content="You are a helpful assistant.",
    )


@pytest.fixture
def project_dir() -> Generator[Path, None, None]:
    """An empty project directory."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture
def fake_home(monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Point home and OpenCode config discovery at a temporary directory."""
    with tempfile.TemporaryDirectory() as tmp:
        home = Path(tmp)
        monkeypatch.setenv(HOME_ENV, str(home))
        monkeypatch.delenv(OPENCODE_CONFIG_DIR_ENV, raising=False)
        monkeypatch.delenv(XDG_CONFIG_HOME_ENV, raising=False)
        monkeypatch.delenv(STORE_CONTENT_ENV, raising=False)
        yield home
