"""Base directory resolution per scope and target runtime.

Resolution is pure: nothing here touches the filesystem or creates directories.
"""

from __future__ import annotations

import os
from enum import StrEnum
from pathlib import Path

from agent_projection.env import (
    HOME_ENV,
    OPENCODE_CONFIG_DIR_ENV,
    XDG_CONFIG_HOME_ENV,
)
from agent_projection.errors import HomeDirectoryUnavailableError

OPENCODE_PROJECT_DIR = ".opencode"


class Runtime(StrEnum):
    """External agent runtime that consumes projected artifacts."""

    CLAUDE = "claude"
    OPENCODE = "opencode"


class Scope(StrEnum):
    """Placement scope of an artifact."""

    GLOBAL = "global"
    PROJECT = "project"


class PathProvider:
    """Discovers the user's home and the OpenCode configuration root.

    The environment is read on every call.
    """

    def home_dir(self) -> Path:
        """Return the user's home directory."""
        if override := os.environ.get(HOME_ENV):
            return Path(override)
        try:
            return Path.home()
        except RuntimeError as e:
            raise HomeDirectoryUnavailableError(
                "Could not find home directory"
            ) from e

    def opencode_config_dir(self) -> Path:
        """Return the OpenCode global configuration root."""
        if explicit := os.environ.get(OPENCODE_CONFIG_DIR_ENV):
            return Path(explicit)
        if xdg := os.environ.get(XDG_CONFIG_HOME_ENV):
            return Path(xdg) / "opencode"
        try:
            home = self.home_dir()
        except HomeDirectoryUnavailableError as e:
            raise HomeDirectoryUnavailableError(
                "Could not find OpenCode config directory"
            ) from e
        return home / ".config" / "opencode"


default_path_provider = PathProvider()


def resolve_base_dir(
    scope: Scope,
    runtime: Runtime,
    project_path: Path | str | None = None,
    provider: PathProvider | None = None,
) -> Path:
    """Return the directory under which a runtime's artifacts live.

    Args:
        scope: Global or project placement.
        runtime: Target runtime.
        project_path: Project root, required for project scope.
        provider: Home and config root discovery, defaults to the environment.

    Raises:
        HomeDirectoryUnavailableError: Global scope and the directory is
            undiscoverable.
        ValueError: Project scope without a project path.
    """
    if scope == Scope.GLOBAL:
        provider = provider or default_path_provider
        if runtime == Runtime.CLAUDE:
            return provider.home_dir()
        return provider.opencode_config_dir()

    if project_path is None:
        raise ValueError("project_path is required for project scope")
    project = Path(project_path)
    if runtime == Runtime.CLAUDE:
        return project
    return project / OPENCODE_PROJECT_DIR
