"""Write and delete entry points for every runtime and scope.

Claude Code:
    skills  -> {base}/.claude/skills/{name}/SKILL.md
    agents  -> {base}/.claude/agents/{name}.md
OpenCode:
    skills and agents -> {base}/agent/{name}.md

where {base} is the home directory (Claude, global), the OpenCode config root
(OpenCode, global), the project (Claude, project) or {project}/.opencode
(OpenCode, project).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from agent_projection.artifacts import delete_artifact, get_layout, write_artifact
from agent_projection.models import Record, RecordKind, Skill, SubAgent
from agent_projection.paths import (
    PathProvider,
    Runtime,
    Scope,
    resolve_base_dir,
)

if TYPE_CHECKING:
    from pathlib import Path


def project_record(
    record: Record,
    runtime: Runtime,
    scope: Scope,
    project_path: Path | str | None = None,
    provider: PathProvider | None = None,
) -> Path:
    """Write a record's artifact for a runtime and scope.

    Returns:
        The path of the written document.
    """
    base_dir = resolve_base_dir(scope, runtime, project_path, provider)
    return write_artifact(
        base_dir, get_layout(record.kind, runtime), runtime, record
    )


def remove_record(
    kind: RecordKind,
    name: str,
    runtime: Runtime,
    scope: Scope,
    project_path: Path | str | None = None,
    provider: PathProvider | None = None,
) -> bool:
    """Delete a record's artifact for a runtime and scope if it exists.

    Returns:
        True if something was removed.
    """
    base_dir = resolve_base_dir(scope, runtime, project_path, provider)
    return delete_artifact(base_dir, get_layout(kind, runtime), name)


# Skills


def write_global_skill(skill: Skill) -> Path:
    """Write a skill to ~/.claude/skills/."""
    return project_record(skill, Runtime.CLAUDE, Scope.GLOBAL)


def delete_global_skill(skill: Skill) -> bool:
    """Delete a skill from ~/.claude/skills/."""
    return remove_record(RecordKind.SKILL, skill.name, Runtime.CLAUDE, Scope.GLOBAL)


def write_project_skill(project_path: Path | str, skill: Skill) -> Path:
    """Write a skill to {project}/.claude/skills/."""
    return project_record(skill, Runtime.CLAUDE, Scope.PROJECT, project_path)


def delete_project_skill(project_path: Path | str, skill: Skill) -> bool:
    """Delete a skill from {project}/.claude/skills/."""
    return remove_record(
        RecordKind.SKILL, skill.name, Runtime.CLAUDE, Scope.PROJECT, project_path
    )


def write_global_skill_opencode(skill: Skill) -> Path:
    """Write a skill to the OpenCode config root's agent/ directory."""
    return project_record(skill, Runtime.OPENCODE, Scope.GLOBAL)


def delete_global_skill_opencode(skill: Skill) -> bool:
    """Delete a skill from the OpenCode config root's agent/ directory."""
    return remove_record(
        RecordKind.SKILL, skill.name, Runtime.OPENCODE, Scope.GLOBAL
    )


def write_project_skill_opencode(project_path: Path | str, skill: Skill) -> Path:
    """Write a skill to {project}/.opencode/agent/."""
    return project_record(skill, Runtime.OPENCODE, Scope.PROJECT, project_path)


def delete_project_skill_opencode(project_path: Path | str, skill: Skill) -> bool:
    """Delete a skill from {project}/.opencode/agent/."""
    return remove_record(
        RecordKind.SKILL, skill.name, Runtime.OPENCODE, Scope.PROJECT, project_path
    )


# Sub-agents


def write_global_subagent(subagent: SubAgent) -> Path:
    """Write a sub-agent to ~/.claude/agents/."""
    return project_record(subagent, Runtime.CLAUDE, Scope.GLOBAL)


def delete_global_subagent(name: str) -> bool:
    """Delete a sub-agent from ~/.claude/agents/."""
    return remove_record(RecordKind.SUBAGENT, name, Runtime.CLAUDE, Scope.GLOBAL)


def write_project_subagent(project_path: Path | str, subagent: SubAgent) -> Path:
    """Write a sub-agent to {project}/.claude/agents/."""
    return project_record(subagent, Runtime.CLAUDE, Scope.PROJECT, project_path)


def delete_project_subagent(project_path: Path | str, name: str) -> bool:
    """Delete a sub-agent from {project}/.claude/agents/."""
    return remove_record(
        RecordKind.SUBAGENT, name, Runtime.CLAUDE, Scope.PROJECT, project_path
    )


def write_global_subagent_opencode(subagent: SubAgent) -> Path:
    """Write a sub-agent to the OpenCode config root's agent/ directory."""
    return project_record(subagent, Runtime.OPENCODE, Scope.GLOBAL)


def delete_global_subagent_opencode(name: str) -> bool:
    """Delete a sub-agent from the OpenCode config root's agent/ directory."""
    return remove_record(RecordKind.SUBAGENT, name, Runtime.OPENCODE, Scope.GLOBAL)


def write_project_subagent_opencode(
    project_path: Path | str, subagent: SubAgent
) -> Path:
    """Write a sub-agent to {project}/.opencode/agent/."""
    return project_record(subagent, Runtime.OPENCODE, Scope.PROJECT, project_path)


def delete_project_subagent_opencode(project_path: Path | str, name: str) -> bool:
    """Delete a sub-agent from {project}/.opencode/agent/."""
    return remove_record(
        RecordKind.SUBAGENT, name, Runtime.OPENCODE, Scope.PROJECT, project_path
    )
