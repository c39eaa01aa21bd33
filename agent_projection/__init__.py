"""Projection of skills and sub-agents into Claude Code and OpenCode configs."""

from agent_projection.errors import (
    HomeDirectoryUnavailableError,
    ProjectionError,
    RecordNotFoundError,
    ResolutionError,
)
from agent_projection.models import RecordKind, Skill, SubAgent
from agent_projection.paths import PathProvider, Runtime, Scope, resolve_base_dir
from agent_projection.projection import (
    delete_global_skill,
    delete_global_skill_opencode,
    delete_global_subagent,
    delete_global_subagent_opencode,
    delete_project_skill,
    delete_project_skill_opencode,
    delete_project_subagent,
    delete_project_subagent_opencode,
    project_record,
    remove_record,
    write_global_skill,
    write_global_skill_opencode,
    write_global_subagent,
    write_global_subagent_opencode,
    write_project_skill,
    write_project_skill_opencode,
    write_project_subagent,
    write_project_subagent_opencode,
)
from agent_projection.schemas import TargetSchema, get_schema, render_record

__all__ = [
    "HomeDirectoryUnavailableError",
    "PathProvider",
    "ProjectionError",
    "RecordKind",
    "RecordNotFoundError",
    "ResolutionError",
    "Runtime",
    "Scope",
    "Skill",
    "SubAgent",
    "TargetSchema",
    "delete_global_skill",
    "delete_global_skill_opencode",
    "delete_global_subagent",
    "delete_global_subagent_opencode",
    "delete_project_skill",
    "delete_project_skill_opencode",
    "delete_project_subagent",
    "delete_project_subagent_opencode",
    "get_schema",
    "project_record",
    "remove_record",
    "render_record",
    "resolve_base_dir",
    "write_global_skill",
    "write_global_skill_opencode",
    "write_global_subagent",
    "write_global_subagent_opencode",
    "write_project_skill",
    "write_project_skill_opencode",
    "write_project_subagent",
    "write_project_subagent_opencode",
]
