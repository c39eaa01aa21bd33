"""Frontmatter rendering of canonical records for each target runtime.

A target schema is a fixed, ordered list of frontmatter fields. Rendering walks
the list, drops optional fields that are absent or empty, and renders the rest
with the field's own rule. The document is the frontmatter block, a blank line,
and the record content verbatim.
"""

from __future__ import annotations

from abc import ABC
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from agent_projection.models import Record, RecordKind, Skill, SubAgent
from agent_projection.paths import Runtime

FRONTMATTER_DELIMITER = "---"

type FieldRenderer = Callable[[str, Any], list[str]]


def render_raw(key: str, value: Any) -> list[str]:
    """Render ``key: value`` without quoting."""
    return [f"{key}: {value}"]


def render_quoted(key: str, value: Any) -> list[str]:
    """Render ``key: "value"``."""
    return [f'{key}: "{value}"']


def render_joined(key: str, value: Sequence[str]) -> list[str]:
    """Render a list on one line, comma-space joined, casing preserved."""
    return [f"{key}: {', '.join(value)}"]


def render_enabled_map(key: str, value: Sequence[str]) -> list[str]:
    """Render a list as a nested mapping of lowercased names to ``true``."""
    return [f"{key}:", *(f"  {item.lower()}: true" for item in value)]


def render_flag(key: str, value: Any) -> list[str]:
    """Render ``key: true`` when set; a false flag is never written."""
    return [f"{key}: true"] if value else []


def is_empty(value: Any) -> bool:
    """Return True for values that are omitted from frontmatter."""
    return value is None or value in ("", [], ())


@dataclass(slots=True, frozen=True)
class FrontmatterField:
    """One frontmatter key and how it is read and rendered."""

    key: str
    attribute: str
    render: FieldRenderer = render_raw
    required: bool = False

    def lines(self, record: Record) -> list[str]:
        value = getattr(record, self.attribute)
        if not self.required and is_empty(value):
            return []
        return self.render(self.key, value)


class TargetSchema(ABC):
    """Frontmatter schema for one (record kind, runtime) pair."""

    kind: ClassVar[RecordKind]
    runtime: ClassVar[Runtime]
    fields: ClassVar[tuple[FrontmatterField, ...]]

    def frontmatter_lines(self, record: Record) -> list[str]:
        """Return the metadata lines in emission order, delimiters excluded."""
        lines: list[str] = []
        for field in self.fields:
            lines.extend(field.lines(record))
        return lines

    def render(self, record: Record) -> str:
        """Render the complete document for a record."""
        header = "".join(f"{line}\n" for line in self.frontmatter_lines(record))
        return (
            f"{FRONTMATTER_DELIMITER}\n{header}{FRONTMATTER_DELIMITER}\n\n"
            f"{record.content}"
        )


class ClaudeSkillSchema(TargetSchema):
    """``SKILL.md`` frontmatter for Claude Code."""

    kind = RecordKind.SKILL
    runtime = Runtime.CLAUDE
    fields = (
        FrontmatterField("name", "name", required=True),
        FrontmatterField("description", "description"),
        FrontmatterField("allowed-tools", "allowed_tools", render_joined),
        FrontmatterField("model", "model"),
        FrontmatterField(
            "disable-model-invocation", "disable_model_invocation", render_flag
        ),
    )


class ClaudeSubAgentSchema(TargetSchema):
    """``.claude/agents/<name>.md`` frontmatter for Claude Code."""

    kind = RecordKind.SUBAGENT
    runtime = Runtime.CLAUDE
    fields = (
        FrontmatterField("name", "name", required=True),
        FrontmatterField("description", "description", required=True),
        FrontmatterField("tools", "tools", render_joined),
        FrontmatterField("model", "model"),
        FrontmatterField("permissionMode", "permission_mode"),
        FrontmatterField("skills", "skills", render_joined),
    )


class OpenCodeSubAgentSchema(TargetSchema):
    """``agent/<name>.md`` frontmatter for OpenCode.

    The filename carries the identity, so there is no ``name`` key. OpenCode's
    ``permission`` object has no counterpart in ``permission_mode`` and skill
    references have no equivalent, so neither is written.
    """

    kind = RecordKind.SUBAGENT
    runtime = Runtime.OPENCODE
    fields = (
        FrontmatterField("description", "description", render_quoted, required=True),
        FrontmatterField("model", "model"),
        FrontmatterField("tools", "tools", render_enabled_map),
    )


# OpenCode has no skill document of its own; skills are written as agent files
# using the Claude skill frontmatter.
_SCHEMAS: dict[tuple[RecordKind, Runtime], TargetSchema] = {
    (RecordKind.SKILL, Runtime.CLAUDE): ClaudeSkillSchema(),
    (RecordKind.SKILL, Runtime.OPENCODE): ClaudeSkillSchema(),
    (RecordKind.SUBAGENT, Runtime.CLAUDE): ClaudeSubAgentSchema(),
    (RecordKind.SUBAGENT, Runtime.OPENCODE): OpenCodeSubAgentSchema(),
}


def get_schema(kind: RecordKind, runtime: Runtime) -> TargetSchema:
    """Return the target schema for a record kind on a runtime."""
    return _SCHEMAS[(kind, runtime)]


def render_record(record: Skill | SubAgent, runtime: Runtime) -> str:
    """Render a record as a document for the given runtime."""
    return get_schema(record.kind, runtime).render(record)
