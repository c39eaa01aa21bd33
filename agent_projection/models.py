"""Canonical skill and sub-agent records.

Records are supplied by a record store and only read by the projection engine.
Bookkeeping fields (id, tags, source, timestamps) are never projected.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RecordKind(StrEnum):
    """Kind of canonical record."""

    SKILL = "skill"
    SUBAGENT = "subagent"


class _Record(BaseModel):
    """Fields shared by every canonical record."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int | None = None
    name: str
    content: str = ""
    model: str | None = None
    tags: list[str] | None = None
    source: str = "manual"
    source_path: str | None = None
    is_favorite: bool = False
    created_at: str = ""
    updated_at: str = ""


class Skill(_Record):
    """A reusable skill definition."""

    description: str | None = None
    allowed_tools: list[str] | None = None
    disable_model_invocation: bool = False

    @property
    def kind(self) -> RecordKind:
        """Return the record kind."""
        return RecordKind.SKILL


class SubAgent(_Record):
    """A sub-agent definition."""

    description: str
    tools: list[str] | None = None
    permission_mode: str | None = None
    skills: list[str] | None = None

    @property
    def kind(self) -> RecordKind:
        """Return the record kind."""
        return RecordKind.SUBAGENT


type Record = Skill | SubAgent
