"""Record store supplying skills and sub-agents to the projection engine."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, Field, ValidationError

from agent_projection.artifacts import write_then_replace
from agent_projection.env import AGENT_PROJECTION_STORE, STORE_CONTENT_ENV
from agent_projection.errors import RecordNotFoundError, RecordStoreError
from agent_projection.models import RecordKind, Skill, SubAgent

logger = logging.getLogger(__name__)


class RecordStoreProtocol(Protocol):
    """Name-keyed source of canonical records."""

    def get_skill(self, name: str) -> Skill:
        """Return a skill by name."""
        ...

    def get_subagent(self, name: str) -> SubAgent:
        """Return a sub-agent by name."""
        ...

    def list_skills(self) -> list[Skill]:
        """Return every skill."""
        ...

    def list_subagents(self) -> list[SubAgent]:
        """Return every sub-agent."""
        ...


class Records(BaseModel):
    """Model of the record store document."""

    skills: list[Skill] = Field(default_factory=list)
    subagents: list[SubAgent] = Field(default_factory=list)


class JsonRecordStore:
    """Record store backed by a single JSON document."""

    def __init__(self, path: Path | str | None = None) -> None:
        """Initialize the store.

        Args:
            path: Path of the JSON document. Defaults to
                ``AGENT_PROJECTION_STORE``.
        """
        self._path = Path(path) if path is not None else AGENT_PROJECTION_STORE
        self._records = Records()

    @property
    def path(self) -> Path:
        """Return the path of the JSON document."""
        return self._path

    def initialize(self) -> None:
        """Load records from the environment or the JSON document."""
        logger.info("Loading records from %s", self._path)
        env_content = os.environ.get(STORE_CONTENT_ENV)

        if env_content:
            content = env_content
        elif self._path.exists():
            content = self._path.read_text(encoding="utf-8")
        else:
            logger.warning("record store not found: %s", self._path)
            self._records = Records()
            return

        try:
            self._records = Records.model_validate(json.loads(content))
        except (json.JSONDecodeError, ValidationError) as e:
            raise RecordStoreError(f"invalid record store {self._path}: {e}") from e
        logger.debug(
            "loaded %s skills and %s sub-agents",
            len(self._records.skills),
            len(self._records.subagents),
        )

    def save(self) -> None:
        """Persist all records to the JSON document."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        write_then_replace(
            self._path,
            self._records.model_dump_json(by_alias=True, indent=2),
        )

    def get_skill(self, name: str) -> Skill:
        """Return a skill by name."""
        for skill in self._records.skills:
            if skill.name == name:
                return skill
        raise RecordNotFoundError(RecordKind.SKILL, name)

    def get_subagent(self, name: str) -> SubAgent:
        """Return a sub-agent by name."""
        for subagent in self._records.subagents:
            if subagent.name == name:
                return subagent
        raise RecordNotFoundError(RecordKind.SUBAGENT, name)

    def get(self, kind: RecordKind, name: str) -> Skill | SubAgent:
        """Return a record of the given kind by name."""
        if kind == RecordKind.SKILL:
            return self.get_skill(name)
        return self.get_subagent(name)

    def list_skills(self) -> list[Skill]:
        """Return every skill."""
        return list(self._records.skills)

    def list_subagents(self) -> list[SubAgent]:
        """Return every sub-agent."""
        return list(self._records.subagents)

    def put(self, record: Skill | SubAgent) -> None:
        """Insert or replace a record by name."""
        if isinstance(record, Skill):
            self._records.skills = [
                s for s in self._records.skills if s.name != record.name
            ] + [record]
        else:
            self._records.subagents = [
                s for s in self._records.subagents if s.name != record.name
            ] + [record]

    def remove(self, kind: RecordKind, name: str) -> None:
        """Remove a record by name.

        Raises:
            RecordNotFoundError: No record of that kind has the name.
        """
        self.get(kind, name)
        if kind == RecordKind.SKILL:
            self._records.skills = [
                s for s in self._records.skills if s.name != name
            ]
        else:
            self._records.subagents = [
                s for s in self._records.subagents if s.name != name
            ]
