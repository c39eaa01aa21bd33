"""Project every record of a store to one runtime and scope."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from agent_projection.projection import project_record

if TYPE_CHECKING:
    from pathlib import Path

    from agent_projection.paths import PathProvider, Runtime, Scope
    from agent_projection.store import RecordStoreProtocol

logger = logging.getLogger(__name__)


@dataclass
class SyncReport:
    """Paths written by a sync."""

    skills: list[Path] = field(default_factory=list)
    subagents: list[Path] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Return the number of written artifacts."""
        return len(self.skills) + len(self.subagents)


def sync_store(
    store: RecordStoreProtocol,
    runtime: Runtime,
    scope: Scope,
    project_path: Path | str | None = None,
    provider: PathProvider | None = None,
) -> SyncReport:
    """Write an artifact for every record in the store.

    Stops at the first failure; artifacts written before it are kept.
    """
    report = SyncReport()
    for skill in store.list_skills():
        report.skills.append(
            project_record(skill, runtime, scope, project_path, provider)
        )
    for subagent in store.list_subagents():
        report.subagents.append(
            project_record(subagent, runtime, scope, project_path, provider)
        )
    logger.info(
        "synced %s artifacts to %s (%s scope)", report.total, runtime, scope
    )
    return report
