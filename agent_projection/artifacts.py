"""Writing and deleting projected artifacts on disk."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from uuid import uuid4

from agent_projection.models import Record, RecordKind
from agent_projection.paths import Runtime
from agent_projection.schemas import get_schema

logger = logging.getLogger(__name__)

SKILL_FILENAME = "SKILL.md"


class LayoutStyle(StrEnum):
    """How artifacts are laid out under their collection directory."""

    DIRECTORY = "directory"
    """``<collection>/<name>/SKILL.md``; the directory is the artifact."""

    FLAT = "flat"
    """``<collection>/<name>.md``."""


@dataclass(slots=True, frozen=True)
class ArtifactLayout:
    """Where artifacts of one kind live relative to a base directory."""

    collection: tuple[str, ...]
    style: LayoutStyle

    def collection_dir(self, base_dir: Path) -> Path:
        """Return the directory holding every artifact of this layout."""
        return base_dir.joinpath(*self.collection)

    def artifact_root(self, base_dir: Path, name: str) -> Path:
        """Return the path removed when the artifact is deleted."""
        if self.style == LayoutStyle.DIRECTORY:
            return self.collection_dir(base_dir) / name
        return self.collection_dir(base_dir) / f"{name}.md"

    def artifact_file(self, base_dir: Path, name: str) -> Path:
        """Return the document path of an artifact."""
        if self.style == LayoutStyle.DIRECTORY:
            return self.artifact_root(base_dir, name) / SKILL_FILENAME
        return self.artifact_root(base_dir, name)


CLAUDE_SKILLS = ArtifactLayout((".claude", "skills"), LayoutStyle.DIRECTORY)
CLAUDE_AGENTS = ArtifactLayout((".claude", "agents"), LayoutStyle.FLAT)
OPENCODE_AGENTS = ArtifactLayout(("agent",), LayoutStyle.FLAT)

_LAYOUTS: dict[tuple[RecordKind, Runtime], ArtifactLayout] = {
    (RecordKind.SKILL, Runtime.CLAUDE): CLAUDE_SKILLS,
    (RecordKind.SKILL, Runtime.OPENCODE): OPENCODE_AGENTS,
    (RecordKind.SUBAGENT, Runtime.CLAUDE): CLAUDE_AGENTS,
    (RecordKind.SUBAGENT, Runtime.OPENCODE): OPENCODE_AGENTS,
}


def get_layout(kind: RecordKind, runtime: Runtime) -> ArtifactLayout:
    """Return the artifact layout for a record kind on a runtime."""
    return _LAYOUTS[(kind, runtime)]


def write_then_replace(path: Path, content: str) -> None:
    """Write content to a sibling temp file and move it over ``path``."""
    tmp = path.with_name(f".{path.name}.{uuid4().hex}.tmp")
    try:
        tmp.write_text(content, encoding="utf-8", newline="")
        tmp.replace(path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def write_artifact(
    base_dir: Path, layout: ArtifactLayout, runtime: Runtime, record: Record
) -> Path:
    """Render a record and replace its artifact under ``base_dir``.

    Missing parent directories are created. Any existing file is replaced as a
    whole.

    Returns:
        The path of the written document.
    """
    path = layout.artifact_file(base_dir, record.name)
    path.parent.mkdir(parents=True, exist_ok=True)
    content = get_schema(record.kind, runtime).render(record)
    write_then_replace(path, content)
    logger.debug("wrote %s artifact: %s", record.kind, path)
    return path


def delete_artifact(base_dir: Path, layout: ArtifactLayout, name: str) -> bool:
    """Remove an artifact if present.

    A missing artifact is not an error.

    Returns:
        True if something was removed.
    """
    target = layout.artifact_root(base_dir, name)
    if target.is_symlink():
        # A link is removed itself; its target is left alone.
        target.unlink()
        logger.debug("deleted artifact link: %s", target)
        return True
    if not target.exists():
        logger.debug("artifact already absent: %s", target)
        return False

    if target.is_dir():
        shutil.rmtree(target)
    else:
        target.unlink()
    logger.debug("deleted artifact: %s", target)
    return True
