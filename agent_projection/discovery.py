"""Reading projected artifacts back into canonical records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import frontmatter
import yaml

from agent_projection.artifacts import SKILL_FILENAME, get_layout
from agent_projection.models import RecordKind, Skill, SubAgent
from agent_projection.paths import Runtime
from agent_projection.schemas import FRONTMATTER_DELIMITER

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

DISCOVERED_SOURCE = "file"


def split_names(value: Any) -> list[str] | None:
    """Normalize a frontmatter tool or skill list.

    Accepts a comma separated string, a YAML list, or a mapping of names to
    booleans where only enabled names are kept.
    """
    if value is None:
        return None
    if isinstance(value, str):
        names = [part.strip() for part in value.split(",")]
        return [n for n in names if n]
    if isinstance(value, dict):
        return [str(k) for k, enabled in value.items() if enabled]
    if isinstance(value, list):
        return [str(v) for v in value]
    return [str(value)]


def parse_frontmatter_lines(text: str) -> tuple[dict[str, Any], str] | None:
    """Read a frontmatter block line by line, without YAML.

    Projected documents write values unquoted, so a description such as
    ``Use when: reviewing code`` is valid frontmatter here but not valid YAML.
    Top-level ``key: value`` lines split on the first colon. Indented
    ``name: true`` lines under a key with no value form a mapping.

    Returns:
        The metadata and the body, or None if there is no closed frontmatter
        block.
    """
    lines = text.split("\n")
    if lines[0].strip() != FRONTMATTER_DELIMITER:
        return None

    meta: dict[str, Any] = {}
    parent: str | None = None
    for index, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONTMATTER_DELIMITER:
            body = "\n".join(lines[index + 1 :])
            return meta, body.removeprefix("\n")
        if not line.strip():
            continue
        if line.startswith((" ", "\t")) and parent is not None:
            key, _, value = line.strip().partition(":")
            if not isinstance(meta[parent], dict):
                meta[parent] = {}
            meta[parent][key.strip()] = value.strip() == "true"
            continue

        key, sep, value = line.partition(":")
        if not sep:
            continue
        key, value = key.strip(), value.strip()
        if not value:
            meta[key] = ""
            parent = key
            continue
        parent = None
        if len(value) > 1 and value[0] == value[-1] == '"':
            value = value[1:-1]
        meta[key] = value
    return None


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


class ArtifactScanner:
    """Lists and parses the artifacts of one runtime under a base directory."""

    def __init__(self, base_dir: Path, runtime: Runtime) -> None:
        """Initialize the scanner.

        Args:
            base_dir: Directory the runtime's artifacts are resolved against.
            runtime: Runtime whose layout is scanned.
        """
        self._base_dir = base_dir
        self._runtime = runtime

    @property
    def base_dir(self) -> Path:
        """Return the scanned base directory."""
        return self._base_dir

    def skill_files(self) -> list[Path]:
        """Return the document paths of every projected skill."""
        if self._runtime == Runtime.OPENCODE:
            return [
                path
                for path in self._agent_files(RecordKind.SKILL)
                if "name" in self._read_metadata(path)
            ]

        skills_dir = get_layout(RecordKind.SKILL, self._runtime).collection_dir(
            self._base_dir
        )
        if not skills_dir.is_dir():
            return []
        return [
            entry / SKILL_FILENAME
            for entry in sorted(skills_dir.iterdir())
            if entry.is_dir() and (entry / SKILL_FILENAME).is_file()
        ]

    def subagent_files(self) -> list[Path]:
        """Return the document paths of every projected sub-agent."""
        files = self._agent_files(RecordKind.SUBAGENT)
        if self._runtime == Runtime.OPENCODE:
            return [path for path in files if "name" not in self._read_metadata(path)]
        return files

    def scan_skills(self) -> list[Skill]:
        """Parse every readable skill artifact."""
        result: list[Skill] = []
        for path in self.skill_files():
            skill = self._load(path, RecordKind.SKILL)
            if isinstance(skill, Skill):
                result.append(skill)
        logger.debug("found %s skills under: %s", len(result), self._base_dir)
        return result

    def scan_subagents(self) -> list[SubAgent]:
        """Parse every readable sub-agent artifact."""
        result: list[SubAgent] = []
        for path in self.subagent_files():
            subagent = self._load(path, RecordKind.SUBAGENT)
            if isinstance(subagent, SubAgent):
                result.append(subagent)
        logger.debug("found %s sub-agents under: %s", len(result), self._base_dir)
        return result

    def _agent_files(self, kind: RecordKind) -> list[Path]:
        agents_dir = get_layout(kind, self._runtime).collection_dir(self._base_dir)
        if not agents_dir.is_dir():
            return []
        return sorted(
            entry
            for entry in agents_dir.iterdir()
            if entry.is_file() and entry.suffix == ".md"
        )

    def _parse(self, path: Path) -> tuple[dict[str, Any], str] | None:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("unreadable artifact %s: %s", path, e)
            return None

        try:
            post = frontmatter.loads(text)
        except yaml.YAMLError:
            logger.debug("frontmatter is not YAML, reading lines: %s", path)
            parsed = parse_frontmatter_lines(text)
            if parsed is None:
                logger.warning("invalid artifact frontmatter: %s", path)
            return parsed
        return post.metadata, post.content

    def _read_metadata(self, path: Path) -> dict[str, Any]:
        parsed = self._parse(path)
        return parsed[0] if parsed else {}

    def _load(self, path: Path, kind: RecordKind) -> Skill | SubAgent | None:
        logger.debug("load artifact: %s", path)
        parsed = self._parse(path)
        if parsed is None:
            return None

        meta, content = parsed
        name = str(meta.get("name") or self._name_from_path(path))
        try:
            if kind == RecordKind.SKILL:
                return Skill(
                    name=name,
                    description=_optional_str(meta.get("description")),
                    content=content,
                    allowed_tools=split_names(meta.get("allowed-tools")),
                    model=_optional_str(meta.get("model")),
                    disable_model_invocation=meta.get("disable-model-invocation")
                    in (True, "true"),
                    source=DISCOVERED_SOURCE,
                    source_path=str(path),
                )
            return SubAgent(
                name=name,
                description=str(meta.get("description") or ""),
                content=content,
                tools=split_names(meta.get("tools")),
                model=_optional_str(meta.get("model")),
                permission_mode=_optional_str(meta.get("permissionMode")),
                skills=split_names(meta.get("skills")),
                source=DISCOVERED_SOURCE,
                source_path=str(path),
            )
        except ValueError:
            logger.warning("invalid artifact metadata: %s", path)
            return None

    @staticmethod
    def _name_from_path(path: Path) -> str:
        if path.name == SKILL_FILENAME:
            return path.parent.name
        return path.stem
