"""Tests for reading projected artifacts back."""

from pathlib import Path

from agent_projection.discovery import (
    ArtifactScanner,
    parse_frontmatter_lines,
    split_names,
)
from agent_projection.models import Skill, SubAgent
from agent_projection.paths import Runtime
from agent_projection.projection import (
    write_project_skill,
    write_project_skill_opencode,
    write_project_subagent,
    write_project_subagent_opencode,
)


class TestSplitNames:
    """Tests for split_names."""

    def test_comma_string(self) -> None:
        """Comma separated strings are split and stripped."""
        assert split_names("Read, Grep,Glob ,") == ["Read", "Grep", "Glob"]

    def test_mapping(self) -> None:
        """Only enabled mapping keys are kept."""
        assert split_names({"read": True, "write": False}) == ["read"]

    def test_list_and_none(self) -> None:
        """Lists pass through and None stays None."""
        assert split_names(["a", "b"]) == ["a", "b"]
        assert split_names(None) is None


class TestClaudeScanner:
    """Tests for scanning a Claude Code tree."""

    def test_round_trip(
        self, project_dir: Path, sample_skill: Skill, full_subagent: SubAgent
    ) -> None:
        """Written records are read back with their projected fields."""
        write_project_skill(project_dir, sample_skill)
        write_project_subagent(project_dir, full_subagent)
        scanner = ArtifactScanner(project_dir, Runtime.CLAUDE)

        (skill,) = scanner.scan_skills()
        assert skill.name == "test-agent"
        assert skill.description == "An agent skill"
        assert skill.allowed_tools == ["Bash", "Glob"]
        assert skill.model == "opus"
        assert skill.disable_model_invocation is True
        assert skill.content.strip() == "You are a helpful assistant."
        assert skill.source == "file"
        assert skill.source_path == str(
            project_dir / ".claude" / "skills" / "test-agent" / "SKILL.md"
        )

        (subagent,) = scanner.scan_subagents()
        assert subagent.name == "code-reviewer"
        assert subagent.tools == ["Read", "Grep", "Glob"]
        assert subagent.permission_mode == "bypassPermissions"
        assert subagent.skills == ["lint", "format"]

    def test_empty_tree(self, project_dir: Path) -> None:
        """A project without artifacts has nothing to scan."""
        scanner = ArtifactScanner(project_dir, Runtime.CLAUDE)

        assert scanner.scan_skills() == []
        assert scanner.scan_subagents() == []

    def test_skips_directories_without_skill_md(
        self, project_dir: Path, minimal_skill: Skill
    ) -> None:
        """Only directories holding SKILL.md are skills."""
        write_project_skill(project_dir, minimal_skill)
        (project_dir / ".claude" / "skills" / "empty").mkdir()

        names = [s.name for s in ArtifactScanner(project_dir, Runtime.CLAUDE).scan_skills()]

        assert names == ["minimal"]

    def test_skips_undecodable_agent(
        self, project_dir: Path, minimal_subagent: SubAgent
    ) -> None:
        """A document that is not UTF-8 is skipped."""
        write_project_subagent(project_dir, minimal_subagent)
        broken = project_dir / ".claude" / "agents" / "broken.md"
        broken.write_bytes(b"---\nname: broken\n---\n\n\xff\xfe")

        names = [
            s.name
            for s in ArtifactScanner(project_dir, Runtime.CLAUDE).scan_subagents()
        ]

        assert names == ["simple-agent"]

    def test_description_with_colon(self, project_dir: Path) -> None:
        """Unquoted values that are not valid YAML are still read."""
        write_project_skill(
            project_dir,
            Skill(
                name="reviewer",
                description="Use when: reviewing code",
                content="Body.",
                allowed_tools=["Read", "Grep"],
            ),
        )
        write_project_subagent(
            project_dir,
            SubAgent(
                name="planner",
                description="Plans work. Use when: a task is large",
                content="Plan.",
            ),
        )
        scanner = ArtifactScanner(project_dir, Runtime.CLAUDE)

        (skill,) = scanner.scan_skills()
        assert skill.name == "reviewer"
        assert skill.description == "Use when: reviewing code"
        assert skill.allowed_tools == ["Read", "Grep"]
        assert skill.content == "Body."

        (subagent,) = scanner.scan_subagents()
        assert subagent.name == "planner"
        assert subagent.description == "Plans work. Use when: a task is large"


class TestOpenCodeScanner:
    """Tests for scanning an OpenCode tree."""

    def test_separates_skills_and_agents(
        self, project_dir: Path, sample_skill: Skill, full_subagent: SubAgent
    ) -> None:
        """Skill documents carry a name key; agent documents do not."""
        write_project_skill_opencode(project_dir, sample_skill)
        write_project_subagent_opencode(project_dir, full_subagent)
        scanner = ArtifactScanner(project_dir / ".opencode", Runtime.OPENCODE)

        assert [s.name for s in scanner.scan_skills()] == ["test-agent"]
        (subagent,) = scanner.scan_subagents()
        assert subagent.name == "code-reviewer"
        assert subagent.description == "Reviews code for bugs and improvements"
        assert subagent.tools == ["read", "grep", "glob"]
        assert subagent.model == "sonnet"
        assert subagent.permission_mode is None
        assert subagent.skills is None

    def test_skill_with_colon_in_description(
        self, project_dir: Path, full_subagent: SubAgent
    ) -> None:
        """A skill whose frontmatter is not valid YAML is still a skill."""
        write_project_skill_opencode(
            project_dir,
            Skill(name="reviewer", description="Use when: reviewing code", content="B"),
        )
        write_project_subagent_opencode(project_dir, full_subagent)
        scanner = ArtifactScanner(project_dir / ".opencode", Runtime.OPENCODE)

        (skill,) = scanner.scan_skills()
        assert skill.name == "reviewer"
        assert skill.description == "Use when: reviewing code"
        assert [s.name for s in scanner.scan_subagents()] == ["code-reviewer"]


class TestParseFrontmatterLines:
    """Tests for the line-based frontmatter reader."""

    def test_values_and_body(self) -> None:
        """Values split on the first colon; quotes are removed."""
        text = (
            '---\nname: reviewer\ndescription: "Use when: reviewing"\n---\n\nBody.\n'
        )

        assert parse_frontmatter_lines(text) == (
            {"name": "reviewer", "description": "Use when: reviewing"},
            "Body.\n",
        )

    def test_nested_mapping(self) -> None:
        """Indented lines under an empty key form a mapping."""
        text = "---\ndescription: x: y\ntools:\n  read: true\n  write: false\n---\n\n"

        meta, body = parse_frontmatter_lines(text)

        assert meta == {"description": "x: y", "tools": {"read": True, "write": False}}
        assert body == ""

    def test_without_frontmatter(self) -> None:
        """Text without a closed block has no frontmatter."""
        assert parse_frontmatter_lines("Body only.") is None
        assert parse_frontmatter_lines("---\nname: open\n") is None
