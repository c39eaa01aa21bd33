"""agent-projection CLI."""

from agent_projection.cli.cli import main

__all__ = ["main"]
