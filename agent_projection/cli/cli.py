"""agent-projection CLI."""

import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from agent_projection.cli.cli_types import CLIArgs
from agent_projection.conf import LOG_LEVELS, LogConfig
from agent_projection.discovery import ArtifactScanner
from agent_projection.env import LOG_LEVEL_ENV
from agent_projection.errors import ProjectionError
from agent_projection.models import RecordKind
from agent_projection.paths import Runtime, Scope, resolve_base_dir
from agent_projection.projection import project_record, remove_record
from agent_projection.schemas import render_record
from agent_projection.store import JsonRecordStore
from agent_projection.sync import sync_store

logger = logging.getLogger(__name__)


def _target_parser() -> argparse.ArgumentParser:
    """Flags shared by every command that touches a runtime."""
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "--runtime",
        type=Runtime,
        choices=list(Runtime),
        default=Runtime.CLAUDE,
        help="The runtime to project for.",
    )
    parser.add_argument(
        "--scope",
        type=Scope,
        choices=list(Scope),
        default=Scope.GLOBAL,
        help="Write to the user-global or the project location.",
    )
    parser.add_argument(
        "--project",
        type=str,
        default=None,
        help="The project directory, required with --scope project.",
        dest="project_path",
    )
    return parser


def _record_parser() -> argparse.ArgumentParser:
    """Positional arguments naming one record."""
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("kind", type=RecordKind, choices=list(RecordKind))
    parser.add_argument("name", type=str)
    return parser


def setup_argument_parser() -> argparse.ArgumentParser:
    """Setup the argument parser."""
    parser = argparse.ArgumentParser(
        prog="agent-projection",
        description="Write skills and sub-agents for Claude Code and OpenCode.",
    )
    parser.add_argument(
        "--store",
        type=str,
        default=None,
        help="The path to the JSON record store.",
        dest="store_path",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level.",
        dest="log_level",
    )

    target = _target_parser()
    record = _record_parser()
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser(
        "write", parents=[record, target], help="Write one record's artifact."
    )
    commands.add_parser(
        "delete", parents=[record, target], help="Delete one record's artifact."
    )
    commands.add_parser(
        "show", parents=[record, target], help="Print a rendered document."
    )
    commands.add_parser(
        "sync", parents=[target], help="Write every record in the store."
    )
    commands.add_parser(
        "scan", parents=[target], help="List artifacts already on disk."
    )
    return parser


def run(args: CLIArgs) -> None:
    """Execute a parsed command."""
    store = JsonRecordStore(args.store_path)

    if args.command == "delete":
        removed = remove_record(
            args.kind, args.name, args.runtime, args.scope, args.project_path
        )
        print(f"{'Deleted' if removed else 'Already absent'}: {args.kind} {args.name}")
        return

    if args.command == "scan":
        base_dir = resolve_base_dir(args.scope, args.runtime, args.project_path)
        scanner = ArtifactScanner(base_dir, args.runtime)
        for skill in scanner.scan_skills():
            print(f"skill\t{skill.name}\t{skill.source_path}")
        for subagent in scanner.scan_subagents():
            print(f"subagent\t{subagent.name}\t{subagent.source_path}")
        return

    store.initialize()

    if args.command == "sync":
        report = sync_store(store, args.runtime, args.scope, args.project_path)
        for path in [*report.skills, *report.subagents]:
            print(path)
        return

    record = store.get(args.kind, args.name)
    if args.command == "show":
        print(render_record(record, args.runtime))
        return

    path = project_record(record, args.runtime, args.scope, args.project_path)
    logger.info("Projected %s %s to %s", args.kind, args.name, path)
    print(path)


def main(argv: Sequence[str] | None = None) -> int:
    """agent-projection CLI entrypoint."""
    parser = setup_argument_parser()
    args = parser.parse_args(argv, namespace=CLIArgs())

    try:
        log_config = (
            LogConfig(level=args.log_level) if args.log_level else LogConfig()
        )
    except ValidationError:
        parser.error(f"invalid log level in {LOG_LEVEL_ENV}")
    log_config.setup()

    if args.scope == Scope.PROJECT and not args.project_path:
        parser.error("--project is required with --scope project")

    try:
        run(args)
    except (ProjectionError, OSError) as e:
        logger.exception("Command %s failed", args.command)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
