from argparse import Namespace

from agent_projection.models import RecordKind
from agent_projection.paths import Runtime, Scope


class CLIArgs(Namespace):
    """Parsed command line arguments."""

    command: str
    kind: RecordKind
    name: str
    runtime: Runtime
    scope: Scope
    project_path: str | None
    store_path: str | None
    log_level: str | None
