from os import getenv
from pathlib import Path

AGENT_PROJECTION_STORE = Path(
    getenv("AGENT_PROJECTION_STORE", str(Path.cwd() / "records.json"))
)
LOG_LEVEL_ENV = "AGENT_PROJECTION_LOG_LEVEL"

HOME_ENV = "AGENT_PROJECTION_HOME"
OPENCODE_CONFIG_DIR_ENV = "OPENCODE_CONFIG_DIR"
XDG_CONFIG_HOME_ENV = "XDG_CONFIG_HOME"
STORE_CONTENT_ENV = "AGENT_PROJECTION_STORE_CONTENT"
