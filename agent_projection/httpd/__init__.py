"""HTTP interface for previewing, writing and deleting projections."""

from agent_projection.httpd.app import create_app
from agent_projection.httpd.server import ProjectionAPI

__all__ = ["ProjectionAPI", "create_app"]
