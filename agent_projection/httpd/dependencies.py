from fastapi import Request

from agent_projection.httpd.server import ProjectionAPI


def get_app(request: Request) -> ProjectionAPI:
    """Get the ProjectionAPI instance."""
    return request.app
