from agent_projection.httpd.routers.projections import projections
from agent_projection.httpd.server import ProjectionAPI
from agent_projection.store import RecordStoreProtocol


def create_app(record_store: RecordStoreProtocol) -> ProjectionAPI:
    """Create the projection HTTP application."""
    app = ProjectionAPI(record_store, title="agent-projection")
    app.include_router(projections, prefix="/api/projections")
    return app
