from typing import Any

from fastapi import FastAPI

from agent_projection.store import RecordStoreProtocol


class ProjectionAPI(FastAPI):
    """FastAPI application holding the record store."""

    def __init__(self, record_store: RecordStoreProtocol, **kwargs: Any) -> None:
        """Initialize the application."""
        super().__init__(**kwargs)
        self.record_store = record_store
