from typing import TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ResultResponse(BaseModel):
    """Generic response model with success status and message."""

    success: bool
    message: str | None = None


class DataResult[T](ResultResponse):
    """Generic result that extends ResultResponse with a data field."""

    data: T


class ArtifactPath(BaseModel):
    """Location of a written artifact."""

    path: str


class ArtifactRemoval(BaseModel):
    """Outcome of an artifact deletion."""

    removed: bool


class DiscoveredArtifacts(BaseModel):
    """Names of the artifacts found on disk."""

    skills: list[str]
    subagents: list[str]
