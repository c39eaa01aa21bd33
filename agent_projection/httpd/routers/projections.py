import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import APIRouter, Depends, HTTPException

from agent_projection.discovery import ArtifactScanner
from agent_projection.errors import RecordNotFoundError, ResolutionError
from agent_projection.httpd.dependencies import get_app
from agent_projection.httpd.routers.models import (
    ArtifactPath,
    ArtifactRemoval,
    DataResult,
    DiscoveredArtifacts,
)
from agent_projection.httpd.server import ProjectionAPI
from agent_projection.models import RecordKind, Skill, SubAgent
from agent_projection.paths import Runtime, Scope, resolve_base_dir
from agent_projection.projection import project_record, remove_record
from agent_projection.schemas import render_record

logger = logging.getLogger(__name__)

projections = APIRouter(tags=["projections"])


@contextmanager
def _http_errors() -> Iterator[None]:
    """Translate projection failures into HTTP errors."""
    try:
        yield
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ResolutionError as e:
        logger.error("Base directory resolution failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except OSError as e:
        logger.error("Artifact I/O failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e)) from e


def _get_record(app: ProjectionAPI, kind: RecordKind, name: str) -> Skill | SubAgent:
    if kind == RecordKind.SKILL:
        return app.record_store.get_skill(name)
    return app.record_store.get_subagent(name)


def _preview(
    app: ProjectionAPI, kind: RecordKind, name: str, runtime: Runtime
) -> DataResult[str]:
    with _http_errors():
        record = _get_record(app, kind, name)
    return DataResult(success=True, message=None, data=render_record(record, runtime))


def _write(
    app: ProjectionAPI,
    kind: RecordKind,
    name: str,
    runtime: Runtime,
    scope: Scope,
    project: str | None,
) -> DataResult[ArtifactPath]:
    with _http_errors():
        record = _get_record(app, kind, name)
        path = project_record(record, runtime, scope, project)
    return DataResult(success=True, message=None, data=ArtifactPath(path=str(path)))


def _delete(
    kind: RecordKind,
    name: str,
    runtime: Runtime,
    scope: Scope,
    project: str | None,
) -> DataResult[ArtifactRemoval]:
    with _http_errors():
        removed = remove_record(kind, name, runtime, scope, project)
    return DataResult(
        success=True, message=None, data=ArtifactRemoval(removed=removed)
    )


@projections.get("/skills/{name}/preview")
async def preview_skill(
    name: str,
    runtime: Runtime = Runtime.CLAUDE,
    app: ProjectionAPI = Depends(get_app),
) -> DataResult[str]:
    """Render a skill without writing it."""
    return _preview(app, RecordKind.SKILL, name, runtime)


@projections.put("/skills/{name}")
async def write_skill(
    name: str,
    runtime: Runtime = Runtime.CLAUDE,
    scope: Scope = Scope.GLOBAL,
    project: str | None = None,
    app: ProjectionAPI = Depends(get_app),
) -> DataResult[ArtifactPath]:
    """Write a skill's artifact."""
    return _write(app, RecordKind.SKILL, name, runtime, scope, project)


@projections.delete("/skills/{name}")
async def delete_skill(
    name: str,
    runtime: Runtime = Runtime.CLAUDE,
    scope: Scope = Scope.GLOBAL,
    project: str | None = None,
) -> DataResult[ArtifactRemoval]:
    """Delete a skill's artifact; a missing artifact is not an error."""
    return _delete(RecordKind.SKILL, name, runtime, scope, project)


@projections.get("/subagents/{name}/preview")
async def preview_subagent(
    name: str,
    runtime: Runtime = Runtime.CLAUDE,
    app: ProjectionAPI = Depends(get_app),
) -> DataResult[str]:
    """Render a sub-agent without writing it."""
    return _preview(app, RecordKind.SUBAGENT, name, runtime)


@projections.put("/subagents/{name}")
async def write_subagent(
    name: str,
    runtime: Runtime = Runtime.CLAUDE,
    scope: Scope = Scope.GLOBAL,
    project: str | None = None,
    app: ProjectionAPI = Depends(get_app),
) -> DataResult[ArtifactPath]:
    """Write a sub-agent's artifact."""
    return _write(app, RecordKind.SUBAGENT, name, runtime, scope, project)


@projections.delete("/subagents/{name}")
async def delete_subagent(
    name: str,
    runtime: Runtime = Runtime.CLAUDE,
    scope: Scope = Scope.GLOBAL,
    project: str | None = None,
) -> DataResult[ArtifactRemoval]:
    """Delete a sub-agent's artifact; a missing artifact is not an error."""
    return _delete(RecordKind.SUBAGENT, name, runtime, scope, project)


@projections.get("/artifacts")
async def list_artifacts(
    runtime: Runtime = Runtime.CLAUDE,
    scope: Scope = Scope.GLOBAL,
    project: str | None = None,
) -> DataResult[DiscoveredArtifacts]:
    """List the artifacts already on disk for a runtime and scope."""
    with _http_errors():
        scanner = ArtifactScanner(resolve_base_dir(scope, runtime, project), runtime)
        data = DiscoveredArtifacts(
            skills=[s.name for s in scanner.scan_skills()],
            subagents=[s.name for s in scanner.scan_subagents()],
        )
    return DataResult(success=True, message=None, data=data)
