"""FastAPI application entrypoint for jsxgen service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..constants import DEFAULT_IMPORT_PREFIX
from ..loaders import (
    DefinitionError,
    parse_assets,
    parse_components,
    parse_content,
    parse_route_table,
    parse_view,
)
from ..orchestrator import BuildOutcome, Orchestrator
from ..routing import RouterAssembler
from ..views import ViewCompiler


class BuildRequest(BaseModel):
    path: str
    dry_run: bool = False


class GeneratedFileResponse(BaseModel):
    path: str
    changed: bool
    diff: str = ""


class BuildResponse(BaseModel):
    status: str
    files: List[GeneratedFileResponse] = Field(default_factory=list)
    orphaned_routes: List[str] = Field(default_factory=list)
    dry_run: bool = False


class ViewRenderRequest(BaseModel):
    proto: Dict[str, Any]
    components: List[Dict[str, Any]] = Field(default_factory=list)
    assets: List[Dict[str, Any]] = Field(default_factory=list)
    content: Dict[str, Any] = Field(default_factory=dict)


class RouterRenderRequest(BaseModel):
    layouts: List[Dict[str, Any]] = Field(default_factory=list)
    routes: List[Dict[str, Any]] = Field(default_factory=list)
    partials: List[Dict[str, Any]] = Field(default_factory=list)
    import_prefix: str = DEFAULT_IMPORT_PREFIX


class SourceResponse(BaseModel):
    source: str
    orphaned_routes: Optional[List[str]] = None


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


async def _run_blocking(func: Callable[[], Any]) -> Any:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func)


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing jsxgen operations."""

    app = FastAPI(title="jsxgen Service", version="1.0.0")

    async def get_orchestrator() -> Orchestrator:
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/build", response_model=BuildResponse)
    async def build_project(
        payload: BuildRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> BuildResponse:
        def _run_build() -> BuildOutcome:
            return orchestrator.run_build(payload.path, dry_run=payload.dry_run)

        outcome = await _run_blocking(_run_build)
        return BuildResponse(
            status="ok" if outcome.changed else "unchanged",
            files=[
                GeneratedFileResponse(path=str(item.path), changed=item.changed, diff=item.diff)
                for item in outcome.files
            ],
            orphaned_routes=[route.name for route in outcome.orphaned_routes],
            dry_run=outcome.dry_run,
        )

    @app.post("/views/render", response_model=SourceResponse)
    async def render_view(payload: ViewRenderRequest) -> SourceResponse:
        compiler = ViewCompiler(
            components=parse_components({"components": payload.components}),
            assets=parse_assets({"assets": payload.assets}),
            content=parse_content({"content": payload.content}),
        )
        return SourceResponse(source=compiler.render(parse_view(payload.proto)))

    @app.post("/router/render", response_model=SourceResponse)
    async def render_router(payload: RouterRenderRequest) -> SourceResponse:
        table = parse_route_table(
            {"layouts": payload.layouts, "routes": payload.routes, "partials": payload.partials}
        )
        orphans: List[str] = []
        assembler = RouterAssembler(
            payload.import_prefix, on_orphan=lambda route: orphans.append(route.name)
        )
        source = assembler.render_table(table)
        return SourceResponse(source=source, orphaned_routes=orphans)

    @app.exception_handler(DefinitionError)
    async def definition_error_handler(
        _: Any, exc: DefinitionError
    ) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(
        _: Any, exc: FileNotFoundError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(
        _: Any, exc: RuntimeError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
