"""FastAPI server for metricgraph.

Serves the graph compiled from the configured markdown file. Endpoints
are registered on an ``APIRouter`` so a parent application can mount
them; the standalone ``app`` includes the router directly::

    uvicorn metricgraph.server:app --reload --port 3001

or ``python -m metricgraph.server``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from metricgraph import __version__
from metricgraph.config import ServiceSettings
from metricgraph.hierarchy import transform
from metricgraph.source import GraphSource, SourceUnavailableError

logger = logging.getLogger(__name__)

# ===================================================================
# Pydantic request models
# ===================================================================


class CompileRequest(BaseModel):
    """Request body for compiling ad-hoc document text."""

    text: str = Field(..., max_length=1_000_000)


# ===================================================================
# Shared state
# ===================================================================

_state: dict[str, Any] = {
    "source": None,
    "settings": None,
}


def configure(source: GraphSource, settings: ServiceSettings | None = None) -> None:
    """Inject the graph source (and optionally settings) used by the router.

    Args:
        source: GraphSource for the watched document.
        settings: Settings the source was built from, reported by /api/health.
    """
    _state["source"] = source
    _state["settings"] = settings


def get_source() -> GraphSource:
    """Return the configured GraphSource, raising 503 if there is none.

    Raises:
        HTTPException: 503 if configure() has not been called.
    """
    source = _state.get("source")
    if source is None:
        raise HTTPException(
            status_code=503,
            detail="Graph source not configured. Call configure() first.",
        )
    return source


def _unavailable(exc: SourceUnavailableError) -> HTTPException:
    logger.warning("Source unavailable: %s", exc)
    return HTTPException(status_code=404, detail=exc.to_dict())


# ===================================================================
# Router
# ===================================================================

router = APIRouter()


@router.get("/api/graph-data")
async def get_graph_data() -> dict[str, Any]:
    """Return the graph for the current source document."""
    source = get_source()
    try:
        graph = source.get_graph()
    except SourceUnavailableError as exc:
        raise _unavailable(exc) from exc
    return graph.to_dict()


@router.get("/api/status")
async def get_status() -> dict[str, Any]:
    """Report the source file and cache state."""
    return get_source().status()


@router.post("/api/reload")
async def reload_graph() -> dict[str, Any]:
    """Drop the cached graph and recompile the source document."""
    source = get_source()
    try:
        graph = source.reload()
    except SourceUnavailableError as exc:
        raise _unavailable(exc) from exc
    return {
        "message": "Reloaded successfully",
        "nodes_count": len(graph.nodes),
        "edges_count": len(graph.edges),
    }


@router.post("/api/compile")
async def compile_text(request: CompileRequest) -> dict[str, Any]:
    """Compile text sent in the request body, bypassing the source file."""
    return transform(request.text).to_dict()


@router.get("/api/health")
async def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    source = _state.get("source")
    return {
        "status": "ok" if source is not None else "unconfigured",
        "version": __version__,
        "source": str(source.path) if source is not None else None,
    }


# ===================================================================
# Application
# ===================================================================


def create_app(settings: ServiceSettings | None = None) -> FastAPI:
    """Build the standalone application for the given settings.

    Args:
        settings: Service settings. Read from the environment when None.

    Returns:
        FastAPI app with CORS enabled and the router mounted.
    """
    settings = settings or ServiceSettings.from_env()

    application = FastAPI(
        title="metricgraph API",
        description="Compiles a markdown metric outline into a typed graph",
        version=__version__,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    application.include_router(router)

    configure(GraphSource(Path(settings.source_path)), settings)
    return application


app = create_app()


def run_server(settings: ServiceSettings | None = None) -> None:
    """Start the metricgraph server via uvicorn.

    Args:
        settings: Service settings. Read from the environment when None.
    """
    import uvicorn

    settings = settings or ServiceSettings.from_env()
    application = create_app(settings)
    logger.info("Serving graph for %s", settings.source_path)
    uvicorn.run(application, host=settings.host, port=settings.port)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    run_server()
