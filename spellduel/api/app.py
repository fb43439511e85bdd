"""
FastAPI Application - REST API for the solver.

Endpoints:
    GET    /api/v1/health     Health check
    GET    /api/v1/spells     Spell catalog
    POST   /api/v1/parse      Parse boss stats from puzzle input text
    POST   /api/v1/solve      Cheapest winning fight
    POST   /api/v1/replay     Replay a spell sequence round by round

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Optional

from .. import __version__
from ..config import Settings


def create_app(service=None, settings: Optional[Settings] = None):
    """
    Create the FastAPI application.

    Args:
        service: Optional SolverService instance (creates new if not provided)
        settings: Optional Settings (read from the environment if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    from .service import SolverService
    from .schemas import (
        ParseRequest,
        SolveRequest,
        ReplayRequest,
        ParseResponse,
        SolveResponse,
        ReplayResponse,
        CatalogResponse,
        ErrorResponse,
        HealthResponse,
    )

    settings = settings or Settings.from_env()

    app = FastAPI(
        title="Spellduel API",
        description="""
Wizard vs. boss combat solver.

## Error Codes

| Code | Description |
|------|-------------|
| `MALFORMED_INPUT` | Boss stats text could not be parsed |
| `UNKNOWN_SPELL` | Spell name not in the catalog |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or SolverService(settings=settings)

    def make_error_response(error: ErrorResponse, status_code: int = 400) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(status_code=status_code, content=error.model_dump(mode="json"))

    @app.get("/api/v1/health", response_model=HealthResponse, tags=["Meta"])
    async def health() -> HealthResponse:
        return HealthResponse(version=__version__)

    @app.get("/api/v1/spells", response_model=CatalogResponse, tags=["Meta"])
    async def list_spells() -> CatalogResponse:
        return api_service.list_spells()

    @app.post(
        "/api/v1/parse",
        response_model=ParseResponse,
        responses={400: {"model": ErrorResponse}},
        tags=["Solver"],
        summary="Parse boss stats from puzzle input",
    )
    async def parse(request: ParseRequest):
        response = api_service.parse(request)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    # Search is CPU-bound; a plain def runs it in the threadpool
    @app.post(
        "/api/v1/solve",
        response_model=SolveResponse,
        tags=["Solver"],
        summary="Find the cheapest winning spell sequence",
    )
    def solve(request: SolveRequest) -> SolveResponse:
        return api_service.solve(request)

    @app.post(
        "/api/v1/replay",
        response_model=ReplayResponse,
        responses={400: {"model": ErrorResponse}},
        tags=["Solver"],
        summary="Replay a spell sequence round by round",
    )
    def replay(request: ReplayRequest):
        response = api_service.replay(request)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    return app
