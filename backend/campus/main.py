"""Campus Records API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - One Registrar per app, attached to app.state before the first request
    - GraphQL mounted at settings.graphql_path; GraphiQL only when enabled
    - CORS configured from settings (not hardcoded)
    - Shutdown resets the in-memory store (nothing survives the process)

Design Decisions:
    - create_app() factory: tests build isolated apps with their own Registrar
    - Lifespan over @app.on_event for startup/shutdown
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

from campus.api.error_handlers import register_error_handlers
from campus.api.graphql.context import get_context
from campus.api.graphql.schema import build_schema
from campus.api.routes import health
from campus.config import Settings, get_settings
from campus.infrastructure.observability import setup_logging
from campus.services.registrar import Registrar, build_registrar
from campus.services.seed import seed_demo_records

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Campus Records API started")
    yield
    app.state.registrar.reset()
    logger.info("Campus Records API shutting down")


def create_app(
    settings: Settings | None = None, registrar: Registrar | None = None,
) -> FastAPI:
    """Build the FastAPI app. A Registrar is wired from settings unless given."""
    settings = settings or get_settings()
    if registrar is None:
        registrar = build_registrar(settings)
        if settings.seed_demo_data:
            seed_demo_records(registrar)

    app = FastAPI(title="Campus Records API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.registrar = registrar

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    graphql_router = GraphQLRouter(
        build_schema(),
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphiql_enabled else None,
    )
    app.include_router(graphql_router, prefix=settings.graphql_path)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve `app` with uvicorn."""
    settings = get_settings()
    uvicorn.run("campus.main:app", host=settings.host, port=settings.port)
