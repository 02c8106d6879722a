"""
FastAPI application serving the user GraphQL API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..data import user_store
from ..graphql.schema import create_graphql_router, validate_schema
from ..logging import configure_logging, get_logger
from ..middleware import REQUEST_ID_HEADER, LoggingContextMiddleware

configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "userql API ready",
        users=len(user_store),
        environment=settings.environment,
        graphiql=settings.graphiql,
    )
    yield
    logger.info("userql API stopped")


def create_app() -> FastAPI:
    """Build the application.

    The schema is validated first, so a schema that drifted from
    schema.graphql raises SchemaValidationError here and the server never
    starts.
    """
    validate_schema()

    app = FastAPI(
        title="userql API",
        description="Read-only GraphQL API over a fixed in-memory user directory",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    app.include_router(create_graphql_router())

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        return {"status": "healthy", "version": __version__}

    return app


app = create_app()
