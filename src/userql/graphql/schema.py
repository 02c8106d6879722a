"""
Main GraphQL schema definition using Strawberry
"""

from pathlib import Path
from typing import Any

import strawberry
from fastapi import Request
from graphql import (
    GraphQLSchema,
    build_schema,
    get_introspection_query,
    graphql_sync,
    lexicographic_sort_schema,
)
from graphql import print_schema as gql_print_schema
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..config import settings
from ..logging import get_logger
from .queries.root import Query

logger = get_logger(__name__)

# Checked-in SDL that clients and code generators consume
SCHEMA_SDL_PATH = Path(__file__).with_name("schema.graphql")

# Read-only API: no mutation or subscription roots
schema = strawberry.Schema(query=Query)


class SchemaValidationError(Exception):
    """Raised when the served schema is broken or no longer matches schema.graphql."""


def _core_schema() -> GraphQLSchema:
    # Strawberry has no public accessor for the underlying graphql-core schema
    return schema._schema


def get_schema_sdl() -> str:
    """Return the SDL printed from the Strawberry schema."""
    return schema.as_str()


def schema_matches_contract(sdl_path: Path = SCHEMA_SDL_PATH) -> bool:
    """Check that the Strawberry schema matches the SDL file.

    Both sides are sorted before printing so that declaration order does
    not matter; any difference in types, fields, arguments or nullability
    does.
    """
    contract = build_schema(sdl_path.read_text(encoding="utf-8"))
    expected = gql_print_schema(lexicographic_sort_schema(contract))
    actual = gql_print_schema(lexicographic_sort_schema(_core_schema()))
    return expected == actual


def validate_schema() -> None:
    """Refuse to serve a schema that is invalid or has drifted from schema.graphql.

    Checks run in order and stop at the first one reporting problems:
    graphql-core's structural validation, an introspection query, then
    the SDL contract.

    Raises:
        SchemaValidationError: listing every problem the failing check found
    """
    core_schema = _core_schema()

    problems = [error.message for error in gql_validate_schema(core_schema)]
    if not problems:
        introspection = graphql_sync(core_schema, get_introspection_query())
        problems = [error.message for error in introspection.errors or []]
    if not problems and not schema_matches_contract():
        problems = [f"schema differs from {SCHEMA_SDL_PATH.name}"]

    if problems:
        logger.error("GraphQL schema validation failed", problems=problems)
        raise SchemaValidationError("; ".join(problems))

    logger.info("GraphQL schema validated", contract=SCHEMA_SDL_PATH.name)


def create_graphql_router() -> GraphQLRouter:
    """Create the /graphql router, with the GraphiQL IDE when enabled in settings."""

    async def get_context(request: Request) -> dict[str, Any]:
        return {"request": request}

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )
