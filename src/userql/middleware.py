"""
Request logging middleware for the GraphQL endpoint
"""

import json
import re
import time
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from graphql import FieldNode, GraphQLError, OperationType, get_operation_ast, parse
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import bind_request_id, clear_request_context, get_logger

logger = get_logger(__name__)

GRAPHQL_PATH = "/graphql"
REQUEST_ID_HEADER = "X-Request-ID"

# Caller-supplied ids are echoed back and logged, so keep them short and plain
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def describe_operation(query: Any, operation_name: Any = None) -> str | None:
    """Name the operation a GraphQL document will run, for log lines.

    Queries are reported by name, other operation types as "<type>:<name>",
    unnamed operations as "anonymous" and schema introspection as
    "__introspection". Returns None when the document does not parse or
    the operation cannot be chosen.
    """
    if not isinstance(query, str) or not query.strip():
        return None
    if not isinstance(operation_name, str) or not operation_name:
        operation_name = None

    try:
        document = parse(query)
    except GraphQLError:
        return None

    operation = get_operation_ast(document, operation_name)
    if operation is None:
        return None

    fields = [node for node in operation.selection_set.selections if isinstance(node, FieldNode)]
    if fields and all(node.name.value.startswith("__") for node in fields):
        return "__introspection"

    name = operation.name.value if operation.name else "anonymous"
    if operation.operation is OperationType.QUERY:
        return name
    return f"{operation.operation.value}:{name}"


async def graphql_operation(request: Request) -> str | None:
    """Describe the operation carried by a GET or POST to the GraphQL endpoint."""
    if request.url.path != GRAPHQL_PATH:
        return None

    if request.method == "GET":
        payload: Any = request.query_params
    elif request.method == "POST":
        try:
            payload = json.loads(await request.body() or b"null")
        except ValueError:
            return None
    else:
        return None

    if not hasattr(payload, "get"):
        return None
    return describe_operation(payload.get("query"), payload.get("operationName"))


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Bind a request id for the request's log events and log each request once it finishes."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        supplied = request.headers.get(REQUEST_ID_HEADER)
        request_id = bind_request_id(
            supplied if supplied and _VALID_REQUEST_ID.match(supplied) else None
        )
        operation = await graphql_operation(request)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                graphql_operation=operation,
                error=str(e),
            )
            raise
        else:
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                "Request handled",
                method=request.method,
                path=request.url.path,
                graphql_operation=operation,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            clear_request_context()
