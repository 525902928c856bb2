"""
API Gateway proxy integration for the get user data use case.

Maps the use case outcome onto HTTP-style responses:
- 400 when the userId query parameter is missing or empty
- 404 when no record exists
- 500 when the store cannot be read
- 200 with the string attributes of the record
"""

from typing import Any
from uuid import uuid4

import structlog
from pydantic import BaseModel

from ..application.dtos import ErrorResponseDTO
from ..application.ports.inbound import GetUserDataUseCase
from ..application.ports.outbound import UserDataUnavailableError
from ..infrastructure.logging import set_correlation_id

logger = structlog.get_logger()

USER_ID_PARAMETER = "userId"

MISSING_USER_ID = "Missing userId parameter"
USER_NOT_FOUND = "No user data found"
RETRIEVAL_FAILED = "Failed to retrieve user data"

JSON_HEADERS = {"Content-Type": "application/json"}


def respond(status_code: int, body: BaseModel) -> dict[str, Any]:
    """Build an API Gateway proxy response with a JSON body."""
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": body.model_dump_json(),
    }


def _error(status_code: int, message: str) -> dict[str, Any]:
    return respond(status_code, ErrorResponseDTO(message=message))


def _correlation_id(event: dict, context) -> str:
    request_context = event.get("requestContext")
    if isinstance(request_context, dict) and request_context.get("requestId"):
        return str(request_context["requestId"])
    return getattr(context, "aws_request_id", None) or str(uuid4())


class ApiGatewayHandler:
    """Handles API Gateway proxy events for user data lookups."""

    def __init__(self, use_case: GetUserDataUseCase) -> None:
        self._use_case = use_case

    def __call__(self, event: dict, context=None) -> dict[str, Any]:
        structlog.contextvars.clear_contextvars()
        try:
            set_correlation_id(_correlation_id(event, context))
            logger.debug("Request started")
            response = self._handle(event)
        except Exception:
            logger.exception("Unhandled error while retrieving user data")
            response = _error(500, RETRIEVAL_FAILED)
        logger.debug("Request completed", status_code=response["statusCode"])

        return response

    def _handle(self, event: dict) -> dict[str, Any]:
        # API Gateway sends null when the request has no query string
        params = event.get("queryStringParameters") or {}
        user_id = params.get(USER_ID_PARAMETER)
        if not user_id:
            return _error(400, MISSING_USER_ID)

        try:
            user_data = self._use_case.execute(user_id)
        except UserDataUnavailableError:
            return _error(500, RETRIEVAL_FAILED)

        if user_data is None:
            return _error(404, USER_NOT_FOUND)

        return respond(200, user_data)
