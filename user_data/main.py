"""
AWS Lambda entry point (composition root).

Configuration, the DynamoDB client and the handler are built once per
process at import. Invalid configuration fails the cold start.
"""

import structlog

from .application.services import GetUserDataService
from .config import Settings
from .infrastructure.adapters import DynamoDBUserRecordRepository, create_dynamodb_client
from .infrastructure.logging import configure_logging
from .presentation import ApiGatewayHandler

settings = Settings()

configure_logging(settings.service_name, settings.log_level)

logger = structlog.get_logger()


def create_handler(settings: Settings) -> ApiGatewayHandler:
    """Wire up dependencies for the given settings."""
    client = create_dynamodb_client(settings.region, settings.aws_endpoint_url)
    repository = DynamoDBUserRecordRepository(client, settings.table_name)
    return ApiGatewayHandler(GetUserDataService(repository=repository))


_handler = create_handler(settings)

logger.info("Function initialized", table=settings.table_name, region=settings.region)


def handler(event: dict, context) -> dict:
    """AWS Lambda handler for API Gateway proxy integration."""
    return _handler(event, context)
