import boto3
import structlog
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ....application.ports.outbound import UserDataUnavailableError, UserRecordRepository
from ....domain.entities import UserRecord
from ....domain.value_objects import InvalidAttributeValueError
from ...logging import Timer, sanitize_for_logging

logger = structlog.get_logger()

KEY_ATTRIBUTE = "userId"

# Single attempt, the SDK must not retry on our behalf
_CLIENT_CONFIG = Config(retries={"total_max_attempts": 1, "mode": "standard"})


def create_dynamodb_client(region_name: str, endpoint_url: str | None = None):
    """Create the low-level DynamoDB client shared by all invocations."""
    return boto3.client(
        "dynamodb",
        region_name=region_name,
        endpoint_url=endpoint_url,
        config=_CLIENT_CONFIG,
    )


class DynamoDBUserRecordRepository(UserRecordRepository):
    """DynamoDB implementation of UserRecordRepository."""

    def __init__(self, client, table_name: str) -> None:
        self._client = client
        self._table_name = table_name

    def get_by_user_id(self, user_id: str) -> UserRecord | None:
        """Retrieve a user record with a single GetItem call."""
        try:
            with Timer() as t:
                response = self._client.get_item(
                    TableName=self._table_name,
                    Key={KEY_ATTRIBUTE: {"S": user_id}},
                )
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "")
            logger.error(
                "Unable to retrieve data",
                table=self._table_name,
                user_id=sanitize_for_logging(user_id),
                error_code=error_code,
                error=str(e),
            )
            raise UserDataUnavailableError(f"GetItem failed: {error_code}") from e
        except BotoCoreError as e:
            logger.error(
                "Unable to retrieve data",
                table=self._table_name,
                user_id=sanitize_for_logging(user_id),
                error=str(e),
            )
            raise UserDataUnavailableError("GetItem failed") from e

        logger.debug(
            "GetItem completed",
            table=self._table_name,
            found="Item" in response,
            duration_ms=t.duration_ms,
        )

        if "Item" not in response:
            return None

        try:
            return UserRecord.from_item(user_id, response["Item"])
        except InvalidAttributeValueError as e:
            logger.error(
                "Unable to decode stored item",
                table=self._table_name,
                user_id=sanitize_for_logging(user_id),
                error=str(e),
            )
            raise UserDataUnavailableError("Stored item could not be decoded") from e
