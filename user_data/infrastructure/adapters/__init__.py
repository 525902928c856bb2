from .persistence.dynamodb_user_record_repository import (
    DynamoDBUserRecordRepository,
    create_dynamodb_client,
)

__all__ = ["DynamoDBUserRecordRepository", "create_dynamodb_client"]
