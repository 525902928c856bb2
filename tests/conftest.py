import pytest

from user_data.domain.entities import UserRecord


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Keep botocore away from real credentials and regions."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("AWS_ENDPOINT_URL", raising=False)


@pytest.fixture
def string_item() -> dict:
    return {"a": {"S": "1"}, "b": {"S": "2"}}


@pytest.fixture
def mixed_item() -> dict:
    return {
        "userId": {"S": "u1"},
        "age": {"N": "30"},
        "name": {"S": "Alice"},
    }


@pytest.fixture
def mixed_record(mixed_item) -> UserRecord:
    return UserRecord.from_item("u1", mixed_item)


def make_event(query: dict | None, request_id: str | None = "req-123") -> dict:
    """API Gateway REST proxy event for a GET with the given query string."""
    event = {
        "resource": "/user",
        "path": "/user",
        "httpMethod": "GET",
        "headers": {"Accept": "application/json"},
        "queryStringParameters": query,
        "body": None,
        "isBase64Encoded": False,
    }
    if request_id:
        event["requestContext"] = {"requestId": request_id, "stage": "prod"}
    return event


@pytest.fixture
def event_factory():
    return make_event
