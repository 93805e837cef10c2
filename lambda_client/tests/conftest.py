import io
import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from lambda_client.config import ClientConfig


@pytest.fixture
def client_config():
    return ClientConfig(_env_file=None, AWS_REGION="ap-northeast-1")


def _lambda_response(payload=None, status_code=200, function_error=None):
    """Build a boto3 Invoke response; dict/list payloads are JSON-encoded."""
    if isinstance(payload, (dict, list)):
        payload = json.dumps(payload).encode("utf-8")
    response = {
        "StatusCode": status_code,
        "Payload": io.BytesIO(payload if payload is not None else b""),
    }
    if function_error:
        response["FunctionError"] = function_error
    return response


@pytest.fixture
def mock_lambda_client():
    client = MagicMock()
    client.invoke.return_value = _lambda_response()
    return client


@pytest.fixture
def mock_sleep():
    with patch("lambda_client.core.retry.asyncio.sleep", new_callable=AsyncMock) as sleep:
        yield sleep


@pytest.fixture
def lambda_response():
    return _lambda_response
