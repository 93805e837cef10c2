from botocore.config import Config

from lambda_client.config import ClientConfig
from lambda_client.core.aws_client import LambdaClientFactory


def _capture(monkeypatch):
    captured: dict[str, object] = {}

    def fake_client(service, **kwargs):
        captured["service"] = service
        captured["kwargs"] = kwargs
        return object()

    monkeypatch.setattr("lambda_client.core.aws_client.boto3.client", fake_client)
    return captured


def test_create_client_uses_config_defaults(monkeypatch):
    captured = _capture(monkeypatch)
    config = ClientConfig(_env_file=None, AWS_REGION="us-west-2", LAMBDA_ENDPOINT_URL="")

    LambdaClientFactory(config).create_client()

    assert captured["service"] == "lambda"
    kwargs = captured["kwargs"]
    assert kwargs["region_name"] == "us-west-2"
    assert "endpoint_url" not in kwargs
    assert isinstance(kwargs["config"], Config)
    assert kwargs["config"].retries == {"max_attempts": 0}


def test_create_client_with_endpoint_override(monkeypatch):
    captured = _capture(monkeypatch)
    config = ClientConfig(
        _env_file=None, LAMBDA_ENDPOINT_URL="http://localhost:4566", VERIFY_SSL=False
    )

    LambdaClientFactory(config).create_client("ap-northeast-1")

    kwargs = captured["kwargs"]
    assert kwargs["region_name"] == "ap-northeast-1"
    assert kwargs["endpoint_url"] == "http://localhost:4566"
    assert kwargs["verify"] is False


def test_explicit_config_is_kept(monkeypatch):
    captured = _capture(monkeypatch)
    custom = Config(read_timeout=1)

    LambdaClientFactory(ClientConfig(_env_file=None)).create_client(config=custom)

    assert captured["kwargs"]["config"] is custom
