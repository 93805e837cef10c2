import logging
from typing import Any, Optional

import boto3
from botocore.config import Config

from lambda_client.config import ClientConfig

logger = logging.getLogger(__name__)


class LambdaClientFactory:
    """
    boto3 Lambda client factory for centralized transport settings.
    """

    def __init__(self, config: ClientConfig):
        self.config = config

    def create_client(self, region: Optional[str] = None, **kwargs) -> Any:
        """
        Create a boto3 `lambda` client with configured timeouts and endpoint.

        Args:
            region: region name (defaults to config AWS_REGION)
            **kwargs: Additional arguments for boto3.client
        """
        region_name = region or self.config.AWS_REGION

        # botocore retries are disabled; retrying belongs to RetryPolicy.
        if "config" not in kwargs:
            kwargs["config"] = Config(
                connect_timeout=self.config.LAMBDA_CONNECT_TIMEOUT,
                read_timeout=self.config.LAMBDA_READ_TIMEOUT,
                retries={"max_attempts": 0},
            )
        if self.config.LAMBDA_ENDPOINT_URL:
            kwargs.setdefault("endpoint_url", self.config.LAMBDA_ENDPOINT_URL)
        kwargs.setdefault("verify", self.config.VERIFY_SSL)

        logger.debug(
            "Creating Lambda client",
            extra={"region": region_name, "endpoint_url": kwargs.get("endpoint_url", "")},
        )
        return boto3.client("lambda", region_name=region_name, **kwargs)
