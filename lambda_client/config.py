"""
Lambda client configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lambda_client.models.result import RetryPolicy


class ClientConfig(BaseSettings):
    """
    Configuration management for the Lambda client.
    """

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    LOG_CONFIG_PATH: str = Field(
        default="config/lambda_client_log.yaml", description="Logging YAML config path"
    )

    # AWS transport
    AWS_REGION: str = Field(default="us-east-1", description="Default region for the client")
    LAMBDA_ENDPOINT_URL: str = Field(
        default="", description="Lambda endpoint override (empty uses the AWS default)"
    )
    LAMBDA_CONNECT_TIMEOUT: float = Field(default=10.0, description="Connect timeout (seconds)")
    LAMBDA_READ_TIMEOUT: float = Field(default=300.0, description="Read timeout (seconds)")
    VERIFY_SSL: bool = Field(default=True, description="Whether to verify SSL certificates")

    # Retry defaults for gateway-style invocations
    RETRY_ATTEMPTS: int = Field(default=5, ge=1, description="Maximum number of attempts")
    RETRY_DELAY: float = Field(default=4.0, ge=0, description="Initial retry delay (seconds)")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    def default_retry_policy(self) -> RetryPolicy:
        return RetryPolicy(attempts=self.RETRY_ATTEMPTS, delay=self.RETRY_DELAY)
