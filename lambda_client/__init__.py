"""
Lambda client package.

Direct and API Gateway-style invocation of AWS Lambda functions.
"""

from .client import LambdaFunction, LambdaFunctionParams
from .config import ClientConfig
from .core.exceptions import (
    InvalidRequestBodyError,
    InvalidResponsePayloadError,
    LambdaClientError,
)
from .models import (
    InvocationResult,
    InvocationType,
    RequestBody,
    RetryPolicy,
)

__all__ = [
    "LambdaFunction",
    "LambdaFunctionParams",
    "ClientConfig",
    "InvalidRequestBodyError",
    "InvalidResponsePayloadError",
    "LambdaClientError",
    "InvocationResult",
    "InvocationType",
    "RequestBody",
    "RetryPolicy",
]
