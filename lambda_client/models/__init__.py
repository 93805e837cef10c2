"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .aws_v1 import APIGatewayProxyEvent, ApiGatewayRequestContext
from .params import ApiGatewayPayloadParams, HttpMethod, RequestBody
from .result import InvocationResult, InvocationType, RetryPolicy

__all__ = [
    "APIGatewayProxyEvent",
    "ApiGatewayRequestContext",
    "ApiGatewayPayloadParams",
    "HttpMethod",
    "RequestBody",
    "InvocationResult",
    "InvocationType",
    "RetryPolicy",
]
