# lambda_client/models/aws_v1.py

"""
Pydantic models for AWS API Gateway v1 (REST API) proxy integration payloads.

Reference: https://docs.aws.amazon.com/apigateway/latest/developerguide/set-up-lambda-proxy-integrations.html#api-gateway-simple-proxy-for-lambda-input-format

The event models describe what a Lambda function behind a `/{proxy+}` resource
receives; responses are read as plain dicts.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

PROXY_RESOURCE = "/{proxy+}"


class ApiGatewayRequestContext(BaseModel):
    """API Gateway Request Context object."""

    httpMethod: str
    resourcePath: str = PROXY_RESOURCE
    protocol: str = "HTTP/1.1"


class APIGatewayProxyEvent(BaseModel):
    """
    AWS API Gateway Proxy Integration (v1) Event Structure

    Use model_dump() to convert to a dict. `body` is kept as null when absent,
    so exclude_none must not be used here.
    """

    path: str
    httpMethod: str
    body: Optional[str] = None
    isBase64Encoded: bool = False
    headers: Dict[str, str]
    multiValueHeaders: Dict[str, List[str]] = Field(default_factory=dict)
    queryStringParameters: Dict[str, str] = Field(default_factory=dict)
    multiValueQueryStringParameters: Dict[str, List[str]] = Field(default_factory=dict)
    resource: str = PROXY_RESOURCE
    pathParameters: Dict[str, str]
    stageVariables: Dict[str, str] = Field(default_factory=dict)
    requestContext: ApiGatewayRequestContext

