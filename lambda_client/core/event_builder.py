import base64
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from lambda_client.core.exceptions import InvalidRequestBodyError
from lambda_client.core.utils import to_json, to_string_hash
from lambda_client.models.aws_v1 import (
    PROXY_RESOURCE,
    APIGatewayProxyEvent,
    ApiGatewayRequestContext,
)
from lambda_client.models.params import ApiGatewayPayloadParams, RequestBody

logger = logging.getLogger("lambda_client.event_builder")

DEFAULT_HEADERS = {"Content-Type": "application/json"}

BINARY_TYPES = (bytes, bytearray, memoryview)


class EventBuilder(ABC):
    @abstractmethod
    def build(self, params: ApiGatewayPayloadParams) -> Dict[str, Any]:
        """
        Build an event dictionary from request parameters.
        """
        pass


def normalize_path(resource: Optional[str]) -> str:
    """Return the request path, always starting with '/'."""
    if resource is None:
        return "/"
    if resource.startswith("/"):
        return resource
    return "/" + resource


def encode_body(body: Optional[RequestBody]) -> Tuple[Optional[str], bool]:
    """
    Encode a request body into (body string, isBase64Encoded).

    Raises:
        InvalidRequestBodyError: binary flag set on non-bytes content, or
            non-binary content that cannot be JSON encoded
    """
    is_base64 = body.is_binary if body is not None else False
    content = body.content if body is not None else None

    if is_base64 and not isinstance(content, BINARY_TYPES):
        raise InvalidRequestBodyError("body.content must be bytes when body.is_binary is true")

    if content is None:
        return None, is_base64

    if is_base64:
        return base64.b64encode(bytes(content)).decode("ascii"), True

    try:
        return to_json(content), False
    except (TypeError, ValueError) as e:
        raise InvalidRequestBodyError(f"body.content is not JSON serializable: {e}") from e


def merge_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Apply caller headers on top of the defaults; header names are case-insensitive."""
    overridden = {name.lower() for name in headers}
    merged = {k: v for k, v in DEFAULT_HEADERS.items() if k.lower() not in overridden}
    merged.update(headers)
    return merged


def _multi_value(values: Dict[str, str]) -> Dict[str, List[str]]:
    return {k: [v] for k, v in values.items()}


class V1ProxyEventBuilder(EventBuilder):
    """API Gateway V1 (REST API) compatible event builder for a `/{proxy+}` resource."""

    def build(self, params: ApiGatewayPayloadParams) -> Dict[str, Any]:
        """
        Build an API Gateway Lambda Proxy Integration-compatible event object.
        """
        http_method = params.method or "GET"
        path = normalize_path(params.resource)
        body, is_base64 = encode_body(params.body)

        headers = merge_headers(to_string_hash(params.headers))
        query_params = to_string_hash(params.query_string)

        event_model = APIGatewayProxyEvent(
            path=path,
            httpMethod=http_method,
            body=body,
            isBase64Encoded=is_base64,
            headers=headers,
            multiValueHeaders=_multi_value(headers),
            queryStringParameters=query_params,
            multiValueQueryStringParameters=_multi_value(query_params),
            resource=PROXY_RESOURCE,
            pathParameters={"proxy": path},
            stageVariables={},
            requestContext=ApiGatewayRequestContext(
                httpMethod=http_method,
                resourcePath=PROXY_RESOURCE,
                protocol="HTTP/1.1",
            ),
        )

        logger.debug(
            "Built proxy event",
            extra={"http_method": http_method, "path": path, "is_base64": is_base64},
        )
        return event_model.model_dump()


def build_api_gateway_event(
    params: Optional[ApiGatewayPayloadParams] = None, **kwargs: Any
) -> Dict[str, Any]:
    """
    Convenience wrapper around V1ProxyEventBuilder.

    Accepts either an ApiGatewayPayloadParams instance or its fields as
    keyword arguments. Keyword arguments set to None fall back to defaults.
    """
    if params is None:
        params = ApiGatewayPayloadParams(**{k: v for k, v in kwargs.items() if v is not None})
    return V1ProxyEventBuilder().build(params)
