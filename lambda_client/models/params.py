"""
Request parameter models for gateway-style invocations.

Encapsulates everything needed to synthesize an API Gateway proxy event.
"""

from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS", "HEAD"]

# Header and query string values as callers usually hold them.
LegalHttpValue = Union[str, int, float, bool, None]


class RequestBody(BaseModel):
    """
    Request body for a synthesized event.

    content must be bytes when is_binary is True; otherwise any
    JSON-serializable value.
    """

    content: Any = None
    is_binary: bool = False

    model_config = ConfigDict(arbitrary_types_allowed=True)


class ApiGatewayPayloadParams(BaseModel):
    """Parameters describing the HTTP request the function should see."""

    method: HttpMethod = "GET"
    resource: Optional[str] = None
    query_string: Dict[str, LegalHttpValue] = Field(default_factory=dict)
    headers: Dict[str, LegalHttpValue] = Field(default_factory=dict)
    body: Optional[RequestBody] = None
