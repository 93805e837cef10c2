"""
Lambda Client Utility Module
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional

import humps

logger = logging.getLogger("lambda_client.utils")


def stringify_value(value: Any) -> str:
    """Render a header/query value the way it appears on the wire."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_string_hash(values: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """
    Stringify every value and drop entries whose stringified value is empty.

    Args:
        values: header or query string mapping (may be None)

    Returns:
        A new dict of non-empty string values
    """
    result: Dict[str, str] = {}
    for key, value in (values or {}).items():
        text = stringify_value(value)
        if text:
            result[key] = text
    return result


def to_json(value: Any) -> str:
    """Compact JSON encoding, matching what HTTP clients put on the wire."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def camelize_keys(data: Any) -> Any:
    """
    Recursively convert dict keys to camelCase with humps.

    Lists are walked; non-string keys and scalar values are left untouched.
    """
    if isinstance(data, dict):
        return {
            (humps.camelize(key) if isinstance(key, str) else key): camelize_keys(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [camelize_keys(item) for item in data]
    return data


def parse_gateway_response(response: Any) -> Any:
    """
    Extract and decode the JSON body of a proxy integration response.

    Only `body` is read. A missing response or missing body decodes to None,
    a string body is parsed as JSON (json.JSONDecodeError when invalid) and
    any other body value is returned unchanged.
    """
    if not isinstance(response, dict):
        return None

    body = response.get("body")
    if body is None:
        return None

    if not isinstance(body, str):
        logger.debug(
            "Proxy response body is not a string; returning it as-is",
            extra={"body_type": type(body).__name__},
        )
        return body

    return json.loads(body)
