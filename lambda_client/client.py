"""
Lambda Function Client

Invokes a Lambda function through the boto3 Invoke API, either with a raw
payload or wrapped in a synthesized API Gateway proxy event.
"""

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from lambda_client.config import ClientConfig
from lambda_client.core.aws_client import LambdaClientFactory
from lambda_client.core.event_builder import build_api_gateway_event
from lambda_client.core.exceptions import InvalidResponsePayloadError
from lambda_client.core.retry import attempt
from lambda_client.core.utils import camelize_keys, parse_gateway_response, to_json
from lambda_client.models.params import HttpMethod, RequestBody
from lambda_client.models.result import InvocationResult, InvocationType, RetryPolicy


@dataclass(frozen=True)
class LambdaFunctionParams:
    """Construction parameters, supplied once per client lifetime."""

    lambda_name: str
    region: Optional[str] = None
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("lambda_client.function")
    )


def _read_payload(payload: Any) -> bytes:
    if payload is None:
        return b""
    if hasattr(payload, "read"):
        return payload.read()
    return bytes(payload)


class LambdaFunction:
    def __init__(
        self,
        params: LambdaFunctionParams,
        client: Any = None,
        config: Optional[ClientConfig] = None,
    ):
        """
        Args:
            params: function name, region and logger
            client: boto3 `lambda` client (created from config when omitted)
            config: ClientConfig instance (loaded from the environment when omitted)
        """
        self.config = config or ClientConfig()
        self.lambda_name = params.lambda_name
        self.region = params.region or self.config.AWS_REGION
        self.logger = params.logger
        self.client = client or LambdaClientFactory(self.config).create_client(self.region)

    def _send(self, payload: bytes, invocation_type: InvocationType) -> Dict[str, Any]:
        response = self.client.invoke(
            FunctionName=self.lambda_name,
            InvocationType=invocation_type.value,
            LogType="None",
            Payload=payload,
        )
        # StreamingBody is read here so the blocking read stays off the event loop.
        return {**response, "Payload": _read_payload(response.get("Payload"))}

    async def invoke(
        self,
        payload: Any,
        invocation_type: Union[InvocationType, str] = InvocationType.REQUEST_RESPONSE,
    ) -> Any:
        """
        Invoke the function once.

        Args:
            payload: JSON-serializable request payload
            invocation_type: Event (fire-and-forget), RequestResponse or DryRun

        Returns:
            The decoded JSON response, or None for Event/DryRun invocations
            and empty responses

        Raises:
            botocore.exceptions.ClientError / BotoCoreError: transport failure
            InvalidResponsePayloadError: response is not UTF-8 JSON
        """
        invocation_type = InvocationType(invocation_type)
        data = to_json(payload).encode("utf-8")

        response = await asyncio.to_thread(self._send, data, invocation_type)

        # Event invocations return 202 with an empty body; the function may still be running.
        if invocation_type != InvocationType.REQUEST_RESPONSE:
            return None

        function_error = response.get("FunctionError")
        if function_error:
            self.logger.warning(
                f"Lambda function '{self.lambda_name}' reported an error",
                extra={"function_name": self.lambda_name, "function_error": function_error},
            )

        raw = response["Payload"]
        if not raw:
            return None

        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise InvalidResponsePayloadError(self.lambda_name, e) from e

    def _retry_policy(self, retry: Union[RetryPolicy, Mapping[str, Any], None]) -> RetryPolicy:
        if isinstance(retry, RetryPolicy):
            return retry
        policy = self.config.default_retry_policy()
        if retry:
            policy = RetryPolicy(**{**policy.model_dump(), **retry})
        return policy

    async def api_gateway_invoke(
        self,
        method: HttpMethod = "GET",
        resource: Optional[str] = None,
        body: Union[RequestBody, Mapping[str, Any], None] = None,
        headers: Optional[Mapping[str, Any]] = None,
        query_string: Optional[Mapping[str, Any]] = None,
        retry: Union[RetryPolicy, Mapping[str, Any], None] = None,
    ) -> InvocationResult:
        """
        Invoke the function with a synthesized API Gateway proxy event.

        The event is built before any attempt, so an invalid body raises
        InvalidRequestBodyError immediately. Invocation and decode failures
        are retried and end up in the returned result instead of being raised.

        Returns:
            InvocationResult whose content is the camelCased JSON body on
            success, or the last exception seen on failure
        """
        policy = self._retry_policy(retry)
        event = build_api_gateway_event(
            method=method,
            resource=resource,
            body=body,
            headers=headers,
            query_string=query_string,
        )

        async def invoke_once() -> InvocationResult:
            try:
                response = await self.invoke(event, InvocationType.REQUEST_RESPONSE)
                content = parse_gateway_response(response)
            except Exception as e:
                return InvocationResult.err(e)
            return InvocationResult.ok(camelize_keys(content))

        return await attempt(policy, invoke_once, self.logger)
