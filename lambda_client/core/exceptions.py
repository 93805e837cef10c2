"""
Custom exception classes.

Represent errors related to Lambda invocation.
"""


class LambdaClientError(Exception):
    """Base exception class for the Lambda client."""

    pass


class InvalidRequestBodyError(LambdaClientError, ValueError):
    """
    Raised when a request body cannot be encoded into a proxy event.

    This is a caller error: it is raised before any invocation and is never
    retried or wrapped in an InvocationResult.
    """

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class InvalidResponsePayloadError(LambdaClientError):
    """Raised when a function response cannot be decoded as UTF-8 JSON."""

    def __init__(self, function_name: str, cause: Exception):
        self.function_name = function_name
        self.cause = cause
        super().__init__(f"Invalid response payload from {function_name}: {cause}")
