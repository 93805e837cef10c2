import asyncio
import logging
from typing import Awaitable, Callable, Optional, Union

from lambda_client.models.result import InvocationResult, RetryPolicy

InvokeFunction = Callable[[], Awaitable[InvocationResult]]

default_logger = logging.getLogger("lambda_client.retry")


def format_delay(delay: Union[int, float]) -> str:
    """Render whole-number delays without a trailing '.0'."""
    if float(delay).is_integer():
        return str(int(delay))
    return str(delay)


async def attempt(
    retry: RetryPolicy,
    invoke_function: InvokeFunction,
    logger: Optional[logging.Logger] = None,
) -> InvocationResult:
    """
    Run invoke_function until it succeeds or the attempts are used up.

    The wait between attempts starts at retry.delay seconds and doubles after
    every failed attempt. No wait follows the final attempt. Failures are never
    raised; the last result is returned as-is.

    Args:
        retry: attempts and initial delay
        invoke_function: zero-argument coroutine function returning an InvocationResult
        logger: logger for retry progress (defaults to lambda_client.retry)

    Returns:
        The result of the last attempt made
    """
    log = logger or default_logger
    attempts = retry.attempts
    delay = retry.delay

    result: InvocationResult = InvocationResult.ok(None)

    for i in range(attempts):
        if i > 0:
            log.info(f"retrying attempt ({i}/{attempts - 1})")

        result = await invoke_function()

        # the last attempt is never followed by a wait
        if i == attempts - 1 or not result.has_error:
            break

        log.error(
            "failed to invoke lambda function",
            extra={
                "error_type": type(result.content).__name__,
                "error_detail": str(result.content) if result.content is not None else "",
            },
        )
        log.info(f"trying again in {format_delay(delay)} seconds")

        await asyncio.sleep(delay)

        delay *= 2

    return result
