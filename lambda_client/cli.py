#!/usr/bin/env python3
import argparse
import asyncio
import json
import logging
import sys
from typing import Dict, List, Optional

from lambda_client.client import LambdaFunction, LambdaFunctionParams
from lambda_client.config import ClientConfig
from lambda_client.core.logging_config import setup_logging
from lambda_client.models.params import RequestBody
from lambda_client.models.result import InvocationType, RetryPolicy

logger = logging.getLogger("lambda_client.cli")


def _parse_pairs(pairs: Optional[List[str]], option: str) -> Dict[str, str]:
    result: Dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"{option} expects KEY=VALUE, got '{pair}'")
        result[key] = value
    return result


def _parse_json(text: Optional[str], option: str):
    if text is None:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"{option} is not valid JSON: {e}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lambda-client",
        description="Invoke AWS Lambda functions directly or through a synthetic API Gateway event",
    )
    parser.add_argument("--region", "-r", type=str, help="AWS region (default: AWS_REGION)")
    parser.add_argument("--log-level", type=str, help="Log level (default: LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to execute")

    # --- invoke command ---
    invoke_parser = subparsers.add_parser("invoke", help="Invoke a function with a raw payload")
    invoke_parser.add_argument("function", help="Function name or ARN")
    invoke_parser.add_argument("--payload", "-p", default="{}", help="JSON payload")
    invoke_parser.add_argument(
        "--event", action="store_true", help="Fire-and-forget (Event) invocation"
    )

    # --- http command ---
    http_parser = subparsers.add_parser(
        "http", help="Invoke a function with a synthesized API Gateway proxy event"
    )
    http_parser.add_argument("function", help="Function name or ARN")
    http_parser.add_argument("--method", "-X", default="GET", type=str.upper, help="HTTP method")
    http_parser.add_argument("--path", default=None, help="Resource path (default: /)")
    http_parser.add_argument(
        "--header", "-H", action="append", help="Request header KEY=VALUE (repeatable)"
    )
    http_parser.add_argument(
        "--query", "-q", action="append", help="Query parameter KEY=VALUE (repeatable)"
    )
    http_parser.add_argument("--data", "-d", default=None, help="JSON request body")
    http_parser.add_argument("--attempts", type=int, default=None, help="Maximum attempts")
    http_parser.add_argument("--delay", type=float, default=None, help="Initial retry delay")

    return parser


async def _run(args: argparse.Namespace, config: ClientConfig) -> int:
    function = LambdaFunction(
        LambdaFunctionParams(lambda_name=args.function, region=args.region), config=config
    )

    if args.command == "invoke":
        payload = _parse_json(args.payload, "--payload")
        invocation_type = InvocationType.EVENT if args.event else InvocationType.REQUEST_RESPONSE
        content = await function.invoke(payload, invocation_type)
        print(json.dumps(content, ensure_ascii=False, indent=2))
        return 0

    retry = config.default_retry_policy()
    retry = RetryPolicy(
        attempts=args.attempts if args.attempts is not None else retry.attempts,
        delay=args.delay if args.delay is not None else retry.delay,
    )
    data = _parse_json(args.data, "--data")
    result = await function.api_gateway_invoke(
        method=args.method,
        resource=args.path,
        body=RequestBody(content=data) if data is not None else None,
        headers=_parse_pairs(args.header, "--header"),
        query_string=_parse_pairs(args.query, "--query"),
        retry=retry,
    )

    if result.has_error:
        logger.error(f"Invocation failed: {result.content}")
        print(json.dumps({"error": str(result.content)}, ensure_ascii=False), file=sys.stderr)
        return 1

    print(json.dumps(result.content, ensure_ascii=False, indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = ClientConfig()
    setup_logging(config.LOG_CONFIG_PATH, level=args.log_level or config.LOG_LEVEL)

    try:
        return asyncio.run(_run(args, config))
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))


if __name__ == "__main__":
    sys.exit(main())
