"""
Disaster SMS CLI - query a running webhook or start the server.

Usage:
    disaster-sms query "road closures near downtown"           # POST to localhost:3000
    disaster-sms query "is the shelter open" --dry-run         # No real SMS sent
    disaster-sms query "water" --host http://10.0.0.5:3000
    disaster-sms serve                                         # Run the webhook server
    disaster-sms serve --port 8080
"""

import argparse
import sys

import httpx

from disaster_sms.config import get_settings


def cmd_query(args) -> int:
    """POST a query to the webhook and print the response text."""
    settings = get_settings()
    url = f"{args.host.rstrip('/')}/{settings.webhook_secret}"
    headers = {"Dry-Run": "true"} if args.dry_run else {}

    try:
        response = httpx.post(
            url, json={"query": args.query}, headers=headers,
            timeout=args.timeout,
        )
    except httpx.HTTPError as e:
        print(f"Request failed: {e}", file=sys.stderr)
        return 1

    print(response.text)
    return 0 if response.is_success else 1


def cmd_serve(args) -> int:
    """Run the webhook server with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "disaster_sms.main:app",
        host=args.host,
        port=args.port or settings.port,
        log_config=None,
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="disaster-sms",
        description="Disaster SMS agent - webhook server and query tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    query_parser = subparsers.add_parser(
        "query", help="Send a query to a running webhook",
    )
    query_parser.add_argument("query", help="Question to answer by SMS")
    query_parser.add_argument(
        "--host", default="http://localhost:3000",
        help="Webhook base URL (default: http://localhost:3000)",
    )
    query_parser.add_argument(
        "--dry-run", action="store_true",
        help="Log SMS instead of sending them",
    )
    query_parser.add_argument(
        "--timeout", type=float, default=300.0,
        help="Seconds to wait for the agent (default: 300)",
    )
    query_parser.set_defaults(func=cmd_query)

    serve_parser = subparsers.add_parser("serve", help="Run the webhook server")
    serve_parser.add_argument("--host", default="0.0.0.0")  # nosec B104
    serve_parser.add_argument("--port", type=int, default=None)
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
