"""
CLI entry point for the Users API.

Usage:
    # Run the API server with settings from the environment / .env
    python -m app.cli serve

    # Override bind address and enable auto-reload for development
    python -m app.cli serve --host 127.0.0.1 --port 8080 --reload
"""

import argparse
import logging

from app.core.config import settings

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API under uvicorn.

    uvicorn handles SIGINT/SIGTERM: in-flight requests finish, then the
    lifespan shutdown hook runs.
    """
    import uvicorn

    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=args.shutdown_timeout,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Users API CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API server")
    serve_parser.add_argument("--host", default=settings.host, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=settings.port, help="Bind port")
    serve_parser.add_argument(
        "--reload", action="store_true", help="Reload on code changes (development only)"
    )
    serve_parser.add_argument(
        "--shutdown-timeout",
        type=int,
        default=10,
        help="Seconds to wait for in-flight requests on shutdown",
    )
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
