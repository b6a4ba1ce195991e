"""Command line entry point.

Usage:
    python -m directus_pages build [--export-path dist]
    python -m directus_pages serve [--host localhost] [--port 8000] [--no-build]
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from directus_pages.clients.directus import DirectusClient
from directus_pages.common.error_codes import StaticBuildError
from directus_pages.config import get_settings
from directus_pages.constants import APP_HOST, APP_PORT, SSG_BUILD_ON_STARTUP, SSG_EXPORT_PATH
from directus_pages.handlers.ssg import SSGPageHandler
from directus_pages.observability.logger_adaptor import get_logger, setup_logging
from directus_pages.server.fastapi import APIServer

logger = get_logger(__name__)


async def build(export_path: str) -> int:
    """Render every build-time page and write it under ``export_path``."""
    client = DirectusClient(get_settings())
    try:
        store = await SSGPageHandler(client).build()
    except StaticBuildError as e:
        logger.error(f"Static build failed: {e}")
        return 1
    store.export(export_path)
    return 0


async def serve(host: str, port: int, build_on_startup: bool, export_path: str) -> int:
    server = APIServer(
        settings=get_settings(),
        build_static_on_startup=build_on_startup,
        ssg_export_path=export_path,
    )
    await server.start(host=host, port=port)
    return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="directus_pages", description="Render Directus pages"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser("build", help="Pre-render the build-time pages")
    build_parser.add_argument("--export-path", default=SSG_EXPORT_PATH)

    serve_parser = subparsers.add_parser("serve", help="Start the web server")
    serve_parser.add_argument("--host", default=APP_HOST)
    serve_parser.add_argument("--port", type=int, default=APP_PORT)
    serve_parser.add_argument("--export-path", default=SSG_EXPORT_PATH)
    serve_parser.add_argument(
        "--no-build",
        dest="build_on_startup",
        action="store_false",
        default=SSG_BUILD_ON_STARTUP,
        help="Serve pages from --export-path instead of building them at start-up",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging()

    if args.command == "build":
        return asyncio.run(build(args.export_path))
    return asyncio.run(
        serve(args.host, args.port, args.build_on_startup, args.export_path)
    )


if __name__ == "__main__":
    sys.exit(main())
