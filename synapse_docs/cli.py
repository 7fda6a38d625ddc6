"""
Command line entry point for the documentation site.

Usage:
  synapse-docs serve [--host HOST] [--port PORT]
  synapse-docs build [--out DIR]
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from synapse_docs.core.config import Settings, get_settings
from synapse_docs.core.logging_config import setup_logging
from synapse_docs.domains.documentation.services import DocumentationService
from synapse_docs.main import create_app
from synapse_docs.static_site import StaticSiteGenerator

logger = logging.getLogger("synapse_docs")


async def serve(settings: Settings) -> None:
    """Запуск сервера документации до получения сигнала остановки"""
    service = DocumentationService(settings)
    await service.start(create_app(service))
    dispatcher = service.dispatcher
    logger.info("Search: http://%s:%s/api/search?q=your-query", dispatcher.host, dispatcher.port)
    await dispatcher.wait_closed()
    logger.info("Documentation server shut down")


async def build(settings: Settings, output_dir: Path) -> int:
    """Генерация статической версии сайта"""
    service = DocumentationService(settings)
    await service.initialize()
    return len(StaticSiteGenerator(service, output_dir).generate())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="synapse-docs", description="Synapse documentation site")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Serve the documentation site")
    serve_parser.add_argument("--host", help="Interface to bind")
    serve_parser.add_argument("--port", type=int, help="Port to listen on")

    build_parser_ = subparsers.add_parser("build", help="Pre-render the site to static files")
    build_parser_.add_argument("--out", type=Path, help="Output directory")

    parser.add_argument("--log-level", help="Logging level, e.g. DEBUG")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.command == "serve":
        if args.host:
            overrides["host"] = args.host
        if args.port:
            overrides["port"] = args.port
    if overrides:
        settings = settings.model_copy(update=overrides)

    setup_logging(settings.log_level, json_format=settings.log_json)

    if args.command == "serve":
        try:
            asyncio.run(serve(settings))
        except RuntimeError as exc:
            logger.error("Failed to start documentation server: %s", exc)
            return 1
        return 0

    output_dir = args.out or Path(settings.output_dir)
    count = asyncio.run(build(settings, output_dir))
    logger.info("Static documentation generated: %d files in %s", count, output_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
