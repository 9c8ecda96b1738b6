#!/usr/bin/env python
"""CLI for the NewsData client."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator

from newsdata import NewsDataClient, NewsDataError, SourcesQuery
from newsdata.config import create_from_config, load_config, resolve_config_path
from newsdata.config.models import NewsDataConfig

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    query: str = ""
    config: Path
    endpoint: str | None = None
    max_results: int | None = None
    languages: list[str] = []
    countries: list[str] = []
    categories: list[str] = []
    log: bool = False
    log_dir: str = "logs"

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


async def list_sources(client: NewsDataClient, args: CLIArgs) -> None:
    query = SourcesQuery(
        language=args.languages[0] if args.languages else "",
        country=args.countries[0] if args.countries else "",
        category=args.categories[0] if args.categories else "",
    )
    sources = await client.sources.get(query)

    print(f"\nFound {len(sources)} sources:\n")
    for i, source in enumerate(sources, 1):
        logger.info(f"{i}. {source.name} ({source.id})")
        logger.info(f"   URL: {source.url}")


async def run(args: CLIArgs, config: NewsDataConfig) -> None:
    """Execute one retrieval with the given configuration.

    Args:
        args: Validated CLI arguments.
        config: Loaded configuration.
    """
    client, session_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )
    endpoint = args.endpoint or config.retrieval.endpoint
    max_results = (
        args.max_results if args.max_results is not None else config.retrieval.max_results
    )

    if endpoint == "sources":
        await list_sources(client, args)
        return

    service = client.service(endpoint)
    query = service.query_type(
        query=args.query,
        languages=args.languages,
        countries=args.countries,
        categories=args.categories,
        size=config.retrieval.size,
    )

    logger.info(f"Searching {service.endpoint.label} for: {args.query or '(any)'}")
    count = 0
    async for article in service.stream(query, max_results):
        count += 1
        logger.info(f"{count}. {article.title}")
        logger.info(f"   Source: {article.source_name or article.source_id}")
        logger.info(f"   URL: {article.link}")
        if article.pub_date:
            logger.info(f"   Published: {article.pub_date.isoformat(sep=' ')}")

    print(f"\nRetrieved {count} articles")

    if session_logger and session_logger.last_log_path:
        logger.info(f"\nSession log written to: {session_logger.last_log_path}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Search news articles on NewsData.io.")
    parser.add_argument(
        "query",
        nargs="?",
        default="",
        help="Keywords to search for (optional)",
    )
    parser.add_argument(
        "--endpoint",
        "-e",
        choices=["latest", "archive", "crypto", "sources"],
        default=None,
        help="Endpoint to query (default: from config)",
    )
    parser.add_argument(
        "--max",
        "-n",
        type=int,
        default=None,
        dest="max_results",
        help="Maximum number of articles, 0 for all (default: from config)",
    )
    parser.add_argument("--language", action="append", default=[], help="Language code")
    parser.add_argument("--country", action="append", default=[], help="Country code")
    parser.add_argument("--category", action="append", default=[], help="Category")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: $NEWSDATA_CONFIG or configs/default.yaml)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON session log for the retrieval",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    ns = parser.parse_args()
    config_path = resolve_config_path(ns.config)

    try:
        args = CLIArgs(
            query=ns.query,
            config=config_path,
            endpoint=ns.endpoint,
            max_results=ns.max_results,
            languages=ns.language,
            countries=ns.country,
            categories=ns.category,
            log=ns.log,
            log_dir=ns.log_dir,
        )
        config = load_config(args.config)
    except Exception as e:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
        logger.error(str(e))
        sys.exit(1)

    logging.basicConfig(level=config.logging.level, format="%(message)s")

    try:
        asyncio.run(run(args, config))
    except (NewsDataError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
