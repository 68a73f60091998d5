"""Command-line interface for content-delivery."""

import argparse
import logging
import sys

from content_delivery.clients import EXPAND_ALL, DeliveryClient
from content_delivery.query import SearchQueryBuilder
from content_delivery.renditions import RenditionCriteria

DEFAULT_TIMEOUT = 30
DEFAULT_SEARCH_LIMIT = 20


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def build_config(args: argparse.Namespace) -> dict:
    config = {
        "base_url": args.base_url,
        "timeout": args.timeout,
        "headers": {"User-Agent": "content-delivery-sdk/0.1"},
    }
    if args.channel_token:
        config["channel_token"] = args.channel_token
    return config


def show_item(args: argparse.Namespace) -> int:
    """Execute the item command.

    Logs the item summary and every field with its guessed type.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    expand = EXPAND_ALL if args.expand_all else None

    try:
        with DeliveryClient(build_config(args)) as client:
            if args.slug:
                item = client.get_item_by_slug(args.id, expand=expand)
            else:
                item = client.get_item(args.id, expand=expand)
    except Exception as e:
        logger.error(f"Failed to fetch item: {e}")
        return 1

    logger.info(f"{item.id} ({item.type}): {item.name}")
    if item.is_reference_only():
        logger.info("  Reference only")
    for name, field in item.get_fields_map().items():
        logger.info(f"  {name}: {field}")

    return 0


def search(args: argparse.Namespace) -> int:
    """Execute the search command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    query = args.query
    if query is None and args.type is not None:
        query = SearchQueryBuilder(args.type).build()

    try:
        with DeliveryClient(build_config(args)) as client:
            result = client.search_assets(
                query=query,
                limit=args.limit,
                offset=args.offset,
                total_results=True,
            )
    except Exception as e:
        logger.error(f"Search failed: {e}")
        return 1

    for item in result.items():
        logger.info(f"{item.id}  {item.type}  {item.name}")
    logger.info(
        f"Showing {len(result.items())} of {result.total_results} "
        f"(offset {result.offset}, more: {result.has_more})"
    )

    return 0


def rendition(args: argparse.Namespace) -> int:
    """Execute the rendition command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        with DeliveryClient(build_config(args)) as client:
            asset = client.get_digital_asset(args.id)
    except Exception as e:
        logger.error(f"Failed to fetch digital asset: {e}")
        return 1

    if args.smallest or args.largest:
        if args.smallest:
            criteria = RenditionCriteria.smallest(desired_format=args.format)
        else:
            criteria = RenditionCriteria.largest(desired_format=args.format)
        chosen = asset.get_preferred_rendition(criteria)
        url = chosen.download_url if chosen is not None else None
    else:
        url = asset.get_rendition_url(args.name)

    if url is None:
        logger.error(f"No rendition URL found for {args.id}")
        return 1

    logger.info(url)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="content-delivery",
        description="Read published content from a content delivery API",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        help="Content server URL",
    )
    parser.add_argument(
        "--channel-token",
        type=str,
        default=None,
        help="Publishing channel token",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Request timeout in seconds (default: {DEFAULT_TIMEOUT})",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    item_parser = subparsers.add_parser(
        "item",
        help="Show a content item and its fields",
        description="Fetch a content item or digital asset and list every field with its guessed type.",
    )
    item_parser.add_argument("id", help="Item id (or slug with --slug)")
    item_parser.add_argument(
        "--slug",
        action="store_true",
        help="Look the item up by slug instead of id",
    )
    item_parser.add_argument(
        "--expand-all",
        action="store_true",
        help="Expand all reference fields",
    )
    item_parser.set_defaults(func=show_item)

    search_parser = subparsers.add_parser(
        "search",
        help="Search published items",
        description="Search published items by content type or query expression.",
    )
    search_parser.add_argument(
        "--type",
        type=str,
        help="Content type name to list",
    )
    search_parser.add_argument(
        "--query",
        type=str,
        help="Raw search expression (overrides --type)",
    )
    search_parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_SEARCH_LIMIT,
        help=f"Page size (default: {DEFAULT_SEARCH_LIMIT})",
    )
    search_parser.add_argument(
        "--offset",
        type=int,
        default=0,
        help="Index of the first item",
    )
    search_parser.set_defaults(func=search)

    rendition_parser = subparsers.add_parser(
        "rendition",
        help="Print a download URL for a digital asset",
        description="Print the download URL of a named rendition, or of the smallest or largest rendition.",
    )
    rendition_parser.add_argument("id", help="Digital asset id")
    rendition_parser.add_argument(
        "--name",
        type=str,
        default="native",
        help="Rendition name (default: native)",
    )
    size_group = rendition_parser.add_mutually_exclusive_group()
    size_group.add_argument(
        "--smallest",
        action="store_true",
        help="Pick the smallest rendition",
    )
    size_group.add_argument(
        "--largest",
        action="store_true",
        help="Pick the largest rendition",
    )
    rendition_parser.add_argument(
        "--format",
        type=str,
        default="jpg",
        help="Preferred format for --smallest/--largest (default: jpg)",
    )
    rendition_parser.set_defaults(func=rendition)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if not args.base_url:
        setup_logging(args.verbose)
        logging.getLogger(__name__).error("Must specify --base-url")
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
