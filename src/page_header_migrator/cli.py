"""Command-line interface for page-header-migrator."""

import argparse
import json
import logging
import sys
from pathlib import Path, PurePosixPath

from page_header_migrator.clients import SiteClient
from page_header_migrator.mapping import MappingCache, load_mappings
from page_header_migrator.transformers import HeaderTransformer
from schemas.legacy_page import LegacyPage
from schemas.page_header import ModernPage

DEFAULT_OUTPUT_DIR = Path("./workspace/headers")
USER_AGENT = "page-header-migrator/1.0"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def _site_config(
    base_url: str,
    site_url: str | None,
    access_token: str | None,
    server_relative_url: str | None = None,
) -> dict:
    headers = {"User-Agent": USER_AGENT}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"

    config: dict = {"base_url": base_url, "headers": headers}
    if site_url:
        config["site_url"] = site_url
    if server_relative_url:
        config["server_relative_url"] = server_relative_url
    return config


def transform_header(args: argparse.Namespace) -> int:
    """Execute the transform-header command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    page_path = args.page.resolve()
    if not page_path.exists():
        logger.error(f"Page file not found: {page_path}")
        return 1

    try:
        page = LegacyPage.model_validate_json(page_path.read_text())
        mappings = load_mappings(args.mapping.resolve())
    except Exception as e:
        logger.error(f"Failed to load input: {e}")
        return 1

    source_url = args.source_url or page.web_url
    if not source_url:
        logger.error("Source web URL unknown: pass --source-url or set web_url in the page file")
        return 1

    source_config = _site_config(
        source_url,
        args.site_url or page.site_url,
        args.access_token,
        # The page's own web path is only valid for the web it was read from
        page.web_server_relative_url if args.source_url is None else None,
    )
    target_config = _site_config(args.target_url, None, args.access_token)

    page_name = PurePosixPath(page.file_leaf_ref).name or page_path.stem
    target_page = ModernPage(name=page_name, title=args.title or "")

    try:
        with SiteClient(source_config) as source, SiteClient(target_config) as target:
            transformer = HeaderTransformer(
                page, source, target, mappings, MappingCache()
            )
            state = transformer.transform_header(target_page)

        output_dir = args.output
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path = output_dir / f"{PurePosixPath(page_name).stem}.header.json"
        output_path.write_text(
            json.dumps(target_page.page_header.to_header_json(target_page.title), indent=2)
        )

        logger.info(f"Transformed header of {page_name}")
        logger.info(f"  State: {state.value}")
        logger.info(f"  Header: {target_page.page_header.type.value}")
        logger.info(f"  Output: {output_path}")

        return 0

    except Exception as e:
        logger.error(f"Failed to transform header: {e}")
        return 1


def list_mappings(args: argparse.Namespace) -> int:
    """Execute the list-mappings command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        mappings = load_mappings(args.mapping.resolve())
    except Exception as e:
        logger.error(f"Failed to load mapping file: {e}")
        return 1

    for mapping in mappings:
        fields = ", ".join(
            f"{f.header_property.value}={f.name}" for f in mapping.header.fields
        )
        logger.info(f"{mapping.name}: {mapping.page_header.value} [{fields}]")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="page-header-migrator",
        description="Migrate publishing page headers to modern page headers",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    transform_parser = subparsers.add_parser(
        "transform-header",
        help="Transform the header of one legacy page",
        description="Resolve the page layout mapping of a legacy publishing page, copy its header image to the target site and write the resulting modern page header.",
    )
    transform_parser.add_argument(
        "--page",
        type=Path,
        required=True,
        help="Path to the legacy page JSON (site_url, web_url, field_values)",
    )
    transform_parser.add_argument(
        "--mapping",
        type=Path,
        required=True,
        help="Path to the page layout mapping file (.xml or .json)",
    )
    transform_parser.add_argument(
        "--target-url",
        type=str,
        required=True,
        help="URL of the web receiving the modern page",
    )
    transform_parser.add_argument(
        "--source-url",
        type=str,
        default=None,
        help="URL of the web holding the legacy page (default: web_url from the page file)",
    )
    transform_parser.add_argument(
        "--site-url",
        type=str,
        default=None,
        help="URL of the source site collection (default: site_url from the page file)",
    )
    transform_parser.add_argument(
        "--access-token",
        type=str,
        default=None,
        help="Bearer token sent to source and target sites",
    )
    transform_parser.add_argument(
        "--title",
        type=str,
        default=None,
        help="Title of the modern page",
    )
    transform_parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory for header JSON (default: {DEFAULT_OUTPUT_DIR})",
    )
    transform_parser.set_defaults(func=transform_header)

    list_parser = subparsers.add_parser(
        "list-mappings",
        help="List the page layouts of a mapping file",
        description="Load a page layout mapping file and list each layout with its header mode and fields.",
    )
    list_parser.add_argument(
        "--mapping",
        type=Path,
        required=True,
        help="Path to the page layout mapping file (.xml or .json)",
    )
    list_parser.set_defaults(func=list_mappings)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
