"""Main CLI entry point for the GraphQL explorer."""

import argparse

from graphql_explorer.cli.commands.query import query_command
from graphql_explorer.cli.commands.schema import (describe_command,
                                                  overview_command)
from graphql_explorer.cli.commands.search import search_command
from graphql_explorer.cli.commands.serve import serve_command
from graphql_explorer.cli.config import Config
from graphql_explorer.utils.logging_config import setup_logging


def _add_common_arguments(parser: argparse.ArgumentParser, verbose_help: str):
    parser.add_argument("--config", help="Path to .env configuration file", default=None)
    parser.add_argument("-v", "--verbose", action="store_true", help=verbose_help)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="graphql-explorer",
        description="GraphQL Explorer - MCP server for exploring large GraphQL schemas",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start MCP server over stdio")
    _add_common_arguments(serve_parser, "Show startup messages (default: silent for MCP compatibility)")

    # Overview command
    overview_parser = subparsers.add_parser("overview", help="List schema types one page at a time")
    overview_parser.add_argument("--page-size", type=int, default=100, help="Types per page (default: 100)")
    overview_parser.add_argument("--page", type=int, default=1, help="Page number (default: 1)")
    _add_common_arguments(overview_parser, "Show detailed processing information")

    # Describe command
    describe_parser = subparsers.add_parser("describe", help="Show the fields and enum values of one type")
    describe_parser.add_argument("type_name", help="Name of the GraphQL type")
    describe_parser.add_argument("--fields-page-size", type=int, default=50, help="Fields per page (default: 50)")
    describe_parser.add_argument("--fields-page", type=int, default=1, help="Fields page number (default: 1)")
    describe_parser.add_argument(
        "--enum-values-page-size", type=int, default=50, help="Enum values per page (default: 50)"
    )
    describe_parser.add_argument(
        "--enum-values-page", type=int, default=1, help="Enum values page number (default: 1)"
    )
    describe_parser.add_argument(
        "--outline", action="store_true", help="Print an SDL-like outline with type signatures instead of JSON"
    )
    _add_common_arguments(describe_parser, "Show detailed processing information")

    # Search command
    search_parser = subparsers.add_parser("search", help="Search the schema for a keyword")
    search_parser.add_argument("keyword", help="Keyword to search for in type, field, argument and enum names")
    search_parser.add_argument(
        "--max-details",
        type=int,
        default=None,
        help="Maximum number of types to inspect field by field (default: SEARCH_MAX_DETAILS_TO_FETCH or 10)",
    )
    search_parser.add_argument(
        "--include-internal", action="store_true", help="Include introspection types starting with __"
    )
    _add_common_arguments(search_parser, "Show detailed processing information")

    # Query command
    query_parser = subparsers.add_parser("query", help="Execute a GraphQL query")
    query_parser.add_argument("query", help="GraphQL query text, or @path to a file containing it")
    query_parser.add_argument("--variables", help="Query variables as a JSON object", default=None)
    query_parser.add_argument("--pagination-path", help="Dotted path to an array to paginate, e.g. data.viewer.zones")
    query_parser.add_argument("--page-size", type=int, default=None, help="Items per page")
    query_parser.add_argument("--page", type=int, default=None, help="Page number")
    _add_common_arguments(query_parser, "Show detailed processing information")

    return parser


def main():
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    verbose = getattr(args, "verbose", False)
    setup_logging(verbose=verbose)

    # Load configuration
    config = Config(args.config)

    # Execute command
    if args.command == "serve":
        serve_command(config, verbose=verbose)
    elif args.command == "overview":
        overview_command(config, page_size=args.page_size, page=args.page, verbose=verbose)
    elif args.command == "describe":
        describe_command(
            config,
            type_name=args.type_name,
            fields_page_size=args.fields_page_size,
            fields_page=args.fields_page,
            enum_values_page_size=args.enum_values_page_size,
            enum_values_page=args.enum_values_page,
            outline=args.outline,
            verbose=verbose,
        )
    elif args.command == "search":
        max_details = args.max_details
        if max_details is None:
            max_details = config.search_max_details_to_fetch
        search_command(
            config,
            keyword=args.keyword,
            max_details_to_fetch=max_details,
            include_internal_types=args.include_internal,
            verbose=verbose,
        )
    elif args.command == "query":
        query_command(
            config,
            query=args.query,
            variables=args.variables,
            pagination_path=args.pagination_path,
            page_size=args.page_size,
            page=args.page,
            verbose=verbose,
        )
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
