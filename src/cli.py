"""
CLI for compiling filters from JSON.

Reads a filter document from a file (or stdin with "-") and prints the
compiled query DSL as JSON.
"""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from src.es_query import (
    Filter,
    FilterContractError,
    build_query_from_filters,
    handle_or_filter,
    parse_filter_entry,
)

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)


def _read_json(path: str):
    if path == "-":
        return json.load(sys.stdin)
    with open(path) as f:
        return json.load(f)


def cmd_compile(args) -> int:
    """Compile an OR filter document."""
    filter = Filter.model_validate(_read_json(args.file))
    compiled = handle_or_filter(filter)
    output = compiled.to_dict() if args.full else compiled.query
    print(json.dumps(output, indent=args.indent))
    return 0


def cmd_query(args) -> int:
    """Build one bool query from a list of filter entries."""
    data = _read_json(args.file)
    if not isinstance(data, list):
        raise FilterContractError("Expected a JSON list of filters and filter groups")
    entries = [parse_filter_entry(entry) for entry in data]
    print(json.dumps({"bool": build_query_from_filters(entries)}, indent=args.indent))
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Compile search filters to query DSL")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log compiler details")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # compile
    compile_parser = subparsers.add_parser("compile", help="Compile an OR filter")
    compile_parser.add_argument("file", help="Path to an OR filter JSON file, or - for stdin")
    compile_parser.add_argument(
        "--full", action="store_true", help="Print the whole compiled filter, not just its query"
    )

    # query
    query_parser = subparsers.add_parser("query", help="AND a list of filters into a bool query")
    query_parser.add_argument("file", help="Path to a JSON list of filters, or - for stdin")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger("src.es_query").setLevel(logging.DEBUG)

    commands = {"compile": cmd_compile, "query": cmd_query}
    if args.command not in commands:
        parser.print_help()
        return 1

    try:
        return commands[args.command](args)
    except (FilterContractError, ValidationError, json.JSONDecodeError) as e:
        logger.error(f"Failed to compile filters: {e}")
        return 2
    except OSError as e:
        logger.error(f"Could not read {args.file}: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
