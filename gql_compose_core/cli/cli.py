import argparse
import logging
import sys
from graphql import GraphQLError
from gql_compose_core.lib.loader import load_sources
from gql_compose_core.lib.merge import MergeOptions, merge_definitions
from gql_compose_core.lib.parser import extract_definitions
from gql_compose_core.lib.validate import validate_merged_schema


def write_to_file(sdl, filename):
    """Write merged SDL to a file."""
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(sdl)
        if not sdl.endswith("\n"):
            f.write("\n")


def preview_definitions(result, title="Merged schema"):
    """Log the merged and pass-through type names, truncating long lists."""
    logging.info(f"{title}:")
    logging.info("=" * 50)

    merged = result.merged.definitions().names()
    rest = result.rest.names()
    logging.info(f"Merged types: {', '.join(merged) if merged else '(none)'}")

    # Show first 5 and last 5 names if there are more than 10
    if len(rest) <= 10:
        for i, name in enumerate(rest, 1):
            logging.info(f"{i}. {name}")
    else:
        for i, name in enumerate(rest[:5], 1):
            logging.info(f"{i}. {name}")
        logging.info(f"... ({len(rest) - 10} more definitions) ...")
        for i, name in enumerate(rest[-5:], len(rest) - 4):
            logging.info(f"{i}. {name}")
    logging.info("=" * 50)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="gql-compose: merge GraphQL SDL documents into one schema"
    )
    parser.add_argument(
        "sources",
        nargs="+",
        help="Schema sources (.graphql/.gql/.graphqls file, directory, or raw SDL)"
    )
    parser.add_argument(
        "--all",
        action="store_true",
        dest="merge_all",
        help="Merge every object type sharing a name, not only Query/Mutation/Subscription"
    )
    parser.add_argument(
        "--dedupe",
        action="store_true",
        help="Drop fields repeated with an identical signature inside merged types"
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Build the merged schema and fail on conflicting field definitions"
    )
    parser.add_argument(
        "-o", "--output",
        help="Write merged SDL to this file instead of stdout"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v for INFO, -vv for DEBUG)"
    )

    args = parser.parse_args(argv)

    # Set log level based on verbosity count
    if args.verbose == 0:
        log_level = logging.WARNING
    elif args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG

    # Configure logging
    logging.basicConfig(
        level=log_level,
        format='%(levelname)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    options = MergeOptions(merge_all=args.merge_all, dedupe=args.dedupe)

    try:
        definitions = extract_definitions(load_sources(args.sources))
        result = merge_definitions(definitions, options)
        sdl = result.to_sdl()
        if args.validate:
            validate_merged_schema(sdl)
    except (GraphQLError, ValueError, OSError) as e:
        logging.error(str(e))
        return 1

    preview_definitions(result)

    if args.output:
        try:
            write_to_file(sdl, args.output)
        except OSError as e:
            logging.error(str(e))
            return 1
        print(f"Merged schema written to: {args.output}", file=sys.stderr)
    else:
        print(sdl)
    return 0


if __name__ == "__main__":
    sys.exit(main())
