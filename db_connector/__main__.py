# db_connector/__main__.py

import argparse
import logging
import sys
from typing import Dict, List, Optional

from colorfulPyPrint.py_color import print_cyan, print_error, print_warning

from .config import load_database_info
from .database_info import DatabaseInfo
from .mysql_driver import MYSQL_DRIVER_INFO

logger = logging.getLogger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_CONFIG_ERROR = 2


def _parse_option(raw: str) -> Dict[str, Optional[str]]:
    key, sep, value = raw.partition("=")
    if not key:
        raise argparse.ArgumentTypeError(f"Option needs a name: {raw!r}")
    return {key: value if sep else None}


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser for db-connector-uri.

    Returns:
        The configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog="db-connector-uri",
        description="Print the MySQL JDBC URI for a profile and check it against the registered drivers.",
    )
    parser.add_argument("--profile", help="Config profile to use (default: [DEFAULT].active or the first one).")
    parser.add_argument("--host", help="Build the URI from this host instead of a profile.")
    parser.add_argument("--port", type=int, help="Server port (default 3306).")
    parser.add_argument("--database", help="Database name.")
    parser.add_argument("--option", action="append", type=_parse_option, default=[], metavar="KEY[=VALUE]",
                        help="Connection option; repeatable. KEY without '=' is left out of the URI.")
    parser.add_argument("--quiet", action="store_true", help="Only print the URI.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Print the MySQL JDBC URI for a profile (or for --host arguments) and check it
    against the registered drivers.

    Args:
        argv: Command line arguments without the program name. Defaults to sys.argv[1:].

    Returns:
        0 if a registered driver accepts the URI, 1 if none does,
        2 if the arguments or the config profile are unusable.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(stream=sys.stdout, level=logging.DEBUG if args.verbose else logging.WARNING)

    options: Dict[str, Optional[str]] = {}
    for option in args.option:
        options.update(option)

    if args.host is not None:
        if args.profile:
            print_error("Specify only one of --host or --profile, not both.")
            return EXIT_CONFIG_ERROR
        info = DatabaseInfo(args.host, args.port, args.database, options)
    else:
        try:
            info = load_database_info(args.profile)
        except (RuntimeError, ValueError) as e:
            logger.debug("Could not load profile", exc_info=e)
            print_error(str(e))
            return EXIT_CONFIG_ERROR
        if args.port is not None or args.database is not None:
            info = DatabaseInfo(info.uri, args.port if args.port is not None else info.port,
                                args.database if args.database is not None else info.database,
                                info.connection_option)
        info = info.with_options(**options)

    uri = MYSQL_DRIVER_INFO.generate_uri(info)
    valid = MYSQL_DRIVER_INFO.is_valid_uri(uri)

    if args.quiet:
        print(uri)
    else:
        print_cyan(f"{MYSQL_DRIVER_INFO.name} ({MYSQL_DRIVER_INFO.driver_address})")
        print(uri)
        if valid:
            print_cyan("URI accepted by a registered driver.")
        else:
            print_warning("No registered driver accepts this URI.")

    return EXIT_VALID if valid else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
