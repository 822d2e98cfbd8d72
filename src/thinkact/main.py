"""thinkact entry point."""

import argparse
import asyncio
import sys

from dotenv import find_dotenv, load_dotenv

from .cli import DEFAULT_QUERY, run_cli


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="thinkact",
        description="Resolve a query with a think/act/observe agent.",
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=DEFAULT_QUERY,
        help=f"Query for the agent (default: {DEFAULT_QUERY!r})",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    load_dotenv(find_dotenv(usecwd=True))
    args = _parse_args(argv)

    try:
        status = asyncio.run(run_cli(args.query))
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
        sys.exit(0)

    sys.exit(status)


if __name__ == "__main__":
    main()
