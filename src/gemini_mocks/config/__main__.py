"""Print the effective configuration with its origins.

Usage:
    python -m gemini_mocks.config
    python -m gemini_mocks.config --env-file .env
"""

import argparse
import sys

from gemini_mocks.exceptions import ConfigurationError

from .resolver import resolve_config

# ruff: noqa: T201


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m gemini_mocks.config",
        description="Show the resolved gemini_mocks configuration.",
    )
    parser.add_argument("--env-file", help="Load this .env file first")
    args = parser.parse_args(argv)

    try:
        config = resolve_config(env_file=args.env_file)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(config.audit())
    return 0


if __name__ == "__main__":
    sys.exit(main())
