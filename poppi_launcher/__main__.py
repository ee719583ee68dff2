"""Entry point for the poppi command."""

import sys

from .cli import cli


def main() -> None:
    """Run the command line interface."""
    cli(prog_name="poppi")


if __name__ == "__main__":
    sys.exit(main())
