"""Command-line front door for iconls.

Resolves the theme location, loads the theme, and runs one listing.
Any ``IconlsError`` becomes ``error: <message>`` on stderr with exit status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .config import debug_enabled, resolve_theme_location
from .errors import IconlsError
from .listing import ListingCommand
from .theme import Theme


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise SystemExit(f"error: {message}")


def _build_parser() -> argparse.ArgumentParser:
    # -h means human-readable sizes, so argparse must not claim it.
    parser = _ArgumentParser(prog="iconls", add_help=False, allow_abbrev=False)
    parser.add_argument("--theme", default=None, help="Theme directory containing theme.json.")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments and list the requested location.

    ``--theme PATH`` is the only long option; every other argument is passed
    through to the ``ls``-style flag grammar.
    """
    if debug_enabled():
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    args, rest = _build_parser().parse_known_args(sys.argv[1:] if argv is None else list(argv))
    # Undecodable file names come back from scandir as surrogate escapes;
    # write them out as their original bytes.
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="surrogateescape")
    try:
        theme = Theme.load(resolve_theme_location(args.theme))
        command = ListingCommand(theme, rest)
        command.execute()
    except IconlsError as exc:
        sys.stdout.flush()
        raise SystemExit(f"error: {exc}") from exc


if __name__ == "__main__":
    main()
