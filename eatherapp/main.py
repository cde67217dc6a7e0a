"""Command-line entry point of the weather client."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .cmd import CMD
from .connect import Connection
from .db import DBManager, MissingKeyError
from .pages import INTRO_PAGE, build_pages

DB_NAME = "eatherApp.db"


def _parse(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="eatherapp", description="Weather forecasts in the terminal.")
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="folder holding the key files and the db/ directory",
    )
    parser.add_argument("--debug", action="store_true", help="print raw forecast responses")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive client until the user quits."""
    args = _parse(argv)
    con = Connection(debug=args.debug)
    try:
        db = DBManager(DB_NAME, base_dir=args.base_dir)
    except MissingKeyError:
        print("Keyfile missing with existing database!!! exiting...", file=sys.stderr)
        return 1
    cmd = CMD(INTRO_PAGE, build_pages(), db, con)
    while cmd.step():
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())