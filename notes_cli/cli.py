"""Command-line entry point.

Usage:
  notes [-C CONFIG] [-s] new [-c CATEGORY] [-D SUBDIR] [-d DATE] [DATE ...]

Examples:
  notes new                 # today's note in the default category
  notes n -c work 3 15      # March 15 of this year, "work" category
  notes n -d 2024-03-15

Environment (a .env file in the working directory is read too):
  NOTES_CONFIG            config file used when --config is not given
  NOTES_DATE_SEPARATORS   characters allowed between date parts (default " -")
"""

from __future__ import annotations

import argparse
import logging
import os
from datetime import datetime
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .categories import DEFAULT_CATEGORY, resolve_category
from .config import Category, config_path, load_config
from .date import DEFAULT_SEPARATORS, resolve_date
from .errors import (
    CategoryNotFound,
    CommandFailed,
    ConfigDecodeError,
    DefaultCategoryNotFound,
    NotesError,
)
from .files import create_note
from .paths import build_note_path

SEPARATORS_ENV = "NOTES_DATE_SEPARATORS"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="notes", description="Manage personal notes.")
    ap.add_argument("-C", "--config", help="Config file (default: $NOTES_CONFIG or ./config.toml).")
    ap.add_argument(
        "-s",
        "--silent",
        action="store_true",
        help="Report config and category problems as a generic failure.",
    )

    sub = ap.add_subparsers(dest="command", required=True)
    new = sub.add_parser("new", aliases=["n"], help="Create an empty note for a date.")
    new.add_argument("-c", "--category", default=DEFAULT_CATEGORY, help="Category name (default: default).")
    new.add_argument("-D", "--sub-directory", dest="sub_directory", help="Subdirectory under the category path.")
    new.add_argument("-d", "--date", help="Date expression: D, M-D or Y-M-D (default: today).")
    new.add_argument("-f", "--first-directory", dest="first_directory", action="store_true")
    new.add_argument("-n", "--new", dest="new", action="store_true")
    new.add_argument("-e", "--open-editor", dest="open_editor", action="store_true")
    new.add_argument("date_tokens", nargs="*", metavar="DATE", help="Date expression as separate words.")
    new.set_defaults(func=cmd_new)

    return ap


def load_category(args: argparse.Namespace) -> Category:
    try:
        config = load_config(config_path(args.config))
        return resolve_category(config, args.category)
    except (ConfigDecodeError, CategoryNotFound, DefaultCategoryNotFound):
        if not args.silent:
            raise
        raise CommandFailed("cannot load note category") from None


def date_expression(args: argparse.Namespace) -> str | None:
    if args.date and args.date_tokens:
        raise CommandFailed("give the date with --date or as arguments, not both")
    if args.date:
        return args.date
    if args.date_tokens:
        return " ".join(args.date_tokens)
    return None


def cmd_new(args: argparse.Namespace, reference: datetime) -> Path:
    category = load_category(args)

    expression = date_expression(args)
    when = reference
    if expression is not None:
        separators = os.environ.get(SEPARATORS_ENV) or DEFAULT_SEPARATORS
        when = resolve_date(expression, reference, separators=separators)

    path = create_note(build_note_path(category, when, args.sub_directory))

    if args.open_editor:
        # Editing is out of scope; show the command instead of running it.
        logger.info("open with: %s %s", category.editor or "$EDITOR", path)
    return path


def main(argv: list[str] | None = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s", datefmt="%Y/%m/%d %H:%M:%S")

    args = build_parser().parse_args(argv)
    reference = datetime.now()

    try:
        args.func(args, reference)
    except NotesError as e:
        logger.error("%s", e)
        return 1
    return 0
