"""CLI entrypoint for skillsync."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from skillsync import __version__
from skillsync.config import SyncConfig, load_config
from skillsync.constants.branding import (
    CLI_DESCRIPTION,
    DONE_MESSAGE,
    SCANNING_MESSAGE,
    STALE_MESSAGE,
    UNCHANGED_MESSAGE,
    UPDATED_MESSAGE,
)
from skillsync.constants.exit_codes import (
    EXIT_CONFIG_ERROR,
    EXIT_OK,
    EXIT_SECTION_NOT_FOUND,
    EXIT_STALE,
    EXIT_SYNC_ERROR,
)
from skillsync.constants.table import MIN_DESCRIPTION_LENGTH
from skillsync.exceptions import ConfigError, SkillsyncError
from skillsync.scanner import sync_readme

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="skillsync", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-r", "--root", type=Path, default=Path("."), help="Repository root (default: cwd)")
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    parser.add_argument("-t", "--target", type=Path, default=None, help="Markdown document to update")
    parser.add_argument("-d", "--community-dir", type=Path, default=None, help="Directory of skill folders")
    parser.add_argument("-s", "--section", default=None, help="Heading of the section holding the table")
    parser.add_argument("--max-length", type=int, default=None, help="Maximum description cell length")
    parser.add_argument(
        "--strict",
        action="store_true",
        help=f"Exit {EXIT_SECTION_NOT_FOUND} when the section or table header is missing",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--check", action="store_true", help="Exit 1 if the target is out of date; write nothing")
    mode.add_argument("--dry-run", action="store_true", help="Print the updated document instead of writing")
    parser.add_argument("--no-git", action="store_true", help="Do not consult git history for authors")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show warnings and errors")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    try:
        config = _apply_overrides(load_config(args.root, args.config), args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    logger.info(SCANNING_MESSAGE)
    try:
        result = sync_readme(config, write=not (args.check or args.dry_run))
    except SkillsyncError as exc:
        print(f"Sync error: {exc}", file=sys.stderr)
        return EXIT_SYNC_ERROR

    target_name = result.target.name
    if args.dry_run:
        sys.stdout.write(result.text)

    if not result.matched:
        return EXIT_SECTION_NOT_FOUND if config.strict else EXIT_OK

    if args.dry_run:
        return EXIT_OK

    if args.check:
        if result.changed:
            logger.error(STALE_MESSAGE.format(target=target_name))
            return EXIT_STALE
        logger.info(UNCHANGED_MESSAGE.format(target=target_name))
        return EXIT_OK

    message = UPDATED_MESSAGE if result.written else UNCHANGED_MESSAGE
    logger.info(message.format(target=target_name))
    logger.info(DONE_MESSAGE)
    return EXIT_OK


def _apply_overrides(config: SyncConfig, args: argparse.Namespace) -> SyncConfig:
    """Layer explicit CLI flags over file-based config."""
    if args.max_length is not None and args.max_length < MIN_DESCRIPTION_LENGTH:
        raise ConfigError(f"--max-length must be >= {MIN_DESCRIPTION_LENGTH}")

    overrides: dict[str, object] = {}
    if args.target is not None:
        overrides["target"] = args.target.resolve()
    if args.community_dir is not None:
        overrides["community_dir"] = args.community_dir.resolve()
    if args.section is not None:
        overrides["section_heading"] = args.section
    if args.max_length is not None:
        overrides["max_description_length"] = args.max_length
    if args.strict:
        overrides["strict"] = True
    if args.no_git:
        overrides["use_git"] = False
    return replace(config, **overrides)


if __name__ == "__main__":
    raise SystemExit(main())
