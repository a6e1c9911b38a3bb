"""
Command line entry point.

    archive-renamer [-r] [-e] [-s settings.json] PATH [PATH ...]
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import get_settings, load_credentials
from .dlsite_client import DLsiteClient
from .exceptions import ArchiveRenamerError, ConfigurationError
from .fanza_client import FanzaClient
from .renamer import ArchiveRenamer
from .walker import Walker

logger = logging.getLogger(__name__)


def build_parser(settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="archive-renamer",
        description="Rename FANZA / DLsite archives to \"[maker] title.zip\""
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="Files or directories to process"
    )
    parser.add_argument(
        "-r", "--recursive",
        action="store_true",
        help="Visit files recursively"
    )
    parser.add_argument(
        "-s", "--settings",
        type=Path,
        default=settings.settings_path,
        help="Path to settings.json (default: %(default)s)"
    )
    parser.add_argument(
        "-e", "--execute",
        action="store_true",
        help="Execute renaming (default: dry run)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {settings.app_version}"
    )
    return parser


def _report(error: ArchiveRenamerError) -> int:
    logger.error(f"{error.message}: {error.details}" if error.details else error.message)
    return 1


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        logging.basicConfig(format="%(levelname)s: %(message)s")
        return _report(e)

    args = build_parser(settings).parse_args(argv)

    # Setup logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s: %(message)s"
    )

    try:
        credentials = load_credentials(args.settings)

        renamer = ArchiveRenamer(
            credentials,
            walker=Walker.from_flag(args.recursive),
            execute=args.execute,
            require_complete_metadata=settings.require_complete_metadata,
            fanza_client=FanzaClient(
                api_url=settings.fanza_api_url,
                detail_url=settings.fanza_detail_url,
                timeout=settings.request_timeout,
                user_agent=settings.user_agent,
            ),
            dlsite_client=DLsiteClient(
                detail_url=settings.dlsite_detail_url,
                timeout=settings.request_timeout,
                user_agent=settings.user_agent,
            ),
        )
        renamer.run(args.paths)
    except ArchiveRenamerError as e:
        return _report(e)

    return 0


if __name__ == "__main__":
    sys.exit(main())
