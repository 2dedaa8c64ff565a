from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .core.config import get_settings
from .core.errors import RootNotFoundError
from .core.logging_config import setup_logging, get_logger
from .features.pipeline import merge_translation_files
from .features.watch import TranslationWatcher

log = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_NO_ROOT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="locale-merge",
        description="Merge per-component locale/*.json fragments into one file per locale.",
    )
    parser.add_argument("--watch", action="store_true", help="re-merge on every fragment change")
    parser.add_argument("--debug", action="store_true", default=None, help="verbose logging")
    parser.add_argument("--src", type=Path, help="source root (default: $SRC_DIR or ./src)")
    parser.add_argument("--out", type=Path, help="output directory (default: $MESSAGES_DIR or ./messages)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings(SRC_DIR=args.src, MESSAGES_DIR=args.out, DEBUG=args.debug)
    except ValidationError as e:
        setup_logging()
        log.error("Invalid configuration:\n%s", e)
        return EXIT_FAILED

    setup_logging(log_file=settings.LOG_FILE, debug=settings.DEBUG)
    log.debug(
        "Settings: src=%s out=%s locales=%s",
        settings.SRC_DIR, settings.MESSAGES_DIR, ",".join(settings.SUPPORTED_LOCALES),
    )

    if args.watch:
        if not settings.SRC_DIR.is_dir():
            log.error("❌ %s", RootNotFoundError(settings.SRC_DIR))
            return EXIT_NO_ROOT
        TranslationWatcher(settings).run()
        return EXIT_OK

    try:
        ok = merge_translation_files(settings)
    except RootNotFoundError as e:
        log.error("❌ %s", e)
        return EXIT_NO_ROOT
    return EXIT_OK if ok else EXIT_FAILED


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
