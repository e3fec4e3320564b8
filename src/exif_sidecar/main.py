from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .config import ConfigManager
from .core import SidecarProcessor
from .utils.logger import get_logger


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = _load_config(args)
    if args.keep_going:
        config.set("batch.stop_on_error", False)
    if args.verbose:
        config.set("logging.level", "DEBUG")

    log_file = config.get("logging.log_file")
    logger = get_logger(
        "exif_sidecar",
        log_file=Path(log_file) if log_file else None,
        level=str(config.get("logging.level", "INFO")).upper(),
    )

    processor = SidecarProcessor(config, logger=logger)
    result = processor.run(args.paths)

    print(f"Done. Written: {len(result.written)}, Failed: {len(result.errors)}")
    if not result.success:
        sys.exit(1)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exif-sidecar",
        description="Write a JSON sidecar with file and EXIF metadata next to each JPEG.",
    )
    parser.add_argument("paths", nargs="+", metavar="PATH", help="JPEG file(s) to process")
    parser.add_argument("--config", help="Path to config file", default=None)
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Continue with the remaining files after a failure",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every extracted tag")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _load_config(args: argparse.Namespace) -> ConfigManager:
    try:
        config = ConfigManager(Path(args.config) if args.config else None)
    except (OSError, ValueError) as exc:
        print(f"Invalid config: {exc}", file=sys.stderr)
        sys.exit(2)

    errors = config.validate_config()
    if errors:
        for error in errors:
            print(f"Invalid config: {error}", file=sys.stderr)
        sys.exit(2)
    return config
