"""Main CLI entry point for iotdiff."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .. import __version__
from ..codec.session import SnapshotCodec
from ..exceptions import IotdiffError
from .layout import print_layout

logger = logging.getLogger(__name__)


def decode_file(file_path: Path) -> int:
    """Decode a file of hex frames, one per line, through a single session.

    Blank lines and lines starting with ``#`` are skipped. Each decoded
    snapshot is printed as one JSON line.

    Returns:
        Number of frames decoded
    """
    codec = SnapshotCodec()
    count = 0
    for line_number, line in enumerate(file_path.read_text().splitlines(), 1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        try:
            frame = bytes.fromhex(line)
        except ValueError as e:
            raise ValueError(f"line {line_number}: not a hex frame: {e}") from e
        try:
            snapshot = codec.decode(frame)
        except IotdiffError as e:
            raise IotdiffError(f"line {line_number}: {e}") from e
        print(json.dumps(snapshot.model_dump(mode="json")))
        count += 1

    logger.info("Decoded %d frames from %s", count, file_path)
    return count


def main() -> int:
    """Main entry point for the iotdiff CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="iotdiff: Differential Telemetry Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  iotdiff --layout                       Show the wire layout
  iotdiff --decode frames.txt            Decode hex frames, one per line
  iotdiff --version                      Show version
        """,
    )

    parser.add_argument(
        "--layout",
        action="store_true",
        help="Show the snapshot wire layout and message size bounds",
    )

    parser.add_argument(
        "--decode",
        metavar="FILE",
        type=str,
        help="Decode a file of hex-encoded frames in stream order",
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"iotdiff {__version__}",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.layout:
        print_layout()
        return 0

    if args.decode:
        file_path = Path(args.decode)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            decode_file(file_path)
            return 0
        except (IotdiffError, ValueError) as e:
            print(f"Error decoding file: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
