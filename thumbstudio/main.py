"""
Command-line entry point for the YouTube Thumbnail Studio.
"""

import argparse
import json
import sys
from typing import List, Optional

from dotenv import load_dotenv

from thumbstudio.config import config
from thumbstudio.core.batch_downloader import BatchDownloader
from thumbstudio.core.gemini_service import GeminiService
from thumbstudio.core.thumbnails import resolve_batch
from thumbstudio.models.schemas import DownloadStatus, ThumbnailRecord
from thumbstudio.utils.logger import logging


def read_input(path: Optional[str]) -> str:
    """Read pasted links from a file, or from stdin when no file is given."""
    if not path or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def resolve_command(args) -> List[ThumbnailRecord]:
    records = resolve_batch(read_input(args.input))
    print(json.dumps([record.model_dump() for record in records], indent=2))
    return records


def download_command(args) -> int:
    records = resolve_batch(read_input(args.input))
    if not records:
        logging.warning("No valid YouTube links found")
        return 1

    downloader = BatchDownloader(output_directory=args.output, delay_seconds=args.delay)
    outcomes = downloader.download_all(records)

    for outcome in outcomes:
        print(f"{outcome.video_id}\t{outcome.status.value}\t{outcome.path or outcome.url}")

    saved = sum(1 for outcome in outcomes if outcome.status == DownloadStatus.SAVED)
    print(f"Saved {saved} of {len(outcomes)} thumbnails")
    return 0


def analyze_command(args) -> int:
    records = resolve_batch(read_input(args.input))
    if not records:
        logging.warning("No valid YouTube links found")
        return 1

    analysis = GeminiService().analyze_content_batch([record.id for record in records])
    print(analysis.model_dump_json(by_alias=True, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=config.APP_NAME)
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve_parser = subparsers.add_parser("resolve", help="Resolve pasted links to thumbnail records")
    resolve_parser.add_argument("input", nargs="?", help="File with pasted links (default: stdin)")
    resolve_parser.set_defaults(func=lambda args: 0 if resolve_command(args) else 1)

    download_parser = subparsers.add_parser("download", help="Download max-resolution thumbnails")
    download_parser.add_argument("input", nargs="?", help="File with pasted links (default: stdin)")
    download_parser.add_argument("--output", default=str(config.DOWNLOADS_DIR), help="Output directory")
    download_parser.add_argument("--delay", type=float, default=config.DOWNLOAD_DELAY_SECONDS,
                                 help="Seconds to wait between two downloads")
    download_parser.set_defaults(func=download_command)

    analyze_parser = subparsers.add_parser("analyze", help="Ask Gemini for titles, description and tags")
    analyze_parser.add_argument("input", nargs="?", help="File with pasted links (default: stdin)")
    analyze_parser.set_defaults(func=analyze_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the application from command line."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
