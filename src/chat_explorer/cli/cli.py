"""
Command-line interface for chat-explorer.

Loads Claude conversation exports (conversations.json or the zip archive
it ships in) and writes the messages out as JSON or a text transcript.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ..config import Config
from ..config.config import EXPORT_FORMATS, LOG_LEVELS
from ..errors import ChatExplorerError
from ..pipeline import ExportPipeline

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging with specified level."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )


def export_cli(argv: Optional[List[str]] = None) -> None:
    """Export conversation entries from JSON or zip exports."""
    config = Config()

    parser = argparse.ArgumentParser(
        description='Flatten Claude conversation exports into message entries.'
    )
    parser.add_argument(
        'input_files',
        nargs='+',
        help='conversations.json files or zip exports'
    )
    parser.add_argument(
        '-o', '--output-dir',
        help='Output directory for exported files'
    )
    parser.add_argument(
        '--format',
        choices=list(EXPORT_FORMATS),
        help='Export format (default: json)'
    )
    parser.add_argument(
        '--group',
        action='store_true',
        default=None,
        help='Group JSON output into conversation threads'
    )
    parser.add_argument(
        '--log-level',
        choices=list(LOG_LEVELS),
        help='Set logging level (default: INFO)'
    )

    args = parser.parse_args(argv)

    invalid = config.get_invalid_config()
    if args.format:
        invalid = [key for key in invalid if key != "CHAT_EXPLORER_EXPORT_FORMAT"]
    if args.log_level:
        invalid = [key for key in invalid if key != "CHAT_EXPLORER_LOG_LEVEL"]

    configured_level = config.log_level.strip().upper()
    setup_logging(args.log_level or (configured_level if configured_level in LOG_LEVELS else "INFO"))

    if invalid:
        logger.error(f"Invalid configuration: {', '.join(invalid)}")
        sys.exit(1)

    pipeline = ExportPipeline(
        config=config,
        output_dir=args.output_dir,
        export_format=args.format,
        group_threads=args.group
    )

    failures = 0
    for input_file in args.input_files:
        try:
            output_path = pipeline.process_file(input_file)
        except ChatExplorerError as e:
            logger.error(f"Failed to export {input_file}: {e}")
            failures += 1
            continue

        if output_path:
            logger.info(f"Exported {input_file} to {output_path}")

    if failures:
        sys.exit(1)


if __name__ == '__main__':
    export_cli()
