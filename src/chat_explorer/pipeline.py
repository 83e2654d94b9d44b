"""
Export pipeline for conversation archives.

This provides the ExportPipeline class orchestrating the workflow:
(1) resolving an export path to flat conversation entries,
(2 optional) grouping the entries into threads,
(3) writing the result as JSON or a text transcript.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from .config import Config
from .errors import ChatExplorerError, WriteError
from .export import EntryExporter
from .loader import load_entries
from .parser import group_conversation_entries

logger = logging.getLogger(__name__)


class ExportPipeline:
    """Load-and-export pipeline for conversation exports."""

    def __init__(self,
                 config: Optional[Config] = None,
                 output_dir: Optional[str] = None,
                 export_format: Optional[str] = None,
                 group_threads: Optional[bool] = None):
        """Initialize the pipeline.

        Args:
            config: Configuration object. If None, creates a new Config instance.
            output_dir: Output directory, overriding the configured one
            export_format: "json" or "text", overriding the configured one
            group_threads: group JSON output into threads, overriding config
        """
        self.config = config or Config()

        self.export_format = (export_format or self.config.export_format).lower()
        if self.export_format not in ("json", "text"):
            raise ValueError(f"Unsupported export format: {self.export_format}")

        self.group_threads = self.config.group_threads if group_threads is None else group_threads
        self.exporter = EntryExporter(output_dir=output_dir or str(self.config.default_output_dir))

    def process_file(self, file_path: str) -> str:
        """Load one export and write it out.

        Args:
            file_path: conversations.json or zip archive path

        Returns:
            Path of the written file, or "" if there was nothing to write

        Raises:
            ChatExplorerError: the export could not be loaded
            WriteError: the export file could not be written
        """
        logger.info(f"Processing file: {file_path}")
        entries = load_entries(file_path)

        if not entries:
            logger.warning(f"No messages found in {file_path}")
            return ""

        stem = Path(file_path.strip()).stem

        if self.export_format == "text":
            threads = group_conversation_entries(entries)
            logger.info(f"Writing {len(threads)} threads as text")
            output_path = self.exporter.save_to_text(threads, f"{stem}_transcript.txt")
        elif self.group_threads:
            threads = group_conversation_entries(entries)
            logger.info(f"Writing {len(threads)} threads as JSON")
            output_path = self.exporter.save_to_json(threads, f"{stem}_threads.json")
        else:
            logger.info(f"Writing {len(entries)} entries as JSON")
            output_path = self.exporter.save_to_json(entries, f"{stem}_entries.json")

        if not output_path:
            raise WriteError(f"write export for {file_path}: nothing was saved", path=file_path)

        return output_path

    def process_files(self, file_paths: List[str]) -> Dict[str, str]:
        """Process multiple exports, continuing past failures.

        Args:
            file_paths: List of export paths

        Returns:
            Dictionary mapping input paths to written paths ("" on failure)
        """
        results = {}

        for file_path in file_paths:
            try:
                results[file_path] = self.process_file(file_path)
            except ChatExplorerError as e:
                logger.error(f"Failed to process {file_path}: {e}")
                results[file_path] = ""

        written = sum(1 for output_path in results.values() if output_path)
        logger.info(f"Batch processing complete. Wrote {written}/{len(file_paths)} exports")

        return results
