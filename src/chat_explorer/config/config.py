"""Configuration management with environment variable support."""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv()

EXPORT_FORMATS = ("json", "text")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Config:
    """Centralized configuration management."""

    @property
    def default_output_dir(self) -> Path:
        """Base output directory path."""
        return Path(os.environ.get("CHAT_EXPLORER_OUTPUT_DIR", "output"))

    @property
    def log_level(self) -> str:
        """Application logging level."""
        return os.environ.get("CHAT_EXPLORER_LOG_LEVEL", "INFO")

    @property
    def export_format(self) -> str:
        """Export file format, json or text."""
        return os.environ.get("CHAT_EXPLORER_EXPORT_FORMAT", "json").strip().lower()

    @property
    def group_threads(self) -> bool:
        """Whether JSON exports group entries into threads."""
        value = os.environ.get("CHAT_EXPLORER_GROUP_THREADS", "false")
        return value.strip().lower() in ("1", "true", "yes", "on")

    def validate(self) -> bool:
        """Check configuration values are usable."""
        return not self.get_invalid_config()

    def get_invalid_config(self) -> List[str]:
        """List invalid configuration keys."""
        invalid = []
        if self.export_format not in EXPORT_FORMATS:
            invalid.append("CHAT_EXPLORER_EXPORT_FORMAT")
        if self.log_level.strip().upper() not in LOG_LEVELS:
            invalid.append("CHAT_EXPLORER_LOG_LEVEL")
        return invalid
