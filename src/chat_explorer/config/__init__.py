"""Runtime configuration for chat-explorer."""

from .config import Config

__all__ = ["Config"]
