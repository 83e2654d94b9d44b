"""
Export source resolution.

Locates the conversations payload behind a filesystem path, whether it is a
bare JSON document or a member of a zip archive.
"""

from .source_resolver import load_entries

__all__ = ["load_entries"]
