"""
Resolve an export path to its conversation entries.

A path ending in .zip is searched for a conversations.json member; any other
path is decoded directly as the conversations JSON document.
"""

import logging
import os
import zipfile
import zlib
from typing import IO, Any, List, Optional, Union

from ..errors import ArchiveOpenError, CloseError, DecodeError, NotFoundError, OpenError, PathRequiredError
from ..parser.models import ConversationEntry
from ..parser.parser import decode_payload

logger = logging.getLogger(__name__)

CONVERSATIONS_FILE_NAME = "conversations.json"
ARCHIVE_EXTENSION = ".zip"


def load_entries(path: Union[str, "os.PathLike[str]"]) -> List[ConversationEntry]:
    """Load conversation entries from a JSON export or a zip archive.

    Args:
        path: conversations.json file, or zip archive holding one at any depth

    Returns:
        Entries in conversation order, then message order

    Raises:
        PathRequiredError: path is blank
        OpenError: the file or archive member cannot be opened
        ArchiveOpenError: a .zip path is not a valid archive
        NotFoundError: the archive has no conversations.json member
        DecodeError: the payload is not a conversations JSON array
        CloseError: a handle failed to close after a successful decode
    """
    trimmed_path = os.fspath(path).strip() if path is not None else ""
    if not trimmed_path:
        raise PathRequiredError("path is required")

    if os.path.splitext(trimmed_path)[1].lower() == ARCHIVE_EXTENSION:
        return _load_from_zip(trimmed_path)

    return _load_from_json(trimmed_path)


def _load_from_json(path: str) -> List[ConversationEntry]:
    """Decode a conversations JSON document straight from disk."""
    logger.info(f"Loading conversations from {path}")
    stream = _open_file(path)
    return _decode_and_close(stream, path, label=path)


def _load_from_zip(path: str) -> List[ConversationEntry]:
    """Decode the first conversations.json member found in a zip archive."""
    logger.info(f"Loading conversations from zip archive {path}")

    with _open_file(path) as archive_file:
        try:
            archive = zipfile.ZipFile(archive_file)
        except (zipfile.BadZipFile, OSError) as e:
            raise ArchiveOpenError(f"open zip archive {path}: {e}", path=path) from e

        with archive:
            member = _find_conversations_member(archive)
            if member is None:
                raise NotFoundError(
                    f"{CONVERSATIONS_FILE_NAME} not found in zip archive {path}",
                    path=path
                )

            logger.debug(f"Using archive member {member.filename}")
            try:
                stream = archive.open(member)
            except (OSError, RuntimeError, NotImplementedError, zipfile.BadZipFile) as e:
                raise OpenError(
                    f"open {member.filename} from zip archive {path}: {e}",
                    path=path,
                    member=member.filename
                ) from e

            return _decode_and_close(
                stream,
                path,
                label=f"{member.filename} from zip archive {path}",
                member=member.filename
            )


def _find_conversations_member(archive: zipfile.ZipFile) -> Optional[zipfile.ZipInfo]:
    """Return the first member, in stored order, named conversations.json."""
    for info in archive.infolist():
        if info.is_dir():
            continue

        basename = info.filename.rsplit('/', 1)[-1]
        if basename.casefold() == CONVERSATIONS_FILE_NAME:
            return info

    return None


def _open_file(path: str) -> IO[bytes]:
    try:
        return open(path, 'rb')
    except OSError as e:
        raise OpenError(f"open file {path}: {e}", path=path) from e


def _decode_and_close(stream: IO[Any], path: str, label: str,
                      member: Optional[str] = None) -> List[ConversationEntry]:
    """Decode a stream and close it.

    A failed decode wins over a failed close; the close failure is then
    only logged.
    """
    decoded = False
    try:
        entries = decode_payload(stream)
        decoded = True
    except (DecodeError, OSError, EOFError, zipfile.BadZipFile, zlib.error) as e:
        raise DecodeError(f"parse {label}: {e}", path=path, member=member) from e
    finally:
        if not decoded:
            _close_after_failure(stream, label)

    try:
        stream.close()
    except OSError as e:
        raise CloseError(f"close {label}: {e}", path=path, member=member) from e

    logger.info(f"Loaded {len(entries)} entries from {label}")
    return entries


def _close_after_failure(stream: IO[Any], label: str) -> None:
    try:
        stream.close()
    except OSError as e:
        logger.warning(f"Failed to close {label} after decode error: {e}")
