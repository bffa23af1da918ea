"""
Local file inspection and writing.

Wraps pathlib and mimetypes so the facade deals with LocalFileInfo
values and LocalIOError instead of raw OSError.
"""

import logging
import mimetypes
from dataclasses import dataclass, field
from pathlib import Path

from .errors import InvalidArgumentError, LocalIOError
from .keys import PathLike

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class LocalFileInfo:
    """What we know about a local file about to be uploaded."""
    path: Path
    dirname: str
    basename: str
    filename: str  # basename without extension
    extension: str
    size: int
    mime: str
    content: bytes = field(repr=False)


def guess_content_type(path: PathLike) -> str:
    """MIME type from the file name, octet-stream when unknown."""
    content_type, _ = mimetypes.guess_type(str(path))
    return content_type or DEFAULT_CONTENT_TYPE


def inspect_local_file(local_path: PathLike) -> LocalFileInfo:
    """
    Read a local file and describe it.

    Raises InvalidArgumentError when the path does not exist and
    LocalIOError when it exists but cannot be read (a directory,
    permissions).
    """
    path = Path(local_path)
    if not path.exists():
        raise InvalidArgumentError(f"The local path does not exist: {path}")

    try:
        content = path.read_bytes()
    except OSError as exc:
        raise LocalIOError(f"Could not read local file {path}: {exc}") from exc

    return LocalFileInfo(
        path=path,
        dirname=str(path.parent),
        basename=path.name,
        filename=path.stem,
        extension=path.suffix.lstrip("."),
        size=len(content),
        mime=guess_content_type(path),
        content=content,
    )


def write_local_file(destination: Path, data: bytes) -> Path:
    """Write bytes to destination, creating parent directories and overwriting."""
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(data)
    except OSError as exc:
        logger.error(
            "Failed to write local file",
            extra={"destination": str(destination), "error": str(exc)}
        )
        raise LocalIOError(f"Could not write local file {destination}: {exc}") from exc

    return destination
