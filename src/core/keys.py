"""
Object key and URL helpers.

Pure functions, no I/O. The facade calls these to turn its arguments
into object keys, public URLs and local download paths.
"""

import os
from pathlib import Path
from typing import Optional, Union

from .errors import InvalidArgumentError

PathLike = Union[str, "os.PathLike[str]"]


def require_remote_key(remote_key: Optional[str]) -> str:
    """Reject an empty object key."""
    if not remote_key:
        raise InvalidArgumentError(
            "You must specify the object key (e.g. remote_dir/file.txt)"
        )
    return remote_key


def require_local_path(local_path: Optional[PathLike]) -> str:
    """Reject an empty local path. Existence is not checked here."""
    if local_path is None or not os.fspath(local_path):
        raise InvalidArgumentError(
            "You must set a local path (i.e. where the file is read from or saved to)"
        )
    return os.fspath(local_path)


def trim_remote_dir(remote_dir: str) -> str:
    """Strip one leading and one trailing slash: ``"/dir/"`` -> ``"dir"``."""
    if remote_dir.startswith("/"):
        remote_dir = remote_dir[1:]
    if remote_dir.endswith("/"):
        remote_dir = remote_dir[:-1]
    return remote_dir


def build_object_key(filename: str, remote_dir: Optional[str] = None) -> str:
    """
    Join an optional remote directory and a filename into an object key.

    ``build_object_key("cat.png", "/images/")`` -> ``"images/cat.png"``.
    A directory that trims to nothing (``"/"``) leaves the key as the bare
    filename.
    """
    if not filename:
        raise InvalidArgumentError("Could not derive a file name from the local path")

    if remote_dir:
        remote_dir = trim_remote_dir(remote_dir)
        if remote_dir:
            return f"{remote_dir}/{filename}"
    return filename


def build_public_url(
    bucket: str,
    endpoint_host: str,
    remote_key: str,
    use_tls: bool = False,
) -> str:
    """Virtual-hosted style URL for a public object."""
    scheme = "https" if use_tls else "http"
    if remote_key.startswith("/"):
        remote_key = remote_key[1:]
    return f"{scheme}://{bucket}.{endpoint_host}/{remote_key}"


def download_destination(local_path: PathLike, remote_key: str) -> Path:
    """
    Local path a downloaded object is written to.

    The full key is appended, so ``"a/b/c.txt"`` under ``dest`` lands in
    ``dest/a/b/c.txt``. Keys with ``..`` segments are refused.
    """
    parts = [part for part in remote_key.split("/") if part]
    if not parts:
        raise InvalidArgumentError(f"Object key has no path segments: {remote_key!r}")
    if ".." in parts:
        raise InvalidArgumentError(
            f"Object key would escape the destination directory: {remote_key!r}"
        )
    return Path(local_path).joinpath(*parts)
