"""
Unit tests for local file inspection and writing.
"""

import pytest

from src.core.errors import InvalidArgumentError, LocalIOError
from src.core.files import (
    DEFAULT_CONTENT_TYPE,
    guess_content_type,
    inspect_local_file,
    write_local_file,
)


class TestInspectLocalFile:
    """Tests for reading a local file's metadata and content."""

    def test_reports_name_size_and_mime(self, local_file):
        info = inspect_local_file(local_file)

        assert info.basename == "cat.png"
        assert info.filename == "cat"
        assert info.extension == "png"
        assert info.dirname == str(local_file.parent)
        assert info.mime == "image/png"
        assert info.size == len(local_file.read_bytes())
        assert info.content == local_file.read_bytes()

    def test_accepts_string_paths(self, local_file):
        assert inspect_local_file(str(local_file)).basename == "cat.png"

    def test_missing_file_is_invalid_argument(self, tmp_path):
        with pytest.raises(InvalidArgumentError, match="does not exist"):
            inspect_local_file(tmp_path / "nope.txt")

    def test_directory_cannot_be_read(self, tmp_path):
        with pytest.raises(LocalIOError):
            inspect_local_file(tmp_path)

    def test_repr_omits_content(self, local_file):
        assert "not-really-a-cat" not in repr(inspect_local_file(local_file))


class TestGuessContentType:
    """Tests for MIME detection."""

    def test_known_extension(self):
        assert guess_content_type("notes.txt") == "text/plain"

    def test_unknown_extension_falls_back(self):
        assert guess_content_type("blob.unknownext123") == DEFAULT_CONTENT_TYPE

    def test_no_extension_falls_back(self):
        assert guess_content_type("README") == DEFAULT_CONTENT_TYPE


class TestWriteLocalFile:
    """Tests for writing downloaded bytes."""

    def test_creates_parent_directories(self, tmp_path):
        destination = tmp_path / "a" / "b" / "c.txt"

        result = write_local_file(destination, b"hello")

        assert result == destination
        assert destination.read_bytes() == b"hello"

    def test_overwrites_existing_file(self, tmp_path):
        destination = tmp_path / "c.txt"
        destination.write_bytes(b"old content")

        write_local_file(destination, b"new")

        assert destination.read_bytes() == b"new"

    def test_write_failure_is_local_io_error(self, tmp_path):
        # parent "directory" is actually a file
        blocker = tmp_path / "blocker"
        blocker.write_bytes(b"")

        with pytest.raises(LocalIOError):
            write_local_file(blocker / "c.txt", b"data")

    def test_local_io_error_is_an_os_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_bytes(b"")

        with pytest.raises(OSError):
            write_local_file(blocker / "c.txt", b"data")
