"""
Tests for the filesystem storage reader and content-type inference.
"""

import logging
from pathlib import Path

import pytest

from content_cache.mime import DEFAULT_MIME_TYPE, mime_type_for
from content_cache.protocols import StorageReader
from content_cache.repositories import FileStorageReader


@pytest.fixture
def reader():
    return FileStorageReader.create()


def test_satisfies_storage_reader_protocol(reader):
    assert isinstance(reader, StorageReader)


def test_load_returns_file_bytes(reader, server_dirs):
    root, _ = server_dirs
    assert reader.load(str(root / "style.css")) == b"body { color: red; }"


def test_missing_file_is_absent(reader, server_dirs):
    root, _ = server_dirs
    assert reader.load(str(root / "nope.html")) is None


def test_directory_is_absent(reader, server_dirs):
    root, _ = server_dirs
    assert reader.load(str(root / "docs")) is None


def test_path_through_a_file_is_absent(reader, server_dirs):
    root, _ = server_dirs
    assert reader.load(str(root / "style.css" / "index.html")) is None


def test_unreadable_file_is_logged_and_absent(reader, server_dirs, caplog, monkeypatch):
    root, _ = server_dirs

    def deny(self):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "read_bytes", deny)

    with caplog.at_level(logging.WARNING):
        assert reader.load(str(root / "style.css")) is None

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Failed to read" in warnings[0].getMessage()


def test_path_with_nul_byte_is_absent(reader, server_dirs):
    root, _ = server_dirs
    assert reader.load(f"{root}/a\x00b") is None
    assert not reader.is_available(f"{root}/a\x00b")


def test_is_available(reader, server_dirs):
    root, files = server_dirs
    assert reader.is_available(str(root))
    assert reader.is_available(str(files / "404.html"))
    assert not reader.is_available(str(root / "ghost"))


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("./serverroot/index.html", "text/html"),
        ("./serverroot/INDEX.HTM", "text/html"),
        ("./serverroot/app.js", "application/javascript"),
        ("./serverroot/data.json", "application/json"),
        ("./serverroot/notes.txt", "text/plain"),
        ("./serverroot/cat.jpg", "image/jpeg"),
        ("./serverroot/logo.png", "image/png"),
        ("./serverroot/about", DEFAULT_MIME_TYPE),
        ("./serverroot/archive.tar.xz", DEFAULT_MIME_TYPE),
        ("./server.root/readme", DEFAULT_MIME_TYPE),
    ],
)
def test_mime_type_for(path, expected):
    assert mime_type_for(path) == expected
