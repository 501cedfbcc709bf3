"""
Shared fixtures for the content cache tests.
"""

from collections import Counter
from pathlib import Path

import pytest

from content_cache.repositories import LRUContentCache
from content_cache.services import PathResolver, ResolutionService

ROOT = "./serverroot"
NOT_FOUND_PATH = "./serverfiles/404.html"
NOT_FOUND_BODY = b"<h1>404 Page Not Found</h1>"


class FakeStorage:
    """In-memory StorageReader that counts every load per path."""

    def __init__(self, files: dict[str, bytes]) -> None:
        self.files = dict(files)
        self.loads: Counter[str] = Counter()

    def load(self, path: str) -> bytes | None:
        self.loads[path] += 1
        return self.files.get(path)

    def is_available(self, path: str) -> bool:
        return path == ROOT or path in self.files


@pytest.fixture
def storage():
    """Storage with a page, a directory index and the not-found page."""
    return FakeStorage(
        {
            f"{ROOT}/about.html": b"<p>about</p>",
            f"{ROOT}/notes.txt": b"hello",
            f"{ROOT}/docs/index.html": b"<h1>docs</h1>",
            f"{ROOT}/index.html": b"<h1>home</h1>",
            NOT_FOUND_PATH: NOT_FOUND_BODY,
        }
    )


@pytest.fixture
def service(storage):
    """Resolution service over the fake storage with a 10-entry cache."""
    return ResolutionService(
        cache=LRUContentCache(capacity=10),
        storage=storage,
        resolver=PathResolver(ROOT),
        not_found_path=NOT_FOUND_PATH,
    )


@pytest.fixture
def server_dirs(tmp_path: Path) -> tuple[Path, Path]:
    """Real server root and system files directories on disk."""
    root = tmp_path / "serverroot"
    files = tmp_path / "serverfiles"
    (root / "docs").mkdir(parents=True)
    files.mkdir()

    (root / "index.html").write_bytes(b"<h1>home</h1>")
    (root / "style.css").write_bytes(b"body { color: red; }")
    (root / "docs" / "index.html").write_bytes(b"<h1>docs</h1>")
    (files / "404.html").write_bytes(NOT_FOUND_BODY)
    return root, files
