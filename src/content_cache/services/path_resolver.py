"""Mapping of request targets to storage paths."""

import os.path

from content_cache.config import settings


class PathResolver:
    """Turns request targets into candidate storage paths.

    Resolution is plain concatenation onto the server root and never
    touches storage. Targets containing ``..`` segments are resolved as
    written; use :meth:`is_contained` to reject candidates that escape
    the root.
    """

    def __init__(self, server_root: str, index_file: str = "index.html") -> None:
        """Initialize the resolver.

        Args:
            server_root: Directory that request targets are resolved under.
            index_file: File name appended for directory-index fallback.
        """
        self._root = server_root.rstrip("/") or "/"
        self._index_file = index_file
        self._normalized_root = os.path.normpath(self._root)

    @classmethod
    def create(
        cls,
        server_root: str | None = None,
        index_file: str | None = None,
    ) -> "PathResolver":
        """Factory method to create PathResolver with defaults.

        Args:
            server_root: Storage root. If None, uses settings.
            index_file: Index file name. If None, uses settings.

        Returns:
            Configured PathResolver
        """
        return cls(
            server_root=server_root or settings.server_root,
            index_file=index_file or settings.index_file,
        )

    @staticmethod
    def _normalize_target(request_target: str) -> str:
        if not request_target.startswith("/"):
            return "/" + request_target
        return request_target

    def resolve(self, request_target: str) -> str:
        """Map a request target to its primary storage path.

        Example: ``/about`` under ``./serverroot`` → ``./serverroot/about``.
        """
        return self._root + self._normalize_target(request_target)

    def resolve_index_fallback(self, request_target: str) -> str:
        """Map a request target to its directory index file.

        Example: ``/docs`` → ``./serverroot/docs/index.html``; ``/`` →
        ``./serverroot/index.html``.
        """
        target = self._normalize_target(request_target).rstrip("/")
        return f"{self._root}{target}/{self._index_file}"

    def is_contained(self, path: str) -> bool:
        """Check that a candidate path stays inside the server root."""
        normalized = os.path.normpath(path)
        if normalized == self._normalized_root:
            return True
        if self._normalized_root == ".":
            return not (os.path.isabs(normalized) or normalized.split("/")[0] == "..")
        prefix = self._normalized_root.rstrip("/") + "/"
        return normalized.startswith(prefix)

    @property
    def server_root(self) -> str:
        """Get the storage root."""
        return self._root
