"""Storage reader protocol.

Defines the interface for persistent storage that the resolution
pipeline falls back to on a cache miss.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class StorageReader(Protocol):
    """Protocol for storage backends that return whole files."""

    def load(self, path: str) -> bytes | None:
        """Read the full contents at a path.

        Args:
            path: The storage path to read

        Returns:
            The file contents, or None when nothing can be read there
        """
        ...

    def is_available(self, path: str) -> bool:
        """Check whether a storage location is reachable.

        Args:
            path: A directory or file path

        Returns:
            True if the location exists, False otherwise
        """
        ...
