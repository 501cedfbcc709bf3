"""Filesystem implementation of StorageReader."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileStorageReader:
    """Reads whole files from local disk.

    This class satisfies the StorageReader protocol through structural
    typing - no explicit inheritance needed.

    Every read failure is reported to the caller as absence. Failures
    other than a missing file or an unusable path (permissions, I/O errors)
    are logged first.
    """

    @classmethod
    def create(cls) -> "FileStorageReader":
        """Factory method to create FileStorageReader."""
        return cls()

    def load(self, path: str) -> bytes | None:
        """Read the full contents of a file.

        Args:
            path: Path of the file to read

        Returns:
            The file contents, or None if the file cannot be read
        """
        try:
            return Path(path).read_bytes()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            logger.debug("No file at %s", path)
            return None
        except OSError as e:
            logger.warning("Failed to read %s: %s", path, e)
            return None
        except ValueError:
            # Paths with embedded NUL bytes cannot name a file.
            logger.debug("Unusable path %r", path)
            return None

    def is_available(self, path: str) -> bool:
        """Check whether a path exists on disk."""
        return Path(path).exists()
