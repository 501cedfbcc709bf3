"""Cache entry domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CacheEntryEntity:
    """Domain entity for one cached response body.

    Entries are immutable: replacing the content of a key means storing
    a new entity under it.

    Attributes:
        key: The resolution path the content was loaded from
        content_type: MIME type served with the content
        content: The raw response body
    """

    key: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        """Byte length of the content."""
        return len(self.content)
