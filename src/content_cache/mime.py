"""Content-type inference from file extensions."""

import posixpath

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES = {
    ".html": "text/html",
    ".htm": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".txt": "text/plain",
    ".xml": "application/xml",
    ".svg": "image/svg+xml",
    ".jpeg": "image/jpeg",
    ".jpg": "image/jpeg",
    ".gif": "image/gif",
    ".png": "image/png",
    ".ico": "image/x-icon",
    ".webp": "image/webp",
    ".pdf": "application/pdf",
}


def mime_type_for(path: str) -> str:
    """Return the MIME type for a path based on its extension.

    Args:
        path: A file path; only the extension is inspected

    Returns:
        The matching MIME type, or application/octet-stream when unknown
    """
    _, ext = posixpath.splitext(path)
    return MIME_TYPES.get(ext.lower(), DEFAULT_MIME_TYPE)
