"""Exception hierarchy for the content cache server."""


class ContentCacheError(Exception):
    """Base class for errors raised by this package."""


class NotFoundAssetError(ContentCacheError):
    """The not-found page itself could not be loaded.

    Without it the server has no way to report missing content to
    clients, so this is treated as fatal.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"cannot find system not-found file: {path}")
        self.path = path
