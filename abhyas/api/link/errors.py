"""Typed failures raised by the link store."""


class LinkStoreError(Exception):
    """Base class for every failure the link store surfaces."""


class DuplicateLinkError(LinkStoreError):
    """The link is already tracked."""

    def __init__(self, url: str):
        super().__init__(f"Link already exists: {url}")
        self.url = url


class LinkNotFoundError(LinkStoreError):
    """The operation targets a link that is not tracked."""

    def __init__(self, url: str):
        super().__init__(f"Link not found: {url}")
        self.url = url


class InvalidLinkError(LinkStoreError, ValueError):
    """The link value cannot be stored (empty or blank)."""


class StorageUnavailableError(LinkStoreError):
    """The database directory, file or connection could not be opened."""


class QueryFailedError(LinkStoreError):
    """A statement failed against an open connection."""
