"""Link API domain."""

from .._output_schemas.link import (
    LinkAddOutput,
    LinkCompleteOutput,
    LinkDeleteOutput,
    LinkImportOutput,
    LinkListOutput,
    LinkNextOutput,
    LinkResetOutput,
    LinkShowOutput,
    LinkSkipOutput,
    LinkStatusOutput,
)
from .errors import (
    DuplicateLinkError,
    InvalidLinkError,
    LinkNotFoundError,
    LinkStoreError,
    QueryFailedError,
    StorageUnavailableError,
)
from .Link import Link
from .LinkStatus import LinkStatus
from .LinkStore import LinkStore
from .StatusCounts import StatusCounts

__all__ = [
    "DuplicateLinkError",
    "InvalidLinkError",
    "Link",
    "LinkAddOutput",
    "LinkCompleteOutput",
    "LinkDeleteOutput",
    "LinkImportOutput",
    "LinkListOutput",
    "LinkNextOutput",
    "LinkNotFoundError",
    "LinkResetOutput",
    "LinkShowOutput",
    "LinkSkipOutput",
    "LinkStatus",
    "LinkStatusOutput",
    "LinkStore",
    "LinkStoreError",
    "QueryFailedError",
    "StatusCounts",
    "StorageUnavailableError",
]
