"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkStatusOutput(BaseOutputSchema):
    """Output schema for link status command."""
    total: int = Field(..., description="Number of tracked links")
    completed: int = Field(..., description="Number of solved links")
    skipped: int = Field(..., description="Number of skipped links")
    incomplete: int = Field(..., description="Number of links neither solved nor skipped")


class LinkListOutput(BaseOutputSchema):
    """Output schema for link list command."""
    status: str = Field(..., description="Status filter: all, solved, skipped or incomplete")
    count: int = Field(..., description="Number of links returned")
    links: list[dict[str, Any]] = Field(..., description="Links with url, solved_count and status")


class LinkAddOutput(BaseOutputSchema):
    """Output schema for link add command."""
    url: str = Field(..., description="Link that was added")
    added: bool = Field(..., description="Whether a new row was inserted")


class LinkDeleteOutput(BaseOutputSchema):
    """Output schema for link delete command."""
    url: str = Field(..., description="Link that was targeted")
    deleted: bool = Field(..., description="Whether a row was removed")


class LinkNextOutput(BaseOutputSchema):
    """Output schema for link next command."""
    link: dict[str, Any] | None = Field(..., description="Next incomplete link, null when none remain")


class LinkShowOutput(BaseOutputSchema):
    """Output schema for link show command."""
    url: str = Field(..., description="Link that was looked up")
    link: dict[str, Any] | None = Field(..., description="Link record, null if not found")


class LinkCompleteOutput(BaseOutputSchema):
    """Output schema for link complete command."""
    url: str = Field(..., description="Link that was targeted")
    solved_count: int = Field(..., description="Solved count after the update, -1 if not found")


class LinkSkipOutput(BaseOutputSchema):
    """Output schema for link skip command."""
    url: str = Field(..., description="Link that was targeted")
    skipped: bool = Field(..., description="Whether the link is now skipped")


class LinkResetOutput(BaseOutputSchema):
    """Output schema for link reset command."""
    target: str = Field(..., description="Status that was reset: skipped or completed")
    reset_count: int = Field(..., description="Number of links moved back to incomplete, -1 on failure")


class LinkImportOutput(BaseOutputSchema):
    """Output schema for link import command."""
    path: str = Field(..., description="File the links were read from")
    read_count: int = Field(..., description="Non-blank lines read from the file")
    inserted_count: int = Field(..., description="Links newly added")
    skipped_count: int = Field(..., description="Links ignored as duplicates")


# Register all schemas
register_output_schema("link", "status", LinkStatusOutput)
register_output_schema("link", "list", LinkListOutput)
register_output_schema("link", "add", LinkAddOutput)
register_output_schema("link", "delete", LinkDeleteOutput)
register_output_schema("link", "next", LinkNextOutput)
register_output_schema("link", "show", LinkShowOutput)
register_output_schema("link", "complete", LinkCompleteOutput)
register_output_schema("link", "skip", LinkSkipOutput)
register_output_schema("link", "reset", LinkResetOutput)
register_output_schema("link", "import", LinkImportOutput)
