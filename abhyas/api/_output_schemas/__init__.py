"""Output schemas for API commands."""

from . import link  # noqa: F401  registers the link schemas
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = ["BaseOutputSchema", "get_output_schema", "register_output_schema"]
