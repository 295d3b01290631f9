"""Validate command output against its registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate and normalize ``output`` for the command ``func``.

    The schema is looked up from the command's module path: a command
    ``cmd_status`` in ``abhyas.api.link.cmd_status`` uses the ("link", "status")
    schema. Commands without a registered schema pass through unchanged.

    Raises:
        ValueError: If the output does not match the schema
    """
    module_parts = func.__module__.split(".")
    name = getattr(func, "__name__", "")
    if len(module_parts) < 2 or not name.startswith("cmd_"):
        return output

    domain = module_parts[-2]
    command_name = name.removeprefix("cmd_")
    schema = get_output_schema(domain, command_name)
    if schema is None:
        return output

    try:
        return schema.model_validate(output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"{domain}.{command_name} output does not match {schema.__name__}: {e}") from e
