"""Validate command output against its registered schema."""

from collections.abc import Callable
from typing import Any

from ._output_schemas import get_output_schema


def validate_output(func: Callable[..., Any], output: dict[str, Any]) -> dict[str, Any]:
    """Validate ``output`` against the schema registered for ``func``.

    The domain is the package containing the command module
    (``reflink.api.<domain>.cmd_<name>``) and the command name is the
    function name without its ``cmd_`` prefix.

    Raises:
        ValueError: If no schema is registered or the output does not conform
    """
    module_parts = func.__module__.split(".")
    domain = module_parts[-2] if len(module_parts) >= 2 else ""
    command_name = func.__name__.removeprefix("cmd_")

    schema = get_output_schema(domain, command_name)
    if schema is None:
        raise ValueError(f"No output schema registered for {domain}.{command_name}")

    return schema(**output).model_dump(mode="python")
