"""Overview and describe commands - browse the schema from the command line."""

import functools
import json
import logging
from typing import Any, Dict, List

from graphql_explorer.cli.config import Config
from graphql_explorer.mcp_server.schemaAPI import (schemaOverviewAPI,
                                                   typeDetailsAPI)
from graphql_explorer.schema import TypeDescriptor

from ._runner import run_tool

logger = logging.getLogger(__name__)


def overview_command(config: Config, page_size: int = 100, page: int = 1, verbose: bool = False):
    """Print one page of the schema type list."""
    if verbose:
        logger.info(f"📚 Schema overview: page {page}, {page_size} types per page")

    run_tool(config, functools.partial(schemaOverviewAPI, page_size=page_size, page=page))


def _page_line(label: str, pagination: Dict[str, Any], total_key: str) -> str:
    return f"# {label}: page {pagination['page']}/{max(pagination['totalPages'], 1)} ({pagination[total_key]} total)"


def render_type_outline(payload: Dict[str, Any]) -> str:
    """
    Render a type details payload as an SDL-like outline.

    Args:
        payload: Parsed ``typeDetailsAPI`` response

    Returns:
        One line per member, followed by the named types the members refer to
    """
    raw_type = payload["data"]["__type"]
    if raw_type is None:
        return "Type not found"

    type_details = TypeDescriptor.from_dict(raw_type)
    header = f"{type_details.kind.value} {type_details.name}"
    if type_details.interfaces:
        header += f" implements {' & '.join(type_details.interfaces)}"
    lines = [header]
    referenced: List[str] = []

    for field in type_details.fields or []:
        args = ", ".join(f"{a.name}: {a.type.to_signature()}" for a in field.args)
        signature = f"{field.name}({args})" if args else field.name
        lines.append(f"  {signature}: {field.type.to_signature()}")
        referenced.append(field.type.named_type())
        referenced.extend(a.type.named_type() for a in field.args)

    for input_field in type_details.input_fields or []:
        lines.append(f"  {input_field.name}: {input_field.type.to_signature()}")
        referenced.append(input_field.type.named_type())

    for enum_value in type_details.enum_values or []:
        lines.append(f"  {enum_value.name}")

    for possible_type in type_details.possible_types or []:
        lines.append(f"  | {possible_type}")

    pagination = payload["pagination"]
    if type_details.fields is not None:
        lines.append(_page_line("Fields", pagination["fields"], "totalFields"))
    if type_details.enum_values is not None:
        lines.append(_page_line("Enum values", pagination["enumValues"], "totalEnumValues"))

    # Names cut off by the introspection depth come back as None
    names = [n for n in dict.fromkeys(referenced) if n and n != type_details.name]
    if names:
        lines.append(f"# Referenced types: {', '.join(names)}")
    return "\n".join(lines)


async def _type_outline(client, scope, **kwargs) -> str:
    response = await typeDetailsAPI(client, scope, **kwargs)
    try:
        payload = json.loads(response)
    except ValueError:
        # No-active-account advisory
        return response
    if "error" in payload:
        return response
    return render_type_outline(payload)


def describe_command(
    config: Config,
    type_name: str,
    fields_page_size: int = 50,
    fields_page: int = 1,
    enum_values_page_size: int = 50,
    enum_values_page: int = 1,
    outline: bool = False,
    verbose: bool = False,
):
    """Print the details of one type, as JSON or as an outline."""
    if verbose:
        logger.info(
            f"🔎 Type: {type_name} (fields page {fields_page}, {fields_page_size} per page; "
            f"enum values page {enum_values_page}, {enum_values_page_size} per page)"
        )

    run_tool(
        config,
        functools.partial(
            _type_outline if outline else typeDetailsAPI,
            type_name=type_name,
            fields_page_size=fields_page_size,
            fields_page=fields_page,
            enum_values_page_size=enum_values_page_size,
            enum_values_page=enum_values_page,
        ),
    )
