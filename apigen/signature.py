"""Build ordered method parameter lists.

Path parameters become top-level fields, the request body becomes one
named field and all query parameters are folded into a single optional
``params`` object. Every list is ordered so that required fields come
first, then optional ones, and fields carrying a default come last.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .naming import argument_name, camel, is_identifier
from .schema_parser import property_key, resolve_schema_type


@dataclass
class FieldDeclaration:
    definition: str
    required: bool = False
    default: bool = False


def order_fields(fields: list[FieldDeclaration]) -> list[FieldDeclaration]:
    """Defaults last, then required before optional, else input order."""
    return sorted(fields, key=lambda f: (f.default, not f.required))


def reserved_names(placeholders: list[str], query_params: list[dict[str, Any]]) -> set[str]:
    """Argument names already taken before the body field is named."""
    names = {argument_name(p) for p in placeholders}
    if query_params:
        names.add("params")
    return names


def body_field_name(body_type: str, taken: set[str] | None = None) -> str:
    """Name the body argument after its type: ``Pet[]`` -> ``pet``.

    Falls back to ``body``, then ``requestBody``, when the name is taken.
    """
    taken = taken or set()
    base = body_type
    while base.endswith("[]"):
        base = base[:-2]
    name = camel(base) if is_identifier(base) else ""
    for candidate in (name, "body"):
        if candidate and candidate not in taken:
            return candidate
    return "requestBody"


def _declare(
    name: str,
    param: dict[str, Any],
    refs: list[str],
    implementation: bool,
) -> FieldDeclaration:
    schema = param.get("schema") or {}
    type_expr = resolve_schema_type(schema, refs)
    required = bool(param.get("required"))
    has_default = "default" in schema

    if has_default and implementation:
        default = json.dumps(schema["default"], default=str)
        definition = f"{name}: {type_expr} = {default}"
    elif has_default or not required:
        definition = f"{name}?: {type_expr}"
    else:
        definition = f"{name}: {type_expr}"
    return FieldDeclaration(definition, required=required, default=has_default)


def path_fields(
    placeholders: list[str],
    path_params: list[dict[str, Any]],
    refs: list[str],
    implementation: bool = False,
) -> list[FieldDeclaration]:
    """One field per route placeholder, typed from its declaration."""
    declared = {p.get("name"): p for p in path_params}
    fields = []
    for raw in placeholders:
        param = declared.get(raw)
        name = argument_name(raw)
        if param is None:
            fields.append(FieldDeclaration(f"{name}: string", required=True))
        else:
            fields.append(_declare(name, param, refs, implementation))
    return fields


def query_fields(query_params: list[dict[str, Any]], refs: list[str]) -> list[FieldDeclaration]:
    # Object literal types cannot carry default values, so both renderings match.
    fields = [
        _declare(property_key(p["name"]), p, refs, implementation=False)
        for p in query_params
    ]
    return order_fields(fields)


def build_fields(
    placeholders: list[str],
    path_params: list[dict[str, Any]],
    query_params: list[dict[str, Any]],
    body_type: str,
    refs: list[str],
    implementation: bool = False,
) -> list[str]:
    """Return the ordered parameter definitions for one method."""
    fields = path_fields(placeholders, path_params, refs, implementation)

    if body_type:
        name = body_field_name(body_type, reserved_names(placeholders, query_params))
        fields.append(FieldDeclaration(f"{name}: {body_type}"))

    if query_params:
        inner = ", ".join(f.definition for f in query_fields(query_params, refs))
        fields.append(FieldDeclaration(f"params?: {{ {inner} }}"))

    return [f.definition for f in order_fields(fields)]


def build_parameter_lists(
    placeholders: list[str],
    path_params: list[dict[str, Any]],
    query_params: list[dict[str, Any]],
    body_type: str = "",
) -> tuple[list[str], list[str], list[str]]:
    """Build the interface and implementation renderings of one parameter list.

    Returns (signature, implementation, referenced type names). Both
    renderings hold the same fields in the same order.
    """
    refs: list[str] = []
    signature = build_fields(placeholders, path_params, query_params, body_type, refs)
    implementation = build_fields(
        placeholders, path_params, query_params, body_type, [], implementation=True,
    )
    return signature, implementation, refs
