"""Derive TypeScript type expressions and classify parameters.

Handles:
- $ref names (schemas, responses, requestBodies)
- allOf/oneOf/anyOf composition
- enums as literal unions
- inline objects, additionalProperties maps, arrays
- nullable
- binary content (the BlobPart sentinel)
- path/query grouping of operation and route-level parameters
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from .loader import is_reference, resolve_ref
from .naming import is_identifier, pascal

# Sentinel type for raw byte responses
BINARY_TYPE = "BlobPart"

# Lowercased names that are TypeScript built-ins and never imported
GENERAL_TS_TYPES = {
    "any",
    "array",
    "blob",
    "blobpart",
    "boolean",
    "date",
    "never",
    "null",
    "number",
    "object",
    "string",
    "undefined",
    "unknown",
    "void",
}

_REF_SUFFIXES: dict[str, str] = {
    "responses": "Response",
    "requestBodies": "RequestBody",
}

_PARAMETER_LOCATIONS = ("path", "query")


@dataclass
class TypeExpression:
    """A resolved type expression and what it needs imported."""

    expression: str
    references: list[str] = field(default_factory=list)
    media_type: str | None = None

    @property
    def is_inline_object(self) -> bool:
        return "{" in self.expression

    @property
    def is_binary(self) -> bool:
        return self.expression == BINARY_TYPE


def ref_type_name(ref: str) -> str:
    """Map a $ref pointer to the TypeScript type name it stands for."""
    parts = ref.split("/")
    name = pascal(parts[-1].replace("~1", "/").replace("~0", "~"))
    category = parts[-2] if len(parts) >= 2 else ""
    return name + _REF_SUFFIXES.get(category, "")


def _unique(items: list[str]) -> list[str]:
    seen: list[str] = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen


def _literal(value: Any) -> str:
    return json.dumps(value, default=str)


def property_key(name: str) -> str:
    return name if is_identifier(name) else json.dumps(name)


def _object_type(schema: dict[str, Any], refs: list[str]) -> str:
    required = set(schema.get("required", []))
    fields = []
    for name, sub in (schema.get("properties") or {}).items():
        marker = "" if name in required else "?"
        fields.append(f"{property_key(name)}{marker}: {resolve_schema_type(sub, refs)}")

    additional = schema.get("additionalProperties")
    if additional:
        value = "any" if additional is True else resolve_schema_type(additional, refs)
        fields.append(f"[key: string]: {value}")

    if not fields:
        return "{}"
    return "{ " + "; ".join(fields) + " }"


def _array_type(schema: dict[str, Any], refs: list[str]) -> str:
    item = resolve_schema_type(schema.get("items") or {}, refs)
    if " | " in item or " & " in item:
        return f"({item})[]"
    return f"{item}[]"


def resolve_schema_type(schema: dict[str, Any] | None, refs: list[str]) -> str:
    """Resolve an OpenAPI schema to a TypeScript type expression.

    Every named type met on the way is appended to ``refs``.
    """
    if not schema:
        return "any"

    if "$ref" in schema:
        name = ref_type_name(schema["$ref"])
        refs.append(name)
        return name

    if "allOf" in schema:
        result = " & ".join(_unique([resolve_schema_type(s, refs) for s in schema["allOf"]]))
    elif "oneOf" in schema or "anyOf" in schema:
        subs = schema.get("oneOf") or schema.get("anyOf") or []
        result = " | ".join(_unique([resolve_schema_type(s, refs) for s in subs]))
    elif "enum" in schema:
        result = " | ".join(_literal(v) for v in schema["enum"])
    else:
        schema_type = schema.get("type")
        if schema_type in ("integer", "number"):
            result = "number"
        elif schema_type == "boolean":
            result = "boolean"
        elif schema_type == "string":
            result = BINARY_TYPE if schema.get("format") == "binary" else "string"
        elif schema_type == "array":
            result = _array_type(schema, refs)
        elif schema_type == "object" or "properties" in schema or "additionalProperties" in schema:
            result = _object_type(schema, refs)
        else:
            result = "any"

    if schema.get("nullable"):
        result = f"{result} | null"
    return result


def _pick_media_type(content: dict[str, Any]) -> str | None:
    for media_type in content:
        if "json" in media_type:
            return media_type
    return next(iter(content), None)


def _content_type(media_type: str, media: dict[str, Any], refs: list[str]) -> str:
    schema = media.get("schema")
    if schema:
        return resolve_schema_type(schema, refs)
    if "json" in media_type:
        return "any"
    if media_type.startswith("text/"):
        return "string"
    return BINARY_TYPE


def resolve_res_req_types(entries: list[tuple[str, Any]]) -> TypeExpression:
    """Union the types of (name, response-or-requestBody) pairs.

    Entries whose object is None are skipped; no entries at all gives an
    empty expression.
    """
    refs: list[str] = []
    expressions: list[str] = []
    media_type = None

    for _, entry in entries:
        if entry is None:
            continue
        if is_reference(entry):
            name = ref_type_name(entry["$ref"])
            refs.append(name)
            expression = name
        else:
            content = entry.get("content") or {}
            chosen = _pick_media_type(content)
            if chosen is None:
                expression = "void"
            else:
                expression = _content_type(chosen, content[chosen] or {}, refs)
                media_type = media_type or chosen
        expressions.append(expression)

    return TypeExpression(" | ".join(_unique(expressions)), refs, media_type)


def is_success(status_code: Any) -> bool:
    return str(status_code).startswith("2")


def resolve_parameter(components: dict[str, Any], param: dict[str, Any]) -> dict[str, Any]:
    if is_reference(param):
        return resolve_ref(components, param["$ref"])
    return param


def classify_parameters(
    components: dict[str, Any],
    route_params: list[dict[str, Any]] | None,
    operation_params: list[dict[str, Any]] | None,
) -> dict[str, list[dict[str, Any]]]:
    """Group resolved parameters into ``path`` and ``query`` buckets.

    Operation-level parameters override route-level ones with the same
    name and location. Other locations (header, cookie) are dropped.
    """
    merged: dict[tuple[Any, Any], dict[str, Any]] = {}
    for param in [*(route_params or []), *(operation_params or [])]:
        resolved = resolve_parameter(components, param)
        merged[(resolved.get("name"), resolved.get("in"))] = resolved

    groups: dict[str, list[dict[str, Any]]] = {loc: [] for loc in _PARAMETER_LOCATIONS}
    for param in merged.values():
        location = param.get("in")
        if location in groups:
            groups[location].append(param)
    return groups
