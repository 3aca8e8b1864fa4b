"""Build the template context from a parsed OpenAPI document.

Walks every route and verb, turns each operation into a method
descriptor (name, ordered parameters, return type, call shape) and
collects the type names the generated code has to import.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from .errors import DuplicateOperationIdentifierError, MissingOperationIdentifierError
from .loader import get_components, get_paths, get_title
from .naming import (
    camel,
    params_in_path,
    pascal,
    strip_trailing_placeholder,
    to_template_route,
    trailing_placeholder,
)
from .schema_parser import (
    GENERAL_TS_TYPES,
    classify_parameters,
    is_success,
    resolve_res_req_types,
)
from .signature import body_field_name, build_parameter_lists, reserved_names

logger = logging.getLogger(__name__)

# Verbs that get a generated method, in the order they are accepted
GENERATED_VERBS = ("get", "post", "patch", "put", "delete")

_OTHER_VERBS = {"head", "options", "trace"}

# axios.get/delete take (url, config): a body has to travel as config.data
_VERBS_WITHOUT_BODY_ARG = {"get", "delete"}

DEFAULT_BINARY_ACCEPT = "application/pdf"

RESPONSE_SUFFIX = "Response"


@dataclass(frozen=True)
class GenerationState:
    """Operation ids generated so far in one run."""

    operation_ids: tuple[str, ...] = ()


def _binary_accept(media_type: str | None) -> str:
    if not media_type or "*" in media_type:
        return DEFAULT_BINARY_ACCEPT
    return media_type


def _summary(operation: dict[str, Any]) -> str:
    summary = (operation.get("summary") or "").strip()
    return summary.splitlines()[0] if summary else ""


def build_operation(
    operation: dict[str, Any],
    verb: str,
    route: str,
    operation_ids: Sequence[str],
    route_params: list[dict[str, Any]] | None = None,
    components: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Describe the generated method for one verb + route.

    ``operation_ids`` holds the ids already generated; it is only read.
    """
    operation_id = operation.get("operationId")
    if not operation_id:
        raise MissingOperationIdentifierError(verb, route)
    if operation_id in operation_ids:
        raise DuplicateOperationIdentifierError(operation_id, verb, route)

    placeholders = params_in_path(route)
    call_route = route

    # DELETE: the trailing resource id is not part of the generated signature
    if verb == "delete":
        last = trailing_placeholder(route)
        if last:
            placeholders = [p for p in placeholders if p != last]
            call_route = strip_trailing_placeholder(route)

    type_name = pascal(operation_id)

    success = [
        (code, response)
        for code, response in (operation.get("responses") or {}).items()
        if is_success(code)
    ]
    response = resolve_res_req_types(success)
    body = resolve_res_req_types([("body", operation.get("requestBody"))])

    groups = classify_parameters(
        components or {}, route_params, operation.get("parameters"),
    )
    signature, implementation, param_refs = build_parameter_lists(
        placeholders, groups["path"], groups["query"], body.expression,
    )

    if response.is_inline_object:
        return_type = type_name + RESPONSE_SUFFIX
        response_imports = [return_type]
    else:
        return_type = response.expression or "void"
        response_imports = response.references

    body_name = None
    if body.expression:
        body_name = body_field_name(
            body.expression, reserved_names(placeholders, groups["query"]),
        )

    return {
        "operation_id": operation_id,
        "type_name": type_name,
        "method_name": camel(type_name),
        "summary": _summary(operation),
        "verb": verb,
        "route": to_template_route(call_route),
        "signature": signature,
        "implementation": implementation,
        "return_type": return_type,
        "call": {
            "body": body_name,
            "body_in_config": bool(body_name) and verb in _VERBS_WITHOUT_BODY_ARG,
            "params": bool(groups["query"]),
            "binary": response.is_binary,
            "accept": _binary_accept(response.media_type) if response.is_binary else None,
        },
        "imports": [*response_imports, *body.references, *param_refs],
    }


def finalize_imports(imports: list[str]) -> list[str]:
    """Drop blanks and built-ins, collapse duplicates, keep first-seen order."""
    result: list[str] = []
    for name in imports:
        if not name or name.lower() in GENERAL_TS_TYPES or name in result:
            continue
        result.append(name)
    return result


def build_context(
    spec: dict[str, Any],
    state: GenerationState | None = None,
) -> dict[str, Any]:
    """Build the full template context for one document.

    The returned context carries a new GenerationState with this
    document's operation ids appended; ``state`` itself is left alone.
    """
    state = state or GenerationState()
    components = get_components(spec)
    seen = list(state.operation_ids)
    operations: list[dict[str, Any]] = []
    imports: list[str] = []

    for route, path_item in get_paths(spec).items():
        route_params = path_item.get("parameters")
        for verb, operation in path_item.items():
            if verb not in GENERATED_VERBS:
                if verb in _OTHER_VERBS:
                    logger.debug(f"Skipping {verb} {route}: verb is not generated")
                continue

            op = build_operation(operation, verb, route, seen, route_params, components)
            logger.debug(f"Generated {op['method_name']} for {verb} {route}")
            seen.append(op["operation_id"])
            operations.append(op)
            imports.extend(op["imports"])

    title = pascal(get_title(spec)) or "Api"

    return {
        "title": title,
        "factory_name": f"get{title}",
        "operations": operations,
        "operation_count": len(operations),
        "imports": finalize_imports(imports),
        "state": GenerationState(tuple(seen)),
    }
