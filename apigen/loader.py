"""Load an OpenAPI document and look things up in it.

Reads spec/openapi.json by default. YAML documents are accepted too.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .errors import SchemaLoadError, UnresolvableReferenceError

SPEC_PATH = Path(__file__).parent.parent / "spec" / "openapi.json"

_COMPONENTS_PREFIX = "#/components/"


def load_spec(path: Path | None = None) -> dict[str, Any]:
    """Load the OpenAPI document from disk."""
    spec_file = Path(path or SPEC_PATH)
    try:
        with open(spec_file) as f:
            if spec_file.suffix in (".yaml", ".yml"):
                return yaml.safe_load(f)
            return json.load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise SchemaLoadError(str(spec_file), e) from e


def get_paths(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract paths from the spec."""
    return spec.get("paths") or {}


def get_components(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract the components registry from the spec."""
    return spec.get("components") or {}


def get_title(spec: dict[str, Any]) -> str:
    return spec.get("info", {}).get("title", "")


def is_reference(obj: Any) -> bool:
    return isinstance(obj, dict) and "$ref" in obj


def _unescape(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


def resolve_ref(components: dict[str, Any], ref: str) -> dict[str, Any]:
    """Resolve a ``#/components/<category>/<name>`` pointer.

    Raises UnresolvableReferenceError when the pointer is malformed or
    the entry is missing.
    """
    if not ref.startswith(_COMPONENTS_PREFIX):
        raise UnresolvableReferenceError(ref, "only #/components/ references are supported")

    parts = ref[len(_COMPONENTS_PREFIX):].split("/")
    if len(parts) != 2 or not all(parts):
        raise UnresolvableReferenceError(ref, "expected #/components/<category>/<name>")

    category, name = (_unescape(p) for p in parts)
    entry = (components.get(category) or {}).get(name)
    if entry is None:
        raise UnresolvableReferenceError(ref, f"no '{name}' in components.{category}")
    return entry
