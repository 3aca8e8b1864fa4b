"""Identifier conventions for generated TypeScript.

  - operationId  -> type-style name (PascalCase) and method name (camelCase)
  - info.title   -> interface name, factory name (get<Title>), file name
  - route        -> template literal with ${param} interpolations

Examples:
  pascal("listPets")         -> "ListPets"
  camel("list_pets")         -> "listPets"
  pascal("Swagger Petstore") -> "SwaggerPetstore"
  to_template_route("/pet/{petId}/photos") -> "/pet/${petId}/photos"
"""

from __future__ import annotations

import re

_PLACEHOLDER = re.compile(r"\{([^}/]+)\}")
_TRAILING_PLACEHOLDER = re.compile(r"/\{([^}/]+)\}$")


def _split_words(name: str) -> list[str]:
    """Split camelCase, PascalCase, snake_case and spaced text into words."""
    s1 = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1 \2", name)
    s2 = re.sub(r"([a-z\d])([A-Z])", r"\1 \2", s1)
    return [w for w in re.split(r"[^A-Za-z0-9]+", s2) if w]


def pascal(name: str) -> str:
    """Convert any identifier-ish text to PascalCase."""
    return "".join(w[0].upper() + w[1:] for w in _split_words(name))


def camel(name: str) -> str:
    """Convert any identifier-ish text to camelCase."""
    words = _split_words(name)
    if not words:
        return ""
    head, *rest = words
    return head.lower() + "".join(w[0].upper() + w[1:] for w in rest)


def kebab(name: str) -> str:
    return "-".join(w.lower() for w in _split_words(name))


def params_in_path(route: str) -> list[str]:
    """Return placeholder names of a route template, in order."""
    return _PLACEHOLDER.findall(route)


def trailing_placeholder(route: str) -> str | None:
    """Return the name of the route's last segment if it is a placeholder."""
    match = _TRAILING_PLACEHOLDER.search(route)
    return match.group(1) if match else None


def strip_trailing_placeholder(route: str) -> str:
    return _TRAILING_PLACEHOLDER.sub("", route)


def to_template_route(route: str) -> str:
    """Turn ``/pet/{pet-id}`` into the template literal body ``/pet/${petId}``."""
    return _PLACEHOLDER.sub(lambda m: "${" + argument_name(m.group(1)) + "}", route)


def is_identifier(name: str) -> bool:
    return re.fullmatch(r"[A-Za-z_$][\w$]*", name) is not None


def argument_name(name: str) -> str:
    """Name a path parameter argument: ``id`` stays, ``pet-id`` -> ``petId``."""
    if is_identifier(name):
        return name
    converted = camel(name)
    return converted if is_identifier(converted) else f"_{converted}"
