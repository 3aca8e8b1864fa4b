"""Errors raised while generating API bindings.

All of them abort the current generation call. Nothing is logged here;
callers decide how to report.
"""

from __future__ import annotations


class ApiGenError(Exception):
    """Base class for every apigen error."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SchemaLoadError(ApiGenError):
    """The API document could not be read from disk."""

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load schema from '{source}'"
        if cause:
            message += f": {cause}"
        super().__init__(message)


class MissingOperationIdentifierError(ApiGenError):
    """An operation has no operationId."""

    def __init__(self, verb: str, route: str):
        self.verb = verb
        self.route = route
        super().__init__(
            f"Every path must have an operationId - No operationId set for {verb} {route}"
        )


class DuplicateOperationIdentifierError(ApiGenError):
    """An operationId was already generated in this run."""

    def __init__(self, operation_id: str, verb: str, route: str):
        self.operation_id = operation_id
        self.verb = verb
        self.route = route
        super().__init__(
            f'"{operation_id}" is duplicated in your schema definition! ({verb} {route})'
        )


class UnresolvableReferenceError(ApiGenError):
    """A $ref does not point at an entry of the components registry."""

    def __init__(self, reference: str, reason: str | None = None):
        self.reference = reference
        self.reason = reason
        message = f"Failed to resolve reference '{reference}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
