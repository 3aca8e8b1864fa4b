"""Generate typed axios client bindings from OpenAPI documents."""
