"""Render templates and write generated output.

Takes the context from context_builder and produces the TypeScript
interface + factory text, then writes it to generated/<title>.ts.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jinja2

from .context_builder import GenerationState, build_context
from .naming import kebab

TEMPLATE_DIR = Path(__file__).parent / "templates"
OUTPUT_DIR = Path(__file__).parent.parent / "generated"
MODELS_IMPORT = "./models"


@dataclass
class GeneratedApi:
    """Rendered bindings for one document."""

    title: str
    output: str
    imports: list[str]
    operation_count: int
    state: GenerationState


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def render_api(context: dict[str, Any]) -> str:
    """Render the interface and factory declarations."""
    return _environment().get_template("api.ts.j2").render(**context)


def generate_api(
    spec: dict[str, Any],
    state: GenerationState | None = None,
) -> GeneratedApi:
    """Generate the bindings text and import list for one document.

    Pass the ``state`` of a previous result to detect operation ids
    duplicated across documents.
    """
    context = build_context(spec, state)
    return GeneratedApi(
        title=context["title"],
        output=render_api(context),
        imports=context["imports"],
        operation_count=context["operation_count"],
        state=context["state"],
    )


def render_module(
    result: GeneratedApi,
    source: str = "openapi",
    models_import: str = MODELS_IMPORT,
) -> str:
    """Wrap generated bindings with their import statements."""
    template = _environment().get_template("module.ts.j2")
    return template.render(
        api=result.output,
        imports=result.imports,
        models_import=models_import,
        source=source,
    )


def generate(
    result: GeneratedApi,
    output_dir: Path | None = None,
    source: str = "openapi",
    models_import: str = MODELS_IMPORT,
) -> Path:
    """Write the module for ``result`` to <output_dir>/<title>.ts."""
    out_dir = Path(output_dir or OUTPUT_DIR)
    out_dir.mkdir(parents=True, exist_ok=True)
    output_path = out_dir / f"{kebab(result.title)}.ts"
    output_path.write_text(render_module(result, source, models_import))

    print(f"Generated {output_path} ({result.operation_count} operations)")
    return output_path
