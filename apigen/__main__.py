"""Entry point: python -m apigen [SPEC ...]

Reads spec/openapi.json (or the documents given), generates
generated/<title>.ts for each. Operation ids must be unique across all
documents of one run.

Environment:
  APIGEN_OUTPUT_DIR     output directory (default: generated/)
  APIGEN_MODELS_IMPORT  module the referenced types come from (default: ./models)
  APIGEN_LOG_LEVEL      logging level (default: WARNING)
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from .codegen import MODELS_IMPORT, OUTPUT_DIR, generate, generate_api
from .context_builder import GenerationState
from .errors import ApiGenError
from .loader import SPEC_PATH, load_spec


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=os.environ.get("APIGEN_LOG_LEVEL", "WARNING").upper())
    args = sys.argv[1:] if argv is None else argv
    spec_paths = [Path(a) for a in args] or [SPEC_PATH]
    output_dir = Path(os.environ.get("APIGEN_OUTPUT_DIR") or OUTPUT_DIR)
    models_import = os.environ.get("APIGEN_MODELS_IMPORT") or MODELS_IMPORT

    state = GenerationState()
    try:
        for spec_path in spec_paths:
            result = generate_api(load_spec(spec_path), state)
            generate(result, output_dir, source=spec_path.name, models_import=models_import)
            state = result.state
    except ApiGenError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
