from __future__ import annotations

import json
import logging
from typing import Any, Dict

from .errors import SerializationError
from .options import ProjectOptions, Strictness

log = logging.getLogger(__name__)

BASE_OPTIONS: Dict[str, Any] = {
    "esModuleInterop": True,
    "skipLibCheck": True,
    "target": "es2022",
    "allowJs": True,
    "resolveJsonModule": True,
    "moduleDetection": "force",
    "isolatedModules": True,
    "verbatimModuleSyntax": True,
}

STRICTNESS_OPTIONS: Dict[Strictness, Dict[str, Any]] = {
    Strictness.OFF: {},
    Strictness.ON: {"strict": True},
    Strictness.STRICT: {
        "strict": True,
        "noUncheckedIndexedAccess": True,
        "noImplicitOverride": True,
    },
}

TRANSPILER_OPTIONS: Dict[str, Any] = {"module": "NodeNext", "outDir": "dist", "sourceMap": True}
CHECK_ONLY_OPTIONS: Dict[str, Any] = {"module": "preserve", "noEmit": True}
MONOREPO_OPTIONS: Dict[str, Any] = {"composite": True, "declarationMap": True}

LIB_NODE = ["es2022"]
LIB_DOM = ["es2022", "dom", "dom.iterable"]


def generate_tsconfig(options: ProjectOptions) -> Dict[str, Any]:
    """
    Build the tsconfig document for ``options``.

    Overlays are applied in a fixed order onto a copy of BASE_OPTIONS, so
    the resulting key order is stable and later overlays win on collision.
    """
    compiler_options: Dict[str, Any] = dict(BASE_OPTIONS)

    # Strictness
    compiler_options.update(STRICTNESS_OPTIONS[options.strictness])

    # Transpiling
    if options.is_transpiler:
        compiler_options.update(TRANSPILER_OPTIONS)
    else:
        compiler_options.update(CHECK_ONLY_OPTIONS)

    # Library
    if options.is_library:
        compiler_options["declaration"] = True

    # Monorepo
    if options.is_monorepo:
        compiler_options.update(MONOREPO_OPTIONS)

    # DOM
    compiler_options["lib"] = list(LIB_DOM if options.is_dom else LIB_NODE)

    log.debug("Synthesized %d compiler options for %s", len(compiler_options), options)
    return {"compilerOptions": compiler_options}


def render_tsconfig(document: Dict[str, Any]) -> str:
    try:
        return json.dumps(document, indent=2, allow_nan=False) + "\n"
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Could not encode tsconfig as JSON: {exc}") from exc
