from __future__ import annotations

from typing import Any, Dict

import jsonschema

from .errors import ConfigError, SerializationError

_BOOL = {"type": "boolean"}

TSCONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "compilerOptions": {
            "type": "object",
            "properties": {
                "esModuleInterop": _BOOL,
                "skipLibCheck": _BOOL,
                "target": {"type": "string"},
                "allowJs": _BOOL,
                "resolveJsonModule": _BOOL,
                "moduleDetection": {"enum": ["auto", "legacy", "force"]},
                "isolatedModules": _BOOL,
                "verbatimModuleSyntax": _BOOL,
                "strict": _BOOL,
                "noUncheckedIndexedAccess": _BOOL,
                "noImplicitOverride": _BOOL,
                "module": {"enum": ["NodeNext", "preserve"]},
                "outDir": {"type": "string"},
                "sourceMap": _BOOL,
                "noEmit": _BOOL,
                "declaration": _BOOL,
                "composite": _BOOL,
                "declarationMap": _BOOL,
                "lib": {"type": "array", "items": {"type": "string"}, "minItems": 1},
            },
            "required": ["target", "module", "lib"],
            "additionalProperties": False,
        },
    },
    "required": ["compilerOptions"],
    "additionalProperties": False,
}

DEFAULTS_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "project_name": {"type": "string", "minLength": 1},
        "strictness": {"enum": ["off", "on", "strict"]},
        "transpiler": _BOOL,
        "library": _BOOL,
        "monorepo": _BOOL,
        "dom": _BOOL,
    },
    "additionalProperties": False,
}


def validate_tsconfig(data: Dict[str, Any]) -> None:
    try:
        jsonschema.validate(instance=data, schema=TSCONFIG_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise SerializationError(f"Generated tsconfig is malformed: {exc.message}") from exc


def validate_defaults(data: Dict[str, Any]) -> None:
    try:
        jsonschema.validate(instance=data, schema=DEFAULTS_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise ConfigError(f"Invalid defaults file: {exc.message}") from exc
