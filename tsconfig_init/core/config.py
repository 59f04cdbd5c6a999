from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from .errors import ConfigError
from .schema import validate_defaults

log = logging.getLogger(__name__)

CONFIG_FILENAME = ".tsconfig-init.yaml"

DEFAULTS: Dict[str, Any] = {
    "project_name": ".",
    "strictness": "on",
    "transpiler": True,
    "library": False,
    "monorepo": False,
    "dom": False,
}


def _normalize(data: Dict[str, Any]) -> Dict[str, Any]:
    out = {k: v for k, v in data.items() if v is not None}
    strictness = out.get("strictness")
    # YAML 1.1 reads bare on/off as booleans.
    if isinstance(strictness, bool):
        out["strictness"] = "on" if strictness else "off"
    elif isinstance(strictness, str):
        out["strictness"] = strictness.strip().lower()
    if isinstance(out.get("project_name"), str):
        out["project_name"] = out["project_name"].strip()
    return out


def load_config(root: Path | None = None) -> Dict[str, Any]:
    """
    Return prompt defaults, overlaid with ``.tsconfig-init.yaml`` from ``root``.

    A missing file yields the built-in defaults. A broken one is reported as
    a warning and ignored.
    """
    root = root or Path.cwd()
    cfg_path = root / CONFIG_FILENAME
    if not cfg_path.exists():
        return dict(DEFAULTS)
    try:
        data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid defaults file: expected a mapping, got {type(data).__name__}")
        data = _normalize(data)
        validate_defaults(data)
    except (OSError, yaml.YAMLError, ConfigError) as exc:
        log.warning("Ignoring %s: %s", cfg_path, exc)
        return dict(DEFAULTS)
    out = dict(DEFAULTS)
    out.update(data)
    log.info("Loaded prompt defaults from %s", cfg_path)
    return out
