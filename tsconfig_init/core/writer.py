from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from .errors import FilesystemError
from .schema import validate_tsconfig
from .synth import render_tsconfig

log = logging.getLogger(__name__)

TSCONFIG_FILENAME = "tsconfig.json"


def write_tsconfig(project_dir: Path, document: Dict[str, Any]) -> Path:
    """Write ``document`` to ``project_dir/tsconfig.json``, replacing any existing file."""
    validate_tsconfig(document)
    rendered = render_tsconfig(document)

    project_dir = Path(project_dir)
    try:
        project_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(f"Could not create directory {project_dir}: {exc}") from exc

    out_path = project_dir / TSCONFIG_FILENAME
    try:
        out_path.write_text(rendered, encoding="utf-8")
    except OSError as exc:
        raise FilesystemError(f"Could not write {out_path}: {exc}") from exc
    log.info("Wrote %s (%d bytes)", out_path, len(rendered))
    return out_path
