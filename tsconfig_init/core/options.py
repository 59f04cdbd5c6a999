from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Tuple

from .errors import InternalLogicError


class Strictness(Enum):
    OFF = "off"
    ON = "on"
    STRICT = "strict"

    @classmethod
    def parse(cls, text: str) -> "Strictness":
        key = (text or "").strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Unknown strictness: {text!r} (expected one of: off, on, strict)")


# Menu order matters: the selected index is mapped back through strictness_from_index.
STRICTNESS_LABELS: Tuple[str, str, str] = (
    "Relaxed (Few checks)",
    "Balanced (Recommended)",
    "Rigorous (Maximum safety)",
)

_BY_INDEX = (Strictness.OFF, Strictness.ON, Strictness.STRICT)


def strictness_from_index(index: int) -> Strictness:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(_BY_INDEX):
        raise InternalLogicError(f"Strictness selection out of range: {index!r}")
    return _BY_INDEX[index]


def strictness_index(strictness: Strictness) -> int:
    return _BY_INDEX.index(strictness)


@dataclass(frozen=True)
class ProjectOptions:
    """Answers collected once per run and handed to the synthesizer."""

    project_name: str = "."
    strictness: Strictness = Strictness.ON
    is_transpiler: bool = True
    is_library: bool = False
    is_monorepo: bool = False
    is_dom: bool = False

    def __post_init__(self) -> None:
        if not self.project_name:
            raise ValueError("project_name must not be empty")
        if not isinstance(self.strictness, Strictness):
            raise InternalLogicError(f"Not a strictness level: {self.strictness!r}")


def resolve_project_dir(project_name: str, cwd: Path | None = None) -> Path:
    base = Path(cwd) if cwd is not None else Path.cwd()
    if project_name == ".":
        return base
    return base / project_name
