"""
Interactive collection of the answers that drive tsconfig generation.

Questions are asked in a fixed order: name, strictness, transpiler,
library, monorepo, DOM. The actual terminal interaction lives behind a
small prompter object so the collector can run unattended (``--yes``) or
be driven from tests with canned answers.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

import click

from .core.config import DEFAULTS
from .core.errors import InputAborted
from .core.options import (
    STRICTNESS_LABELS,
    ProjectOptions,
    Strictness,
    strictness_from_index,
    strictness_index,
)

log = logging.getLogger(__name__)

NAME_QUESTION = "What is the name of your project?"
STRICTNESS_QUESTION = "How strict should the typescript compiler be?"
TRANSPILER_QUESTION = "Are you transpiling using tsc?"
LIBRARY_QUESTION = "Are you building a library?"
MONOREPO_QUESTION = "Are you building for a library in a monorepo?"
DOM_QUESTION = "Is your project for a dom (browser) environment?"


class ClickPrompter:
    """Asks questions on the terminal via click."""

    def text(self, question: str, default: str) -> str:
        value = click.prompt(question, default=default, show_default=True)
        return str(value).strip() or default

    def select(self, question: str, labels: Sequence[str], default_index: int) -> int:
        click.echo(question)
        for i, label in enumerate(labels, start=1):
            click.echo(f"  [{i}] {label}")
        choice = click.prompt(
            "Choice",
            type=click.IntRange(1, len(labels)),
            default=default_index + 1,
            show_default=True,
        )
        return choice - 1

    def confirm(self, question: str, default: bool) -> bool:
        return click.confirm(question, default=default)


class DefaultsPrompter:
    """Answers every question with its default, for non-interactive runs."""

    def text(self, question: str, default: str) -> str:
        return default

    def select(self, question: str, labels: Sequence[str], default_index: int) -> int:
        return default_index

    def confirm(self, question: str, default: bool) -> bool:
        return default


def collect_options(
    prompter: Any,
    defaults: Optional[Dict[str, Any]] = None,
    preset: Optional[Dict[str, Any]] = None,
) -> ProjectOptions:
    """
    Ask for every answer not already in ``preset`` and build ProjectOptions.

    ``defaults`` uses the keys of ``core.config.DEFAULTS``; ``preset`` uses
    the same keys, with ``strictness`` given as a Strictness member.
    Raises InputAborted if the operator cancels or input runs dry.
    """
    merged = dict(DEFAULTS)
    merged.update(defaults or {})
    preset = preset or {}

    try:
        if "project_name" in preset:
            project_name = preset["project_name"]
        else:
            project_name = prompter.text(NAME_QUESTION, str(merged["project_name"]))

        if "strictness" in preset:
            strictness = preset["strictness"]
        else:
            default_idx = strictness_index(Strictness.parse(merged["strictness"]))
            idx = prompter.select(STRICTNESS_QUESTION, STRICTNESS_LABELS, default_idx)
            strictness = strictness_from_index(idx)

        answers = {}
        for key, question in (
            ("transpiler", TRANSPILER_QUESTION),
            ("library", LIBRARY_QUESTION),
            ("monorepo", MONOREPO_QUESTION),
            ("dom", DOM_QUESTION),
        ):
            if key in preset:
                answers[key] = bool(preset[key])
            else:
                answers[key] = bool(prompter.confirm(question, bool(merged[key])))
    except (click.Abort, EOFError, KeyboardInterrupt) as exc:
        raise InputAborted("Input aborted before all questions were answered") from exc

    options = ProjectOptions(
        project_name=project_name,
        strictness=strictness,
        is_transpiler=answers["transpiler"],
        is_library=answers["library"],
        is_monorepo=answers["monorepo"],
        is_dom=answers["dom"],
    )
    log.debug("Collected %s", options)
    return options
