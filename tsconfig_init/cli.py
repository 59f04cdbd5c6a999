from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import click

from .core.config import load_config
from .core.errors import FilesystemError, TsconfigInitError
from .core.logging_utils import configure_logging
from .core.options import Strictness, resolve_project_dir
from .core.schema import validate_tsconfig
from .core.synth import generate_tsconfig, render_tsconfig
from .core.writer import write_tsconfig
from .wizard import ClickPrompter, DefaultsPrompter, collect_options

VERSION = "0.1.0"

log = logging.getLogger(__name__)


def _non_empty(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise click.BadParameter("must not be empty")
    return value.strip() if value is not None else None


def _working_dir() -> Path:
    try:
        return Path.cwd()
    except OSError as exc:
        raise FilesystemError(f"Could not determine the current directory: {exc}") from exc


def _preset_from_flags(**flags: Any) -> Dict[str, Any]:
    preset: Dict[str, Any] = {}
    if flags["name"] is not None:
        preset["project_name"] = flags["name"]
    if flags["strictness"] is not None:
        preset["strictness"] = Strictness.parse(flags["strictness"])
    for key in ("transpiler", "library", "monorepo", "dom"):
        if flags[key] is not None:
            preset[key] = flags[key]
    return preset


@click.command("tsconfig-init", help="Initialize a TypeScript project")
@click.version_option(VERSION, prog_name="tsconfig-init")
@click.option("--name", "name", callback=_non_empty, help="Project directory name ('.' for the current directory).")
@click.option(
    "--strictness",
    type=click.Choice(["off", "on", "strict"], case_sensitive=False),
    help="Type-checking strictness level.",
)
@click.option("--transpiler/--no-transpiler", default=None, help="Emit JavaScript with tsc, or only type-check.")
@click.option("--library/--no-library", default=None, help="Emit declaration files.")
@click.option("--monorepo/--no-monorepo", default=None, help="Enable composite builds.")
@click.option("--dom/--no-dom", default=None, help="Include browser (DOM) type definitions.")
@click.option("-y", "--yes", "assume_defaults", is_flag=True, default=False, help="Do not prompt; use defaults for unanswered questions.")
@click.option("--dry-run", is_flag=True, default=False, help="Print the generated tsconfig.json instead of writing it.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (can be specified multiple times).")
def cli(
    name: Optional[str],
    strictness: Optional[str],
    transpiler: Optional[bool],
    library: Optional[bool],
    monorepo: Optional[bool],
    dom: Optional[bool],
    assume_defaults: bool,
    dry_run: bool,
    verbose: int,
) -> None:
    configure_logging(verbosity=verbose)

    preset = _preset_from_flags(
        name=name,
        strictness=strictness,
        transpiler=transpiler,
        library=library,
        monorepo=monorepo,
        dom=dom,
    )
    prompter = DefaultsPrompter() if assume_defaults else ClickPrompter()

    try:
        cwd = _working_dir()
        options = collect_options(prompter, defaults=load_config(cwd), preset=preset)
        project_dir = resolve_project_dir(options.project_name, cwd=cwd)
        tsconfig = generate_tsconfig(options)
        if dry_run:
            validate_tsconfig(tsconfig)
            click.echo(render_tsconfig(tsconfig), nl=False)
            return
        write_tsconfig(project_dir, tsconfig)
    except TsconfigInitError as exc:
        log.debug("tsconfig-init failed", exc_info=True)
        raise click.ClickException(str(exc)) from exc

    click.echo(f"tsconfig.json has been generated in {project_dir}")


def main(argv=None):
    return cli.main(args=argv, prog_name="tsconfig-init")


if __name__ == "__main__":
    main()
