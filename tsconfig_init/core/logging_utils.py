from __future__ import annotations

import logging


def configure_logging(verbosity: int) -> None:
    """
    Map the CLI's ``-v`` count onto the root logger level.

    no flag -> WARNING, ``-v`` -> INFO, ``-vv`` and up -> DEBUG.
    Prompts and the final confirmation go through click.echo, not logging.
    """
    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once handlers exist.
    logging.getLogger().setLevel(level)
