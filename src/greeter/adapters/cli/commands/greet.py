"""Greeting and age commands.

Contents:
    * :func:`cli_greet` - Print the greeting sentence.
    * :func:`cli_age` - Print the age for a birth year.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greeter.domain.behaviors import build_greeting, compute_age

from ..constants import YEAR_ARGUMENT_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)

#: Arguments the original program greets when none are given.
DEFAULT_NAME = "Ben"
DEFAULT_BIRTH_YEAR = 1985


@click.command("greet", context_settings=YEAR_ARGUMENT_CONTEXT_SETTINGS)
@click.argument("name", default=DEFAULT_NAME)
@click.argument("birth_year", type=int, default=DEFAULT_BIRTH_YEAR)
def cli_greet(name: str, birth_year: int) -> None:
    """Greet NAME and report their age.

    BIRTH_YEAR must be an integer but does not change the reported age.
    """
    with lib_log_rich.runtime.bind(job_id="cli-greet", extra={"command": "greet"}):
        logger.info("Greeting", extra={"person": name, "birth_year": birth_year})
        click.echo(build_greeting(name, birth_year))


@click.command("age", context_settings=YEAR_ARGUMENT_CONTEXT_SETTINGS)
@click.argument("birth_year", type=int)
def cli_age(birth_year: int) -> None:
    """Print the age of someone born in BIRTH_YEAR at the reference year."""
    with lib_log_rich.runtime.bind(job_id="cli-age", extra={"command": "age"}):
        logger.info("Computing age", extra={"birth_year": birth_year})
        click.echo(compute_age(birth_year))


__all__ = ["cli_age", "cli_greet"]
