"""Monotrace can be run from the command line (if correctly installed) using the
command interface inspired by git.

The Command Line Interface is implemented using the Click_ library, which
allows both effective definition of new commands and finer parsing of the
command line arguments. The interface consists of the following commands:

    1. ``parse``: parses the exception dump from the file (or from the
    standard input) and outputs the parsed tree in one of the supported
    formats (``tree``, ``table``, ``yaml``, ``json`` or ``mono``).

    2. ``config``: group of commands ``config get`` and ``config set``, which
    inspect and modify the shared configuration of monotrace.

.. _Click: https://click.palletsprojects.com/
"""
from __future__ import annotations

# Standard Imports
from typing import Optional, TextIO

# Third-Party Imports
import click

# Monotrace Imports
import monotrace
from monotrace.logic import config
from monotrace.parse import parse as parse_dump
from monotrace.utils import decorators, log, streams
from monotrace.utils.exceptions import (
    InvalidParameterException,
    MalformedExceptionTextException,
    MissingConfigSectionException,
)
from monotrace.utils.structs import ExceptionResult
from monotrace.view import convert, table, text

OUTPUT_FORMATS: list[str] = ["tree", "table", "yaml", "json", "mono"]


def print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    """Prints current version of Monotrace and ends"""
    if value:
        click.echo(f"Monotrace {monotrace.__version__}")
        raise click.exceptions.Exit(0)


def render(result: ExceptionResult, output_format: str) -> str:
    """Renders the parsed exception in the given format

    :param ExceptionResult result: root of the parsed chain
    :param str output_format: one of the supported output formats
    :return: rendered exception
    """
    if output_format == "tree":
        return text.render_tree(result)
    elif output_format == "table":
        table_format = config.lookup_key_recursively("format.table", "simple")
        return table.frames_to_table(result, table_format)
    elif output_format == "yaml":
        return streams.yaml_to_string(convert.result_to_dict(result))
    elif output_format == "json":
        return streams.json_to_string(convert.result_to_dict(result))
    elif output_format == "mono":
        return text.format_result(result)
    raise InvalidParameterException("format", output_format, f"choose from {OUTPUT_FORMATS}")


@click.group()
@click.option("--no-color", "-nc", default=False, is_flag=True, help="Disables the colored output.")
@click.option(
    "--verbose",
    "-v",
    count=True,
    default=0,
    help="Increases the verbosity of the standard output. Verbosity "
    "is incremental, and each level increases the extent of output.",
)
@click.option(
    "--version",
    help="Prints the current version of Monotrace.",
    is_eager=True,
    is_flag=True,
    default=False,
    expose_value=False,
    callback=print_version,
)
def cli(no_color: bool = False, verbose: int = 0) -> None:
    """Monotrace parses the exceptions of Mono (e.g. Unity engine games) into the structured tree.

    In order to parse the exception stored in the file run the following::

        monotrace parse crash.log

    The exception can be passed through the standard input as well::

        cat crash.log | monotrace parse --format yaml
    """
    decorators.reset_singletons()
    log.COLOR_OUTPUT = not no_color
    log.configure_logging(verbose)


@cli.command()
@click.argument("dump", type=click.File("r"), default="-", metavar="<file>")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Sets the format of the output (by default :ckey:`format.output`).",
)
@click.option(
    "--keep-newlines",
    "-k",
    is_flag=True,
    default=False,
    help="Does not normalize the windows line endings before parsing.",
)
def parse(dump: TextIO, output_format: Optional[str], keep_newlines: bool) -> None:
    """Parses the exception dump stored in <file> (or standard input) and prints the result.

    The dump is expected to consist of the header (optional log message, the type of the
    exception and its message, followed by the chain of inner exceptions) and the stack of the
    frames, in the format produced by Mono.
    """
    if output_format:
        config.runtime().set("format.output", output_format)
    if keep_newlines:
        config.runtime().set("parse.normalize_newlines", False)

    normalize = config.lookup_key_recursively("parse.normalize_newlines", True)
    content = streams.read_dump(dump, normalize_newlines=bool(normalize))
    try:
        result = parse_dump(content)
    except MalformedExceptionTextException as exc:
        log.error(str(exc), raised_exception=exc)
        return

    if result is None:
        log.warn("nothing to parse: the header of the exception is empty")
        return

    log.msg_to_file(f"parsed {result.depth} chained exceptions", log.VERBOSE_INFO)
    click.echo(render(result, config.lookup_key_recursively("format.output", "tree")))


@cli.group("config")
def config_group() -> None:
    """Manages the shared configuration of monotrace.

    The configuration is stored in ``shared.yml`` in the directory given by
    ``MONOTRACE_CONFIG_DIR`` environment variable (by default ``~/.config/monotrace``).
    """


@config_group.command("get")
@click.argument("key", metavar="<key>")
def config_get(key: str) -> None:
    """Looks up the given <key> in the configuration and prints its value."""
    try:
        value = config.lookup_key_recursively(key)
        click.echo(f"{key}: {value}")
    except (MissingConfigSectionException, InvalidParameterException) as exc:
        log.error(str(exc), raised_exception=exc)


@config_group.command("set")
@click.argument("key", metavar="<key>")
@click.argument("value", metavar="<value>")
def config_set(key: str, value: str) -> None:
    """Sets the <key> in the shared configuration to the given <value>."""
    try:
        config.shared().set(key, streams.load_yaml_scalar(value))
        log.minor_status(f"'{key}'", status=log.highlight(value), sep="set to")
    except InvalidParameterException as exc:
        log.error(str(exc), raised_exception=exc)


def launch_cli() -> None:
    """Runs the command line interface of monotrace"""
    cli()


if __name__ == "__main__":
    launch_cli()
