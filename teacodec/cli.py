"""
TeaCodec CLI
=============

Click-based command-line interface for the TeaCodec substitution codec.

Usage::

    python -m teacodec encode "Original Text 1337"
    python -m teacodec decode "168122113111113118105116"
    python -m teacodec --alphabet "abc...xyz" --offset 200 table
    python -m teacodec keygen --length 80
    python -m teacodec demo

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click
from pydantic import BaseModel

from shared.config import TeaConfig
from shared.console import TeaConsole
from shared.logger import TeaLogger

from teacodec import __version__
from teacodec.core.engine import TeaCodec
from teacodec.core.models import GeneratedKey, Operation, RoundTripResult
from teacodec.errors import TeaCodecError
from teacodec.output.console import CodecConsoleOutput
from teacodec.output.report import CodecReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="TOML configuration file (default: ./teacodec.toml, if present).",
)
@click.option(
    "--alphabet", "-a",
    default=None,
    help="Base alphabet (overrides the configuration file).",
)
@click.option(
    "--offset", "-k",
    type=int,
    default=None,
    help="Key offset (overrides the configuration file).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write JSON output to this file instead of stdout.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output. Errors still go to stderr.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    alphabet: Optional[str],
    offset: Optional[int],
    output: str,
    output_file: Optional[str],
    quiet: bool,
    verbose: bool,
) -> None:
    """TeaCodec -- positional substitution codec.

    Encode text as fixed-width three-digit codes and decode it back.
    """
    ctx.ensure_object(dict)

    tea_config = TeaConfig.load(config)
    if alphabet is not None:
        tea_config.codec.alphabet = alphabet
    if offset is not None:
        tea_config.codec.offset = offset

    settings = tea_config.global_settings
    log_level = "DEBUG" if verbose or settings.debug else settings.log_level
    logger = TeaLogger(
        "engine",
        log_level=log_level,
        log_file=settings.log_file,
        json_logs=settings.log_json,
    )

    console = TeaConsole(quiet=quiet)
    ctx.obj["config"] = tea_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["console"] = console
    ctx.obj["display"] = CodecConsoleOutput(console)
    ctx.obj["reporter"] = CodecReportGenerator()

    if not quiet and output == "console":
        console.banner(version=__version__)

    try:
        ctx.obj["codec"] = TeaCodec.from_config(tea_config, logger=logger)
    except TeaCodecError as exc:
        _fail(ctx, exc)


def _fail(ctx: click.Context, exc: TeaCodecError) -> None:
    """Report *exc* in the selected format and exit with status 1."""
    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps(exc.to_dict(), indent=2, ensure_ascii=False))
    else:
        ctx.obj["display"].display_error(exc)
    ctx.exit(1)


def _handle_json(ctx: click.Context, payload: BaseModel) -> None:
    reporter: CodecReportGenerator = ctx.obj["reporter"]
    output_file = ctx.obj["output_file"]

    if output_file:
        path = reporter.generate_json(payload, Path(output_file))
        ctx.obj["console"].success(f"JSON report saved to: {path}")
    else:
        click.echo(reporter.to_json(payload))


def _run(ctx: click.Context, operation: Operation, text: str) -> None:
    codec: TeaCodec = ctx.obj["codec"]
    try:
        result = codec.transform(operation, text)
    except TeaCodecError as exc:
        _fail(ctx, exc)
        return

    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_result(result)
    else:
        _handle_json(ctx, result)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("text")
@click.pass_context
def encode(ctx: click.Context, text: str) -> None:
    """Encode TEXT into three-digit codes.

    Fails if TEXT contains a character outside the alphabet.
    """
    _run(ctx, Operation.ENCODE, text)


@cli.command()
@click.argument("text")
@click.pass_context
def decode(ctx: click.Context, text: str) -> None:
    """Decode TEXT from three-digit codes.

    Groups that match no key are dropped silently.
    """
    _run(ctx, Operation.DECODE, text)


@cli.command()
@click.pass_context
def table(ctx: click.Context) -> None:
    """Show the configured key table."""
    codec: TeaCodec = ctx.obj["codec"]
    summary = codec.describe()

    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_table(summary)
    else:
        _handle_json(ctx, summary)


@cli.command()
@click.option(
    "--length", "-l",
    type=int,
    default=None,
    help="Key length in characters (1-1000).",
)
@click.pass_context
def keygen(ctx: click.Context, length: Optional[int]) -> None:
    """Generate a random base key usable as an alphabet."""
    if length is None:
        length = ctx.obj["config"].codec.random_key_length
    try:
        key = TeaCodec.generate_random_base_key(length)
    except TeaCodecError as exc:
        _fail(ctx, exc)
        return

    if ctx.obj["output_format"] == "console":
        click.echo(key)
    else:
        _handle_json(ctx, GeneratedKey(key=key, length=len(key)))


@cli.command()
@click.argument("text", default="Original Text 1337")
@click.pass_context
def demo(ctx: click.Context, text: str) -> None:
    """Encode TEXT, then decode the result, and report both."""
    codec: TeaCodec = ctx.obj["codec"]
    try:
        encoded = codec.transform(Operation.ENCODE, text)
    except TeaCodecError as exc:
        _fail(ctx, exc)
        return
    decoded = codec.transform(Operation.DECODE, encoded.output)

    if ctx.obj["output_format"] == "console":
        click.echo(f"Encrypted Text: {encoded.output}")
        click.echo(f"Decrypted Text: {decoded.output}")
    else:
        _handle_json(ctx, RoundTripResult(encoded=encoded, decoded=decoded))


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the TeaCodec CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
