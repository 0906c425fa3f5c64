# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Command line interface module."""

# flake8: noqa: E501
# pylint: disable=too-many-arguments,too-many-positional-arguments
from typing import Optional

import typer

from tenant_hasher._logging import LogLevel, configure_logging, get_log_level
from tenant_hasher._version import __version__
from tenant_hasher.config import Settings, SettingsManager
from tenant_hasher.factory import build_encoder
from tenant_hasher.hashing import DelegatingPasswordEncoder, PasswordEncodingError

APP_NAME = "tenant-hasher"
APP_HELP = "Prefix tagged, tenant aware password hashing"

EXIT_MISMATCH = 1
EXIT_INVALID_HASH = 2

app = typer.Typer(
    name=APP_NAME,
    help=APP_HELP,
    add_completion=False,
    no_args_is_help=False,
    pretty_exceptions_short=True,
)


def _encoder(ctx: typer.Context) -> DelegatingPasswordEncoder:
    encoder: DelegatingPasswordEncoder = ctx.obj["encoder"]
    return encoder


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    tenant_class: Optional[str] = typer.Option(
        None,
        help="The tenant class (standard, regulated)",
        show_default=False,
    ),
    log_level: LogLevel = typer.Option(
        default=get_log_level(),
        help="The log level",
        case_sensitive=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
    ),
) -> None:
    """Tenant hasher command line interface."""
    if version:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()
    configure_logging(log_level.value)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()
    settings = (
        SettingsManager.use_settings(
            Settings(tenant_class=tenant_class)  # type: ignore[arg-type]
        )
        if tenant_class
        else SettingsManager.get_settings()
    )
    ctx.obj = {"settings": settings, "encoder": build_encoder(settings)}


@app.command()
def encode(
    ctx: typer.Context,
    secret: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="The secret to hash",
    ),
) -> None:
    """Hash a secret with the default algorithm."""
    typer.echo(_encoder(ctx).encode(secret))


@app.command()
def verify(
    ctx: typer.Context,
    tagged: str = typer.Argument(..., help="The stored tagged hash"),
    secret: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        help="The secret to check",
    ),
) -> None:
    """Check a secret against a tagged hash."""
    try:
        matched = _encoder(ctx).matches(secret, tagged)
    except PasswordEncodingError as error:
        typer.echo(f"Invalid hash: {error}", err=True)
        raise typer.Exit(EXIT_INVALID_HASH) from error
    if not matched:
        typer.echo("Secret does not match", err=True)
        raise typer.Exit(EXIT_MISMATCH)
    typer.echo("Secret matches")


@app.command()
def inspect(
    ctx: typer.Context,
    tagged: str = typer.Argument(..., help="The stored tagged hash"),
) -> None:
    """Show the algorithm of a tagged hash and whether it is outdated."""
    encoder = _encoder(ctx)
    try:
        algorithm_id = encoder.algorithm_of(tagged)
        needs_upgrade = encoder.needs_upgrade(tagged)
        needs_rehash = encoder.needs_rehash(tagged)
    except PasswordEncodingError as error:
        typer.echo(f"Invalid hash: {error}", err=True)
        raise typer.Exit(EXIT_INVALID_HASH) from error
    typer.echo(f"algorithm: {algorithm_id}")
    typer.echo(f"needs upgrade: {str(needs_upgrade).lower()}")
    typer.echo(f"needs rehash: {str(needs_rehash).lower()}")


@app.command()
def info(ctx: typer.Context) -> None:
    """Show the tenant class and the registered algorithms."""
    settings: Settings = ctx.obj["settings"]
    encoder = _encoder(ctx)
    typer.echo(f"tenant class: {settings.tenant_class.value}")
    typer.echo(f"default algorithm: {encoder.default_algorithm_id}")
    typer.echo(f"algorithms: {', '.join(encoder.registry.ids)}")


if __name__ == "__main__":
    app()
