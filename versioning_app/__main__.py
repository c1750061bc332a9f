"""CLI entry point for display-version computation."""

from __future__ import annotations

import json
import logging
from typing import Any

import click

from .config import LOG_LEVELS, AppConfig, VersioningConfig
from .exceptions import VersioningError
from .obs import span
from .release_mode import RELEASE_MODES, get_release_mode

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

LOGGER = logging.getLogger("versioning_app")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()), format=LOG_FORMAT, datefmt=LOG_DATEFMT
    )


def _echo_json(payload: dict[str, Any], *, indent: int | None = 2) -> None:
    click.echo(json.dumps(payload, ensure_ascii=False, indent=indent))


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(list(LOG_LEVELS), case_sensitive=False),
    help="Set the logging verbosity (defaults to VERSIONING_LOG_LEVEL or INFO).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Command-line interface for versioning_app."""

    try:
        config = AppConfig.from_env()
    except VersioningError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1) from exc

    if log_level:
        config.log_level = log_level.upper()
    _configure_logging(config.log_level)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


@cli.command("display-version")
@click.option("--next-tag", required=True, help="Candidate next version identifier.")
@click.option("--last-tag", default="", help="Most recent prior version identifier.")
@click.option(
    "--current-tag",
    default=None,
    help="Current tag or branch marker; blank means the artifact is not on a tag state.",
)
@click.option("--snapshot", default=None, help="Override the configured snapshot suffix.")
@click.option(
    "--mode",
    default="snapshot",
    show_default=True,
    help="Release mode used to compute the display version.",
)
@click.option("--json", "as_json", is_flag=True, help="Emit a JSON document instead of plain text.")
@click.option("--compact", is_flag=True, help="Emit JSON in a single line.")
@click.pass_context
def display_version(
    ctx: click.Context,
    next_tag: str,
    last_tag: str,
    current_tag: str | None,
    snapshot: str | None,
    mode: str,
    as_json: bool,
    compact: bool,
) -> None:
    """Print the display version for the given tags."""

    config: AppConfig = ctx.obj["config"]
    versioning = config.versioning
    if snapshot is not None:
        versioning = VersioningConfig(snapshot=snapshot)

    try:
        release_mode = get_release_mode(mode)
        with span("display_version", attrs={"mode": mode}):
            result = release_mode.get_display_version(next_tag, last_tag, current_tag, versioning)
    except VersioningError as exc:
        exc.log_error(LOGGER)
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1) from exc

    LOGGER.info("Display version for mode %s: %r", mode, result)

    if as_json or compact:
        _echo_json(
            {
                "mode": mode.strip().lower(),
                "next_tag": next_tag,
                "last_tag": last_tag,
                "current_tag": current_tag,
                "snapshot": versioning.get_snapshot(),
                "display_version": result,
            },
            indent=None if compact else 2,
        )
        return

    click.echo(result if result is not None else "")


@cli.command()
def modes() -> None:
    """List the registered release modes."""

    for name in sorted(RELEASE_MODES):
        click.echo(name)


if __name__ == "__main__":
    cli()
