# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import json

import click

from clientplugins.logging import configure_logging
from clientplugins.settings import Settings


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--log-level", default=None, help="Override CLIENTPLUGINS_LOG_LEVEL.")
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Override CLIENTPLUGINS_LOG_FORMAT.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, log_format: str | None) -> None:
    """clientplugins command line interface."""
    settings = Settings()
    if log_level:
        settings.log_level = log_level
    if log_format:
        settings.log_format = log_format
    try:
        configure_logging(settings)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level") from e
    ctx.obj = settings


@cli.command("replay")
@click.argument("log", type=click.Path(exists=True, dir_okay=False, path_type=str))
@click.pass_obj
def replay(settings: Settings, log: str) -> None:
    """Replay a JSONL event log through all plugins and print the resulting state."""
    from clientplugins.replay import replay_events

    try:
        session = replay_events(log, settings)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    click.echo(json.dumps(session.summary(), indent=2))


@cli.command("parse-widget")
@click.argument("pages", nargs=-1, required=True)
@click.pass_obj
def parse_widget(settings: Settings, pages: tuple[str, ...]) -> None:
    """Parse barrel contents dialog pages in order and print each result."""
    from clientplugins.fishbarrel.widget_parser import FishBarrelWidgetParser

    parser = FishBarrelWidgetParser(settings.fish_barrel.incomplete_indicators)
    for page in pages:
        result = parser.parse(page)
        click.echo(f"{result.value}  fish_count:{parser.fish_count}")


def main() -> None:
    cli.main()


if __name__ == "__main__":
    main()
