"""
Theme Commands
--------------

Commands for resolving and materializing themes.

Commands:
    - build-themes: Resolve and copy the themes of a whole build
    - resolve: Parse a single locator and print the result
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional, Tuple

import click

from quire.builders.theme_builder import ThemeBuilder
from quire.core.config import load_config
from quire.core.logging_manager import QuireLogger, handle_cli_error
from quire.core.paths import CONFIG_FILENAME
from quire.themes.manager import parse_theme


@click.command("build-themes")
@click.argument("input", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-c",
    "--config",
    type=click.Path(dir_okay=False),
    default=None,
    help=f"Config file (default: ./{CONFIG_FILENAME} if present)",
)
@click.option(
    "-t",
    "--theme",
    "themes",
    multiple=True,
    help="Root theme locator; may be repeated. Overrides the config's theme.",
)
@click.option(
    "-o",
    "--workspace",
    type=click.Path(file_okay=False),
    default=None,
    help="Workspace directory (default: from config, or the input's directory)",
)
@click.option(
    "--manifest",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write each document's stylesheet list to this JSON file",
)
@click.pass_context
def build_themes(
    ctx: click.Context,
    input: Optional[str],
    config: Optional[str],
    themes: Tuple[str, ...],
    workspace: Optional[str],
    manifest: Optional[str],
) -> None:
    """
    Resolve document themes and copy them into the workspace.

    Without INPUT, every entry of the config is built. With INPUT, that
    document is built on its own.
    """
    logger: QuireLogger = ctx.obj["logger"]

    config_path = Path(config) if config else Path(CONFIG_FILENAME)
    try:
        build_config = None
        if config or (input is None and config_path.is_file()):
            build_config = load_config(config_path)
        if build_config is None and input is None:
            raise click.UsageError(
                f"No INPUT given and no {CONFIG_FILENAME} found in the working directory"
            )

        click.echo("🎨 Building themes...")
        builder = ThemeBuilder(
            config=build_config,
            input_file=Path(input) if input else None,
            workspace_dir=Path(workspace) if workspace else None,
            cli_themes=list(themes),
            logger=logger,
        )
        stats = builder.build()

        click.echo("\n✅ Theme build complete:")
        click.echo(f"  Documents: {stats.entries_resolved}")
        click.echo(f"  Themes registered: {stats.themes_registered}")
        click.echo(f"  Themes materialized: {stats.themes_materialized}")
        if stats.themes_cloned:
            click.echo(f"  Entry-specific clones: {stats.themes_cloned}")
        click.echo(f"  Workspace: {builder.workspace_dir}")

        for entry in builder.entries:
            click.echo(f"\n  {os.path.relpath(entry.target, builder.workspace_dir)}")
            for sheet in builder.stylesheets.get(entry.key, []):
                click.echo(f"    - {sheet}")

        if manifest:
            Path(manifest).write_text(
                json.dumps(builder.stylesheets, indent=2), encoding="utf-8"
            )
            click.echo(f"\n📝 Stylesheet manifest written to {manifest}")

    except click.UsageError:
        raise
    except Exception as e:
        handle_cli_error(
            ctx,
            e,
            "build_themes",
            additional_context={"config": config, "input": input},
        )


@click.command("resolve")
@click.argument("locator")
@click.option(
    "--context",
    type=click.Path(file_okay=False),
    default=".",
    help="Directory the locator is relative to",
)
@click.option(
    "--workspace",
    type=click.Path(file_okay=False),
    default=".",
    help="Workspace directory used to compute the destination",
)
@click.pass_context
def resolve(ctx: click.Context, locator: str, context: str, workspace: str) -> None:
    """Show how LOCATOR is parsed, without copying anything."""
    try:
        theme = parse_theme(
            locator,
            str(Path(context).resolve()),
            str(Path(workspace).resolve()),
        )
        if theme is None:
            click.echo("No theme (empty locator)")
            return

        click.echo(f"Kind: {theme.kind}")
        click.echo(f"Name: {theme.name}")
        click.echo(f"Location: {theme.location}")
        destination = getattr(theme, "destination", None)
        if destination:
            click.echo(f"Destination: {destination}")
        styles = getattr(theme, "styles", None)
        if styles:
            click.echo(f"Styles: {', '.join(styles)}")

    except Exception as e:
        handle_cli_error(ctx, e, "resolve", additional_context={"locator": locator})


__all__ = ["build_themes", "resolve"]
