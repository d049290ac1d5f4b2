#!/usr/bin/env python3
"""
Quire CLI
---------

Command-line interface for resolving and materializing document themes.

Commands:
    - build-themes: Resolve every document's themes and copy them into the workspace
    - resolve: Show how a single locator is parsed

Usage:
    # Build from quire.config.yaml in the current directory
    quire build-themes

    # Build with an explicit config and an extra root theme
    quire build-themes -c book/quire.config.yaml -t ./print.css

    # Build a single document without a config
    quire build-themes chapter.md -t https://example.com/base.css

    # Inspect a locator
    quire resolve my-theme-package --context book/
"""
from __future__ import annotations

import click
from pathlib import Path

from quire.core.cli import setup_logger
from quire.core.paths import LOG_DIR


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """Quire Theme Builder"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "themes")


from .themes import build_themes, resolve  # noqa: E402

cli.add_command(build_themes)
cli.add_command(resolve)


if __name__ == "__main__":
    cli(obj={})
