"""CLI entry point: wesl-metadata.

Usage:
    wesl-metadata                                   # metadata for ./wesl.toml
    wesl-metadata --manifest-path pkg/wesl.toml --no-deps
    wesl-metadata --root --indent 2                 # root package only
    wesl-metadata -- --offline                      # extra args for wesl
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
import structlog

from wesl_metadata.command import MetadataCommand
from wesl_metadata.core.logging import setup_logging
from wesl_metadata.exceptions import WeslMetadataError

log = structlog.get_logger("wesl_metadata.cli")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--manifest-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to wesl.toml",
)
@click.option("--no-deps", is_flag=True, help="Skip dependency resolution")
@click.option("--wesl", "wesl_path", default=None, help="wesl executable (default: $WESL or wesl)")
@click.option("--root", "root_only", is_flag=True, help="Print only the root package")
@click.option("--indent", type=int, default=None, help="Indent JSON output")
@click.option("-v", "--verbose", is_flag=True, help="Show wesl stderr and debug logs")
@click.argument("extra", nargs=-1, type=click.UNPROCESSED)
def main(
    manifest_path: Path | None,
    no_deps: bool,
    wesl_path: str | None,
    root_only: bool,
    indent: int | None,
    verbose: bool,
    extra: tuple[str, ...],
) -> None:
    """Print the metadata of a WESL package as JSON."""
    setup_logging("DEBUG" if verbose else None)

    cmd = MetadataCommand().verbose(verbose)
    if wesl_path is not None:
        cmd.wesl_path(wesl_path)
    if manifest_path is not None:
        cmd.manifest_path(manifest_path)
    if no_deps:
        cmd.no_dependencies()
    if extra:
        cmd.other_options(extra)

    try:
        metadata = cmd.exec()
    except WeslMetadataError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    if not root_only:
        click.echo(metadata.to_json(indent=indent))
        return

    package = metadata.root_package()
    if package is None:
        log.warning("cli.no_root_package", packages=len(metadata.packages))
        click.echo("No root package found.", err=True)
        sys.exit(1)
    click.echo(package.model_dump_json(by_alias=True, indent=indent))


if __name__ == "__main__":
    main()
