from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import click

from fileman.cmd_base import Base
from fileman.command import Command
from fileman.config import Config
from fileman.setup_logging import setup_logging
from fileman.shell import Shell
from fileman.text_encodings import Encodings

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
}

ENCODING_CHOICE = click.Choice(Encodings.names())


def run_cmd(cmd_name: str, *args: str) -> None:
    argv: list[str] = ["fileman", cmd_name, *args]

    cmd: Base = Command.execute(
        Path.cwd(),
        os.environ.copy(),
        argv,
        sys.stdin,
        sys.stdout,
        sys.stderr,
    )

    sys.exit(cmd.status)


def run_shell() -> None:
    try:
        shell = Shell(Path.cwd(), os.environ.copy(), sys.stdin, sys.stdout, sys.stderr)
    except Config.ParseError as e:
        raise click.ClickException(str(e)) from e

    sys.exit(shell.run())


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """A small interactive file manager with a line-based diff."""
    config = Config.locate(os.environ)

    try:
        log_level = config.get(["log", "level"])
        log_file = config.get(["log", "file"])
    except Config.ParseError as e:
        raise click.ClickException(str(e)) from e

    setup_logging(
        level=str(log_level),
        log_file=str(log_file) if log_file else None,
    )

    if ctx.invoked_subcommand is None:
        run_shell()


@cli.command()
def shell() -> None:
    """Start the interactive file manager (the default)."""
    run_shell()


@cli.command()
def lsblk() -> None:
    """Show the mounted disks and their file system types."""
    run_cmd("lsblk")


@cli.command()
def ls() -> None:
    """List files, then directories, in the current directory."""
    run_cmd("ls")


@cli.command()
@click.argument("path")
@click.argument("encoding", type=ENCODING_CHOICE, required=False)
def read(path: str, encoding: Optional[str]) -> None:
    """Print a text file decoded with ENCODING (utf-8 by default)."""
    run_cmd("read", path, *(encoding,) if encoding is not None else ())


@cli.command()
@click.argument("source")
@click.argument("dest")
def cp(source: str, dest: str) -> None:
    """Copy a file, replacing DEST if it exists."""
    run_cmd("cp", source, dest)


@cli.command()
@click.argument("source")
@click.argument("dest")
def mv(source: str, dest: str) -> None:
    """Move a file, replacing DEST if it exists."""
    run_cmd("mv", source, dest)


@cli.command()
@click.argument("path")
def rm(path: str) -> None:
    """Delete a file."""
    run_cmd("rm", path)


@cli.command()
def encodings() -> None:
    """List the supported encodings."""
    run_cmd("encodings")


@cli.command()
@click.option(
    "-e",
    "--encoding",
    type=ENCODING_CHOICE,
    default="utf-8",
    show_default=True,
    help="Encoding of the new file.",
)
@click.argument("path")
@click.argument("text", nargs=-1)
def create(encoding: str, path: str, text: tuple[str, ...]) -> None:
    """Create a file holding TEXT; a literal \\n starts a new line."""
    run_cmd("create", path, encoding, *text)


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@click.argument("dest")
def cat(paths: tuple[str, ...], dest: str) -> None:
    """Join the text of PATHS into DEST and print the result."""
    run_cmd("cat", *paths, dest)


@cli.command()
@click.argument("mask", nargs=-1)
def mask(mask: tuple[str, ...]) -> None:
    """List files in the current directory whose names match MASK."""
    run_cmd("mask", *mask)


@cli.command()
@click.argument("mask", nargs=-1)
def maskd(mask: tuple[str, ...]) -> None:
    """Like mask, but also search subdirectories and print full paths."""
    run_cmd("maskd", *mask)


@cli.command()
@click.argument("source_dir", type=click.Path(file_okay=False))
@click.argument("dest_dir", type=click.Path(file_okay=False))
@click.option(
    "--overwrite/--no-overwrite",
    default=False,
    help="Replace files that already exist in DEST_DIR.",
)
@click.argument("mask", nargs=-1)
def maskc(
    source_dir: str, dest_dir: str, overwrite: bool, mask: tuple[str, ...]
) -> None:
    """Copy matching files from SOURCE_DIR and its subdirectories into DEST_DIR."""
    run_cmd("maskc", source_dir, dest_dir, "1" if overwrite else "0", *mask)


@cli.command(name="diff")
@click.argument("path1")
@click.argument("path2")
@click.argument("dest", required=False)
def diff_cmd(path1: str, path2: str, dest: Optional[str]) -> None:
    """Show how to turn PATH1 into PATH2 line by line."""
    run_cmd("diff", path1, path2, *(dest,) if dest is not None else ())


if __name__ == "__main__":
    cli()
