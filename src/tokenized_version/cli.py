# SPDX-License-Identifier: MIT
"""CLI entry point for the tversion command."""

from __future__ import annotations

import sys

import click

from .compare import compare_versions, sort_versions
from .tokenized import COMPONENT_NAMES, InvalidVersionError, TokenizedVersion, parse_version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False
        self.allow_wildcards: bool = True

    def parse(self, version: str) -> TokenizedVersion:
        """Parse a version with the wildcard setting of this invocation."""
        return parse_version(version, self.allow_wildcards)


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def _describe(version: TokenizedVersion) -> None:
    for name, value in zip(COMPONENT_NAMES, version.components):
        echo_info(f"  {name}: {'-' if value is None else value}")


@click.group()
@click.version_option(package_name="tokenized-version")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "--no-wildcards",
    is_flag=True,
    help="Reject '+' wildcard components.",
)
@pass_context
def cli(ctx: Context, verbose: bool, no_wildcards: bool) -> None:
    """Parse and compare MAJOR.MINOR.MICRO_QUALIFIER versions.

    \b
    Examples:
        tversion check 1.8.0_45
        tversion --no-wildcards check 1.7.+
        tversion compare 1.8.0_45 1.8.0_5
        tversion sort 1.8.0_45 1.7.0 1.8.0_5
    """
    ctx.verbose = verbose
    ctx.allow_wildcards = not no_wildcards


@cli.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def check(ctx: Context, versions: tuple[str, ...]) -> None:
    """Validate one or more versions.

    Exits with status 1 if any version is invalid.
    """
    failed = False
    for raw in versions:
        try:
            version = ctx.parse(raw)
        except InvalidVersionError as e:
            echo_error(e.message)
            failed = True
            continue

        echo_success(f"OK: {version}")
        if ctx.verbose:
            _describe(version)

    if failed:
        raise SystemExit(1)


@cli.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, version2: str) -> None:
    """Compare two versions."""
    try:
        result = compare_versions(ctx.parse(version1), ctx.parse(version2))
    except InvalidVersionError as e:
        echo_error(e.message)
        raise SystemExit(1)

    operator = {-1: "<", 0: "==", 1: ">"}[result]
    echo_info(f"{version1} {operator} {version2}")


@cli.command(name="sort")
@click.option("--reverse", "-r", is_flag=True, help="Print the highest version first.")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def sort_command(ctx: Context, reverse: bool, versions: tuple[str, ...]) -> None:
    """Print versions in ascending order, one per line."""
    try:
        ordered = sort_versions([ctx.parse(v) for v in versions], reverse=reverse)
    except InvalidVersionError as e:
        echo_error(e.message)
        raise SystemExit(1)

    for version in ordered:
        echo_info(str(version))
        if ctx.verbose:
            _describe(version)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except InvalidVersionError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
