# src/shelldiff/cli/echo_cmds.py

import click


@click.command(name="echo")
@click.option("--n", "n_flag", default="", help="Only tests for '-n'.")
def echo_cli(n_flag: str):
    """Run just echo tests (placeholder, not wired to the runner yet)."""
    click.echo("echo called")
