"""Render workflow outcomes on the terminal."""

from __future__ import annotations

import click

from backoffice.application.outcome import Outcome


def echo_outcome(outcome: Outcome) -> None:
    """Print a successful outcome, or abort the command for any failure."""
    for warning in outcome.warnings:
        click.secho(f"Warning: {warning}", fg="yellow", err=True)
    if not outcome.ok:
        raise click.ClickException(outcome.message)
    click.echo(outcome.message)
