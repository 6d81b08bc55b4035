"""CLI error handling helpers."""

from typing import Union

import click

from hdfcst.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: Union[DomainError, ValueError]) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
