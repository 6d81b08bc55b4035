"""Main CLI entry point."""

from typing import Optional

import click

from hdfcst import __version__
from hdfcst.cli.error_handling import handle_domain_error
from hdfcst.cli.table import render_table
from hdfcst.domain.entities import OutputMode
from hdfcst.domain.errors import (
    ConfigurationError,
    InputSourceError,
    NoMatchError,
    multiple_output_modes,
)
from hdfcst.domain.filters import build_criteria
from hdfcst.domain.statement import StatementService
from hdfcst.domain.totals import summary_value
from hdfcst.logging_setup import LOG_LEVEL_ENV, configure_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def resolve_output_mode(*, deb: bool, cred: bool, net: bool) -> OutputMode:
    """Map the summary flags to an output mode.

    Raises:
        ConfigurationError: If more than one flag is set
    """
    flags = {
        "--deb": OutputMode.DEBIT_ONLY,
        "--cred": OutputMode.CREDIT_ONLY,
        "--net": OutputMode.NET_ONLY,
    }
    chosen = [flag for flag, is_set in zip(flags, (deb, cred, net)) if is_set]

    if len(chosen) > 1:
        raise ConfigurationError(multiple_output_modes(list(flags)))
    if chosen:
        return flags[chosen[0]]
    return OutputMode.TABULAR


@click.command("hdfc-st")
@click.option(
    "-f",
    "--file",
    "statement_file",
    required=True,
    envvar="HDFCST_FILE",
    help="Statement text file, or - for stdin",
)
@click.option("-d", "--description", "descriptions", multiple=True, help="Descriptions to match (comma-separated)")
@click.option("-x", "--exclude", multiple=True, help="Descriptions to exclude (comma-separated)")
@click.option("--on", "on_date", help="Transactions on date (DD/MM/YYYY, today, this month, ...)")
@click.option("--from", "from_date", help="Transactions from date (DD/MM/YYYY, today, this month, ...)")
@click.option("--to", "to_date", help="Transactions till date (DD/MM/YYYY, today, this month, ...)")
@click.option("--deb", is_flag=True, help="Print total debits only")
@click.option("--cred", is_flag=True, help="Print total credits only")
@click.option("--net", is_flag=True, help="Print net amount only")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    envvar=LOG_LEVEL_ENV,
    help=f"Diagnostic log level (overrides {LOG_LEVEL_ENV} environment variable)",
)
@click.version_option(__version__, prog_name="hdfc-st")
@click.pass_context
def cli(
    ctx,
    statement_file: str,
    descriptions: tuple[str, ...],
    exclude: tuple[str, ...],
    on_date: Optional[str],
    from_date: Optional[str],
    to_date: Optional[str],
    deb: bool,
    cred: bool,
    net: bool,
    log_level: Optional[str],
):
    """hdfc-st - Display info from an HDFC statement export.

    Lists matching transactions with a NET footer, or prints a single total
    with --deb, --cred or --net.
    """
    configure_logging(log_level)

    try:
        mode = resolve_output_mode(deb=deb, cred=cred, net=net)
        criteria = build_criteria(
            descriptions=descriptions,
            exclude=exclude,
            on_date=on_date,
            from_date=from_date,
            to_date=to_date,
        )
    except ConfigurationError as e:
        handle_domain_error(ctx, e)
        return

    service = StatementService(criteria=criteria, mode=mode)

    try:
        report = service.run_file(statement_file)
    except NoMatchError as e:
        click.echo(str(e), err=True)
        ctx.exit(1)
        return
    except InputSourceError as e:
        handle_domain_error(ctx, e)
        return

    if mode.is_summary:
        click.echo(summary_value(report))
    else:
        render_table(report)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
