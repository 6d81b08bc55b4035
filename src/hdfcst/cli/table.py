"""Plain-text table rendering for statement reports."""

import click

from hdfcst.domain.entities import StatementReport, StatementRow
from hdfcst.domain.totals import footer_row

HEADER = StatementRow(date="Date", description="Description", debit="Debit", credit="Credit")


def _cells(row: StatementRow) -> tuple[str, str, str, str]:
    return (row.date, row.description, row.debit, row.credit)


def format_table(report: StatementReport) -> list[str]:
    """Return the table lines for a tabular report, NET footer included."""
    footer = footer_row(report.totals)
    all_rows = [HEADER, *report.rows, footer]
    widths = [max(len(_cells(r)[i]) for r in all_rows) for i in range(4)]
    rule = "-" * (sum(widths) + 3 * len(widths) - 1)

    def line(row: StatementRow) -> str:
        date, description, debit, credit = _cells(row)
        return (
            f"{date:<{widths[0]}}   {description:<{widths[1]}}   "
            f"{debit:>{widths[2]}}   {credit:>{widths[3]}}"
        ).rstrip()

    lines = [rule, line(HEADER), rule]
    lines.extend(line(row) for row in report.rows)
    lines.extend([rule, line(footer), rule])
    return lines


def render_table(report: StatementReport) -> None:
    """Echo the table for a tabular report."""
    for text in format_table(report):
        click.echo(text)
