"""Running totals and amount formatting."""

from decimal import Decimal

from hdfcst.domain.entities import (
    OutputMode,
    RunningTotals,
    StatementReport,
    StatementRow,
    Transaction,
)


def accumulate(totals: RunningTotals, txn: Transaction) -> None:
    """Fold a matched transaction into the running totals."""
    totals.match_count += 1
    totals.total_debit += txn.debit
    totals.total_credit += txn.credit


def format_amount(value: Decimal) -> str:
    """Format an amount with two decimal places."""
    return f"{value:.2f}"


def format_net(debit: Decimal, credit: Decimal) -> str:
    """Format the net position for the table footer.

    A net credit position shows a leading ``+`` and a net debit position
    (including zero) a leading ``-``.
    """
    net = debit - credit
    if net < 0:
        return "+" + format_amount(abs(net))
    return "-" + format_amount(net)


def net_magnitude(debit: Decimal, credit: Decimal) -> Decimal:
    """Return ``|debit - credit|``."""
    return abs(debit - credit)


def footer_row(totals: RunningTotals) -> StatementRow:
    """Build the NET summary row for the table."""
    return StatementRow(
        date="NET",
        description=format_net(totals.total_debit, totals.total_credit),
        debit=format_amount(totals.total_debit),
        credit=format_amount(totals.total_credit),
    )


def summary_value(report: StatementReport) -> str:
    """Return the single value printed by a summary output mode.

    Raises:
        ValueError: If the report is in tabular mode
    """
    totals = report.totals
    if report.mode is OutputMode.DEBIT_ONLY:
        return format_amount(totals.total_debit)
    if report.mode is OutputMode.CREDIT_ONLY:
        return format_amount(totals.total_credit)
    if report.mode is OutputMode.NET_ONLY:
        return format_amount(net_magnitude(totals.total_debit, totals.total_credit))
    raise ValueError(f"Output mode '{report.mode.value}' has no summary value")
