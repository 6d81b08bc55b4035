"""Domain model entities for hdfc-st.

Plain data classes describing one parsed statement line, the filter options
of a run and the totals accumulated while the run walks the statement.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from hdfcst.domain.errors import ConfigurationError, conflicting_date_options


@dataclass(frozen=True)
class Transaction:
    """One statement line."""

    date: date
    date_display: str
    description: str
    debit: Decimal
    credit: Decimal


@dataclass(frozen=True)
class FilterCriteria:
    """Resolved filters for a run.

    Description terms are stored uppercased. ``on_date`` cannot be combined
    with ``from_date`` or ``to_date``.
    """

    include_descriptions: frozenset[str] = frozenset()
    exclude_descriptions: frozenset[str] = frozenset()
    on_date: Optional[date] = None
    from_date: Optional[date] = None
    to_date: Optional[date] = None

    def __post_init__(self):
        if self.on_date is not None:
            if self.from_date is not None:
                raise ConfigurationError(conflicting_date_options("from"))
            if self.to_date is not None:
                raise ConfigurationError(conflicting_date_options("to"))
        if (
            self.from_date is not None
            and self.to_date is not None
            and self.from_date > self.to_date
        ):
            raise ConfigurationError(
                f"--from date {self.from_date:%d/%m/%Y} is after --to date {self.to_date:%d/%m/%Y}"
            )


class OutputMode(Enum):
    """What a run prints."""

    TABULAR = "tabular"
    DEBIT_ONLY = "debit"
    CREDIT_ONLY = "credit"
    NET_ONLY = "net"

    @property
    def is_summary(self) -> bool:
        return self is not OutputMode.TABULAR


@dataclass
class RunningTotals:
    """Totals folded from every transaction that passed the filters."""

    match_count: int = 0
    total_debit: Decimal = Decimal("0")
    total_credit: Decimal = Decimal("0")


@dataclass(frozen=True)
class StatementRow:
    """One formatted table row."""

    date: str
    description: str
    debit: str
    credit: str


@dataclass
class StatementReport:
    """Result of a run over one statement."""

    mode: OutputMode
    totals: RunningTotals
    rows: list[StatementRow] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
