"""Statement processing domain service."""

import io
import sys
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional, TextIO

from hdfcst.domain.entities import (
    FilterCriteria,
    OutputMode,
    RunningTotals,
    StatementReport,
    StatementRow,
)
from hdfcst.domain.errors import InputSourceError, NoMatchError, RecordError
from hdfcst.domain.filters import matches
from hdfcst.domain.parser import parse_line
from hdfcst.domain.totals import accumulate, format_amount
from hdfcst.logging_setup import get_logger

logger = get_logger(__name__)

DESCRIPTION_MAX_LEN = 15
HEADER_MARKER = "Date"
STDIN_PATH = "-"
STATEMENT_ENCODING = "utf-8-sig"


@contextmanager
def open_statement(path: str) -> Iterator[TextIO]:
    """Open a statement for reading, ``-`` meaning standard input.

    Bytes that are not valid UTF-8 are replaced with U+FFFD so a stray
    Latin-1 character only affects the text of its own line. Standard input
    is never closed; a file is closed on every exit path.

    Raises:
        InputSourceError: If the file cannot be opened
    """
    if path == STDIN_PATH:
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            yield sys.stdin
            return
        stream = io.TextIOWrapper(buffer, encoding=STATEMENT_ENCODING, errors="replace")
        try:
            yield stream
        finally:
            # Leave the underlying stdin buffer open
            stream.detach()
        return

    try:
        f = open(path, "r", encoding=STATEMENT_ENCODING, errors="replace")
    except OSError as e:
        raise InputSourceError(f"Cannot open statement '{path}': {e.strerror or e}") from e

    with f:
        yield f


class StatementService:
    """Service for filtering and totalling statement lines."""

    def __init__(
        self,
        criteria: Optional[FilterCriteria] = None,
        mode: OutputMode = OutputMode.TABULAR,
    ):
        """Initialize statement service.

        Args:
            criteria: Validated filter criteria (no filtering when None)
            mode: Output mode deciding whether rows are emitted
        """
        self.criteria = criteria if criteria is not None else FilterCriteria()
        self.mode = mode

    def run(self, lines: Iterable[str]) -> StatementReport:
        """Process statement lines in order.

        Blank lines and a single header line containing "Date" are skipped
        until the first data line. After that every line is parsed; lines that
        fail to parse are logged, collected in ``errors`` and skipped.

        Args:
            lines: Statement lines, with or without trailing newlines

        Returns:
            StatementReport with totals and, in tabular mode, the rows

        Raises:
            NoMatchError: If no transaction passed the filters
        """
        report = StatementReport(mode=self.mode, totals=RunningTotals())
        seeking_header = True

        for line_num, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")

            if seeking_header:
                if not line.strip():
                    continue
                seeking_header = False
                if HEADER_MARKER in line:
                    logger.debug("Skipping header on line %d", line_num)
                    continue

            try:
                txn = parse_line(line)
            except RecordError as e:
                message = f"Line {line_num}: {e}"
                logger.warning("%s", message)
                report.errors.append(message)
                continue

            if not matches(self.criteria, txn):
                continue

            accumulate(report.totals, txn)

            if self.mode.is_summary:
                continue

            report.rows.append(
                StatementRow(
                    date=txn.date_display,
                    description=txn.description[:DESCRIPTION_MAX_LEN],
                    debit=format_amount(txn.debit),
                    credit=format_amount(txn.credit),
                )
            )

        logger.debug(
            "Matched %d transaction(s), %d line(s) skipped with errors",
            report.totals.match_count,
            len(report.errors),
        )

        if report.totals.match_count == 0:
            raise NoMatchError()

        return report

    def run_file(self, path: str) -> StatementReport:
        """Open ``path`` (or stdin for ``-``) and process it."""
        with open_statement(path) as f:
            return self.run(f)
