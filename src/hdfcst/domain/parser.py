"""Statement line parser."""

from hdfcst.domain.entities import Transaction
from hdfcst.domain.errors import (
    InvalidAmountError,
    InvalidDateError,
    MalformedRecordError,
    too_few_fields,
)
from hdfcst.utils.amount_parser import parse_amount
from hdfcst.utils.date_parser import parse_statement_date

# Column layout of the statement export
DATE_COLUMN = 0
DESCRIPTION_COLUMN = 1
DEBIT_COLUMN = 3
CREDIT_COLUMN = 4
MIN_FIELDS = 6


def parse_line(line: str) -> Transaction:
    """Parse one statement line into a Transaction.

    Args:
        line: Raw line, e.g. ``"05/03/23, AMAZON PURCHASE, ref, 150.00, 0.00, val"``

    Returns:
        Parsed Transaction

    Raises:
        MalformedRecordError: If the line has fewer than six fields
        InvalidDateError: If the date column is not a valid DD/MM/YY date
        InvalidAmountError: If the debit or credit column is not a number
    """
    fields = line.split(",")
    if len(fields) < MIN_FIELDS:
        raise MalformedRecordError(too_few_fields(len(fields), MIN_FIELDS))

    try:
        txn_date, date_display = parse_statement_date(fields[DATE_COLUMN].strip())
    except ValueError as e:
        raise InvalidDateError(str(e)) from e

    description = fields[DESCRIPTION_COLUMN].strip()

    amounts = {}
    for name, column in (("debit", DEBIT_COLUMN), ("credit", CREDIT_COLUMN)):
        raw = fields[column].strip()
        try:
            amounts[name] = parse_amount(raw)
        except ValueError as e:
            raise InvalidAmountError(name, raw) from e

    return Transaction(
        date=txn_date,
        date_display=date_display,
        description=description,
        debit=amounts["debit"],
        credit=amounts["credit"],
    )
