"""Domain error types and shared error messages.

Two families are kept apart: ``RecordError`` covers a single bad statement
line and never stops a run, ``RunError`` aborts the run with a failure
status.
"""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class RecordError(DomainError):
    """A statement line could not be turned into a transaction."""


class MalformedRecordError(RecordError):
    """Line does not have enough comma-separated fields."""


class InvalidDateError(RecordError):
    """Date column is not a valid DD/MM/YY date."""


class InvalidAmountError(RecordError):
    """Debit or credit column is not a decimal number."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} amount '{value}'")


class RunError(DomainError):
    """Fatal error that stops the whole run."""


class ConfigurationError(RunError):
    """Conflicting or invalid options."""


class InputSourceError(RunError):
    """Statement source cannot be opened for reading."""


class NoMatchError(RunError):
    """No transaction survived the filters."""

    def __init__(self, message: str = "No match found!"):
        super().__init__(message)


def too_few_fields(count: int, required: int) -> str:
    """Return message for a line with too few columns."""
    return f"Malformed record: expected at least {required} fields, got {count}"


def conflicting_date_options(option: str) -> str:
    """Return message when --on is combined with a range bound."""
    return f"Cannot use --{option} along with --on"


def multiple_output_modes(flags: list[str]) -> str:
    """Return message when more than one summary flag is given."""
    return f"Only one of {', '.join(flags)} can be specified at a time"
