"""Transaction filters."""

from typing import Iterable, Optional

from hdfcst.domain.entities import FilterCriteria, Transaction
from hdfcst.domain.errors import ConfigurationError
from hdfcst.utils.date_parser import parse_date


def split_terms(values: Iterable[str]) -> frozenset[str]:
    """Split comma-separated option values into uppercased terms.

    Empty terms are dropped, so ``"amazon, ,swiggy"`` gives
    ``{"AMAZON", "SWIGGY"}``.
    """
    terms = set()
    for value in values:
        for term in value.split(","):
            term = term.strip().upper()
            if term:
                terms.add(term)
    return frozenset(terms)


def _parse_option_date(option: str, value: Optional[str]):
    if value is None:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        raise ConfigurationError(f"Invalid --{option} date: {e}") from e


def build_criteria(
    descriptions: Iterable[str] = (),
    exclude: Iterable[str] = (),
    on_date: Optional[str] = None,
    from_date: Optional[str] = None,
    to_date: Optional[str] = None,
) -> FilterCriteria:
    """Build validated filter criteria from raw option values.

    Args:
        descriptions: Description terms to match (each may be a comma list)
        exclude: Description terms to exclude (each may be a comma list)
        on_date: Exact date
        from_date: Inclusive lower date bound
        to_date: Inclusive upper date bound

    Returns:
        FilterCriteria

    Raises:
        ConfigurationError: If a date is invalid or ``on_date`` is combined
            with ``from_date``/``to_date``
    """
    return FilterCriteria(
        include_descriptions=split_terms(descriptions),
        exclude_descriptions=split_terms(exclude),
        on_date=_parse_option_date("on", on_date),
        from_date=_parse_option_date("from", from_date),
        to_date=_parse_option_date("to", to_date),
    )


def _contains_any(terms: frozenset[str], description: str) -> bool:
    return any(term in description for term in terms)


def matches(criteria: FilterCriteria, txn: Transaction) -> bool:
    """Return True if the transaction passes every active filter."""
    description = txn.description.upper()

    if criteria.include_descriptions and not _contains_any(
        criteria.include_descriptions, description
    ):
        return False

    if criteria.exclude_descriptions and _contains_any(
        criteria.exclude_descriptions, description
    ):
        return False

    if criteria.on_date is not None and txn.date != criteria.on_date:
        return False

    if criteria.from_date is not None and txn.date < criteria.from_date:
        return False

    if criteria.to_date is not None and txn.date > criteria.to_date:
        return False

    return True
