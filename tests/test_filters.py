"""Tests for filter criteria and matching."""

from datetime import date

import pytest

from hdfcst.domain.entities import FilterCriteria
from hdfcst.domain.errors import ConfigurationError
from hdfcst.domain.filters import build_criteria, matches, split_terms


def test_split_terms_uppercases_and_trims():
    assert split_terms(["amazon, swiggy", " rent "]) == frozenset({"AMAZON", "SWIGGY", "RENT"})


def test_split_terms_drops_empty_terms():
    assert split_terms(["amazon,,", " "]) == frozenset({"AMAZON"})


def test_build_criteria_parses_dates():
    criteria = build_criteria(from_date="01/03/2023", to_date="15/03/2023")
    assert criteria.from_date == date(2023, 3, 1)
    assert criteria.to_date == date(2023, 3, 15)
    assert criteria.on_date is None


def test_build_criteria_rejects_on_with_from():
    with pytest.raises(ConfigurationError) as excinfo:
        build_criteria(on_date="05/03/2023", from_date="01/03/2023")
    assert "--from" in str(excinfo.value)


def test_build_criteria_rejects_on_with_to():
    with pytest.raises(ConfigurationError) as excinfo:
        build_criteria(on_date="05/03/2023", to_date="31/03/2023")
    assert "--to" in str(excinfo.value)


def test_build_criteria_rejects_inverted_range():
    with pytest.raises(ConfigurationError):
        build_criteria(from_date="31/03/2023", to_date="01/03/2023")


def test_build_criteria_rejects_invalid_date():
    with pytest.raises(ConfigurationError) as excinfo:
        build_criteria(on_date="someday")
    assert "Invalid --on date" in str(excinfo.value)


def test_criteria_constructor_validates_exclusivity():
    with pytest.raises(ConfigurationError):
        FilterCriteria(on_date=date(2023, 3, 5), to_date=date(2023, 3, 6))


def test_empty_criteria_match_everything(make_transaction):
    assert matches(FilterCriteria(), make_transaction())


def test_include_matches_substring_case_insensitively(make_transaction):
    criteria = build_criteria(descriptions=["amazon"])
    assert matches(criteria, make_transaction(description="Amazon Purchase"))
    assert not matches(criteria, make_transaction(description="SWIGGY"))


def test_include_any_term(make_transaction):
    criteria = build_criteria(descriptions=["swiggy,rent"])
    assert matches(criteria, make_transaction(description="NEFT-RENT PAYMENT"))


def test_exclude_rejects_any_term(make_transaction):
    criteria = build_criteria(exclude=["refund"])
    assert matches(criteria, make_transaction(description="AMAZON PURCHASE"))
    assert not matches(criteria, make_transaction(description="AMAZON REFUND"))


def test_include_then_exclude(make_transaction):
    criteria = build_criteria(descriptions=["amazon"], exclude=["refund"])
    assert matches(criteria, make_transaction(description="AMAZON PURCHASE"))
    assert not matches(criteria, make_transaction(description="AMAZON REFUND"))


def test_on_date(make_transaction):
    criteria = FilterCriteria(on_date=date(2023, 3, 5))
    assert matches(criteria, make_transaction(txn_date=date(2023, 3, 5)))
    assert not matches(criteria, make_transaction(txn_date=date(2023, 3, 6)))


def test_from_date_is_inclusive(make_transaction):
    criteria = FilterCriteria(from_date=date(2023, 3, 5))
    assert matches(criteria, make_transaction(txn_date=date(2023, 3, 5)))
    assert matches(criteria, make_transaction(txn_date=date(2023, 3, 6)))
    assert not matches(criteria, make_transaction(txn_date=date(2023, 3, 4)))


def test_to_date_is_inclusive(make_transaction):
    criteria = FilterCriteria(to_date=date(2023, 3, 5))
    assert matches(criteria, make_transaction(txn_date=date(2023, 3, 5)))
    assert matches(criteria, make_transaction(txn_date=date(2023, 3, 4)))
    assert not matches(criteria, make_transaction(txn_date=date(2023, 3, 6)))


def test_adding_criteria_never_grows_accepted_set(make_transaction):
    transactions = [
        make_transaction(description=desc, txn_date=date(2023, 3, day))
        for desc, day in [
            ("AMAZON PURCHASE", 5),
            ("AMAZON REFUND", 15),
            ("SWIGGY", 1),
            ("RENT", 20),
        ]
    ]
    steps = [
        FilterCriteria(),
        FilterCriteria(include_descriptions=frozenset({"AMAZON", "RENT"})),
        FilterCriteria(
            include_descriptions=frozenset({"AMAZON", "RENT"}),
            exclude_descriptions=frozenset({"REFUND"}),
        ),
        FilterCriteria(
            include_descriptions=frozenset({"AMAZON", "RENT"}),
            exclude_descriptions=frozenset({"REFUND"}),
            from_date=date(2023, 3, 10),
        ),
    ]

    accepted = [{t for t in transactions if matches(c, t)} for c in steps]

    for looser, stricter in zip(accepted, accepted[1:]):
        assert stricter <= looser
    assert [len(a) for a in accepted] == [4, 3, 2, 1]


@pytest.mark.parametrize("option", ["on_date", "from_date", "to_date"])
@pytest.mark.parametrize("value", ["2023-03-05", "05/03", "05/03/23"])
def test_build_criteria_rejects_non_day_first_dates(option, value):
    """Dates that could be misread are configuration errors, not guesses."""
    with pytest.raises(ConfigurationError) as excinfo:
        build_criteria(**{option: value})
    assert "expected DD/MM/YYYY" in str(excinfo.value)
