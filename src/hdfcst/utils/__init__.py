"""Utility functions for hdfc-st."""

from hdfcst.utils.date_parser import expand_year, parse_date, parse_statement_date
from hdfcst.utils.amount_parser import parse_amount

__all__ = ["expand_year", "parse_date", "parse_statement_date", "parse_amount"]
