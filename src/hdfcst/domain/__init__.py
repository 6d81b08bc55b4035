"""Domain layer for hdfc-st."""

from hdfcst.domain.statement import StatementService, open_statement
from hdfcst.domain.filters import build_criteria, matches
from hdfcst.domain.parser import parse_line

__all__ = [
    "StatementService",
    "open_statement",
    "build_criteria",
    "matches",
    "parse_line",
]
