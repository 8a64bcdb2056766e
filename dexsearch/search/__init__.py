# ABOUTME: Search package for the multi-criteria species search.
# ABOUTME: Contains the query parser, narrowing engine, result presentation, and errors.

from dexsearch.search.engine import apply_filter, initial_entries, narrow, search
from dexsearch.search.errors import (
    CategoryCapExceededError,
    DexSearchError,
    EmptyQueryError,
    ShowAllBroadcastError,
    ShowAllWithoutFiltersError,
    UnknownMoveInFilterError,
    UnrecognizedTokenError,
)
from dexsearch.search.filters import (
    AbilityFilter,
    CategoryKind,
    ColorFilter,
    FilterCategory,
    GenerationFilter,
    MoveFilter,
    ParsedQuery,
    TierFilter,
    TypeFilter,
)
from dexsearch.search.parser import parse
from dexsearch.search.result import NO_RESULTS, SearchResult, present
from dexsearch.search.service import HELP_LINES, DexSearcher

__all__ = [
    "HELP_LINES",
    "NO_RESULTS",
    "AbilityFilter",
    "CategoryCapExceededError",
    "CategoryKind",
    "ColorFilter",
    "DexSearchError",
    "DexSearcher",
    "EmptyQueryError",
    "FilterCategory",
    "GenerationFilter",
    "MoveFilter",
    "ParsedQuery",
    "SearchResult",
    "ShowAllBroadcastError",
    "ShowAllWithoutFiltersError",
    "TierFilter",
    "TypeFilter",
    "UnknownMoveInFilterError",
    "UnrecognizedTokenError",
    "apply_filter",
    "initial_entries",
    "narrow",
    "parse",
    "present",
    "search",
]
