"""ABOUTME: Narrowing search engine applying parsed filter categories to the catalog.
ABOUTME: Each category is a full pass over the current working set, in query order."""

import logging
import random
from collections.abc import Callable, Sequence

from dexsearch.catalog.catalog import CatalogProvider
from dexsearch.catalog.models import CatalogEntry, Move
from dexsearch.learnsets import LearnabilityPredicate, LearnContext
from dexsearch.normalize import to_id
from dexsearch.search.errors import UnknownMoveInFilterError
from dexsearch.search.filters import (
    AbilityFilter,
    ColorFilter,
    FilterCategory,
    GenerationFilter,
    MoveFilter,
    ParsedQuery,
    TierFilter,
    TypeFilter,
)
from dexsearch.search.result import SearchResult, present

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
_EXCLUDED_TIERS = frozenset({"Illegal", "CAP"})

WorkingSet = tuple[CatalogEntry, ...]
EntryMatcher = Callable[[CatalogEntry], bool]


def initial_entries(query: ParsedQuery, catalog: CatalogProvider) -> WorkingSet:
    """Return the entries narrowing starts from.

    Illegal and CAP entries are left out unless the query asks for the CAP tier.
    """
    entries = catalog.all_entries()
    if query.includes_cap_tier:
        return tuple(entries)
    return tuple(entry for entry in entries if entry.legal and entry.tier not in _EXCLUDED_TIERS)


def _type_matcher(category: TypeFilter) -> EntryMatcher:
    wanted = set(category.values)
    if category.count == 1:
        return lambda entry: any(slot in wanted for slot in entry.types)
    # Both slots must be covered; a missing second type never is
    return lambda entry: all(slot in wanted for slot in entry.types)


def _matcher(category: FilterCategory) -> EntryMatcher:
    """Build the entry predicate for every category except moves."""
    wanted = set(category.values)
    if isinstance(category, TypeFilter):
        return _type_matcher(category)
    if isinstance(category, TierFilter):
        return lambda entry: entry.tier.lower() in wanted
    if isinstance(category, AbilityFilter):
        return lambda entry: any(to_id(ability) in wanted for ability in entry.abilities)
    if isinstance(category, ColorFilter):
        return lambda entry: entry.color.lower() in wanted
    if isinstance(category, GenerationFilter):
        return lambda entry: entry.gen in wanted
    raise TypeError(f"No matcher for {type(category).__name__}")


def _resolve_moves(category: MoveFilter, catalog: CatalogProvider) -> list[Move]:
    moves: list[Move] = []
    for move_id in category.values:
        move = catalog.lookup_move(move_id)
        if move is None:
            raise UnknownMoveInFilterError(move_id)
        moves.append(move)
    return moves


def apply_filter(
    entries: WorkingSet,
    category: FilterCategory,
    catalog: CatalogProvider,
    can_learn: LearnabilityPredicate,
) -> WorkingSet:
    """Run one narrowing pass.

    Moves are AND-ed: an entry stays only if it can learn every listed move.
    All other categories match when any one of their values does.

    Raises:
        UnknownMoveInFilterError: If a move filter names a move the catalog doesn't know.
    """
    if isinstance(category, MoveFilter):
        moves = _resolve_moves(category, catalog)
        context = LearnContext()
        return tuple(entry for entry in entries if all(can_learn(move, entry, context) is None for move in moves))

    matches = _matcher(category)
    return tuple(entry for entry in entries if matches(entry))


def narrow(query: ParsedQuery, catalog: CatalogProvider, can_learn: LearnabilityPredicate) -> WorkingSet:
    """Fold the query's categories over the initial working set, in query order."""
    working = initial_entries(query, catalog)
    for category in query.categories:
        before = len(working)
        working = apply_filter(working, category, catalog, can_learn)
        logger.debug("%s filter %s: %d -> %d entries", category.kind, category.values, before, len(working))
    return working


def search(
    query: ParsedQuery,
    catalog: CatalogProvider,
    can_learn: LearnabilityPredicate,
    *,
    limit: int = DEFAULT_LIMIT,
    rng: random.Random | None = None,
) -> SearchResult:
    """Find the species matching every category of `query`.

    Args:
        query: Parsed query.
        catalog: Catalog to search.
        can_learn: Learnability predicate used by move filters.
        limit: Largest result reported without sampling.
        rng: Random source used when sampling a large result.

    Returns:
        The presented result; empty when nothing matched.

    Raises:
        UnknownMoveInFilterError: If a move filter names a move the catalog doesn't know.
        ValueError: If `limit` is smaller than 1.
    """
    if limit < 1:
        raise ValueError(f"Result limit must be at least 1, got {limit}")
    matched: Sequence[CatalogEntry] = narrow(query, catalog, can_learn)
    return present([entry.name for entry in matched], show_all=query.show_all, limit=limit, rng=rng)
