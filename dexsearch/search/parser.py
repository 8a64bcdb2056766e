"""ABOUTME: Parser turning a comma-separated dexsearch query into typed filter categories.
ABOUTME: Classifies each token by a fixed priority order and enforces per-category caps."""

import logging
from typing import Any

from dexsearch.catalog.catalog import CatalogProvider
from dexsearch.search.errors import (
    EmptyQueryError,
    ShowAllBroadcastError,
    ShowAllWithoutFiltersError,
    UnrecognizedTokenError,
)
from dexsearch.search.filters import (
    COLORS,
    FILTER_CLASSES,
    MAX_GEN,
    MIN_GEN,
    TIERS,
    CategoryKind,
    FilterCategory,
    ParsedQuery,
)

logger = logging.getLogger(__name__)

SHOW_ALL_TOKEN = "all"
TYPE_SUFFIX = " type"


def _parse_generation(token: str) -> int | None:
    """Return the generation number a token names, or None."""
    if not (token.isascii() and token.isdigit()):
        return None
    gen = int(token)
    return gen if MIN_GEN <= gen <= MAX_GEN else None


def _parse_type(token: str, known_types: frozenset[str]) -> str | None:
    """Return the type label of a "<type> type" token, or None.

    "dragon type" -> "Dragon"
    """
    if not token.endswith(TYPE_SUFFIX):
        return None
    prefix = token[: -len(TYPE_SUFFIX)].strip()
    type_name = prefix[:1].upper() + prefix[1:]
    return type_name if type_name in known_types else None


def _classify(token: str, catalog: CatalogProvider) -> tuple[CategoryKind, Any] | None:
    """Find the category a lowercase token belongs to.

    The "all" token is handled by the caller, between the generation and type checks.

    Returns:
        (kind, value) for the first matching category, or None.
    """
    move = catalog.lookup_move(token)
    if move is not None:
        return CategoryKind.MOVE, move.id

    ability = catalog.lookup_ability(token)
    if ability is not None:
        return CategoryKind.ABILITY, ability.id

    if token in TIERS:
        return CategoryKind.TIER, token

    if token in COLORS:
        return CategoryKind.COLOR, token

    gen = _parse_generation(token)
    if gen is not None:
        return CategoryKind.GENERATION, gen

    return None


def parse(raw: str, catalog: CatalogProvider, *, broadcasting: bool = False) -> ParsedQuery:
    """Parse a raw query such as "dragon type, uber, earthquake".

    Args:
        raw: Comma-separated search parameters.
        catalog: Catalog used to recognize move, ability, and type names.
        broadcasting: True if the result will be shown to a whole room, which forbids "all".

    Returns:
        The categories in the order they first appeared, plus the show-all flag.

    Raises:
        EmptyQueryError: If the query holds no parameters.
        UnrecognizedTokenError: If a token matches no category.
        CategoryCapExceededError: If a category gets more values than it accepts.
        ShowAllBroadcastError: If "all" is used while broadcasting.
        ShowAllWithoutFiltersError: If "all" is the only parameter.
    """
    found: dict[CategoryKind, FilterCategory] = {}
    show_all = False
    saw_token = False

    for raw_token in raw.split(","):
        token = raw_token.strip().lower()
        if not token:
            continue
        saw_token = True

        classified = _classify(token, catalog)
        if classified is None and token == SHOW_ALL_TOKEN:
            if broadcasting:
                raise ShowAllBroadcastError
            show_all = True
            continue

        if classified is None:
            type_name = _parse_type(token, catalog.known_types())
            if type_name is None:
                raise UnrecognizedTokenError(raw_token.strip())
            classified = (CategoryKind.TYPE, type_name)

        kind, value = classified
        current = found.get(kind) or FILTER_CLASSES[kind]()
        found[kind] = current.with_value(value)

    if not saw_token:
        raise EmptyQueryError
    if not found:
        raise ShowAllWithoutFiltersError

    query = ParsedQuery(categories=tuple(found.values()), show_all=show_all)
    logger.debug("Parsed %r into %s", raw, query)
    return query
