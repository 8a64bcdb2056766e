"""ABOUTME: Default move-learnability predicate backed by catalog learnsets.
ABOUTME: A species can learn a move if it or any pre-evolution has the move in its learnset."""

from collections.abc import Callable
from dataclasses import dataclass

from dexsearch.catalog.catalog import Catalog
from dexsearch.catalog.models import CatalogEntry, Move


@dataclass(frozen=True)
class LearnContext:
    """Constraints a learnability check runs under.

    Attributes:
        max_gen: Only learnset sources from this generation or earlier count.
            None places no restriction.
    """

    max_gen: int | None = None


# (move, entry, context) -> None when learnable, otherwise the reason it is not
LearnabilityPredicate = Callable[[Move, CatalogEntry, LearnContext], str | None]


class LearnsetChecker:
    """Answers whether a species can learn a move from the catalog's learnset table."""

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def __call__(self, move: Move, entry: CatalogEntry, context: LearnContext) -> str | None:
        seen: set[str] = set()
        current: CatalogEntry | None = entry
        while current is not None and current.id not in seen:
            seen.add(current.id)
            if self._has_source(current.id, move.id, context):
                return None
            current = self._catalog.get_entry(current.prevo) if current.prevo else None

        return f"{entry.name} can't learn {move.name}."

    def _has_source(self, species_id: str, move_id: str, context: LearnContext) -> bool:
        gens = self._catalog.learnset(species_id).get(move_id)
        if not gens:
            return False
        if context.max_gen is None:
            return True
        # gen 0 marks a source without generation information
        return any(gen <= context.max_gen for gen in gens)
