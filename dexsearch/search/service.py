"""ABOUTME: DexSearcher ties the query parser, engine, catalog, and learnability predicate together.
ABOUTME: Also holds the help text shown for the search command."""

import random

from dexsearch.catalog.catalog import Catalog
from dexsearch.learnsets import LearnabilityPredicate, LearnsetChecker
from dexsearch.search.engine import search
from dexsearch.search.parser import parse
from dexsearch.search.result import SearchResult
from dexsearch.settings import settings

HELP_LINES: tuple[str, ...] = (
    "dexsearch [type], [move], [move], ... - Searches for Pokemon that fulfill the selected criteria.",
    "Search categories are: type, tier, color, moves, ability, gen.",
    "Valid colors are: green, red, blue, white, brown, yellow, purple, pink, gray and black.",
    "Valid tiers are: Uber/OU/BL/UU/BL2/RU/NU/NFE/LC/CAP/Limbo.",
    'Types must be followed by " type", e.g., "dragon type".',
    "Up to 4 moves, 1 ability and 2 types can be given.",
    'Add "all" to list every match instead of a random 10.',
    "The order of the parameters does not matter.",
)


class DexSearcher:
    """Runs raw query strings against one catalog."""

    def __init__(
        self,
        catalog: Catalog,
        can_learn: LearnabilityPredicate | None = None,
        limit: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.catalog = catalog
        self.can_learn = can_learn if can_learn is not None else LearnsetChecker(catalog)
        self.limit = limit if limit is not None else settings.RESULT_LIMIT
        if self.limit < 1:
            raise ValueError(f"Result limit must be at least 1, got {self.limit}")
        self.rng = rng

    def run(self, raw: str, *, broadcasting: bool = False) -> SearchResult:
        """Parse and run a query.

        Raises:
            DexSearchError: If the query is invalid.
        """
        query = parse(raw, self.catalog, broadcasting=broadcasting)
        return search(query, self.catalog, self.can_learn, limit=self.limit, rng=self.rng)
