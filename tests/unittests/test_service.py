# ABOUTME: Unit tests for the DexSearcher service.
# ABOUTME: Tests end-to-end query runs with the default and custom collaborators.

import random

import pytest

from dexsearch.catalog import Catalog, CatalogEntry, Move
from dexsearch.learnsets import LearnContext, LearnsetChecker
from dexsearch.search import DexSearcher, ShowAllBroadcastError, UnrecognizedTokenError


class TestDexSearcher:
    """Tests for DexSearcher.run."""

    def test_defaults(self, catalog: Catalog) -> None:
        searcher = DexSearcher(catalog)
        assert isinstance(searcher.can_learn, LearnsetChecker)
        assert searcher.limit == 10

    def test_dual_type_query(self, catalog: Catalog) -> None:
        assert DexSearcher(catalog).run("dragon type, flying type").names == ("Dragonite", "Rayquaza")

    def test_move_query_uses_learnsets(self, catalog: Catalog) -> None:
        assert DexSearcher(catalog).run("Earthquake, Outrage, ou").names == ("Dragonite", "Garchomp")

    @pytest.mark.parametrize("limit", [0, -5])
    def test_non_positive_limit_rejected(self, catalog: Catalog, limit: int) -> None:
        with pytest.raises(ValueError, match="at least 1"):
            DexSearcher(catalog, limit=limit)

    def test_custom_predicate(self, catalog: Catalog) -> None:
        def nothing_learnable(move: Move, entry: CatalogEntry, context: LearnContext) -> str | None:
            return "nope"

        assert DexSearcher(catalog, can_learn=nothing_learnable).run("surf").is_empty

    def test_truncation_with_limit(self, fire_catalog: Catalog) -> None:
        result = DexSearcher(fire_catalog, limit=10, rng=random.Random(5)).run("fire type")

        assert len(result.names) == 10
        assert result.total == 15

    def test_show_all(self, fire_catalog: Catalog) -> None:
        assert len(DexSearcher(fire_catalog).run("fire type, all").names) == 15

    def test_errors_propagate(self, catalog: Catalog) -> None:
        with pytest.raises(UnrecognizedTokenError):
            DexSearcher(catalog).run("foobar")

    def test_broadcasting(self, catalog: Catalog) -> None:
        with pytest.raises(ShowAllBroadcastError):
            DexSearcher(catalog).run("ou, all", broadcasting=True)
