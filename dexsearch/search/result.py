"""ABOUTME: Final search result and the presentation step that produces it.
ABOUTME: Small result sets are kept in catalog order, large ones are sampled down to the limit."""

import random
from collections.abc import Sequence
from dataclasses import dataclass

NO_RESULTS_TEXT = "No Pokémon found."
SHOW_ALL_HINT = 'Redo the search with "all" as a search parameter to show all results.'


@dataclass(frozen=True)
class SearchResult:
    """Names shown for a search, plus how many matches were left out.

    Attributes:
        names: Display names to show, in catalog order unless sampled.
        hidden_count: Matches not included in `names`.
    """

    names: tuple[str, ...] = ()
    hidden_count: int = 0

    @property
    def is_empty(self) -> bool:
        """True for the "no results" outcome."""
        return not self.names

    @property
    def total(self) -> int:
        """Number of species that matched."""
        return len(self.names) + self.hidden_count

    @property
    def truncated(self) -> bool:
        return self.hidden_count > 0

    def format(self) -> str:
        """Render the result as the one-line reply text."""
        if self.is_empty:
            return NO_RESULTS_TEXT
        text = ", ".join(self.names)
        if self.truncated:
            text += f", and {self.hidden_count} more. {SHOW_ALL_HINT}"
        return text


NO_RESULTS = SearchResult()


def present(
    names: Sequence[str],
    *,
    show_all: bool,
    limit: int,
    rng: random.Random | None = None,
) -> SearchResult:
    """Decide between the full list and a random sample of `limit` names.

    Args:
        names: Display names of every match, in catalog order.
        show_all: Always return the full list.
        limit: Largest list returned without sampling.
        rng: Random source for the sample. Defaults to the module-level generator.

    Returns:
        The full list when it is short enough or show_all is set, otherwise a
        uniform sample of `limit` names with the rest counted in hidden_count.

    Raises:
        ValueError: If `limit` is smaller than 1.
    """
    if limit < 1:
        raise ValueError(f"Result limit must be at least 1, got {limit}")
    if not names:
        return NO_RESULTS
    if show_all or len(names) <= limit:
        return SearchResult(names=tuple(names))

    sample = (rng or random).sample(list(names), limit)
    return SearchResult(names=tuple(sample), hidden_count=len(names) - limit)
