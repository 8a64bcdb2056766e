"""ABOUTME: Errors raised while parsing or running a species search.
ABOUTME: Every message is the reply text shown to the user who made the query."""

HELP_HINT = 'Try "dexsearch help" for more information on this command.'


class DexSearchError(ValueError):
    """Base class for query-scoped search failures."""


class EmptyQueryError(DexSearchError):
    """The query holds no search parameters at all."""

    def __init__(self) -> None:
        super().__init__(f"No search parameters were given.\n{HELP_HINT}")


class UnrecognizedTokenError(DexSearchError):
    """A token matched none of the search categories."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f'"{token}" could not be found in any of the search categories.')


class CategoryCapExceededError(DexSearchError):
    """A category was given more values than it accepts."""

    def __init__(self, category: str, limit: int) -> None:
        self.category = category
        self.limit = limit
        super().__init__(_cap_message(category, limit))


class ShowAllWithoutFiltersError(DexSearchError):
    """Only "all" was given, without any real filter."""

    def __init__(self) -> None:
        super().__init__(f'No search parameters other than "all" were found.\n{HELP_HINT}')


class ShowAllBroadcastError(DexSearchError):
    """The "all" parameter was used in a search that is being broadcast."""

    def __init__(self) -> None:
        super().__init__('A search with the parameter "all" cannot be broadcast.')


class UnknownMoveInFilterError(DexSearchError):
    """A move filter references a move the catalog does not know."""

    def __init__(self, move: str) -> None:
        self.move = move
        super().__init__(f'"{move}" is not a known move.')


_NUMBER_WORDS = {2: "two"}


def _cap_message(category: str, limit: int) -> str:
    if limit == 1:
        return f"Specify only one {category}."
    plural = "abilities" if category == "ability" else f"{category}s"
    count = _NUMBER_WORDS.get(limit, str(limit))
    return f"Specify a maximum of {count} {plural}."
