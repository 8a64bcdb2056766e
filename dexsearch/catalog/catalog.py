"""ABOUTME: In-memory, read-only species catalog.
ABOUTME: Implements the lookups the query parser and search engine rely on."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Protocol

from dexsearch.catalog.models import TYPES, Ability, CatalogEntry, Move
from dexsearch.normalize import to_id

# move id -> generations the move can be learned in
Learnset = Mapping[str, frozenset[int]]

_EMPTY_LEARNSET: Learnset = MappingProxyType({})


class CatalogProvider(Protocol):
    """What the parser and engine need from a catalog."""

    def all_entries(self) -> tuple[CatalogEntry, ...]: ...

    def lookup_move(self, name: str) -> Move | None: ...

    def lookup_ability(self, name: str) -> Ability | None: ...

    def known_types(self) -> frozenset[str]: ...


class Catalog:
    """Species, moves, abilities, and learnsets held in memory.

    Entries keep the order they were given in; that order is the order
    unsampled search results are reported in.
    """

    def __init__(
        self,
        entries: Iterable[CatalogEntry],
        moves: Iterable[Move] = (),
        abilities: Iterable[Ability] = (),
        learnsets: Mapping[str, Learnset] | None = None,
        types: Iterable[str] | None = None,
    ) -> None:
        self._entries: tuple[CatalogEntry, ...] = tuple(entries)
        self._entries_by_id = {entry.id: entry for entry in self._entries}
        if len(self._entries_by_id) != len(self._entries):
            raise ValueError("Catalog entries must have unique ids")

        self._moves = {move.id: move for move in moves}
        self._abilities = {ability.id: ability for ability in abilities}
        self._learnsets: dict[str, Learnset] = {
            species_id: MappingProxyType(dict(learnset)) for species_id, learnset in (learnsets or {}).items()
        }
        self._types = frozenset(TYPES if types is None else types)

    def __len__(self) -> int:
        return len(self._entries)

    def all_entries(self) -> tuple[CatalogEntry, ...]:
        """Return every entry in stable catalog order."""
        return self._entries

    def get_entry(self, species_id: str) -> CatalogEntry | None:
        """Return the entry with the given id, if any."""
        return self._entries_by_id.get(to_id(species_id))

    def lookup_move(self, name: str) -> Move | None:
        """Find a move by display name or id."""
        return self._moves.get(to_id(name))

    def lookup_ability(self, name: str) -> Ability | None:
        """Find an ability by display name or id."""
        return self._abilities.get(to_id(name))

    def known_types(self) -> frozenset[str]:
        """Return the elemental type labels (capitalized, e.g. "Dragon")."""
        return self._types

    def learnset(self, species_id: str) -> Learnset:
        """Return the learnset of a species, empty when none is recorded."""
        return self._learnsets.get(species_id, _EMPTY_LEARNSET)

    @property
    def moves(self) -> tuple[Move, ...]:
        return tuple(self._moves.values())

    @property
    def abilities(self) -> tuple[Ability, ...]:
        return tuple(self._abilities.values())
