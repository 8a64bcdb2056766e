"""ABOUTME: Immutable record types for the species catalog.
ABOUTME: Contains CatalogEntry, Move, Ability, and the elemental TYPES list."""

from dataclasses import dataclass

TYPES: list[str] = [
    "Normal",
    "Fire",
    "Water",
    "Electric",
    "Grass",
    "Ice",
    "Fighting",
    "Poison",
    "Ground",
    "Flying",
    "Psychic",
    "Bug",
    "Rock",
    "Ghost",
    "Dragon",
    "Dark",
    "Steel",
    "Fairy",
]


@dataclass(frozen=True)
class CatalogEntry:
    """One species record.

    Attributes:
        id: Lookup id (e.g., "charizard").
        name: Display name (e.g., "Charizard").
        types: Primary type and optional secondary type.
        tier: Tier label (e.g., "OU", "Uber", "CAP", "Illegal").
        color: Color label (e.g., "Red").
        gen: Generation the species was introduced in.
        abilities: Ability display names.
        legal: False for administratively excluded species.
        prevo: Id of the pre-evolution, if any.
    """

    id: str
    name: str
    types: tuple[str, str | None]
    tier: str
    color: str
    gen: int
    abilities: tuple[str, ...] = ()
    legal: bool = True
    prevo: str | None = None


@dataclass(frozen=True)
class Move:
    """A move record."""

    id: str
    name: str
    type: str = ""
    category: str = ""


@dataclass(frozen=True)
class Ability:
    """An ability record."""

    id: str
    name: str
