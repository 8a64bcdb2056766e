"""Contains configurations for the test run."""

from collections.abc import Callable
from pathlib import Path

import pytest

from dexsearch.catalog import Ability, Catalog, CatalogEntry, Move
from dexsearch.normalize import to_id


def make_entry(
    name: str,
    type1: str,
    type2: str | None = None,
    tier: str = "OU",
    color: str = "Red",
    gen: int = 1,
    abilities: tuple[str, ...] = (),
    legal: bool = True,
    prevo: str | None = None,
) -> CatalogEntry:
    """Build a catalog entry with the id derived from the name."""
    return CatalogEntry(
        id=to_id(name),
        name=name,
        types=(type1, type2),
        tier=tier,
        color=color,
        gen=gen,
        abilities=abilities,
        legal=legal,
        prevo=prevo,
    )


def make_moves(*names: str) -> list[Move]:
    return [Move(id=to_id(name), name=name) for name in names]


def make_abilities(*names: str) -> list[Ability]:
    return [Ability(id=to_id(name), name=name) for name in names]


ENTRIES = [
    make_entry("Charizard", "Fire", "Flying", "RU", "Red", 1, ("Blaze", "Solar Power")),
    make_entry("Blastoise", "Water", None, "UU", "Blue", 1, ("Torrent", "Rain Dish")),
    make_entry("Pikachu", "Electric", None, "NU", "Yellow", 1, ("Static", "Lightning Rod")),
    make_entry("Dragonite", "Dragon", "Flying", "OU", "Brown", 1, ("Inner Focus", "Multiscale")),
    make_entry("Gible", "Dragon", "Ground", "LC", "Blue", 4, ("Sand Veil", "Rough Skin")),
    make_entry("Gabite", "Dragon", "Ground", "NFE", "Blue", 4, ("Sand Veil", "Rough Skin"), prevo="gible"),
    make_entry("Garchomp", "Dragon", "Ground", "OU", "Blue", 4, ("Sand Veil", "Rough Skin"), prevo="gabite"),
    make_entry("Rayquaza", "Dragon", "Flying", "Uber", "Green", 3, ("Air Lock",)),
    make_entry("Kyurem", "Dragon", "Ice", "Uber", "Gray", 5, ("Pressure",)),
    make_entry("Haxorus", "Dragon", None, "UU", "Green", 5, ("Rivalry", "Mold Breaker", "Unnerve")),
    make_entry("Tomohawk", "Flying", "Fighting", "CAP", "Brown", 5, ("Intimidate", "Prankster")),
    make_entry("Missingno", "Normal", "Flying", "Illegal", "Gray", 1, (), legal=False),
]

MOVES = make_moves(
    "Earthquake", "Outrage", "Dragon Claw", "Flamethrower", "Surf", "Thunderbolt", "Roost", "Fly", "Ice Beam"
)

ABILITIES = make_abilities(
    "Blaze",
    "Solar Power",
    "Torrent",
    "Rain Dish",
    "Static",
    "Lightning Rod",
    "Inner Focus",
    "Multiscale",
    "Sand Veil",
    "Rough Skin",
    "Air Lock",
    "Pressure",
    "Rivalry",
    "Mold Breaker",
    "Unnerve",
    "Intimidate",
    "Prankster",
)

LEARNSETS: dict[str, dict[str, frozenset[int]]] = {
    "charizard": {
        "flamethrower": frozenset({1}),
        "earthquake": frozenset({1}),
        "fly": frozenset({1}),
        "roost": frozenset({4}),
    },
    "blastoise": {"surf": frozenset({1}), "earthquake": frozenset({1}), "icebeam": frozenset({1})},
    "pikachu": {"thunderbolt": frozenset({1}), "surf": frozenset({0})},
    "dragonite": {
        "outrage": frozenset({2}),
        "earthquake": frozenset({1}),
        "surf": frozenset({1}),
        "roost": frozenset({4}),
        "fly": frozenset({1}),
    },
    "gible": {"earthquake": frozenset({4}), "outrage": frozenset({4})},
    "gabite": {"dragonclaw": frozenset({4})},
    "garchomp": {"flamethrower": frozenset({4})},
    "rayquaza": {"outrage": frozenset({3}), "earthquake": frozenset({3}), "dragonclaw": frozenset({3})},
    "kyurem": {"dragonclaw": frozenset({5}), "icebeam": frozenset({5})},
    "haxorus": {"outrage": frozenset({5}), "earthquake": frozenset({5}), "dragonclaw": frozenset({5})},
    "tomohawk": {"roost": frozenset({5}), "surf": frozenset({5})},
    "missingno": {"surf": frozenset({1})},
}


@pytest.fixture(scope="session")
def entry_factory() -> Callable[..., CatalogEntry]:
    """Returns a helper building catalog entries for ad-hoc catalogs."""
    return make_entry


@pytest.fixture
def catalog() -> Catalog:
    """A small catalog covering every filter category, including CAP and Illegal entries."""
    return Catalog(ENTRIES, MOVES, ABILITIES, LEARNSETS)


@pytest.fixture
def fire_catalog() -> Catalog:
    """Fifteen legal single-type Fire entries, for truncation tests."""
    entries = [make_entry(f"Flame{i:02d}", "Fire", tier="OU", gen=(i % 5) + 1) for i in range(15)]
    return Catalog(entries, MOVES, ABILITIES)


@pytest.fixture
def catalog_dir(tmp_path: Path) -> Path:
    """Write a small set of catalog CSV tables and return their directory."""
    (tmp_path / "pokemon.csv").write_text(
        "name,type1,type2,tier,color,gen,ability1,ability2,hidden_ability,prevo\n"
        "Gible,Dragon,Ground,LC,Blue,4,Sand Veil,,Rough Skin,\n"
        "Garchomp,Dragon,Ground,OU,Blue,4,Sand Veil,,Rough Skin,Gible\n"
        "Dragonite,Dragon,Flying,OU,Brown,1,Inner Focus,,Multiscale,\n"
        "Rayquaza,Dragon,Flying,Uber,Green,3,Air Lock,,,\n"
        "Blastoise,Water,,UU,Blue,1,Torrent,,Rain Dish,\n"
        "Tomohawk,Flying,Fighting,CAP,Brown,5,Intimidate,Prankster,,\n"
        "Missingno.,Normal,Flying,Illegal,Gray,1,,,,\n",
        encoding="utf-8",
    )
    (tmp_path / "moves.csv").write_text(
        "name,type,category\nEarthquake,Ground,Physical\nOutrage,Dragon,Physical\nSurf,Water,Special\n",
        encoding="utf-8",
    )
    (tmp_path / "abilities.csv").write_text(
        "name\nSand Veil\nRough Skin\nInner Focus\nMultiscale\nAir Lock\nTorrent\nRain Dish\nIntimidate\nPrankster\n",
        encoding="utf-8",
    )
    (tmp_path / "learnsets.csv").write_text(
        "pokemon,move,method,gen\n"
        "Gible,Earthquake,level,4\n"
        "Gible,Outrage,egg,\n"
        "Dragonite,Outrage,level,2\n"
        "Dragonite,Surf,tm,1\n"
        "Dragonite,Surf,tm,3\n"
        "Rayquaza,Earthquake,tm,3\n"
        "Blastoise,Surf,tm,1\n",
        encoding="utf-8",
    )
    return tmp_path
