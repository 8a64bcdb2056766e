"""ABOUTME: Loads the species catalog from CSV tables with Polars.
ABOUTME: Builds CatalogEntry, Move, Ability records and learnsets from catalog.yml tables."""

import logging
from collections.abc import Iterable
from pathlib import Path

import polars as pl

from dexsearch.catalog.catalog import Catalog, Learnset
from dexsearch.catalog.models import Ability, CatalogEntry, Move
from dexsearch.config import DEFAULT_CATALOG_CONFIG, CatalogSourceConfig
from dexsearch.normalize import to_id

logger = logging.getLogger(__name__)

POKEMON_COLUMNS = ("name", "type1", "tier", "color", "gen")
MOVE_COLUMNS = ("name",)
ABILITY_COLUMNS = ("name",)
LEARNSET_COLUMNS = ("pokemon", "move")

_FALSE_VALUES = {"false", "0", "no", "n"}


def _read_table(path: Path, required_columns: Iterable[str]) -> pl.DataFrame:
    """Read a CSV table with every column as string.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If a required column is missing.
    """
    if not path.exists():
        raise FileNotFoundError(f"Catalog table not found: {path}")

    df = pl.read_csv(path, infer_schema_length=0)
    missing = [col for col in required_columns if col not in df.columns]
    if missing:
        raise ValueError(f"{path.name} is missing columns: {', '.join(missing)}")

    return df.with_columns(pl.col(pl.String).str.strip_chars())


def _optional(row: dict[str, str | None], column: str) -> str | None:
    """Return a cell value, treating blank cells and absent columns as None."""
    return row.get(column) or None


def _parse_pokemon(df: pl.DataFrame) -> list[CatalogEntry]:
    """Convert the pokemon table to catalog entries, keeping row order."""
    entries: list[CatalogEntry] = []
    for row in df.iter_rows(named=True):
        name = row["name"]
        if not name:
            continue

        tier = row["tier"] or ""
        abilities = tuple(
            ability
            for ability in (_optional(row, "ability1"), _optional(row, "ability2"), _optional(row, "hidden_ability"))
            if ability
        )
        legal_value = _optional(row, "legal")
        legal = legal_value.lower() not in _FALSE_VALUES if legal_value else tier != "Illegal"
        prevo = _optional(row, "prevo")

        try:
            gen = int(row["gen"])
        except (TypeError, ValueError):
            raise ValueError(f"Invalid generation for {name}: {row['gen']!r}") from None

        entries.append(
            CatalogEntry(
                id=to_id(name),
                name=name,
                types=(row["type1"], _optional(row, "type2")),
                tier=tier,
                color=row["color"] or "",
                gen=gen,
                abilities=abilities,
                legal=legal,
                prevo=to_id(prevo) if prevo else None,
            )
        )
    return entries


def _parse_moves(df: pl.DataFrame) -> list[Move]:
    return [
        Move(
            id=to_id(row["name"]),
            name=row["name"],
            type=_optional(row, "type") or "",
            category=_optional(row, "category") or "",
        )
        for row in df.iter_rows(named=True)
        if row["name"]
    ]


def _parse_abilities(df: pl.DataFrame) -> list[Ability]:
    return [Ability(id=to_id(row["name"]), name=row["name"]) for row in df.iter_rows(named=True) if row["name"]]


def _parse_learnsets(df: pl.DataFrame) -> dict[str, Learnset]:
    """Group learnset rows into species id -> move id -> generations.

    Rows without a generation count as learnable in every generation (stored as gen 0).
    """
    if "gen" not in df.columns:
        df = df.with_columns(pl.lit(None, dtype=pl.String).alias("gen"))

    grouped = (
        df.filter((pl.col("pokemon").fill_null("") != "") & (pl.col("move").fill_null("") != ""))
        .with_columns(
            pl.col("pokemon").map_elements(to_id, return_dtype=pl.String).alias("pokemon_id"),
            pl.col("move").map_elements(to_id, return_dtype=pl.String).alias("move_id"),
            pl.col("gen").cast(pl.Int64, strict=False).fill_null(0).alias("gen_int"),
        )
        .group_by(["pokemon_id", "move_id"], maintain_order=True)
        .agg(pl.col("gen_int").unique())
    )

    learnsets: dict[str, dict[str, frozenset[int]]] = {}
    for row in grouped.iter_rows(named=True):
        learnsets.setdefault(row["pokemon_id"], {})[row["move_id"]] = frozenset(row["gen_int"])
    return dict(learnsets)


def load_catalog(catalog_dir: Path, source_config: CatalogSourceConfig | None = None) -> Catalog:
    """Load the catalog from the CSV tables in `catalog_dir`.

    Args:
        catalog_dir: Directory containing the table files.
        source_config: Table file configuration. Defaults to the built-in table names.

    Returns:
        Populated Catalog.

    Raises:
        FileNotFoundError: If a required table file doesn't exist.
        ValueError: If a table misses required columns or holds invalid values.
    """
    if source_config is None:
        source_config = DEFAULT_CATALOG_CONFIG

    entries = _parse_pokemon(_read_table(source_config.get_table_path("pokemon", catalog_dir), POKEMON_COLUMNS))
    moves = _parse_moves(_read_table(source_config.get_table_path("moves", catalog_dir), MOVE_COLUMNS))
    abilities = _parse_abilities(_read_table(source_config.get_table_path("abilities", catalog_dir), ABILITY_COLUMNS))

    learnsets: dict[str, Learnset] = {}
    if "learnsets" in source_config.tables:
        learnsets_path = source_config.get_table_path("learnsets", catalog_dir)
        if learnsets_path.exists() or source_config.tables["learnsets"].required:
            learnsets = _parse_learnsets(_read_table(learnsets_path, LEARNSET_COLUMNS))
        else:
            logger.warning("No learnsets table at %s; move filters will match nothing", learnsets_path)

    logger.info(
        "Loaded catalog from %s: %d species, %d moves, %d abilities, %d learnsets",
        catalog_dir,
        len(entries),
        len(moves),
        len(abilities),
        len(learnsets),
    )
    return Catalog(entries, moves, abilities, learnsets)
