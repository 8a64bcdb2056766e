"""ABOUTME: Configuration loaders for the catalog data source.
ABOUTME: Handles loading and parsing of catalog.yml table configuration."""

from pathlib import Path

import yaml
from pydantic import BaseModel

from dexsearch.settings import settings

REQUIRED_TABLES = ("pokemon", "moves", "abilities")


class TableConfig(BaseModel):
    """Configuration for a single catalog table."""

    filename: str
    description: str
    required: bool = True


class CatalogSourceConfig(BaseModel):
    """Configuration for the CSV tables making up the catalog."""

    tables: dict[str, TableConfig]

    def get_table_path(self, table_name: str, catalog_dir: Path) -> Path:
        """Resolve the file path of a configured table.

        Args:
            table_name: Name of the table as defined in the config.
            catalog_dir: Directory the table files live in.

        Returns:
            Path to the table's CSV file.

        Raises:
            KeyError: If table_name is not configured.
        """
        if table_name not in self.tables:
            raise KeyError(f"Table '{table_name}' not found in configuration")

        return catalog_dir / self.tables[table_name].filename

    def get_table_names(self) -> list[str]:
        """Return list of configured table names."""
        return list(self.tables.keys())


DEFAULT_CATALOG_CONFIG = CatalogSourceConfig(
    tables={
        "pokemon": TableConfig(filename="pokemon.csv", description="Species records"),
        "moves": TableConfig(filename="moves.csv", description="Move records"),
        "abilities": TableConfig(filename="abilities.csv", description="Ability records"),
        "learnsets": TableConfig(filename="learnsets.csv", description="Species/move pairs", required=False),
    }
)


def load_catalog_config(config_path: Path | None = None) -> CatalogSourceConfig:
    """Load catalog table configuration from YAML file.

    Args:
        config_path: Path to the config file. Defaults to settings.catalog_config_path.

    Returns:
        Parsed CatalogSourceConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config file is invalid or misses a required table.
    """
    if config_path is None:
        config_path = settings.catalog_config_path

    if not config_path.exists():
        raise FileNotFoundError(f"Catalog config not found: {config_path}")

    with config_path.open() as f:
        raw_config = yaml.safe_load(f)

    config = CatalogSourceConfig.model_validate(raw_config)
    missing = [name for name in REQUIRED_TABLES if name not in config.tables]
    if missing:
        raise ValueError(f"Catalog config is missing tables: {', '.join(missing)}")
    return config
