"""ABOUTME: Logging setup for the dexsearch CLI.
ABOUTME: Applies a YAML dictConfig file, optionally overriding the package logger level."""

import logging
import logging.config
import typing
from pathlib import Path

import yaml

PACKAGE_LOGGER = "dexsearch"


def init_logging(filepath: Path, level: str | None = None) -> dict[str, typing.Any]:
    """Read the logging config yaml at `filepath` and apply it globally.

    Args:
        filepath: Path to the logging configuration yaml file.
        level: Level name for the dexsearch logger (e.g., "DEBUG"). Replaces
            whatever level the file sets for it.

    Returns:
        The logging configuration as dict, including the level override.

    Raises:
        FileNotFoundError: If `filepath` does not exist.
    """
    if not filepath.exists():
        raise FileNotFoundError(f"Logging config not found: {filepath}")

    config: dict[str, typing.Any] = yaml.safe_load(filepath.read_text(encoding="utf-8"))
    if level is not None:
        loggers = config.setdefault("loggers", {})
        loggers.setdefault(PACKAGE_LOGGER, {})["level"] = level.upper()
    logging.config.dictConfig(config)
    return config
