"""ABOUTME: Text normalization utilities for consistent lookup keys.
ABOUTME: Provides to_id for turning move, ability, and species names into ids."""

import re
import unicodedata


def to_id(text: str) -> str:
    """Convert a display name to a lookup id.

    Handles:
    - Unicode normalization (accents, special chars)
    - Lowercase conversion
    - Removal of everything that isn't a letter or digit

    Args:
        text: Input text to normalize.

    Returns:
        Lowercase alphanumeric id.

    Examples:
        >>> to_id("Pikachu")
        'pikachu'
        >>> to_id("Mr. Mime")
        'mrmime'
        >>> to_id("  Self-Destruct ")
        'selfdestruct'
        >>> to_id("Flabébé")
        'flabebe'
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")

    return re.sub(r"[^a-z0-9]", "", text.lower())
