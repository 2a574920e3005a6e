"""Utilities for client name normalization.

Appointments reference clients by display name, so every place that stores
a client name goes through the same normalization.
"""

import unicodedata
from typing import Optional


def normalize_display_name(name: Optional[str]) -> str:
    """Normalize a client display name for consistent matching and rendering.

    - Trims whitespace
    - Collapses multiple spaces
    - Preserves accents while normalizing unicode composition

    Args:
        name: raw name string (may be None)

    Returns:
        Normalized display name (empty string if input falsy)
    """
    if not name:
        return ""

    n = unicodedata.normalize("NFC", str(name))
    parts = [p for p in n.split() if p]
    return " ".join(parts)


def same_client_name(left: Optional[str], right: Optional[str]) -> bool:
    """Compare two display names after normalization."""
    return normalize_display_name(left) == normalize_display_name(right)
