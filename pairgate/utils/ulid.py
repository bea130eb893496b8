"""ULID generation for pairgate run identifiers.

Each CLI run is tagged with a 26-character ULID (Crockford Base32, millisecond
timestamp prefix) so its log records sort and group together.

Uses the `python-ulid` library (see pyproject.toml).
"""

from __future__ import annotations

from ulid import ULID


def generate_ulid() -> str:
    """Generate a new ULID as a 26-character uppercase string."""
    return str(ULID())
