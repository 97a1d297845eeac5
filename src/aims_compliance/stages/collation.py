"""
Text comparison rules shared by the stages.

The source tables live under a case-insensitive SQL Server collation that
ignores trailing spaces, and fixed-width CHAR columns arrive space padded.
Equality, ranking and ordering of text all go through collation_key so the
stages compare text the way the database does.
"""

from __future__ import annotations

from typing import Optional


def collation_key(value: Optional[str]) -> str:
    """Case-folded text without surrounding padding; None becomes ''."""
    if value is None:
        return ""
    return value.strip().casefold()


def text_equals(left: Optional[str], right: Optional[str]) -> bool:
    """Equality under collation_key. A missing value equals nothing."""
    if left is None or right is None:
        return False
    return collation_key(left) == collation_key(right)
