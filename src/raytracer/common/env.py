"""
Where: `raytracer.common.env`
What: lightweight parsing helpers for environment variables.
Why: replace scattered `os.getenv` calls plus their boundary guards.
"""

from __future__ import annotations

import os
from typing import Optional


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """Read an integer environment variable (missing/invalid -> default).

    Parameters
    ----------
    name : str
        Variable name.
    default : Optional[int]
        Fallback value (`None` is allowed).
    min_value : Optional[int]
        Lower bound; a parsed value below it is raised to the bound.

    Returns
    -------
    Optional[int]
        The parsed integer, or `default` when unset or not an integer.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw.strip())
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """Read a string environment variable; blank values count as unset."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


__all__ = ["env_int", "env_str"]
