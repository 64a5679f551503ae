"""
Search options and their defaults.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SearchConfig:
    """Options for a single A* call."""
    max_expansions: Optional[int] = None  # None = run until the open set is empty

    def __post_init__(self):
        if self.max_expansions is not None and self.max_expansions < 1:
            raise ValueError(f"max_expansions must be >= 1 or None, got {self.max_expansions}")


DEFAULT_SEARCH_CONFIG = SearchConfig()
