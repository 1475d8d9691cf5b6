"""
result.py — Search Result
==========================
Every search function returns one SearchResult:

    • visited_order – coordinates in the order they were EXPANDED
    • path          – start → end inclusive, or empty if end is unreachable

It is a SNAPSHOT.  The search function is the only writer; the animator
and the recorder are pure readers.
"""

from dataclasses import dataclass, field
from typing import List

from maze import Coord


@dataclass(frozen=True)
class SearchResult:
    path:          List[Coord] = field(default_factory=list)
    visited_order: List[Coord] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def steps(self) -> int:
        """Number of moves on the path (cells - 1), 0 when not found."""
        return max(len(self.path) - 1, 0)
