"""
Solution Module

Value types returned by every solver.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, NamedTuple, Tuple

import numpy as np

from .matrix import Matrix


class SelectedElement(NamedTuple):
    row: int
    col: int
    value: int


@dataclass
class Solution:
    """Selected cells plus their total.

    Unpacks as ``selection, total = solver.solve(matrix)``.
    `stats` carries per-run instrumentation (search leaves, Hungarian
    iterations) and is empty for solvers that record none.
    """

    selection: List[SelectedElement]
    total: int
    solver: str = ""
    stats: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_pairs(cls, matrix: Matrix, pairs: Iterable[Tuple[int, int]],
                   solver: str = "", stats: Dict[str, int] = None) -> "Solution":
        """Build a solution from (row, col) pairs, reading values from `matrix`."""
        selection = [SelectedElement(int(r), int(c), matrix.get(int(r), int(c))) for r, c in pairs]
        total = sum(e.value for e in selection)
        return cls(selection=selection, total=total, solver=solver, stats=dict(stats or {}))

    def __iter__(self):
        yield self.selection
        yield self.total

    def __len__(self) -> int:
        return len(self.selection)

    @property
    def rows(self) -> np.ndarray:
        return np.array([e.row for e in self.selection], dtype=np.int64)

    @property
    def cols(self) -> np.ndarray:
        return np.array([e.col for e in self.selection], dtype=np.int64)

    @property
    def values(self) -> np.ndarray:
        return np.array([e.value for e in self.selection], dtype=np.int64)

    def as_assignment(self) -> Dict[int, int]:
        """Row -> column mapping."""
        return {e.row: e.col for e in self.selection}
