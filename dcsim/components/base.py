from __future__ import annotations
import numpy as np

from ..errors import DimensionMismatchError

Array = np.ndarray


class MnaSystem:
    """
    Working MNA system (A, z) filled in by element stamps.

    Rows and columns are unknown indices; ``None`` stands for the reference
    node, which has no KCL row and no voltage column, so any contribution
    touching it is dropped. Contributions accumulate, they never overwrite.

    Attributes:
        A: Coefficient matrix (size x size).
        z: Right-hand side vector (size).
    """

    def __init__(self, size: int) -> None:
        self.size = size
        self.A: Array = np.zeros((size, size), dtype=float)
        self.z: Array = np.zeros(size, dtype=float)

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise DimensionMismatchError(f"Index {index} outside MNA system of size {self.size}.")

    def add(self, row: int | None, col: int | None, value: float) -> None:
        if row is None or col is None:
            return
        self._check(row)
        self._check(col)
        self.A[row, col] += value

    def add_rhs(self, row: int | None, value: float) -> None:
        if row is None:
            return
        self._check(row)
        self.z[row] += value

    def set_rhs(self, row: int, value: float) -> None:
        self._check(row)
        self.z[row] = value


def stamp_conductance(system: MnaSystem, ia: int | None, ib: int | None, conductance: float) -> None:
    system.add(ia, ia, conductance)
    system.add(ib, ib, conductance)
    system.add(ia, ib, -conductance)
    system.add(ib, ia, -conductance)


def stamp_current_source(system: MnaSystem, ia: int | None, ib: int | None, current: float) -> None:
    """
    Positive current flows from a to b: it leaves node a and enters node b.
    """
    system.add_rhs(ia, -current)
    system.add_rhs(ib, current)


def stamp_voltage_source(system: MnaSystem, aux_idx: int, ia: int | None, ib: int | None, voltage: float) -> None:
    # KCL coupling of the source current, then the V(a) - V(b) = voltage row.
    system.add(ia, aux_idx, 1.0)
    system.add(ib, aux_idx, -1.0)
    system.add(aux_idx, ia, 1.0)
    system.add(aux_idx, ib, -1.0)
    system.set_rhs(aux_idx, voltage)
