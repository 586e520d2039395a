import numpy as np
from typing import Sequence, Union


class Box:
    def __init__(
        self, cell: Union[Sequence[float], Sequence[Sequence[float]]]
    ):
        """
        Periodic cell, either cuboidal or triclinic

        -----------------------------------------------------------------------
        Arguments:
            cell: Box lengths a, b, c of a cuboidal box or a 3x3 matrix of
                  lattice vectors (one vector per row)
        """
        cell = np.array(cell, dtype=float)

        if cell.shape == (3,):
            cell = np.diag(cell)

        if cell.shape != (3, 3):
            raise ValueError(
                f'Cannot create a box from a cell with shape {cell.shape}'
            )

        self.cell = cell

    @property
    def size(self) -> np.ndarray:
        """Lengths of the three lattice vectors"""
        return np.linalg.norm(self.cell, axis=1)

    @property
    def volume(self) -> float:
        """Volume of this box"""
        return float(abs(np.linalg.det(self.cell)))

    @property
    def has_zero_volume(self) -> bool:
        """Is this box essentially of zero size"""
        return self.volume < 1e-10

    def __eq__(self, other):
        """Equality of two boxes"""

        return (
            isinstance(other, Box)
            and np.linalg.norm(other.cell - self.cell) < 1e-10
        )

    def __repr__(self):
        return f'Box({self.cell.tolist()})'
