import numpy as np
import ase.atoms
import autode.atoms
from typing import Any, List, Optional, Sequence
from ase.data import chemical_symbols as _known_symbols
from shipdescriptors.box import Box
from shipdescriptors.exceptions import ConversionError


class Structure:
    """Set of atoms, perhaps in a periodic box"""

    def __init__(
        self,
        symbols: Sequence[str],
        positions: Any,
        box: Optional[Box] = None,
        pbc: Optional[Sequence[bool]] = None,
    ):
        """
        Internal atomic structure on which a SHIP basis is evaluated. Treated
        as immutable once created: positions and symbols are returned as
        copies.

        -----------------------------------------------------------------------
        Arguments:
            symbols: Chemical symbols, one per atom e.g. ['Si', 'Si']

            positions: Cartesian coordinates (Å), shape = (n_atoms, 3)

            box: Periodic cell. If None the structure is not periodic

            pbc: Periodicity along each lattice vector. Defaults to periodic
                 in all directions if a box is given

        Raises:
            (ConversionError): If the symbols or positions are malformed
        """
        symbols = [str(s) for s in symbols]
        for symbol in symbols:
            if symbol not in _known_symbols[1:]:
                raise ConversionError(f'Unknown chemical symbol: {symbol}')

        try:
            positions = np.array(positions, dtype=float).reshape(-1, 3)

        except ValueError as err:
            raise ConversionError(f'Malformed atomic positions: {err}')

        if len(positions) != len(symbols):
            raise ConversionError(
                f'Had {len(symbols)} symbols but {len(positions)} positions'
            )

        if not np.all(np.isfinite(positions)):
            raise ConversionError('Atomic positions must be finite')

        if pbc is None:
            pbc = [box is not None] * 3

        if any(pbc) and (
            box is None or np.any(box.size[np.array(pbc, dtype=bool)] == 0)
        ):
            raise ConversionError(
                'A periodic structure requires a lattice vector along '
                'every periodic direction'
            )

        self._symbols = symbols
        self._positions = positions
        self.box = box
        self.pbc = np.array(pbc, dtype=bool).reshape(3)

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self):
        return f'Structure({"".join(self._symbols)}, box={self.box})'

    @property
    def n_atoms(self) -> int:
        """Number of atoms in this structure"""
        return len(self)

    @property
    def chemical_symbols(self) -> List[str]:
        return list(self._symbols)

    @property
    def unique_symbols(self) -> List[str]:
        """
        Distinct chemical symbols in the order they first occur

        -----------------------------------------------------------------------
        Returns:
            (list(str)): e.g. ['O', 'H'] for the atoms O, H, H
        """
        return list(dict.fromkeys(self._symbols))

    @property
    def positions(self) -> np.ndarray:
        return self._positions.copy()

    @property
    def ase_atoms(self) -> 'ase.atoms.Atoms':
        """ASE atoms for this structure"""
        _atoms = ase.atoms.Atoms(
            symbols=self._symbols,
            positions=self._positions,
            pbc=self.pbc,
        )

        if self.box is not None:
            _atoms.set_cell(self.box.cell)

        return _atoms

    @classmethod
    def from_ase(cls, atoms: 'ase.atoms.Atoms') -> 'Structure':
        """Create a structure from ASE atoms"""

        pbc = atoms.get_pbc()
        cell = np.array(atoms.get_cell())
        box = None if not np.any(cell) else Box(cell)

        return cls(
            symbols=atoms.get_chemical_symbols(),
            positions=atoms.get_positions(),
            box=box,
            pbc=pbc,
        )

    @classmethod
    def from_autode(
        cls, atoms: Sequence['autode.atoms.Atom'], box: Any = None
    ) -> 'Structure':
        """
        Create a structure from a list of autodE atoms

        -----------------------------------------------------------------------
        Arguments:
            atoms: autodE atoms

            box: Optional periodic box. Anything with lattice lengths under
                 .size is accepted, as well as a cell accepted by Box
        """
        if box is not None and not isinstance(box, Box):
            box = Box(getattr(box, 'size', box))

        if box is not None and box.has_zero_volume:
            box = None

        return cls(
            symbols=[atom.label for atom in atoms],
            positions=[np.array(atom.coord, dtype=float) for atom in atoms],
            box=box,
        )


def convert_structure(item: Any) -> Structure:
    """
    Convert an atomic structure into a Structure. Accepted are Structures
    (returned unchanged), ASE atoms, autodE species and atom collections,
    lists of autodE atoms and other objects with a list of autodE atoms as
    .atoms and an optional .box

    ---------------------------------------------------------------------------
    Arguments:
        item: Atomic structure

    Returns:
        (shipdescriptors.structure.Structure):

    Raises:
        (ConversionError): If the item is not a supported structure
    """
    if isinstance(item, Structure):
        return item

    if isinstance(item, ase.atoms.Atoms):
        return Structure.from_ase(item)

    if isinstance(item, autode.atoms.Atom):
        return Structure.from_autode([item])

    if isinstance(item, (list, tuple)) and is_atom_list(item):
        return Structure.from_autode(item)

    atoms = getattr(item, 'atoms', None)
    if atoms is not None and is_atom_list(atoms):
        return Structure.from_autode(atoms, box=getattr(item, 'box', None))

    if isinstance(item, autode.atoms.AtomCollection) and atoms is None:
        raise ConversionError(f'{item} has no atoms')

    raise ConversionError(
        f'Could not convert {type(item).__name__} to a structure'
    )


def is_atom_list(items: Sequence[Any]) -> bool:
    return len(items) > 0 and all(
        isinstance(atom, autode.atoms.Atom) for atom in items
    )
