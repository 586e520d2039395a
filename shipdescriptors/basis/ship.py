import os
import json
import numpy as np
from tempfile import TemporaryDirectory
from typing import Any, Dict, List, Sequence
from shipdescriptors.log import logger
from shipdescriptors.exceptions import ConfigurationError, EvaluationError
from shipdescriptors.parameters import SHIPParameters
from shipdescriptors.structure import Structure
from shipdescriptors._julia import (
    JuliaError,
    julia_main,
    julia_species,
    julia_atoms,
)

# Degree restrictions of the SHIPs library
variants = ('SparseSHIP', 'HyperbolicCrossSHIP')


class SHIPBasis:
    def __init__(self, jl_basis: Any, variant: str, species: Sequence[str]):
        """
        Symmetric harmonic invariant polynomial basis. Wraps a SHIPs.jl
        SHIPBasis, which maps the neighbourhood of an atom to a fixed length
        vector. Use build_basis, or ship_basis and hyperx_ship_basis, rather
        than constructing directly.

        Treated as immutable once constructed.

        -----------------------------------------------------------------------
        Arguments:
            jl_basis: Julia SHIPBasis

            variant: Name of the degree restriction, one of variants

            species: Chemical symbols of the basis, in the order given to
                     Julia
        """
        if variant not in variants:
            raise ValueError(f'Unknown SHIP basis variant: {variant}')

        self._jl = jl_basis
        self.variant = variant
        self.species = list(species)
        self._length = int(julia_main().length(jl_basis))

    def __len__(self) -> int:
        return self._length

    def __eq__(self, other):
        return (
            isinstance(other, SHIPBasis) and self.to_dict() == other.to_dict()
        )

    def __repr__(self):
        return f'SHIPBasis({self.variant}, {self.species}, n={len(self)})'

    def atoms_for(self, structure: Structure) -> Any:
        """
        JuLIP atoms of a structure that can be evaluated with this basis

        -----------------------------------------------------------------------
        Raises:
            (EvaluationError): If the structure has species not in this basis
        """
        unknown = set(structure.unique_symbols) - set(self.species)
        if len(unknown) > 0:
            raise EvaluationError(
                f'Structure contains {sorted(unknown)}, which are not in the '
                f'basis species {self.species}'
            )

        return julia_atoms(structure)

    def site_descriptor(self, atoms: Any, idx: int) -> np.ndarray:
        """
        Descriptor vector of the environment of a single atom, evaluated by
        site_energy in Julia

        -----------------------------------------------------------------------
        Arguments:
            atoms: JuLIP atoms from atoms_for

            idx: Index of the atom, starting from zero

        Returns:
            (np.ndarray): shape = (len(basis),)

        Raises:
            (EvaluationError): If Julia fails or the result is not finite
        """
        try:
            vector = julia_main().site_energy(self._jl, atoms, idx + 1)

        except JuliaError as err:
            raise EvaluationError(
                f'Failed to evaluate the descriptor of atom {idx}: {err}'
            ) from err

        vector = np.array(vector, dtype=np.float64).reshape(-1)

        if vector.shape != (len(self),) or not np.all(np.isfinite(vector)):
            raise EvaluationError(
                f'Malformed descriptor for atom {idx}: shape '
                f'{vector.shape}, expected ({len(self)},) and finite values'
            )

        return vector

    def to_dict(self) -> Dict[str, Any]:
        """
        Dictionary representation that fully defines this basis. The SHIPs
        dictionary, Dict(basis) in Julia, is under 'ship'
        """
        save = julia_main().eval('(b, f) -> save_dict(f, Dict(b))')

        with TemporaryDirectory() as tmp_dir:
            filename = os.path.join(tmp_dir, 'basis.json')
            save(self._jl, filename)

            with open(filename, 'r') as json_file:
                ship_dict = json.load(json_file)

        return {
            '__id__': 'SHIPBasis',
            'variant': self.variant,
            'species': list(self.species),
            'ship': ship_dict,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'SHIPBasis':
        """
        Recreate a basis from its dictionary representation with read_dict
        in Julia

        -----------------------------------------------------------------------
        Raises:
            (ValueError): If the dictionary does not describe a SHIP basis
        """
        if d.get('__id__') != 'SHIPBasis' or 'ship' not in d:
            raise ValueError(f'Not a SHIPBasis: {d.get("__id__")}')

        with TemporaryDirectory() as tmp_dir:
            filename = os.path.join(tmp_dir, 'basis.json')

            with open(filename, 'w') as json_file:
                json.dump(d['ship'], json_file)

            return cls(
                jl_basis=_read_julia_basis(filename),
                variant=d['variant'],
                species=d['species'],
            )

    def save(self, filename: str) -> None:
        """
        Save the dictionary representation of this basis as JSON

        -----------------------------------------------------------------------
        Arguments:
            filename: e.g. 'basis.json'
        """
        if not filename.endswith('.json'):
            filename += '.json'

        with open(filename, 'w') as json_file:
            json.dump(self.to_dict(), json_file, indent=2)

        logger.info(f'Saved SHIP basis to {filename}')
        return None

    @classmethod
    def load(cls, filename: str) -> 'SHIPBasis':
        """Load a basis saved with SHIPBasis.save"""

        with open(filename, 'r') as json_file:
            return cls.from_dict(json.load(json_file))


def _read_julia_basis(filename: str) -> Any:
    read = julia_main().eval('f -> read_dict(load_dict(f))')

    try:
        return read(filename)

    except JuliaError as err:
        raise ValueError(f'Could not read a SHIP basis: {err}') from err


def build_basis(
    variant: str, params: SHIPParameters, species: List[str]
) -> SHIPBasis:
    """
    Build a SHIP basis in Julia:
    SHIPBasis(variant(bodyorder - 1, species, deg, wY),
              PolyTransform(p, r0), PolyCutoff1s(pcut, rcut))

    ---------------------------------------------------------------------------
    Arguments:
        variant: 'SparseSHIP' or 'HyperbolicCrossSHIP'

        params: Validated parameters

        species: Chemical symbols

    Returns:
        (shipdescriptors.basis.SHIPBasis):

    Raises:
        (ConfigurationError): If Julia cannot build the basis
    """
    if variant not in variants:
        raise ConfigurationError(f'Unknown SHIP basis variant: {variant}')

    try:
        jl_basis = julia_main().eval(
            f"""
        SHIPBasis(
            {variant}({params.correlation_order}, {julia_species(species)},
                      {_julia_degree(params.deg)}, {params.wY}),
            PolyTransform({params.p}, {params.r0}),
            PolyCutoff1s({params.pcut}, {params.rcut})
        )
        """
        )

    except JuliaError as err:
        raise ConfigurationError(
            f'Failed to build a {variant} basis: {err}'
        ) from err

    return SHIPBasis(jl_basis, variant=variant, species=species)


def _julia_degree(deg: float) -> str:
    """Integral degrees are passed to Julia as integers, e.g. 6 not 6.0"""
    return str(int(deg)) if float(deg).is_integer() else str(deg)
