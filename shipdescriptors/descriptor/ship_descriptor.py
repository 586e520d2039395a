import numpy as np
from typing import Any, List, Optional, Sequence, Union
from shipdescriptors.log import logger
from shipdescriptors.exceptions import ConfigurationError
from shipdescriptors.parameters import SHIPParameters
from shipdescriptors.structure import (
    Structure,
    convert_structure,
    is_atom_list,
)
from shipdescriptors.basis import SHIPBasis, build_basis
from shipdescriptors.descriptor._base import Descriptor


def ship_basis(
    structure: Any = None,
    deg: Optional[float] = None,
    rcut: Optional[float] = None,
    bodyorder: Optional[int] = None,
    wY: Optional[float] = None,
    r0: Optional[float] = None,
    p: Optional[int] = None,
    species: Optional[Sequence[str]] = None,
) -> SHIPBasis:
    """
    SHIP basis with a total degree restriction, which can be used as a
    descriptor map with descriptors(basis, structure). Call basis.to_dict()
    for a dictionary that fully describes the basis and can be serialised
    to JSON, SHIPBasis.from_dict(d) reverses it.

    e.g.
    ```
    from ase.build import bulk

    atoms = bulk('Si', cubic=True) * (2, 1, 1)
    basis = ship_basis(atoms, deg=6, rcut=4.0)
    matrix = descriptors(basis, atoms)   # shape = (len(basis), 16)
    ```

    ---------------------------------------------------------------------------
    Arguments:
        structure: Structure used to infer the species, e.g. ase.Atoms. Not
                   needed if species are given

        deg: Maximum total degree. The basis contains the products of
             P_k * Y_lm such that sum k + wY * l <= deg

        rcut: Cutoff radius (Å)

        bodyorder: bodyorder = 3 gives three-body (power spectrum like)
                   features, bodyorder = 4 four-body (bispectrum like) ones

        wY: Weight of the angular degree

        r0: Estimate of the nearest-neighbour distance (Å), not crucial

        p: Distance transform exponent, polynomials P_k are polynomials in
           u = ((1 + r0) / (1 + r))^p rather than r

        species: Chemical symbols, used verbatim. If None the distinct
                 symbols in the structure are used, in order of appearance

    Returns:
        (shipdescriptors.basis.SHIPBasis):

    Raises:
        (ConversionError): If the structure cannot be converted

        (ConfigurationError): For missing or invalid parameters
    """
    return _build(
        'SparseSHIP', structure, deg, rcut, bodyorder, wY, r0, p, species
    )


def hyperx_ship_basis(
    structure: Any = None,
    deg: Optional[float] = None,
    rcut: Optional[float] = None,
    bodyorder: Optional[int] = None,
    wY: Optional[float] = None,
    r0: Optional[float] = None,
    p: Optional[int] = None,
    species: Optional[Sequence[str]] = None,
) -> SHIPBasis:
    """
    SHIP basis with a hyperbolic cross degree restriction, i.e. products
    with prod (1 + k + wY * l) <= 1 + deg. Arguments are the same as for
    ship_basis
    """
    return _build(
        'HyperbolicCrossSHIP',
        structure,
        deg,
        rcut,
        bodyorder,
        wY,
        r0,
        p,
        species,
    )


def _build(
    variant: str,
    structure: Any,
    deg: Optional[float],
    rcut: Optional[float],
    bodyorder: Optional[int],
    wY: Optional[float],
    r0: Optional[float],
    p: Optional[int],
    species: Optional[Sequence[str]],
) -> SHIPBasis:
    if structure is not None:
        structure = convert_structure(structure)

    params = SHIPParameters(
        deg=deg,
        rcut=rcut,
        bodyorder=bodyorder,
        wY=wY,
        r0=r0,
        p=p,
        species=species,
    )

    species = _basis_species(params, structure)
    basis = build_basis(variant, params, species)

    logger.info(
        f'Built a {variant} basis of length {len(basis)} for '
        f'{species} with bodyorder = {params.bodyorder}, '
        f'deg = {params.deg} and rcut = {params.rcut} Å'
    )

    return basis


def _basis_species(
    params: SHIPParameters, structure: Optional[Structure]
) -> List[str]:
    """Explicit species if given, otherwise those in the structure"""

    if params.species is not None:
        if structure is not None:
            missing = set(structure.unique_symbols) - set(params.species)
            if len(missing) > 0:
                logger.warning(
                    f'Species {sorted(missing)} are in the structure but not '
                    f'in the explicit species {params.species}'
                )

        return params.species

    if structure is None:
        raise ConfigurationError(
            'Cannot determine the species. Need either a structure or an '
            'explicit list of species'
        )

    if len(structure) == 0:
        raise ConfigurationError(
            'Cannot infer species from a structure without atoms'
        )

    return structure.unique_symbols


def descriptors(basis: SHIPBasis, structure: Any) -> np.ndarray:
    """
    Descriptor matrix of a structure, where the i-th column is the
    descriptor vector of the neighbourhood of the i-th atom

    ---------------------------------------------------------------------------
    Arguments:
        basis: SHIP basis

        structure: e.g. ase.Atoms or a shipdescriptors Structure

    Returns:
        (np.ndarray): shape = (len(basis), n_atoms)

    Raises:
        (ConversionError): If the structure cannot be converted

        (EvaluationError): If any atom cannot be evaluated
    """
    structure = convert_structure(structure)
    matrix = np.zeros((len(basis), structure.n_atoms), dtype=float)

    logger.debug(
        f'Evaluating a basis of length {len(basis)} on {structure.n_atoms} '
        f'atoms'
    )

    if structure.n_atoms == 0:
        return matrix

    atoms = basis.atoms_for(structure)

    for i in range(structure.n_atoms):
        matrix[:, i] = basis.site_descriptor(atoms, i)

    return matrix


class SHIPDescriptor(Descriptor):
    """SHIP Descriptor Representation."""

    def __init__(self, basis: SHIPBasis):
        """
        Structure level SHIP descriptor, the mean of the per-atom descriptor
        vectors

        Arguments:
            basis (SHIPBasis): Basis made with ship_basis or
                hyperx_ship_basis.
        """
        super().__init__(name='SHIPDescriptor')
        self.basis = basis

    def compute_representation(
        self, structures: Union[Any, Sequence[Any]]
    ) -> np.ndarray:
        """
        Mean SHIP descriptor vector of one or more structures

        compute_representation(atoms)           -> [[v0, v1, ..]]

        compute_representation([atoms1, atoms2]) -> [[v0, v1, ..],
                                                     [u0, u1, ..]]

        -----------------------------------------------------------------------
        Arguments:
            structures: A structure or a list of structures

        Returns:
            (np.ndarray): shape = (m, len(basis)) for m structures
        """
        if isinstance(structures, (list, tuple)) and not is_atom_list(
            structures
        ):
            items = structures
        else:
            items = [structures]

        vectors = np.zeros((len(items), len(self.basis)))

        for i, item in enumerate(items):
            matrix = descriptors(self.basis, item)
            if matrix.shape[1] > 0:
                vectors[i] = np.mean(matrix, axis=1)

        return vectors
