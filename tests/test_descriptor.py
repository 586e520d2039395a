import shutil
import pytest
import numpy as np
from ase import Atoms
from ase.build import bulk, molecule
from shipdescriptors import (
    Config,
    ship_basis,
    hyperx_ship_basis,
    descriptors,
    SHIPDescriptor,
    Structure,
    ConfigurationError,
    ConversionError,
    EvaluationError,
)

requires_julia = pytest.mark.skipif(
    shutil.which(Config.julia_runtime) is None,
    reason='Julia with SHIPs.jl is required',
)


@requires_julia
def test_silicon_descriptor_matrix(si):

    basis = ship_basis(si, deg=6, rcut=4.0)
    assert basis.variant == 'SparseSHIP'
    assert len(basis) > 0
    assert basis.species == ['Si']

    matrix = descriptors(basis, si)
    assert matrix.shape == (len(basis), 16)
    assert matrix.dtype == np.float64

    # Every atom in diamond silicon has the same environment
    assert np.allclose(matrix, matrix[:, :1])
    assert np.linalg.norm(matrix[:, 0]) > 0


@requires_julia
def test_descriptors_are_deterministic(si):

    basis = ship_basis(si, deg=6, rcut=4.0)
    assert np.array_equal(descriptors(basis, si), descriptors(basis, si))


@requires_julia
def test_structure_and_ase_atoms_give_the_same_matrix(si):

    basis = ship_basis(si, deg=6, rcut=4.0)
    structure = Structure.from_ase(si)

    assert np.array_equal(
        descriptors(basis, si), descriptors(basis, structure)
    )


@requires_julia
def test_reordering_atoms_reorders_columns(si):

    si.rattle(stdev=0.05, seed=1)
    basis = ship_basis(si, deg=6, rcut=4.0)
    matrix = descriptors(basis, si)

    perm = np.random.RandomState(42).permutation(len(si))
    permuted_matrix = descriptors(basis, si[perm])

    assert np.allclose(permuted_matrix, matrix[:, perm])


@requires_julia
def test_basis_length_is_independent_of_the_structure(si):

    basis = ship_basis(species=['Si'], deg=6, rcut=4.0)

    small = bulk('Si', cubic=True)
    assert descriptors(basis, small).shape == (len(basis), 8)
    assert descriptors(basis, si).shape == (len(basis), 16)


@requires_julia
def test_species_are_inferred_in_order_of_appearance(h2o_atoms):

    basis = ship_basis(h2o_atoms, deg=4, rcut=3.0)
    assert basis.species == ['O', 'H']

    basis = ship_basis(molecule('CH4'), deg=4, rcut=3.0)
    assert basis.species == ['C', 'H']


@requires_julia
def test_explicit_species_are_used_verbatim(si, h2o_atoms):

    basis = ship_basis(h2o_atoms, deg=4, rcut=3.0, species=['H', 'O'])
    assert basis.species == ['H', 'O']

    # Species not present in the structure are kept
    basis = ship_basis(si, deg=6, rcut=4.0, species=['Si', 'C'])
    single = ship_basis(si, deg=6, rcut=4.0)
    assert basis.species == ['Si', 'C']
    assert len(basis) > len(single)

    matrix = descriptors(basis, si)
    assert matrix.shape == (len(basis), 16)
    assert np.all(np.isfinite(matrix))


@requires_julia
def test_explicit_species_missing_from_the_basis_fail_on_evaluation(si):

    basis = ship_basis(si, deg=6, rcut=4.0, species=['C'])
    assert basis.species == ['C']

    with pytest.raises(EvaluationError):
        _ = descriptors(basis, si)


@requires_julia
def test_unknown_neighbour_species_fail_on_evaluation(h2o_atoms):

    basis = ship_basis(deg=4, rcut=3.0, species=['O'])

    with pytest.raises(EvaluationError):
        _ = descriptors(basis, h2o_atoms)


@requires_julia
def test_both_variants_accept_the_same_parameters(si):

    params = dict(deg=6, rcut=4.0, bodyorder=3, wY=1.5, r0=2.5, p=2)

    sparse = ship_basis(si, **params)
    hyperx = hyperx_ship_basis(si, **params)

    assert hyperx.variant == 'HyperbolicCrossSHIP'
    assert len(hyperx) > 0
    assert hyperx != sparse
    assert descriptors(hyperx, si).shape == (len(hyperx), 16)


@requires_julia
def test_higher_body_order_basis_is_larger(h2o_atoms):

    three_body = ship_basis(h2o_atoms, deg=4, rcut=3.0, bodyorder=3)
    four_body = ship_basis(h2o_atoms, deg=4, rcut=3.0, bodyorder=4)

    assert len(four_body) > len(three_body)

    matrix = descriptors(four_body, h2o_atoms)
    assert matrix.shape == (len(four_body), 3)
    assert np.all(np.isfinite(matrix))


@requires_julia
def test_empty_structure_gives_an_empty_matrix():

    basis = ship_basis(species=['Si'], deg=6, rcut=4.0)

    matrix = descriptors(basis, Atoms())
    assert matrix.shape == (len(basis), 0)

    representation = SHIPDescriptor(basis).compute_representation(Atoms())
    assert representation.shape == (1, len(basis))
    assert np.allclose(representation, 0.0)


def test_missing_parameters_raise(si):

    with pytest.raises(ConfigurationError):
        _ = ship_basis(si, rcut=4.0)

    with pytest.raises(ConfigurationError):
        _ = hyperx_ship_basis(si, deg=6)

    with pytest.raises(ConfigurationError):
        _ = ship_basis(deg=6, rcut=4.0)

    with pytest.raises(ConfigurationError):
        _ = ship_basis(si, deg=6, rcut=4.0, bodyorder=1)


@requires_julia
def test_unsupported_structure_raises():

    with pytest.raises(ConversionError):
        _ = ship_basis('Si', deg=6, rcut=4.0)

    basis = ship_basis(species=['Si'], deg=6, rcut=4.0)
    with pytest.raises(ConversionError):
        _ = descriptors(basis, [1.0, 2.0, 3.0])


@requires_julia
def test_ship_descriptor_representation(h2o_atoms, methane_atoms):

    basis = ship_basis(species=['H', 'C', 'O'], deg=4, rcut=3.0)
    descriptor = SHIPDescriptor(basis)
    assert descriptor.name == 'SHIPDescriptor'

    single = descriptor.compute_representation(h2o_atoms)
    assert single.shape == (1, len(basis))

    both = descriptor.compute_representation([h2o_atoms, methane_atoms])
    assert both.shape == (2, len(basis))
    assert np.allclose(both[0], single[0])
    assert np.allclose(
        both[0], np.mean(descriptors(basis, h2o_atoms), axis=1)
    )


@requires_julia
def test_ship_descriptor_kernel_vector(h2o_atoms, methane_atoms):

    basis = ship_basis(species=['H', 'C', 'O'], deg=4, rcut=3.0)
    descriptor = SHIPDescriptor(basis)

    kernel = descriptor.kernel_vector(
        h2o_atoms, [h2o_atoms, methane_atoms], zeta=4
    )
    assert kernel.shape == (2,)
    assert np.isclose(kernel[0], 1.0)
    assert kernel[0] > kernel[1]
