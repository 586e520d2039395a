import numpy as np
import shipdescriptors as sd
from ase.build import bulk

sd.Config.ship_params['r0'] = 2.35


if __name__ == '__main__':

    # Cubic diamond silicon with 16 atoms
    atoms = bulk('Si', cubic=True).repeat((2, 1, 1))

    # Three-body SHIP basis with all P_k * Y_lm with k + 1.5 l <= 6
    basis = sd.ship_basis(atoms, deg=6, rcut=4.0)

    # and the descriptor matrix, one column per atom
    matrix = sd.descriptors(basis, atoms)
    print(f'Descriptor matrix shape: {matrix.shape}')

    # Reordering the atoms reorders the columns
    perm = np.random.permutation(len(atoms))
    assert np.allclose(sd.descriptors(basis, atoms[perm]), matrix[:, perm])

    # Save the basis, which can be reloaded to give identical descriptors
    basis.save('si_basis.json')
    loaded = sd.SHIPBasis.load('si_basis.json')
    assert np.array_equal(sd.descriptors(loaded, atoms), matrix)
