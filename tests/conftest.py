import pytest
import numpy as np
from ase.build import bulk
from autode.atoms import Atom


@pytest.fixture
def si():
    """Cubic diamond silicon, 16 atoms"""
    return bulk('Si', cubic=True).repeat((2, 1, 1))


@pytest.fixture
def h2o_atoms():
    """Water molecule as a list of autodE atoms"""
    return [
        Atom('O', 0.0, 0.0, 0.0),
        Atom('H', 0.96, 0.0, 0.0),
        Atom(
            'H',
            -0.96 * np.cos(np.radians(104.5)),
            0.96 * np.sin(np.radians(104.5)),
            0.0,
        ),
    ]


@pytest.fixture
def methane_atoms():
    """Methane as a list of autodE atoms"""
    return [
        Atom('C', 0, 0, 0),
        Atom('H', 0.629118, 0.629118, 0.629118),
        Atom('H', -0.629118, -0.629118, 0.629118),
        Atom('H', 0.629118, -0.629118, -0.629118),
        Atom('H', -0.629118, 0.629118, -0.629118),
    ]
