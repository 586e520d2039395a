from abc import ABC, abstractmethod
import numpy as np
from typing import Any, Sequence, Union
from shipdescriptors.log import logger


class Descriptor(ABC):
    """Abstract base class for structure descriptors."""

    def __init__(self, name: str):
        """
        Initializes the descriptor representation.

        Arguments:
            name (str): Name of the descriptor. e.g., "SHIPDescriptor"
        """
        self.name = str(name)
        logger.info(f'Initialized {self.name} descriptor.')

    @abstractmethod
    def compute_representation(
        self, structures: Union[Any, Sequence[Any]]
    ) -> np.ndarray:
        """
        Compute descriptor representation for one or more structures.

        Arguments:
            structures: A structure (e.g. `ase.Atoms`) or a list of them.
        Returns:
            np.ndarray: One descriptor vector per structure, shape = (m, n).
        """

    def kernel_vector(
        self, structure: Any, structures: Sequence[Any], zeta: int = 4
    ) -> np.ndarray:
        """Calculate the kernel between a structure and a set of structures
        where the kernel is:

        .. math::

            K(p_a, p_b) = (p_a . p_b / (p_a.p_a x p_b.p_b)^1/2 )^ζ

        -----------------------------------------------------------------------
        Arguments:
            structure:

            structures:

            zeta: Power to raise the kernel to

        Returns:
            (np.ndarray): Vector, shape = len(structures)"""

        v1 = self.normalize(self.compute_representation(structure)[0])
        m1 = np.array(
            [
                self.normalize(v)
                for v in self.compute_representation(structures)
            ]
        )

        return np.power(np.dot(m1, v1), zeta)

    @staticmethod
    def normalize(vector: np.ndarray) -> np.ndarray:
        """
        Normalize a feature vector to unit norm.

        Arguments:
            vector (np.ndarray): Input vector.

        Returns:
            np.ndarray: Normalized vector.
        """
        norm = np.linalg.norm(vector)
        return vector if norm == 0 else vector / norm
