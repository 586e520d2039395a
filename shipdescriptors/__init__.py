from shipdescriptors.config import Config
from shipdescriptors.box import Box
from shipdescriptors.structure import Structure, convert_structure
from shipdescriptors.parameters import SHIPParameters
from shipdescriptors.exceptions import (
    ConversionError,
    ConfigurationError,
    EvaluationError,
)
from shipdescriptors.basis import SHIPBasis, build_basis
from shipdescriptors.descriptor import (
    ship_basis,
    hyperx_ship_basis,
    descriptors,
    SHIPDescriptor,
)

__version__ = '0.1.0'

__all__ = [
    'Config',
    'Box',
    'Structure',
    'convert_structure',
    'SHIPParameters',
    'ConversionError',
    'ConfigurationError',
    'EvaluationError',
    'SHIPBasis',
    'build_basis',
    'ship_basis',
    'hyperx_ship_basis',
    'descriptors',
    'SHIPDescriptor',
]
