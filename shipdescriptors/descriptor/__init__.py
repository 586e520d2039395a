from shipdescriptors.descriptor.ship_descriptor import (
    ship_basis,
    hyperx_ship_basis,
    descriptors,
    SHIPDescriptor,
)

__all__ = ['ship_basis', 'hyperx_ship_basis', 'descriptors', 'SHIPDescriptor']
