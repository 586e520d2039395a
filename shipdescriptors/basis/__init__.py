from shipdescriptors.basis.ship import SHIPBasis, build_basis, variants

__all__ = ['SHIPBasis', 'build_basis', 'variants']
