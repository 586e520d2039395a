from numbers import Integral, Real
from typing import Any, Dict, List, Optional, Sequence
from ase.data import chemical_symbols as _known_symbols
from shipdescriptors.config import Config
from shipdescriptors.exceptions import ConfigurationError


class SHIPParameters:
    """Parameters defining a SHIP basis"""

    def __init__(
        self,
        deg: Optional[float] = None,
        rcut: Optional[float] = None,
        bodyorder: Optional[int] = None,
        wY: Optional[float] = None,
        r0: Optional[float] = None,
        p: Optional[int] = None,
        species: Optional[Sequence[str]] = None,
    ):
        """
        Parameters of a SHIP basis. Any parameter left as None other than
        deg and rcut takes its default from Config.ship_params. The basis
        contains all products of P_k * Y_lm such that k + wY * l <= deg.

        -----------------------------------------------------------------------
        Arguments:
            deg: Maximum total polynomial degree (required)

            rcut: Cutoff radius in Å (required)

            bodyorder: Body order of the basis, bodyorder = 3 gives three-body
                       (power spectrum like) invariants. The correlation
                       order is bodyorder - 1

            wY: Weight of the angular degree l relative to the radial one

            r0: Estimate of the nearest-neighbour distance in Å, sets the
                distance transform u = ((1 + r0) / (1 + r))^p

            p: Exponent of the distance transform

            species: Chemical symbols, used in the given order. If None they
                     are inferred from a structure

        Raises:
            (ConfigurationError): If a parameter is missing or invalid
        """
        defaults = Config.ship_params

        self.deg = _positive(deg, 'deg')
        self.rcut = _positive(rcut, 'rcut')
        self.bodyorder = _integer(
            defaults['bodyorder'] if bodyorder is None else bodyorder,
            'bodyorder',
            minimum=2,
        )
        self.wY = _positive(defaults['wY'] if wY is None else wY, 'wY')
        self.r0 = _positive(defaults['r0'] if r0 is None else r0, 'r0')
        self.p = _integer(defaults['p'] if p is None else p, 'p', minimum=1)
        self.pcut = int(defaults['pcut'])

        self.species = None if species is None else _species(species)

    @property
    def correlation_order(self) -> int:
        """Maximum number of neighbours in a single basis function"""
        return self.bodyorder - 1

    def as_dict(self) -> Dict[str, Any]:
        return {
            'bodyorder': self.bodyorder,
            'deg': self.deg,
            'wY': self.wY,
            'rcut': self.rcut,
            'r0': self.r0,
            'p': self.p,
            'species': self.species,
        }

    def __repr__(self):
        _str = ', '.join(f'{k}={v}' for k, v in self.as_dict().items())
        return f'SHIPParameters({_str})'


def _positive(value: Any, name: str) -> float:
    if value is None:
        raise ConfigurationError(f'{name} must be specified')

    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConfigurationError(f'{name} must be a number. Had: {value!r}')

    if not value > 0:
        raise ConfigurationError(f'{name} must be positive. Had: {value}')

    return float(value)


def _integer(value: Any, name: str, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ConfigurationError(f'{name} must be an integer. Had: {value!r}')

    if value < minimum:
        raise ConfigurationError(f'{name} must be >= {minimum}. Had: {value}')

    return int(value)


def _species(species: Sequence[str]) -> List[str]:
    if isinstance(species, str):
        raise ConfigurationError(
            f'species must be a list of symbols, not a string: {species!r}'
        )

    species = list(species)

    if len(species) == 0:
        raise ConfigurationError('species cannot be empty')

    for symbol in species:
        if symbol not in _known_symbols[1:]:
            raise ConfigurationError(f'Unknown chemical symbol: {symbol!r}')

    if len(set(species)) != len(species):
        raise ConfigurationError(f'Duplicated species in {species}')

    return species
