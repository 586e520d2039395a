class _ConfigClass:
    """
    SHIP descriptor configuration

    This class contains the default parameters used to build a SHIP basis.
    Every builder reads its defaults from here so they are defined only once.
    The cutoff radius and polynomial degree have no default and must always
    be given. Defaults can be changed globally, e.g.
    ```
    from shipdescriptors.config import Config

    Config.ship_params['r0'] = 2.35
    Config.julia_runtime = '/opt/julia-1.10.2/bin/julia'
    ```
    """

    # Default SHIP basis parameters
    ship_params = {
        'bodyorder': 3,  # 3 -> three-body (power-spectrum like) invariants
        'wY': 1.5,  # weight of l in the degree k + wY * l
        'r0': 2.5,  # Å, rough nearest-neighbour distance
        'p': 2,  # distance transform exponent
        'pcut': 2,  # smoothness of the cutoff envelope
    }

    # Julia executable and the packages providing the SHIP basis
    julia_runtime = 'julia'
    julia_packages = ['SHIPs', 'JuLIP']

    # Å. Cell given to structures without a box before passing to JuLIP
    nonperiodic_cell_size = 100.0


# Singleton instance of the configuration
Config = _ConfigClass()
