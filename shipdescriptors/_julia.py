import shutil
import numpy as np
from io import StringIO
from functools import lru_cache
from ase import io
from julia.core import JuliaError
from shipdescriptors.config import Config
from shipdescriptors.log import logger
from shipdescriptors.structure import Structure


@lru_cache(maxsize=None)
def julia_main():
    """
    Julia Main module with SHIPs and JuLIP loaded. Julia is started on the
    first call only, so conversion and parameter handling work without it

    ---------------------------------------------------------------------------
    Returns:
        (julia.Main):

    Raises:
        (RuntimeError): If there is no Julia installation
    """
    runtime = Config.julia_runtime
    if shutil.which(runtime) is None:
        raise RuntimeError(
            f"Failed to find a Julia installation ({runtime}). Make sure "
            "it's present in your $PATH or set Config.julia_runtime"
        )

    from julia.api import Julia

    Julia(runtime=runtime, compiled_modules=False)
    from julia import Main

    Main.eval(f'using {", ".join(Config.julia_packages)}')
    logger.info(f'Loaded {Config.julia_packages} into Julia')

    return Main


def julia_species(species) -> str:
    """Julia vector of symbols e.g. [:O, :H]"""
    return '[:{}]'.format(', :'.join(species))


def julia_atoms(structure: Structure):
    """
    JuLIP atoms for a structure, passed to Julia as extended xyz. Structures
    without a box are placed in a large non-periodic cell

    ---------------------------------------------------------------------------
    Arguments:
        structure:

    Returns:
        (julia JuLIP.Atoms):
    """
    ase_atoms = structure.ase_atoms

    if not np.any(ase_atoms.cell):
        size = Config.nonperiodic_cell_size
        ase_atoms.set_cell(np.eye(3) * size)

    extxyz_io = StringIO()
    io.write(extxyz_io, ase_atoms, format='extxyz')
    extxyz_string = extxyz_io.getvalue()

    return julia_main().eval(
        f'JuLIP.read_extxyz(IOBuffer("""{extxyz_string}"""))[1]'
    )


__all__ = ['JuliaError', 'julia_main', 'julia_species', 'julia_atoms']
