"""
Seed points for diffusion MRI tractography
==========================================

Subpackages
-----------
::

 core          -- Coordinate transforms, interpolation, random streams
 io            -- Loading of mask and weighting volumes
 tracking      -- Seeding strategies and the concurrent seed consumer
 testing       -- Assertion helpers and test decorators
 utils         -- Logging

Utilities
---------
::

 __version__   -- tractseed version

"""
import lazy_loader as lazy

from tractseed.info import __version__

__getattr__, __dir__, _ = lazy.attach(
    __name__,
    submodules=[
        "core",
        "io",
        "testing",
        "tracking",
        "utils",
    ],
)

submodules = [
    'core',
    'io',
    'testing',
    'tracking',
    'utils',
]

__all__ = submodules + ['__version__']
