# Init for core tractseed objects
"""Core objects"""

import lazy_loader as lazy

__getattr__, __dir__, __all__ = lazy.attach(
    __name__,
    submodules=[
        "errors",
        "geometry",
        "interpolation",
        "rng",
    ],
)
