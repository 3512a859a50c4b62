# Init file for IO package

import lazy_loader as lazy

__getattr__, __dir__, __all__ = lazy.attach(
    __name__,
    submodules=["image"],
    submod_attrs={"image": ["load_nifti", "load_nifti_data", "load_volume"]},
)
