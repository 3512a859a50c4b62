""" This file contains defines parameters for tractseed that we use to fill
settings in setup.py and the tractseed top-level docstring.  In setup.py in
particular, we exec this file, so it cannot import tractseed
"""

# tractseed version information.  An empty _version_extra corresponds to a
# full release.  '.dev' as a _version_extra string means this is a development
# version
_version_major = 0
_version_minor = 3
_version_micro = 0
_version_extra = 'dev0'
# _version_extra = ''

# Format expected by setup.py: string of form "X.Y.Z"
__version__ = f"{_version_major}.{_version_minor}.{_version_micro}{_version_extra}"

CLASSIFIERS = ["Development Status :: 3 - Alpha",
               "Environment :: Console",
               "Intended Audience :: Science/Research",
               "License :: OSI Approved :: BSD License",
               "Operating System :: OS Independent",
               "Programming Language :: Python",
               "Programming Language :: Python :: 3",
               "Topic :: Scientific/Engineering"]

description = 'Seed point generation for diffusion MRI tractography'

long_description = """
=========
tractseed
=========

tractseed generates the start points of streamline tractography. Given a
binary mask or a non-negative weighting volume and its voxel-to-scanner
affine, a seeder hands out seed points in scanner (physical) coordinates, one
per request, and can be shared by many tracking threads at once.

Five strategies are available:

* ``SphereSeeder``: uniform inside a ball.
* ``MaskSeeder``: uniform inside the non-zero voxels of a mask.
* ``RandomPerVoxelSeeder``: every mask voxel once, a fixed number of randomly
  placed seeds in each, then exhausted.
* ``GridPerVoxelSeeder``: every mask voxel once, a regular sub-grid of seeds
  in each, then exhausted.
* ``RejectionSeeder``: rejection sampling proportional to a weighting volume.

License
=======
tractseed is licensed under the terms of the BSD license.
"""

# versions for dependencies
# Check these versions against .travis.yml and requirements.txt
NUMPY_MIN_VERSION = '1.22.4'
SCIPY_MIN_VERSION = '1.8'
NIBABEL_MIN_VERSION = '3.0.0'
TQDM_MIN_VERSION = '4.30.0'
LAZY_LOADER_MIN_VERSION = '0.1'
PYTEST_MIN_VERSION = '5.0'

# Main setup parameters
NAME = 'tractseed'
MAINTAINER = "tractseed developers"
MAINTAINER_EMAIL = "neuroimaging@python.org"
DESCRIPTION = description
LONG_DESCRIPTION = long_description
URL = "https://github.com/tractseed/tractseed"
DOWNLOAD_URL = "https://github.com/tractseed/tractseed/releases"
LICENSE = "BSD license"
CLASSIFIERS = CLASSIFIERS
AUTHOR = "tractseed developers"
AUTHOR_EMAIL = "neuroimaging@python.org"
PLATFORMS = "OS Independent"
MAJOR = _version_major
MINOR = _version_minor
MICRO = _version_micro
ISRELEASE = _version_extra == ''
VERSION = __version__
PROVIDES = ["tractseed"]
REQUIRES = [f"numpy (>={NUMPY_MIN_VERSION})",
            f"scipy (>={SCIPY_MIN_VERSION})",
            f"nibabel (>={NIBABEL_MIN_VERSION})",
            f"tqdm (>={TQDM_MIN_VERSION})",
            f"lazy_loader (>={LAZY_LOADER_MIN_VERSION})"]
INSTALL_REQUIRES = [f"numpy>={NUMPY_MIN_VERSION}",
                    f"scipy>={SCIPY_MIN_VERSION}",
                    f"nibabel>={NIBABEL_MIN_VERSION}",
                    f"tqdm>={TQDM_MIN_VERSION}",
                    f"lazy_loader>={LAZY_LOADER_MIN_VERSION}"]
EXTRAS_REQUIRE = {
    "test": [
        f"pytest>={PYTEST_MIN_VERSION}",
    ],
}
