"""Seed points for streamline tracking.

A seeder hands out the points from which streamlines are tracked, one point
per call to ``get_seed``. Points are returned in scanner coordinates, see
:mod:`tractseed.core.geometry` for the affine convention.

A single seeder is meant to be shared by all the tracking threads of a
session. The randomized strategies (``SphereSeeder``, ``MaskSeeder``,
``RejectionSeeder``) never run out of seeds and hold no mutable state; every
calling thread draws from its own random stream. The per-voxel strategies
(``RandomPerVoxelSeeder``, ``GridPerVoxelSeeder``) visit every voxel of their
mask exactly once, in raster order (last axis fastest), then report
exhaustion by returning ``None``, and keep doing so on every later call.

Examples
--------
>>> import numpy as np
>>> mask = np.zeros((3, 3, 3))
>>> mask[1, 1, 1] = 1
>>> seeder = GridPerVoxelSeeder(mask, np.eye(4), oversample=1)
>>> seeder.get_seed()
array([ 1.,  1.,  1.])
>>> seeder.get_seed() is None
True

"""
import abc
import threading

import numpy as np

from tractseed.core.errors import (ConfigurationError, DataError,
                                   InternalInconsistencyError, SeedingError)
from tractseed.core.geometry import crop_affine, voxel_to_scanner, voxel_volume
from tractseed.core.interpolation import (NearestNeighborInterpolator,
                                          TriLinearInterpolator)
from tractseed.core.rng import ThreadLocalGenerator
from tractseed.io.image import load_volume
from tractseed.utils.logging import logger

__all__ = ["Seeder", "SphereSeeder", "MaskSeeder", "RandomPerVoxelSeeder",
           "GridPerVoxelSeeder", "RejectionSeeder", "make_seeder",
           "SeedingError", "ConfigurationError", "DataError",
           "InternalInconsistencyError"]

# Number of times the tracking engine may retry from a single seed
MAX_SEED_ATTEMPTS_RANDOM = 1000
MAX_SEED_ATTEMPTS_FIXED = 1


def _positive_int(value, name):
    if isinstance(value, (bool, np.bool_)) or \
            not isinstance(value, (int, np.integer)):
        raise ConfigurationError(f"{name} should be an integer, got {value!r}")
    if value < 1:
        raise ConfigurationError(f"{name} should be at least 1, got {value}")
    return int(value)


def _binary_mask(mask, affine):
    data, affine = load_volume(mask, affine)
    return np.asarray(data) != 0, affine


class Seeder(abc.ABC):
    """Source of seed points for tracking.

    Subclasses implement ``get_seed``. Seeders are iterators: iterating
    yields seeds until the seeder is exhausted, which never happens for the
    randomized strategies.

    Attributes
    ----------
    name : str
        Short description of the strategy.
    max_attempts : int
        How many times the tracking engine may try to track from one seed
        before asking for another one.
    volume : float
        Size of the seeding region (see each strategy).
    is_finite : bool
        Whether the seeder eventually runs out of seeds.

    """

    name = "seeder"
    max_attempts = MAX_SEED_ATTEMPTS_RANDOM
    is_finite = False

    def __init__(self, random_seed=None, max_trials=None):
        if max_trials is not None:
            max_trials = _positive_int(max_trials, "max_trials")
        self.max_trials = max_trials
        self.volume = 0.
        self._rng = ThreadLocalGenerator(random_seed)

    @property
    def count(self):
        """Total number of seeds of a finite seeder, None otherwise."""
        return None

    @abc.abstractmethod
    def get_seed(self, rng=None):
        """Draw the next seed.

        Parameters
        ----------
        rng : numpy.random.Generator, optional
            Random stream to use for this call instead of the calling
            thread's own stream.

        Returns
        -------
        seed : array (3,) or None
            Seed point in scanner coordinates, or None once the seeder is
            exhausted.

        """

    def _generator(self, rng):
        return self._rng.generator if rng is None else rng

    def _check_trials(self, trials):
        if self.max_trials is not None and trials >= self.max_trials:
            raise InternalInconsistencyError(
                f"{self.name}: no seed accepted after {trials} trials")

    def __iter__(self):
        return self

    def __next__(self):
        seed = self.get_seed()
        if seed is None:
            raise StopIteration
        return seed

    def __repr__(self):
        return (f"<{type(self).__name__} {self.name!r} "
                f"volume={self.volume:.6g}>")


class SphereSeeder(Seeder):
    """Uniformly distributed seeds inside a ball.

    Parameters
    ----------
    center : array_like (3,)
        Center of the ball, in scanner coordinates.
    radius : float
        Radius of the ball, in scanner units.
    random_seed : int, optional
        Seed of the random streams.
    max_trials : int, optional
        Hard cap on rejected draws per seed.

    """

    name = "sphere"

    def __init__(self, center, radius, random_seed=None, max_trials=None):
        super().__init__(random_seed=random_seed, max_trials=max_trials)
        center = np.array(center, dtype=float)
        if center.shape != (3,) or not np.all(np.isfinite(center)):
            raise ConfigurationError("sphere center should be 3 finite "
                                     f"coordinates, got {center}")
        try:
            radius = float(radius)
        except (TypeError, ValueError):
            raise ConfigurationError(f"invalid sphere radius {radius!r}")
        if not np.isfinite(radius) or radius <= 0:
            raise ConfigurationError("sphere radius should be positive, got "
                                     f"{radius}")
        self.center = center
        self.radius = radius
        self.volume = 4. / 3. * np.pi * radius ** 3
        logger.info(f"Seeding in sphere at {center} of radius {radius}")

    def get_seed(self, rng=None):
        rng = self._generator(rng)
        trials = 0
        while True:
            # ~1.91 draws per accepted point
            p = rng.uniform(-1., 1., 3)
            if np.dot(p, p) <= 1.:
                return self.center + self.radius * p
            trials += 1
            self._check_trials(trials)


class MaskSeeder(Seeder):
    """Uniformly distributed seeds inside the non-zero voxels of a mask.

    A voxel is drawn uniformly over the whole grid until a non-zero one is
    found, then the seed is placed uniformly within that voxel.

    Parameters
    ----------
    mask : array_like or str
        Seeding mask, or the file name of a nifti image. Non-zero voxels are
        seeded.
    affine : array (4, 4), optional
        Voxel to scanner mapping of an array ``mask``.
    random_seed : int, optional
        Seed of the random streams.
    max_trials : int, optional
        Hard cap on rejected voxel draws per seed.

    Raises
    ------
    DataError
        If the mask has no non-zero voxel.

    """

    name = "random seeding mask"

    def __init__(self, mask, affine=None, random_seed=None, max_trials=None):
        super().__init__(random_seed=random_seed, max_trials=max_trials)
        self.mask, self.affine = _binary_mask(mask, affine)
        n_voxels = np.count_nonzero(self.mask)
        if not n_voxels:
            raise DataError("Cannot seed from an empty mask")
        self._shape = np.array(self.mask.shape)
        self.volume = n_voxels * voxel_volume(self.affine)
        logger.info(f"Seeding randomly in {n_voxels} mask voxels")

    def get_seed(self, rng=None):
        rng = self._generator(rng)
        trials = 0
        while True:
            index = rng.integers(0, self._shape)
            if self.mask[tuple(index)]:
                break
            trials += 1
            self._check_trials(trials)
        return voxel_to_scanner(index + rng.random(3) - .5, self.affine)


class _PerVoxelSeeder(Seeder):
    """Walks the non-zero voxels of a mask once, ``per_voxel`` seeds each.

    The walk position (current voxel and sub-sample) is shared by all the
    calling threads and is only touched while holding ``_lock``.
    """

    max_attempts = MAX_SEED_ATTEMPTS_FIXED
    is_finite = True

    def __init__(self, mask, affine, per_voxel, random_seed=None):
        super().__init__(random_seed=random_seed)
        self.mask, self.affine = _binary_mask(mask, affine)
        # raster order, last axis fastest
        self._voxels = np.argwhere(self.mask)
        self._per_voxel = per_voxel
        self.volume = len(self._voxels) * voxel_volume(self.affine)

        self._lock = threading.Lock()
        self._position = -1
        self._sub = per_voxel - 1
        self._expired = False

        if len(self._voxels):
            logger.info(f"Seeding {per_voxel} times in each of "
                        f"{len(self._voxels)} mask voxels ({self.name})")
        else:
            logger.warning(f"Empty mask, {self.name} seeding will not "
                           "produce any seed")

    @property
    def count(self):
        return len(self._voxels) * self._per_voxel

    @property
    def exhausted(self):
        return self._expired

    @property
    def cursor(self):
        """Index of the voxel being seeded, None before the first seed and
        after exhaustion."""
        with self._lock:
            if self._position < 0 or self._expired:
                return None
            return tuple(int(i) for i in self._voxels[self._position])

    def _claim(self):
        """Reserve the next (voxel, sub-sample) pair.

        Returns None once every voxel has been seeded.
        """
        if self._expired:
            return None
        with self._lock:
            if self._expired:
                return None
            self._sub += 1
            if self._sub == self._per_voxel:
                self._sub = 0
                self._position += 1
                if self._position == len(self._voxels):
                    self._expired = True
                    logger.info(f"{self.name} seeding exhausted after "
                                f"{self.count} seeds")
                    return None
            return self._voxels[self._position], self._sub


class RandomPerVoxelSeeder(_PerVoxelSeeder):
    """A fixed number of randomly placed seeds in every mask voxel.

    Parameters
    ----------
    mask : array_like or str
        Seeding mask, or the file name of a nifti image.
    affine : array (4, 4), optional
        Voxel to scanner mapping of an array ``mask``.
    num : int
        Number of seeds placed in each non-zero voxel.
    random_seed : int, optional
        Seed of the random streams.

    """

    name = "random per voxel"

    def __init__(self, mask, affine=None, num=1, random_seed=None):
        num = _positive_int(num, "num")
        super().__init__(mask, affine, num, random_seed=random_seed)
        self.num = num

    def get_seed(self, rng=None):
        claimed = self._claim()
        if claimed is None:
            return None
        voxel, _ = claimed
        rng = self._generator(rng)
        return voxel_to_scanner(voxel + rng.random(3) - .5, self.affine)


class GridPerVoxelSeeder(_PerVoxelSeeder):
    """A regular grid of ``oversample**3`` seeds in every mask voxel.

    The grid is centered in the voxel, with a spacing of ``1 / oversample``
    voxels. Positions are deterministic; only which thread receives which
    position depends on scheduling.

    Parameters
    ----------
    mask : array_like or str
        Seeding mask, or the file name of a nifti image.
    affine : array (4, 4), optional
        Voxel to scanner mapping of an array ``mask``.
    oversample : int
        Number of seeds along each axis of a voxel.
    random_seed : int, optional
        Accepted so that every strategy takes the same keywords. Unused,
        grid positions involve no randomness.

    """

    name = "grid per voxel"

    def __init__(self, mask, affine=None, oversample=1, random_seed=None):
        oversample = _positive_int(oversample, "oversample")
        super().__init__(mask, affine, oversample ** 3,
                         random_seed=random_seed)
        self.oversample = oversample
        self.step = 1. / oversample
        self.offset = -.5 + self.step / 2.
        grid = np.mgrid[0:oversample, 0:oversample, 0:oversample]
        self._grid = grid.reshape((3, -1)).T * self.step + self.offset

    def get_seed(self, rng=None):
        claimed = self._claim()
        if claimed is None:
            return None
        voxel, sub = claimed
        return voxel_to_scanner(voxel + self._grid[sub], self.affine)


class RejectionSeeder(Seeder):
    """Seeds distributed proportionally to a weighting volume.

    On construction the volume is cropped to the bounding box of its
    non-zero voxels, extended by one voxel on each side where the volume
    allows it, and copied. Seeds are then drawn by rejection sampling against
    the maximum weight.

    Parameters
    ----------
    weights : array_like or str
        Non-negative weighting volume, or the file name of a nifti image.
    affine : array (4, 4), optional
        Voxel to scanner mapping of an array ``weights``.
    interpolate : bool, optional
        If True, weights are looked up with trilinear interpolation at
        continuous positions between voxel centers. Otherwise whole voxels
        are drawn and the seed is placed uniformly within the voxel.
    random_seed : int, optional
        Seed of the random streams.
    max_trials : int, optional
        Hard cap on rejected draws per seed.

    Raises
    ------
    DataError
        If the volume holds negative or non finite values, or no positive
        value at all.

    """

    name = "rejection sampling"

    def __init__(self, weights, affine=None, interpolate=False,
                 random_seed=None, max_trials=None):
        super().__init__(random_seed=random_seed, max_trials=max_trials)
        data, affine = load_volume(weights, affine)
        data = np.asarray(data, dtype=float)
        if not np.all(np.isfinite(data)):
            raise DataError("Cannot use non finite values in an image used "
                            "for rejection sampling")
        if np.any(data < 0):
            raise DataError("Cannot have negative values in an image used "
                            "for rejection sampling")
        self.max_value = float(data.max())
        if not self.max_value:
            raise DataError("Cannot use an empty image for rejection "
                            "sampling")

        nonzero = data != 0
        bottom = np.empty(3, dtype=int)
        top = np.empty(3, dtype=int)
        for axis in range(3):
            others = tuple(a for a in range(3) if a != axis)
            where = np.flatnonzero(nonzero.any(axis=others))
            bottom[axis] = max(where[0] - 1, 0)
            top[axis] = min(where[-1] + 1, data.shape[axis] - 1)
        box = tuple(slice(b, t + 1) for b, t in zip(bottom, top))

        self.bottom = bottom
        self.top = top
        self.data = np.array(data[box])
        self.affine = crop_affine(affine, bottom)
        self.interpolate = bool(interpolate)
        self.volume = float(data.sum()) * self.data.size
        self._shape = np.array(self.data.shape)
        if self.interpolate:
            self._interpolator = TriLinearInterpolator(self.data)
        else:
            self._interpolator = NearestNeighborInterpolator(self.data)
        logger.info(f"Rejection sampling in a {self.data.shape} crop of "
                    f"{data.shape} at {tuple(bottom)}, maximum weight "
                    f"{self.max_value:g}")

    def get_seed(self, rng=None):
        rng = self._generator(rng)
        trials = 0
        while True:
            if self.interpolate:
                position = rng.random(3) * (self._shape - 1)
            else:
                position = rng.integers(0, self._shape)
            # threshold in (0, max], zero weights are never accepted
            selector = self.max_value * (1. - rng.random())
            if self._interpolator[position] >= selector:
                break
            trials += 1
            self._check_trials(trials)
        if not self.interpolate:
            position = position + rng.random(3) - .5
        return voxel_to_scanner(position, self.affine)


_SEEDERS = {
    "sphere": SphereSeeder,
    "mask": MaskSeeder,
    "random_per_voxel": RandomPerVoxelSeeder,
    "grid_per_voxel": GridPerVoxelSeeder,
    "rejection": RejectionSeeder,
}


def make_seeder(kind, *args, **kwargs):
    """Build a seeder from a strategy name.

    Parameters
    ----------
    kind : str
        One of ``"sphere"``, ``"mask"``, ``"random_per_voxel"``,
        ``"grid_per_voxel"`` or ``"rejection"``.
    *args, **kwargs
        Passed to the constructor of the strategy. Volumes may be arrays or
        nifti file names.

    Returns
    -------
    seeder : Seeder

    Examples
    --------
    >>> import numpy as np
    >>> seeder = make_seeder("sphere", center=[0, 0, 0], radius=2.,
    ...                      random_seed=0)
    >>> bool(np.linalg.norm(seeder.get_seed()) <= 2.)
    True

    """
    try:
        cls = _SEEDERS[kind]
    except (KeyError, TypeError):
        raise ConfigurationError(f"Unknown seeding strategy {kind!r}, "
                                 f"expected one of {sorted(_SEEDERS)}") \
            from None
    return cls(*args, **kwargs)
