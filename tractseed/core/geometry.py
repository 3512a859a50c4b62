""" Mapping between voxel indices and scanner coordinates

tractseed follows the nifti convention for affines: the point at the center
of voxel ``[i, j, k]`` is the scanner point ``[x, y, z]`` where
``[x, y, z, 1] = affine * [i, j, k, 1]``. Continuous voxel coordinates
extend this so that voxel ``[i, j, k]`` covers ``[i - .5, i + .5)`` along
each axis.
"""

import numpy as np
from nibabel.affines import apply_affine, from_matvec, voxel_sizes

from tractseed.core.errors import ConfigurationError


def as_affine(affine):
    """Validate a voxel to scanner affine.

    Parameters
    ----------
    affine : array_like (4, 4) or None
        The voxel to scanner mapping. ``None`` stands for the identity, i.e.
        scanner coordinates equal to voxel coordinates.

    Returns
    -------
    affine : array (4, 4)
        A float copy of ``affine``.

    Raises
    ------
    ConfigurationError
        If ``affine`` is not a finite (4, 4) array.

    """
    if affine is None:
        return np.eye(4)
    affine = np.array(affine, dtype=float)
    if affine.shape != (4, 4):
        raise ConfigurationError("affine should be a (4, 4) array, got shape "
                                 f"{affine.shape}")
    if not np.all(np.isfinite(affine)):
        raise ConfigurationError("affine contains non finite values")
    return affine


def voxel_to_scanner(points, affine):
    """Map continuous voxel coordinates to scanner coordinates.

    Parameters
    ----------
    points : array_like (3,) or (N, 3)
        Voxel coordinates.
    affine : array (4, 4)
        The voxel to scanner mapping.

    Returns
    -------
    points : array (3,) or (N, 3)
        Scanner coordinates, same shape as the input.

    Examples
    --------
    >>> import numpy as np
    >>> affine = np.diag([2., 2., 2., 1.])
    >>> affine[:3, 3] = [10, 20, 30]
    >>> voxel_to_scanner([1, 0, .5], affine)
    array([ 12.,  20.,  31.])

    """
    return apply_affine(affine, np.asarray(points, dtype=float))


def scanner_to_voxel(points, affine):
    """Map scanner coordinates back to continuous voxel coordinates."""
    return apply_affine(np.linalg.inv(affine), np.asarray(points, dtype=float))


def nearest_voxel(points, affine):
    """Integer index of the voxel containing each scanner point."""
    vox = scanner_to_voxel(points, affine)
    return np.floor(vox + .5).astype(int)


def crop_affine(affine, offset):
    """Voxel to scanner mapping of a sub-volume.

    Parameters
    ----------
    affine : array (4, 4)
        The voxel to scanner mapping of the parent volume.
    offset : array_like (3,)
        Index, in the parent volume, of voxel ``[0, 0, 0]`` of the sub-volume.

    Returns
    -------
    affine : array (4, 4)

    """
    shift = from_matvec(np.eye(3), np.asarray(offset, dtype=float))
    return np.dot(affine, shift)


def voxel_volume(affine):
    """Physical volume of one voxel."""
    return float(np.prod(voxel_sizes(affine)))
