import numpy as np
import numpy.testing as npt

from tractseed.core.errors import ConfigurationError
from tractseed.core.geometry import (as_affine, crop_affine, nearest_voxel,
                                     scanner_to_voxel, voxel_to_scanner,
                                     voxel_volume)


def _affine():
    affine = np.diag([2., 3., 4., 1.])
    affine[:3, 3] = [-10, 5, 1]
    return affine


def test_as_affine():
    npt.assert_array_equal(as_affine(None), np.eye(4))
    affine = _affine()
    out = as_affine(affine)
    npt.assert_array_equal(out, affine)
    out[0, 0] = 100
    npt.assert_equal(affine[0, 0], 2.)
    npt.assert_raises(ConfigurationError, as_affine, np.eye(3))
    bad = np.eye(4)
    bad[1, 1] = np.nan
    npt.assert_raises(ConfigurationError, as_affine, bad)
    # ConfigurationError is a ValueError
    npt.assert_raises(ValueError, as_affine, np.eye(3))


def test_voxel_to_scanner():
    affine = _affine()
    npt.assert_array_almost_equal(voxel_to_scanner([0, 0, 0], affine),
                                  [-10, 5, 1])
    npt.assert_array_almost_equal(voxel_to_scanner([1, 2, .5], affine),
                                  [-8, 11, 3])
    points = np.array([[0, 0, 0], [1, 1, 1], [-.5, .5, 2.25]])
    expected = points * [2, 3, 4] + [-10, 5, 1]
    npt.assert_array_almost_equal(voxel_to_scanner(points, affine), expected)
    npt.assert_array_almost_equal(scanner_to_voxel(expected, affine), points)


def test_nearest_voxel():
    affine = _affine()
    points = voxel_to_scanner([[3, 4, 5], [3.4, 3.6, 5.49]], affine)
    npt.assert_array_equal(nearest_voxel(points, affine),
                           [[3, 4, 5], [3, 4, 5]])


def test_crop_affine():
    affine = _affine()
    cropped = crop_affine(affine, [2, 3, 4])
    # voxel 0 of the crop is voxel (2, 3, 4) of the parent
    npt.assert_array_almost_equal(voxel_to_scanner([0, 0, 0], cropped),
                                  voxel_to_scanner([2, 3, 4], affine))
    npt.assert_array_almost_equal(voxel_to_scanner([1, 1, 1], cropped),
                                  voxel_to_scanner([3, 4, 5], affine))
    npt.assert_array_equal(cropped[:3, :3], affine[:3, :3])


def test_voxel_volume():
    npt.assert_almost_equal(voxel_volume(np.eye(4)), 1.)
    npt.assert_almost_equal(voxel_volume(_affine()), 24.)
