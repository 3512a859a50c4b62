"""Interpolators wrap 3D arrays to allow them to be indexed in continuous
voxel coordinates.

Voxel ``[i, j, k]`` is centered on the continuous coordinate ``(i, j, k)``,
see :mod:`tractseed.core.geometry`.
"""
import numpy as np
from scipy.ndimage import map_coordinates


class OutsideImage(Exception):
    pass


class Interpolator:
    """Class to be subclassed by different interpolator types"""

    def __init__(self, data):
        data = np.asarray(data)
        if data.ndim != 3:
            raise ValueError("data should be a 3D array")
        self.data = data
        self.shape = np.array(data.shape)

    def __getitem__(self, point):
        raise NotImplementedError()


class NearestNeighborInterpolator(Interpolator):
    """Interpolates data using nearest neighbor interpolation"""

    def __getitem__(self, point):
        index = np.floor(np.asarray(point, dtype=float) + .5).astype(int)
        if np.any(index < 0) or np.any(index >= self.shape):
            raise OutsideImage(f"{point} is outside an image of shape "
                               f"{tuple(self.shape)}")
        return self.data[tuple(index)]


class TriLinearInterpolator(Interpolator):
    """Interpolates data using trilinear interpolation

    Points are valid between the centers of the first and last voxels along
    each axis, i.e. in ``[0, shape - 1]``.
    """

    def __init__(self, data):
        super().__init__(np.asarray(data, dtype=float))

    def __getitem__(self, point):
        point = np.asarray(point, dtype=float)
        if np.any(point < 0) or np.any(point > self.shape - 1):
            raise OutsideImage(f"{point} is outside an image of shape "
                               f"{tuple(self.shape)}")
        return map_coordinates(self.data, point[:, None], order=1,
                               mode='nearest')[0]
