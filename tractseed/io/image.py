import os

import nibabel as nib
import numpy as np

from tractseed.core.errors import ConfigurationError
from tractseed.core.geometry import as_affine


def load_nifti_data(fname, as_ndarray=True):
    """Load only the data array from a nifti file.

    Parameters
    ----------
    fname : str
        Full path to the file.
    as_ndarray: bool, optional
        convert nibabel ArrayProxy to a numpy.ndarray.
        If you want to save memory and delay this casting, just turn this
        option to False (default: True)

    Returns
    -------
    data: np.ndarray or nib.ArrayProxy

    See Also
    --------
    load_nifti

    """
    img = nib.load(fname)
    return np.asanyarray(img.dataobj) if as_ndarray else img.dataobj


def load_nifti(fname, return_img=False, return_voxsize=False,
               as_ndarray=True):
    """Load data and other information from a nifti file.

    Parameters
    ----------
    fname : str
        Full path to a nifti file.
    return_img : bool, optional
        Whether to return the nibabel nifti img object. Default: False
    return_voxsize: bool, optional
        Whether to return the nifti header zooms. Default: False
    as_ndarray: bool, optional
        convert nibabel ArrayProxy to a numpy.ndarray.
        If you want to save memory and delay this casting, just turn this
        option to False (default: True)

    Returns
    -------
    A tuple, with (at the most, if all keyword args are set to True):
    (data, img.affine, img, vox_size)

    See Also
    --------
    load_nifti_data

    """
    img = nib.load(fname)
    data = np.asanyarray(img.dataobj) if as_ndarray else img.dataobj
    vox_size = img.header.get_zooms()[:3]

    ret_val = [data, img.affine]

    if return_img:
        ret_val.append(img)
    if return_voxsize:
        ret_val.append(vox_size)

    return tuple(ret_val)


def load_volume(volume, affine=None):
    """Return the 3D data and affine of a mask or weighting volume.

    Parameters
    ----------
    volume : str, os.PathLike or array_like
        A nifti file name, or the voxel data itself.
    affine : array_like (4, 4), optional
        Voxel to scanner mapping of an array ``volume``. Ignored, and taken
        from the file header, when ``volume`` is a file name. Identity if
        ``None``.

    Returns
    -------
    data : ndarray
        3D voxel data. Volumes with more than 3 dimensions are reduced to
        their first 3D volume (index 0 along every extra axis).
    affine : array (4, 4)

    Raises
    ------
    ConfigurationError
        If the data has fewer than 3 dimensions or the affine is malformed.

    """
    if isinstance(volume, (str, os.PathLike)):
        data, affine = load_nifti(volume)
    else:
        data = np.asanyarray(volume)
    if data.ndim < 3:
        raise ConfigurationError("seeding volumes must be at least 3D, got "
                                 f"an array of shape {data.shape}")
    if data.ndim > 3:
        data = data[(Ellipsis,) + (0,) * (data.ndim - 3)]
    return data, as_affine(affine)
