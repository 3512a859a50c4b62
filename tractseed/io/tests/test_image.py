import nibabel as nib
import numpy as np
import numpy.testing as npt

from tractseed.core.errors import ConfigurationError
from tractseed.io.image import load_nifti, load_nifti_data, load_volume


def _save(tmp_path, data, affine):
    fname = str(tmp_path / "volume.nii.gz")
    nib.save(nib.Nifti1Image(data, affine), fname)
    return fname


def test_load_nifti(tmp_path):
    affine = np.diag([2., 2., 2., 1.])
    data = np.arange(24, dtype=np.float32).reshape((2, 3, 4))
    fname = _save(tmp_path, data, affine)

    out, out_affine, img, vox_size = load_nifti(fname, return_img=True,
                                                return_voxsize=True)
    npt.assert_array_equal(out, data)
    npt.assert_array_equal(out_affine, affine)
    npt.assert_array_equal(vox_size, (2., 2., 2.))
    npt.assert_array_equal(load_nifti_data(fname), data)


def test_load_volume_from_file(tmp_path):
    affine = np.eye(4)
    affine[:3, 3] = [1, 2, 3]
    data = np.zeros((4, 4, 4), dtype=np.uint8)
    data[1, 2, 3] = 1
    fname = _save(tmp_path, data, affine)

    # the affine of the header wins over the argument
    out, out_affine = load_volume(fname, affine=np.eye(4) * 3)
    npt.assert_array_equal(out, data)
    npt.assert_array_equal(out_affine, affine)


def test_load_volume_from_array():
    data = np.ones((2, 3, 4))
    out, affine = load_volume(data)
    npt.assert_array_equal(out, data)
    npt.assert_array_equal(affine, np.eye(4))

    data = np.zeros((2, 3, 4, 5))
    data[..., 0] = 1
    data[..., 1:] = 7
    out, _ = load_volume(data)
    npt.assert_equal(out.shape, (2, 3, 4))
    npt.assert_array_equal(out, 1)

    npt.assert_raises(ConfigurationError, load_volume, np.ones((3, 3)))
    npt.assert_raises(ConfigurationError, load_volume, np.ones((3, 3, 3)),
                      np.eye(3))
