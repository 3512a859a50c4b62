#!/usr/bin/env python
""" Installation script for tractseed package """

from os.path import join as pjoin, dirname

from setuptools import setup


def read_vars_from(ver_file):
    """ Read variables from Python text file

    Parameters
    ----------
    ver_file : str
        Filename of file to read

    Returns
    -------
    info_vars : dict
        Variables defined in `ver_file`
    """
    ns = {}
    with open(ver_file, 'rt') as fobj:
        exec(fobj.read(), ns)
    return ns


# Get version and release info, which is all stored in tractseed/info.py
info = read_vars_from(pjoin(dirname(__file__) or '.', 'tractseed', 'info.py'))


def main(**extra_args):
    setup(name=info['NAME'],
          maintainer=info['MAINTAINER'],
          maintainer_email=info['MAINTAINER_EMAIL'],
          description=info['DESCRIPTION'],
          long_description=info['LONG_DESCRIPTION'],
          url=info['URL'],
          download_url=info['DOWNLOAD_URL'],
          license=info['LICENSE'],
          classifiers=info['CLASSIFIERS'],
          author=info['AUTHOR'],
          author_email=info['AUTHOR_EMAIL'],
          platforms=info['PLATFORMS'],
          version=info['VERSION'],
          provides=info['PROVIDES'],
          install_requires=info['INSTALL_REQUIRES'],
          extras_require=info['EXTRAS_REQUIRE'],
          python_requires=">= 3.8",
          zip_safe=False,
          packages=['tractseed',
                    'tractseed.core',
                    'tractseed.core.tests',
                    'tractseed.io',
                    'tractseed.io.tests',
                    'tractseed.testing',
                    'tractseed.tracking',
                    'tractseed.tracking.tests',
                    'tractseed.utils',
                    'tractseed.utils.tests'],
          **extra_args
          )


# simple way to test what setup will do
# python setup.py install --prefix=/tmp
if __name__ == "__main__":
    main()
