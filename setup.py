# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Setup script for numtour.

Installation command::

    pip install [--user] [-e] .
"""

from __future__ import absolute_import, print_function

import os

from setuptools import find_packages, setup

root_path = os.path.dirname(__file__)


def read_requirements(fname):
    with open(os.path.join(root_path, fname)) as req_file:
        return [line.strip() for line in req_file if line.strip()]


requires = read_requirements('requirements.txt')
test_requires = read_requirements('test_requirements.txt')

with open(os.path.join(root_path, 'numtour', 'VERSION')) as version_file:
    version = version_file.read().strip()


long_description = """
numtour is a guided tour of the optimized numerical kernels that NumPy and
SciPy expose from the system BLAS and LAPACK libraries.

It wraps each kernel with the calling conventions of the classic C
interfaces (element counts, strides, output buffers, status codes) and
ships a runnable tour of worked examples::

    python -m numtour

Features
========

- BLAS level-1 routines: ``axpy``, ``dot``, ``scal``, ``nrm2`` and an
  alias-aware linear combination.
- LAPACK ``gesv`` with the raw status code, and a checked ``solve``.
- Short fixed-width vector types (``double3``, ``float4``, ...) with
  arithmetic and geometric helper functions.
- Elementwise vector routines over counted buffers (absolute value,
  truncation, square root, reciprocal, ...).
- Vector distances and path lengths.
"""

setup(
    name='numtour',

    version=version,

    description='Guided tour of BLAS, LAPACK and vector kernels',
    long_description=long_description,

    author='numtour contributors',

    license='MPL-2.0',

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 4 - Beta',

        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Mathematics',

        'License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)',

        'Programming Language :: Python :: 3',

        'Operating System :: OS Independent'
    ],

    keywords='education numerics blas lapack simd vector',

    packages=find_packages(exclude=['*test*']),
    package_dir={'numtour': 'numtour'},
    package_data={'numtour': ['VERSION']},
    include_package_data=True,

    python_requires='>=3.7',
    install_requires=requires,
    extras_require={
        'testing': test_requires,
    },

    entry_points={
        'console_scripts': ['numtour = numtour.__main__:main'],
    },
)
