# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""numtour, a guided tour of optimized numerical kernels.

The kernels come from the BLAS and LAPACK libraries that NumPy and SciPy
link against; numtour wraps them with the counted and strided calling
conventions of their C interfaces.
"""

from __future__ import absolute_import

import logging
from os import path

import numpy as np

__all__ = ('blas', 'lapack', 'simd', 'veclib', 'vdsp', 'tour', 'util')

# Set package version
curdir = path.abspath(path.dirname(__file__))

with open(path.join(curdir, 'VERSION')) as version_file:
    __version__ = version_file.read().strip()

# Set printing line width to 71 to allow method docstrings to not extend
# beyond 79 characters (2 times indent of 4)
np.set_printoptions(linewidth=71)

# Library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

from . import util
from . import blas
from . import lapack
from . import simd
from . import veclib
from . import vdsp
from . import tour

# Add `test` function to global namespace so users can run `numtour.test()`
from .util import test

__all__ += ('test',)
