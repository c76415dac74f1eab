# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Test configuration file."""

from __future__ import absolute_import, division, print_function

import numpy as np
import pytest

import numtour
from numtour.util.testutils import simple_fixture

# --- Add numpy and numtour to all doctests ---


@pytest.fixture(autouse=True)
def _add_doctest_np_numtour(doctest_namespace):
    doctest_namespace['np'] = np
    doctest_namespace['numtour'] = numtour


# --- Reusable fixtures --- #

# NOTE: All global fixtures are prefixed with `numtour_` to make them
# non-conflicting with other packages' fixture names.

blas_dtype_params = [np.dtype(dt) for dt in
                     ('float32', 'float64', 'complex64', 'complex128')]
numtour_blas_dtype = simple_fixture(name='dtype',
                                    params=blas_dtype_params,
                                    fmt=' {name} = np.{value.name} ')

real_floating_dtype_params = [np.dtype('float32'), np.dtype('float64')]
numtour_real_floating_dtype = simple_fixture(
    name='dtype', params=real_floating_dtype_params,
    fmt=' {name} = np.{value.name} ')

# Sizes on both sides of the BLAS thresholds in `numtour.blas`
numtour_vector_size = simple_fixture(name='size', params=[1, 3, 150, 50000])
