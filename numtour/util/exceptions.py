# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""numtour specific exceptions."""

from __future__ import absolute_import, division, print_function

import numpy as np

__all__ = ('BufferSizeError', 'SingularMatrixError', 'LapackArgumentError',
           'SimdTypeError', 'SimdLaneError')


class BufferSizeError(ValueError):
    """Exception for buffers that are too short.

    Raised by the counted routines in `numtour.blas`, `numtour.veclib`
    and `numtour.vdsp` when a buffer does not hold enough elements for
    the requested count and stride.
    """


class SingularMatrixError(np.linalg.LinAlgError):
    """Exception for exactly singular systems in `numtour.lapack.solve`.

    The LAPACK status code is available as ``info``: the factor
    ``U[info - 1, info - 1]`` of the LU decomposition is exactly zero.
    """

    def __init__(self, info, *args):
        self.info = int(info)
        if not args:
            args = ('matrix is singular: U[{0}, {0}] is exactly zero '
                    '(info = {1})'.format(self.info - 1, self.info),)
        super(SingularMatrixError, self).__init__(*args)


class LapackArgumentError(ValueError):
    """Exception for arguments rejected by a LAPACK routine.

    The LAPACK status code is available as ``info``; argument number
    ``-info`` had an illegal value.
    """

    def __init__(self, info, *args):
        self.info = int(info)
        if not args:
            args = ('argument {} had an illegal value (info = {})'
                    ''.format(-self.info, self.info),)
        super(LapackArgumentError, self).__init__(*args)


class SimdTypeError(TypeError):
    """Exception for mixing incompatible `SimdVector` types.

    These are raised when vectors of different lane count or data type
    are combined in arithmetic or in the functions of `numtour.simd`.
    """


class SimdLaneError(ValueError):
    """Exception for a wrong number of lane values."""
