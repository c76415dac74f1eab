# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Short fixed-width vectors with value semantics.

A `SimdType` describes vectors of a fixed number of lanes (2, 3, 4, 8 or
16) holding a single data type; calling it creates a `SimdVector`::

    >>> p = double3(1, 2, 3)
    >>> q = double3(3, 4, 5)
    >>> 10 * p + q
    double3(13.0, 24.0, 35.0)

Vectors are immutable. Arithmetic with another vector of the same type
works lane by lane, arithmetic with a scalar applies the scalar to every
lane. The module functions (`dot`, `length`, `cross`, ...) provide the
usual geometric helpers.
"""

from __future__ import absolute_import, division, print_function

import operator
from numbers import Integral, Number

import numpy as np

from numtour.util.exceptions import SimdLaneError, SimdTypeError
from numtour.util.utility import dtype_repr, is_int_dtype

__all__ = (
    'SimdType', 'SimdVector', 'SIMD_TYPES', 'SIMD_LANES',
    'float2', 'float3', 'float4', 'float8', 'float16',
    'double2', 'double3', 'double4', 'double8', 'double16',
    'int2', 'int3', 'int4', 'int8', 'int16',
    'dot', 'length', 'length_squared', 'distance', 'normalize', 'cross',
    'mix', 'clamp', 'reduce_add', 'reduce_min', 'reduce_max', 'vmin', 'vmax',
)


SIMD_LANES = (2, 3, 4, 8, 16)

_DTYPE_PREFIXES = {np.dtype('float32'): 'float',
                   np.dtype('float64'): 'double',
                   np.dtype('int32'): 'int'}


class SimdType(object):

    """Type of fixed-width vectors with given data type and lane count."""

    def __init__(self, dtype, lanes):
        """Initialize a new instance.

        Parameters
        ----------
        dtype :
            Data type of the lanes, one of ``float32``, ``float64`` and
            ``int32``. Any input understood by `numpy.dtype` is accepted.
        lanes : int
            Number of lanes, one of 2, 3, 4, 8 and 16.
        """
        dtype = np.dtype(dtype)
        if dtype not in _DTYPE_PREFIXES:
            raise ValueError('`dtype` {} not supported, expected one of {}'
                             ''.format(dtype_repr(dtype),
                                       [str(dt) for dt in _DTYPE_PREFIXES]))
        if lanes not in SIMD_LANES:
            raise SimdLaneError('`lanes` must be one of {}, got {!r}'
                                ''.format(SIMD_LANES, lanes))
        self.__dtype = dtype
        self.__lanes = int(lanes)

    @property
    def dtype(self):
        """Data type of each lane."""
        return self.__dtype

    @property
    def lanes(self):
        """Number of lanes."""
        return self.__lanes

    @property
    def name(self):
        """Short name of this type, e.g. ``'double3'``."""
        return '{}{}'.format(_DTYPE_PREFIXES[self.dtype], self.lanes)

    def element(self, *values):
        """Create a new vector of this type.

        Parameters
        ----------
        value1, ..., valueN :
            One value per lane. Alternatively, a single scalar that is
            copied to all lanes, or a single `array-like` (including a
            `SimdVector` with the same number of lanes) holding the lanes.

        Returns
        -------
        vector : `SimdVector`

        Examples
        --------
        >>> double3(1, 2, 3)
        double3(1.0, 2.0, 3.0)
        >>> int4(7)
        int4(7, 7, 7, 7)
        >>> float2([0.5, 1.5])
        float2(0.5, 1.5)
        """
        if len(values) == 1:
            (values,) = values
            if isinstance(values, SimdVector):
                values = values.data

        arr = np.asarray(values)
        if arr.ndim == 0:
            arr = np.full(self.lanes, arr)
        if arr.shape != (self.lanes,):
            raise SimdLaneError('{} expects {} lane values, got {}'
                                ''.format(self.name, self.lanes,
                                          arr.size if arr.ndim == 1
                                          else arr.shape))
        if np.iscomplexobj(arr):
            raise SimdTypeError('complex values cannot be stored in {}'
                                ''.format(self.name))
        if is_int_dtype(self.dtype) and not (
                np.issubdtype(arr.dtype, np.integer) or
                arr.dtype == bool):
            raise SimdTypeError('{} requires integer values, got dtype {}'
                                ''.format(self.name, arr.dtype))
        if is_int_dtype(self.dtype) and arr.dtype != bool:
            info = np.iinfo(self.dtype)
            if arr.min() < info.min or arr.max() > info.max:
                raise SimdTypeError('values {!r} out of range for {}'
                                    ''.format(arr.tolist(), self.name))

        return SimdVector(self, np.array(arr, dtype=self.dtype))

    __call__ = element

    def zero(self):
        """Return the vector with all lanes 0."""
        return self.element(0)

    def one(self):
        """Return the vector with all lanes 1."""
        return self.element(1)

    def __contains__(self, other):
        """Return ``other in self``."""
        return isinstance(other, SimdVector) and other.type == self

    def __eq__(self, other):
        """Return ``self == other``."""
        if other is self:
            return True
        return (isinstance(other, SimdType) and
                other.dtype == self.dtype and
                other.lanes == self.lanes)

    def __ne__(self, other):
        """Return ``self != other``."""
        return not self.__eq__(other)

    def __hash__(self):
        """Return ``hash(self)``."""
        return hash((type(self), self.dtype, self.lanes))

    def __repr__(self):
        """Return ``repr(self)``."""
        return 'SimdType({}, {})'.format(dtype_repr(self.dtype), self.lanes)

    def __str__(self):
        """Return ``str(self)``."""
        return self.name


class SimdVector(object):

    """Immutable vector of a `SimdType`."""

    def __init__(self, simd_type, data):
        """Initialize a new instance.

        Use `SimdType.element` to create vectors from arbitrary input.
        """
        if not isinstance(simd_type, SimdType):
            raise TypeError('`simd_type` {!r} not a `SimdType` instance'
                            ''.format(simd_type))
        if not isinstance(data, np.ndarray):
            raise TypeError('`data` {!r} not a `numpy.ndarray` instance'
                            ''.format(data))
        if data.dtype != simd_type.dtype:
            raise TypeError('`data` {!r} not of dtype {!r}'
                            ''.format(data, simd_type.dtype))
        if data.shape != (simd_type.lanes,):
            raise SimdLaneError('`data` has shape {}, expected {}'
                                ''.format(data.shape, (simd_type.lanes,)))

        data.flags.writeable = False
        self.__type = simd_type
        self.__data = data

    @property
    def type(self):
        """The `SimdType` of this vector."""
        return self.__type

    @property
    def data(self):
        """Read-only Numpy array holding the lanes."""
        return self.__data

    @property
    def dtype(self):
        """Data type of each lane."""
        return self.type.dtype

    @property
    def lanes(self):
        """Number of lanes."""
        return self.type.lanes

    def _lane(self, index, name):
        if index >= self.lanes:
            raise AttributeError('{} has no lane {!r}'
                                 ''.format(self.type.name, name))
        return self.data[index].item()

    @property
    def x(self):
        """Lane 0."""
        return self._lane(0, 'x')

    @property
    def y(self):
        """Lane 1."""
        return self._lane(1, 'y')

    @property
    def z(self):
        """Lane 2."""
        return self._lane(2, 'z')

    @property
    def w(self):
        """Lane 3."""
        return self._lane(3, 'w')

    def tolist(self):
        """Return the lanes as a list of Python scalars."""
        return self.data.tolist()

    def __array__(self, dtype=None, copy=None):
        """Return a Numpy array with the lanes of this vector."""
        if dtype is None:
            return self.data.copy()
        return self.data.astype(dtype)

    def __len__(self):
        """Return ``len(self)``."""
        return self.lanes

    def __iter__(self):
        """Return ``iter(self)``."""
        return iter(self.tolist())

    def __getitem__(self, indices):
        """Return ``self[indices]``.

        An integer index gives a Python scalar, a slice gives a
        `numpy.ndarray`.
        """
        if isinstance(indices, Integral):
            return self.data[indices].item()
        else:
            return self.data[indices].copy()

    def __setitem__(self, indices, values):
        """Vectors are immutable, create a new one instead."""
        raise TypeError('{} vectors are immutable'.format(self.type.name))

    # --- Arithmetic --- #

    def _operand(self, other):
        """Return ``other`` as array or scalar compatible with ``self``.

        Returns ``NotImplemented`` for unsupported operand types.
        """
        if isinstance(other, SimdVector):
            if other.type != self.type:
                raise SimdTypeError('cannot combine {} and {}'
                                    ''.format(self.type, other.type))
            return other.data

        if not isinstance(other, Number):
            return NotImplemented
        if isinstance(other, complex) or np.iscomplexobj(other):
            raise SimdTypeError('cannot combine {} with complex scalar {!r}'
                                ''.format(self.type, other))
        if is_int_dtype(self.dtype) and not isinstance(other, Integral):
            raise SimdTypeError('cannot combine {} with non-integer scalar '
                                '{!r}'.format(self.type, other))
        if is_int_dtype(self.dtype):
            info = np.iinfo(self.dtype)
            if not info.min <= other <= info.max:
                raise SimdTypeError('scalar {!r} out of range for {} lanes'
                                    ''.format(other, self.type))
        return self.dtype.type(other)

    def _apply(self, op, lhs, rhs):
        if op is operator.truediv and is_int_dtype(self.dtype):
            result = _truncating_divide(lhs, rhs)
        else:
            # IEEE semantics for floating point lanes
            with np.errstate(divide='ignore', invalid='ignore'):
                result = op(lhs, rhs)
        return SimdVector(self.type,
                          np.asarray(result).astype(self.dtype, copy=False))

    def _binary(self, other, op):
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented
        return self._apply(op, self.data, operand)

    def _rbinary(self, other, op):
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented
        return self._apply(op, operand, self.data)

    def __add__(self, other):
        """Return ``self + other``."""
        return self._binary(other, operator.add)

    def __radd__(self, other):
        """Return ``other + self``."""
        return self._rbinary(other, operator.add)

    def __sub__(self, other):
        """Return ``self - other``."""
        return self._binary(other, operator.sub)

    def __rsub__(self, other):
        """Return ``other - self``."""
        return self._rbinary(other, operator.sub)

    def __mul__(self, other):
        """Return ``self * other``."""
        return self._binary(other, operator.mul)

    def __rmul__(self, other):
        """Return ``other * self``."""
        return self._rbinary(other, operator.mul)

    def __truediv__(self, other):
        """Return ``self / other``.

        Integer lanes are divided with truncation toward zero.
        """
        return self._binary(other, operator.truediv)

    def __rtruediv__(self, other):
        """Return ``other / self``."""
        return self._rbinary(other, operator.truediv)

    def __neg__(self):
        """Return ``-self``."""
        return SimdVector(self.type, -self.data)

    def __pos__(self):
        """Return ``+self``."""
        return self

    def __abs__(self):
        """Return ``abs(self)``."""
        return SimdVector(self.type, np.abs(self.data))

    def __eq__(self, other):
        """Return ``self == other``.

        Vectors are equal if their types and all lanes are equal.
        """
        if other is self:
            return True
        elif not isinstance(other, SimdVector) or other.type != self.type:
            return False
        else:
            return bool(np.array_equal(self.data, other.data))

    def __ne__(self, other):
        """Return ``self != other``."""
        return not self.__eq__(other)

    __hash__ = None

    def __repr__(self):
        """Return ``repr(self)``."""
        return '{}({})'.format(self.type.name,
                               ', '.join(repr(v) for v in self.tolist()))

    __str__ = __repr__


def _truncating_divide(lhs, rhs):
    """Integer division rounding toward zero."""
    lhs = np.asarray(lhs)
    rhs = np.asarray(rhs)
    if np.any(rhs == 0):
        raise ZeroDivisionError('integer division by zero')
    quotient = np.abs(lhs) // np.abs(rhs)
    return np.where((lhs < 0) != (rhs < 0), -quotient, quotient)


# --- Predefined types --- #


SIMD_TYPES = {}
for _dtype in _DTYPE_PREFIXES:
    for _lanes in SIMD_LANES:
        _simd_type = SimdType(_dtype, _lanes)
        SIMD_TYPES[_simd_type.name] = _simd_type
del _dtype, _lanes, _simd_type

float2 = SIMD_TYPES['float2']
float3 = SIMD_TYPES['float3']
float4 = SIMD_TYPES['float4']
float8 = SIMD_TYPES['float8']
float16 = SIMD_TYPES['float16']
double2 = SIMD_TYPES['double2']
double3 = SIMD_TYPES['double3']
double4 = SIMD_TYPES['double4']
double8 = SIMD_TYPES['double8']
double16 = SIMD_TYPES['double16']
int2 = SIMD_TYPES['int2']
int3 = SIMD_TYPES['int3']
int4 = SIMD_TYPES['int4']
int8 = SIMD_TYPES['int8']
int16 = SIMD_TYPES['int16']


# --- Functions --- #


def _check_vector(v, name='v'):
    if not isinstance(v, SimdVector):
        raise TypeError('`{}` {!r} not a `SimdVector` instance'
                        ''.format(name, v))


def _check_same_type(u, v):
    _check_vector(u, 'u')
    _check_vector(v, 'v')
    if u.type != v.type:
        raise SimdTypeError('cannot combine {} and {}'.format(u.type, v.type))


def _check_floating(v):
    if is_int_dtype(v.dtype):
        raise SimdTypeError('{} requires floating point lanes'
                            ''.format(v.type))


def dot(u, v):
    """Return the dot product of ``u`` and ``v``.

    >>> dot(double3(1, 2, 3), double3(3, 4, 5))
    26.0
    """
    _check_same_type(u, v)
    return np.dot(u.data, v.data).item()


def length_squared(v):
    """Return ``dot(v, v)``."""
    return dot(v, v)


def length(v):
    """Return the Euclidean length of ``v``.

    >>> length(double2(3, 4))
    5.0
    """
    _check_vector(v)
    return float(np.sqrt(length_squared(v)))


def distance(u, v):
    """Return the Euclidean distance between ``u`` and ``v``."""
    _check_same_type(u, v)
    return length(u - v)


def normalize(v):
    """Return ``v`` scaled to unit length.

    The zero vector has no direction; all lanes of the result are ``nan``.
    """
    _check_vector(v)
    _check_floating(v)
    with np.errstate(invalid='ignore', divide='ignore'):
        data = v.data / v.dtype.type(np.sqrt(length_squared(v)))
    return SimdVector(v.type, data.astype(v.dtype, copy=False))


def cross(u, v):
    """Return the cross product of two 3-lane vectors.

    >>> cross(double3(1, 0, 0), double3(0, 1, 0))
    double3(0.0, 0.0, 1.0)
    """
    _check_same_type(u, v)
    if u.lanes != 3:
        raise SimdLaneError('cross product needs 3 lanes, got {}'
                            ''.format(u.type))
    return SimdVector(u.type, np.cross(u.data, v.data).astype(u.dtype))


def mix(u, v, t):
    """Return the linear interpolation ``u + t * (v - u)``.

    ``t`` can be a scalar or a vector of the same type.

    >>> mix(double2(0, 10), double2(10, 20), 0.5)
    double2(5.0, 15.0)
    """
    _check_same_type(u, v)
    _check_floating(u)
    return u + t * (v - u)


def clamp(v, lower, upper):
    """Return ``v`` with each lane clipped to ``[lower, upper]``.

    The bounds can be scalars or vectors of the same type as ``v``.
    """
    _check_vector(v)
    bounds = []
    for bound in (lower, upper):
        if isinstance(bound, SimdVector):
            _check_same_type(v, bound)
            bounds.append(bound.data)
        else:
            bounds.append(bound)
    if np.any(np.asarray(bounds[0]) > np.asarray(bounds[1])):
        raise ValueError('`lower` {!r} exceeds `upper` {!r}'
                         ''.format(lower, upper))
    return v.type.element(np.clip(v.data, bounds[0], bounds[1])
                          .astype(v.dtype))


def reduce_add(v):
    """Return the sum of all lanes."""
    _check_vector(v)
    return v.data.sum(dtype=v.dtype).item()


def reduce_min(v):
    """Return the smallest lane."""
    _check_vector(v)
    return v.data.min().item()


def reduce_max(v):
    """Return the largest lane."""
    _check_vector(v)
    return v.data.max().item()


def vmin(u, v):
    """Return the lane-wise minimum of ``u`` and ``v``."""
    _check_same_type(u, v)
    return SimdVector(u.type, np.minimum(u.data, v.data))


def vmax(u, v):
    """Return the lane-wise maximum of ``u`` and ``v``."""
    _check_same_type(u, v)
    return SimdVector(u.type, np.maximum(u.data, v.data))


if __name__ == '__main__':
    from numtour.util.testutils import run_doctests
    run_doctests()
