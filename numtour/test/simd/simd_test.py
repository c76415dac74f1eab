# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from __future__ import division

import operator

import numpy as np
import pytest

from numtour import simd
from numtour.simd import double2, double3, float3, float4, int2, int3, int4
from numtour.util.exceptions import SimdLaneError, SimdTypeError
from numtour.util.testutils import all_almost_equal, all_equal, simple_fixture

# --- pytest fixtures --- #


simd_type = simple_fixture('simd_type', sorted(simd.SIMD_TYPES),
                           fmt=' {name}={value} ')

arithmetic_op_par = [operator.add, operator.sub, operator.mul]
arithmetic_op_ids = [" op = '{}' ".format(op) for op in ['+', '-', '*']]


@pytest.fixture(ids=arithmetic_op_ids, params=arithmetic_op_par)
def arithmetic_op(request):
    return request.param


# --- SimdType --- #


def test_simd_type_properties():
    assert double3.dtype == np.dtype('float64')
    assert double3.lanes == 3
    assert double3.name == 'double3'
    assert str(float4) == 'float4'
    assert repr(int3) == "SimdType('int32', 3)"

    assert simd.SimdType('float64', 3) == double3
    assert simd.SimdType(float, 3) == double3
    assert double3 != float3
    assert hash(simd.SimdType('float32', 4)) == hash(float4)


def test_simd_type_raise():
    with pytest.raises(SimdLaneError):
        simd.SimdType('float64', 5)

    with pytest.raises(ValueError):
        simd.SimdType('complex128', 2)


def test_predefined_types(simd_type):
    stype = simd.SIMD_TYPES[simd_type]
    assert stype.name == simd_type
    assert getattr(simd, simd_type) is stype
    assert all_equal(stype.zero(), [0] * stype.lanes)
    assert all_equal(stype.one(), [1] * stype.lanes)


# --- Element creation --- #


def test_element():
    v = double3(1, 2, 3)
    assert isinstance(v, simd.SimdVector)
    assert v.type == double3
    assert v.tolist() == [1.0, 2.0, 3.0]
    assert v in double3
    assert v not in float3

    assert double3([1, 2, 3]) == v
    assert double3(np.array([1, 2, 3])) == v
    assert int4(7).tolist() == [7, 7, 7, 7]
    assert float3(double3(1, 2, 3)).type == float3


def test_element_raise():
    with pytest.raises(SimdLaneError):
        double3(1, 2)

    with pytest.raises(SimdLaneError):
        double3([1, 2, 3, 4])

    with pytest.raises(SimdTypeError):
        int3(1.5, 2, 3)

    with pytest.raises(SimdTypeError):
        double2(1j, 0)


def test_vector_access():
    v = float4(1, 2, 3, 4)
    assert (v.x, v.y, v.z, v.w) == (1, 2, 3, 4)
    assert v[-1] == 4
    assert all_equal(v[1:3], [2, 3])
    assert len(v) == 4
    assert list(v) == [1, 2, 3, 4]
    assert all_equal(np.asarray(v), [1, 2, 3, 4])

    with pytest.raises(AttributeError):
        double2(1, 2).z


def test_vector_is_immutable():
    v = double3(1, 2, 3)
    with pytest.raises(TypeError):
        v[0] = 5
    with pytest.raises(ValueError):
        v.data[0] = 5

    # Arrays handed out are copies
    arr = np.asarray(v)
    arr[0] = 5
    assert v.x == 1


def test_vector_unhashable():
    with pytest.raises(TypeError):
        hash(double3(1, 2, 3))


# --- Arithmetic --- #


def test_scaled_add():
    p = double3(1, 2, 3)
    q = double3(3, 4, 5)
    assert 10 * p + q == double3(13, 24, 35)
    assert repr(10 * p + q) == 'double3(13.0, 24.0, 35.0)'


def test_arithmetic(simd_type, arithmetic_op):
    stype = simd.SIMD_TYPES[simd_type]
    x_arr = np.arange(1, stype.lanes + 1)
    y_arr = np.arange(stype.lanes, 0, -1)
    x, y = stype(x_arr), stype(y_arr)

    # vector-vector
    result = arithmetic_op(x, y)
    assert result.type == stype
    assert all_almost_equal(result, arithmetic_op(x_arr, y_arr))

    # vector-scalar, both sides
    assert all_almost_equal(arithmetic_op(x, 2), arithmetic_op(x_arr, 2))
    assert all_almost_equal(arithmetic_op(2, x), arithmetic_op(2, x_arr))


def test_unary():
    v = double3(1, -2, 3)
    assert -v == double3(-1, 2, -3)
    assert +v is v
    assert abs(v) == double3(1, 2, 3)


def test_float_division():
    assert double2(1, 3) / 2 == double2(0.5, 1.5)
    assert 1 / double2(2, 4) == double2(0.5, 0.25)
    assert double2(1, 1) / double2(0, -0.5) == double2(np.inf, -2)


def test_integer_division_truncates():
    assert int4(7, -7, 7, -7) / int4(2, 2, -2, -2) == int4(3, -3, -3, 3)
    assert int3(9, 10, 11) / 3 == int3(3, 3, 3)

    with pytest.raises(ZeroDivisionError):
        int3(1, 2, 3) / int3(1, 0, 1)


def test_float32_precision_is_kept():
    v = float3(1, 2, 3) * 0.1
    assert v.dtype == np.dtype('float32')


def test_arithmetic_raise():
    with pytest.raises(SimdTypeError):
        double3(1, 2, 3) + float3(1, 2, 3)

    with pytest.raises(SimdTypeError):
        int3(1, 2, 3) * 0.5

    with pytest.raises(SimdTypeError):
        double3(1, 2, 3) * 1j

    with pytest.raises(TypeError):
        double3(1, 2, 3) + 'abc'

    with pytest.raises(TypeError):
        double3(1, 2, 3) + [1, 2, 3]


def test_integer_range_raise():
    with pytest.raises(SimdTypeError):
        int3(1, 2, 3) + 2 ** 40

    with pytest.raises(SimdTypeError):
        -2 ** 31 - 1 - int3(1, 2, 3)

    with pytest.raises(SimdTypeError):
        int3(2 ** 40)

    with pytest.raises(SimdTypeError):
        int2([0, -2 ** 35])

    # Limits of the lane type are accepted
    limit = np.iinfo('int32').max
    assert int3(limit) - 1 == int3(limit - 1)
    assert int2(0, 0) + limit == int2(limit, limit)


def test_equality():
    assert double3(1, 2, 3) == double3(1, 2, 3)
    assert double3(1, 2, 3) != double3(1, 2, 4)
    assert double3(1, 2, 3) != float3(1, 2, 3)
    assert double3(1, 2, 3) != [1, 2, 3]


# --- Functions --- #


def test_dot_length_distance():
    p = double3(1, 2, 3)
    q = double3(3, 4, 5)
    assert simd.dot(p, q) == 26
    assert simd.length_squared(double2(3, 4)) == 25
    assert simd.length(double2(3, 4)) == 5
    assert simd.distance(double2(0, 0), double2(3, 4)) == 5
    assert simd.dot(int3(1, 2, 3), int3(1, 1, 1)) == 6


def test_normalize():
    v = simd.normalize(double3(0, 3, 4))
    assert all_almost_equal(v, [0, 0.6, 0.8])
    assert simd.normalize(float3(2, 0, 0)) == float3(1, 0, 0)

    zero = simd.normalize(double2(0, 0))
    assert np.all(np.isnan(np.asarray(zero)))

    with pytest.raises(SimdTypeError):
        simd.normalize(int3(1, 2, 3))


def test_cross():
    x, y, z = double3(1, 0, 0), double3(0, 1, 0), double3(0, 0, 1)
    assert simd.cross(x, y) == z
    assert simd.cross(y, x) == -z
    assert simd.cross(int3(1, 0, 0), int3(0, 1, 0)) == int3(0, 0, 1)

    with pytest.raises(SimdLaneError):
        simd.cross(float4(1, 0, 0, 0), float4(0, 1, 0, 0))


def test_mix_and_clamp():
    a, b = double2(0, 10), double2(10, 20)
    assert simd.mix(a, b, 0) == a
    assert simd.mix(a, b, 1) == b
    assert simd.mix(a, b, double2(0.5, 0.25)) == double2(5, 12.5)

    v = double3(-1, 0.5, 2)
    assert simd.clamp(v, 0, 1) == double3(0, 0.5, 1)
    assert (simd.clamp(v, double3(0, 0, 0), double3(1, 0.25, 3)) ==
            double3(0, 0.25, 2))
    assert simd.clamp(int3(-5, 5, 50), 0, 10) == int3(0, 5, 10)

    with pytest.raises(ValueError):
        simd.clamp(v, 1, 0)


def test_reductions():
    v = int4(3, -1, 7, 2)
    assert simd.reduce_add(v) == 11
    assert simd.reduce_min(v) == -1
    assert simd.reduce_max(v) == 7

    u = int4(0, 0, 10, 10)
    assert simd.vmin(u, v) == int4(0, -1, 7, 2)
    assert simd.vmax(u, v) == int4(3, 0, 10, 10)


def test_functions_raise():
    with pytest.raises(SimdTypeError):
        simd.dot(double3(1, 2, 3), float3(1, 2, 3))

    with pytest.raises(TypeError):
        simd.length([3, 4])


if __name__ == '__main__':
    pytest.main([str(__file__.replace('\\', '/')), '-v'])
