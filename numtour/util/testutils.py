# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Testing utilities."""

from __future__ import absolute_import, division, print_function

import os
from itertools import zip_longest

import numpy as np

from numtour.util.utility import is_string

__all__ = (
    'dtype_ndigits',
    'dtype_tol',
    'all_equal',
    'all_almost_equal',
    'simple_fixture',
    'noise_array',
    'noise_arrays',
    'test',
    'run_doctests',
)


def _ndigits(a, b, default=None):
    """Return number of expected correct digits comparing ``a`` and ``b``.

    The returned number is the minimum `dtype_ndigits` of the two objects.
    """
    dtype1 = getattr(a, 'dtype', object)
    dtype2 = getattr(b, 'dtype', object)
    return min(dtype_ndigits(dtype1, default), dtype_ndigits(dtype2, default))


def dtype_ndigits(dtype, default=None):
    """Return the number of correct digits expected for a given dtype.

    Returned numbers:

    - ``np.float16``: ``1``
    - ``np.float32`` or ``np.complex64``: ``3``
    - Others: ``default`` if given, otherwise ``5``

    See Also
    --------
    dtype_tol : Same precision expressed as tolerance
    """
    small_dtypes = [np.float32, np.complex64]
    tiny_dtypes = [np.float16]

    if dtype in tiny_dtypes:
        return 1
    elif dtype in small_dtypes:
        return 3
    else:
        return default if default is not None else 5


def dtype_tol(dtype, default=None):
    """Return a tolerance for a given dtype.

    See Also
    --------
    dtype_ndigits : Same tolerance expressed in number of digits.
    """
    return 10 ** -dtype_ndigits(dtype, default)


def all_equal(iter1, iter2):
    """Return ``True`` if all elements in ``a`` and ``b`` are equal."""
    # Direct comparison for scalars, tuples or lists
    try:
        if iter1 == iter2:
            return True
    except ValueError:  # Raised by NumPy when comparing arrays
        pass

    if iter1 is None and iter2 is None:
        return True

    # If one nested iterator is exhausted, go to direct comparison
    try:
        it1 = iter(iter1)
        it2 = iter(iter2)
    except TypeError:
        try:
            return bool(iter1 == iter2)
        except ValueError:
            return False

    diff_length_sentinel = object()

    for [ip1, ip2] in zip_longest(it1, it2,
                                  fillvalue=diff_length_sentinel):
        if ip1 is diff_length_sentinel or ip2 is diff_length_sentinel:
            return False

        if not all_equal(ip1, ip2):
            return False

    return True


def all_almost_equal_array(v1, v2, ndigits):
    return np.allclose(v1, v2,
                       rtol=10 ** -ndigits, atol=10 ** -ndigits,
                       equal_nan=True)


def all_almost_equal(iter1, iter2, ndigits=None):
    """Return ``True`` if all elements in ``a`` and ``b`` are almost equal."""
    try:
        if iter1 is iter2 or iter1 == iter2:
            return True
    except ValueError:
        pass

    if iter1 is None and iter2 is None:
        return True

    if hasattr(iter1, '__array__') and hasattr(iter2, '__array__'):
        # Only get default ndigits if comparing arrays, need to keep `None`
        # otherwise for recursive calls.
        if ndigits is None:
            ndigits = _ndigits(iter1, iter2, None)
        return all_almost_equal_array(iter1, iter2, ndigits)

    try:
        it1 = iter(iter1)
        it2 = iter(iter2)
    except TypeError:
        if ndigits is None:
            ndigits = _ndigits(iter1, iter2, None)
        return bool(np.isclose(iter1, iter2,
                               atol=10 ** -ndigits, rtol=10 ** -ndigits,
                               equal_nan=True))

    diff_length_sentinel = object()
    for [ip1, ip2] in zip_longest(it1, it2,
                                  fillvalue=diff_length_sentinel):
        if ip1 is diff_length_sentinel or ip2 is diff_length_sentinel:
            return False

        if not all_almost_equal(ip1, ip2, ndigits):
            return False

    return True


def simple_fixture(name, params, fmt=None):
    """Helper to create a pytest fixture using only name and params.

    Parameters
    ----------
    name : str
        Name of the parameters used for the ``ids`` argument
        to `pytest.fixture`.
    params : sequence
        Values to be taken as parameters in the fixture.
    fmt : str, optional
        Use this format string for the generation of the ``ids``.
        For each value, the id string is generated as ::

            fmt.format(name=name, value=value)

        hence the format string must use ``{name}`` and ``{value}``.
        Default format strings are:

            - ``" {name}='{value}' "`` for string parameters,
            - ``" {name}={value} "`` for other types.
    """
    import pytest

    if fmt is None:
        fmt_str = " {name}='{value}' "
        fmt_default = " {name}={value} "

        ids = []
        for p in params:
            if is_string(p):
                ids.append(fmt_str.format(name=name, value=p))
            else:
                ids.append(fmt_default.format(name=name, value=p))
    else:
        ids = [fmt.format(name=name, value=p) for p in params]

    wrapper = pytest.fixture(scope='module', ids=ids, params=params)
    return wrapper(lambda request: request.param)


# Helpers to generate data
def noise_array(size, dtype='float64'):
    """Generate a white noise vector of given size and dtype.

    The array contains white noise with standard deviation 1 in the case of
    floating point dtypes and uniformly spaced values between -10 and 10 in
    the case of integer dtypes.

    Parameters
    ----------
    size : int
        Number of elements.
    dtype : optional
        Data type of the array, anything `numpy.dtype` understands.

    Returns
    -------
    noise_array : `numpy.ndarray`
    """
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.unsignedinteger):
        arr = np.random.randint(0, 10, size)
    elif np.issubdtype(dtype, np.signedinteger):
        arr = np.random.randint(-10, 10, size)
    elif np.issubdtype(dtype, np.floating):
        arr = np.random.randn(size)
    elif np.issubdtype(dtype, np.complexfloating):
        arr = (
            np.random.randn(size) + 1j * np.random.randn(size)
        ) / np.sqrt(2.0)
    else:
        raise ValueError('bad dtype {}'.format(dtype))

    return arr.astype(dtype, copy=False)


def noise_arrays(size, dtype='float64', n=1):
    """Return a list of ``n`` independent `noise_array`'s."""
    return [noise_array(size, dtype) for _ in range(n)]


def test(arguments=None):
    """Run numtour tests given by arguments."""
    try:
        import pytest
    except ImportError:
        raise ImportError(
            'numtour tests cannot be run without `pytest` installed.\n'
            'Run `$ pip install [--user] numtour[testing]` in order to '
            'install `pytest`.'
        )

    this_dir = os.path.dirname(__file__)
    pkg_root = os.path.abspath(os.path.join(this_dir, os.pardir))

    args = [pkg_root, '-p', 'numtour.util.pytest_config']
    if arguments is not None:
        args.extend(arguments)

    return pytest.main(args)


def run_doctests(skip_if=False, **kwargs):
    """Run all doctests in the current module.

    This function calls ``doctest.testmod()``, by default with the options
    ``optionflags=doctest.NORMALIZE_WHITESPACE`` and
    ``extraglobs={'numtour': numtour, 'np': np}``. This can be changed with
    keyword arguments.

    Parameters
    ----------
    skip_if : bool
        For ``True``, skip the doctests in this module.
    kwargs :
        Extra keyword arguments passed on to the ``doctest.testmod``
        function.
    """
    from doctest import testmod, NORMALIZE_WHITESPACE, SKIP
    import numtour

    optionflags = kwargs.pop('optionflags', NORMALIZE_WHITESPACE)
    if skip_if:
        optionflags |= SKIP

    extraglobs = kwargs.pop('extraglobs', {'numtour': numtour, 'np': np})

    testmod(optionflags=optionflags, extraglobs=extraglobs, **kwargs)


if __name__ == '__main__':
    run_doctests()
