# Copyright 2026 The numtour contributors
#
# This file is part of numtour.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from __future__ import division

import io
import logging

import numpy as np
import pytest

from numtour import simd, tour
from numtour.__main__ import main
from numtour.util.testutils import all_almost_equal, all_equal, simple_fixture

# --- pytest fixtures --- #


section = simple_fixture('section', list(tour.SECTIONS))


# --- Sections --- #


def test_blas_section():
    stream = io.StringIO()
    results = tour.blas_section(stream=stream)

    assert all_equal(results['axpy'], [13, 24, 35])
    assert results['dot'] == 26
    assert 'BLAS' in stream.getvalue()


def test_lapack_section():
    results = tour.lapack_section(stream=io.StringIO())
    assert results['info'] == 0
    assert np.allclose(results['solution'], [1, 3, 2], atol=1e-4)


def test_simd_section():
    results = tour.simd_section(stream=io.StringIO())
    assert results['axpy'] == simd.double3(13, 24, 35)


def test_veclib_section():
    results = tour.veclib_section(stream=io.StringIO())
    assert all_equal(results['abs'], [3, 2, 5, 10])
    assert all_equal(results['int'], [3, 1, -2])
    assert all_equal(results['sqrt'], [4, 3, 2, 1])
    assert all_almost_equal(results['rec'], [3, 2.5, 8, -1 / 3])
    for arr in results.values():
        assert arr.dtype == np.dtype('float32')


def test_vdsp_section():
    results = tour.vdsp_section(stream=io.StringIO())
    assert all_equal(results['from_origin'], np.arange(0, 90, 10))
    assert all_equal(results['legs'], [10] * 8)
    assert results['total'] == 80


def test_section_prints_heading(section):
    stream = io.StringIO()
    tour.SECTIONS[section](stream=stream)
    lines = stream.getvalue().splitlines()

    # Blank line, title and underline of the same length
    assert lines[0] == ''
    assert len(lines[2]) == len(lines[1])
    assert set(lines[2]) == {'-'}
    assert len(lines) > 3


# --- run_tour --- #


def test_run_tour():
    stream = io.StringIO()
    results = tour.run_tour(stream=stream)

    assert list(results) == list(tour.SECTIONS)
    output = stream.getvalue()
    assert output.startswith('A tour of the numerical kernels')
    assert '13' in output and '80' in output


def test_run_tour_selected_sections():
    results = tour.run_tour(stream=io.StringIO(), sections=['vdsp', 'blas'])
    assert list(results) == ['vdsp', 'blas']

    with pytest.raises(ValueError):
        tour.run_tour(stream=io.StringIO(), sections=['fft'])


@pytest.fixture
def restore_logger():
    logger = logging.getLogger('numtour')
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


def test_main(capsys, restore_logger):
    assert main() == 0
    out, _ = capsys.readouterr()
    assert 'LAPACK' in out
    assert 'total distance: 80.0' in out


if __name__ == '__main__':
    pytest.main([str(__file__.replace('\\', '/')), '-v'])
