"""Linear combinations of large vectors with the BLAS kernels.

This example computes ``z = a * x + b * y`` in three ways:

- with `numtour.blas.lincomb`, which picks ``scal``, ``axpy`` and
  ``copy`` calls depending on the scalars and the aliasing of the
  arguments,
- with two explicit ``axpy`` calls on a copy of ``y``,
- with plain NumPy expressions,

and compares the results and timings.
"""

import logging
import timeit

import numpy as np
import numtour
from numtour import blas

numtour.util.setup_logging(logging.DEBUG)

# --- Set up the data --- #

size = 10 ** 6
x = np.random.randn(size)
y = np.random.randn(size)
z = np.empty(size)
a, b = 2.0, -0.5

# --- Compute the combination --- #

blas.lincomb(a, x, b, y, out=z)

w = y.copy()
blas.scal(b, w)
blas.axpy(a, x, w)

reference = a * x + b * y
print('max deviation lincomb: {:.3e}'.format(np.max(np.abs(z - reference))))
print('max deviation axpy:    {:.3e}'.format(np.max(np.abs(w - reference))))
print('norm of the result:    {:.6f}'.format(blas.nrm2(z)))

# --- Timings --- #

n_runs = 20
time_blas = timeit.timeit(lambda: blas.lincomb(a, x, b, y, out=z),
                          number=n_runs)
time_numpy = timeit.timeit(lambda: np.add(a * x, b * y, out=z),
                           number=n_runs)
print('lincomb: {:.2f} ms per call'.format(1e3 * time_blas / n_runs))
print('numpy:   {:.2f} ms per call'.format(1e3 * time_numpy / n_runs))
