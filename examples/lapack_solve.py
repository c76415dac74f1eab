"""Solve linear systems with the LAPACK ``gesv`` driver.

The first system is given in column-major order, the way LAPACK stores
matrices. The LU factors returned by `numtour.lapack.gesv` are then used
to check the factorization ``P * A = L * U``.

A singular system shows the two ways of handling failure: `gesv`
reports it in ``info``, `solve` raises `SingularMatrixError`.
"""

import numpy as np
from numtour import lapack
from numtour.util import SingularMatrixError

# --- A regular system --- #

# 7x + 5y - 3z = 16
# 3x - 5y + 2z = -8
# 5x + 3y - 7z = 0
a = lapack.column_major([7, 3, 5, 5, -5, 3, -3, 2, -7], n_rows=3)
b = np.array([16.0, -8.0, 0.0])

result = lapack.gesv(a, b)
print('info:', result.info)
print('solution:', result.x)

# Rebuild the row permutation from the pivot indices
lower = np.tril(result.lu, -1) + np.eye(3)
upper = np.triu(result.lu)
permuted = a.astype(float)
for i, p in enumerate(result.piv):
    permuted[[i, p]] = permuted[[p, i]]
print('factorization error:', np.max(np.abs(lower.dot(upper) - permuted)))

# --- A singular system --- #

singular = [[1.0, 2.0], [2.0, 4.0]]
print('info for singular matrix:', lapack.gesv(singular, [1.0, 1.0]).info)

try:
    lapack.solve(singular, [1.0, 1.0])
except SingularMatrixError as exc:
    print('solve failed:', exc)
