"""Distances along a path of 2D points.

A random walk is split into coordinate buffers for the strided `vdist`
routine, which gives the distance of every point from the origin. The
path functions measure the walk itself, and `pairwise_distances` finds
the two points of the walk that are farthest apart.
"""

import numpy as np
from numtour import vdsp, veclib

# --- Create a random walk --- #

n_steps = 50
angles = np.random.uniform(0, 2 * np.pi, size=n_steps)
steps = np.stack([veclib.vcos(angles), veclib.vsin(angles)], axis=1)
points = np.vstack([[0, 0], np.cumsum(steps, axis=0)])

# --- Distances --- #

xs, ys = vdsp.split_points(points)
from_origin = vdsp.vdist(xs, ys)
print('final distance from origin: {:.3f}'.format(from_origin[-1]))

# Every second point only
every_other = vdsp.vdist(xs, ys, stride_a=2, stride_b=2)
print('points visited at even steps:', every_other.size)

print('path length: {:.3f}'.format(vdsp.path_length(points)))
travelled = vdsp.cumulative_distance(points)
print('distance travelled after 10 steps: {:.3f}'.format(travelled[10]))

dist = vdsp.pairwise_distances(points)
i, j = np.unravel_index(np.argmax(dist), dist.shape)
print('farthest points: {} and {} at distance {:.3f}'.format(i, j, dist[i, j]))
