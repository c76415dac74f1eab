"""Geometry with short fixed-width vectors.

Computes the normal of a triangle, its area and the distance of a point
to the plane of the triangle using the `numtour.simd` vector types.
"""

from numtour import simd
from numtour.simd import double3

# Corners of the triangle
p0 = double3(0, 0, 0)
p1 = double3(4, 0, 0)
p2 = double3(0, 3, 1)

edge1 = p1 - p0
edge2 = p2 - p0
normal = simd.cross(edge1, edge2)

print('normal:', normal)
print('unit normal:', simd.normalize(normal))
print('area:', 0.5 * simd.length(normal))

# Signed distance of a point to the plane of the triangle
point = double3(1, 1, 5)
unit_normal = simd.normalize(normal)
print('distance to plane:', simd.dot(point - p0, unit_normal))

# Midpoint of an edge and clamping into the unit cube
midpoint = simd.mix(p1, p2, 0.5)
print('midpoint of p1 and p2:', midpoint)
print('clamped to [0, 1]:', simd.clamp(midpoint, 0, 1))
