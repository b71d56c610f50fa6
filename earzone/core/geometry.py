"""Geometry primitives for polygon triangulation.

Scalar predicates used by the classifiers work on plain ``(x, y)`` pairs so
the hot loop avoids numpy scalar overhead; batch helpers are vectorized.
"""
from __future__ import annotations
import numpy as np
from .constants import EPS_AREA, EPS_COLINEAR

__all__ = [
	'as_points','triangle_area','triangles_signed_areas','polygon_signed_area',
	'turn','point_in_triangle','orient','seg_intersect','vectorized_seg_intersect',
	'polygon_self_intersections','point_in_polygon','area_tolerance'
]


def as_points(points, count=None):
	"""Return points as a float64 ``(n, 2)`` array.

	Accepts an ``(n, 2)`` array-like or a flat ``(2n,)`` sequence laid out as
	``x0, y0, x1, y1, ...``. When ``count`` is given only the first ``count``
	points are returned; a shorter input raises ValueError.
	"""
	arr = np.asarray(points, dtype=np.float64)
	if arr.ndim == 1:
		if arr.size % 2:
			raise ValueError(f"flat point sequence must have even length, got {arr.size}")
		arr = arr.reshape(-1, 2)
	elif arr.ndim != 2 or arr.shape[1] != 2:
		raise ValueError(f"points must be (N, 2) or flat (2N,), got shape {arr.shape}")
	if count is not None:
		if arr.shape[0] < count:
			raise ValueError(f"expected at least {count} points, got {arr.shape[0]}")
		arr = arr[:count]
	return arr


def triangle_area(p0, p1, p2):
	"""Signed area of triangle p0,p1,p2 (positive when counter-clockwise)."""
	return 0.5 * ((p1[0]-p0[0])*(p2[1]-p0[1]) - (p1[1]-p0[1])*(p2[0]-p0[0]))


def triangles_signed_areas(points, tris):
	"""Vectorized signed area for a batch of triangles.

	points: (N,2) float array
	tris:   (M,3) int array
	Returns: (M,) float64 array of signed areas.
	"""
	pts = np.asarray(points, dtype=np.float64)
	T = np.asarray(tris, dtype=np.int64)
	if T.size == 0:
		return np.empty((0,), dtype=float)
	p0 = pts[T[:, 0]]; p1 = pts[T[:, 1]]; p2 = pts[T[:, 2]]
	return 0.5 * ((p1[:,0]-p0[:,0])*(p2[:,1]-p0[:,1]) - (p1[:,1]-p0[:,1])*(p2[:,0]-p0[:,0]))


def polygon_signed_area(polygon):
	"""Return signed area of polygon (sequence of (x,y)); positive if CCW."""
	arr = np.asarray(polygon, dtype=np.float64)
	if arr.ndim != 2 or arr.shape[0] < 3:
		return 0.0
	x = arr[:,0]; y = arr[:,1]
	return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))


def area_tolerance(points):
	"""Area below which a triangle of ``points`` counts as degenerate.

	EPS_AREA times the squared bounding-box diagonal, so the threshold follows
	the polygon scale.
	"""
	pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
	if pts.shape[0] == 0:
		return 0.0
	extent = pts.max(axis=0) - pts.min(axis=0)
	return EPS_AREA * float(np.dot(extent, extent))


def turn(prev, curr, nxt):
	"""Cross product of (prev - curr) and (next - curr).

	Positive when ``curr`` is a convex corner of a counter-clockwise ring.
	"""
	x = curr[0]; y = curr[1]
	x1 = prev[0] - x; y1 = prev[1] - y
	x2 = nxt[0] - x; y2 = nxt[1] - y
	return x2 * y1 - x1 * y2


def point_in_triangle(p, a, b, c):
	"""Barycentric containment test of ``p`` in triangle ``a, b, c``.

	Uses u along a->c and v along a->b with ``u >= 0, v >= 0, u + v < 1``, so
	points on the edge b-c are outside. A degenerate triangle contains nothing:
	the Gram determinant equals d00*d11*sin^2 of the angle at a, so it is
	compared to EPS_COLINEAR relative to d00*d11 and the test does not depend
	on the polygon scale.
	"""
	v0x = c[0] - a[0]; v0y = c[1] - a[1]
	v1x = b[0] - a[0]; v1y = b[1] - a[1]
	v2x = p[0] - a[0]; v2y = p[1] - a[1]
	d00 = v0x*v0x + v0y*v0y
	d01 = v0x*v1x + v0y*v1y
	d02 = v0x*v2x + v0y*v2y
	d11 = v1x*v1x + v1y*v1y
	d12 = v1x*v2x + v1y*v2y
	den = d00 * d11 - d01 * d01
	if abs(den) <= EPS_COLINEAR * d00 * d11:
		return False
	inv = 1.0 / den
	u = (d11 * d02 - d01 * d12) * inv
	v = (d00 * d12 - d01 * d02) * inv
	return u >= 0 and v >= 0 and u + v < 1


def orient(a, b, c):
	"""2D orientation (signed area * 2) for points a,b,c."""
	return (b[0]-a[0])*(c[1]-a[1]) - (b[1]-a[1])*(c[0]-a[0])


def seg_intersect(p1, p2, p3, p4):
	"""Return True if segment p1-p2 properly crosses p3-p4.

	Shared endpoints and colinear overlaps are not crossings.
	"""
	p1 = np.asarray(p1); p2 = np.asarray(p2); p3 = np.asarray(p3); p4 = np.asarray(p4)
	if (p1 == p3).all() or (p1 == p4).all() or (p2 == p3).all() or (p2 == p4).all():
		return False
	o1 = orient(p1, p2, p3); o2 = orient(p1, p2, p4)
	o3 = orient(p3, p4, p1); o4 = orient(p3, p4, p2)
	if o1 == 0 and o2 == 0 and o3 == 0 and o4 == 0:
		return False
	return (o1*o2 < 0) and (o3*o4 < 0)


def vectorized_seg_intersect(a_pts, b_pts, c_pts, d_pts):
	"""Vectorized proper-crossing test for equal-length arrays of segments.

	a_pts, b_pts, c_pts, d_pts are (M,2) arrays. Returns a boolean (M,) array;
	shared endpoints and colinear overlaps are False.
	"""
	a = np.asarray(a_pts, dtype=np.float64)
	b = np.asarray(b_pts, dtype=np.float64)
	c = np.asarray(c_pts, dtype=np.float64)
	d = np.asarray(d_pts, dtype=np.float64)
	if a.size == 0:
		return np.zeros((0,), dtype=bool)
	o1 = (b[:,0]-a[:,0])*(c[:,1]-a[:,1]) - (b[:,1]-a[:,1])*(c[:,0]-a[:,0])
	o2 = (b[:,0]-a[:,0])*(d[:,1]-a[:,1]) - (b[:,1]-a[:,1])*(d[:,0]-a[:,0])
	o3 = (d[:,0]-c[:,0])*(a[:,1]-c[:,1]) - (d[:,1]-c[:,1])*(a[:,0]-c[:,0])
	o4 = (d[:,0]-c[:,0])*(b[:,1]-c[:,1]) - (d[:,1]-c[:,1])*(b[:,0]-c[:,0])
	shared = np.all(a == c, axis=1) | np.all(a == d, axis=1) | np.all(b == c, axis=1) | np.all(b == d, axis=1)
	colinear = (o1 == 0) & (o2 == 0) & (o3 == 0) & (o4 == 0)
	return (o1*o2 < 0) & (o3*o4 < 0) & (~colinear) & (~shared)


def polygon_self_intersections(polygon):
	"""Return the list of (i, j) pairs of non-adjacent ring edges that cross.

	Edge ``i`` runs from vertex ``i`` to ``i+1 mod n``.
	"""
	pts = np.asarray(polygon, dtype=np.float64)
	n = len(pts)
	if n < 4:
		return []
	ii, jj = np.triu_indices(n, k=2)
	# edges n-1 and 0 are adjacent through vertex 0
	keep = ~((ii == 0) & (jj == n - 1))
	ii = ii[keep]; jj = jj[keep]
	nxt = (np.arange(n) + 1) % n
	hits = vectorized_seg_intersect(pts[ii], pts[nxt[ii]], pts[jj], pts[nxt[jj]])
	return [(int(i), int(j)) for i, j in zip(ii[hits], jj[hits])]


def point_in_polygon(x, y, poly):
	"""Ray casting even-odd rule; poly is a sequence of (x,y)."""
	inside = False
	n = len(poly)
	for i in range(n):
		x0, y0 = poly[i]
		x1, y1 = poly[(i+1) % n]
		if ((y0 > y) != (y1 > y)):
			xint = (x1 - x0) * (y - y0) / (y1 - y0 + 1e-20) + x0
			if x < xint:
				inside = not inside
	return inside
