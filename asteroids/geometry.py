"""Rays, boxes, spheres and triangles with their intersection tests."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from asteroids.vector import Vector

EPSILON = 1e-9


def _vector(values: Iterable[float]) -> Vector:
    return Vector(*values)


@dataclass
class Ray:
    """A half line ``origin + t * direction`` for ``t >= 0``."""

    origin: Vector
    direction: Vector


@dataclass
class IntersectionContext:
    """Where and how a ray met a surface.

    ``intersection == ray.origin + t * ray.direction``; ``normal`` points away
    from the surface; ``u`` and ``v`` depend on the intersected shape.
    """

    t: float
    intersection: Vector
    normal: Vector
    u: float = 0.0
    v: float = 0.0


def refract(refraction_index: float, normal: Vector, direction: Vector) -> Vector | None:
    """Direction of the transmitted ray, or None on total internal reflection.

    ``refraction_index`` is the quotient of the outside and inside densities;
    ``normal`` and ``direction`` must be unit vectors.
    """
    cos_incident = -(normal * direction)
    sin2_transmitted = refraction_index**2 * (1.0 - cos_incident**2)
    if sin2_transmitted > 1.0:
        return None
    cos_transmitted = math.sqrt(1.0 - sin2_transmitted)
    return refraction_index * direction + (refraction_index * cos_incident - cos_transmitted) * normal


class AxisAlignedBoundingBox:
    """A box given by its center and half of its edge length on each axis."""

    def __init__(self, center: Iterable[float], half_edge_length: Iterable[float]) -> None:
        self.center = _vector(center)
        self.half_edge_length = _vector(half_edge_length)
        if len(self.center) != len(self.half_edge_length):
            raise ValueError("center and half edge lengths must have the same dimension")

    def __repr__(self) -> str:
        return f"AxisAlignedBoundingBox({self.center!r}, {self.half_edge_length!r})"

    def intersects(self, other: AxisAlignedBoundingBox) -> bool:
        return all(
            abs(a - b) <= ha + hb
            for a, b, ha, hb in zip(self.center, other.center, self.half_edge_length, other.half_edge_length)
        )

    def _slabs(self, origin: Vector, direction: Vector, half: Vector) -> list[tuple[float, float]] | None:
        """Entry and exit parameters of a ray for each axis, None if it misses a slab."""
        intervals = []
        for center, h, o, d in zip(self.center, half, origin, direction):
            low, high = center - h, center + h
            if d == 0.0:
                if o < low or o > high:
                    return None
                intervals.append((-math.inf, math.inf))
            else:
                t1, t2 = (low - o) / d, (high - o) / d
                intervals.append((min(t1, t2), max(t1, t2)))
        return intervals

    def intersects_ray(self, ray: Ray) -> bool:
        """True if the ray hits this box."""
        slabs = self._slabs(ray.origin, ray.direction, self.half_edge_length)
        if slabs is None:
            return False
        enter = max(entry for entry, _ in slabs)
        leave = min(exit_ for _, exit_ in slabs)
        return enter <= leave and leave >= 0.0

    def _sweep(self, other: AxisAlignedBoundingBox, direction: Vector):
        half = self.half_edge_length + other.half_edge_length
        slabs = self._slabs(other.center, direction, half)
        if slabs is None:
            return None
        enter = max(entry for entry, _ in slabs)
        leave = min(exit_ for _, exit_ in slabs)
        if enter > leave or leave < 0.0 or enter > 1.0:
            return None
        return slabs, enter

    def intersects_moving(self, other: AxisAlignedBoundingBox, direction: Vector) -> bool:
        """True if ``other``, moved by ``direction``, meets this box on its way."""
        return self._sweep(other, direction) is not None

    def sweep_intersects(self, other: AxisAlignedBoundingBox, direction: Vector) -> Vector:
        """Normal (not normalized) of the face that the moving box hits first.

        The null vector is returned when no intersection occurs.
        """
        normal = Vector.filled(len(self.center))
        hit = self._sweep(other, direction)
        if hit is None:
            return normal
        slabs, enter = hit
        if math.isinf(enter):
            return normal
        tolerance = EPSILON * max(1.0, abs(enter))
        for axis, ((entry, _), d) in enumerate(zip(slabs, direction)):
            if abs(entry - enter) <= tolerance:
                normal[axis] = -math.copysign(1.0, d)
        return normal


class Sphere:
    """A sphere (a circle in two dimensions) with center and radius."""

    def __init__(self, center: Iterable[float], radius: float) -> None:
        self.center = _vector(center)
        self.radius = float(radius)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.center!r}, {self.radius!r})"

    def intersects(self, other: Sphere) -> bool:
        """True if this sphere and ``other`` overlap or touch."""
        reach = self.radius + other.radius
        return (self.center - other.center).square_of_length() <= reach * reach

    def _nearest_hit(self, ray: Ray) -> float | None:
        a = ray.direction.square_of_length()
        if a == 0.0:
            return None
        oc = ray.origin - self.center
        b = 2.0 * (oc * ray.direction)
        c = oc.square_of_length() - self.radius * self.radius
        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return None
        root = math.sqrt(discriminant)
        near = (-b - root) / (2.0 * a)
        far = (-b + root) / (2.0 * a)
        if near > EPSILON:
            return near
        if far > EPSILON:
            return far
        return None

    def ray_parameter(self, ray: Ray) -> float:
        """Value t with ``ray.origin + t * ray.direction`` on the surface, 0 if missed."""
        t = self._nearest_hit(ray)
        return 0.0 if t is None else t

    def intersects_ray(self, ray: Ray) -> IntersectionContext | None:
        """Where the ray first meets the surface, or None."""
        t = self._nearest_hit(ray)
        if t is None:
            return None
        intersection = ray.origin + t * ray.direction
        normal = intersection - self.center
        if normal.length() > 0.0:
            normal.normalize()
        return IntersectionContext(t=t, intersection=intersection, normal=normal)

    def inside(self, p: Iterable[float]) -> bool:
        """True if the point lies inside this sphere or on its surface."""
        return (_vector(p) - self.center).square_of_length() <= self.radius * self.radius


class Triangle:
    """A three-dimensional triangle with a normal vector at each corner."""

    def __init__(
        self,
        a: Iterable[float],
        b: Iterable[float],
        c: Iterable[float],
        na: Iterable[float] | None = None,
        nb: Iterable[float] | None = None,
        nc: Iterable[float] | None = None,
    ) -> None:
        self.a, self.b, self.c = _vector(a), _vector(b), _vector(c)
        if any(len(point) != 3 for point in (self.a, self.b, self.c)):
            raise ValueError("triangle corners must be three-dimensional")
        given = [n for n in (na, nb, nc) if n is not None]
        if not given:
            normal = (self.c - self.a).cross_product(self.b - self.a)
            if normal.length() == 0.0:
                raise ValueError("degenerate triangle has no normal")
            normal.normalize()
            self.na, self.nb, self.nc = normal, normal.copy(), normal.copy()
        elif len(given) == 3:
            self.na, self.nb, self.nc = (_vector(n) for n in given)
        else:
            raise ValueError("either all three corner normals or none must be given")

    @classmethod
    def with_normal(cls, a, b, c, normal) -> Triangle:
        """Triangle whose corners all carry the same normal."""
        return cls(a, b, c, normal, normal, normal)

    def intersects_ray(self, ray: Ray) -> IntersectionContext | None:
        """Where the ray meets this triangle, or None.

        ``u`` and ``v`` are the barycentric weights of corners a and b.
        """
        edge1 = self.b - self.a
        edge2 = self.c - self.a
        p = ray.direction.cross_product(edge2)
        determinant = edge1 * p
        if abs(determinant) < EPSILON:
            return None
        inverse = 1.0 / determinant
        s = ray.origin - self.a
        weight_b = (s * p) * inverse
        if weight_b < -EPSILON or weight_b > 1.0 + EPSILON:
            return None
        q = s.cross_product(edge1)
        weight_c = (ray.direction * q) * inverse
        if weight_c < -EPSILON or weight_b + weight_c > 1.0 + EPSILON:
            return None
        t = (edge2 * q) * inverse
        if t <= EPSILON:
            return None
        u = 1.0 - weight_b - weight_c
        v = weight_b
        normal = u * self.na + v * self.nb + weight_c * self.nc
        if normal.length() > 0.0:
            normal.normalize()
        intersection = ray.origin + t * ray.direction
        return IntersectionContext(t=t, intersection=intersection, normal=normal, u=u, v=v)