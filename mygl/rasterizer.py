"""Turn screen-space lines and triangles into interpolated fragments."""

from __future__ import annotations

from typing import Mapping, Sequence

from mygl.enums import DataType
from mygl.funcs import cross, length
from mygl.shader import Var
from mygl.vector import Vec3, Vector

Fragment = "tuple[Vec3, dict[str, Var]]"

_INTERPOLATED = {
    DataType.INT,
    DataType.BYTE,
    DataType.FLOAT,
    DataType.DOUBLE,
    DataType.FLOAT_VEC2,
    DataType.FLOAT_VEC3,
    DataType.FLOAT_VEC4,
}


def _blend(terms: Sequence[tuple[Var, float]]) -> Var:
    """Weighted sum of variables; types that cannot be blended give an empty Var."""
    first, first_weight = terms[0]
    kind = first.data_type
    if kind not in _INTERPOLATED:
        return Var()
    total = sum(
        (var.value * weight for var, weight in terms[1:]), first.value * first_weight
    )
    if kind in (DataType.INT, DataType.BYTE):
        return Var(int(total), kind)
    if kind in (DataType.FLOAT, DataType.DOUBLE):
        return Var(float(total), kind)
    return Var(total, kind)


def _partner(outputs: Mapping[str, Var], name: str) -> Var:
    try:
        return outputs[name]
    except KeyError:
        raise KeyError(f"vertex output {name!r} is missing from another vertex") from None


def _copy_outputs(outputs: Mapping[str, Var]) -> dict[str, Var]:
    return {name: var.copy() for name, var in outputs.items()}


def rasterize_line(
    v1: "tuple[Vector, Mapping[str, Var]]", v2: "tuple[Vector, Mapping[str, Var]]"
) -> list:
    """Rasterize a line with Bresenham's algorithm.

    Each vertex is a (screen position, outputs) pair. Returns a list of
    (position, outputs) fragments, starting with the left end point.
    """
    (pos_a, out_a), (pos_b, out_b) = v1, v2
    begin, end = Vec3(*pos_a), Vec3(*pos_b)
    begin_out, end_out = out_a, out_b
    if begin.x > end.x:
        begin, end = end, begin
        begin_out, end_out = end_out, begin_out

    fragments = [(begin.copy(), _copy_outputs(begin_out))]

    flip_y = begin.y > end.y
    if flip_y:
        begin.y = -begin.y
        end.y = -end.y
    dx = int(end.x - begin.x)
    dy = int(end.y - begin.y)
    swap_xy = dy > dx
    if swap_xy:
        begin.x, begin.y = begin.y, begin.x
        end.x, end.y = end.y, end.x
        dx, dy = dy, dx

    cur_x, cur_y = int(begin.x), int(begin.y)
    p = 2 * dy - dx
    for _ in range(dx):
        if p > 0:
            cur_y += 1
            p -= 2 * dx
        p += 2 * dy
        cur_x += 1

        res_x, res_y = (cur_y, cur_x) if swap_xy else (cur_x, cur_y)
        if flip_y:
            res_y = -res_y

        if begin.x != end.x:
            weight = (cur_x - begin.x) / (end.x - begin.x)
        elif begin.y != end.y:
            weight = (cur_y - begin.y) / (end.y - begin.y)
        else:
            weight = 1.0

        z = weight * end.z + (1.0 - weight) * begin.z
        outputs = {
            name: _blend([(_partner(end_out, name), weight), (var, 1.0 - weight)])
            for name, var in begin_out.items()
        }
        fragments.append((Vec3(float(res_x), float(res_y), z), outputs))
    return fragments


def rasterize_triangle(
    v1: "tuple[Vector, Mapping[str, Var]]",
    v2: "tuple[Vector, Mapping[str, Var]]",
    v3: "tuple[Vector, Mapping[str, Var]]",
) -> list:
    """Rasterize a triangle by testing every pixel of its bounding box.

    Outputs and depth are interpolated with barycentric weights. A triangle
    of zero area yields no fragments.
    """
    pos1, pos2, pos3 = Vec3(*v1[0]), Vec3(*v2[0]), Vec3(*v3[0])
    out1, out2, out3 = v1[1], v2[1], v3[1]

    left = right = int(pos1.x)
    bottom = top = int(pos1.y)
    for pos in (pos2, pos3):
        if pos.x < left:
            left = int(pos.x)
        if pos.x > right:
            right = int(pos.x)
        if pos.y < bottom:
            bottom = int(pos.y)
        if pos.y > top:
            top = int(pos.y)

    def flat(a: Vector, b: Vector) -> Vec3:
        return Vec3(b.x - a.x, b.y - a.y, 0.0)

    p1p2 = flat(pos1, pos2)
    p2p3 = flat(pos2, pos3)
    p3p1 = flat(pos3, pos1)
    area = length(cross(p1p2, p3p1))
    if area == 0.0:
        return []

    fragments = []
    for x in range(left, right):
        for y in range(bottom, top):
            pixel = Vec3(float(x), float(y), 0.0)
            c1 = cross(p1p2, flat(pos1, pixel))
            c2 = cross(p2p3, flat(pos2, pixel))
            c3 = cross(p3p1, flat(pos3, pixel))
            inside = (c1.z > 0.0) == (c2.z > 0.0) == (c3.z > 0.0)
            if not inside:
                continue
            a = length(c2) / area
            b = length(c3) / area
            c = length(c1) / area
            z = pos1.z * a + pos2.z * b + pos3.z * c
            outputs = {
                name: _blend(
                    [
                        (var, a),
                        (_partner(out2, name), b),
                        (_partner(out3, name), c),
                    ]
                )
                for name, var in out1.items()
            }
            fragments.append((Vec3(float(x), float(y), z), outputs))
    return fragments