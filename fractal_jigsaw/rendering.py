"""Render arcs as SVG path fragments in one of three corner styles."""

from typing import Dict, Tuple, Union

from .models import Arc, ArcShape, Point

# tan(22.5 degrees), the half side of an octagon inscribed at unit radius
TAN_22_5 = 0.4142135623730950488016887242097

# Quadrant -> (axis offset applied to pa, axis offset applied to pb), in units of
# radius * TAN_22_5
OCTAGON_MIDPOINTS: Dict[int, Tuple[Tuple[int, int], Tuple[int, int]]] = {
    0: ((0, -1), (1, 0)),
    1: ((-1, 0), (0, -1)),
    2: ((0, 1), (-1, 0)),
    3: ((1, 0), (0, 1)),
}


def format_number(value: float) -> str:
    """Format a coordinate the way a JavaScript number prints.

    Integral values have no decimal point; anything else uses the shortest
    representation that round-trips.
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_point(point: Point, separator: str = " ") -> str:
    return f"{format_number(point.x)}{separator}{format_number(point.y)}"


def octagon_midpoints(arc: Arc) -> Tuple[Point, Point]:
    """The two chamfer points between pa and pb, in pa -> pb order."""
    hlen = arc.radius * TAN_22_5
    (ax, ay), (bx, by) = OCTAGON_MIDPOINTS[arc.quadrant]
    first = Point(arc.pa.x + ax * hlen, arc.pa.y + ay * hlen)
    second = Point(arc.pb.x + bx * hlen, arc.pb.y + by * hlen)
    return first, second


def render_arc(arc: Arc, shape: Union[ArcShape, int, str]) -> str:
    """Path fragment drawing ``arc`` from its start to its end point.

    The fragment assumes the pen is already at the arc's start and always ends
    with a trailing space.
    """
    shape = ArcShape.parse(shape)
    if shape is ArcShape.CIRCLE:
        radius = format_number(arc.radius)
        return f"A {radius} {radius} 0 0,{arc.sign} {format_point(arc.end)} "
    if shape is ArcShape.SQUARE:
        return f"L {format_point(arc.end)} "

    first, second = octagon_midpoints(arc)
    if arc.sign == 1:
        first, second = second, first
    return f"L {format_point(first)} L {format_point(second)} L {format_point(arc.end)} "
