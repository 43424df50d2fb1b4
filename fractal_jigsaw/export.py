"""SVG exporters for a generated jigsaw."""

from typing import List, Set, Tuple, Union

from .generator import FractalJigsaw
from .models import Arc, ArcShape, Point
from .rendering import format_number, format_point, render_arc
from .tracer import trace_piece

ShapeLike = Union[ArcShape, int, str]


def document_size(jigsaw: FractalJigsaw, frame: float, radius: float) -> Tuple[float, float]:
    """Width and height of a document holding the whole lattice plus frame."""
    width = jigsaw.ncols * 2 * radius + 2 * frame
    height = jigsaw.nrows * 2 * radius + 2 * frame
    return width, height


def piece_arcs(jigsaw: FractalJigsaw, frame: float, radius: float) -> List[List[Arc]]:
    """Traced arcs for every piece, in piece order."""
    return [trace_piece(piece, radius, frame) for piece in jigsaw.pieces]


def _closed_path(arcs: List[Arc], shape: ArcShape) -> str:
    data = [f"M{format_point(arcs[0].start, ',')} "]
    data.extend(render_arc(arc, shape) for arc in arcs)
    data.append("Z")
    return "".join(data)


def piece_paths(jigsaw: FractalJigsaw, frame: float, radius: float, shape: ShapeLike) -> List[str]:
    """Raw path data, one closed path per piece, without document wrapping."""
    shape = ArcShape.parse(shape)
    return [_closed_path(arcs, shape) for arcs in piece_arcs(jigsaw, frame, radius) if arcs]


def export_svg(jigsaw: FractalJigsaw, frame: float, radius: float, shape: ShapeLike) -> str:
    """Multi-path document with one closed outline per piece."""
    width, height = (format_number(v) for v in document_size(jigsaw, frame, radius))
    parts = [f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" xmlns="http://www.w3.org/2000/svg">']
    for path in piece_paths(jigsaw, frame, radius, shape):
        parts.append(f'<path fill="none" stroke="black" stroke-width="0.5" d="{path}"></path>')
    parts.append("</svg>")
    return "".join(parts)


def single_path_data(jigsaw: FractalJigsaw, frame: float, radius: float, shape: ShapeLike) -> str:
    """Path data cutting every shared boundary once.

    Arcs equal to one already emitted (same quadrant and centre) are skipped,
    and a move is only emitted when the pen is not already at the next arc's
    start.
    """
    shape = ArcShape.parse(shape)
    emitted: Set[Arc] = set()
    cursor = Point(-1, -1)
    data: List[str] = []
    for arcs in piece_arcs(jigsaw, frame, radius):
        for arc in arcs:
            if arc in emitted:
                continue
            emitted.add(arc)
            if arc.start != cursor:
                data.append(f"M{format_point(arc.start, ',')} ")
            data.append(render_arc(arc, shape))
            cursor = arc.end
    return "".join(data)


def export_svg_single_path(jigsaw: FractalJigsaw, frame: float, radius: float, shape: ShapeLike) -> str:
    """Manufacturing document: one de-duplicated path in millimetre units."""
    width, height = (format_number(v) for v in document_size(jigsaw, frame, radius))
    return (
        '<?xml version="1.0" encoding="utf-8" ?>'
        f'<svg baseProfile="full" height="{height}mm" version="1.1" viewBox="0 0 {width} {height}" '
        f'width="{width}mm" xmlns="http://www.w3.org/2000/svg"><defs />'
        f'<path fill="none" stroke="black" stroke-width="0.1" d="{single_path_data(jigsaw, frame, radius, shape)}">'
        "</path></svg>"
    )
