import io

import ezdxf
import pytest

from siteplan.models import Entity


def rect(layer: str, x: float, y: float, width: float, height: float, handle: str = "") -> Entity:
    return Entity(layer=layer, x=x, y=y, width=width, height=height, handle=handle)


def dxf_bytes(shapes: list[tuple[str, float, float, float, float]]) -> bytes:
    """Build an in-memory DXF with one closed LWPOLYLINE per (layer, x, y, w, h)."""
    doc = ezdxf.new()
    msp = doc.modelspace()
    for layer, x, y, w, h in shapes:
        if not doc.layers.has_entry(layer):
            doc.layers.add(layer)
        x0, y0, x1, y1 = x - w / 2, y - h / 2, x + w / 2, y + h / 2
        msp.add_lwpolyline(
            [(x0, y0), (x1, y0), (x1, y1), (x0, y1)],
            close=True,
            dxfattribs={"layer": layer},
        )
    stream = io.StringIO()
    doc.write(stream)
    return stream.getvalue().encode("utf-8")


@pytest.fixture
def compliant_dxf() -> bytes:
    return dxf_bytes([
        ("BUILDING", 0, 0, 4, 4),
        ("BOUNDARY", 20, 0, 2, 2),
        ("DIMENSIONS", 50, 50, 1, 1),
    ])


@pytest.fixture
def encroaching_dxf() -> bytes:
    return dxf_bytes([
        ("BUILDING", 0, 0, 4, 4),
        ("BOUNDARY", 5, 0, 2, 2),
    ])
