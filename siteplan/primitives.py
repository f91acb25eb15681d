"""Parse DXF with ezdxf and reduce modelspace entities to bounding rectangles."""

import io
import logging
from pathlib import Path

import ezdxf
from ezdxf import bbox, recover
from ezdxf.document import Drawing
from ezdxf.math import BoundingBox
from pydantic import ValidationError

from .errors import DrawingParseError, MalformedEntityError
from .models import Entity

logger = logging.getLogger(__name__)


def parse_dxf_bytes(data: bytes) -> list[Entity]:
    """Parse raw DXF content (ASCII or binary) into entities."""
    if not data.strip():
        raise DrawingParseError("Not a DXF file: upload is empty")
    try:
        doc, auditor = recover.read(io.BytesIO(data))
    except ezdxf.DXFStructureError as exc:
        raise DrawingParseError(f"Invalid or corrupted DXF file: {exc}") from exc
    if auditor.has_errors:
        logger.warning("DXF recovered with %d audit errors", len(auditor.errors))
    return extract_entities(doc)


def parse_dxf_file(path: str | Path) -> list[Entity]:
    try:
        doc = ezdxf.readfile(str(path))
    except IOError as exc:
        raise DrawingParseError(
            f"Not a DXF file or a generic I/O error: {path}"
        ) from exc
    except ezdxf.DXFStructureError as exc:
        raise DrawingParseError(f"Invalid or corrupted DXF file: {path}") from exc
    return extract_entities(doc)


def extract_entities(doc: Drawing) -> list[Entity]:
    """Extract every modelspace entity that has measurable extents, in file order."""
    entities: list[Entity] = []
    skipped = 0
    for dxf_entity in doc.modelspace():
        box = bbox.extents([dxf_entity], fast=True)
        if not box.has_data:
            skipped += 1
            continue
        entities.append(_to_entity(dxf_entity, box))
    if skipped:
        logger.debug("Skipped %d entities without extents", skipped)
    return entities


def _to_entity(dxf_entity, box: BoundingBox) -> Entity:
    handle = dxf_entity.dxf.get("handle", "") or ""
    center = box.center
    size = box.size
    try:
        return Entity(
            layer=dxf_entity.dxf.get("layer", "0"),
            x=center.x,
            y=center.y,
            width=size.x,
            height=size.y,
            dxftype=dxf_entity.dxftype(),
            handle=handle,
        )
    except ValidationError as exc:
        raise MalformedEntityError(
            f"Malformed {dxf_entity.dxftype()} entity {handle or '?'}: {exc}",
            handle=handle,
        ) from exc
