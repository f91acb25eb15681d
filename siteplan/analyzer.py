"""Main validation pipeline orchestrator: parse, classify, evaluate."""

import logging
from pathlib import Path

from .classifier import classify_entities
from .conversion import convert_dwg_to_dxf
from .models import Entity, SetbackRule, ValidationReport
from .primitives import parse_dxf_bytes, parse_dxf_file
from .setback import check_setback_distance

logger = logging.getLogger(__name__)


def validate_dxf(
    dxf_bytes: bytes,
    filename: str,
    rule: SetbackRule | None = None,
) -> ValidationReport:
    """
    Validate an already-converted DXF drawing.

    Args:
        dxf_bytes: Raw DXF file content.
        filename: Original filename for the report.
        rule: Setback rule; defaults to 10 feet.

    Returns:
        ValidationReport with the setback verdict and extraction counts.
    """
    entities = parse_dxf_bytes(dxf_bytes)
    return _build_report(entities, filename, rule or SetbackRule())


def validate_dwg_file(
    dwg_path: str | Path,
    filename: str | None = None,
    rule: SetbackRule | None = None,
) -> ValidationReport:
    """Convert a DWG on disk, validate the result and remove both files."""
    dwg_path = Path(dwg_path)
    dxf_path: Path | None = None
    try:
        dxf_path = convert_dwg_to_dxf(dwg_path)
        entities = parse_dxf_file(dxf_path)
        return _build_report(entities, filename or dwg_path.name, rule or SetbackRule())
    finally:
        for path in (dwg_path, dxf_path):
            if path is not None:
                path.unlink(missing_ok=True)


def _build_report(entities: list[Entity], filename: str, rule: SetbackRule) -> ValidationReport:
    groups = classify_entities(entities)
    verdict = check_setback_distance(groups.buildings, groups.boundaries, rule)
    logger.info("%s: compliant=%s (%s)", filename, verdict.compliant, verdict.message)

    diagnostics = {
        "entity_count": len(entities),
        "building_count": len(groups.buildings),
        "boundary_count": len(groups.boundaries),
        "ignored_count": len(groups.ignored),
    }
    return ValidationReport(
        filename=filename,
        setback_compliance=verdict,
        rule=rule,
        diagnostics=diagnostics,
    )
