"""Setback compliance check over classified buildings and boundaries."""

import logging
from collections.abc import Iterable, Sequence

from .classifier import classify_entities
from .clearance import iter_clearances
from .models import ComplianceVerdict, Entity, SetbackRule

logger = logging.getLogger(__name__)


def check_setback_distance(
    buildings: Sequence[Entity],
    boundaries: Sequence[Entity],
    rule: SetbackRule | None = None,
) -> ComplianceVerdict:
    """Return compliant on the first building/boundary pair that clears the rule.

    Pairs are visited buildings-outer, boundaries-inner. A single pair at or
    beyond ``rule.min_distance`` is enough; the remaining pairs are not
    examined. With no qualifying pair (including empty inputs) the verdict is
    non-compliant with a fixed message.
    """
    rule = rule or SetbackRule()

    for clearance in iter_clearances(buildings, boundaries):
        if clearance.distance >= rule.min_distance:
            logger.debug(
                "Pair %s/%s clears setback at %.3f",
                clearance.building.handle,
                clearance.boundary.handle,
                clearance.distance,
            )
            return ComplianceVerdict(
                compliant=True,
                message=(
                    f"Building is {clearance.distance:.2f} {rule.unit} "
                    "away from boundary on one side."
                ),
            )

    return ComplianceVerdict(
        compliant=False,
        message=(
            f"Building does not meet the {rule.min_distance:g}-{rule.short_unit} "
            "setback requirement on any side."
        ),
    )


def evaluate_setback(
    entities: Iterable[Entity],
    rule: SetbackRule | None = None,
) -> ComplianceVerdict:
    """Classify a parsed drawing's entities and check the setback rule."""
    groups = classify_entities(entities)
    logger.info(
        "Evaluating setback: %d buildings, %d boundaries, %d ignored",
        len(groups.buildings),
        len(groups.boundaries),
        len(groups.ignored),
    )
    return check_setback_distance(groups.buildings, groups.boundaries, rule)
