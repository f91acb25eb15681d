"""Split parsed entities into buildings and boundaries by layer name."""

from collections.abc import Iterable

from .models import Classification, Entity, Layer


def classify_entities(entities: Iterable[Entity]) -> Classification:
    """Partition entities by exact, case-sensitive layer match.

    Input order is preserved within each group. Entities on any other layer
    end up in ``ignored``.
    """
    result = Classification()
    for entity in entities:
        kind = entity.kind
        if kind is Layer.BUILDING:
            result.buildings.append(entity)
        elif kind is Layer.BOUNDARY:
            result.boundaries.append(entity)
        else:
            result.ignored.append(entity)
    return result
