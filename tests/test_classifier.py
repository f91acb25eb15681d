from siteplan.classifier import classify_entities
from siteplan.models import Layer

from .conftest import rect


def test_classify_preserves_order_and_counts():
    entities = [
        rect("BOUNDARY", 0, 0, 1, 1, "1"),
        rect("BUILDING", 0, 0, 1, 1, "2"),
        rect("WALLS", 0, 0, 1, 1, "3"),
        rect("BUILDING", 0, 0, 1, 1, "4"),
        rect("BOUNDARY", 0, 0, 1, 1, "5"),
    ]

    groups = classify_entities(entities)

    assert [e.handle for e in groups.buildings] == ["2", "4"]
    assert [e.handle for e in groups.boundaries] == ["1", "5"]
    assert [e.handle for e in groups.ignored] == ["3"]
    assert (
        len(groups.buildings) + len(groups.boundaries) + len(groups.ignored)
        == len(entities)
    )


def test_layer_match_is_case_sensitive():
    groups = classify_entities([
        rect("building", 0, 0, 1, 1),
        rect("Boundary", 0, 0, 1, 1),
        rect("BUILDING ", 0, 0, 1, 1),
    ])

    assert groups.buildings == []
    assert groups.boundaries == []
    assert len(groups.ignored) == 3


def test_empty_input():
    groups = classify_entities([])
    assert groups.buildings == [] and groups.boundaries == [] and groups.ignored == []


def test_entity_kind():
    assert rect("BUILDING", 0, 0, 1, 1).kind is Layer.BUILDING
    assert rect("BOUNDARY", 0, 0, 1, 1).kind is Layer.BOUNDARY
    assert rect("0", 0, 0, 1, 1).kind is None
