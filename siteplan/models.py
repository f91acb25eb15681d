"""All Pydantic data models for the setback validation pipeline."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# --- Entities (parse step) ---


class Layer(str, Enum):
    BUILDING = "BUILDING"
    BOUNDARY = "BOUNDARY"


class Entity(BaseModel):
    """A drawing primitive reduced to its bounding rectangle.

    (x, y) is the rectangle center; width and height are its full extents.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    layer: str
    x: float
    y: float
    width: float = Field(default=0.0, ge=0)
    height: float = Field(default=0.0, ge=0)
    dxftype: str = ""
    handle: str = ""

    @property
    def kind(self) -> Layer | None:
        try:
            return Layer(self.layer)
        except ValueError:
            return None


# --- Classification ---


class Classification(BaseModel):
    buildings: list[Entity] = Field(default_factory=list)
    boundaries: list[Entity] = Field(default_factory=list)
    ignored: list[Entity] = Field(default_factory=list)


# --- Setback evaluation ---


class SetbackRule(BaseModel):
    """Minimum clearance, in drawing units, between a building and a boundary."""

    min_distance: float = Field(default=10.0, gt=0, allow_inf_nan=False)
    unit: str = "feet"

    @property
    def short_unit(self) -> str:
        return {"feet": "ft", "foot": "ft", "meters": "m", "metres": "m"}.get(
            self.unit, self.unit
        )


class ClearanceResult(BaseModel):
    distance: float = Field(ge=0)
    building: Entity
    boundary: Entity


class ComplianceVerdict(BaseModel):
    compliant: bool
    message: str


# --- Conversion ---


class ConversionJob(BaseModel):
    """Summary of a finished DWG -> DXF conversion."""

    job_id: str
    status: str
    download_url: str
    filename: str = ""


# --- Final Output ---


class ValidationReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    filename: str
    setback_compliance: ComplianceVerdict = Field(alias="setbackCompliance")
    rule: SetbackRule
    diagnostics: dict = Field(default_factory=dict)
