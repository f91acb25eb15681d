"""Setback compliance checking for architectural site drawings."""

from .analyzer import validate_dwg_file, validate_dxf
from .models import ComplianceVerdict, Entity, SetbackRule, ValidationReport
from .setback import evaluate_setback

__all__ = [
    "validate_dwg_file",
    "validate_dxf",
    "evaluate_setback",
    "ComplianceVerdict",
    "Entity",
    "SetbackRule",
    "ValidationReport",
]
