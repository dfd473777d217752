"""CRD base models and registry."""

from .registry import CRDRegistry
from .base import Condition, ConditionStatus, CRDMetadata, CRDSpec, CRDStatus

__all__ = [
    "CRDRegistry",
    "Condition",
    "ConditionStatus",
    "CRDMetadata",
    "CRDSpec",
    "CRDStatus",
]
