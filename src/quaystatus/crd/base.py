"""Base classes for CRD specifications and status conditions."""

from datetime import datetime, timezone
from enum import Enum
import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


def utcnow():
    return datetime.now(timezone.utc)


def _value(item):
    return item.value if isinstance(item, Enum) else item


class ConditionStatus(str, Enum):
    """Tri-state status of a Kubernetes condition."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


class CRDMetadata(BaseModel):
    """Standard Kubernetes metadata for CRDs."""

    name: str
    namespace: Optional[str] = None
    uid: str = ""
    labels: Dict[str, str] = Field(default_factory=dict)
    annotations: Dict[str, str] = Field(default_factory=dict)

    class Config:
        extra = "ignore"


class Condition(BaseModel):
    """Readiness of one component as stored in the custom resource status.

    Two conditions compare equal when type, status, reason and message match;
    timestamps are ignored so repeated evaluations of an unchanged cluster
    can be compared directly.
    """

    type: str
    status: ConditionStatus
    reason: str
    message: str = ""
    lastUpdateTime: Optional[datetime] = None
    lastTransitionTime: Optional[datetime] = None

    class Config:
        extra = "allow"

    @field_validator("lastUpdateTime", "lastTransitionTime")
    @classmethod
    def _assume_utc(cls, value):
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @classmethod
    def new(cls, type, status, reason, message):
        """Build a condition stamped with the current time."""
        return cls(
            type=_value(type),
            status=status,
            reason=_value(reason),
            message=message,
            lastUpdateTime=utcnow(),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Condition":
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)

    def _identity(self):
        return (self.type, self.status, self.reason, self.message)

    def __eq__(self, other):
        if not isinstance(other, Condition):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self):
        return hash(self._identity())

    @property
    def is_true(self) -> bool:
        return self.status == ConditionStatus.TRUE


def parse_conditions(raw_conditions, types=None):
    """Parse stored status conditions.

    Only entries whose type is in ``types`` (all entries when ``types`` is
    None) are parsed. The others, and entries that do not fit the Condition
    shape, are kept as the raw dicts they were stored as, so writing the list
    back does not lose them.
    """
    conditions = []
    for raw in raw_conditions or []:
        if not isinstance(raw, dict):
            conditions.append(raw)
            continue
        if types is not None and raw.get("type") not in types:
            conditions.append(dict(raw))
            continue
        try:
            conditions.append(Condition.from_dict(raw))
        except ValidationError as e:
            logger.debug(f"Keeping status condition {raw!r} as stored: {e}")
            conditions.append(dict(raw))
    return conditions


def condition_type(entry):
    """Type of a parsed or raw stored condition."""
    if isinstance(entry, Condition):
        return entry.type
    if isinstance(entry, dict):
        return entry.get("type")
    return None


def conditions_to_dicts(conditions):
    return [
        entry.to_dict() if isinstance(entry, Condition) else entry
        for entry in conditions
    ]


class CRDStatus(BaseModel):
    """Base class for all CRD status objects."""

    conditions: List[Union[Condition, Dict[str, Any]]] = Field(default_factory=list)
    observedGeneration: Optional[int] = None

    class Config:
        extra = "allow"


class CRDSpec(BaseModel):
    """Base class for all CRD spec objects."""

    class Config:
        extra = "forbid"
        validate_assignment = True
