"""
Records for the roster, the transaction log and the season window.

The dictionaries produced by to_dict() are the persisted JSON shape.
"""
import math
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional


class EmploymentType(str, Enum):
    FULL_TIME = "Full-time"
    SUMMER = "Summer"


class TransactionType(str, Enum):
    ISSUE = "issue"
    LOSS = "loss"


class Activity(str, Enum):
    """Issue activities. Add members here and to LeaderboardConfig.scored_activities."""

    INSTALL = "Install"


class LossReason(str, Enum):
    STOLEN = "Stolen"
    DAMAGED = "Damaged"
    MISPLACED = "Misplaced"
    EXPIRED_OBSOLETE = "Expired/Obsolete"
    INSTALLER_ERROR = "Installer Error"
    OTHER = "Other"


INSTALLER_ROLE = "Installer"
NO_REASON = "-"
UNKNOWN_REGION = "Unknown"


def as_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _to_int(value) -> int:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    return int(number) if math.isfinite(number) else 0


def _to_float(value) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


@dataclass(frozen=True)
class Employee:
    id: str
    name: str
    role: str = INSTALLER_ROLE
    employment_type: str = EmploymentType.FULL_TIME.value
    team: str = ""
    region: str = ""

    @property
    def is_installer(self) -> bool:
        return self.role.lower() == INSTALLER_ROLE.lower()

    @classmethod
    def from_dict(cls, data: dict) -> "Employee":
        return cls(
            id=as_text(data.get("id")),
            name=as_text(data.get("name")),
            role=as_text(data.get("role")),
            employment_type=as_text(data.get("empType")),
            team=as_text(data.get("team")),
            region=as_text(data.get("region")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "role": self.role,
            "empType": self.employment_type,
            "team": self.team,
            "region": self.region,
        }

    def to_export_row(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.employment_type,
            "team": self.team,
            "region": self.region,
        }


@dataclass(frozen=True)
class Transaction:
    employee_id: str
    type: str
    activity: str = ""
    quantity: int = 0
    timestamp: str = ""
    loss_value: Optional[float] = None
    loss_reason: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        loss_value = data.get("lossValue")
        loss_reason = data.get("lossReason")
        return cls(
            employee_id=as_text(data.get("employeeId")),
            type=as_text(data.get("type")),
            activity=as_text(data.get("activity")),
            quantity=_to_int(data.get("qty", data.get("quantity"))),
            timestamp=as_text(data.get("timestamp")),
            loss_value=None if loss_value is None else _to_float(loss_value),
            loss_reason=None if loss_reason in (None, "") else as_text(loss_reason),
        )

    def to_dict(self) -> dict:
        data = {
            "employeeId": self.employee_id,
            "type": as_text(self.type),
            "activity": as_text(self.activity),
            "qty": self.quantity,
            "timestamp": self.timestamp,
        }
        if self.loss_value is not None:
            data["lossValue"] = self.loss_value
        if self.loss_reason is not None:
            data["lossReason"] = as_text(self.loss_reason)
        return data


@dataclass(frozen=True)
class Season:
    """Inclusive date window; both bounds are whole calendar days."""

    start: date
    end: date

    @classmethod
    def for_year(cls, year: int) -> "Season":
        return cls(start=date(year, 6, 1), end=date(year, 8, 31))

    @classmethod
    def from_dict(cls, data: dict) -> "Season":
        return cls(
            start=date.fromisoformat(str(data["start"])),
            end=date.fromisoformat(str(data["end"])),
        )

    def to_dict(self) -> dict:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}


@dataclass(frozen=True)
class PerformanceRecord:
    employee: Employee
    installs: int = 0
    losses: int = 0
    loss_value: float = 0.0
    loss_reason: str = NO_REASON
    score: int = 1
    progress_percent: int = 10


@dataclass
class RegionRollup:
    region: str
    installs: int = 0
    losses: int = 0
    loss_value: float = 0.0
    score: int = 0


@dataclass
class Leaderboard:
    per_employee: List[PerformanceRecord] = field(default_factory=list)
    regions: List[RegionRollup] = field(default_factory=list)
