"""
Internal data types for scheduling logic.
decoupled from SQLAlchemy models for cleaner logic.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class Weekday(str, Enum):
    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"
    SUN = "Sun"

    @classmethod
    def from_date(cls, value: date) -> "Weekday":
        return ALL_DAYS[value.weekday()]


# Monday first, matching date.weekday()
ALL_DAYS: tuple[Weekday, ...] = tuple(Weekday)

SCHEDULED = "scheduled"


@dataclass(frozen=True)
class Employee:
    id: int
    name: str
    roles: frozenset[str]  # lowercase
    rest_days: frozenset[Weekday] = frozenset()
    normal_days: frozenset[Weekday] = frozenset(ALL_DAYS)
    cover_days: frozenset[Weekday] = frozenset()  # fallback-only days, see data_loader
    days_per_week: Optional[int] = None  # carried through, not enforced


@dataclass(frozen=True)
class Requirement:
    """Staffing need for one zone on one weekday."""
    day_of_week: Optional[Weekday]  # None = unrecognized source day, never matches
    role: str
    required_count: int
    shift_start: str  # "HH:MM"
    shift_end: str
    day_label: str = ""  # day string as stored


@dataclass(frozen=True)
class Zone:
    id: int
    name: str
    requirements: tuple[Requirement, ...] = ()


@dataclass
class ShiftAssignment:
    """A proposed shift produced by the engine."""
    employee_id: int
    zone_id: int
    role: str
    shift_date: str  # "YYYY-MM-DD"
    start_time: str
    end_time: str
    status: str = SCHEDULED

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "zone_id": self.zone_id,
            "role": self.role,
            "shift_date": self.shift_date,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "status": self.status,
        }


@dataclass
class ScheduleContext:
    """All data needed to generate a schedule for one restaurant/date range."""
    restaurant_id: int
    start_date: date
    end_date: date  # inclusive
    employees: list[Employee]
    zones: list[Zone]


@dataclass
class ScheduleResult:
    """Output of the scheduling algorithm."""
    schedule: list[ShiftAssignment] = field(default_factory=list)


@dataclass
class StaffingGap:
    """A requirement on a specific date that ended up short."""
    zone_id: int
    zone_name: str
    shift_date: str
    role: str
    start_time: str
    end_time: str
    required: int
    assigned: int

    @property
    def missing(self) -> int:
        return self.required - self.assigned


@dataclass
class ScheduleMetrics:
    total_shifts: int = 0
    shifts_per_role: dict[str, int] = field(default_factory=dict)
    shifts_per_zone: dict[int, int] = field(default_factory=dict)
    shifts_per_employee: dict[int, int] = field(default_factory=dict)
    staffing_gaps: list[StaffingGap] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
