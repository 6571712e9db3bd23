"""
Data loader for scheduling service.
Fetches all relevant data from the database and converts to internal types.

Each loader runs in two steps: a query that returns one plain row per
employee/zone with its multi-valued fields aggregated into lists, then a
pure builder that turns the row into the engine's types. The builders are
what the tests exercise without a database.
"""

import math
from collections import defaultdict
from typing import Any, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from servicerota.db.models.restaurants import Restaurants
from servicerota.db.models.employees import Employees
from servicerota.db.models.employee_roles import EmployeeRoles
from servicerota.db.models.restaurant_zones import RestaurantZones
from servicerota.db.models.zone_roles_needed import ZoneRolesNeeded

from .days import format_time, to_weekday
from .types import ALL_DAYS, Employee, Requirement, Weekday, Zone


def resolve_restaurant_id(db: Session, user_id: int) -> Optional[int]:
    """First restaurant owned by the user, or None."""
    stmt = (
        select(Restaurants.id)
        .where(Restaurants.user_id == user_id)
        .order_by(Restaurants.id)
        .limit(1)
    )
    return db.execute(stmt).scalars().first()


# ==================== Employees ====================

def fetch_employee_rows(db: Session, restaurant_id: int) -> list[dict[str, Any]]:
    """One row per employee with roles aggregated into a list."""

    stmt = select(Employees).where(Employees.restaurant_id == restaurant_id).order_by(Employees.id)
    employee_rows = db.execute(stmt).scalars().all()
    if not employee_rows:
        return []

    role_stmt = (
        select(EmployeeRoles)
        .where(EmployeeRoles.employee_id.in_([e.id for e in employee_rows]))
        .order_by(EmployeeRoles.id)
    )
    roles_by_employee: dict[int, list[Optional[str]]] = defaultdict(list)
    for r in db.execute(role_stmt).scalars().all():
        if r.role not in roles_by_employee[r.employee_id]:
            roles_by_employee[r.employee_id].append(r.role)

    return [
        {
            "id": emp.id,
            "name": f"{emp.first_name} {emp.last_name}".strip(),
            "roles": roles_by_employee.get(emp.id, []),
            "rest_days": emp.rest_days or [],
            "days_per_week": emp.days_per_week,
        }
        for emp in employee_rows
    ]


def _cover_days(row: Mapping[str, Any]) -> frozenset[Weekday]:
    # Nothing in the employee record feeds cover days yet, so the second
    # assignment pass never finds anyone. Populate from the row here once a
    # source exists.
    return frozenset()


def build_employee(row: Mapping[str, Any]) -> Employee:
    rest_days = frozenset(
        day for day in (to_weekday(d) for d in (row.get("rest_days") or [])) if day is not None
    )
    roles = frozenset(r.lower() for r in (row.get("roles") or []) if r)

    return Employee(
        id=row["id"],
        name=row.get("name") or "",
        roles=roles,
        rest_days=rest_days,
        normal_days=frozenset(d for d in ALL_DAYS if d not in rest_days),
        cover_days=_cover_days(row),
        days_per_week=row.get("days_per_week"),
    )


def load_employees(db: Session, restaurant_id: int) -> list[Employee]:
    """Load a restaurant's employees with roles, rest days and derived working days."""
    return [build_employee(row) for row in fetch_employee_rows(db, restaurant_id)]


# ==================== Zones ====================

def fetch_zone_rows(db: Session, restaurant_id: int) -> list[dict[str, Any]]:
    """One row per zone with its staffing requirements aggregated into a list."""

    stmt = select(RestaurantZones).where(RestaurantZones.restaurant_id == restaurant_id).order_by(RestaurantZones.id)
    zone_rows = db.execute(stmt).scalars().all()
    if not zone_rows:
        return []

    req_stmt = (
        select(ZoneRolesNeeded)
        .where(ZoneRolesNeeded.zone_id.in_([z.id for z in zone_rows]))
        .order_by(ZoneRolesNeeded.id)
    )
    reqs_by_zone: dict[int, list[dict[str, Any]]] = defaultdict(list)
    for r in db.execute(req_stmt).scalars().all():
        reqs_by_zone[r.zone_id].append({
            "day_of_week": r.day_of_week,
            "role": r.role,
            "required_count": r.required_count,
            "shift_start": r.shift_start,
            "shift_end": r.shift_end,
        })

    return [
        {"id": z.id, "name": z.name, "requirements": reqs_by_zone.get(z.id, [])}
        for z in zone_rows
    ]


def _headcount(value: Any) -> Optional[int]:
    """Whole number of slots for a positive numeric count; None for anything else."""
    try:
        count = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(count) or count <= 0:
        return None
    # 0.5 still asks for one person
    return math.ceil(count)


def _is_usable_requirement(raw: Mapping[str, Any]) -> bool:
    if not raw.get("day_of_week"):
        return False
    return _headcount(raw.get("required_count")) is not None


def build_zone(row: Mapping[str, Any]) -> Zone:
    requirements = tuple(
        Requirement(
            day_of_week=to_weekday(raw["day_of_week"]),
            role=raw.get("role") or "",
            required_count=_headcount(raw["required_count"]),
            shift_start=format_time(raw.get("shift_start")),
            shift_end=format_time(raw.get("shift_end")),
            day_label=raw["day_of_week"],
        )
        for raw in (row.get("requirements") or [])
        if raw and _is_usable_requirement(raw)
    )
    return Zone(id=row["id"], name=row.get("name") or "", requirements=requirements)


def load_zones(db: Session, restaurant_id: int) -> list[Zone]:
    """Load a restaurant's zones, dropping requirement rows with no day or no headcount."""
    return [build_zone(row) for row in fetch_zone_rows(db, restaurant_id)]
