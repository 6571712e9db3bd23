"""
Saving and reading generated schedules.
"""

import logging
from datetime import date, time, timedelta
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from servicerota.db.models.employees import Employees
from servicerota.db.models.restaurant_zones import RestaurantZones
from servicerota.db.models.schedules import Schedules

from .days import as_date, format_time
from .types import ShiftAssignment


logger = logging.getLogger(__name__)


def _restaurant_employee_ids(restaurant_id: int):
    return select(Employees.id).where(Employees.restaurant_id == restaurant_id)


def replace_schedule(
    db: Session,
    restaurant_id: int,
    start_date: date,
    end_date: date,
    schedule: list[ShiftAssignment],
) -> int:
    """
    Replace every shift in [start_date, end_date] for the restaurant's employees.

    Delete and insert happen in one transaction; on failure it is rolled back
    and the error re-raised. Returns the number of shifts inserted.
    """
    start, end = as_date(start_date), as_date(end_date)

    try:
        result = db.execute(
            delete(Schedules)
            .where(
                Schedules.shift_date.between(start, end),
                Schedules.employee_id.in_(_restaurant_employee_ids(restaurant_id)),
            )
            .execution_options(synchronize_session=False)
        )
        db.add_all([
            Schedules(
                employee_id=shift.employee_id,
                zone_id=shift.zone_id,
                role=shift.role,
                shift_date=date.fromisoformat(shift.shift_date),
                start_time=time.fromisoformat(shift.start_time),
                end_time=time.fromisoformat(shift.end_time),
                status=shift.status,
            )
            for shift in schedule
        ])
        db.commit()
    except Exception:
        db.rollback()
        logger.error(f"Saving schedule for restaurant {restaurant_id} ({start} to {end}) failed, rolled back")
        raise

    logger.info(
        f"Replaced schedule for restaurant {restaurant_id} ({start} to {end}): "
        f"removed {result.rowcount}, inserted {len(schedule)}"
    )
    return len(schedule)


def list_schedule(
    db: Session,
    restaurant_id: int,
    start_date: date,
    end_date: date,
) -> list[dict[str, Any]]:
    """Saved shifts in the range with employee and zone names, by date then start time."""

    stmt = (
        select(Schedules, Employees.first_name, Employees.last_name, RestaurantZones.name)
        .join(Employees, Schedules.employee_id == Employees.id)
        .join(RestaurantZones, Schedules.zone_id == RestaurantZones.id)
        .where(
            Employees.restaurant_id == restaurant_id,
            Schedules.shift_date.between(as_date(start_date), as_date(end_date)),
        )
        .order_by(Schedules.shift_date, Schedules.start_time, Schedules.id)
    )

    rows = []
    for shift, first_name, last_name, zone_name in db.execute(stmt).all():
        rows.append({
            "id": shift.id,
            "employee_id": shift.employee_id,
            "employee_name": f"{first_name} {last_name}".strip(),
            "zone_id": shift.zone_id,
            "zone_name": zone_name,
            "role": shift.role,
            "shift_date": shift.shift_date,
            "start_time": format_time(shift.start_time),
            "end_time": format_time(shift.end_time),
            "status": shift.status,
            "is_coverage": shift.is_coverage,
            "coverage_status": shift.coverage_status,
        })
    return rows


def list_schedule_weeks(db: Session, restaurant_id: int) -> list[date]:
    """Mondays of every week holding at least one saved shift for the restaurant, ascending."""

    stmt = (
        select(Schedules.shift_date)
        .where(
            Schedules.shift_date.is_not(None),
            Schedules.employee_id.in_(_restaurant_employee_ids(restaurant_id)),
        )
        .distinct()
    )
    # fold each date back to its Monday
    weeks = {d - timedelta(days=d.weekday()) for d in db.execute(stmt).scalars().all()}
    return sorted(weeks)
