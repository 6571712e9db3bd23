"""
Schedule generator - main orchestration layer.

This module provides the high-level API for generating schedules,
combining data loading and solving into a single flow.
"""

import logging
from datetime import date

from sqlalchemy.orm import Session

from .data_loader import load_employees, load_zones, resolve_restaurant_id
from .days import as_date
from .errors import RestaurantNotFoundError
from .solver import solve_schedule
from .types import ScheduleContext, ScheduleResult


logger = logging.getLogger(__name__)


def load_schedule_context(
    db: Session,
    restaurant_id: int,
    start_date: date,
    end_date: date,
) -> ScheduleContext:
    """
    Load everything the solver needs for a restaurant/date range.

    Roster and zone loads share nothing; they run back to back because a
    Session must not be used from two threads at once.
    """
    employees = load_employees(db, restaurant_id)
    zones = load_zones(db, restaurant_id)

    return ScheduleContext(
        restaurant_id=restaurant_id,
        start_date=as_date(start_date),
        end_date=as_date(end_date),
        employees=employees,
        zones=zones,
    )


def require_restaurant_id(db: Session, user_id: int) -> int:
    """Restaurant owned by the user; raises RestaurantNotFoundError if none."""
    restaurant_id = resolve_restaurant_id(db, user_id)
    if restaurant_id is None:
        raise RestaurantNotFoundError(user_id)
    return restaurant_id


def generate_schedule_with_context(
    db: Session,
    user_id: int,
    start_date: date,
    end_date: date,
) -> tuple[ScheduleContext, ScheduleResult]:
    """
    Same as generate_schedule, also returning the context the solver ran on.

    Callers that analyze the result need the loaded zones to compare against.
    """
    restaurant_id = require_restaurant_id(db, user_id)

    context = load_schedule_context(db, restaurant_id, start_date, end_date)
    result = solve_schedule(context)

    logger.debug(
        f"Generated {len(result.schedule)} shifts for restaurant {restaurant_id} "
        f"({context.start_date} to {context.end_date}, "
        f"{len(context.employees)} employees, {len(context.zones)} zones)"
    )
    return context, result


def generate_schedule(
    db: Session,
    user_id: int,
    start_date: date,
    end_date: date,
) -> ScheduleResult:
    """
    Generate shift assignments for the user's restaurant over a date range.

    main entry point for schedule generation. This function:
    1. Resolves the restaurant owned by the user
    2. Loads employees and zone requirements from the database
    3. Runs the greedy solver day by day
    4. Returns the result with generated assignments

    Nothing is persisted here. Callers saving the result must clear the
    range first (see persistence.replace_schedule), since the solver assumes
    no prior assignments exist in it.

    Args:
        db: Database session
        user_id: Owner of the restaurant to schedule
        start_date: First day of the range
        end_date: Last day of the range (inclusive)

    Returns:
        ScheduleResult whose schedule may be short of the requested headcount
        where not enough employees were eligible

    Raises:
        RestaurantNotFoundError: If the user owns no restaurant
    """
    _, result = generate_schedule_with_context(db, user_id, start_date, end_date)
    return result


def generate_schedule_from_context(context: ScheduleContext) -> ScheduleResult:
    """
    Generate a schedule from a pre-loaded context.

    Useful for testing or when you want to manipulate the context
    before solving.
    """
    return solve_schedule(context)
