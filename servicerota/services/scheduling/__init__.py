"""
Scheduling service package.

Usage:
    from datetime import date
    from servicerota.services.scheduling import generate_schedule

    # Simple usage - resolve restaurant, load data and solve in one call
    result = generate_schedule(db, user_id=1, start_date=date(2025, 1, 20), end_date=date(2025, 1, 26))

    # Or build the context yourself for inspection/testing
    from servicerota.services.scheduling import ScheduleContext, generate_schedule_from_context

    context = ScheduleContext(restaurant_id=1, start_date=..., end_date=..., employees=[...], zones=[...])
    result = generate_schedule_from_context(context)
"""

from .types import (
    Weekday,
    Employee,
    Requirement,
    Zone,
    ShiftAssignment,
    ScheduleContext,
    ScheduleResult,
    ScheduleMetrics,
    StaffingGap,
)
from .days import normalize_day, times_overlap, to_local_noon
from .errors import SchedulingError, RestaurantNotFoundError
from .data_loader import load_employees, load_zones, resolve_restaurant_id
from .generator import (
    generate_schedule,
    generate_schedule_from_context,
    generate_schedule_with_context,
    load_schedule_context,
    require_restaurant_id,
)
from .solver import solve_schedule
from .analyzer import analyze_schedule
from .persistence import replace_schedule, list_schedule, list_schedule_weeks

__all__ = [
    # Types
    "Weekday",
    "Employee",
    "Requirement",
    "Zone",
    "ShiftAssignment",
    "ScheduleContext",
    "ScheduleResult",
    "ScheduleMetrics",
    "StaffingGap",
    # Errors
    "SchedulingError",
    "RestaurantNotFoundError",
    # Main entry points
    "generate_schedule",
    "generate_schedule_from_context",
    "generate_schedule_with_context",
    "analyze_schedule",
    "replace_schedule",
    "list_schedule",
    "list_schedule_weeks",
    # Lower-level functions
    "normalize_day",
    "times_overlap",
    "to_local_noon",
    "resolve_restaurant_id",
    "require_restaurant_id",
    "load_employees",
    "load_zones",
    "load_schedule_context",
    "solve_schedule",
]
