"""
Greedy shift assignment.

Strategy:
1. Walk the date range one calendar day at a time
2. For each zone, take the requirements that fall on that weekday
3. Fill each requirement from the normal-day pool, least-loaded employees first
4. Top up any remaining slots from the cover-day pool the same way

Every decision reads the shifts assigned so far (for overlap and load), so
days, zones and requirements are processed strictly in order.
"""

from collections import defaultdict
from datetime import date
from typing import Callable

from .days import iter_days, times_overlap, to_local_noon
from .types import (
    Employee,
    Requirement,
    ScheduleContext,
    ScheduleResult,
    ShiftAssignment,
    Weekday,
    Zone,
)


DayPool = Callable[[Employee], frozenset[Weekday]]

# Pass order: regular working days first, then fallback-only days
NORMAL_POOL: DayPool = lambda emp: emp.normal_days
COVER_POOL: DayPool = lambda emp: emp.cover_days
PASSES: tuple[DayPool, ...] = (NORMAL_POOL, COVER_POOL)


class ScheduleSolver:
    """
    Load-balancing greedy solver for zone staffing requirements.
    """

    def __init__(self, context: ScheduleContext):
        self.context = context
        self.schedule: list[ShiftAssignment] = []
        self.assignment_counts: dict[int, int] = defaultdict(int)
        # (employee_id, shift_date) -> [(start, end), ...]
        self._booked: dict[tuple[int, str], list[tuple[str, str]]] = defaultdict(list)

    def solve(self) -> ScheduleResult:
        for current in iter_days(self.context.start_date, self.context.end_date):
            self._schedule_day(current)
        return ScheduleResult(schedule=self.schedule)

    def _schedule_day(self, current: date):
        midday = to_local_noon(current)
        day = Weekday.from_date(midday)
        date_string = midday.date().isoformat()

        for zone in self.context.zones:
            for req in zone.requirements:
                if req.day_of_week != day:
                    continue
                self._fill_requirement(zone, req, day, date_string)

    def _fill_requirement(self, zone: Zone, req: Requirement, day: Weekday, date_string: str):
        """Assign up to req.required_count employees, one pass per day pool."""

        slots_remaining = req.required_count
        for pool in PASSES:
            if slots_remaining <= 0:
                break
            candidates = self._candidates(req, day, date_string, pool)
            for emp in candidates[:slots_remaining]:
                self._assign(emp, zone, req, date_string)
                slots_remaining -= 1

    def _candidates(
        self,
        req: Requirement,
        day: Weekday,
        date_string: str,
        pool: DayPool,
    ) -> list[Employee]:
        """Eligible employees for a requirement, least assigned first (stable)."""

        role = req.role.lower()
        eligible = [
            emp for emp in self.context.employees
            if role in emp.roles
            and day not in emp.rest_days
            and day in pool(emp)
            and not self._is_booked(emp.id, date_string, req.shift_start, req.shift_end)
        ]
        # counts are read before any of this requirement's assignments land
        return sorted(eligible, key=lambda emp: self.assignment_counts[emp.id])

    def _is_booked(self, employee_id: int, date_string: str, start: str, end: str) -> bool:
        return any(
            times_overlap(booked_start, booked_end, start, end)
            for booked_start, booked_end in self._booked[(employee_id, date_string)]
        )

    def _assign(self, emp: Employee, zone: Zone, req: Requirement, date_string: str):
        self.schedule.append(ShiftAssignment(
            employee_id=emp.id,
            zone_id=zone.id,
            role=req.role,
            shift_date=date_string,
            start_time=req.shift_start,
            end_time=req.shift_end,
        ))
        self.assignment_counts[emp.id] += 1
        self._booked[(emp.id, date_string)].append((req.shift_start, req.shift_end))


def solve_schedule(context: ScheduleContext) -> ScheduleResult:
    """
    Main entry point for schedule generation from pre-loaded data.

    Args:
        context: ScheduleContext with employees and zones

    Returns:
        ScheduleResult with the generated shift assignments
    """
    solver = ScheduleSolver(context)
    return solver.solve()
