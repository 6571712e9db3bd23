"""
Schedule analysis: totals per role/zone/employee and understaffing warnings.

The solver stays silent when a requirement can't be filled; this is where
those shortfalls are surfaced.
"""

from collections import Counter, defaultdict
from datetime import date
from typing import Optional

from .days import iter_days, to_local_noon
from .types import ScheduleMetrics, ShiftAssignment, StaffingGap, Weekday, Zone


def calculate_metrics(schedule: list[ShiftAssignment]) -> ScheduleMetrics:
    return ScheduleMetrics(
        total_shifts=len(schedule),
        shifts_per_role=dict(Counter(s.role for s in schedule)),
        shifts_per_zone=dict(Counter(s.zone_id for s in schedule)),
        shifts_per_employee=dict(Counter(s.employee_id for s in schedule)),
    )


def find_staffing_gaps(
    schedule: list[ShiftAssignment],
    zones: list[Zone],
    start_date: date,
    end_date: date,
) -> list[StaffingGap]:
    """Compare each day's requirements against what was actually assigned."""

    assigned = Counter(
        (s.zone_id, s.shift_date, s.role, s.start_time, s.end_time) for s in schedule
    )

    gaps = []
    for current in iter_days(start_date, end_date):
        midday = to_local_noon(current)
        day = Weekday.from_date(midday)
        date_string = midday.date().isoformat()

        for zone in zones:
            # identical requirements in one zone share the same assignments
            required: dict[tuple, int] = defaultdict(int)
            for req in zone.requirements:
                if req.day_of_week == day:
                    required[(req.role, req.shift_start, req.shift_end)] += req.required_count

            for (role, start, end), count in required.items():
                filled = assigned[(zone.id, date_string, role, start, end)]
                if filled < count:
                    gaps.append(StaffingGap(
                        zone_id=zone.id,
                        zone_name=zone.name,
                        shift_date=date_string,
                        role=role,
                        start_time=start,
                        end_time=end,
                        required=count,
                        assigned=filled,
                    ))
    return gaps


def analyze_schedule(
    schedule: list[ShiftAssignment],
    zones: Optional[list[Zone]] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> ScheduleMetrics:
    """
    Summarize a generated schedule.

    Staffing gaps need the zone requirements and the scheduled range; without
    them only the totals are filled in.
    """
    metrics = calculate_metrics(schedule)

    if zones is not None and start_date is not None and end_date is not None:
        metrics.staffing_gaps = find_staffing_gaps(schedule, zones, start_date, end_date)
        metrics.warnings = [
            f"{gap.zone_name} on {gap.shift_date}: {gap.assigned}/{gap.required} "
            f"{gap.role} for {gap.start_time}-{gap.end_time}"
            for gap in metrics.staffing_gaps
        ]

    return metrics
