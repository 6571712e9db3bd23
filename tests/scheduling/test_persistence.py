import pytest
from datetime import date, time

from sqlalchemy import select

from servicerota.db.models import Employees, Restaurants, Schedules
from servicerota.services.scheduling.generator import generate_schedule
from servicerota.services.scheduling.persistence import list_schedule, list_schedule_weeks, replace_schedule
from servicerota.services.scheduling.types import ShiftAssignment

from conftest import get_test_monday, seed_restaurant, week_of


def _all_rows(session):
    return session.execute(select(Schedules).order_by(Schedules.id)).scalars().all()


class TestReplaceSchedule:

    def test_inserts_generated_shifts(self, db_session):
        ids = seed_restaurant(db_session)
        start, end = week_of(get_test_monday())
        result = generate_schedule(db_session, ids["user_id"], start, end)

        inserted = replace_schedule(db_session, ids["restaurant_id"], start, end, result.schedule)

        rows = _all_rows(db_session)
        assert inserted == len(rows) == 3
        assert rows[0].shift_date == date(2025, 1, 20)
        assert rows[0].start_time == time(9, 0)
        assert rows[0].status == "scheduled"
        assert rows[0].is_coverage is False

    def test_regenerating_replaces_range(self, db_session):
        ids = seed_restaurant(db_session)
        start, end = week_of(get_test_monday())
        result = generate_schedule(db_session, ids["user_id"], start, end)

        replace_schedule(db_session, ids["restaurant_id"], start, end, result.schedule)
        replace_schedule(db_session, ids["restaurant_id"], start, end, result.schedule)

        assert len(_all_rows(db_session)) == 3

    def test_leaves_other_dates_and_restaurants(self, db_session):
        ids = seed_restaurant(db_session)
        db_session.add(Restaurants(id=11, user_id=ids["other_user_id"], name="Other"))
        db_session.add(Employees(id=200, restaurant_id=11, first_name="Zed", last_name=""))
        db_session.add_all([
            # same range, other restaurant
            Schedules(employee_id=200, zone_id=20, role="server", shift_date=date(2025, 1, 21),
                      start_time=time(9, 0), end_time=time(17, 0)),
            # our restaurant, outside the range
            Schedules(employee_id=100, zone_id=20, role="server", shift_date=date(2025, 1, 27),
                      start_time=time(9, 0), end_time=time(17, 0)),
            # our restaurant, inside the range
            Schedules(employee_id=100, zone_id=20, role="server", shift_date=date(2025, 1, 26),
                      start_time=time(9, 0), end_time=time(17, 0)),
        ])
        db_session.commit()

        start, end = week_of(get_test_monday())
        replace_schedule(db_session, ids["restaurant_id"], start, end, [])

        remaining = {(r.employee_id, r.shift_date) for r in _all_rows(db_session)}
        assert remaining == {(200, date(2025, 1, 21)), (100, date(2025, 1, 27))}

    def test_rolls_back_on_bad_row(self, db_session):
        ids = seed_restaurant(db_session)
        start, end = week_of(get_test_monday())
        db_session.add(Schedules(employee_id=100, zone_id=20, role="server", shift_date=date(2025, 1, 22),
                                 start_time=time(9, 0), end_time=time(17, 0)))
        db_session.commit()

        bad = ShiftAssignment(employee_id=100, zone_id=20, role="server", shift_date="2025-01-22",
                              start_time="9am", end_time="17:00")
        with pytest.raises(ValueError):
            replace_schedule(db_session, ids["restaurant_id"], start, end, [bad])

        # the delete was rolled back with the failed insert
        assert len(_all_rows(db_session)) == 1


class TestListSchedule:

    def test_lists_with_names_in_order(self, db_session):
        ids = seed_restaurant(db_session)
        start, end = week_of(get_test_monday())
        result = generate_schedule(db_session, ids["user_id"], start, end)
        replace_schedule(db_session, ids["restaurant_id"], start, end, result.schedule)

        rows = list_schedule(db_session, ids["restaurant_id"], start, end)

        assert [(r["employee_name"], r["zone_name"], r["start_time"]) for r in rows] == [
            ("Bob Jones", "Patio", "09:00"),
            ("Bob Jones", "Bar", "18:00"),
            ("Alice Smith", "Patio", "11:00"),
        ]
        assert rows[0]["shift_date"] == date(2025, 1, 20)

    def test_other_restaurant_sees_nothing(self, db_session):
        ids = seed_restaurant(db_session)
        start, end = week_of(get_test_monday())
        result = generate_schedule(db_session, ids["user_id"], start, end)
        replace_schedule(db_session, ids["restaurant_id"], start, end, result.schedule)

        assert list_schedule(db_session, 999, start, end) == []


class TestListScheduleWeeks:

    def _shift_on(self, employee_id, day):
        return Schedules(employee_id=employee_id, zone_id=20, role="server", shift_date=day,
                         start_time=time(9, 0), end_time=time(17, 0))

    def test_folds_dates_to_mondays(self, db_session):
        ids = seed_restaurant(db_session)
        db_session.add_all([
            self._shift_on(100, date(2025, 2, 2)),   # Sunday -> 2025-01-27
            self._shift_on(101, date(2025, 1, 20)),  # Monday
            self._shift_on(100, date(2025, 1, 22)),
            self._shift_on(101, date(2025, 1, 28)),
        ])
        db_session.commit()

        assert list_schedule_weeks(db_session, ids["restaurant_id"]) == [
            date(2025, 1, 20), date(2025, 1, 27),
        ]

    def test_scoped_to_restaurant(self, db_session):
        ids = seed_restaurant(db_session)
        db_session.add(Restaurants(id=11, user_id=ids["other_user_id"], name="Other"))
        db_session.add(Employees(id=200, restaurant_id=11, first_name="Zed", last_name=""))
        db_session.add_all([
            self._shift_on(200, date(2025, 3, 5)),
            self._shift_on(100, date(2025, 1, 21)),
        ])
        db_session.commit()

        assert list_schedule_weeks(db_session, ids["restaurant_id"]) == [date(2025, 1, 20)]
        assert list_schedule_weeks(db_session, 11) == [date(2025, 3, 3)]

    def test_nothing_saved(self, db_session):
        ids = seed_restaurant(db_session)
        assert list_schedule_weeks(db_session, ids["restaurant_id"]) == []
