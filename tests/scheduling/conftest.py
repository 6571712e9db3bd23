import pytest
from datetime import date, time, timedelta

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from servicerota.db.models import (
    Base,
    Users,
    Restaurants,
    Employees,
    EmployeeRoles,
    RestaurantZones,
    ZoneRolesNeeded,
)
from servicerota.services.scheduling.types import (
    ALL_DAYS,
    Employee,
    Requirement,
    ScheduleContext,
    Weekday,
    Zone,
)


def get_test_monday() -> date:
    # returns a fixed Monday for deterministic tests
    return date(2025, 1, 20)


def make_employee(id: int, name: str = "", roles=("server",), rest_days=(), days_per_week=5) -> Employee:
    rest = frozenset(rest_days)
    return Employee(
        id=id,
        name=name or f"Employee {id}",
        roles=frozenset(roles),
        rest_days=rest,
        normal_days=frozenset(d for d in ALL_DAYS if d not in rest),
        days_per_week=days_per_week,
    )


def make_requirement(day: Weekday, role: str = "server", count: int = 1,
                     start: str = "09:00", end: str = "17:00") -> Requirement:
    return Requirement(
        day_of_week=day, role=role, required_count=count,
        shift_start=start, shift_end=end, day_label=day.value,
    )


def make_context(employees, zones, start: date = None, end: date = None) -> ScheduleContext:
    start = start or get_test_monday()
    return ScheduleContext(
        restaurant_id=1,
        start_date=start,
        end_date=end or start,
        employees=list(employees),
        zones=list(zones),
    )


@pytest.fixture
def db_session():
    # fresh in-memory database per test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)
        engine.dispose()


def seed_restaurant(session) -> dict:
    """
    Owner (user 1) with one restaurant:
    - Alice: server, rests on Monday
    - Bob: server + bartender, rests on "sat"
    - Cara: chef, no rest days
    Zones: Patio (server Mon/Wed, one malformed row) and Bar (bartender Mon).
    """
    owner = Users(id=1, email="owner@example.com", firstname="Olive", surname="Owner")
    stranger = Users(id=2, email="stranger@example.com", firstname="Sam", surname="Stranger")
    session.add_all([owner, stranger])
    session.flush()

    restaurant = Restaurants(id=10, user_id=owner.id, name="Bistro")
    session.add(restaurant)
    session.flush()

    alice = Employees(id=100, restaurant_id=10, first_name="Alice", last_name="Smith",
                      rest_days=["Monday"], days_per_week=4)
    bob = Employees(id=101, restaurant_id=10, first_name="Bob", last_name="Jones",
                    rest_days=["sat"], days_per_week=5)
    cara = Employees(id=102, restaurant_id=10, first_name="Cara", last_name="Lee",
                     rest_days=None, days_per_week=None)
    session.add_all([alice, bob, cara])
    session.flush()

    session.add_all([
        EmployeeRoles(employee_id=100, role="Server"),
        EmployeeRoles(employee_id=101, role="server"),
        EmployeeRoles(employee_id=101, role="Bartender"),
        EmployeeRoles(employee_id=102, role="chef"),
    ])

    patio = RestaurantZones(id=20, restaurant_id=10, name="Patio")
    bar = RestaurantZones(id=21, restaurant_id=10, name="Bar")
    session.add_all([patio, bar])
    session.flush()

    session.add_all([
        ZoneRolesNeeded(zone_id=20, day_of_week="Monday", role="Server", required_count=2,
                        shift_start=time(9, 0), shift_end=time(17, 0)),
        ZoneRolesNeeded(zone_id=20, day_of_week="wed", role="server", required_count=1,
                        shift_start=time(11, 0), shift_end=time(15, 0)),
        ZoneRolesNeeded(zone_id=20, day_of_week="", role="server", required_count=3,
                        shift_start=time(9, 0), shift_end=time(17, 0)),
        ZoneRolesNeeded(zone_id=21, day_of_week="Mon", role="bartender", required_count=1,
                        shift_start=time(18, 0), shift_end=time(23, 0)),
        ZoneRolesNeeded(zone_id=21, day_of_week="Tuesday", role="bartender", required_count=0,
                        shift_start=time(18, 0), shift_end=time(23, 0)),
    ])
    session.commit()

    return {"user_id": 1, "other_user_id": 2, "restaurant_id": 10, "patio_id": 20, "bar_id": 21}


def week_of(monday: date) -> tuple[date, date]:
    return monday, monday + timedelta(days=6)
