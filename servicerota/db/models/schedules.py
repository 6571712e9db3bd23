from sqlalchemy import Integer, String, Date, Time, Boolean, DateTime, ForeignKey, Enum as SQLEnum, Index, func
from datetime import date, datetime, time
from sqlalchemy.orm import Mapped, mapped_column
from enum import Enum
from typing import Optional
from servicerota.db.database import Base


class ScheduleStatus(str, Enum):
    SCHEDULED = "scheduled"


class CoverageStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    DENIED = "denied"


class Schedules(Base):
    __tablename__ = "schedules"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    employee_id: Mapped[int] = mapped_column(Integer, ForeignKey("employees.id"), nullable=False)
    zone_id: Mapped[int] = mapped_column(Integer, ForeignKey("restaurant_zones.id"), nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False)
    shift_date: Mapped[date] = mapped_column(Date, nullable=False)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)
    # the scheduler only ever writes "scheduled"; no-show handling writes its own values
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=ScheduleStatus.SCHEDULED.value)

    # coverage workflow, written by the SMS/voice handlers
    is_coverage: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    covered_for: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("employees.id"), nullable=True)
    coverage_status: Mapped[Optional[CoverageStatus]] = mapped_column(
        SQLEnum(CoverageStatus, name="coverage_status_enum", values_callable=lambda e: [m.value for m in e]),
        nullable=True,
    )
    no_show_reason: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        Index("ix_schedules_shift_date", "shift_date"),
        Index("ix_schedules_employee_date", "employee_id", "shift_date"),
    )
