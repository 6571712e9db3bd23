from pydantic import BaseModel, model_validator
from datetime import date
from typing import Dict, List, Optional
from servicerota.db.models.schedules import CoverageStatus


class ScheduleGenerateRequest(BaseModel):
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def check_range(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self


class ShiftAssignmentResponse(BaseModel):
    employee_id: int
    zone_id: int
    role: str
    shift_date: date
    start_time: str
    end_time: str
    status: str

    class Config:
        from_attributes = True


class StaffingGapResponse(BaseModel):
    zone_id: int
    zone_name: str
    shift_date: date
    role: str
    start_time: str
    end_time: str
    required: int
    assigned: int
    missing: int

    class Config:
        from_attributes = True


class ScheduleMetricsResponse(BaseModel):
    total_shifts: int
    shifts_per_role: Dict[str, int]
    shifts_per_zone: Dict[int, int]
    shifts_per_employee: Dict[int, int]
    staffing_gaps: List[StaffingGapResponse]
    warnings: List[str]

    class Config:
        from_attributes = True


class ScheduleGenerateResponse(BaseModel):
    success: bool
    schedule: List[ShiftAssignmentResponse]
    metrics: ScheduleMetricsResponse


class ScheduledShiftResponse(BaseModel):
    id: int
    employee_id: int
    employee_name: str
    zone_id: int
    zone_name: str
    role: str
    shift_date: date
    start_time: str
    end_time: str
    status: str
    is_coverage: bool
    coverage_status: Optional[CoverageStatus] = None


class ScheduleWeeksResponse(BaseModel):
    weeks: List[date]
