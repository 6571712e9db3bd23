import logging
from datetime import date
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from servicerota.api.deps import get_db, get_current_user
from servicerota.db.models.users import Users
from servicerota.schemas.schedules import (
    ScheduleGenerateRequest,
    ScheduleGenerateResponse,
    ScheduleMetricsResponse,
    ScheduledShiftResponse,
    ScheduleWeeksResponse,
)
from servicerota.services.scheduling import (
    RestaurantNotFoundError,
    analyze_schedule,
    generate_schedule_with_context,
    list_schedule,
    list_schedule_weeks,
    replace_schedule,
    require_restaurant_id,
)

router = APIRouter(prefix="/schedules", tags=["schedules"])

logger = logging.getLogger(__name__)


def _restaurant_for(db: Session, user: Users) -> int:
    try:
        return require_restaurant_id(db, user.id)
    except RestaurantNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/generate", response_model=ScheduleGenerateResponse)
def generate(
    payload: ScheduleGenerateRequest,
    db: Session = Depends(get_db),
    current_user: Users = Depends(get_current_user),
):
    try:
        context, result = generate_schedule_with_context(
            db, current_user.id, payload.start_date, payload.end_date
        )
    except RestaurantNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    metrics = analyze_schedule(result.schedule, context.zones, context.start_date, context.end_date)

    if metrics.warnings:
        logger.info(f"Restaurant {context.restaurant_id}: {len(metrics.warnings)} understaffed requirements")

    replace_schedule(db, context.restaurant_id, payload.start_date, payload.end_date, result.schedule)

    return ScheduleGenerateResponse(
        success=True,
        schedule=[shift.to_dict() for shift in result.schedule],
        metrics=ScheduleMetricsResponse.model_validate(metrics, from_attributes=True),
    )


@router.get("", response_model=List[ScheduledShiftResponse])
def list_schedules(
    start_date: date,
    end_date: date,
    db: Session = Depends(get_db),
    current_user: Users = Depends(get_current_user),
):
    if end_date < start_date:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="end_date must be on or after start_date")

    restaurant_id = _restaurant_for(db, current_user)
    return list_schedule(db, restaurant_id, start_date, end_date)


@router.get("/weeks", response_model=ScheduleWeeksResponse)
def list_weeks(
    db: Session = Depends(get_db),
    current_user: Users = Depends(get_current_user),
):
    restaurant_id = _restaurant_for(db, current_user)
    return ScheduleWeeksResponse(weeks=list_schedule_weeks(db, restaurant_id))
