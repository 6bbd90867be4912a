"""
Statistics endpoints - daily access counters
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from app.core.database import get_db
from app.core.security import get_current_admin
from app.schemas.statistics import StatisticsCreate, StatisticsUpdate, StatisticsResponse
from app.services.statistics_service import StatisticsService

router = APIRouter()


@router.post("/visit", response_model=StatisticsResponse)
async def record_visit(db: Session = Depends(get_db)):
    """Public hit counter for today's row."""
    return StatisticsService(db).record_visit()


@router.post("", response_model=StatisticsResponse, status_code=status.HTTP_201_CREATED)
async def create_statistics(
    payload: StatisticsCreate,
    db: Session = Depends(get_db),
    admin: dict = Depends(get_current_admin),
):
    return StatisticsService(db).create(payload.model_dump())


@router.get("", response_model=List[StatisticsResponse])
async def list_statistics(db: Session = Depends(get_db)):
    return StatisticsService(db).list()


@router.get("/{statistics_id}", response_model=StatisticsResponse)
async def get_statistics(statistics_id: str, db: Session = Depends(get_db)):
    return StatisticsService(db).get(statistics_id)


@router.put("/{statistics_id}", response_model=StatisticsResponse)
async def update_statistics(
    statistics_id: str,
    payload: StatisticsUpdate,
    db: Session = Depends(get_db),
    admin: dict = Depends(get_current_admin),
):
    return StatisticsService(db).update(statistics_id, payload.model_dump(exclude_unset=True))


@router.delete("/{statistics_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_statistics(
    statistics_id: str,
    db: Session = Depends(get_db),
    admin: dict = Depends(get_current_admin),
):
    StatisticsService(db).remove(statistics_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
