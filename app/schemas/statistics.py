"""
Pydantic schemas for Statistics API
"""
from pydantic import BaseModel, Field
from typing import Optional
import datetime as dt


class StatisticsCreate(BaseModel):
    date: dt.date
    access_count: int = Field(0, ge=0)
    total_access_date: int = Field(0, ge=0)
    total_access_week: int = Field(0, ge=0)
    total_access_month: int = Field(0, ge=0)


class StatisticsUpdate(BaseModel):
    date: Optional[dt.date] = None
    access_count: Optional[int] = Field(None, ge=0)
    total_access_date: Optional[int] = Field(None, ge=0)
    total_access_week: Optional[int] = Field(None, ge=0)
    total_access_month: Optional[int] = Field(None, ge=0)


class StatisticsResponse(BaseModel):
    id: int
    date: dt.date
    access_count: int
    total_access_date: int
    total_access_week: int
    total_access_month: int

    class Config:
        from_attributes = True
