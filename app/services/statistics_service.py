"""
Statistics Service - daily access counters
"""
import logging
from datetime import date, timedelta
from typing import Optional, Dict, Any, List
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import Conflict, NotFound
from app.core.monitoring import service_operation
from app.models.statistics import Statistics
from app.utils.params import parse_positive_int

logger = logging.getLogger(__name__)


class StatisticsService:

    FIELDS = ("date", "access_count", "total_access_date", "total_access_week", "total_access_month")

    def __init__(self, db: Session):
        self.db = db
        self.entity_name = "statistics"

    @service_operation
    def create(self, data: Dict[str, Any]) -> Statistics:
        row = Statistics(**{f: data[f] for f in self.FIELDS if data.get(f) is not None})
        self.db.add(row)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise Conflict("STATISTICS_EXISTS", date=str(data.get("date")))
        self.db.refresh(row)
        return row

    @service_operation
    def list(self) -> List[Statistics]:
        return self.db.query(Statistics).order_by(Statistics.date.desc()).all()

    @service_operation
    def get(self, statistics_id) -> Statistics:
        statistics_id = parse_positive_int(statistics_id, "id")
        row = self.db.query(Statistics).filter(Statistics.id == statistics_id).first()
        if not row:
            raise NotFound("ENTITY_NOT_FOUND", entity="Statistics")
        return row

    @service_operation
    def update(self, statistics_id, data: Dict[str, Any]) -> Statistics:
        row = self.get(statistics_id)
        for field in self.FIELDS:
            if data.get(field) is not None:
                setattr(row, field, data[field])
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise Conflict("STATISTICS_EXISTS", date=str(data.get("date")))
        self.db.refresh(row)
        return row

    @service_operation
    def remove(self, statistics_id) -> None:
        row = self.get(statistics_id)
        self.db.delete(row)
        self.db.commit()

    def _get_by_date(self, day: date) -> Optional[Statistics]:
        return self.db.query(Statistics).filter(Statistics.date == day).first()

    def _sum_between(self, start: date, end: date) -> int:
        total = self.db.query(func.coalesce(func.sum(Statistics.access_count), 0)).filter(
            Statistics.date >= start,
            Statistics.date <= end,
        ).scalar()
        return int(total or 0)

    @service_operation
    def record_visit(self, today: Optional[date] = None) -> Statistics:
        """
        Count one site access for ``today`` and refresh the day, week and
        month totals of that day's row.
        """
        today = today or date.today()

        row = self._get_by_date(today)
        if not row:
            row = Statistics(date=today, access_count=0)
            self.db.add(row)
            try:
                self.db.flush()
            except IntegrityError:
                # Another request created today's row first
                self.db.rollback()
                row = self._get_by_date(today)

        row.access_count = (row.access_count or 0) + 1
        self.db.flush()

        week_start = today - timedelta(days=today.weekday())
        month_start = today.replace(day=1)
        row.total_access_date = row.access_count
        row.total_access_week = self._sum_between(week_start, today)
        row.total_access_month = self._sum_between(month_start, today)

        self.db.commit()
        self.db.refresh(row)
        return row
