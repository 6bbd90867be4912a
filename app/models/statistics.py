"""
Statistics model - daily site access counters
"""
from sqlalchemy import Column, Integer, Date

from app.core.database import Base


class Statistics(Base):
    """One row per day"""

    __tablename__ = "statistics"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False, unique=True, index=True)
    access_count = Column(Integer, nullable=False, default=0)
    total_access_date = Column(Integer, nullable=False, default=0)
    total_access_week = Column(Integer, nullable=False, default=0)
    total_access_month = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<Statistics(date={self.date}, access_count={self.access_count})>"
