from enum import Enum

from sqlalchemy import Column, String, Text, DateTime, Integer, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..core.database import Base


class FlightStatus(str, Enum):
    """Статусы перелета, значения совпадают с тем, что приходит по сети"""
    pending = "pending"
    arrived = "Arrived"
    delay = "Delay"
    no_show = "No show"
    re_scheduled = "Re scheduled"


ALLOWED_STATUSES = tuple(s.value for s in FlightStatus)


class FlightSchedule(Base):
    __tablename__ = "flight_schedules"

    flight_id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, ForeignKey("events.event_id"), nullable=False, index=True)

    # Пассажир. Текстовые поля без ограничения длины
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)

    # Маршрут
    flight_number = Column(Text, nullable=False, index=True)
    arrival_time = Column(DateTime, nullable=False)
    departure_time = Column(DateTime, nullable=False)

    # Логистика
    property_name = Column(Text, nullable=False)
    vehicle_standby_arrival_time = Column(Text, nullable=False, default="")
    vehicle_standby_departure_time = Column(Text, nullable=False, default="")

    status = Column(String(20), nullable=False, default=FlightStatus.pending.value)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    event = relationship("Event", back_populates="flight_schedules")
