import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import StorageError
from ..models.event import Event, EventUser
from ..models.flight_schedule import FlightSchedule
from ..schemas.flight_schedule import FlightScheduleCreate

logger = logging.getLogger(__name__)


class FlightScheduleRepository:
    """Доступ к таблицам мероприятий и расписаний перелетов"""

    def __init__(self, db: Session):
        self.db = db

    def get_event(self, event_id: int) -> Optional[Event]:
        return self.db.get(Event, event_id)

    def event_exists(self, event_id: int) -> bool:
        return self.get_event(event_id) is not None

    def is_event_member(self, event_id: int, user_id: int) -> bool:
        q = select(EventUser.id).where(
            EventUser.event_id == event_id, EventUser.user_id == user_id
        )
        return self.db.execute(q).first() is not None

    def create_many(self, event_id: int, candidates: List[FlightScheduleCreate]) -> List[FlightSchedule]:
        """Вставляет все записи одной транзакцией: либо все, либо ни одной"""
        records = [
            FlightSchedule(
                event_id=event_id,
                first_name=c.first_name,
                last_name=c.last_name,
                flight_number=c.flight_number,
                arrival_time=c.arrival_time,
                property_name=c.property_name,
                vehicle_standby_arrival_time=c.vehicle_standby_arrival_time,
                departure_time=c.departure_time,
                vehicle_standby_departure_time=c.vehicle_standby_departure_time,
                status=c.status.value,
            )
            for c in candidates
        ]
        try:
            self.db.add_all(records)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Batch insert of {len(records)} flight schedules failed: {e}")
            raise StorageError(f"Failed to save flight schedules: {e}") from e

        for record in records:
            self.db.refresh(record)
        return records

    def list_by_event(self, event_id: int) -> List[FlightSchedule]:
        q = (
            select(FlightSchedule)
            .where(FlightSchedule.event_id == event_id)
            .order_by(FlightSchedule.created_at.desc(), FlightSchedule.flight_id.desc())
        )
        return list(self.db.execute(q).scalars().all())

    def get(self, flight_id: int) -> Optional[FlightSchedule]:
        return self.db.get(FlightSchedule, flight_id)

    def update(self, record: FlightSchedule, values: Dict[str, Any]) -> FlightSchedule:
        for key, value in values.items():
            setattr(record, key, value)
        self._commit("update", record.flight_id)
        self.db.refresh(record)
        return record

    def update_status(self, record: FlightSchedule, status: str) -> FlightSchedule:
        return self.update(record, {"status": status})

    def delete(self, record: FlightSchedule) -> None:
        flight_id = record.flight_id
        self.db.delete(record)
        self._commit("delete", flight_id)

    def _commit(self, action: str, flight_id: int) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to {action} flight schedule {flight_id}: {e}")
            raise StorageError(f"Failed to {action} flight schedule: {e}") from e
