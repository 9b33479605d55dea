from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from ..core.exceptions import EventNotFoundError, FlightNotFoundError
from ..models.flight_schedule import FlightSchedule
from ..repositories.flight_schedule_repository import FlightScheduleRepository
from ..schemas.flight_schedule import FlightScheduleUpdate, IngestionResult
from .flight_status import FlightStatusManager
from parsers.data_processor import DataProcessor

logger = logging.getLogger(__name__)


class FlightScheduleService:
    """Сервис для работы с расписанием перелетов мероприятия"""

    def __init__(
        self,
        db: Session,
        repository: Optional[FlightScheduleRepository] = None,
        data_processor: Optional[DataProcessor] = None,
    ):
        self.db = db
        self.repository = repository or FlightScheduleRepository(db)
        self.data_processor = data_processor or DataProcessor()
        self.status_manager = FlightStatusManager(self.repository)

    def upload_flight_schedules(
        self, event_id: int, content: bytes, content_type: Optional[str]
    ) -> IngestionResult:
        """
        Импорт расписания из Excel файла.

        Ошибки типа файла, формата книги и заголовков, пустая книга и
        отсутствующее мероприятие прерывают загрузку до записи в БД.
        Ошибки строк попадают в результат, остальные строки сохраняются
        одной пачкой.
        """
        self.data_processor.check_content_type(content_type)

        if not self.repository.event_exists(event_id):
            raise EventNotFoundError(event_id)

        logger.info(f"Uploading flight schedules for event {event_id} ({len(content)} bytes)")
        processed = self.data_processor.process_excel_file(content, content_type)

        saved = []
        if processed.candidates:
            saved = self.repository.create_many(event_id, processed.candidates)

        logger.info(
            f"Event {event_id}: imported {len(saved)} flight schedules, "
            f"{len(processed.errors)} rows failed"
        )

        return IngestionResult(
            processed_records=len(saved),
            failed_records=len(processed.errors),
            total_records=processed.total_rows,
            errors=processed.errors,
        )

    def get_flight_schedules(self, event_id: int) -> List[FlightSchedule]:
        """Расписание мероприятия, новые записи первыми"""
        if not self.repository.event_exists(event_id):
            raise EventNotFoundError(event_id)
        return self.repository.list_by_event(event_id)

    def get_flight_schedule(self, event_id: int, flight_id: int) -> FlightSchedule:
        record = self.repository.get(flight_id)
        if record is None or record.event_id != event_id:
            raise FlightNotFoundError(flight_id)
        return record

    def update_flight_schedule(
        self, event_id: int, flight_id: int, data: FlightScheduleUpdate
    ) -> FlightSchedule:
        """Частичное обновление полей записи"""
        values = data.model_dump(exclude_unset=True, exclude_none=True)
        if "status" in values:
            FlightStatusManager.check_status(values["status"])

        record = self.get_flight_schedule(event_id, flight_id)
        if not values:
            return record
        return self.repository.update(record, values)

    def update_status(self, event_id: int, flight_id: int, status: str) -> FlightSchedule:
        return self.status_manager.set_status(event_id, flight_id, status)

    def delete_flight_schedule(self, event_id: int, flight_id: int) -> None:
        record = self.get_flight_schedule(event_id, flight_id)
        self.repository.delete(record)
        logger.info(f"Deleted flight schedule {flight_id} of event {event_id}")
