import logging

from ..core.exceptions import FlightNotFoundError, InvalidStatusError
from ..models.flight_schedule import ALLOWED_STATUSES, FlightSchedule
from ..repositories.flight_schedule_repository import FlightScheduleRepository

logger = logging.getLogger(__name__)


class FlightStatusManager:
    """
    Смена статуса уже сохраненного перелета.

    Переходы не ограничены: любой допустимый статус можно записать поверх
    любого, в том числе тот же самый. Меняется только поле status.
    """

    def __init__(self, repository: FlightScheduleRepository):
        self.repository = repository

    @staticmethod
    def check_status(status) -> str:
        if not isinstance(status, str) or status not in ALLOWED_STATUSES:
            raise InvalidStatusError(status, ALLOWED_STATUSES)
        return status

    def set_status(self, event_id: int, flight_id: int, status) -> FlightSchedule:
        status = self.check_status(status)

        record = self.repository.get(flight_id)
        if record is None or record.event_id != event_id:
            raise FlightNotFoundError(flight_id)

        if record.status == status:
            return record

        previous = record.status
        record = self.repository.update_status(record, status)
        logger.info(f"Flight schedule {flight_id}: status {previous!r} -> {status!r}")
        return record
