from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import datetime
from typing import Optional, List

from ..models.flight_schedule import FlightStatus

REQUIRED_TEXT = ("first_name", "last_name", "flight_number", "property_name")


def _required_text(value: Optional[str]) -> Optional[str]:
    # пробелы по краям не считаются содержимым
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("must not be empty")
    return value


class FlightScheduleBase(BaseModel):
    first_name: str
    last_name: str
    flight_number: str
    arrival_time: datetime
    property_name: str
    vehicle_standby_arrival_time: str = ""
    departure_time: datetime
    vehicle_standby_departure_time: str = ""

    @field_validator(*REQUIRED_TEXT)
    @classmethod
    def check_required_text(cls, value):
        return _required_text(value)


class FlightScheduleCreate(FlightScheduleBase):
    """Кандидат на запись: строка таблицы, прошедшая проверку"""
    status: FlightStatus = FlightStatus.pending


class FlightScheduleUpdate(BaseModel):
    """Частичная правка записи. Переданные текстовые поля обрезаются"""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    flight_number: Optional[str] = None
    arrival_time: Optional[datetime] = None
    property_name: Optional[str] = None
    vehicle_standby_arrival_time: Optional[str] = None
    departure_time: Optional[datetime] = None
    vehicle_standby_departure_time: Optional[str] = None
    status: Optional[str] = None

    @field_validator(*REQUIRED_TEXT)
    @classmethod
    def check_required_text(cls, value):
        return _required_text(value)

    @field_validator("vehicle_standby_arrival_time", "vehicle_standby_departure_time")
    @classmethod
    def strip_standby(cls, value):
        return value.strip() if value is not None else value


class FlightSchedule(FlightScheduleBase):
    flight_id: int
    event_id: int
    status: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class FlightStatusUpdate(BaseModel):
    # сверка с допустимыми значениями делается в FlightStatusManager
    status: str


class RowError(BaseModel):
    row: int
    reason: str


class IngestionResult(BaseModel):
    processed_records: int = Field(0, alias="processedRecords")
    failed_records: int = Field(0, alias="failedRecords")
    total_records: int = Field(0, alias="totalRecords")
    errors: List[RowError] = []

    model_config = ConfigDict(populate_by_name=True)


class FlightScheduleUploadResponse(BaseModel):
    success: bool
    data: Optional[IngestionResult] = None
    message: Optional[str] = None
    error: Optional[str] = None


class FlightScheduleResponse(BaseModel):
    success: bool
    data: Optional[FlightSchedule] = None


class FlightScheduleListResponse(BaseModel):
    success: bool
    data: List[FlightSchedule] = []
