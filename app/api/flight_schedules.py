from fastapi import APIRouter, Depends, HTTPException, UploadFile, File, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response
from sqlalchemy.orm import Session
from datetime import date
from typing import Annotated

from ..core.config import settings
from ..core.database import get_db
from ..models.auth import User
from ..schemas.flight_schedule import (
    FlightSchedule, FlightScheduleListResponse, FlightScheduleResponse,
    FlightScheduleUpdate, FlightScheduleUploadResponse, FlightStatusUpdate
)
from ..services.flight_schedule_service import FlightScheduleService
from ..services.schedule_workbook import build_export, build_template
from .auth import require_event_access
from parsers.workbook_decoder import XLSX_CONTENT_TYPE

router = APIRouter(prefix="/events/{event_id}/flight-schedules", tags=["flight-schedules"])

EventMember = Annotated[User, Depends(require_event_access)]


def _xlsx_response(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type=XLSX_CONTENT_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


# =============================
# Загрузка расписания из Excel
# =============================
@router.post("/upload", response_model=FlightScheduleUploadResponse, response_model_exclude_none=True)
async def upload_flight_schedules(
    event_id: int,
    current_user: EventMember,
    file: UploadFile = File(..., description="Excel файл с расписанием перелетов"),
    db: Session = Depends(get_db)
):
    """
    Загрузка расписания перелетов мероприятия из Excel файла (.xlsx, .xls).

    Строки с ошибками пропускаются и перечисляются в ответе, остальные
    сохраняются. Ошибка типа файла, формата или заголовков отклоняет файл
    целиком.
    """
    service = FlightScheduleService(db)
    service.data_processor.check_content_type(file.content_type)

    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File is too large. Maximum size is {settings.MAX_UPLOAD_SIZE} bytes"
        )

    # разбор книги и запись в БД синхронные, выполняем вне цикла событий
    result = await run_in_threadpool(service.upload_flight_schedules, event_id, content, file.content_type)

    return FlightScheduleUploadResponse(
        success=True,
        data=result,
        message=(
            f"Successfully processed {result.processed_records} records. "
            f"{result.failed_records} records failed."
        ),
    )


@router.get("/template")
def download_template(event_id: int, current_user: EventMember):
    """Шаблон Excel для загрузки расписания"""
    return _xlsx_response(build_template(), "flight-schedule-template.xlsx")


@router.get("/download")
def download_flight_schedules(event_id: int, current_user: EventMember, db: Session = Depends(get_db)):
    """Выгрузка расписания мероприятия в Excel"""
    schedules = FlightScheduleService(db).get_flight_schedules(event_id)
    if not schedules:
        raise HTTPException(status_code=404, detail="No flight schedules found for this event")

    filename = f"flight-schedules-event-{event_id}-{date.today().isoformat()}.xlsx"
    return _xlsx_response(build_export(schedules), filename)


# =============================
# Записи расписания
# =============================
@router.get("", response_model=FlightScheduleListResponse)
def get_flight_schedules(event_id: int, current_user: EventMember, db: Session = Depends(get_db)):
    schedules = FlightScheduleService(db).get_flight_schedules(event_id)
    return FlightScheduleListResponse(
        success=True,
        data=[FlightSchedule.model_validate(s) for s in schedules],
    )


@router.get("/{flight_id}", response_model=FlightScheduleResponse)
def get_flight_schedule(event_id: int, flight_id: int, current_user: EventMember, db: Session = Depends(get_db)):
    record = FlightScheduleService(db).get_flight_schedule(event_id, flight_id)
    return FlightScheduleResponse(success=True, data=FlightSchedule.model_validate(record))


@router.patch("/{flight_id}", response_model=FlightScheduleResponse)
def update_flight_status(
    event_id: int,
    flight_id: int,
    body: FlightStatusUpdate,
    current_user: EventMember,
    db: Session = Depends(get_db)
):
    """Смена статуса перелета (Arrived, Delay, No show, Re scheduled, pending)"""
    record = FlightScheduleService(db).update_status(event_id, flight_id, body.status)
    return FlightScheduleResponse(success=True, data=FlightSchedule.model_validate(record))


@router.put("/{flight_id}", response_model=FlightScheduleResponse)
def update_flight_schedule(
    event_id: int,
    flight_id: int,
    body: FlightScheduleUpdate,
    current_user: EventMember,
    db: Session = Depends(get_db)
):
    record = FlightScheduleService(db).update_flight_schedule(event_id, flight_id, body)
    return FlightScheduleResponse(success=True, data=FlightSchedule.model_validate(record))


@router.delete("/{flight_id}")
def delete_flight_schedule(event_id: int, flight_id: int, current_user: EventMember, db: Session = Depends(get_db)):
    FlightScheduleService(db).delete_flight_schedule(event_id, flight_id)
    return {"success": True}
