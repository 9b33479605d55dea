"""
Генерация Excel файлов: шаблон для загрузки и выгрузка расписания.
"""

import io
from typing import Iterable, List, Sequence

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from ..models.flight_schedule import FlightSchedule, FlightStatus
from parsers.column_mapper import TEMPLATE_HEADERS

TEMPLATE_SHEET = "Flight Schedule Template"
EXPORT_SHEET = "Flight Schedules"

TEMPLATE_ROWS = (
    ("John", "Doe", "AA123", "2025-01-15", "14:30", "Grand Hotel", "15:00", "2025-01-20", "16:45", "17:15"),
    ("Sarah", "Johnson", "BA456", "2025-01-15", "10:15", "Business Center", "10:45", "2025-01-20", "14:30", "15:00"),
)

EXPORT_HEADERS = TEMPLATE_HEADERS[:-1] + ("Vehicle Standby Departure", "Status")

COLUMN_WIDTHS = (15, 15, 12, 12, 10, 20, 12, 12, 10, 18, 12)


def _build(sheet_title: str, headers: Sequence[str], rows: Iterable[Sequence]) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_title

    ws.append(list(headers))
    for cell in ws[1]:
        cell.font = Font(bold=True)
    for row in rows:
        ws.append(list(row))

    for idx, width in enumerate(COLUMN_WIDTHS[:len(headers)], start=1):
        ws.column_dimensions[get_column_letter(idx)].width = width

    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def build_template() -> bytes:
    """Пустой шаблон с заголовками и двумя примерами строк"""
    return _build(TEMPLATE_SHEET, TEMPLATE_HEADERS, TEMPLATE_ROWS)


def build_export(schedules: List[FlightSchedule]) -> bytes:
    """Выгрузка расписания. Файл можно загрузить обратно"""
    rows = []
    for s in schedules:
        rows.append((
            s.first_name,
            s.last_name,
            s.flight_number,
            s.arrival_time.strftime("%Y-%m-%d"),
            s.arrival_time.strftime("%H:%M"),
            s.property_name,
            s.vehicle_standby_arrival_time or "",
            s.departure_time.strftime("%Y-%m-%d"),
            s.departure_time.strftime("%H:%M"),
            s.vehicle_standby_departure_time or "",
            s.status or FlightStatus.pending.value,
        ))
    return _build(EXPORT_SHEET, EXPORT_HEADERS, rows)
