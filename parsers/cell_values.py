"""
Нормализация значений ячеек Excel.

Ячейка может прийти строкой, числом (серийный номер даты или доля суток)
или готовым объектом date/time/datetime. Для каждого логического типа есть
своя функция, она принимает только перечисленные варианты и бросает
CellValueError на все остальное.
"""

from datetime import date, datetime, time, timedelta
from typing import Any, Optional

from app.core.exceptions import CellValueError

# Нулевой день системы дат 1900 в Excel (с учетом ошибки 29.02.1900)
EXCEL_EPOCH = datetime(1899, 12, 30)

DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%dT%H:%M:%S",
    "%m/%d/%Y",
    "%d.%m.%Y",
    "%d-%m-%Y",
)

TIME_FORMATS = (
    "%H:%M",
    "%H:%M:%S",
    "%I:%M %p",
    "%I:%M:%S %p",
    "%I:%M%p",
    "%H.%M",
)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_text(value: Any) -> str:
    """Текстовое поле: обрезает пробелы, пустая ячейка дает пустую строку"""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if _is_number(value):
        return str(value)
    raise CellValueError(f"unexpected value {value!r}")


def parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if _is_number(value):
        if value <= 0:
            raise CellValueError(f"invalid date serial {value!r}")
        try:
            return (EXCEL_EPOCH + timedelta(days=int(value))).date()
        except OverflowError:
            raise CellValueError(f"invalid date serial {value!r}")
    if isinstance(value, str):
        text = value.strip()
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
        raise CellValueError(f"invalid date {text!r}")
    raise CellValueError(f"unexpected date value {value!r}")


def parse_time(value: Any) -> time:
    if isinstance(value, datetime):
        return value.time().replace(microsecond=0)
    if isinstance(value, time):
        return value.replace(microsecond=0, tzinfo=None)
    if isinstance(value, timedelta):
        if not timedelta(0) <= value < timedelta(days=1):
            raise CellValueError(f"invalid time {value!r}")
        return _time_from_seconds(round(value.total_seconds()))
    if _is_number(value):
        if not 0 <= value < 1:
            raise CellValueError(f"invalid time fraction {value!r}")
        return _time_from_seconds(round(value * 86400))
    if isinstance(value, str):
        text = value.strip().upper()
        for fmt in TIME_FORMATS:
            try:
                return datetime.strptime(text, fmt).time()
            except ValueError:
                continue
        raise CellValueError(f"invalid time {value.strip()!r}")
    raise CellValueError(f"unexpected time value {value!r}")


def _time_from_seconds(seconds: int) -> time:
    # 0.99999 суток округляется до 24:00, прижимаем к 23:59:59
    seconds = min(seconds, 86399)
    return time(seconds // 3600, seconds % 3600 // 60, seconds % 60)


def parse_display_time(value: Any) -> str:
    """
    Время подачи транспорта: хранится как текст для показа.

    Все, что понимается как время, приводится к HH:MM, прочий текст
    сохраняется как есть.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return ""
    try:
        return format_time(parse_time(value))
    except CellValueError:
        return parse_text(value)


def combine(day: date, moment: time) -> datetime:
    return datetime.combine(day, moment)


def format_time(moment: Optional[time]) -> str:
    if moment is None:
        return ""
    return moment.strftime("%H:%M")
