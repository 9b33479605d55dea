import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError

from app.core.exceptions import CellValueError
from app.schemas.flight_schedule import FlightScheduleCreate, RowError
from .cell_values import combine, parse_date, parse_display_time, parse_text, parse_time
from .column_mapper import HEADER_LABELS

logger = logging.getLogger(__name__)

REQUIRED_TEXT_FIELDS = ("first_name", "last_name", "flight_number", "property_name")

# (поле даты, поле времени, поле кандидата)
LEGS = (
    ("arrival_date", "arrival_time", "arrival_time"),
    ("departure_date", "departure_time", "departure_time"),
)

STANDBY_FIELDS = (
    ("vehicle_standby_arrival", "vehicle_standby_arrival_time"),
    ("vehicle_standby_departure", "vehicle_standby_departure_time"),
)


def _cell(cells: List[Any], mapping: Dict[str, int], field: str) -> Any:
    position = mapping[field]
    return cells[position] if position < len(cells) else None


def _label(field: str) -> str:
    label = HEADER_LABELS[field]
    if field.startswith("vehicle_standby_"):
        label = f"{label} ({field.rsplit('_', 1)[1]})"
    return label


def validate_row(
    row_number: int,
    cells: List[Any],
    mapping: Dict[str, int],
) -> Union[FlightScheduleCreate, RowError]:
    """
    Проверяет одну строку данных.

    Возвращает кандидата FlightScheduleCreate либо RowError со всеми
    найденными проблемами строки.
    """
    problems: List[str] = []
    values: Dict[str, Any] = {}

    for field in REQUIRED_TEXT_FIELDS:
        try:
            text = parse_text(_cell(cells, mapping, field))
        except CellValueError as e:
            problems.append(f"Invalid {_label(field)}: {e}")
            continue
        if not text:
            problems.append(f"Missing required field: {_label(field)}")
        values[field] = text

    for date_field, time_field, target in LEGS:
        timestamp, error = _parse_leg(cells, mapping, date_field, time_field)
        if error:
            problems.append(error)
        else:
            values[target] = timestamp

    for source, target in STANDBY_FIELDS:
        try:
            values[target] = parse_display_time(_cell(cells, mapping, source))
        except CellValueError as e:
            problems.append(f"Invalid {_label(source)}: {e}")

    if problems:
        reason = "; ".join(problems)
        logger.debug(f"Row {row_number} rejected: {reason}")
        return RowError(row=row_number, reason=reason)

    try:
        return FlightScheduleCreate(**values)
    except ValidationError as e:
        return RowError(row=row_number, reason=f"Invalid row: {e.errors()[0]['msg']}")


def _parse_leg(
    cells: List[Any],
    mapping: Dict[str, int],
    date_field: str,
    time_field: str,
) -> Tuple[Optional[Any], Optional[str]]:
    """Склеивает дату и время одного плеча в одну метку времени"""
    raw_date = _cell(cells, mapping, date_field)
    raw_time = _cell(cells, mapping, time_field)

    missing = [
        _label(field)
        for field, raw in ((date_field, raw_date), (time_field, raw_time))
        if raw is None or (isinstance(raw, str) and not raw.strip())
    ]
    if missing:
        return None, f"Missing required field: {', '.join(missing)}"

    try:
        day = parse_date(raw_date)
    except CellValueError as e:
        return None, f"Invalid {_label(date_field)}: {e}"
    try:
        moment = parse_time(raw_time)
    except CellValueError as e:
        return None, f"Invalid {_label(time_field)}: {e}"

    return combine(day, moment), None
