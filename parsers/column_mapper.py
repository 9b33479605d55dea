import logging
from typing import Any, Dict, List

from app.core.exceptions import SchemaError

logger = logging.getLogger(__name__)

# Логические поля в порядке колонок шаблона
FIELDS = (
    "first_name",
    "last_name",
    "flight_number",
    "arrival_date",
    "arrival_time",
    "property_name",
    "vehicle_standby_arrival",
    "departure_date",
    "departure_time",
    "vehicle_standby_departure",
)

# Заголовки шаблона. "Vehicle Standby" встречается дважды
TEMPLATE_HEADERS = (
    "First Name",
    "Last Name",
    "Flight Number",
    "Arrival Date",
    "Arrival Time",
    "Property Name",
    "Vehicle Standby",
    "Departure Date",
    "Departure Time",
    "Vehicle Standby",
)

HEADER_LABELS = dict(zip(FIELDS, TEMPLATE_HEADERS))

STANDBY_LABEL = "vehicle standby"

# Однозначные заголовки (в нижнем регистре) -> поле
_UNIQUE_LABELS = {
    "first name": "first_name",
    "last name": "last_name",
    "flight number": "flight_number",
    "arrival date": "arrival_date",
    "arrival time": "arrival_time",
    "property name": "property_name",
    "departure date": "departure_date",
    "departure time": "departure_time",
    # так подписывает колонки выгрузка расписания
    "vehicle standby arrival": "vehicle_standby_arrival",
    "vehicle standby departure": "vehicle_standby_departure",
}

# Повторяющийся "Vehicle Standby" раздается по порядку колонок
_STANDBY_ORDER = ("vehicle_standby_arrival", "vehicle_standby_departure")


def normalize_header(value: Any) -> str:
    if value is None:
        return ""
    return " ".join(str(value).split()).lower()


def map_columns(header: List[Any]) -> Dict[str, int]:
    """
    Строит соответствие поле -> индекс колонки по строке заголовков.

    Сравнение без учета регистра и пробелов по краям. Лишние колонки
    игнорируются. Первый "Vehicle Standby" слева считается временем подачи
    к прилету, второй к вылету. Если какого-то поля нет, бросает SchemaError.
    """
    mapping: Dict[str, int] = {}
    standby_columns = []

    for position, cell in enumerate(header):
        label = normalize_header(cell)
        if label == STANDBY_LABEL:
            standby_columns.append(position)
            continue
        field = _UNIQUE_LABELS.get(label)
        if field and field not in mapping:
            mapping[field] = position

    free_standby_fields = [f for f in _STANDBY_ORDER if f not in mapping]
    for field, position in zip(free_standby_fields, standby_columns):
        mapping[field] = position

    missing = [f for f in FIELDS if f not in mapping]
    if missing:
        labels = []
        for field in missing:
            label = HEADER_LABELS[field]
            if field in _STANDBY_ORDER:
                label = f"{label} ({field.rsplit('_', 1)[1]})"
            labels.append(label)
        logger.warning(f"Header row is missing columns: {labels}")
        raise SchemaError(labels)

    return mapping
