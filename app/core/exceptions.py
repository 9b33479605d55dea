"""
Ошибки загрузки расписания перелетов и смены статусов.

Каждый класс несет HTTP-код, с которым его отдает обработчик в app.main.
Ошибки уровня строки (CellValueError) наружу из валидатора не выходят.
"""


class FlightScheduleError(Exception):
    """Базовая ошибка подсистемы расписаний"""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# Ошибки, прерывающие загрузку целиком

class UnsupportedMediaTypeError(FlightScheduleError):
    status_code = 415


class DecodeError(FlightScheduleError):
    """Файл не читается как книга Excel заявленного формата"""


class SchemaError(FlightScheduleError):
    """В строке заголовков нет обязательных колонок"""

    def __init__(self, missing_headers):
        self.missing_headers = list(missing_headers)
        super().__init__(f"Missing required headers: {', '.join(self.missing_headers)}")


class EmptyWorkbookError(FlightScheduleError):
    pass


class EventNotFoundError(FlightScheduleError):
    status_code = 404

    def __init__(self, event_id: int):
        self.event_id = event_id
        super().__init__(f"Event {event_id} not found")


class StorageError(FlightScheduleError):
    """Хранилище отклонило запись"""

    status_code = 500


# Ошибки смены статуса

class InvalidStatusError(FlightScheduleError):
    def __init__(self, status, allowed):
        self.status = status
        super().__init__(
            f"Invalid status value: {status!r}. Allowed values: {', '.join(allowed)}"
        )


class FlightNotFoundError(FlightScheduleError):
    status_code = 404

    def __init__(self, flight_id: int):
        self.flight_id = flight_id
        super().__init__(f"Flight schedule {flight_id} not found")


# Ошибка одной ячейки, превращается в ошибку строки

class CellValueError(ValueError):
    pass
