import logging
from dataclasses import dataclass, field
from typing import List, Optional

from app.core.exceptions import EmptyWorkbookError
from app.schemas.flight_schedule import FlightScheduleCreate, RowError
from .column_mapper import map_columns
from .row_validator import validate_row
from .workbook_decoder import check_content_type, decode_workbook

logger = logging.getLogger(__name__)

EMPTY_WORKBOOK_MESSAGE = (
    "Invalid Excel file format. File must contain at least a header row and one data row."
)


@dataclass
class ProcessedWorkbook:
    """Результат разбора книги до записи в БД"""
    candidates: List[FlightScheduleCreate] = field(default_factory=list)
    errors: List[RowError] = field(default_factory=list)
    total_rows: int = 0


class DataProcessor:
    """Обработчик Excel файлов с расписанием перелетов"""

    def check_content_type(self, content_type: Optional[str]) -> None:
        check_content_type(content_type)

    def process_excel_file(self, content: bytes, content_type: Optional[str]) -> ProcessedWorkbook:
        """
        Разбирает книгу: декодирование -> заголовки -> проверка строк.

        Ошибки формата файла и заголовков прерывают разбор исключением.
        Ошибки отдельных строк собираются в порядке строк и разбор
        продолжается.
        """
        rows = decode_workbook(content, content_type)
        if not rows:
            raise EmptyWorkbookError(EMPTY_WORKBOOK_MESSAGE)

        header, data_rows = rows[0], rows[1:]
        logger.info(f"Columns: {header.cells}")
        mapping = map_columns(header.cells)

        if not data_rows:
            raise EmptyWorkbookError(EMPTY_WORKBOOK_MESSAGE)

        result = ProcessedWorkbook(total_rows=len(data_rows))
        for row in data_rows:
            outcome = validate_row(row.number, row.cells, mapping)
            if isinstance(outcome, RowError):
                result.errors.append(outcome)
            else:
                result.candidates.append(outcome)

        logger.info(
            f"Validated {result.total_rows} rows: "
            f"{len(result.candidates)} valid, {len(result.errors)} rejected"
        )
        return result
