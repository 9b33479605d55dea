import io
import logging
from typing import Any, List, NamedTuple, Optional

import pandas as pd

from app.core.exceptions import DecodeError, UnsupportedMediaTypeError

logger = logging.getLogger(__name__)

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
XLS_CONTENT_TYPE = "application/vnd.ms-excel"

# Заявленный тип файла -> движок pandas для чтения
EXCEL_ENGINES = {
    XLSX_CONTENT_TYPE: "openpyxl",
    XLS_CONTENT_TYPE: "xlrd",
}


class DecodedRow(NamedTuple):
    number: int  # номер строки на листе, начиная с 1
    cells: List[Any]


def check_content_type(content_type: Optional[str]) -> str:
    """Возвращает движок для заявленного типа или бросает UnsupportedMediaTypeError"""
    engine = EXCEL_ENGINES.get((content_type or "").split(";")[0].strip().lower())
    if engine is None:
        raise UnsupportedMediaTypeError(
            "Invalid file type. Please upload an Excel file (.xlsx or .xls)"
        )
    return engine


def decode_workbook(content: bytes, content_type: Optional[str]) -> List[DecodedRow]:
    """
    Читает первый лист книги в список строк.

    Ячейки отдаются как есть (str, int, float, datetime, time), пустые ячейки
    превращаются в None. Полностью пустые строки пропускаются, номера
    остальных строк соответствуют листу.
    """
    engine = check_content_type(content_type)

    try:
        df = pd.read_excel(
            io.BytesIO(content),
            sheet_name=0,
            header=None,
            dtype=object,
            keep_default_na=False,
            na_values=[""],
            engine=engine,
        )
    except Exception as e:
        logger.warning(f"Failed to decode workbook ({engine}): {e}")
        raise DecodeError(f"Failed to read Excel file: {e}") from e

    df = df.dropna(how="all")

    rows = []
    for idx, row in df.iterrows():
        rows.append(DecodedRow(int(idx) + 1, [_clean_cell(value) for value in row.tolist()]))

    logger.info(f"Decoded {len(rows)} non-empty rows from the first sheet")
    return rows


def _clean_cell(value: Any) -> Any:
    """NaN/NaT из pandas -> None"""
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value
