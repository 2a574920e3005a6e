"""
Spreadsheet reader for bulk appointment imports.

Reads the first sheet of an uploaded workbook with pandas and returns one
dict per data row, keyed by the header cells. Empty cells are left out of
the row so the normalizer applies its defaults.
"""

import io
import logging
import time
from typing import Any, Dict, List

import pandas as pd

from manicurista.core.exceptions import ImportFormatError
from manicurista.core.logging_config import log_performance
from manicurista.domain.interfaces import ISpreadsheetReader

logger = logging.getLogger(__name__)

READ_ERROR_MESSAGE = (
    "Hubo un error al procesar el archivo. Asegúrate de que tenga el formato correcto."
)


def _to_python(value: Any) -> Any:
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    return value


class ExcelSpreadsheetReader(ISpreadsheetReader):
    """Reads .xlsx workbooks through pandas and openpyxl."""

    def __init__(self, engine: str = "openpyxl"):
        self.engine = engine

    def read_rows(self, content: bytes) -> List[Dict[str, Any]]:
        if not content:
            raise ImportFormatError("No se pudo leer el archivo.")

        started = time.perf_counter()
        try:
            frame = pd.read_excel(
                io.BytesIO(content), sheet_name=0, engine=self.engine
            )
        except Exception as e:
            logger.warning(
                "Failed to read uploaded spreadsheet",
                extra={"context": {"error": str(e), "size_bytes": len(content)}},
            )
            raise ImportFormatError(READ_ERROR_MESSAGE) from e

        rows = []
        for record in frame.to_dict(orient="records"):
            row = {
                str(key): _to_python(value)
                for key, value in record.items()
                if not pd.isna(value)
            }
            rows.append(row)

        log_performance(
            "read_rows",
            (time.perf_counter() - started) * 1000,
            rows=len(rows),
            columns=[str(c) for c in frame.columns],
        )
        return rows
