"""
export.py

Serialization of the coded data for download.

Functions:
    - export_filename(day=None, prefix="coded_data", extension="csv"): Date-stamped file name.

    - to_csv_bytes(df): UTF-8 CSV bytes without the index.

    - to_excel_bytes(df): XLSX bytes written with openpyxl.
"""

import datetime
import io
from typing import Optional

import pandas as pd

from text_analysis.config import EXPORT_PREFIX


def export_filename(
    day: Optional[datetime.date] = None,
    prefix: str = EXPORT_PREFIX,
    extension: str = "csv",
) -> str:
    """
    Builds the download file name, e.g. ``coded_data_2024-05-01.csv``.

    The date is the export date (today unless given), not the ingestion date.
    """
    day = day or datetime.date.today()
    return f"{prefix}_{day.isoformat()}.{extension}"


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    """Serializes a DataFrame to UTF-8 CSV bytes; identical frames give identical bytes."""
    return df.to_csv(index=False, lineterminator="\n").encode("utf-8")


def to_excel_bytes(df: pd.DataFrame) -> bytes:
    """Serializes a DataFrame to an in-memory Excel workbook."""
    excel_buffer = io.BytesIO()
    with pd.ExcelWriter(excel_buffer, engine="openpyxl") as writer:
        df.to_excel(writer, index=False)
    return excel_buffer.getvalue()
