"""
data_processing.py

This module provides utility functions for loading document collections and
turning them into tagging-engine documents.

Dependencies:
    - pandas
    - chardet

Functions:
    - load_data(file, file_type="csv", delimiter=",", **kwargs): Loads CSV or Excel data into a DataFrame.

    - detect_file_encoding(file): Detects a file's encoding using the chardet library.

    - load_text_lines(file): Loads a plain-text file, one document per non-blank line.

    - build_documents(df, text_column=None): Converts a DataFrame into a list of Documents.

    - sanitize_dataframe(df): Removes line breaks from string entries in a DataFrame.
"""

import logging
import pandas as pd
import chardet
from typing import Union, IO, List, Optional, Any

from text_analysis.tagging import Document, TEXT_COLUMN

logger = logging.getLogger(__name__)


def load_data(
    file: Union[str, IO], file_type: str = "csv", delimiter: str = ",", **kwargs: Any
) -> pd.DataFrame:
    """
    Loads data from a CSV or Excel file into a pandas DataFrame with robust encoding detection.

    This function attempts to read the specified file using UTF-8 encoding by default.
    If a `UnicodeDecodeError` occurs, it detects the file's encoding using the `chardet` library.
    If detection fails, it falls back to using 'ISO-8859-1' encoding.

    Parameters:
    ----------
    file : str or file-like object
        The file path or file-like object to read.
    file_type : str, optional
        The type of file to load. Accepted values are `'csv'` or `'xlsx'`. Default is `'csv'`.
    delimiter : str, optional
        The delimiter used in the CSV file (ignored for Excel files). Default is `','`.
    **kwargs : dict
        Additional keyword arguments passed to `pd.read_csv()` or `pd.read_excel()`.

    Returns:
    -------
    pd.DataFrame
        The loaded data as a pandas DataFrame.

    Raises:
    ------
    ValueError
        If the specified `file_type` is not `'csv'` or `'xlsx'`, or the CSV cannot
        be decoded.
    pd.errors.EmptyDataError
        If the file is empty.
    """
    if file_type == "csv":
        # Attempt UTF-8
        try:
            return pd.read_csv(file, delimiter=delimiter, **kwargs)
        except UnicodeDecodeError:
            pass

        if hasattr(file, "seek"):
            file.seek(0)

        # Attempt detected encoding
        encoding = detect_file_encoding(file)
        logger.info("UTF-8 decoding failed, retrying with %s", encoding)
        if hasattr(file, "seek"):
            file.seek(0)

        try:
            return pd.read_csv(file, encoding=encoding, delimiter=delimiter, **kwargs)
        except UnicodeDecodeError:
            pass

        if hasattr(file, "seek"):
            file.seek(0)

        # Final attempt with ISO-8859-1
        try:
            return pd.read_csv(
                file, encoding="ISO-8859-1", delimiter=delimiter, **kwargs
            )
        except UnicodeDecodeError as e:
            raise ValueError(
                "Failed to read the file with utf-8, detected encoding, or ISO-8859-1."
            ) from e

    elif file_type == "xlsx":
        return pd.read_excel(file, **kwargs)
    else:
        raise ValueError("Unsupported file type. Please use 'csv' or 'xlsx'.")


def detect_file_encoding(file: Union[str, IO]) -> str:
    """
    Detects the character encoding of a file using the `chardet` library.

    Only the first 100,000 bytes are inspected. Defaults to `'utf-8'` when
    detection fails.

    Parameters:
    ----------
    file : str or file-like object
        The file path, or a file-like object opened in binary mode.

    Returns:
    -------
    str
        The detected encoding.
    """
    if hasattr(file, "read"):
        rawdata = file.read(100000)
    else:
        with open(file, "rb") as f:
            rawdata = f.read(100000)

    if isinstance(rawdata, str):
        return "utf-8"

    encoding = chardet.detect(rawdata)["encoding"]
    return encoding or "utf-8"


def load_text_lines(file: Union[str, IO]) -> pd.DataFrame:
    """
    Loads a plain-text file where each non-blank line is one document.

    Parameters:
    ----------
    file : str or file-like object
        The file path, or a file-like object (binary or text mode).

    Returns:
    -------
    pd.DataFrame
        A DataFrame with a single `text` column, one row per document.
    """
    if hasattr(file, "read"):
        raw = file.read()
    else:
        with open(file, "rb") as f:
            raw = f.read()

    if isinstance(raw, bytes):
        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError:
            encoding = chardet.detect(raw)["encoding"] or "ISO-8859-1"
            logger.info("UTF-8 decoding failed, retrying with %s", encoding)
            content = raw.decode(encoding, errors="replace")
    else:
        content = raw

    lines = [line.strip() for line in content.splitlines() if line.strip()]
    logger.info("Loaded %d lines from text file", len(lines))
    return pd.DataFrame({TEXT_COLUMN: lines})


def build_documents(
    df: pd.DataFrame, text_column: Optional[str] = None
) -> List[Document]:
    """
    Converts a DataFrame into documents indexed 1..N.

    When `text_column` is None the frame is treated as a line-based collection
    (as returned by `load_text_lines`): the `text` column is the document text
    and no original fields are carried. Otherwise every column of the row is
    kept as the document's original fields.

    Parameters:
    ----------
    df : pd.DataFrame
        The loaded data.
    text_column : str, optional
        Name of the column holding the text to analyse.

    Returns:
    -------
    List[Document]
        One document per row, in row order.

    Raises:
    ------
    ValueError
        If the text column does not exist in the DataFrame.
    """
    column = text_column or TEXT_COLUMN
    if column not in df.columns:
        raise ValueError(f"Column '{column}' not found in the data.")

    documents = []
    for position, record in enumerate(df.to_dict(orient="records"), start=1):
        value = record[column]
        text = "" if pd.isna(value) else str(value)
        extra_fields = record if text_column is not None else {}
        documents.append(Document(index=position, text=text, extra_fields=extra_fields))

    return documents


def sanitize_dataframe(df: pd.DataFrame) -> pd.DataFrame:
    """
    Sanitizes a pandas DataFrame by replacing line breaks in string columns with spaces.

    Example:
    -------
    >>> import pandas as pd
    >>> data = pd.DataFrame({'Comments': ['Hello\\nWorld', 'Good\\rMorning']})
    >>> sanitize_dataframe(data)
           Comments
    0   Hello World
    1  Good Morning
    """
    return df.apply(
        lambda col: (
            col.str.replace(r"[\n\r]", " ", regex=True)
            if col.dtype == "object" or pd.api.types.is_string_dtype(col)
            else col
        )
    )
