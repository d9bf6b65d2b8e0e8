"""
Tests for ingestion (CSV/XLSX/TXT loading, document building) and export helpers.
"""

import datetime
import io

import pandas as pd
import pytest

from text_analysis import (
    build_documents,
    export_filename,
    load_data,
    load_text_lines,
    sanitize_dataframe,
    to_csv_bytes,
    to_excel_bytes,
)
from text_analysis.data_processing import detect_file_encoding


def create_test_data():
    """Create a small survey-like dataset."""
    return pd.DataFrame(
        {
            "id": [1, 2, 3],
            "comment": ["Fast delivery", None, "Staff was rude"],
            "score": [5, 3, 1],
        }
    )


def test_load_data_csv_with_delimiter():
    buffer = io.BytesIO(b"id;comment\n1;hello\n2;world\n")

    df = load_data(buffer, file_type="csv", delimiter=";")

    assert list(df.columns) == ["id", "comment"]
    assert df["comment"].tolist() == ["hello", "world"]


def test_load_data_falls_back_on_non_utf8_encoding():
    content = "id,comment\n1,café crème très bon\n2,déjà vu à la française\n"
    buffer = io.BytesIO(content.encode("latin-1"))

    df = load_data(buffer, file_type="csv")

    assert len(df) == 2
    assert df["comment"].iloc[0].startswith("caf")


def test_load_data_xlsx():
    df = create_test_data()

    loaded = load_data(io.BytesIO(to_excel_bytes(df)), file_type="xlsx")

    assert list(loaded.columns) == ["id", "comment", "score"]
    assert len(loaded) == 3


def test_load_data_rejects_unknown_type():
    with pytest.raises(ValueError):
        load_data(io.BytesIO(b"x"), file_type="json")


def test_detect_file_encoding_defaults_for_text_streams():
    assert detect_file_encoding(io.StringIO("already decoded")) == "utf-8"


def test_load_text_lines_skips_blank_lines():
    buffer = io.BytesIO(b"  first line \n\n   \nsecond line\r\nthird\n")

    df = load_text_lines(buffer)

    assert list(df.columns) == ["text"]
    assert df["text"].tolist() == ["first line", "second line", "third"]


def test_load_text_lines_from_path(tmp_path):
    path = tmp_path / "docs.txt"
    path.write_bytes("premier\ndeuxième\n".encode("utf-8"))

    df = load_text_lines(str(path))

    assert df["text"].tolist() == ["premier", "deuxième"]


def test_build_documents_from_table_keeps_original_row():
    documents = build_documents(create_test_data(), text_column="comment")

    assert [d.index for d in documents] == [1, 2, 3]
    assert documents[0].text == "Fast delivery"
    assert documents[1].text == ""
    assert list(documents[2].extra_fields) == ["id", "comment", "score"]
    assert documents[2].extra_fields["score"] == 1


def test_build_documents_from_lines_has_no_extra_fields():
    documents = build_documents(pd.DataFrame({"text": ["a", "b"]}))

    assert [d.text for d in documents] == ["a", "b"]
    assert all(d.extra_fields == {} for d in documents)


def test_build_documents_unknown_column():
    with pytest.raises(ValueError):
        build_documents(create_test_data(), text_column="missing")


def test_sanitize_dataframe_removes_line_breaks():
    df = pd.DataFrame({"Comments": ["Hello\nWorld", "Good\rMorning"], "n": [1, 2]})

    sanitized = sanitize_dataframe(df)

    assert sanitized["Comments"].tolist() == ["Hello World", "Good Morning"]
    assert sanitized["n"].tolist() == [1, 2]


def test_export_filename_uses_export_date():
    assert export_filename(datetime.date(2024, 5, 1)) == "coded_data_2024-05-01.csv"
    assert export_filename(datetime.date(2024, 5, 1), extension="xlsx").endswith(
        ".xlsx"
    )
    assert export_filename() == f"coded_data_{datetime.date.today().isoformat()}.csv"


def test_to_csv_bytes_has_no_index():
    df = pd.DataFrame({"text": ["a"], "labels": [""]})

    assert to_csv_bytes(df) == b"text,labels\na,\n"
