"""
Module for handling coded data download functionality in the dashboard.
"""

import streamlit as st

from text_analysis import (
    TaggingEngine,
    export_filename,
    to_csv_bytes,
    to_excel_bytes,
)


def download_data(engine: TaggingEngine) -> None:
    """
    Step 7: Download Coded Data
    Exports one row per document (original columns plus a `labels` column).

    Args:
        engine: The session's tagging engine
    """
    st.header("Step 7: Download Coded Data")

    st.markdown(
        "Download your coded data. Each row keeps the original columns and gains "
        "a `labels` column with the applied codes separated by commas."
    )

    coded_df = engine.serialize_assignments()
    st.info(f"Downloading dataset with {len(coded_df)} rows")

    c1, c2 = st.columns(2)
    with c1:
        st.download_button(
            label="Download CSV",
            data=to_csv_bytes(coded_df),
            file_name=export_filename(),
            mime="text/csv",
        )
    with c2:
        st.download_button(
            label="Download Excel",
            data=to_excel_bytes(coded_df),
            file_name=export_filename(extension="xlsx"),
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
