"""
Module for handling dataset upload functionality in the dashboard.
"""

import streamlit as st
import pandas as pd
from typing import Optional, Tuple

from text_analysis import (
    TaggingEngine,
    build_documents,
    load_data,
    load_text_lines,
    sanitize_dataframe,
)
from text_analysis.config import CSV_DELIMITER


def upload_dataset(
    engine: TaggingEngine, current_df: Optional[pd.DataFrame]
) -> Tuple[Optional[pd.DataFrame], Optional[str]]:
    """
    Step 1: Upload Your Documents
    Uploads a document collection (CSV/XLSX with a header row, or TXT with one
    document per line) and loads it into the tagging engine.

    Loading replaces the previous documents and clears every applied code;
    the codes themselves are kept.

    Args:
        engine: The session's tagging engine
        current_df: The currently loaded DataFrame or None

    Returns:
        A tuple containing (current_df, text_column)
    """
    st.header("Step 1: Upload Your Documents (CSV, XLSX or TXT)")

    uploaded_file = st.file_uploader(
        "Upload CSV, XLSX or TXT File", type=["csv", "xlsx", "txt"], key="data_file"
    )

    if uploaded_file is not None:
        file_name = uploaded_file.name.lower()
        text_column: Optional[str] = None
        # the same upload object is handed back on every rerun
        uploaded_file.seek(0)

        if file_name.endswith(".txt"):
            loaded_df = load_text_lines(uploaded_file)
            st.caption("Each non-empty line is treated as one document.")
        elif file_name.endswith(".csv"):
            delimiter = st.text_input("CSV Delimiter", value=CSV_DELIMITER)
            loaded_df = load_data(
                uploaded_file, file_type="csv", delimiter=delimiter
            ).reset_index(drop=True)
        else:
            loaded_df = load_data(uploaded_file, file_type="xlsx").reset_index(
                drop=True
            )

        if not file_name.endswith(".txt"):
            text_candidates = [
                c
                for c in loaded_df.columns
                if pd.api.types.is_string_dtype(loaded_df[c])
                or loaded_df[c].dtype == "object"
            ] or list(loaded_df.columns)
            text_column = st.selectbox(
                "Column containing the text to analyse:",
                options=text_candidates,
                key="text_column_select",
            )

        if st.button("Load Documents"):
            try:
                documents = build_documents(loaded_df, text_column)
            except ValueError as e:
                st.error(f"Failed to load documents: {e}")
                st.stop()

            engine.reset(documents)
            current_df = loaded_df
            st.session_state.df = current_df
            st.session_state.text_column = text_column
            st.success(f"Data loaded successfully ({engine.document_count} documents).")

    if current_df is None or engine.document_count == 0:
        st.info("Upload a file and click **Load Documents** to continue.")
        st.stop()

    st.write("Here are the first 5 rows of your data:")
    st.dataframe(sanitize_dataframe(current_df.head()))

    return current_df, st.session_state.get("text_column")
