"""
Module for displaying corpus summary statistics in the dashboard.
"""

import streamlit as st
from typing import List, Set

from text_analysis import document_lengths, summarize_corpus
from text_analysis.visualization import plot_document_lengths


def show_summary_statistics(texts: List[str], stopwords: Set[str]) -> None:
    """
    Step 2: Summary Statistics
    Shows document counts, vocabulary size and document length distribution.

    Args:
        texts: Document texts, in document order
        stopwords: Words excluded from the vocabulary count
    """
    st.header("Step 2: Summary Statistics")

    summary = summarize_corpus(texts, stopwords)

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Documents", summary["documents"])
    c2.metric("Total words", summary["total_words"])
    c3.metric("Unique words (no stopwords)", summary["unique_words"])
    c4.metric("Avg. words / document", summary["avg_words"])

    st.markdown(
        f"Shortest document: **{summary['min_words']}** words, "
        f"longest document: **{summary['max_words']}** words, "
        f"average length: **{summary['avg_characters']}** characters."
    )

    # same stopword-free basis as the metrics above
    lengths = document_lengths(texts, stopwords)
    if not lengths.empty:
        st.pyplot(plot_document_lengths(lengths))
