"""
Module for displaying theme / keyword groupings in the dashboard.
"""

import streamlit as st
from typing import List, Set

from text_analysis import (
    extract_keyword_groups,
    match_themes,
    parse_theme_keywords,
    theme_counts,
)
from text_analysis.config import DEFAULT_THEME_KEYWORDS, THEME_GROUPS, THEME_TERMS
from text_analysis.visualization import plot_theme_counts


def _default_keywords_text() -> str:
    return "\n".join(
        f"{theme}: {', '.join(words)}" for theme, words in DEFAULT_THEME_KEYWORDS.items()
    )


def show_themes(texts: List[str], stopwords: Set[str]) -> None:
    """
    Step 4: Themes
    Matches documents against a keyword dictionary and proposes keyword groups.

    Args:
        texts: Document texts, in document order
        stopwords: Words excluded from the keyword groups
    """
    st.header("Step 4: Themes")

    st.subheader("Keyword Dictionary")
    st.markdown(
        "Write one theme per line as `theme: keyword, keyword, ...`. "
        "A document belongs to a theme when it contains any of its keywords."
    )
    if "theme_keywords_text" not in st.session_state:
        st.session_state.theme_keywords_text = _default_keywords_text()
    keywords_text = st.text_area(
        "Themes and keywords:",
        key="theme_keywords_text",
        height=150,
    )
    theme_keywords = parse_theme_keywords(keywords_text)

    if theme_keywords:
        counts = theme_counts(texts, theme_keywords)
        st.pyplot(plot_theme_counts(counts))
        with st.expander("Themes per document"):
            matches = match_themes(texts, theme_keywords)
            matches.insert(1, "text", texts)
            st.dataframe(matches, hide_index=True)
    else:
        st.info("No themes defined.")

    st.subheader("Keyword Groups")
    c1, c2 = st.columns(2)
    n_groups = c1.number_input(
        "Number of groups:", min_value=1, max_value=20, value=THEME_GROUPS
    )
    n_terms = c2.number_input(
        "Keywords per group:", min_value=1, max_value=30, value=THEME_TERMS
    )

    try:
        groups = extract_keyword_groups(
            texts, n_groups=int(n_groups), n_terms=int(n_terms), stopwords=stopwords
        )
    except ValueError as e:
        st.warning(f"Could not build keyword groups: {e}")
        return

    for group in groups:
        st.markdown(
            f"**{group.name}** ({len(group.document_ids)} documents): "
            f"{', '.join(group.keywords)}"
        )
