"""
Main module for the qualitative text analysis dashboard.
This module defines the DashboardApp class and the main entry point.
"""

import logging
import streamlit as st
import pandas as pd
from typing import FrozenSet, List, Optional, Set, Tuple

from text_analysis import TaggingEngine, get_stopwords
from text_analysis.config import LOG_LEVEL, STOPWORD_LANGUAGES

from coding_dashboard.data_upload import upload_dataset
from coding_dashboard.summary_statistics import show_summary_statistics
from coding_dashboard.word_frequency_view import show_word_frequencies
from coding_dashboard.theme_view import show_themes
from coding_dashboard.sentiment_view import show_sentiment
from coding_dashboard.manual_coding import code_documents
from coding_dashboard.data_download import download_data

logger = logging.getLogger(__name__)

STOPWORD_OPTIONS = ["english", "french", "german", "spanish", "italian", "dutch"]


@st.cache_resource(show_spinner=False)
def load_stopwords(
    languages: Tuple[str, ...], extra: Tuple[str, ...]
) -> FrozenSet[str]:
    """
    Stopwords for the given languages plus custom words, cached per combination.

    Returns:
        A frozen set of lower-case stopwords
    """
    return frozenset(get_stopwords(languages, extra))


class DashboardApp:
    def __init__(self) -> None:
        """
        Initializes the DashboardApp by pulling default or stored values
        from Streamlit's session_state.
        """
        # The tagging engine owns codes and applied codes for this session
        if "tagging_engine" not in st.session_state:
            st.session_state.tagging_engine = TaggingEngine()
        self.engine: TaggingEngine = st.session_state.tagging_engine

        # Data-related state
        self.df: Optional[pd.DataFrame] = st.session_state.get("df", None)
        self.text_column: Optional[str] = st.session_state.get("text_column", None)

        # Text processing settings
        self.custom_stopwords: str = st.session_state.get("custom_stopwords", "")

    @property
    def texts(self) -> List[str]:
        return [document.text for document in self.engine.documents]

    def stopwords(self) -> Set[str]:
        """
        Sidebar controls for stopword removal.

        Returns:
            The active stopword set
        """
        st.sidebar.header("Text Processing")
        languages = st.sidebar.multiselect(
            "Stopword languages:",
            options=sorted(set(STOPWORD_OPTIONS) | set(STOPWORD_LANGUAGES)),
            default=list(STOPWORD_LANGUAGES),
            key="stopword_languages",
        )
        self.custom_stopwords = st.sidebar.text_area(
            "Additional stopwords (comma-separated):",
            key="custom_stopwords",
        )
        extra = tuple(
            sorted(
                w.strip().lower()
                for w in self.custom_stopwords.split(",")
                if w.strip()
            )
        )

        try:
            return set(load_stopwords(tuple(languages), extra))
        except LookupError as e:
            logger.warning("NLTK stopwords unavailable: %s", e)
            st.sidebar.warning(
                "NLTK stopwords could not be loaded; only your additional stopwords are used."
            )
            return set(extra)

    def run(self) -> None:
        """
        Main entry point for the Streamlit app.
        Executes each dashboard step in sequence once documents are loaded.
        """
        st.title("Qualitative Text Dashboard")

        st.markdown(
            """
            This application helps you **explore and code** a collection of texts.
            Upload a CSV/XLSX file (one row per document) or a TXT file (one document per line).

            **Steps**
            1. **Upload Data** and choose the text column
            2. **Summary Statistics**
            3. **Word Frequencies** and word cloud
            4. **Themes** (keyword dictionary and keyword groups)
            5. **Sentiment**
            6. **Manual Coding**
            7. **Download Coded Data**
            """
        )

        stopwords = self.stopwords()

        # Step 1: Upload Dataset
        self.df, self.text_column = upload_dataset(self.engine, self.df)

        texts = self.texts

        # Steps 2-5: Exploration
        tab_stats, tab_words, tab_themes, tab_sentiment = st.tabs(
            ["Statistics", "Word Frequencies", "Themes", "Sentiment"]
        )
        with tab_stats:
            show_summary_statistics(texts, stopwords)
        with tab_words:
            show_word_frequencies(texts, stopwords)
        with tab_themes:
            show_themes(texts, stopwords)
        with tab_sentiment:
            show_sentiment(texts)

        # Step 6: Manual Coding
        code_documents(self.engine)

        # Step 7: Download Data
        download_data(self.engine)


def main() -> None:
    """
    Main entry point for the application.
    Configures logging, then creates an instance of DashboardApp and runs it.
    """
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    st.set_page_config(page_title="Qualitative Text Dashboard", layout="wide")

    app = DashboardApp()
    app.run()


if __name__ == "__main__":
    main()
