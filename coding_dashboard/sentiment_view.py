"""
Module for displaying the sentiment distribution in the dashboard.
"""

import streamlit as st
from typing import List

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from text_analysis import score_texts, sentiment_distribution
from text_analysis.visualization import plot_sentiment_distribution


@st.cache_resource(show_spinner=False)
def get_analyzer() -> SentimentIntensityAnalyzer:
    """
    VADER analyzer (loads the lexicon once per process).

    Returns:
        A SentimentIntensityAnalyzer
    """
    return SentimentIntensityAnalyzer()


def show_sentiment(texts: List[str]) -> None:
    """
    Step 5: Sentiment
    Scores each document with VADER and shows the distribution.

    Args:
        texts: Document texts, in document order
    """
    st.header("Step 5: Sentiment")

    scores = score_texts(texts, analyzer=get_analyzer())
    distribution = sentiment_distribution(scores)

    c1, c2, c3 = st.columns(3)
    c1.metric("Positive", int(distribution["Positive"]))
    c2.metric("Neutral", int(distribution["Neutral"]))
    c3.metric("Negative", int(distribution["Negative"]))

    st.pyplot(plot_sentiment_distribution(scores))

    with st.expander("Sentiment per document"):
        table = scores.copy()
        table.insert(1, "text", texts)
        st.dataframe(table, hide_index=True)
