"""
visualization.py

This module provides the charts shown by the dashboard.

Every function returns a standalone matplotlib Figure (not registered with
pyplot, so nothing has to be closed); the caller decides where it is rendered
(e.g. `st.pyplot(fig)`).

Functions:
    - plot_word_frequencies(freq_df, title="Most frequent words")
    - generate_wordcloud(frequencies, max_words=200)
    - plot_sentiment_distribution(scores)
    - plot_label_counts(counts)
    - plot_theme_counts(counts)
    - plot_document_lengths(lengths)
"""

from typing import Dict

import pandas as pd
import seaborn as sns
from matplotlib.figure import Figure
from wordcloud import WordCloud

from text_analysis.config import WORDCLOUD_MAX_WORDS
from text_analysis.sentiment import SENTIMENT_CATEGORIES


def _horizontal_bars(
    labels: pd.Series, values: pd.Series, title: str, xlabel: str
) -> Figure:
    sns.set_theme(style="whitegrid")
    fig = Figure(figsize=(8, max(3, 0.35 * len(labels) + 1)))
    ax = fig.subplots()
    sns.barplot(x=values, y=labels, ax=ax, color="steelblue", orient="h")
    ax.set_title(title)
    ax.set_xlabel(xlabel)
    ax.set_ylabel("")
    fig.tight_layout()
    return fig


def plot_word_frequencies(
    freq_df: pd.DataFrame, title: str = "Most frequent words"
) -> Figure:
    """
    Plots a horizontal bar chart of word counts.

    Parameters:
    ----------
    freq_df : pd.DataFrame
        A frame whose first column holds the terms and which has a `count`
        column (as returned by `word_frequencies` or `ngram_frequencies`).
    title : str, optional
        The chart title.
    """
    term_column = freq_df.columns[0]
    return _horizontal_bars(
        freq_df[term_column].astype(str), freq_df["count"], title, "Occurrences"
    )


def generate_wordcloud(
    frequencies: Dict[str, int], max_words: int = WORDCLOUD_MAX_WORDS
) -> Figure:
    """
    Renders a word cloud from a word -> count mapping.

    Raises:
    ------
    ValueError
        If `frequencies` is empty.
    """
    if not frequencies:
        raise ValueError("No words available to build a word cloud.")

    wc = WordCloud(
        width=800,
        height=400,
        background_color="white",
        collocations=False,
        max_words=max_words,
        random_state=42,
    ).generate_from_frequencies(frequencies)

    fig = Figure(figsize=(10, 5))
    ax = fig.subplots()
    ax.imshow(wc, interpolation="bilinear")
    ax.axis("off")
    fig.tight_layout()
    return fig


def plot_sentiment_distribution(scores: pd.DataFrame) -> Figure:
    """Category counts next to a histogram of VADER compound scores."""
    sns.set_theme(style="whitegrid")
    fig = Figure(figsize=(12, 4))
    ax_counts, ax_hist = fig.subplots(1, 2)

    counts = (
        scores["sentiment"].value_counts().reindex(SENTIMENT_CATEGORIES, fill_value=0)
    )
    sns.barplot(
        x=counts.index,
        y=counts.values,
        hue=counts.index,
        palette={"Positive": "seagreen", "Neutral": "grey", "Negative": "indianred"},
        legend=False,
        ax=ax_counts,
    )
    ax_counts.set_title("Documents per sentiment")
    ax_counts.set_ylabel("Documents")

    sns.histplot(scores["compound"], bins=20, binrange=(-1, 1), ax=ax_hist)
    ax_hist.set_title("Compound score distribution")
    ax_hist.set_xlabel("Compound score (negative → positive)")

    fig.tight_layout()
    return fig


def plot_label_counts(counts: pd.Series) -> Figure:
    """Bar chart of documents per code."""
    return _horizontal_bars(
        pd.Series(counts.index, dtype=str),
        counts.reset_index(drop=True),
        "Documents per code",
        "Documents",
    )


def plot_theme_counts(counts: pd.Series) -> Figure:
    """Bar chart of documents per dictionary theme."""
    return _horizontal_bars(
        pd.Series(counts.index, dtype=str),
        counts.reset_index(drop=True),
        "Documents per theme",
        "Documents",
    )


def plot_document_lengths(lengths: pd.DataFrame) -> Figure:
    """Histogram of words per document."""
    sns.set_theme(style="whitegrid")
    fig = Figure(figsize=(8, 4))
    ax = fig.subplots()
    sns.histplot(lengths["words"], bins=20, ax=ax)
    ax.set_title("Words per document")
    ax.set_xlabel("Words (stopwords removed)")
    fig.tight_layout()
    return fig
