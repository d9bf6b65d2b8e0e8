"""
sentiment.py

Lexicon-based sentiment scoring with VADER.

Dependencies:
    - vaderSentiment
    - pandas

Functions:
    - categorize(compound, positive, negative): Maps a compound score to a category.

    - score_texts(texts): VADER scores and category for each document.

    - sentiment_distribution(scores): Document counts per category.
"""

from typing import Optional, Sequence

import pandas as pd
from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from text_analysis.config import (
    SENTIMENT_NEGATIVE_THRESHOLD,
    SENTIMENT_POSITIVE_THRESHOLD,
)

SENTIMENT_CATEGORIES = ["Positive", "Neutral", "Negative"]
SCORE_COLUMNS = ["document_id", "compound", "pos", "neu", "neg", "sentiment"]


def categorize(
    compound: float,
    positive: float = SENTIMENT_POSITIVE_THRESHOLD,
    negative: float = SENTIMENT_NEGATIVE_THRESHOLD,
) -> str:
    """Positive at or above `positive`, Negative at or below `negative`, else Neutral."""
    if compound >= positive:
        return "Positive"
    if compound <= negative:
        return "Negative"
    return "Neutral"


def score_texts(
    texts: Sequence[str], analyzer: Optional[SentimentIntensityAnalyzer] = None
) -> pd.DataFrame:
    """
    Scores each document with VADER.

    Empty or non-string documents score 0.0 compound and are Neutral.

    Parameters:
    ----------
    texts : Sequence[str]
        Document texts, in document order.
    analyzer : SentimentIntensityAnalyzer, optional
        A pre-built analyzer (building one loads the lexicon).

    Returns:
    -------
    pd.DataFrame
        Columns `document_id`, `compound`, `pos`, `neu`, `neg`, `sentiment`.
    """
    analyzer = analyzer or SentimentIntensityAnalyzer()

    rows = []
    for doc_id, text in enumerate(texts, start=1):
        if not isinstance(text, str) or not text.strip():
            scores = {"compound": 0.0, "pos": 0.0, "neu": 0.0, "neg": 0.0}
        else:
            scores = analyzer.polarity_scores(text)
        rows.append(
            {
                "document_id": doc_id,
                "compound": scores["compound"],
                "pos": scores["pos"],
                "neu": scores["neu"],
                "neg": scores["neg"],
                "sentiment": categorize(scores["compound"]),
            }
        )
    return pd.DataFrame(rows, columns=SCORE_COLUMNS)


def sentiment_distribution(scores: pd.DataFrame) -> pd.Series:
    """Counts documents per category in the fixed order Positive, Neutral, Negative."""
    return (
        scores["sentiment"]
        .value_counts()
        .reindex(SENTIMENT_CATEGORIES, fill_value=0)
        .astype("int64")
        .rename("documents")
    )
