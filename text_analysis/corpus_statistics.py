"""
corpus_statistics.py

Summary statistics for a loaded document collection.

Functions:
    - document_lengths(texts, stopwords=None): Character and word counts per document.

    - summarize_corpus(texts, stopwords=None): Corpus-level counts and averages.
"""

from typing import Any, Dict, Optional, Sequence, Set

import pandas as pd

from text_analysis.word_frequency import tokenize


def document_lengths(
    texts: Sequence[str], stopwords: Optional[Set[str]] = None
) -> pd.DataFrame:
    """
    Computes the length of each document.

    Parameters:
    ----------
    texts : Sequence[str]
        Document texts, in document order.
    stopwords : Set[str], optional
        Words excluded from the word count.

    Returns:
    -------
    pd.DataFrame
        Columns `document_id` (1-based), `characters` and `words`.
    """
    return pd.DataFrame(
        {
            "document_id": range(1, len(texts) + 1),
            "characters": [len(t) if isinstance(t, str) else 0 for t in texts],
            "words": [len(tokenize(t, stopwords, min_length=1)) for t in texts],
        },
        columns=["document_id", "characters", "words"],
    )


def summarize_corpus(
    texts: Sequence[str], stopwords: Optional[Set[str]] = None
) -> Dict[str, Any]:
    """
    Computes corpus-level summary statistics.

    An empty corpus yields zeros everywhere rather than NaN.
    """
    lengths = document_lengths(texts, stopwords)
    vocabulary = set()
    for text in texts:
        vocabulary.update(tokenize(text, stopwords, min_length=1))

    if lengths.empty:
        return {
            "documents": 0,
            "total_words": 0,
            "unique_words": 0,
            "avg_words": 0.0,
            "avg_characters": 0.0,
            "min_words": 0,
            "max_words": 0,
        }

    return {
        "documents": len(lengths),
        "total_words": int(lengths["words"].sum()),
        "unique_words": len(vocabulary),
        "avg_words": round(float(lengths["words"].mean()), 2),
        "avg_characters": round(float(lengths["characters"].mean()), 2),
        "min_words": int(lengths["words"].min()),
        "max_words": int(lengths["words"].max()),
    }
