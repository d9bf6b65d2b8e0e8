"""
themes.py

This module provides simple theme / keyword groupings for a document collection.

Two complementary views are offered:
    - Dictionary themes: the user supplies keywords per theme and each document
      is matched against them.
    - Keyword groups: documents are clustered (TF-IDF + KMeans) and each cluster
      is described by its highest-weighted terms.

Dependencies:
    - scikit-learn
    - numpy
    - pandas
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set

import numpy as np
import pandas as pd
from sklearn.cluster import KMeans
from sklearn.feature_extraction.text import TfidfVectorizer

from text_analysis.config import RANDOM_STATE, THEME_GROUPS, THEME_TERMS
from text_analysis.word_frequency import tokenize

logger = logging.getLogger(__name__)


@dataclass
class ThemeGroup:
    name: str
    keywords: List[str]
    document_ids: List[int] = field(default_factory=list)


def parse_theme_keywords(text: str) -> Dict[str, List[str]]:
    """
    Parses a keyword dictionary written one theme per line as
    ``theme: keyword, keyword, ...``. Lines without a colon are ignored.
    """
    themes: Dict[str, List[str]] = {}
    for line in text.splitlines():
        if ":" not in line:
            continue
        name, keywords = line.split(":", 1)
        name = name.strip()
        words = [k.strip().lower() for k in keywords.split(",") if k.strip()]
        if name and words:
            themes[name] = words
    return themes


def _document_themes(text: str, theme_keywords: Dict[str, List[str]]) -> List[str]:
    tokens = set(tokenize(text, min_length=1))
    lowered = text.lower() if isinstance(text, str) else ""
    matched = []
    for theme, keywords in theme_keywords.items():
        for keyword in keywords:
            keyword = keyword.lower()
            hit = keyword in lowered if " " in keyword else keyword in tokens
            if hit:
                matched.append(theme)
                break
    return matched


def match_themes(
    texts: Sequence[str], theme_keywords: Dict[str, List[str]]
) -> pd.DataFrame:
    """
    Matches each document against a keyword dictionary.

    Single-word keywords match whole tokens (case-insensitive); keywords
    containing a space match as phrases.

    Returns:
    -------
    pd.DataFrame
        Columns `document_id` (1-based) and `themes` (matching theme names
        joined by ", ", in dictionary order; empty string when none).
    """
    return pd.DataFrame(
        {
            "document_id": range(1, len(texts) + 1),
            "themes": [", ".join(_document_themes(t, theme_keywords)) for t in texts],
        },
        columns=["document_id", "themes"],
    )


def theme_counts(
    texts: Sequence[str], theme_keywords: Dict[str, List[str]]
) -> pd.Series:
    """Number of documents matching each theme, in dictionary order."""
    counts = {theme: 0 for theme in theme_keywords}
    for text in texts:
        for theme in _document_themes(text, theme_keywords):
            counts[theme] += 1
    return pd.Series(counts, index=list(theme_keywords), dtype="int64", name="documents")


def extract_keyword_groups(
    texts: Sequence[str],
    n_groups: int = THEME_GROUPS,
    n_terms: int = THEME_TERMS,
    stopwords: Optional[Set[str]] = None,
    random_state: int = RANDOM_STATE,
) -> List[ThemeGroup]:
    """
    Groups documents by TF-IDF similarity and describes each group by its top terms.

    Parameters:
    ----------
    texts : Sequence[str]
        Document texts, in document order.
    n_groups : int, optional
        Requested number of groups; clamped to the number of documents that
        contain at least one usable token.
    n_terms : int, optional
        Number of keywords reported per group.
    stopwords : Set[str], optional
        Words excluded from the vocabulary.
    random_state : int, optional
        Seed for KMeans, so the grouping is reproducible.

    Returns:
    -------
    List[ThemeGroup]
        Groups in cluster order; document ids are 1-based.

    Raises:
    ------
    ValueError
        If `n_groups` is less than 1 or no document has a usable vocabulary.
    """
    if n_groups < 1:
        raise ValueError("n_groups must be at least 1.")

    ids = [i for i, t in enumerate(texts, start=1) if tokenize(t, stopwords)]
    if not ids:
        raise ValueError("No usable words found to build keyword groups.")

    vectorizer = TfidfVectorizer(
        tokenizer=lambda t: tokenize(t, stopwords),
        lowercase=False,
        token_pattern=None,
    )
    matrix = vectorizer.fit_transform([texts[i - 1] for i in ids])
    terms = np.array(vectorizer.get_feature_names_out())

    n_clusters = min(n_groups, len(ids))
    kmeans = KMeans(n_clusters=n_clusters, random_state=random_state, n_init=10)
    assignments = kmeans.fit_predict(matrix)
    logger.info("Built %d keyword groups from %d documents", n_clusters, len(ids))

    groups = []
    for cluster, center in enumerate(kmeans.cluster_centers_):
        order = np.argsort(-center, kind="stable")
        keywords = [str(terms[j]) for j in order[:n_terms] if center[j] > 0]
        groups.append(
            ThemeGroup(
                name=f"Group {cluster + 1}: {', '.join(keywords[:3])}",
                keywords=keywords,
                document_ids=[
                    doc_id
                    for doc_id, label in zip(ids, assignments)
                    if label == cluster
                ],
            )
        )
    return groups
