"""
word_frequency.py

This module provides tokenization and word/n-gram frequency counts.

Dependencies:
    - nltk (stopword corpus, RegexpTokenizer, ngrams)
    - pandas

Functions:
    - get_stopwords(languages, extra=None): NLTK stopwords plus user-supplied words.

    - tokenize(text, stopwords=None, min_length=2): Lower-case alphabetic tokens.

    - word_frequencies(texts, stopwords=None, top_n=None): Word counts as a DataFrame.

    - ngram_frequencies(texts, n=2, stopwords=None, top_n=None): N-gram counts as a DataFrame.
"""

import logging
from collections import Counter
from typing import Iterable, List, Optional, Set

import nltk
import pandas as pd
from nltk.corpus import stopwords as nltk_stopwords
from nltk.tokenize import RegexpTokenizer
from nltk.util import ngrams

from text_analysis.config import MIN_TOKEN_LENGTH

logger = logging.getLogger(__name__)

_tokenizer = RegexpTokenizer(r"[a-zA-ZÀ-ÖØ-öø-ſ]+(?:'[a-zA-Z]+)?")


def get_stopwords(
    languages: Iterable[str], extra: Optional[Iterable[str]] = None
) -> Set[str]:
    """
    Returns the NLTK stopwords for the given languages plus any extra words.

    The NLTK stopword corpus is downloaded on first use if it is missing.
    """
    try:
        nltk.data.find("corpora/stopwords")
    except LookupError:
        logger.info("Downloading NLTK stopwords corpus")
        nltk.download("stopwords", quiet=True)

    words: Set[str] = set()
    for language in languages:
        words.update(nltk_stopwords.words(language))
    if extra:
        words.update(str(w).lower().strip() for w in extra if str(w).strip())
    return words


def tokenize(
    text: str,
    stopwords: Optional[Set[str]] = None,
    min_length: int = MIN_TOKEN_LENGTH,
) -> List[str]:
    """
    Splits text into lower-case word tokens, dropping stopwords and short tokens.

    Parameters:
    ----------
    text : str
        The text to tokenize. Non-string values yield no tokens.
    stopwords : Set[str], optional
        Lower-case words to drop.
    min_length : int, optional
        Minimum token length to keep.

    Returns:
    -------
    List[str]
        Tokens in their order of appearance.
    """
    if not isinstance(text, str):
        return []
    stopwords = stopwords or set()
    return [
        token
        for token in (t.lower() for t in _tokenizer.tokenize(text))
        if len(token) >= min_length and token not in stopwords
    ]


def _counts_frame(counter: Counter, column: str, top_n: Optional[int]) -> pd.DataFrame:
    # count desc, then alphabetical, so ties are stable across runs
    items = sorted(counter.items(), key=lambda item: (-item[1], item[0]))
    if top_n is not None:
        items = items[:top_n]
    return pd.DataFrame(items, columns=[column, "count"])


def word_frequencies(
    texts: Iterable[str],
    stopwords: Optional[Set[str]] = None,
    top_n: Optional[int] = None,
) -> pd.DataFrame:
    """
    Counts word occurrences across all texts.

    Returns:
    -------
    pd.DataFrame
        Columns `word` and `count`, sorted by count (descending) then word.
    """
    counter: Counter = Counter()
    for text in texts:
        counter.update(tokenize(text, stopwords))
    return _counts_frame(counter, "word", top_n)


def ngram_frequencies(
    texts: Iterable[str],
    n: int = 2,
    stopwords: Optional[Set[str]] = None,
    top_n: Optional[int] = None,
) -> pd.DataFrame:
    """
    Counts n-grams (space-joined) within each text; n-grams never span documents.

    Returns:
    -------
    pd.DataFrame
        Columns `ngram` and `count`, sorted by count (descending) then n-gram.
    """
    if n < 1:
        raise ValueError("n must be at least 1.")

    counter: Counter = Counter()
    for text in texts:
        counter.update(" ".join(gram) for gram in ngrams(tokenize(text, stopwords), n))
    return _counts_frame(counter, "ngram", top_n)
