"""
Tests for the exploration helpers: tokenization, word frequencies, corpus
statistics, themes, sentiment and charts.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402
import pytest  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

from text_analysis import (  # noqa: E402
    categorize,
    document_lengths,
    extract_keyword_groups,
    match_themes,
    ngram_frequencies,
    parse_theme_keywords,
    score_texts,
    sentiment_distribution,
    summarize_corpus,
    theme_counts,
    tokenize,
    word_frequencies,
)
from text_analysis.visualization import (  # noqa: E402
    generate_wordcloud,
    plot_document_lengths,
    plot_label_counts,
    plot_sentiment_distribution,
    plot_word_frequencies,
)

STOPWORDS = {"the", "is", "and", "a", "it", "was"}


def test_tokenize_lowercases_and_drops_stopwords():
    tokens = tokenize("The delivery WAS late, and it's a shame!", STOPWORDS)

    assert tokens == ["delivery", "late", "it's", "shame"]


def test_tokenize_keeps_accents_but_not_math_symbols():
    tokens = tokenize("a×b ÷ Café crème", min_length=1)

    assert tokens == ["a", "b", "café", "crème"]


def test_tokenize_non_string():
    assert tokenize(None) == []
    assert tokenize(float("nan")) == []


def test_word_frequencies_sorted_by_count_then_word():
    texts = ["apple banana apple", "banana cherry apple", "date"]

    freq = word_frequencies(texts)

    assert freq.values.tolist() == [
        ["apple", 3],
        ["banana", 2],
        ["cherry", 1],
        ["date", 1],
    ]
    assert word_frequencies(texts, top_n=2)["word"].tolist() == ["apple", "banana"]


def test_word_frequencies_empty():
    freq = word_frequencies(["the is", ""], STOPWORDS)

    assert freq.empty
    assert list(freq.columns) == ["word", "count"]


def test_ngram_frequencies_do_not_span_documents():
    texts = ["red apple red apple", "green pear"]

    bigrams = ngram_frequencies(texts, n=2)

    assert bigrams.values.tolist() == [
        ["red apple", 2],
        ["apple red", 1],
        ["green pear", 1],
    ]
    with pytest.raises(ValueError):
        ngram_frequencies(texts, n=0)


def test_summarize_corpus():
    summary = summarize_corpus(["one two three", "four five"], set())

    assert summary == {
        "documents": 2,
        "total_words": 5,
        "unique_words": 5,
        "avg_words": 2.5,
        "avg_characters": 11.0,
        "min_words": 2,
        "max_words": 3,
    }


def test_summary_and_lengths_share_the_stopword_basis():
    texts = ["the cat was here", "a dog and the cat", "it is"]

    summary = summarize_corpus(texts, STOPWORDS)
    lengths = document_lengths(texts, STOPWORDS)

    assert lengths["words"].tolist() == [2, 2, 0]
    assert summary["total_words"] == lengths["words"].sum()
    assert summary["min_words"] == lengths["words"].min()
    assert summary["max_words"] == lengths["words"].max()


def test_summarize_empty_corpus():
    summary = summarize_corpus([])

    assert summary["documents"] == 0
    assert summary["avg_words"] == 0.0


def test_document_lengths():
    lengths = document_lengths(["a b", ""])

    assert lengths.values.tolist() == [[1, 3, 2], [2, 0, 0]]


def test_parse_theme_keywords():
    text = "price: Cost, expensive\n\nno colon here\nstaff:  helpful ,rude\nempty:"

    assert parse_theme_keywords(text) == {
        "price": ["cost", "expensive"],
        "staff": ["helpful", "rude"],
    }


def test_match_themes_and_counts():
    texts = ["Too expensive for me", "Helpful staff, fair price", "Nothing to add"]
    keywords = {
        "price": ["price", "expensive"],
        "staff": ["staff"],
        "delivery": ["next day"],
    }

    matches = match_themes(texts, keywords)
    counts = theme_counts(texts, keywords)

    assert matches["themes"].tolist() == ["price", "price, staff", ""]
    assert counts.to_dict() == {"price": 2, "staff": 1, "delivery": 0}


def test_match_themes_phrases():
    matches = match_themes(["Arrived next day!"], {"delivery": ["next day"]})

    assert matches["themes"].tolist() == ["delivery"]


def test_extract_keyword_groups_separates_topics():
    texts = [
        "cat dog pet",
        "dog cat animal pet",
        "stock market price",
        "market price trade stock",
    ]

    groups = extract_keyword_groups(texts, n_groups=2, n_terms=3)

    assert len(groups) == 2
    assert {frozenset(g.document_ids) for g in groups} == {
        frozenset({1, 2}),
        frozenset({3, 4}),
    }
    for group in groups:
        assert 0 < len(group.keywords) <= 3
        assert group.name.startswith("Group ")


def test_extract_keyword_groups_clamps_group_count():
    groups = extract_keyword_groups(
        ["alpha beta", "", "the"], n_groups=3, stopwords=STOPWORDS
    )

    assert len(groups) == 1
    assert groups[0].document_ids == [1]


def test_extract_keyword_groups_without_vocabulary():
    with pytest.raises(ValueError):
        extract_keyword_groups(["the", "is a"], stopwords=STOPWORDS)
    with pytest.raises(ValueError):
        extract_keyword_groups(["text"], n_groups=0)


def test_categorize_thresholds():
    assert categorize(0.05) == "Positive"
    assert categorize(-0.05) == "Negative"
    assert categorize(0.0) == "Neutral"


def test_score_texts_and_distribution():
    texts = ["I love this, it is wonderful!", "This is terrible and awful.", "  "]

    scores = score_texts(texts)

    assert list(scores.columns) == [
        "document_id",
        "compound",
        "pos",
        "neu",
        "neg",
        "sentiment",
    ]
    assert scores["sentiment"].tolist() == ["Positive", "Negative", "Neutral"]
    assert scores["compound"].iloc[2] == 0.0
    assert sentiment_distribution(scores).to_dict() == {
        "Positive": 1,
        "Neutral": 1,
        "Negative": 1,
    }


def test_sentiment_distribution_keeps_empty_categories():
    scores = score_texts(["What a great day"])

    assert sentiment_distribution(scores).tolist() == [1, 0, 0]


def test_charts_return_figures():
    freq = word_frequencies(["apple banana apple"])
    scores = score_texts(["good", "bad", "table"])
    counts = pd.Series({"urgent": 2, "later": 0})

    figures = [
        plot_word_frequencies(freq),
        plot_sentiment_distribution(scores),
        plot_label_counts(counts),
        plot_document_lengths(document_lengths(["a b", "c"])),
        generate_wordcloud({"apple": 2, "banana": 1}, max_words=10),
    ]

    assert all(isinstance(fig, Figure) for fig in figures)


def test_charts_are_not_kept_by_pyplot():
    plt.close("all")
    counts = pd.Series({"urgent": 2, "later": 1})
    freq = word_frequencies(["apple banana apple"])

    for _ in range(25):
        plot_label_counts(counts)
        plot_word_frequencies(freq)
    generate_wordcloud({"apple": 2})
    plot_sentiment_distribution(score_texts(["good", "bad"]))
    plot_document_lengths(document_lengths(["a b"]))

    assert plt.get_fignums() == []


def test_wordcloud_requires_words():
    with pytest.raises(ValueError):
        generate_wordcloud({})
